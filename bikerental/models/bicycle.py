from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Bicycle:
    """
    A bicycle in the fleet.

    ``is_available`` and ``renter_id`` move together: a rented bicycle names
    the user holding it, an available one has an empty ``renter_id``.
    """
    bicycle_id: str
    type: str
    is_available: bool
    renter_id: str
    created_at: int
    updated_at: Optional[int] = None

    def rented_by(self, user_id: str, now: int) -> "Bicycle":
        return replace(self, is_available=False, renter_id=user_id, updated_at=now)

    def released(self, now: int) -> "Bicycle":
        return replace(self, is_available=True, renter_id="", updated_at=now)

    def to_dict(self) -> dict:
        return {
            "bicycleId": self.bicycle_id,
            "type": self.type,
            "isAvailable": self.is_available,
            "renterId": self.renter_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Bicycle":
        return cls(
            bicycle_id=d["bicycleId"],
            type=d["type"],
            is_available=bool(d["isAvailable"]),
            renter_id=d.get("renterId") or "",
            created_at=d["createdAt"],
            updated_at=d.get("updatedAt"),
        )
