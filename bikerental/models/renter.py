from dataclasses import dataclass


@dataclass(frozen=True)
class Renter:
    """One rental: who took which bicycle and when. Never changed once written."""
    renter_id: str
    renter_user_id: str
    rent_time: str  # as supplied by the caller
    bicycle_id: str

    def to_dict(self) -> dict:
        return {
            "renterId": self.renter_id,
            "renterUserId": self.renter_user_id,
            "rentTime": self.rent_time,
            "bicycleId": self.bicycle_id,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Renter":
        return cls(
            renter_id=d["renterId"],
            renter_user_id=d["renterUserId"],
            rent_time=d["rentTime"],
            bicycle_id=d["bicycleId"],
        )
