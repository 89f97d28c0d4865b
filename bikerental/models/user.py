from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Registered user. The Store keeps raw camelCase dicts; services wrap them
    into this object.
    """
    user_id: str
    user_name: str
    user_address: str
    user_age: str
    created_at: int  # nanoseconds since the epoch
    updated_at: Optional[int] = None  # unset until first mutation

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "userName": self.user_name,
            "userAddress": self.user_address,
            "userAge": self.user_age,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "User":
        return cls(
            user_id=d["userId"],
            user_name=d["userName"],
            user_address=d["userAddress"],
            user_age=d["userAge"],
            created_at=d["createdAt"],
            updated_at=d.get("updatedAt"),
        )
