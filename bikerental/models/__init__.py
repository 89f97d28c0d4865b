from .bicycle import Bicycle
from .renter import Renter
from .result import Result
from .store import OrderedMap, Store
from .user import User

__all__ = ["Bicycle", "OrderedMap", "Renter", "Result", "Store", "User"]
