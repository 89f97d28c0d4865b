from .bicycle_service import FleetStore
from .common import Services, build_services
from .ledger_service import RentalLedger
from .rental_service import RentalCoordinator
from .user_service import IdentityStore

__all__ = [
    "IdentityStore",
    "FleetStore",
    "RentalLedger",
    "RentalCoordinator",
    "Services",
    "build_services",
]
