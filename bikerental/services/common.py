"""Shared service helpers and factories."""

from typing import Any, Iterable, NamedTuple, Optional

from bikerental.exceptions import ValidationError
from bikerental.models.store import Store
from bikerental.utils.providers import IdProvider, UuidIdProvider, now_ns

# Key under which create_app keeps the wired services in ``app.extensions``
EXTENSION_KEY = "bikerental"


def is_blank(value: Any) -> bool:
    """True for anything that is not a string with visible characters."""
    return not isinstance(value, str) or not value.strip()


def missing_fields(payload: Optional[dict], fields: Iterable[str]) -> list[str]:
    """Names of ``fields`` that are absent or blank in ``payload``."""
    payload = payload or {}
    return [f for f in fields if is_blank(payload.get(f))]


def require_fields(payload: Optional[dict], fields: Iterable[str]) -> None:
    """Raise ``ValidationError`` naming every missing/blank field."""
    if not isinstance(payload, dict):
        raise ValidationError("Payload must be an object.")
    missing = missing_fields(payload, fields)
    if missing:
        raise ValidationError(f"Missing required fields in the payload: {', '.join(missing)}.")


class Services(NamedTuple):
    users: "IdentityStore"
    fleet: "FleetStore"
    ledger: "RentalLedger"
    rentals: "RentalCoordinator"


def build_services(store: Store, ids: Optional[IdProvider] = None, clock=None) -> Services:
    """Wire the three stores and the coordinator over one ``Store``."""
    from .bicycle_service import FleetStore
    from .ledger_service import RentalLedger
    from .rental_service import RentalCoordinator
    from .user_service import IdentityStore

    ids = ids or UuidIdProvider()
    clock = clock or now_ns
    users = IdentityStore(store, ids, clock)
    fleet = FleetStore(store, ids, clock)
    ledger = RentalLedger(store)
    rentals = RentalCoordinator(store, users, fleet, ledger, ids, clock)
    return Services(users=users, fleet=fleet, ledger=ledger, rentals=rentals)
