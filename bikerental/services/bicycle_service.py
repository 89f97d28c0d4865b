from __future__ import annotations

import logging
from typing import Optional

from bikerental.exceptions import BicycleNotFoundError, ValidationError
from bikerental.models.bicycle import Bicycle
from bikerental.models.store import Store
from bikerental.services.common import require_fields
from bikerental.utils.constants import BICYCLE_TEXT_FIELDS, Field
from bikerental.utils.decorators import returns_result
from bikerental.utils.providers import IdProvider

log = logging.getLogger(__name__)


def _check_bicycle_payload(payload: dict) -> None:
    """
    ``type`` must be a non-empty string, ``isAvailable`` a boolean and
    ``renterId`` a string. An unavailable bicycle needs a renter.
    """
    require_fields(payload, BICYCLE_TEXT_FIELDS)
    is_available = payload.get(Field.IS_AVAILABLE)
    renter_id = payload.get(Field.RENTER_ID)
    if not isinstance(is_available, bool):
        raise ValidationError("Missing required fields in the payload: isAvailable must be a boolean.")
    if not isinstance(renter_id, str):
        raise ValidationError("Missing required fields in the payload: renterId must be a string.")
    if not is_available and not renter_id.strip():
        raise ValidationError("An unavailable bicycle must name its renterId.")


class FleetStore:
    """Bicycle catalogue: add, look up, replace, list."""

    def __init__(self, store: Store, ids: IdProvider, clock):
        self.store = store
        self.ids = ids
        self.clock = clock

    @returns_result("add bicycle")
    def add_bicycle(self, payload: dict) -> Bicycle:
        _check_bicycle_payload(payload)
        with self.store.transaction():
            bicycle = Bicycle(
                bicycle_id=self.ids.next(),
                type=payload["type"],
                is_available=payload["isAvailable"],
                renter_id=payload["renterId"],
                created_at=self.clock(),
            )
            self.store.bicycles.insert_new(bicycle.bicycle_id, bicycle.to_dict())
        log.info("Added bicycle %s (%s, available=%s)", bicycle.bicycle_id, bicycle.type, bicycle.is_available)
        return bicycle

    def get(self, bicycle_id: str) -> Optional[Bicycle]:
        d = self.store.bicycles.get(bicycle_id)
        return Bicycle.from_dict(d) if d is not None else None

    def set(self, bicycle_id: str, bicycle: Bicycle) -> None:
        """Overwrite the stored record for ``bicycle_id``."""
        self.store.bicycles.insert(bicycle_id, bicycle.to_dict())

    @returns_result("get bicycle")
    def get_bicycle(self, bicycle_id: str) -> Bicycle:
        bicycle = self.get(bicycle_id)
        if bicycle is None:
            raise BicycleNotFoundError()
        return bicycle

    @returns_result("list bicycles")
    def list_bicycles(self, available: Optional[bool] = None) -> list[Bicycle]:
        res = [Bicycle.from_dict(d) for d in self.store.bicycles.values()]
        if available is not None:
            res = [b for b in res if b.is_available == available]
        return res

    @returns_result("summarise fleet")
    def summary(self) -> dict:
        bikes = self.store.bicycles.values()
        available = sum(1 for b in bikes if b.get("isAvailable"))
        return {
            "total": len(bikes),
            "available": available,
            "rented": len(bikes) - available,
        }
