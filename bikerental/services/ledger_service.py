from __future__ import annotations

import logging
from typing import Optional

from bikerental.exceptions import RentalNotFoundError
from bikerental.models.renter import Renter
from bikerental.models.store import Store
from bikerental.utils.decorators import returns_result

log = logging.getLogger(__name__)


class RentalLedger:
    """
    Append-only history of rentals. Records are never updated or removed;
    lookups other than by ``renter_id`` scan the whole table.
    """

    def __init__(self, store: Store):
        self.store = store

    def append(self, renter: Renter) -> Renter:
        self.store.renters.insert_new(renter.renter_id, renter.to_dict())
        log.info("Recorded rental %s of bicycle %s by %s",
                 renter.renter_id, renter.bicycle_id, renter.renter_user_id)
        return renter

    def get(self, renter_id: str) -> Optional[Renter]:
        d = self.store.renters.get(renter_id)
        return Renter.from_dict(d) if d is not None else None

    @returns_result("get rental")
    def get_rental(self, renter_id: str) -> Renter:
        renter = self.get(renter_id)
        if renter is None:
            raise RentalNotFoundError()
        return renter

    def for_user(self, user_id: str) -> list[Renter]:
        return [Renter.from_dict(d) for d in self.store.renters.values()
                if d.get("renterUserId") == user_id]

    def for_bicycle(self, bicycle_id: str) -> list[Renter]:
        return [Renter.from_dict(d) for d in self.store.renters.values()
                if d.get("bicycleId") == bicycle_id]

    def count(self) -> int:
        return len(self.store.renters)
