"""Rent and return: the only operations that touch more than one table."""

from __future__ import annotations

import logging

from bikerental.exceptions import (
    BicycleNotFoundError,
    BicycleUnavailableError,
    NotCurrentRenterError,
    UserNotFoundError,
    ValidationError,
)
from bikerental.models.renter import Renter
from bikerental.models.store import Store
from bikerental.services.bicycle_service import FleetStore
from bikerental.services.common import is_blank, require_fields
from bikerental.services.ledger_service import RentalLedger
from bikerental.services.user_service import IdentityStore
from bikerental.utils.constants import RENT_FIELDS
from bikerental.utils.decorators import returns_result
from bikerental.utils.providers import IdProvider

log = logging.getLogger(__name__)


class RentalCoordinator:
    """
    Keeps bicycles, rental records and users consistent.

    A bicycle is either available (no renter) or rented by exactly one user.
    Every check and write of one call runs inside a single store
    transaction, so concurrent requests cannot rent the same bicycle twice
    and a failed write leaves no half-made rental behind.
    """

    def __init__(self, store: Store, users: IdentityStore, fleet: FleetStore,
                 ledger: RentalLedger, ids: IdProvider, clock):
        self.store = store
        self.users = users
        self.fleet = fleet
        self.ledger = ledger
        self.ids = ids
        self.clock = clock

    @returns_result("rent bicycle")
    def rent_bicycle(self, user_id: str, payload: dict) -> Renter:
        """
        Rent ``payload["bicycleId"]`` to ``user_id`` at ``payload["rentTime"]``.

        Fails with a validation error on missing input, not-found for an
        unknown user or bicycle, and a state conflict if the bicycle is out.
        """
        if is_blank(user_id):
            raise ValidationError("Missing or Invalid userId.")
        require_fields(payload, RENT_FIELDS)
        bicycle_id = payload["bicycleId"]

        with self.store.transaction():
            if self.users.get(user_id) is None:
                raise UserNotFoundError()
            bicycle = self.fleet.get(bicycle_id)
            if bicycle is None:
                raise BicycleNotFoundError()
            if not bicycle.is_available:
                raise BicycleUnavailableError()

            renter = self.ledger.append(Renter(
                renter_id=self.ids.next(),
                renter_user_id=user_id,
                rent_time=payload["rentTime"],
                bicycle_id=bicycle_id,
            ))
            self.fleet.set(bicycle_id, bicycle.rented_by(user_id, self.clock()))

        log.info("Bicycle %s rented by %s", bicycle_id, user_id)
        return renter

    @returns_result("return bicycle")
    def return_bicycle(self, user_id: str, bicycle_id: str) -> bool:
        """Hand ``bicycle_id`` back; only its current renter may do so."""
        if is_blank(user_id):
            raise ValidationError("Missing or Invalid userId.")
        if is_blank(bicycle_id):
            raise ValidationError("Missing or Invalid bicycleId.")

        with self.store.transaction():
            bicycle = self.fleet.get(bicycle_id)
            if bicycle is None:
                raise BicycleNotFoundError()
            if bicycle.renter_id != user_id:
                raise NotCurrentRenterError()
            # the ledger entry for this rental stays as written
            self.fleet.set(bicycle_id, bicycle.released(self.clock()))

        log.info("Bicycle %s returned by %s", bicycle_id, user_id)
        return True

    @returns_result("list rentals")
    def rentals_for_user(self, user_id: str) -> list[Renter]:
        if self.users.get(user_id) is None:
            raise UserNotFoundError()
        return self.ledger.for_user(user_id)
