"""
Rent / return coordination: availability flag, renter ID and the ledger must
stay consistent through every success and failure path.
"""

import pytest

from bikerental.exceptions import ErrorKind

RENT_TIME = "2024-01-01T10:00"


def rent(svc, user_id, bicycle_id, rent_time=RENT_TIME):
    return svc.rentals.rent_bicycle(user_id, {"rentTime": rent_time, "bicycleId": bicycle_id})


def test_rent_marks_bicycle_and_records_rental(svc, alice, road_bike):
    result = rent(svc, alice.user_id, road_bike.bicycle_id)
    assert result.ok, result.message
    renter = result.value
    assert renter.renter_user_id == alice.user_id
    assert renter.bicycle_id == road_bike.bicycle_id
    assert renter.rent_time == RENT_TIME
    assert svc.ledger.get(renter.renter_id) == renter

    bike = svc.fleet.get(road_bike.bicycle_id)
    assert bike.is_available is False
    assert bike.renter_id == alice.user_id
    assert bike.updated_at is not None


def test_rent_unavailable_bicycle_changes_nothing(svc, alice, bob, road_bike):
    assert rent(svc, alice.user_id, road_bike.bicycle_id).ok
    before = svc.fleet.get(road_bike.bicycle_id)
    ledger_size = svc.ledger.count()

    result = rent(svc, bob.user_id, road_bike.bicycle_id)
    assert result.kind is ErrorKind.STATE_CONFLICT
    assert result.message == "Bicycle is currently unavailable."
    assert svc.ledger.count() == ledger_size
    assert svc.fleet.get(road_bike.bicycle_id) == before


def test_rent_bicycle_added_as_unavailable(svc, alice, bob):
    bike = svc.fleet.add_bicycle(
        {"type": "city", "isAvailable": False, "renterId": alice.user_id}
    ).unwrap()
    assert rent(svc, bob.user_id, bike.bicycle_id).kind is ErrorKind.STATE_CONFLICT


def test_rent_unknown_user(svc, road_bike):
    result = rent(svc, "ghost", road_bike.bicycle_id)
    assert result.kind is ErrorKind.NOT_FOUND
    assert "User does not exist" in result.message
    assert svc.ledger.count() == 0


def test_rent_unknown_bicycle(svc, alice):
    result = rent(svc, alice.user_id, "no-such-bike")
    assert result.kind is ErrorKind.NOT_FOUND
    assert result.message == "Bicycle does not exist."


@pytest.mark.parametrize("user_id, payload", [
    ("", {"rentTime": RENT_TIME, "bicycleId": "b"}),
    (None, {"rentTime": RENT_TIME, "bicycleId": "b"}),
    ("u", {"rentTime": "", "bicycleId": "b"}),
    ("u", {"bicycleId": "b"}),
    ("u", {"rentTime": RENT_TIME, "bicycleId": ""}),
    ("u", {"rentTime": RENT_TIME}),
    ("u", None),
])
def test_rent_validation(svc, user_id, payload):
    result = svc.rentals.rent_bicycle(user_id, payload)
    assert result.kind is ErrorKind.VALIDATION
    assert svc.ledger.count() == 0


def test_rent_validation_happens_before_lookup(svc, road_bike):
    """A present bicycleId is fine; only missing input is a validation error."""
    result = rent(svc, "ghost", road_bike.bicycle_id)
    assert result.kind is ErrorKind.NOT_FOUND


def test_rent_then_return_restores_availability(svc, alice, road_bike):
    renter = rent(svc, alice.user_id, road_bike.bicycle_id).unwrap()

    result = svc.rentals.return_bicycle(alice.user_id, road_bike.bicycle_id)
    assert result.ok and result.value is True

    bike = svc.fleet.get(road_bike.bicycle_id)
    assert bike.is_available is True
    assert bike.renter_id == ""
    # the rental record itself is left untouched
    assert svc.ledger.get(renter.renter_id) == renter


def test_return_by_other_user_is_refused(svc, alice, bob, road_bike):
    assert rent(svc, alice.user_id, road_bike.bicycle_id).ok
    before = svc.fleet.get(road_bike.bicycle_id)

    result = svc.rentals.return_bicycle(bob.user_id, road_bike.bicycle_id)
    assert result.kind is ErrorKind.AUTHORIZATION
    assert result.message == "User does not have the right to return this bicycle."
    assert svc.fleet.get(road_bike.bicycle_id) == before


def test_second_return_fails(svc, alice, road_bike):
    assert rent(svc, alice.user_id, road_bike.bicycle_id).ok
    assert svc.rentals.return_bicycle(alice.user_id, road_bike.bicycle_id).ok

    again = svc.rentals.return_bicycle(alice.user_id, road_bike.bicycle_id)
    assert again.kind is ErrorKind.AUTHORIZATION
    assert svc.fleet.get(road_bike.bicycle_id).is_available is True


def test_return_unknown_bicycle(svc, alice):
    assert svc.rentals.return_bicycle(alice.user_id, "nope").kind is ErrorKind.NOT_FOUND


@pytest.mark.parametrize("user_id, bicycle_id", [("", "b"), ("u", ""), (None, "b"), ("u", None)])
def test_return_validation(svc, user_id, bicycle_id):
    assert svc.rentals.return_bicycle(user_id, bicycle_id).kind is ErrorKind.VALIDATION


def test_bicycle_can_be_rented_again_after_return(svc, alice, bob, road_bike):
    rent(svc, alice.user_id, road_bike.bicycle_id).unwrap()
    svc.rentals.return_bicycle(alice.user_id, road_bike.bicycle_id).unwrap()

    second = rent(svc, bob.user_id, road_bike.bicycle_id, "2024-01-02T09:00").unwrap()
    assert svc.fleet.get(road_bike.bicycle_id).renter_id == bob.user_id
    assert [r.renter_id for r in svc.ledger.for_bicycle(road_bike.bicycle_id)][-1] == second.renter_id
    assert svc.ledger.count() == 2


def test_failed_bicycle_write_undoes_ledger_append(svc, alice, road_bike, monkeypatch):
    def broken_set(bicycle_id, bicycle):
        raise RuntimeError("write failed")

    monkeypatch.setattr(svc.fleet, "set", broken_set)
    result = rent(svc, alice.user_id, road_bike.bicycle_id)

    assert result.kind is ErrorKind.FAILURE
    assert "Failed to rent bicycle" in result.message
    assert "write failed" in result.message
    assert svc.ledger.count() == 0
    assert svc.fleet.get(road_bike.bicycle_id).is_available is True


def test_rentals_for_user(svc, alice, bob, road_bike):
    other = svc.fleet.add_bicycle({"type": "city", "isAvailable": True, "renterId": ""}).unwrap()
    mine = rent(svc, alice.user_id, road_bike.bicycle_id).unwrap()
    rent(svc, bob.user_id, other.bicycle_id).unwrap()

    assert svc.rentals.rentals_for_user(alice.user_id).value == [mine]
    assert svc.rentals.rentals_for_user("ghost").kind is ErrorKind.NOT_FOUND


def test_get_rental(svc, alice, road_bike):
    renter = rent(svc, alice.user_id, road_bike.bicycle_id).unwrap()
    assert svc.ledger.get_rental(renter.renter_id).value == renter

    missing = svc.ledger.get_rental("nope")
    assert missing.kind is ErrorKind.NOT_FOUND
    assert missing.message == "Rental does not exist."
