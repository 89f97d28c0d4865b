from flask import Blueprint

from .common import json_payload, respond, services

bp = Blueprint("rentals", __name__, url_prefix="/")


@bp.post("/rent")
def rent_bicycle():
    """Rent a bicycle: {userId, rentTime, bicycleId} -> the new rental record."""
    payload = json_payload()
    result = services().rentals.rent_bicycle(
        payload.get("userId"),
        {"rentTime": payload.get("rentTime"), "bicycleId": payload.get("bicycleId")},
    )
    return respond(result, status=201)


@bp.post("/return")
def return_bicycle():
    """Return a bicycle: {userId, bicycleId}. Only the current renter may return it."""
    payload = json_payload()
    result = services().rentals.return_bicycle(payload.get("userId"), payload.get("bicycleId"))
    return respond(result, render=lambda ok: {"returned": ok})


@bp.get("/rentals/<renter_id>")
def get_rental(renter_id):
    return respond(services().ledger.get_rental(renter_id))
