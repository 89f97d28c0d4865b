from flask import Blueprint

from .common import json_payload, many, respond, services

bp = Blueprint("users", __name__, url_prefix="/users")


@bp.post("")
def create_user():
    """Register a user from {userName, userAddress, userAge}."""
    result = services().users.create_user(json_payload())
    return respond(result, status=201)


@bp.get("/<user_id>")
def get_user(user_id):
    return respond(services().users.get_user(user_id))


@bp.get("/<user_id>/rentals")
def user_rentals(user_id):
    """Every rental the user has made, in ledger order."""
    return respond(services().rentals.rentals_for_user(user_id), render=many)
