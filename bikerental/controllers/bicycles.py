from flask import Blueprint, abort, request

from bikerental.utils.constants import FALSE_VALUES, TRUE_VALUES

from .common import json_payload, many, respond, services

bp = Blueprint("bicycles", __name__, url_prefix="/bicycles")


def _available_arg():
    raw = (request.args.get("available") or "").strip().lower()
    if not raw:
        return None
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    abort(400, description="available must be true or false.")


@bp.post("")
def add_bicycle():
    """Add a bicycle from {type, isAvailable, renterId}."""
    result = services().fleet.add_bicycle(json_payload())
    return respond(result, status=201)


@bp.get("")
def list_bicycles():
    """List bicycles, optionally only available (?available=true) or rented ones."""
    return respond(services().fleet.list_bicycles(available=_available_arg()), render=many)


@bp.get("/summary")
def fleet_summary():
    return respond(services().fleet.summary())


@bp.get("/<bicycle_id>")
def get_bicycle(bicycle_id):
    return respond(services().fleet.get_bicycle(bicycle_id))
