"""Helpers shared by the JSON blueprints."""

from flask import abort, current_app, jsonify, request

from bikerental.exceptions import ErrorKind
from bikerental.services.common import EXTENSION_KEY, Services

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STATE_CONFLICT: 409,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.FAILURE: 500,
}


def services() -> Services:
    return current_app.extensions[EXTENSION_KEY]


def json_payload() -> dict:
    """Request body as a dict; anything else is rejected with 400 before reaching a service."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object.")
    return data


def error_response(result):
    body = {"error": result.kind.value, "message": result.message}
    return jsonify(body), STATUS_BY_KIND.get(result.kind, 500)


def respond(result, status=200, render=None):
    """Turn a service ``Result`` into a JSON response."""
    if not result.ok:
        return error_response(result)
    value = result.value
    if render is not None:
        value = render(value)
    elif hasattr(value, "to_dict"):
        value = value.to_dict()
    return jsonify(value), status


def many(items):
    return [item.to_dict() for item in items]
