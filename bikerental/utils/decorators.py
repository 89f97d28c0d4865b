import logging
from functools import wraps

from bikerental.exceptions import OperationFailedError, RentalError
from bikerental.models.result import Result

log = logging.getLogger(__name__)


def returns_result(action: str):
    """
    Wrap a service operation so it always returns a ``Result``.

    Expected failures (``RentalError``) come back as failed results; anything
    else is logged with its traceback and reported as "Failed to <action>".
    """

    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return Result.success(fn(*args, **kwargs))
            except RentalError as e:
                log.info("Could not %s: %s", action, e.message)
                return Result.failure(e)
            except Exception as e:
                log.exception("Unexpected error while trying to %s", action)
                return Result.failure(OperationFailedError(f"Failed to {action}: {e}", cause=e))

        return wrapper

    return deco
