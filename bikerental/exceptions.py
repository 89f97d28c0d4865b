"""
Exception classes for the bicycle rental service.

Services raise these internally; ``returns_result`` turns them into failed
``Result`` values so controllers can map each kind onto an HTTP status
instead of a generic 500 error.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STATE_CONFLICT = "state_conflict"
    AUTHORIZATION = "authorization"
    FAILURE = "failure"


class RentalError(Exception):
    """Base class for every expected failure of a rental operation."""

    kind = ErrorKind.FAILURE
    default_message = "Error: rental operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class ValidationError(RentalError):
    """Raised when a required payload field is missing, empty or malformed."""

    kind = ErrorKind.VALIDATION
    default_message = "Missing required fields in the payload."


class NotFoundError(RentalError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Record does not exist."


class UserNotFoundError(NotFoundError):
    """Raised when a user ID cannot be found in the system."""

    default_message = "User does not exist. Please create an account."


class BicycleNotFoundError(NotFoundError):
    """Raised when a bicycle ID cannot be found in the system."""

    default_message = "Bicycle does not exist."


class RentalNotFoundError(NotFoundError):
    """Raised when a rental record cannot be found in the ledger."""

    default_message = "Rental does not exist."


class StateConflictError(RentalError):
    kind = ErrorKind.STATE_CONFLICT
    default_message = "Operation conflicts with the current state."


class BicycleUnavailableError(StateConflictError):
    """Raised when renting a bicycle that is already rented out."""

    default_message = "Bicycle is currently unavailable."


class AuthorizationError(RentalError):
    kind = ErrorKind.AUTHORIZATION
    default_message = "Operation not allowed for this user."


class NotCurrentRenterError(AuthorizationError):
    """Raised when someone other than the current renter returns a bicycle."""

    default_message = "User does not have the right to return this bicycle."


class OperationFailedError(RentalError):
    """Unexpected internal failure, e.g. the store could not be written."""

    def __init__(self, message: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DuplicateKeyError(Exception):
    """Raised by the store when a freshly allocated identifier is already taken."""

    def __init__(self, table: str, key: str) -> None:
        self.table = table
        self.key = key
        super().__init__(f"Duplicate key '{key}' in table '{table}'")
