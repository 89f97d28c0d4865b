from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from bikerental.exceptions import ErrorKind, RentalError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation: either a value or a ``RentalError``."""

    value: Optional[T] = None
    error: Optional[RentalError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RentalError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else "OK"

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
