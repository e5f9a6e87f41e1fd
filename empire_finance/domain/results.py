"""Success/failure result returned by every fallible domain operation"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from empire_finance.domain.exceptions import ValidationFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value (`ok` is True) or the validation failure that stopped it.

    Failures are expected, user-correctable outcomes, so they are returned
    rather than raised. Use `unwrap()` at boundaries that prefer exceptions.
    """

    value: Optional[T] = None
    error: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ValidationFailure) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
