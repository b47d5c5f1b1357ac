"""
Result carrier returned by every fallible store operation.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation.

    Callers must check `success` before trusting `data`. On failure `data` is
    either None or diagnostic, never a valid value.
    """

    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "Result[T]":
        """Create a successful result."""
        return cls(success=True, message=message if message is not None else "Ok", data=data)

    @classmethod
    def error(cls, data: Optional[T] = None, message: Optional[str] = None) -> "Result[T]":
        """Create a failed result."""
        return cls(success=False, message=message if message is not None else "Error", data=data)

    def __repr__(self) -> str:
        status = "ok" if self.success else "error"
        return f"Result({status}, message={self.message!r})"


# Result without a meaningful payload
SimpleResult = Result[Any]
