"""
Type definitions for vouch.

Provides a minimal Result type (Ok/Err), the UNDEFINED sentinel and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Mapping, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class _Undefined(Enum):
    """
    Sentinel for a value that was never supplied.

    Distinct from None, which is a supplied (null) value.
    """

    UNDEFINED = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined.UNDEFINED


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_else(self, fn: Callable[[Any], Result[T, E]]) -> Ok[T]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_or_raise(self, factory: Callable[[Any], BaseException]) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], U]) -> Err[U]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def or_else(self, fn: Callable[[E], Result[T, U]]) -> Result[T, U]:
        return fn(self.error)

    def unwrap(self) -> Any:
        raise ValueError(f"Called unwrap on Err: {self.error!r}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_raise(self, factory: Callable[[E], BaseException]) -> Any:
        """Raise the exception built by ``factory`` from the error."""
        raise factory(self.error)


class VerificationError(ValueError):
    """Raised by the strict API; ``str(exc)`` is the failure message verbatim."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Type aliases
Result = Ok[T] | Err[E]
Outcome = Ok[Any] | Err[str]
ValidatorFn = Callable[[Any], Outcome]
Schema = Mapping[str, Any]
