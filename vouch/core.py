"""
Core validator classes for vouch.

Provides V, ObjectV, ListV dataclasses with functional composition, and the
or_/and_ combinators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Number
from types import MappingProxyType
from typing import Any, Mapping

from .context import is_none_as_undefined
from .types import UNDEFINED, Err, Ok, Outcome, ValidatorFn

logger = logging.getLogger(__name__)


class _Composable:
    """Operator support shared by every validator node."""

    __slots__ = ()

    def __or__(self, other: Any) -> V:
        """
        Combine with OR logic: the first alternative that passes wins.

        Usage:
            V(num) | str_
            ObjectV({"id": int_}) | undef
        """
        return V(or_(self, other))

    def __ror__(self, other: Any) -> V:
        """Support `str | V(num)` where the plain type comes first."""
        return V(or_(other, self))

    def __and__(self, other: Any) -> V:
        """
        Combine with AND logic: both must pass, the input is returned as is.

        Usage:
            V(obj) & ObjectV({"kind": str_})
        """
        return V(and_(self, other))

    def __rand__(self, other: Any) -> V:
        return V(and_(other, self))


@dataclass(frozen=True, slots=True)
class V(_Composable):
    """
    Immutable validator node.

    Wraps a validator function (value -> Ok | Err[str]) so it can be combined
    with | and & and given a custom failure message.
    """

    fn: ValidatorFn
    message: str | None = None

    def __call__(self, value: Any = UNDEFINED) -> Outcome:
        result = self.fn(value)
        if self.message is not None and isinstance(result, Err):
            return Err(self.message)
        return result

    def with_message(self, msg: str) -> V:
        """Return new validator with custom error message."""
        return V(fn=self.fn, message=msg)


@dataclass(frozen=True, slots=True)
class ObjectV(_Composable):
    """
    Validator for objects described by a schema of field validators.

    Fields are validated in schema order and validation stops at the first
    failing field. On success the output is a new dict holding exactly the
    schema's keys.
    """

    fields: Mapping[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            raise TypeError(
                f"Schema must be a mapping, got {type(self.fields).__name__}"
            )
        converted = {key: to_validator(v) for key, v in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(converted))

    def __call__(self, value: Any = UNDEFINED) -> Ok[dict[str, Any]] | Err[str]:
        if value is UNDEFINED or value is None:
            return Err("Object is undefined")

        output: dict[str, Any] = {}
        for key, validator in self.fields.items():
            result = validator(_read_field(value, key))
            if isinstance(result, Err):
                logger.debug("Key %s rejected: %s", key, result.error)
                return Err(f"Key {key} is not validated due to: {result.error}")
            output[key] = result.value

        return Ok(output)


@dataclass(frozen=True, slots=True)
class ListV(_Composable):
    """Validator for list structures with item validation."""

    items: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", to_validator(self.items))

    def __call__(self, value: Any = UNDEFINED) -> Ok[list[Any]] | Err[str]:
        if value is UNDEFINED or value is None:
            return Err("List is undefined")

        if not isinstance(value, (list, tuple)):
            return Err("Value is not list")

        output: list[Any] = []
        for i, item in enumerate(value):
            result = self.items(item)
            if isinstance(result, Err):
                logger.debug("Index %s rejected: %s", i, result.error)
                return Err(f"Index {i} is not validated due to: {result.error}")
            output.append(result.value)

        return Ok(output)


def _read_field(value: Any, key: str) -> Any:
    """Read a field off a mapping or an object, UNDEFINED when missing."""
    if isinstance(value, Mapping):
        field = value.get(key, UNDEFINED)
    elif isinstance(value, (str, bytes, Number)):
        field = UNDEFINED
    elif key.startswith("__"):
        field = UNDEFINED
    else:
        field = getattr(value, key, UNDEFINED)
        # Methods and classes are not field values
        if callable(field):
            field = UNDEFINED

    if field is None and is_none_as_undefined():
        return UNDEFINED
    return field


def or_(f1: Any, f2: Any) -> ValidatorFn:
    """
    Build a validator accepting values that pass f1 or f2.

    f2 is only tried when f1 fails, on the same input. When both fail the
    messages are joined: "{err1} and {err2}".
    """
    first, second = to_validator(f1), to_validator(f2)

    def either(value: Any = UNDEFINED) -> Outcome:
        left = first(value)
        if isinstance(left, Ok):
            return left
        right = second(value)
        if isinstance(right, Ok):
            return right
        return Err(f"{left.error} and {right.error}")

    return either


def and_(f1: Any, f2: Any) -> ValidatorFn:
    """
    Build a validator accepting values that pass both f1 and f2.

    Both sides see the original input and any value they produce is
    discarded: on success the input itself is returned. The first failing
    side's message is returned unchanged.
    """
    first, second = to_validator(f1), to_validator(f2)

    def both(value: Any = UNDEFINED) -> Outcome:
        left = first(value)
        if isinstance(left, Err):
            return left
        right = second(value)
        if isinstance(right, Err):
            return right
        return Ok(value)

    return both


def to_validator(v: Any) -> V | ObjectV | ListV:
    """
    Turn a schema entry into a validator node.

    Existing nodes are returned as they are. A class becomes an isinstance
    check failing with "Value is not {name}". Any Mapping is compiled into a
    nested ObjectV. A list describes list items: one entry is the item
    validator, several entries are joined with | into alternatives. Any
    other callable is wrapped in V. Anything else is a TypeError, and an
    empty list is a ValueError.
    """
    if isinstance(v, (V, ObjectV, ListV)):
        return v

    if isinstance(v, type):
        message = f"Value is not {v.__name__}"

        def type_check(x: Any, t: type = v) -> Outcome:
            return Ok(x) if isinstance(x, t) else Err(message)

        return V(fn=type_check)

    if isinstance(v, Mapping):
        return ObjectV(fields=v)

    if isinstance(v, list):
        if len(v) == 0:
            raise ValueError("Empty list cannot be converted to validator")
        item_v = to_validator(v[0])
        # Multiple items = OR logic for item types
        for other in v[1:]:
            item_v = item_v | other
        return ListV(items=item_v)

    if callable(v):
        return V(fn=v)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
