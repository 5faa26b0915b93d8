"""
Built-in leaf validators for vouch.

Each takes a single value and returns Ok(value) or Err(message). Verification
validators (num, str_, bool_, obj) return the input unchanged; parsing
validators (float_, int_) return a new representation; undef only accepts
UNDEFINED. None of them raise.
"""

from __future__ import annotations

import math
from numbers import Number
from typing import Any

from .types import UNDEFINED, Err, Ok

_PRIMITIVES = (str, bytes, bool, Number)


def num(value: Any) -> Ok[Any] | Err[str]:
    """Accept any number except bool."""
    if isinstance(value, Number) and not isinstance(value, bool):
        return Ok(value)
    return Err("Value is not number")


def str_(value: Any) -> Ok[str] | Err[str]:
    if isinstance(value, str):
        return Ok(value)
    return Err("Value is not string")


def bool_(value: Any) -> Ok[bool] | Err[str]:
    """
    Accept a bool, or the strings "true"/"false".

    Usage:
        bool_(True)     # Ok(True)
        bool_("false")  # Ok(False)
        bool_("yes")    # Err("Value is not boolean")
    """
    if isinstance(value, bool):
        return Ok(value)
    if isinstance(value, str) and value == "true":
        return Ok(True)
    if isinstance(value, str) and value == "false":
        return Ok(False)
    return Err("Value is not boolean")


def obj(value: Any) -> Ok[Any] | Err[str]:
    """Accept any non-primitive, non-callable value (dicts, lists, class instances)."""
    if value is None or value is UNDEFINED or isinstance(value, _PRIMITIVES):
        return Err("Value is not obj")
    if callable(value):
        return Err("Value is not obj")
    return Ok(value)


def float_(value: Any) -> Ok[float] | Err[str]:
    """
    Parse a string containing a floating point number.

    Usage:
        float_("3.1415")  # Ok(3.1415)
        float_("pi")      # Err("Value is not float")
    """
    if value is UNDEFINED or value is None:
        return Err("Value is not defined")
    # Digit separators are Python literal syntax, not a numeric string
    if not isinstance(value, str) or not value.strip() or "_" in value:
        return Err("Value is not float")
    try:
        result = float(value)
    except ValueError:
        return Err("Value is not float")
    if math.isnan(result):
        return Err("Value is not float")
    return Ok(result)


def int_(value: Any) -> Ok[int] | Err[str]:
    """Parse a string containing an integer."""
    if value is UNDEFINED or value is None:
        return Err("Value is not defined")
    if not isinstance(value, str) or "_" in value:
        return Err("Value is not integer")
    try:
        return Ok(int(value))
    except ValueError:
        return Err("Value is not integer")


def undef(value: Any) -> Ok[Any] | Err[str]:
    if value is UNDEFINED:
        return Ok(value)
    return Err("Value is not undefined")
