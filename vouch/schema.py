"""
Schema operations for vouch.

Provides maybe_verify(), verify(), compile_schema() and to_pydantic().
"""

from __future__ import annotations

from typing import Annotated, Any, Callable

from pydantic import BeforeValidator, Field, create_model

from .core import ObjectV, to_validator
from .types import UNDEFINED, Err, Ok, Schema, VerificationError

# Marks "no value argument given" so the curried form can be told apart from
# an explicit UNDEFINED candidate.
_CURRIED = object()


def compile_schema(schema: Schema | ObjectV) -> ObjectV:
    """
    Build a reusable object validator from a schema.

    Args:
        schema: Dict mapping field names to validators (or an ObjectV)

    Returns:
        ObjectV that can be called with candidate values, or nested as a
        field validator of another schema
    """
    validator = to_validator(schema)
    if not isinstance(validator, ObjectV):
        raise TypeError("Schema must be a dict")
    return validator


def maybe_verify(schema: Schema | ObjectV, value: Any = _CURRIED) -> Any:
    """
    Validate a value against a schema, returning a Result.

    Args:
        schema: Dict mapping field names to validators
        value: Value to validate. When omitted, the compiled validator is
            returned instead so it can be stored or nested.

    Returns:
        Ok(output) if every field passes
        Err(message) describing the first field that failed

    Usage:
        maybe_verify({"value": num}, {"value": 2})  # Ok({"value": 2})

        point = maybe_verify({"x": num, "y": num})
        point({"x": 1, "y": "2"})
        # Err("Key y is not validated due to: Value is not number")
    """
    validator = compile_schema(schema)
    if value is _CURRIED:
        return validator
    return validator(value)


def verify(schema: Schema | ObjectV, value: Any = _CURRIED) -> Any:
    """
    Validate a value against a schema, raising on failure.

    Args:
        schema: Dict mapping field names to validators
        value: Value to validate. When omitted, returns a function that
            validates later values the same way.

    Returns:
        The validated output dict

    Raises:
        VerificationError: with the failure message verbatim
    """
    validator = compile_schema(schema)
    if value is _CURRIED:

        def strict(candidate: Any = UNDEFINED) -> dict[str, Any]:
            return validator(candidate).unwrap_or_raise(VerificationError)

        return strict
    return validator(value).unwrap_or_raise(VerificationError)


maybe_validate = maybe_verify
try_to_validate = verify


def to_pydantic(name: str, schema: Schema | ObjectV) -> type:
    """
    Compile schema to a Pydantic model.

    Each field runs its validator before assignment, so parsing validators
    store their parsed value. Missing fields reach the validator as UNDEFINED.

    Args:
        name: Name of the generated model class
        schema: Dict mapping field names to validators

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        Query = to_pydantic("Query", {"page": int_, "verbose": bool_})
        q = Query(page="2", verbose="true")
        q.page  # 2
    """
    validator = compile_schema(schema)

    fields: dict[str, Any] = {}
    for key, v in validator.fields.items():
        fields[key] = (
            Annotated[Any, BeforeValidator(_raise_on_err(v))],
            Field(default=UNDEFINED, validate_default=True),
        )

    return create_model(name, **fields)


def _raise_on_err(v: Callable[[Any], Ok[Any] | Err[str]]) -> Callable[[Any], Any]:
    """Adapt a validator to Pydantic's raise-ValueError convention."""

    def run(value: Any) -> Any:
        result = v(value)
        if isinstance(result, Err):
            raise ValueError(result.error)
        return result.value

    return run
