"""
Vouch - schema-driven validation and parsing of loosely typed data.

Usage:
    from vouch import maybe_verify, verify, num, str_, float_

    schema = {
        "name": str_,
        "price": float_,
        "stock": num,
    }

    result = maybe_verify(schema, data)     # Ok(dict) | Err(str)
    product = verify(schema, data)          # dict, or raises VerificationError
    check = maybe_verify(schema)            # reusable validator
"""

from .context import is_none_as_undefined, validation_context
from .core import ListV, ObjectV, V, and_, or_, to_validator
from .schema import (
    compile_schema,
    maybe_validate,
    maybe_verify,
    to_pydantic,
    try_to_validate,
    verify,
)
from .types import UNDEFINED, Err, Ok, VerificationError
from .validators import bool_, float_, int_, num, obj, str_, undef

each = ListV

__all__ = [
    # Result types
    "Ok",
    "Err",
    "UNDEFINED",
    "VerificationError",
    # Core
    "V",
    "ObjectV",
    "ListV",
    "each",
    "or_",
    "and_",
    "to_validator",
    # Validators
    "num",
    "str_",
    "bool_",
    "obj",
    "float_",
    "int_",
    "undef",
    # Schema
    "compile_schema",
    "maybe_verify",
    "maybe_validate",
    "verify",
    "try_to_validate",
    "to_pydantic",
    # Configuration
    "validation_context",
    "is_none_as_undefined",
]
