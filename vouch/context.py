"""
Context manager for validation configuration (e.g., treating null as missing).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for null handling
_none_as_undefined: ContextVar[bool] = ContextVar("none_as_undefined", default=False)


def is_none_as_undefined() -> bool:
    """Check if None field values are currently passed to validators as UNDEFINED."""
    return _none_as_undefined.get()


@contextmanager
def validation_context(*, none_as_undefined: bool = False):
    """
    Context manager for validation configuration.

    Args:
        none_as_undefined: If True, a field whose value is None is handed to
               its validator as UNDEFINED, so JSON nulls behave like
               missing keys.

    Example:
        from vouch import maybe_verify, undef, validation_context

        schema = {"deleted_at": undef}

        # Normal - null is a supplied value
        maybe_verify(schema, {"deleted_at": None})
        # Err("Key deleted_at is not validated due to: Value is not undefined")

        # Null treated as missing
        with validation_context(none_as_undefined=True):
            maybe_verify(schema, {"deleted_at": None})  # Ok({"deleted_at": UNDEFINED})
    """
    token = _none_as_undefined.set(none_as_undefined)
    try:
        yield
    finally:
        _none_as_undefined.reset(token)
