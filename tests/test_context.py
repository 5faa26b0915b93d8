"""
Tests for vouch.context configuration.
"""

from vouch import (
    UNDEFINED,
    Err,
    Ok,
    is_none_as_undefined,
    maybe_verify,
    num,
    or_,
    undef,
    validation_context,
)


class TestValidationContext:
    def test_default_off(self):
        assert is_none_as_undefined() is False
        assert maybe_verify({"a": undef}, {"a": None}) == Err(
            "Key a is not validated due to: Value is not undefined"
        )

    def test_none_as_undefined(self):
        with validation_context(none_as_undefined=True):
            assert is_none_as_undefined() is True
            assert maybe_verify({"a": undef}, {"a": None}) == Ok({"a": UNDEFINED})

    def test_optional_number(self):
        schema = {"limit": or_(num, undef)}
        with validation_context(none_as_undefined=True):
            assert maybe_verify(schema, {"limit": None}) == Ok({"limit": UNDEFINED})
            assert maybe_verify(schema, {"limit": 5}) == Ok({"limit": 5})

    def test_reset_on_exit(self):
        with validation_context(none_as_undefined=True):
            pass
        assert is_none_as_undefined() is False

    def test_reset_on_error(self):
        try:
            with validation_context(none_as_undefined=True):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert is_none_as_undefined() is False

    def test_candidate_none_still_undefined_object(self):
        with validation_context(none_as_undefined=True):
            assert maybe_verify({"a": num}, None) == Err("Object is undefined")
