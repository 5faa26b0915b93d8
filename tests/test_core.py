"""
Tests for vouch.core validator nodes and combinators.
"""

import pytest

from vouch import (
    Err,
    ListV,
    ObjectV,
    Ok,
    V,
    and_,
    bool_,
    each,
    float_,
    num,
    obj,
    or_,
    str_,
    to_validator,
)


class TestOr:
    def test_first_branch(self):
        assert or_(num, str_)(2) == Ok(2)

    def test_second_branch(self):
        assert or_(num, str_)("two") == Ok("two")

    def test_second_branch_output_is_kept(self):
        assert or_(num, float_)("2.5") == Ok(2.5)

    def test_both_fail_joins_messages(self):
        assert or_(num, str_)(True) == Err(
            "Value is not number and Value is not string"
        )

    def test_second_not_tried_when_first_passes(self):
        calls = []

        def spy(value):
            calls.append(value)
            return Ok(value)

        or_(num, spy)(1)
        assert calls == []


class TestAnd:
    def test_returns_original_input(self):
        has_id = ObjectV({"id": float_})
        value = {"id": "1.5", "extra": True}
        assert and_(obj, has_id)(value) == Ok(value)

    def test_first_failure_unmodified(self):
        assert and_(num, str_)("x") == Err("Value is not number")

    def test_second_failure_unmodified(self):
        assert and_(obj, ObjectV({"a": num}))({"a": "x"}) == Err(
            "Key a is not validated due to: Value is not number"
        )

    def test_second_not_tried_when_first_fails(self):
        calls = []

        def spy(value):
            calls.append(value)
            return Ok(value)

        and_(num, spy)("x")
        assert calls == []


class TestV:
    def test_or_operator(self):
        v = V(num) | str_
        assert v(1) == Ok(1)
        assert v("a") == Ok("a")
        assert isinstance(v(None), Err)

    def test_reflected_or_with_type(self):
        v = int | V(str_)
        assert v(1) == Ok(1)
        assert v(1.5) == Err("Value is not int and Value is not string")

    def test_and_operator(self):
        v = V(str_) & (lambda x: Ok(x) if x else Err("Value is empty"))
        assert v("a") == Ok("a")
        assert v("") == Err("Value is empty")

    def test_with_message(self):
        v = V(num).with_message("Price must be a number")
        assert v("x") == Err("Price must be a number")
        assert v(1) == Ok(1)


class TestObjectV:
    def test_rejects_non_mapping_schema(self):
        with pytest.raises(TypeError):
            ObjectV(fields=[num])

    def test_fields_are_read_only(self):
        v = ObjectV({"a": num})
        with pytest.raises(TypeError):
            v.fields["b"] = num

    def test_operators(self):
        v = ObjectV({"a": num}) | str_
        assert v("x") == Ok("x")
        assert v({"a": 1}) == Ok({"a": 1})


class TestListV:
    def test_validates_items(self):
        assert ListV(float_)(["1.5", "2"]) == Ok([1.5, 2.0])

    def test_accepts_tuples(self):
        assert each(num)((1, 2)) == Ok([1, 2])

    def test_short_circuits(self):
        assert ListV(num)([1, "x", None]) == Err(
            "Index 1 is not validated due to: Value is not number"
        )

    def test_not_a_list(self):
        assert ListV(num)("abc") == Err("Value is not list")
        assert ListV(num)(None) == Err("List is undefined")

    def test_nested_objects(self):
        v = ListV({"flag": bool_})
        assert v([{"flag": "true"}]) == Ok([{"flag": True}])
        assert v([{"flag": 3}]) == Err(
            "Index 0 is not validated due to: "
            "Key flag is not validated due to: Value is not boolean"
        )


class TestToValidator:
    def test_passthrough(self):
        v = V(num)
        assert to_validator(v) is v

    def test_type_coercion(self):
        v = to_validator(str)
        assert isinstance(v, V)
        assert v("hello") == Ok("hello")
        assert v(1) == Err("Value is not str")

    def test_dict_coercion(self):
        assert isinstance(to_validator({"name": str_}), ObjectV)

    def test_list_coercion(self):
        v = to_validator([num])
        assert isinstance(v, ListV)

    def test_multi_item_list_is_or(self):
        v = to_validator([num, str_])
        assert v([1, "a"]) == Ok([1, "a"])

    def test_empty_list(self):
        with pytest.raises(ValueError):
            to_validator([])

    def test_callable_coercion(self):
        v = to_validator(num)
        assert isinstance(v, V)
        assert v(5) == Ok(5)

    def test_unconvertible(self):
        with pytest.raises(TypeError):
            to_validator(42)
