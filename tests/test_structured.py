"""Tests for structured pair casting (cast_pair, Pair.cast)."""

import logging

from pydantic import BaseModel
import pytest

from pairkit import Pair
from pairkit.structured import (
    CastError,
    DEFAULT_LAYOUT,
    FunctionSchema,
    PairLayout,
    PairSchema,
    PydanticSchema,
    cast_pair,
    dump_pair,
    make_pair_caster,
)


class UserProfile(BaseModel):
    name: str
    email: str


def test_cast_from_json_text() -> None:
    assert cast_pair('{"left": 1, "right": 2}') == Pair(1, 2)
    assert cast_pair('["a", 2]') == Pair("a", 2)


def test_invalid_json_names_expected_shape() -> None:
    raw = '{"left": 1, invalid}'
    with pytest.raises(CastError) as excinfo:
        cast_pair(raw)
    assert 'Invalid JSON for pair {"left": ..., "right": ...} or [left, right]' in str(excinfo.value)
    assert excinfo.value.raw_value == raw
    assert excinfo.value.slot is None


def test_invalid_json_uses_custom_layout() -> None:
    layout = PairLayout(left_key="meta", right_key="value", accept_sequences=False)
    with pytest.raises(CastError, match=r'\{"meta": \.\.\., "value": \.\.\.\}: '):
        cast_pair("not json", layout=layout)


class TestSchemas:
    def test_function_schema(self):
        schema = FunctionSchema(int)
        assert schema.validate("3") == 3
        assert schema.describe() == "int"

    def test_function_schema_names_methods(self):
        assert FunctionSchema(str.upper).describe() == "str.upper"

    def test_function_schema_custom_name(self):
        assert FunctionSchema(int, "digits").describe() == "digits"

    def test_pydantic_schema_with_plain_type(self):
        schema = PydanticSchema(list[int])
        assert schema.validate(["1", 2]) == [1, 2]

    def test_pydantic_schema_with_model(self):
        schema = PydanticSchema(UserProfile)
        user = schema.validate({"name": "Ada", "email": "ada@example.com"})
        assert isinstance(user, UserProfile)
        assert schema.describe() == "PydanticSchema(UserProfile)"

    def test_pair_schema_describe(self):
        assert PairSchema(FunctionSchema(int)).describe() == "PairSchema(int, any)"


class TestCastPair:
    def test_from_mapping(self):
        assert cast_pair({"left": "a", "right": 1}) == Pair("a", 1)

    def test_from_sequence(self):
        assert cast_pair(["a", 1]) == Pair("a", 1)

    def test_from_json_text(self):
        raw = '{"left": "meta", "right": {"name": "Ada", "email": "ada@example.com"}}'
        pair = cast_pair(raw, right_schema=PydanticSchema(UserProfile))
        assert pair.left == "meta"
        assert pair.right == UserProfile(name="Ada", email="ada@example.com")

    def test_from_existing_pair(self):
        assert cast_pair(Pair("7", 1), left_schema=PydanticSchema(int)) == Pair(7, 1)

    def test_custom_layout(self):
        layout = PairLayout(left_key="meta", right_key="value", accept_sequences=False)
        assert cast_pair({"meta": 1, "value": 2}, layout=layout) == Pair(1, 2)
        with pytest.raises(CastError, match="Cannot cast list"):
            cast_pair([1, 2], layout=layout)

    def test_layout_keys_must_differ(self):
        with pytest.raises(ValueError):
            PairLayout(left_key="k", right_key="k")

    def test_missing_field(self):
        with pytest.raises(CastError, match="Missing required field: right"):
            cast_pair({"left": 1})

    def test_wrong_length(self):
        with pytest.raises(CastError, match="Expected 2 items, got 3"):
            cast_pair([1, 2, 3])

    def test_slot_failure_names_slot(self):
        raw = {"left": "x", "right": "not-a-number"}
        with pytest.raises(CastError) as excinfo:
            cast_pair(raw, right_schema=PydanticSchema(int))
        assert excinfo.value.slot == "right"
        assert excinfo.value.raw_value is raw
        assert excinfo.value.__cause__ is not None

    def test_make_pair_caster_is_reusable(self):
        caster = make_pair_caster(FunctionSchema(str.upper), PydanticSchema(float))
        assert caster(["a", "1.5"]) == Pair("A", 1.5)
        assert caster(["b", 2]) == Pair("B", 2.0)


class TestDump:
    def test_dump_default_layout(self):
        assert dump_pair(Pair(1, "a")) == {"left": 1, "right": "a"}

    def test_dump_nested_and_models(self):
        user = UserProfile(name="Ada", email="ada@example.com")
        layout = PairLayout(left_key="k", right_key="v")
        assert dump_pair(Pair(Pair(1, 2), user), layout) == {
            "k": {"k": 1, "v": 2},
            "v": {"name": "Ada", "email": "ada@example.com"},
        }

    def test_dump_then_cast(self):
        pair = Pair("meta", 3)
        assert cast_pair(dump_pair(pair, DEFAULT_LAYOUT)) == pair

    def test_nested_dump_then_cast_with_pair_schema(self):
        pair = Pair(Pair(1, 2), 3)
        assert cast_pair(dump_pair(pair), left_schema=PairSchema()) == pair

    def test_nested_dump_without_pair_schema_stays_plain_data(self):
        assert cast_pair(dump_pair(Pair(Pair(1, 2), 3))) == Pair({"left": 1, "right": 2}, 3)

    def test_deeply_nested_round_trip_with_custom_layout(self):
        layout = PairLayout(left_key="k", right_key="v")
        pair = Pair("root", Pair(Pair("a", 1), UserProfile(name="Ada", email="ada@example.com")))
        schema = PairSchema(
            left=PairSchema(layout=layout),
            right=PydanticSchema(UserProfile),
            layout=layout,
        )
        assert cast_pair(dump_pair(pair, layout), right_schema=schema, layout=layout) == pair

    def test_nested_slot_failure_is_reported(self):
        raw = {"left": {"left": "x", "right": 2}, "right": 3}
        with pytest.raises(CastError, match=r"Invalid left value for PairSchema\(PydanticSchema\(int\), any\)"):
            cast_pair(raw, left_schema=PairSchema(left=PydanticSchema(int)))


def test_slot_rejection_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pairkit.structured.cast"):
        with pytest.raises(CastError):
            cast_pair({"left": "meta", "right": "nope"}, right_schema=PydanticSchema(int))
    assert "right value 'nope' rejected by PydanticSchema(int)" in caplog.text


class TestPairExtensions:
    def test_pair_cast(self):
        assert Pair("7", "3.5").cast(PydanticSchema(int), PydanticSchema(float)) == Pair(7, 3.5)

    def test_pair_cast_failure(self):
        with pytest.raises(CastError) as excinfo:
            Pair("x", 1).cast(PydanticSchema(int))
        assert excinfo.value.slot == "left"

    def test_pair_dump(self):
        assert Pair(1, 2).dump() == {"left": 1, "right": 2}
