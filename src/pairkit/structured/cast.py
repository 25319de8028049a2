"""Casting raw data into validated pairs, and dumping pairs back out."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from pairkit.kernel import Pair

from .config import DEFAULT_LAYOUT, PairLayout
from .errors import CastError
from .schema import SlotSchema

logger = logging.getLogger(__name__)


def _expected_shape(layout: PairLayout) -> str:
    shape = f'{{"{layout.left_key}": ..., "{layout.right_key}": ...}}'
    if layout.accept_sequences:
        shape += " or [left, right]"
    return shape


def _decode(raw: Any, layout: PairLayout) -> Any:
    """Decode JSON text; anything else is already data."""
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise CastError(
            f"Invalid JSON for pair {_expected_shape(layout)}: {e.msg} at position {e.pos}",
            raw,
        ) from e


def _split(data: Any, raw: Any, layout: PairLayout) -> tuple[Any, Any]:
    """Pull the two slot values out of decoded data."""
    if isinstance(data, Pair):
        return data.left, data.right

    if isinstance(data, Mapping):
        for key in (layout.left_key, layout.right_key):
            if key not in data:
                raise CastError(f"Missing required field: {key}", raw)
        return data[layout.left_key], data[layout.right_key]

    if layout.accept_sequences and isinstance(data, (list, tuple)):
        if len(data) != 2:
            raise CastError(f"Expected 2 items, got {len(data)}", raw)
        return data[0], data[1]

    raise CastError(
        f"Cannot cast {type(data).__name__} to Pair, expected {_expected_shape(layout)}",
        raw,
    )


def _validate_slot(schema: SlotSchema[Any] | None, value: Any, slot: str, raw: Any) -> Any:
    if schema is None:
        return value
    try:
        return schema.validate(value)
    except Exception as e:
        logger.debug("%s value %r rejected by %s", slot, value, schema.describe())
        raise CastError(
            f"Invalid {slot} value for {schema.describe()}: {e}",
            raw,
            slot=slot,
        ) from e


def cast_pair(
    raw: Any,
    left_schema: SlotSchema[Any] | None = None,
    right_schema: SlotSchema[Any] | None = None,
    layout: PairLayout = DEFAULT_LAYOUT,
) -> Pair[Any, Any]:
    """Validate raw data into a Pair.

    Args:
        raw: A Pair, a mapping keyed by the layout's keys, a two-item
            list/tuple, or JSON text encoding one of those
        left_schema: Schema for the left slot; None passes the value through
        right_schema: Schema for the right slot; None passes the value through
        layout: Key names and accepted shapes

    Returns:
        A new Pair holding the validated values. A slot holding a nested
        pair is only rebuilt when its schema is a PairSchema.

    Raises:
        CastError: If the shape is wrong or a slot fails validation
    """
    data = _decode(raw, layout)
    left, right = _split(data, raw, layout)
    return Pair(
        _validate_slot(left_schema, left, "left", raw),
        _validate_slot(right_schema, right, "right", raw),
    )


@dataclass(frozen=True)
class PairSchema(SlotSchema[Pair[Any, Any]]):
    """Slot schema for a slot that itself holds a pair.

    Lets cast_pair rebuild what dump_pair produced for nested pairs:

        cast_pair(dump_pair(Pair(Pair(1, 2), 3)), left_schema=PairSchema())
    """

    left: SlotSchema[Any] | None = None
    right: SlotSchema[Any] | None = None
    layout: PairLayout = DEFAULT_LAYOUT

    def validate(self, value: Any) -> Pair[Any, Any]:
        return cast_pair(value, self.left, self.right, self.layout)

    def describe(self) -> str:
        left = self.left.describe() if self.left else "any"
        right = self.right.describe() if self.right else "any"
        return f"PairSchema({left}, {right})"


def make_pair_caster(
    left_schema: SlotSchema[Any] | None = None,
    right_schema: SlotSchema[Any] | None = None,
    layout: PairLayout = DEFAULT_LAYOUT,
) -> Callable[[Any], Pair[Any, Any]]:
    """Bind schemas and layout into a reusable caster."""
    def caster(raw: Any) -> Pair[Any, Any]:
        return cast_pair(raw, left_schema, right_schema, layout)

    return caster


def _dump_value(value: Any, layout: PairLayout) -> Any:
    if isinstance(value, Pair):
        return dump_pair(value, layout)
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


def dump_pair(pair: Pair[Any, Any], layout: PairLayout = DEFAULT_LAYOUT) -> dict[str, Any]:
    """Turn a pair into plain data.

    Nested pairs are dumped with the same layout; cast them back with a
    PairSchema on that slot.
    """
    return {
        layout.left_key: _dump_value(pair.left, layout),
        layout.right_key: _dump_value(pair.right, layout),
    }
