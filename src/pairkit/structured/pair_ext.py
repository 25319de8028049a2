"""Pair extensions for structured validation and dumping."""

from typing import Any

from pairkit.kernel.pair import Pair
from pairkit.structured.cast import cast_pair, dump_pair
from pairkit.structured.config import DEFAULT_LAYOUT, PairLayout
from pairkit.structured.schema import SlotSchema


def cast(
    self: Pair,
    left_schema: SlotSchema[Any] | None = None,
    right_schema: SlotSchema[Any] | None = None,
) -> Pair:
    """Re-validate both slots of the pair.

    Example:
        >>> from pairkit.structured import PydanticSchema
        >>> Pair("7", "3.5").cast(PydanticSchema(int), PydanticSchema(float))
        Pair(left=7, right=3.5)
    """
    return cast_pair(self, left_schema, right_schema)


def dump(self: Pair, layout: PairLayout = DEFAULT_LAYOUT) -> dict[str, Any]:
    return dump_pair(self, layout)


# Register the structured operations
Pair.register_op("cast", cast)
Pair.register_op("dump", dump)
