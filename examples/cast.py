#!/usr/bin/env python3
"""
Pair.cast() example - validating raw data into typed pairs.

Key concepts:
- cast_pair accepts JSON text, mappings or two-item sequences
- Each slot is validated by its own schema
- Failures raise CastError naming the failing slot
"""

from __future__ import annotations

from pydantic import BaseModel

from pairkit import Pair
from pairkit.structured import CastError, PairLayout, PydanticSchema, cast_pair, dump_pair


class Order(BaseModel):
    item: str
    quantity: int


def main() -> None:
    layout = PairLayout(left_key="customer", right_key="order")
    raw = '{"customer": "ada", "order": {"item": "tea", "quantity": "3"}}'

    pair = cast_pair(raw, right_schema=PydanticSchema(Order), layout=layout)
    print(pair)
    print(dump_pair(pair.map(lambda o: o.model_copy(update={"quantity": o.quantity + 1})), layout))

    try:
        Pair("ada", {"item": "tea"}).cast(right_schema=PydanticSchema(Order))
    except CastError as e:
        print(f"{e.slot} slot rejected: {e}")


if __name__ == "__main__":
    main()
