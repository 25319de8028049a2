#!/usr/bin/env python3
"""
Carrying metadata through a pipeline with Pair.

The left slot holds a request id, the right slot the payload. Every step
acts on the payload while the id rides along untouched.
"""

from __future__ import annotations

import asyncio

from pairkit import NOTHING, Pair, Some
from pairkit.combinators import ops


def parse_quantity(text: str):
    return Some(int(text)) if text.isdigit() else NOTHING


async def fetch_price(quantity: int) -> float:
    await asyncio.sleep(0.01)
    return quantity * 2.5


async def main() -> None:
    normalise = ops.compose(ops.map_(str.strip), ops.map_maybe(parse_quantity))

    for raw in (Pair("req-1", " 4 "), Pair("req-2", "four")):
        parsed = normalise(raw)
        if parsed.is_nothing():
            print(f"{raw.left}: rejected {raw.right!r}")
            continue
        priced = await parsed.unwrap().map_task(fetch_price)
        print(f"{priced.left}: {priced.right:.2f}")

    # Combine several measurements, keeping the first id
    total = ops.map3(lambda a, b, c: a + b + c, Pair("batch", 1), Pair("x", 2), Pair("y", 3))
    print(total)


if __name__ == "__main__":
    asyncio.run(main())
