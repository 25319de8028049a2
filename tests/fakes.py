from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pairkit.kernel import NOTHING, Err, Maybe, Ok, Result, Some


@dataclass(frozen=True)
class Box:
    """Third-party style container: only knows how to map."""

    value: Any

    def map(self, func: Callable[[Any], Any]) -> Box:
        return Box(func(self.value))


@dataclass
class CountingFn:
    """Wraps a function and records every argument it was called with."""

    fn: Callable[..., Any]
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)


def double_if_positive(x: int) -> Maybe[int]:
    return Some(x * 2) if x > 0 else NOTHING


def parse_int(text: str) -> Result[int, str]:
    if text.lstrip("-").isdigit():
        return Ok(int(text))
    return Err(f"not a number: {text}")


async def resolved(value: Any, delay: float = 0.0) -> Any:
    await asyncio.sleep(delay)
    return value


async def rejected(exc: Exception) -> Any:
    await asyncio.sleep(0)
    raise exc
