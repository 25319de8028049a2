"""Single-value containers that pairs traverse into.

Pairs only rely on one capability of a container: ``map``. ``Maybe`` and
``Result`` are small built-in implementations; any other object exposing
``map`` (see ``Mappable``) works with ``traverse`` as well. Deferred values
are plain awaitables.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
T_co = TypeVar("T_co", covariant=True)


class Mappable(Protocol[T_co]):
    """Anything with a functor ``map``: ``C[X].map(X -> Y) -> C[Y]``."""

    def map(self, func: Callable[[T_co], Any]) -> Mappable[Any]:
        ...


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present optional value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Some[U]:
        return Some(func(self.value))

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Nothing:
    """The absent optional value. Use the shared ``NOTHING`` instance."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> Nothing:
        return self

    def unwrap(self) -> Any:
        raise ValueError("Maybe has no value.")

    def unwrap_or(self, default: T) -> T:
        return default


NOTHING = Nothing()

Maybe = Some[T] | Nothing


def some(value: T) -> Maybe[T]:
    return Some(value)


def nothing() -> Maybe[Any]:
    return NOTHING


def from_optional(value: T | None) -> Maybe[T]:
    """Lift a ``None``-able value, treating ``None`` as absence."""
    if value is None:
        return NOTHING
    return Some(value)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful computation."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed computation carrying its error payload.

    Mapping never touches the payload, so failures short-circuit.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap(self) -> Any:
        raise ValueError(f"Result is an error: {self.error!r}")

    def unwrap_or(self, default: T) -> T:
        return default


Result = Ok[T] | Err[E]


async def map_awaitable(func: Callable[[T], U], awaitable: Awaitable[T]) -> U:
    """Map over a deferred value.

    An exception raised while awaiting propagates and ``func`` is never called.
    """
    value = await awaitable
    return func(value)
