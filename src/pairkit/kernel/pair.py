"""Pair - an immutable product of two independently typed values."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Coroutine, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pairkit.kernel.containers import Maybe, Mappable, Result, map_awaitable

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
X = TypeVar("X")


# Extension registry - class-level storage for Pair capabilities
_extensions_registry: dict[str, Callable] = {}


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    """Two values held together: ``left`` and ``right``.

    Pairs are right-biased. ``map``, ``and_then`` and the traversal family act
    on ``right``, so ``left`` behaves like metadata carried along a chain of
    transformations. Every method returns a new pair.

    Capabilities can be registered via register_op() for extensibility.
    """

    left: A
    right: B

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation capability on the Pair class.

        Args:
            name: The operation name (e.g., "cast")
            fn: The function to register
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    # -- construction -----------------------------------------------------

    @staticmethod
    def of(left: A, right: B) -> Pair[A, B]:
        return Pair(left, right)

    @staticmethod
    def branch(value: A) -> Pair[A, A]:
        """Duplicate a value into both slots."""
        return Pair(value, value)

    @staticmethod
    def branch_with(
        on_left: Callable[[X], A],
        on_right: Callable[[X], B],
        value: X,
    ) -> Pair[A, B]:
        """Build a pair by running two functions over the same value."""
        return Pair(on_left(value), on_right(value))

    @staticmethod
    def from_tuple(values: Sequence[Any]) -> Pair[Any, Any]:
        if len(values) != 2:
            raise ValueError(f"Pair needs exactly 2 values, got {len(values)}")
        return Pair(values[0], values[1])

    # -- extraction -------------------------------------------------------

    def merge(self, func: Callable[[A, B], C]) -> C:
        """Collapse the pair into a single value."""
        return func(self.left, self.right)

    def to_tuple(self) -> tuple[A, B]:
        return (self.left, self.right)

    # -- mapping ----------------------------------------------------------

    def map(self, func: Callable[[B], C]) -> Pair[A, C]:
        return Pair(self.left, func(self.right))

    def map_left(self, func: Callable[[A], C]) -> Pair[C, B]:
        return Pair(func(self.left), self.right)

    def map_both(self, on_left: Callable[[A], C], on_right: Callable[[B], D]) -> Pair[C, D]:
        return Pair(on_left(self.left), on_right(self.right))

    def extend(self, func: Callable[[A, B], C]) -> Pair[A, C]:
        """Derive a new right value from both values, keeping left."""
        return Pair(self.left, func(self.left, self.right))

    def modify(self, func: Callable[[A, B], C]) -> Pair[C, B]:
        """Derive a new left value from both values, keeping right."""
        return Pair(func(self.left, self.right), self.right)

    def swap(self) -> Pair[B, A]:
        return Pair(self.right, self.left)

    # -- applicative ------------------------------------------------------

    def and_map(self: Pair[A, Callable[[C], D]], other: Pair[Any, C]) -> Pair[A, D]:
        """Apply the function in this pair's right slot to ``other.right``.

        The result keeps this pair's left value; ``other.left`` is dropped.
        The function-carrying pair comes first (``fn_pair.and_map(pair)``),
        the reverse of the pipeline-style ``and_map(pair, fn_pair)`` order, so
        that folding left to right keeps the first pair's left value.
        """
        return Pair(self.left, self.right(other.right))

    def and_map_both(
        self: Pair[Callable[[C], E], Callable[[D], X]],
        other: Pair[C, D],
    ) -> Pair[E, X]:
        """Apply both slot functions of this pair to the matching slots of ``other``."""
        return Pair(self.left(other.left), self.right(other.right))

    # -- chaining ---------------------------------------------------------

    def and_then(self, func: Callable[[B], Pair[C, D]]) -> Pair[C, D]:
        """Chain into the pair returned by ``func``.

        The returned pair replaces this one entirely, left value included.
        """
        return func(self.right)

    def and_then_both(self, func: Callable[[A, B], Pair[C, D]]) -> Pair[C, D]:
        return func(self.left, self.right)

    # -- traversal --------------------------------------------------------

    def traverse(self, func: Callable[[B], Mappable[C]]) -> Mappable[Pair[A, C]]:
        """Move the container produced by ``func`` from around right to around the pair.

        Works with any container exposing ``map``. When the container is empty
        or failed, its ``map`` never runs and the left value is lost.
        """
        left = self.left
        return func(self.right).map(lambda value: Pair(left, value))

    def map_maybe(self, func: Callable[[B], Maybe[C]]) -> Maybe[Pair[A, C]]:
        maybe = func(self.right)
        if maybe.is_nothing():
            logger.debug("map_maybe produced nothing, dropping left value %r", self.left)
            return maybe
        left = self.left
        return maybe.map(lambda value: Pair(left, value))

    def map_result(self, func: Callable[[B], Result[C, E]]) -> Result[Pair[A, C], E]:
        result = func(self.right)
        if result.is_err():
            logger.debug(
                "map_result produced error %r, dropping left value %r",
                result.error,
                self.left,
            )
            return result
        left = self.left
        return result.map(lambda value: Pair(left, value))

    def map_task(
        self, func: Callable[[B], Awaitable[C]]
    ) -> Coroutine[Any, Any, Pair[A, C]]:
        """Return a coroutine resolving to ``Pair(left, await func(right))``.

        ``func`` is only called once the coroutine is awaited, so both a
        synchronous raise and a rejected awaitable surface at await time.
        """
        left, right = self.left, self.right

        async def run() -> Pair[A, C]:
            return await map_awaitable(lambda value: Pair(left, value), func(right))

        return run()

    def sequence(self: Pair[A, Mappable[C]]) -> Mappable[Pair[A, C]]:
        return self.traverse(_identity)

    def unwrap_maybe(self: Pair[A, Maybe[C]]) -> Maybe[Pair[A, C]]:
        return self.map_maybe(_identity)

    def unwrap_result(self: Pair[A, Result[C, E]]) -> Result[Pair[A, C], E]:
        return self.map_result(_identity)

    def unwrap_task(self: Pair[A, Awaitable[C]]) -> Coroutine[Any, Any, Pair[A, C]]:
        return self.map_task(_identity)

    # -- equality ---------------------------------------------------------

    def equals(
        self,
        predicate: Callable[[A, B, C, D], bool],
        other: Pair[C, D],
    ) -> bool:
        """Compare with ``other`` using only ``predicate(l1, r1, l2, r2)``."""
        return predicate(self.left, self.right, other.left, other.right)


def _identity(value: X) -> X:
    return value
