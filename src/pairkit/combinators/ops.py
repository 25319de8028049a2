"""Point-free pair combinators.

Each unary operation takes its configuration first and returns a function of
the pair, so operations compose as plain callables:

    pipeline = compose(map_(str.upper), swap)
    pipeline(Pair(1, "a"))  # Pair("A", 1)

The n-ary family (map2..map6, map_both2..map_both6) is derived from the two
binary primitives, and_map and and_map_both.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Sequence
from functools import reduce
from typing import Any, TypeVar

from pairkit.kernel import Maybe, Mappable, Pair, Result

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
X = TypeVar("X")

PairFn = Callable[[Pair[Any, Any]], Any]


# -- construction ---------------------------------------------------------

def from_(left: A, right: B) -> Pair[A, B]:
    return Pair(left, right)


def from_tuple(values: Sequence[Any]) -> Pair[Any, Any]:
    return Pair.from_tuple(values)


def branch(value: A) -> Pair[A, A]:
    return Pair.branch(value)


def branch_with(
    on_left: Callable[[X], A],
    on_right: Callable[[X], B],
) -> Callable[[X], Pair[A, B]]:
    """Split one value into a pair through two functions.

    branch_with(f, g)(x) == from_(f(x), g(x))
    """
    def _run(value: X) -> Pair[A, B]:
        return Pair.branch_with(on_left, on_right, value)

    return _run


# -- extraction -----------------------------------------------------------

def left(pair: Pair[A, B]) -> A:
    return pair.left


def right(pair: Pair[A, B]) -> B:
    return pair.right


def to_tuple(pair: Pair[A, B]) -> tuple[A, B]:
    return pair.to_tuple()


def merge(func: Callable[[A, B], C]) -> Callable[[Pair[A, B]], C]:
    def _run(pair: Pair[A, B]) -> C:
        return pair.merge(func)

    return _run


# -- mapping --------------------------------------------------------------

def map_(func: Callable[[B], C]) -> Callable[[Pair[A, B]], Pair[A, C]]:
    def _run(pair: Pair[A, B]) -> Pair[A, C]:
        return pair.map(func)

    return _run


def map_left(func: Callable[[A], C]) -> Callable[[Pair[A, B]], Pair[C, B]]:
    def _run(pair: Pair[A, B]) -> Pair[C, B]:
        return pair.map_left(func)

    return _run


def map_both(
    on_left: Callable[[A], C],
    on_right: Callable[[B], D],
) -> Callable[[Pair[A, B]], Pair[C, D]]:
    def _run(pair: Pair[A, B]) -> Pair[C, D]:
        return pair.map_both(on_left, on_right)

    return _run


def extend(func: Callable[[A, B], C]) -> Callable[[Pair[A, B]], Pair[A, C]]:
    def _run(pair: Pair[A, B]) -> Pair[A, C]:
        return pair.extend(func)

    return _run


def modify(func: Callable[[A, B], C]) -> Callable[[Pair[A, B]], Pair[C, B]]:
    def _run(pair: Pair[A, B]) -> Pair[C, B]:
        return pair.modify(func)

    return _run


def swap(pair: Pair[A, B]) -> Pair[B, A]:
    return pair.swap()


# -- applicative ----------------------------------------------------------

def and_map(fn_pair: Pair[A, Callable[[C], D]], pair: Pair[Any, C]) -> Pair[A, D]:
    """Apply the function carried in ``fn_pair.right`` to ``pair.right``.

    The left value of the first argument is kept. Arguments are function pair
    first, value pair second, the reverse of the pipeline-style
    ``and_map(pair, fn_pair)``; map_n relies on this order to keep the left
    value of its first pair.
    """
    return fn_pair.and_map(pair)


def and_map_both(
    fn_pair: Pair[Callable[[A], C], Callable[[B], D]],
    pair: Pair[A, B],
) -> Pair[C, D]:
    return fn_pair.and_map_both(pair)


def _curry(func: Callable[..., Any], arity: int) -> Callable[[Any], Any]:
    """Turn an n-ary function into a chain of n unary functions."""
    def collect(args: tuple[Any, ...]) -> Callable[[Any], Any]:
        def take(value: Any) -> Any:
            gathered = args + (value,)
            if len(gathered) == arity:
                return func(*gathered)
            return collect(gathered)

        return take

    return collect(())


def map_n(func: Callable[..., C], *pairs: Pair[Any, Any]) -> Pair[Any, C]:
    """Combine the right values of any number of pairs with ``func``.

    Semantics:
        - Right of the result is ``func(p1.right, ..., pn.right)``
        - Left of the result is ``p1.left``; the other left values are dropped

    Raises:
        ValueError: If no pairs are given
    """
    if not pairs:
        raise ValueError("map_n needs at least one pair")

    first, *rest = pairs
    seed = first.map(_curry(func, len(pairs)))
    return reduce(and_map, rest, seed)


def map_both_n(
    on_left: Callable[..., C],
    on_right: Callable[..., D],
    *pairs: Pair[Any, Any],
) -> Pair[C, D]:
    """Combine all left values with ``on_left`` and all right values with ``on_right``.

    Both sides combine positionally over the same pairs, independently of
    each other.

    Raises:
        ValueError: If no pairs are given
    """
    if not pairs:
        raise ValueError("map_both_n needs at least one pair")

    first, *rest = pairs
    arity = len(pairs)
    seed = first.map_both(_curry(on_left, arity), _curry(on_right, arity))
    return reduce(and_map_both, rest, seed)


def map2(func: Callable[[Any, Any], C], p1: Pair, p2: Pair) -> Pair[Any, C]:
    return map_n(func, p1, p2)


def map3(func: Callable[[Any, Any, Any], C], p1: Pair, p2: Pair, p3: Pair) -> Pair[Any, C]:
    return map_n(func, p1, p2, p3)


def map4(
    func: Callable[[Any, Any, Any, Any], C],
    p1: Pair, p2: Pair, p3: Pair, p4: Pair,
) -> Pair[Any, C]:
    return map_n(func, p1, p2, p3, p4)


def map5(
    func: Callable[[Any, Any, Any, Any, Any], C],
    p1: Pair, p2: Pair, p3: Pair, p4: Pair, p5: Pair,
) -> Pair[Any, C]:
    return map_n(func, p1, p2, p3, p4, p5)


def map6(
    func: Callable[[Any, Any, Any, Any, Any, Any], C],
    p1: Pair, p2: Pair, p3: Pair, p4: Pair, p5: Pair, p6: Pair,
) -> Pair[Any, C]:
    return map_n(func, p1, p2, p3, p4, p5, p6)


def map_both2(
    on_left: Callable[[Any, Any], C],
    on_right: Callable[[Any, Any], D],
    p1: Pair, p2: Pair,
) -> Pair[C, D]:
    return map_both_n(on_left, on_right, p1, p2)


def map_both3(
    on_left: Callable[[Any, Any, Any], C],
    on_right: Callable[[Any, Any, Any], D],
    p1: Pair, p2: Pair, p3: Pair,
) -> Pair[C, D]:
    return map_both_n(on_left, on_right, p1, p2, p3)


def map_both4(
    on_left: Callable[[Any, Any, Any, Any], C],
    on_right: Callable[[Any, Any, Any, Any], D],
    p1: Pair, p2: Pair, p3: Pair, p4: Pair,
) -> Pair[C, D]:
    return map_both_n(on_left, on_right, p1, p2, p3, p4)


def map_both5(
    on_left: Callable[[Any, Any, Any, Any, Any], C],
    on_right: Callable[[Any, Any, Any, Any, Any], D],
    p1: Pair, p2: Pair, p3: Pair, p4: Pair, p5: Pair,
) -> Pair[C, D]:
    return map_both_n(on_left, on_right, p1, p2, p3, p4, p5)


def map_both6(
    on_left: Callable[[Any, Any, Any, Any, Any, Any], C],
    on_right: Callable[[Any, Any, Any, Any, Any, Any], D],
    p1: Pair, p2: Pair, p3: Pair, p4: Pair, p5: Pair, p6: Pair,
) -> Pair[C, D]:
    return map_both_n(on_left, on_right, p1, p2, p3, p4, p5, p6)


# -- chaining -------------------------------------------------------------

def and_then(func: Callable[[B], Pair[C, D]]) -> Callable[[Pair[A, B]], Pair[C, D]]:
    """Chain into a new pair built from the right value.

    The pair returned by ``func`` replaces the input, left value included.
    """
    def _run(pair: Pair[A, B]) -> Pair[C, D]:
        return pair.and_then(func)

    return _run


def and_then_both(func: Callable[[A, B], Pair[C, D]]) -> Callable[[Pair[A, B]], Pair[C, D]]:
    def _run(pair: Pair[A, B]) -> Pair[C, D]:
        return pair.and_then_both(func)

    return _run


# -- traversal ------------------------------------------------------------

def traverse(func: Callable[[B], Mappable[C]]) -> Callable[[Pair[A, B]], Mappable[Pair[A, C]]]:
    def _run(pair: Pair[A, B]) -> Mappable[Pair[A, C]]:
        return pair.traverse(func)

    return _run


def map_maybe(func: Callable[[B], Maybe[C]]) -> Callable[[Pair[A, B]], Maybe[Pair[A, C]]]:
    def _run(pair: Pair[A, B]) -> Maybe[Pair[A, C]]:
        return pair.map_maybe(func)

    return _run


def map_result(
    func: Callable[[B], Result[C, E]],
) -> Callable[[Pair[A, B]], Result[Pair[A, C], E]]:
    def _run(pair: Pair[A, B]) -> Result[Pair[A, C], E]:
        return pair.map_result(func)

    return _run


def map_task(
    func: Callable[[B], Awaitable[C]],
) -> Callable[[Pair[A, B]], Coroutine[Any, Any, Pair[A, C]]]:
    def _run(pair: Pair[A, B]) -> Coroutine[Any, Any, Pair[A, C]]:
        return pair.map_task(func)

    return _run


def unwrap(pair: Pair[A, Mappable[C]]) -> Mappable[Pair[A, C]]:
    return pair.sequence()


def unwrap_maybe(pair: Pair[A, Maybe[C]]) -> Maybe[Pair[A, C]]:
    return pair.unwrap_maybe()


def unwrap_result(pair: Pair[A, Result[C, E]]) -> Result[Pair[A, C], E]:
    return pair.unwrap_result()


def unwrap_task(pair: Pair[A, Awaitable[C]]) -> Coroutine[Any, Any, Pair[A, C]]:
    return pair.unwrap_task()


# -- equality -------------------------------------------------------------

def equals(
    predicate: Callable[[A, B, C, D], bool],
) -> Callable[[Pair[A, B], Pair[C, D]], bool]:
    """Build a comparison that defers entirely to ``predicate(l1, r1, l2, r2)``."""
    def _run(first: Pair[A, B], second: Pair[C, D]) -> bool:
        return first.equals(predicate, second)

    return _run


# -- composition ----------------------------------------------------------

def compose(*steps: PairFn) -> PairFn:
    """Chain point-free steps left to right."""
    def _run(value: Any) -> Any:
        return reduce(lambda acc, step: step(acc), steps, value)

    return _run
