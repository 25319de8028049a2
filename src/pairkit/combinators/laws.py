"""Algebraic laws of pair combinators, as executable checks.

Pairs satisfy the following laws:

1. Identity: map(identity)(p) == p and map_both(identity, identity)(p) == p
2. Composition: map(g)(map(f)(p)) == map(g . f)(p)
3. Swap is an involution: swap(swap(p)) == p
4. Branch/merge round trip: merge(first)(branch(x)) == merge(second)(branch(x)) == x
5. branch_with decomposes: branch_with(f, g)(x) == from_(f(x), g(x))
6. Extend keeps left: extend(f)(p).left == p.left
7. map_n is plain application on right values, with p1.left propagated
8. Unwrapping is traversal with identity: unwrap_maybe(p) == map_maybe(identity)(p)

Each check returns a bool so it can be asserted directly or fed to a
property-based runner.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pairkit.kernel import Maybe, Pair

from . import ops

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


def identity(value: A) -> A:
    return value


def identity_law(pair: Pair[A, B]) -> bool:
    return (
        ops.map_(identity)(pair) == pair
        and ops.map_both(identity, identity)(pair) == pair
    )


def composition_law(pair: Pair[A, B], f: Callable[[B], C], g: Callable[[C], D]) -> bool:
    chained = ops.map_(g)(ops.map_(f)(pair))
    composed = ops.map_(lambda value: g(f(value)))(pair)
    return chained == composed


def swap_involution(pair: Pair[A, B]) -> bool:
    return ops.swap(ops.swap(pair)) == pair


def branch_merge_round_trip(value: A) -> bool:
    branched = ops.branch(value)
    return (
        ops.merge(lambda a, _: a)(branched) == value
        and ops.merge(lambda _, b: b)(branched) == value
    )


def branch_with_decomposes(value: A, f: Callable[[A], B], g: Callable[[A], C]) -> bool:
    return ops.branch_with(f, g)(value) == ops.from_(f(value), g(value))


def extend_keeps_left(pair: Pair[A, B], f: Callable[[A, B], C]) -> bool:
    return ops.extend(f)(pair).left == pair.left


def map_n_applies(func: Callable[..., Any], *pairs: Pair[Any, Any]) -> bool:
    combined = ops.map_n(func, *pairs)
    return (
        combined.right == func(*(p.right for p in pairs))
        and combined.left == pairs[0].left
    )


def unwrap_is_identity_traversal(pair: Pair[A, Maybe[B]]) -> bool:
    return ops.unwrap_maybe(pair) == ops.map_maybe(identity)(pair)
