from __future__ import annotations

import pytest

from pairkit import NOTHING, Pair, Some
from pairkit.combinators import laws, ops

SAMPLE_PAIRS = [
    Pair(0, 0),
    Pair("meta", 5),
    Pair(None, [1, 2]),
    Pair(Pair(1, 2), "nested"),
    Pair((), {"k": "v"}),
]


@pytest.mark.parametrize("pair", SAMPLE_PAIRS)
def test_identity(pair: Pair) -> None:
    assert laws.identity_law(pair)


@pytest.mark.parametrize("pair", SAMPLE_PAIRS)
def test_composition(pair: Pair) -> None:
    assert laws.composition_law(pair, repr, len)


@pytest.mark.parametrize("pair", SAMPLE_PAIRS)
def test_swap_involution(pair: Pair) -> None:
    assert laws.swap_involution(pair)


@pytest.mark.parametrize("value", [0, "x", None, (1, 2)])
def test_branch_merge_round_trip(value) -> None:
    assert laws.branch_merge_round_trip(value)


def test_branch_with_decomposes() -> None:
    assert laws.branch_with_decomposes("Elm", str.lower, len)
    assert laws.branch_with_decomposes(-3, abs, lambda x: x * x)


@pytest.mark.parametrize("pair", SAMPLE_PAIRS)
def test_extend_keeps_left(pair: Pair) -> None:
    assert laws.extend_keeps_left(pair, lambda a, b: (a, b))


def test_map_n_is_plain_application() -> None:
    pairs = [Pair("a", 1), Pair("b", 2), Pair("c", 3)]
    assert laws.map_n_applies(lambda x, y, z: x * y + z, *pairs)
    assert laws.map_n_applies(max, *pairs[:2])


@pytest.mark.parametrize("pair", [Pair("m", Some(1)), Pair("m", NOTHING)])
def test_unwrap_is_identity_traversal(pair: Pair) -> None:
    assert laws.unwrap_is_identity_traversal(pair)


@pytest.mark.parametrize("pair", SAMPLE_PAIRS)
def test_equals_delegates_fully(pair: Pair) -> None:
    other = Pair("x", "y")
    seen = []

    def predicate(*args):
        seen.append(args)
        return "sentinel"

    assert ops.equals(predicate)(pair, other) == "sentinel"
    assert seen == [(pair.left, pair.right, "x", "y")]
