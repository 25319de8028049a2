from .combinators import (
    and_map,
    and_map_both,
    and_then,
    and_then_both,
    branch,
    branch_with,
    compose,
    equals,
    extend,
    from_,
    map2,
    map3,
    map4,
    map5,
    map6,
    map_,
    map_both,
    map_both2,
    map_both3,
    map_both4,
    map_both5,
    map_both6,
    map_both_n,
    map_maybe,
    map_n,
    map_result,
    map_task,
    merge,
    modify,
    swap,
)
from .kernel import NOTHING, Err, Maybe, Nothing, Ok, Pair, Result, Some
from .structured import CastError, PairLayout, cast_pair, dump_pair

__all__ = [
    # Core
    "Pair",
    # Containers
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    "Result",
    "Ok",
    "Err",
    # Combinators
    "from_",
    "branch",
    "branch_with",
    "merge",
    "map_",
    "map_both",
    "extend",
    "modify",
    "swap",
    "and_map",
    "and_map_both",
    "map_n",
    "map2",
    "map3",
    "map4",
    "map5",
    "map6",
    "map_both_n",
    "map_both2",
    "map_both3",
    "map_both4",
    "map_both5",
    "map_both6",
    "and_then",
    "and_then_both",
    "map_maybe",
    "map_result",
    "map_task",
    "equals",
    "compose",
    # Structured
    "CastError",
    "PairLayout",
    "cast_pair",
    "dump_pair",
]
