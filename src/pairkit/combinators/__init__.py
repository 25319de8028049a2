"""Combinators - point-free pair operations and their laws."""

from .ops import (
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
    from_tuple,
    left,
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
    map_left,
    map_maybe,
    map_n,
    map_result,
    map_task,
    merge,
    modify,
    right,
    swap,
    to_tuple,
    traverse,
    unwrap,
    unwrap_maybe,
    unwrap_result,
    unwrap_task,
)

__all__ = [
    # Construction
    "from_",
    "from_tuple",
    "branch",
    "branch_with",
    # Extraction
    "left",
    "right",
    "merge",
    "to_tuple",
    # Mapping
    "map_",
    "map_left",
    "map_both",
    "extend",
    "modify",
    "swap",
    # Applicative
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
    # Chaining
    "and_then",
    "and_then_both",
    # Traversal
    "traverse",
    "map_maybe",
    "map_result",
    "map_task",
    "unwrap",
    "unwrap_maybe",
    "unwrap_result",
    "unwrap_task",
    # Equality
    "equals",
    "compose",
]
