"""Kernel layer - pure abstractions for pairkit."""

from pairkit.kernel.containers import (
    NOTHING,
    Err,
    Mappable,
    Maybe,
    Nothing,
    Ok,
    Result,
    Some,
    from_optional,
    map_awaitable,
    nothing,
    some,
)
from pairkit.kernel.pair import Pair

__all__ = [
    "Pair",
    # Containers
    "Mappable",
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    "some",
    "nothing",
    "from_optional",
    "Result",
    "Ok",
    "Err",
    "map_awaitable",
]
