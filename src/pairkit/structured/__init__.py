"""Structured validation of raw data into pairs.

Importing this package registers the Pair.cast() and Pair.dump() extensions.
"""

# Import pair_ext to register capabilities
from . import pair_ext  # noqa: F401
from .cast import PairSchema, cast_pair, dump_pair, make_pair_caster
from .config import DEFAULT_LAYOUT, PairLayout
from .errors import CastError
from .schema import FunctionSchema, PydanticSchema, SlotSchema

__all__ = [
    "CastError",
    "SlotSchema",
    "FunctionSchema",
    "PydanticSchema",
    "PairSchema",
    "PairLayout",
    "DEFAULT_LAYOUT",
    "cast_pair",
    "make_pair_caster",
    "dump_pair",
]
