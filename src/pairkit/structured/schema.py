"""Validators for the value held in one slot of a pair."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class SlotSchema(Protocol[T_co]):
    """What cast_pair needs from a slot validator.

    ``validate`` returns the converted value or raises; ``describe`` names
    the schema in CastError messages.
    """

    def validate(self, value: Any) -> T_co:
        ...

    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class FunctionSchema(SlotSchema[T]):
    """Slot validator backed by a conversion function such as ``int`` or ``str.upper``."""

    fn: Callable[[Any], T]
    name: str | None = None

    def validate(self, value: Any) -> T:
        return self.fn(value)

    def describe(self) -> str:
        return self.name or getattr(self.fn, "__qualname__", repr(self.fn))


@dataclass(frozen=True)
class PydanticSchema(SlotSchema[T]):
    """Slot validator backed by a pydantic ``TypeAdapter``.

    Accepts pydantic models as well as plain annotations such as ``int``
    or ``list[str]``.
    """

    model: Any
    _adapter: TypeAdapter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.model))

    def validate(self, value: Any) -> T:
        return self._adapter.validate_python(value)

    def describe(self) -> str:
        name = getattr(self.model, "__name__", None) or repr(self.model)
        return f"PydanticSchema({name})"
