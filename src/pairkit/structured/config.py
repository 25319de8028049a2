"""Layout configuration for pair casting and dumping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PairLayout:
    """How a pair is represented as plain data.

    Attributes:
        left_key: Mapping key holding the left value.
        right_key: Mapping key holding the right value.
        accept_sequences: Whether a two-item list or tuple is accepted when casting.
    """

    left_key: str = "left"
    right_key: str = "right"
    accept_sequences: bool = True

    def __post_init__(self) -> None:
        if self.left_key == self.right_key:
            raise ValueError("left_key and right_key must differ")


DEFAULT_LAYOUT = PairLayout()
