"""Error types for casting raw data into pairs."""

from __future__ import annotations


class CastError(Exception):
    """Error raised when raw data cannot be turned into a valid pair.

    The raw value is kept for debugging. ``slot`` names the side that
    failed validation ("left" or "right"), or is None when the overall
    shape was wrong.
    """

    def __init__(self, message: str, raw_value: object, slot: str | None = None) -> None:
        self.raw_value = raw_value
        self.slot = slot
        super().__init__(message)

    def __repr__(self) -> str:
        return f"CastError({super().__repr__()}, raw_value={self.raw_value!r}, slot={self.slot!r})"
