"""
alchemix.core.temperature
=========================

Saturating temperatures for alchemical ingredients.

A temperature is a single signed value in ``[-MAX_VALUE, MAX_VALUE]``:
positive values are hotness, negative values are coldness. It is exposed as a
``(coldness, hotness)`` pair of which at most one side is non-zero.

Out-of-range input is never an error. Construction, heating and cooling clamp
their result to the nearest bound.
"""

from __future__ import annotations

import logging

try:
    from typing import Self, override
except ImportError:  # pragma: no cover - for Python < 3.12
    from typing_extensions import Self, override

logger = logging.getLogger(__name__)

MAX_VALUE = 10000


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return value


def _clamp(value: int) -> int:
    clamped = max(-MAX_VALUE, min(MAX_VALUE, value))
    if clamped != value:
        logger.debug("temperature %d saturated to %d", value, clamped)
    return clamped


class Temperature:
    """
    Immutable temperature.

    ``Temperature(coldness, hotness)`` accepts any pair: it is read as the net
    change ``hotness - coldness`` applied to zero, then clamped.
    """

    __slots__ = ("_value",)

    def __init__(self, coldness: int = 0, hotness: int = 0) -> None:
        coldness = _check_int(coldness, "coldness")
        hotness = _check_int(hotness, "hotness")
        self._value = _clamp(hotness - coldness)

    @classmethod
    def from_value(cls, value: int) -> Self:
        """Build from a signed value (positive is hot, negative is cold)."""
        return cls(0, _check_int(value, "temperature value"))

    @property
    def value(self) -> int:
        return self._value

    @property
    def coldness(self) -> int:
        return max(0, -self._value)

    @property
    def hotness(self) -> int:
        return max(0, self._value)

    def as_tuple(self) -> tuple[int, int]:
        return (self.coldness, self.hotness)

    def heat(self, amount: int) -> Self:
        """Return a hotter temperature; negative amounts count as zero."""
        amount = max(0, _check_int(amount, "heat amount"))
        return self.from_value(self._value + amount)

    def cool(self, amount: int) -> Self:
        """Return a colder temperature; negative amounts count as zero."""
        amount = max(0, _check_int(amount, "cool amount"))
        return self.from_value(self._value - amount)

    def compare(self, other: "Temperature") -> int:
        if not isinstance(other, Temperature):
            raise TypeError(f"Cannot compare Temperature with type {type(other)}")
        return (self._value > other._value) - (self._value < other._value)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Temperature") -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: "Temperature") -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: "Temperature") -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: "Temperature") -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._value >= other._value

    @override
    def __hash__(self) -> int:
        return hash(("Temperature", self._value))

    @override
    def __repr__(self) -> str:
        return f"Temperature(coldness={self.coldness}, hotness={self.hotness})"


__all__ = ["MAX_VALUE", "Temperature"]
