"""
alchemix.core.quantity
======================

Defines `Quantity`, an integer amount of an alchemical `Unit`.

A quantity keeps the amount and unit it was written with, but equality,
ordering and hashing use its exact value in Spoons (the base unit), so
``Quantity(2, VIAL) == Quantity(10, SPOON)``. Use `same_representation` when
the written form matters.

The module also provides `can_hold`, the capacity predicate used by
ingredient containers.
"""

from __future__ import annotations

from alchemix.core.rational import Rational
from alchemix.errors import InvalidAmount
from alchemix.units.registry import BASE_UNIT, BULK_UNIT, State, Unit


def _format_rational(value: Rational) -> str:
    # whole numbers print without a denominator
    if value.denominator == 1:
        return str(value.numerator)
    return str(value)


class Quantity:
    """
    An exact amount of some unit.

    Attributes
    ----------
    amount : int
        Non-negative number of units.
    unit : Unit
        The unit the amount is expressed in.
    """
    __slots__ = ["_amount", "_unit"]

    def __init__(self, amount: int, unit: Unit) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidAmount(amount)
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")
        self._amount = amount
        self._unit = unit

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def unit(self) -> Unit:
        return self._unit

    # --- Conversions ---
    def base_value(self) -> Rational:
        """Exact value in Spoons."""
        return Rational(self._amount) * self._unit.value

    def bulk_value(self) -> Rational:
        """Exact value in Storerooms."""
        return self.base_value() / BULK_UNIT.value

    def to(self, unit: Unit) -> Rational:
        """Exact value expressed in ``unit`` (may be fractional)."""
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")
        return self.base_value() / unit.value

    # --- Comparison ---
    def _check_comparable(self, other: object) -> "Quantity":
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot compare Quantity with type {type(other)}")
        return other

    def compare(self, other: "Quantity") -> int:
        return self.base_value().compare(self._check_comparable(other).base_value())

    def represents_same_as(self, other: "Quantity") -> bool:
        """True when both quantities measure the same amount, whatever their units."""
        return self.base_value() == self._check_comparable(other).base_value()

    def same_representation(self, other: "Quantity") -> bool:
        """True when both quantities were written with the same amount and unit."""
        other = self._check_comparable(other)
        return self._amount == other._amount and self._unit == other._unit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.base_value() == other.base_value()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Equal base values hash equal, matching __eq__.
        return hash(self.base_value())

    def __repr__(self) -> str:
        return f"Quantity({self._amount}, {self._unit.name})"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Quantity objects.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            The quantity as written, e.g. ``'2 Vial'``.
        "base"
            The exact value in Spoons, e.g. ``'10 Spoon'`` or ``'5/8 Spoon'``.
        "bulk"
            The exact value in Storerooms, e.g. ``'1/630 Storeroom'``.

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "native", "base" or "bulk".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return f"{self._amount} {self._unit.name}"
        if spec == "base":
            return f"{_format_rational(self.base_value())} {BASE_UNIT.name}"
        if spec == "bulk":
            return f"{_format_rational(self.bulk_value())} {BULK_UNIT.name}"
        raise ValueError("Unknown format spec; use '', 'native', 'base' or 'bulk'")

    def __str__(self) -> str:
        return format(self)


def can_hold(state: State, quantity: Quantity, capacity: Quantity) -> bool:
    """
    Whether a container of ``capacity`` may hold ``quantity`` of an ingredient
    in ``state``: the capacity unit must be representative for the state and
    the capacity must be at least the quantity.
    """
    return state.is_representative(capacity.unit) and capacity >= quantity


__all__ = ["Quantity", "can_hold"]
