"""
alchemix.core.rational
======================

Exact rational numbers used as the universal measure of Alchemix.

A `Rational` is an immutable numerator/denominator pair that is always kept
in lowest terms with a positive denominator. Arithmetic never rounds: every
operation returns a new, normalized `Rational`. Plain `int` operands (and
`fractions.Fraction`) are accepted on either side of an operator.
"""

from __future__ import annotations

from fractions import Fraction
from math import gcd
from typing import Union

try:
    from typing import Self, override
except ImportError:  # pragma: no cover - for Python < 3.12
    from typing_extensions import Self, override

from alchemix.errors import ArithmeticOverflow, DivisionByZero

RationalLike = Union["Rational", int, Fraction]


class Rational:
    """
    Immutable exact fraction.

    Attributes
    ----------
    numerator : int
        Signed numerator, carries the sign of the number.
    denominator : int
        Strictly positive denominator, coprime with the numerator.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        # bool is an int subclass but never a meaningful numerator
        for part in (numerator, denominator):
            if isinstance(part, bool) or not isinstance(part, int):
                raise TypeError(
                    f"Rational parts must be integers, got {type(part).__name__}"
                )
        if denominator == 0:
            raise DivisionByZero("denominator of a rational may not be zero")

        divisor = gcd(abs(numerator), abs(denominator))
        sign = -1 if denominator < 0 else 1
        self._numerator = sign * numerator // divisor
        self._denominator = abs(denominator) // divisor

    # --- Construction helpers ---
    @classmethod
    def from_fraction(cls, value: Fraction) -> Self:
        return cls(value.numerator, value.denominator)

    @classmethod
    def _coerce(cls, value: object) -> "Rational | None":
        if isinstance(value, Rational):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls(value, 1)
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        return None

    # --- Accessors ---
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def is_zero(self) -> bool:
        return self._numerator == 0

    def as_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    # --- Arithmetic ---
    def __add__(self, other: RationalLike) -> "Rational":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._denominator + self._denominator * o._numerator,
            self._denominator * o._denominator,
        )

    def __radd__(self, other: RationalLike) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: RationalLike) -> "Rational":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._denominator - self._denominator * o._numerator,
            self._denominator * o._denominator,
        )

    def __rsub__(self, other: RationalLike) -> "Rational":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o.__sub__(self)

    def __mul__(self, other: RationalLike) -> "Rational":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._numerator,
            self._denominator * o._denominator,
        )

    def __rmul__(self, other: RationalLike) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: RationalLike) -> "Rational":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o.is_zero:
            raise DivisionByZero(f"cannot divide {self} by zero")
        return Rational(
            self._numerator * o._denominator,
            self._denominator * o._numerator,
        )

    def __rtruediv__(self, other: RationalLike) -> "Rational":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o.__truediv__(self)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    # Named spellings of the operators above.
    add = __add__
    subtract = __sub__
    multiply = __mul__
    divide = __truediv__

    # --- Ordering ---
    def compare(self, other: RationalLike) -> int:
        """Return -1, 0 or 1 as this value is below, equal to or above ``other``."""
        diff = self - Rational._require(other)
        return (diff._numerator > 0) - (diff._numerator < 0)

    @classmethod
    def _require(cls, other: object) -> "Rational":
        o = cls._coerce(other)
        if o is None:
            raise TypeError(f"Cannot compare Rational with type {type(other)}")
        return o

    @override
    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._numerator == o._numerator and self._denominator == o._denominator

    def __lt__(self, other: RationalLike) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: RationalLike) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: RationalLike) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: RationalLike) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    @override
    def __hash__(self) -> int:
        # Same hash as the equal int / Fraction.
        return hash(self.as_fraction())

    def __bool__(self) -> bool:
        return self._numerator != 0

    # --- Conversions ---
    def __int__(self) -> int:
        """Truncate toward zero."""
        whole = abs(self._numerator) // self._denominator
        return whole if self._numerator >= 0 else -whole

    def __float__(self) -> float:
        try:
            return self._numerator / self._denominator
        except OverflowError as exc:
            raise ArithmeticOverflow(
                f"{self} is too large to be represented as a float"
            ) from exc

    @override
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    @override
    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"


ZERO = Rational(0)
ONE = Rational(1)

__all__ = ["Rational", "RationalLike", "ZERO", "ONE"]
