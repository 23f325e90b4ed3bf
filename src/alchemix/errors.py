"""
alchemix.errors
===============

Exception hierarchy for the Alchemix library.

Every violation raised by the library derives from `AlchemyError` and from the
builtin exception a generic caller would expect (`ValueError`,
`ZeroDivisionError`, ...), so code written against either keeps working.
Each exception carries the offending value(s) as attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from alchemix.ingredients.ingredient_type import IngredientType
    from alchemix.units.registry import State, Unit


class AlchemyError(Exception):
    """Base class for all errors raised by alchemix."""


class DivisionByZero(AlchemyError, ZeroDivisionError):
    """A rational was built with a zero denominator or divided by zero."""


class ArithmeticOverflow(AlchemyError, OverflowError):
    """An exact value cannot be represented in the requested target type."""


class InvalidAmount(AlchemyError, ValueError):
    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(
            f"quantity amount must be a non-negative integer, got {amount!r}"
        )


class InvalidNameFormat(AlchemyError, ValueError):
    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"invalid ingredient name: {name!r}")


class InvalidComponents(AlchemyError, ValueError):
    def __init__(self, components: Any) -> None:
        self.components = components
        super().__init__("an ingredient type needs at least one name component")


class IllegalSpecialNameAssignment(AlchemyError, ValueError):
    """A special name was assigned to an ingredient type that is not a mixture."""

    def __init__(self, ingredient_type: "IngredientType") -> None:
        self.ingredient_type = ingredient_type
        super().__init__(
            f"cannot give a special name to pure ingredient type "
            f"{ingredient_type.simple_name()!r}"
        )


class NonRepresentativeUnit(AlchemyError, ValueError):
    """A quantity's unit cannot express amounts of the paired state."""

    def __init__(self, state: "State", unit: "Unit") -> None:
        self.state = state
        self.unit = unit
        super().__init__(f"unit '{unit.name}' is not representative for state '{state}'")


class UnknownUnit(AlchemyError, KeyError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"Unknown unit symbol: {self.symbol}"


__all__ = [
    "AlchemyError",
    "ArithmeticOverflow",
    "DivisionByZero",
    "IllegalSpecialNameAssignment",
    "InvalidAmount",
    "InvalidComponents",
    "InvalidNameFormat",
    "NonRepresentativeUnit",
    "UnknownUnit",
]
