"""
alchemix.ingredients.ingredient
===============================

An amount of some ingredient type, in a given state and at a current
temperature.
"""

from __future__ import annotations

import logging
from typing import Optional

from alchemix.core.quantity import Quantity, can_hold
from alchemix.core.temperature import Temperature
from alchemix.errors import NonRepresentativeUnit
from alchemix.ingredients.ingredient_type import IngredientType
from alchemix.ingredients.name import Name
from alchemix.units.registry import State

logger = logging.getLogger(__name__)


def default_type() -> IngredientType:
    """Water: liquid, standard temperature (0, 20)."""
    return IngredientType.from_name(Name.default(), State.LIQUID, Temperature(0, 20))


class AlchemicalIngredient:
    """
    Parameters
    ----------
    quantity : Quantity
        How much of the ingredient there is. Its unit must be representative
        for ``state``.
    ingredient_type : IngredientType, optional
        Defaults to Water.
    state : State, optional
        Defaults to the type's standard state.
    temperature : Temperature, optional
        Defaults to the type's standard temperature.

    Raises
    ------
    TypeError
        If ``quantity``, ``state`` or ``temperature`` has the wrong type.
    NonRepresentativeUnit
        If the quantity's unit cannot express amounts in ``state``.
    """

    def __init__(
        self,
        quantity: Quantity,
        ingredient_type: Optional[IngredientType] = None,
        state: Optional[State] = None,
        temperature: Optional[Temperature] = None,
    ) -> None:
        if not isinstance(quantity, Quantity):
            raise TypeError(f"quantity must be a Quantity, got {type(quantity).__name__}")
        if ingredient_type is None:
            ingredient_type = default_type()
        if state is None:
            state = ingredient_type.state
        if temperature is None:
            temperature = ingredient_type.temperature
        if not isinstance(state, State):
            raise TypeError(f"state must be a State, got {type(state).__name__}")
        if not isinstance(temperature, Temperature):
            raise TypeError(
                f"temperature must be a Temperature, got {type(temperature).__name__}"
            )

        if not state.is_representative(quantity.unit):
            raise NonRepresentativeUnit(state, quantity.unit)

        self._type = ingredient_type
        self._state = state
        self._quantity = quantity
        self._temperature = temperature

    @property
    def ingredient_type(self) -> IngredientType:
        return self._type

    @property
    def state(self) -> State:
        return self._state

    @property
    def quantity(self) -> Quantity:
        return self._quantity

    @property
    def temperature(self) -> Temperature:
        return self._temperature

    # --- Naming ---
    @property
    def simple_name(self) -> str:
        return self._type.simple_name()

    @property
    def special_name(self) -> Optional[Name]:
        return self._type.special_name

    @property
    def full_name(self) -> str:
        return self._type.full_name(self._temperature)

    # --- Temperature ---
    def heat(self, amount: int) -> None:
        self._set_temperature(self._temperature.heat(amount))

    def cool(self, amount: int) -> None:
        self._set_temperature(self._temperature.cool(amount))

    def _set_temperature(self, temperature: Temperature) -> None:
        logger.debug("%s: %r -> %r", self.simple_name, self._temperature, temperature)
        self._temperature = temperature

    def can_be_held_by(self, capacity: Quantity) -> bool:
        return can_hold(self._state, self._quantity, capacity)

    def __repr__(self) -> str:
        return (
            f"AlchemicalIngredient({self._quantity!r}, {self.full_name!r}, "
            f"{self._state}, {self._temperature!r})"
        )


__all__ = ["AlchemicalIngredient", "default_type"]
