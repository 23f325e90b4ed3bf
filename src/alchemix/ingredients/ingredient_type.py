"""
alchemix.ingredients.ingredient_type
====================================

Ingredient types: what an ingredient *is*, independent of how much of it
there is.

A type is made of one or more component names (several names make a
mixture), a standard state and a standard temperature. Mixtures may also be
given a special name, the only part of a type that can change after
construction.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from alchemix.core.temperature import Temperature
from alchemix.errors import IllegalSpecialNameAssignment, InvalidComponents
from alchemix.ingredients.name import Name
from alchemix.units.registry import State

logger = logging.getLogger(__name__)

NameLike = Union[Name, str]


def _as_name(value: NameLike) -> Name:
    return value if isinstance(value, Name) else Name(value)


class IngredientType:
    """
    Parameters
    ----------
    components : Name, str, or iterable of Name or str
        Component names, in the order given. Strings are validated as `Name`.
        A single name builds a pure type.
    state : State
        The standard state of the ingredient.
    temperature : Temperature
        The standard temperature of the ingredient.

    Raises
    ------
    InvalidComponents
        If ``components`` is empty.
    InvalidNameFormat
        If a string component is not a valid name.
    """

    def __init__(
        self,
        components: Union[NameLike, Iterable[NameLike]],
        state: State,
        temperature: Temperature,
    ) -> None:
        if isinstance(components, (str, Name)):
            # a lone name is a pure type, not an iterable of characters
            components = (components,)
        names = tuple(_as_name(c) for c in components)
        if not names:
            raise InvalidComponents(names)
        if not isinstance(state, State):
            raise TypeError(f"state must be a State, got {type(state).__name__}")
        if not isinstance(temperature, Temperature):
            raise TypeError(
                f"temperature must be a Temperature, got {type(temperature).__name__}"
            )
        self._components = names
        self._state = state
        self._temperature = temperature
        self._special_name: Optional[Name] = None

    @classmethod
    def from_name(cls, name: NameLike, state: State, temperature: Temperature) -> "IngredientType":
        """Build a pure (single-component) type."""
        return cls((name,), state, temperature)

    @property
    def components(self) -> tuple[Name, ...]:
        return self._components

    @property
    def state(self) -> State:
        return self._state

    @property
    def temperature(self) -> Temperature:
        return self._temperature

    @property
    def special_name(self) -> Optional[Name]:
        return self._special_name

    @property
    def has_special_name(self) -> bool:
        return self._special_name is not None

    @property
    def is_mixture(self) -> bool:
        return len(self._components) > 1

    def set_special_name(self, name: NameLike) -> None:
        """Set or replace the special name of a mixture."""
        if not self.is_mixture:
            raise IllegalSpecialNameAssignment(self)
        self._special_name = _as_name(name)
        logger.debug("special name %r given to %r", self._special_name.text, self.simple_name())

    def simple_name(self) -> str:
        """
        The component-based name.

        Pure types use their only component. Mixtures list their components
        in lexicographic order: ``"Mint mixed with Water"``,
        ``"Beer mixed with Mint, Salt and Water"``.
        """
        if not self.is_mixture:
            return self._components[0].text

        first, *rest = sorted(self._components)
        if len(rest) == 1:
            tail = rest[0].text
        else:
            tail = ", ".join(n.text for n in rest[:-1]) + " and " + rest[-1].text
        return f"{first.text} mixed with {tail}"

    def full_name(self, temperature: Optional[Temperature] = None) -> str:
        """
        The display name.

        With a special name this is ``"<special> (<simple name>)"``. Otherwise
        it is the simple name, prefixed with "Cooled " or "Heated " when
        ``temperature`` is below or above the standard temperature.
        """
        if self._special_name is not None:
            return f"{self._special_name.text} ({self.simple_name()})"

        prefix = ""
        if temperature is not None:
            if temperature < self._temperature:
                prefix = "Cooled "
            elif temperature > self._temperature:
                prefix = "Heated "
        return prefix + self.simple_name()

    def __repr__(self) -> str:
        names = ", ".join(repr(n.text) for n in self._components)
        return f"IngredientType([{names}], {self._state}, {self._temperature!r})"


__all__ = ["IngredientType", "NameLike"]
