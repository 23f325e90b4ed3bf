"""
alchemix.units.registry
=======================

The fixed table of alchemical units and the physical states they measure.

- `Unit`: a named measure with an exact value expressed in Spoons (the base
  unit) and a flag telling whether it is a holdable container.
- `State`: Powder or Liquid, each with its ascending sequence of
  representative units.
- `UnitsRegistry`: name lookup over the table, tolerant of case and simple
  plurals ("vials", "Boxes"). The shared `DEFAULT_REGISTRY` is sealed once
  bootstrapped; nothing can be registered at runtime.

The table is built once at import time and never altered.
"""
from __future__ import annotations

import threading
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Dict, Iterable, Mapping, Optional, Tuple

from alchemix.core.rational import Rational
from alchemix.errors import UnknownUnit

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from alchemix.core.quantity import Quantity


@dataclass(frozen=True, slots=True)
class Unit:
    """
    An alchemical unit.

    Attributes
    ----------
    name : str
        Canonical name (e.g., "Spoon", "Vial", "Pinch").
    value : Rational
        Exact size of one of this unit, in Spoons.
    is_container : bool
        True for discrete vessels that can hold an ingredient (Vial, Box, ...),
        False for measures and bulk units (Drop, Pinch, Storeroom).
    """
    name: str
    value: Rational
    is_container: bool

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("unit name must not be empty")
        if not isinstance(self.value, Rational) or self.value <= 0:
            raise ValueError("unit value must be a positive Rational")

    def __rmul__(self, amount: int) -> "Quantity":
        # allows 3 * VIAL -> Quantity(3, VIAL)
        from alchemix.core.quantity import Quantity

        return Quantity(amount, self)

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Unit table
# ---------------------------------------------------------------------------
# Universal
SPOON     = Unit("Spoon",     Rational(1),     True)
STOREROOM = Unit("Storeroom", Rational(6300),  False)

# Liquid
DROP      = Unit("Drop",      Rational(1, 8),  False)
VIAL      = Unit("Vial",      Rational(5),     True)
BOTTLE    = Unit("Bottle",    Rational(15),    True)
JUG       = Unit("Jug",       Rational(105),   True)
BARREL    = Unit("Barrel",    Rational(1260),  True)

# Powder
PINCH     = Unit("Pinch",     Rational(1, 6),  False)
SACHET    = Unit("Sachet",    Rational(7),     True)
BOX       = Unit("Box",       Rational(42),    True)
SACK      = Unit("Sack",      Rational(126),   True)
CHEST     = Unit("Chest",     Rational(1260),  True)

BASE_UNIT = SPOON
BULK_UNIT = STOREROOM

ALL_UNITS: Tuple[Unit, ...] = (
    SPOON, STOREROOM,
    DROP, VIAL, BOTTLE, JUG, BARREL,
    PINCH, SACHET, BOX, SACK, CHEST,
)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class State(Enum):
    POWDER = "Powder"
    LIQUID = "Liquid"

    @property
    def representative_units(self) -> Tuple[Unit, ...]:
        """Units that can express amounts in this state, ascending by value."""
        return _REPRESENTATIVE_UNITS[self]

    def is_representative(self, unit: Unit) -> bool:
        return unit in _REPRESENTATIVE_UNITS[self]

    def __str__(self) -> str:
        return self.value


_REPRESENTATIVE_UNITS: Dict[State, Tuple[Unit, ...]] = {
    State.POWDER: (PINCH, SPOON, SACHET, BOX, SACK, CHEST, STOREROOM),
    State.LIQUID: (DROP, SPOON, VIAL, BOTTLE, JUG, BARREL, STOREROOM),
}


def _check_state_table() -> None:
    for state, units in _REPRESENTATIVE_UNITS.items():
        if BASE_UNIT not in units or BULK_UNIT not in units:
            raise ValueError(f"state {state} must include the base and bulk units")
        for smaller, larger in zip(units, units[1:]):
            if not smaller.value < larger.value:
                raise ValueError(
                    f"units of state {state} must be strictly ascending: "
                    f"'{smaller.name}' >= '{larger.name}'"
                )


_check_state_table()


def is_representative(state: State, unit: Unit) -> bool:
    """True iff ``unit`` may express quantities of an ingredient in ``state``."""
    return state.is_representative(unit)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
def normalize_symbol(s: str) -> str:
    """Normalize a user-provided unit name: NFC, trimmed, case-folded."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip()).casefold()


_ES_STEMS = ("x", "ch", "sh", "s")


def _singular_forms(key: str) -> Iterable[str]:
    # "vials" -> "vial", "boxes" -> "box", "pinches" -> "pinch"
    if key.endswith("es") and key[:-2].endswith(_ES_STEMS):
        yield key[:-2]
    elif key.endswith("s"):
        yield key[:-1]


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Name lookup for `Unit` objects.

    Registration happens during bootstrap only: once `seal` is called the
    registry is read-only and `register` raises `RuntimeError`.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Unit] = {}
        self._sealed = False

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    # -------------------------- public API ---------------------------------
    def register(self, unit: Unit) -> None:
        """Register a `Unit` under its canonical name."""
        # The lock wraps the whole check-and-set.
        with self._lock:
            if self._sealed:
                raise RuntimeError(
                    f"Cannot register unit '{unit.name}': the registry is sealed."
                )
            if unit.name in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register unit '{unit.name}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            key = normalize_symbol(unit.name)
            if key in self._units:
                raise ValueError(
                    f"Cannot register unit '{unit.name}': "
                    "a unit with this name already exists."
                )
            self._units[key] = unit

    def seal(self) -> None:
        with self._lock:
            self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except UnknownUnit:
            return False

    def get(self, symbol: str) -> Unit:
        """Lookup a unit by name, accepting any case and simple plurals.

        Raises `UnknownUnit` (a `KeyError`) if unknown.
        """
        key = normalize_symbol(symbol)
        with self._lock:
            unit = self._units.get(key)
            if unit is not None:
                return unit
            for singular in _singular_forms(key):
                unit = self._units.get(singular)
                if unit is not None:
                    return unit
        raise UnknownUnit(symbol)

    def all(self) -> Mapping[str, Unit]:
        with self._lock:
            return {unit.name: unit for unit in self._units.values()}

    def as_namespace(self) -> "UnitNamespace":
        return UnitNamespace(self)


class UnitNamespace:
    """Attribute access over a registry: ``u.Vial``, ``u("barrels")``."""

    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: UnitsRegistry) -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def __call__(self, spec: str) -> Unit:
        return self._reg.get(spec)

    def __getattr__(self, name: str) -> Unit:
        try:
            return self._reg.get(name)
        except UnknownUnit as e:
            # Unknown names look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._reg.all().keys()))


UnitNamespace._reserved_names = set(dir(UnitNamespace)) | {"_reg"}


# ---------------------------------------------------------------------------
# Bootstrap the default registry
# ---------------------------------------------------------------------------
def _bootstrap_default_registry(units: Optional[Iterable[Unit]] = None) -> UnitsRegistry:
    reg = UnitsRegistry()
    for unit in ALL_UNITS if units is None else units:
        reg.register(unit)
    reg.seal()
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "ALL_UNITS",
    "BARREL",
    "BASE_UNIT",
    "BOTTLE",
    "BOX",
    "BULK_UNIT",
    "CHEST",
    "DEFAULT_REGISTRY",
    "DROP",
    "JUG",
    "PINCH",
    "SACHET",
    "SACK",
    "SPOON",
    "STOREROOM",
    "State",
    "Unit",
    "UnitNamespace",
    "UnitsRegistry",
    "VIAL",
    "is_representative",
]
