"""
Alchemix: exact quantities, units and ingredient types for alchemical recipes.

Alchemix models ingredients with exact rational amounts in a closed set of
units (Drops, Vials, Pinches, Storerooms, ...), saturating temperatures, and
validated, mixable ingredient types.
"""

from importlib import metadata as _metadata
from pathlib import Path

from alchemix.core.quantity import Quantity, can_hold
from alchemix.core.rational import Rational
from alchemix.core.temperature import MAX_VALUE, Temperature
from alchemix.errors import (
    AlchemyError,
    ArithmeticOverflow,
    DivisionByZero,
    IllegalSpecialNameAssignment,
    InvalidAmount,
    InvalidComponents,
    InvalidNameFormat,
    NonRepresentativeUnit,
    UnknownUnit,
)
from alchemix.ingredients.ingredient import AlchemicalIngredient
from alchemix.ingredients.ingredient_type import IngredientType
from alchemix.ingredients.name import Name
from alchemix.units.registry import State, Unit, is_representative

__author__ = "Alchemix contributors"
__license__ = "MIT"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _read_version(pyproject: Path = _PYPROJECT) -> str:
    import tomllib

    with open(pyproject, "rb") as f:
        return tomllib.load(f)["project"]["version"]


# Installed metadata first; a source checkout reads its own pyproject.toml.
try:
    __version__ = _metadata.version("alchemix")
except _metadata.PackageNotFoundError:
    __version__ = _read_version()

__all__ = [
    "__version__", "__author__", "__license__",
    "AlchemicalIngredient",
    "AlchemyError",
    "ArithmeticOverflow",
    "DivisionByZero",
    "IllegalSpecialNameAssignment",
    "IngredientType",
    "InvalidAmount",
    "InvalidComponents",
    "InvalidNameFormat",
    "MAX_VALUE",
    "Name",
    "NonRepresentativeUnit",
    "Quantity",
    "Rational",
    "State",
    "Temperature",
    "Unit",
    "UnknownUnit",
    "can_hold",
    "is_representative",
]
