# tests/conftest.py
import pytest

from alchemix.core.temperature import Temperature
from alchemix.ingredients.ingredient_type import IngredientType
from alchemix.units.registry import DEFAULT_REGISTRY as _ureg
from alchemix.units.registry import State, _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg

@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped registry for isolation per test."""
    return _bootstrap_default_registry()

@pytest.fixture
def water():
    return IngredientType.from_name("Water", State.LIQUID, Temperature(0, 20))

@pytest.fixture
def mint_water():
    return IngredientType(["Water", "Mint"], State.LIQUID, Temperature(0, 20))
