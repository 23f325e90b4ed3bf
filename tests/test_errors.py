import pytest

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
from alchemix.units.registry import BOX, State


@pytest.mark.parametrize("exc, builtin", [
    (DivisionByZero, ZeroDivisionError),
    (ArithmeticOverflow, OverflowError),
    (InvalidAmount, ValueError),
    (InvalidNameFormat, ValueError),
    (InvalidComponents, ValueError),
    (IllegalSpecialNameAssignment, ValueError),
    (NonRepresentativeUnit, ValueError),
    (UnknownUnit, KeyError),
])
def test_errors_share_base_and_builtin(exc, builtin):
    assert issubclass(exc, AlchemyError)
    assert issubclass(exc, builtin)


def test_payloads_are_kept():
    assert InvalidAmount(-3).amount == -3
    assert InvalidNameFormat("ab").name == "ab"
    assert InvalidComponents(()).components == ()

    err = NonRepresentativeUnit(State.LIQUID, BOX)
    assert err.state is State.LIQUID
    assert err.unit is BOX
    assert "Box" in str(err) and "Liquid" in str(err)


def test_unknown_unit_message_is_readable():
    err = UnknownUnit("Cauldron")
    assert err.symbol == "Cauldron"
    assert str(err) == "Unknown unit symbol: Cauldron"
