import pytest

from alchemix.errors import InvalidNameFormat
from alchemix.ingredients.name import DISALLOWED_WORDS, Name


@pytest.mark.parametrize("text", [
    "Water",
    "Tea",
    "Mint",
    "Eye Of Newt",
    "Ox Tail",
    "Witch's Brew",
    "Dragon's Blood Extract",
])
def test_valid_names(text):
    assert Name(text).text == text
    assert Name.is_valid(text)


@pytest.mark.parametrize("text", [
    "ab",
    "Ox",
    "water",
    "WATER",
    "Heated",
    "Cooled",
    "Heated Water",
    "Mint Cooled",
    "Mint  Leaf",
    "Mint ",
    " Mint",
    "",
    "Mint-Leaf",
    "Mint2",
    "Eye of Newt",
    None,
    42,
])
def test_invalid_names_raise(text):
    assert not Name.is_valid(text)
    with pytest.raises(InvalidNameFormat) as info:
        Name(text)
    assert info.value.name == text


def test_disallowed_words_are_state_prefixes():
    assert DISALLOWED_WORDS == ("Heated", "Cooled")


def test_default_name_is_water():
    assert Name().text == "Water"
    assert Name.default() == Name("Water")


def test_words():
    assert Name("Eye Of Newt").words == ("Eye", "Of", "Newt")


def test_ordering_is_lexicographic():
    names = [Name("Water"), Name("Beer"), Name("Mint"), Name("Apple Juice")]
    assert [n.text for n in sorted(names)] == ["Apple Juice", "Beer", "Mint", "Water"]
    assert Name("Beer") < Name("Mint") <= Name("Mint")
    assert Name("Water") > Name("Tea") >= Name("Tea")


def test_equality_and_hash():
    assert Name("Mint") == Name("Mint")
    assert Name("Mint") != Name("Salt")
    assert len({Name("Mint"), Name("Mint")}) == 1
    assert (Name("Mint") == "Mint") is False


def test_str_and_repr():
    assert str(Name("Mint")) == "Mint"
    assert repr(Name("Mint")) == "Name('Mint')"
