"""
alchemix.ingredients.name
=========================

Validated ingredient names.

A name is one or more words separated by single spaces. Every word starts
with a capital letter followed by lowercase letters or apostrophes: at least
one of them when the name has several words, at least two for a single-word
name. Words listed in `DISALLOWED_WORDS` are reserved for the prefixes added
to heated or cooled ingredients and are rejected.
"""

from __future__ import annotations

import re
from typing import Pattern

from alchemix.errors import InvalidNameFormat

DISALLOWED_WORDS: tuple[str, ...] = ("Heated", "Cooled")

DEFAULT_NAME = "Water"

_MULTI_WORD_RE: Pattern[str] = re.compile(r"[A-Z][a-z']+")
_SINGLE_WORD_RE: Pattern[str] = re.compile(r"[A-Z][a-z']{2,}")


class Name:
    __slots__ = ("_text",)

    def __init__(self, text: str = DEFAULT_NAME) -> None:
        if not self.is_valid(text):
            raise InvalidNameFormat(text)
        self._text = text

    @classmethod
    def default(cls) -> "Name":
        """The bootstrap name, "Water"."""
        return cls(DEFAULT_NAME)

    @staticmethod
    def is_valid(text: object) -> bool:
        if not isinstance(text, str):
            return False
        words = text.split(" ")
        pattern = _MULTI_WORD_RE if len(words) > 1 else _SINGLE_WORD_RE
        return all(
            word not in DISALLOWED_WORDS and pattern.fullmatch(word) is not None
            for word in words
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._text.split(" "))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text == other._text

    def __lt__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text < other._text

    def __le__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text <= other._text

    def __gt__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text > other._text

    def __ge__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text >= other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"Name({self._text!r})"

    def __str__(self) -> str:
        return self._text


__all__ = ["DEFAULT_NAME", "DISALLOWED_WORDS", "Name"]
