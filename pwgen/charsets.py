"""
Character classes: the four fixed alphabets a password can draw from.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class CharacterClass(str, Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.DIGIT: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Canonical order used to build the combined alphabet.
CLASS_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

ALL_CLASSES = frozenset(CLASS_ORDER)


def normalize_selection(
    selection: Iterable[CharacterClass | str] | None,
) -> tuple[CharacterClass, ...]:
    """
    Turn any iterable of classes (or their string values) into a
    de-duplicated tuple in canonical order.

    Raises ValueError for names that are not a known class.
    """
    if not selection:
        return ()

    wanted = set()
    for item in selection:
        if isinstance(item, CharacterClass):
            wanted.add(item)
        else:
            # "digits" / "Symbols" etc. are accepted from the CLI and GUI.
            name = str(item).strip().lower()
            if name.endswith("s") and name[:-1] in _BY_VALUE:
                name = name[:-1]
            if name not in _BY_VALUE:
                raise ValueError(f"Unknown character class: {item!r}")
            wanted.add(_BY_VALUE[name])

    return tuple(cls for cls in CLASS_ORDER if cls in wanted)


def combined_alphabet(selection: Iterable[CharacterClass | str]) -> str:
    """
    Concatenate the alphabets of the selected classes in canonical order.
    """
    return "".join(cls.alphabet for cls in normalize_selection(selection))


def class_of(char: str) -> CharacterClass | None:
    """
    Return the built-in class a character belongs to, or None when it is
    in none of the four alphabets.
    """
    for cls in CLASS_ORDER:
        if char in ALPHABETS[cls]:
            return cls
    return None


_BY_VALUE = {cls.value: cls for cls in CLASS_ORDER}
