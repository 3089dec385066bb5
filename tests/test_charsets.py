"""Tests for the character class alphabets and selection helpers."""

import pytest

from pwgen.charsets import (
    ALPHABETS,
    CLASS_ORDER,
    CharacterClass,
    class_of,
    combined_alphabet,
    normalize_selection,
)


def test_alphabets_are_disjoint():
    seen = set()
    for cls in CLASS_ORDER:
        chars = set(ALPHABETS[cls])
        assert chars, f"{cls} alphabet is empty"
        assert not chars & seen
        seen |= chars


def test_alphabets_have_no_duplicates():
    for alphabet in ALPHABETS.values():
        assert len(set(alphabet)) == len(alphabet)


def test_symbol_alphabet_has_no_alphanumerics():
    assert not any(c.isalnum() for c in CharacterClass.SYMBOL.alphabet)


def test_normalize_orders_and_dedupes():
    sel = [CharacterClass.SYMBOL, CharacterClass.UPPERCASE, CharacterClass.SYMBOL]
    assert normalize_selection(sel) == (CharacterClass.UPPERCASE, CharacterClass.SYMBOL)


def test_normalize_accepts_names():
    assert normalize_selection({"digits", "Lowercase"}) == (
        CharacterClass.LOWERCASE,
        CharacterClass.DIGIT,
    )


@pytest.mark.parametrize("selection", [None, [], set(), ()])
def test_normalize_empty(selection):
    assert normalize_selection(selection) == ()


def test_normalize_rejects_unknown_name():
    with pytest.raises(ValueError):
        normalize_selection(["emoji"])


def test_combined_alphabet_follows_canonical_order():
    combined = combined_alphabet([CharacterClass.DIGIT, CharacterClass.UPPERCASE])
    assert combined == ALPHABETS[CharacterClass.UPPERCASE] + ALPHABETS[CharacterClass.DIGIT]


def test_class_of():
    assert class_of("Q") is CharacterClass.UPPERCASE
    assert class_of("q") is CharacterClass.LOWERCASE
    assert class_of("7") is CharacterClass.DIGIT
    assert class_of("#") is CharacterClass.SYMBOL
    assert class_of(" ") is None
