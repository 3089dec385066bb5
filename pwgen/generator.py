"""
Password generator: guaranteed class coverage, random fill, shuffle.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Protocol

from .charsets import CharacterClass, combined_alphabet, normalize_selection

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """
    Anything that can draw an integer uniformly from range(stop).

    The ``random`` module, ``random.Random``, ``random.SystemRandom`` and
    ``pwgen.sources.QuantumRandom`` all qualify.
    """

    def randrange(self, stop: int) -> int: ...


class PasswordGeneratorError(ValueError):
    """Base class for every error raised by pwgen."""


class InvalidSelectionError(PasswordGeneratorError):
    """No character class (or an unknown one) was selected."""


class InvalidLengthError(PasswordGeneratorError):
    """Requested length cannot hold one character of each selected class."""


def _pick(alphabet: str, rng: RandomSource) -> str:
    return alphabet[rng.randrange(len(alphabet))]


def shuffle_chars(chars: list[str], rng: RandomSource) -> None:
    """
    In-place Fisher-Yates shuffle driven by ``rng.randrange``.
    """
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def generate(
    length: int,
    selection: Iterable[CharacterClass | str],
    rng: RandomSource | None = None,
) -> str:
    """
    Generate a password of exactly ``length`` characters.

    - One character is drawn from every selected class, so each class
      appears at least once.
    - The remaining positions are drawn with replacement from the
      combined alphabet of the selection.
    - The whole sequence is shuffled so the guaranteed characters do not
      sit at the front.

    Raises InvalidSelectionError for an empty selection and
    InvalidLengthError when ``length`` is smaller than the number of
    selected classes.
    """
    try:
        classes = normalize_selection(selection)
    except ValueError as exc:
        raise InvalidSelectionError(str(exc)) from exc

    if not classes:
        raise InvalidSelectionError("Select at least one character class.")

    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"Length must be an integer, got {length!r}.")
    if length < 1:
        raise InvalidLengthError(f"Length must be at least 1, got {length}.")
    if length < len(classes):
        raise InvalidLengthError(
            f"Length {length} is too short for {len(classes)} selected "
            "character classes; each class needs at least one character."
        )

    rng = rng if rng is not None else random
    alphabet = combined_alphabet(classes)

    chars = [_pick(cls.alphabet, rng) for cls in classes]
    for _ in range(length - len(chars)):
        chars.append(_pick(alphabet, rng))

    shuffle_chars(chars, rng)

    logger.debug(
        "Generated password: length=%d classes=%s pool=%d",
        length,
        ",".join(cls.value for cls in classes),
        len(alphabet),
    )
    return "".join(chars)
