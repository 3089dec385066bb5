"""
Strength scorer: length and class diversity mapped to a three-level tier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class StrengthTier(Enum):
    # (label, css class, descriptive minimum length)
    WEAK = ("Weak", "weak", 0)
    MEDIUM = ("Medium", "medium", 8)
    STRONG = ("Strong", "strong", 12)

    def __init__(self, label: str, css_class: str, min_length: int) -> None:
        self.label = label
        self.css_class = css_class
        self.min_length = min_length

    def __str__(self) -> str:
        return self.label


_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
# Anything outside ASCII letters and digits: symbols, spaces, unicode.
_OTHER = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class StrengthReport:
    length: int
    length_score: int
    diversity_score: int
    total_score: int
    tier: StrengthTier


def _length_score(length: int) -> int:
    if length >= 12:
        return 2
    if length >= 8:
        return 1
    return 0


def score_details(password: str | None) -> StrengthReport:
    """
    Score a password and keep the intermediate values.

    The tier is decided in order: Strong needs a total of 5 and at least
    12 characters, Medium a total of 3 and at least 8 characters,
    anything else is Weak.
    """
    if not password:
        return StrengthReport(0, 0, 0, 0, StrengthTier.WEAK)

    length = len(password)
    length_score = _length_score(length)
    diversity_score = sum(
        1 for pattern in (_UPPER, _LOWER, _DIGIT, _OTHER) if pattern.search(password)
    )
    total = length_score + diversity_score

    if total >= 5 and length >= 12:
        tier = StrengthTier.STRONG
    elif total >= 3 and length >= 8:
        tier = StrengthTier.MEDIUM
    else:
        tier = StrengthTier.WEAK

    return StrengthReport(length, length_score, diversity_score, total, tier)


def score(password: str | None) -> StrengthTier:
    """Classify ``password``; never raises, empty input is Weak."""
    return score_details(password).tier
