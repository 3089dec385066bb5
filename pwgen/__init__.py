"""
pwgen: random passwords from selected character classes, with a
strength estimate.
"""

from .charsets import ALPHABETS, CLASS_ORDER, CharacterClass
from .config import ConfigError, DEFAULT_CONFIG, PasswordConfig
from .generator import (
    InvalidLengthError,
    InvalidSelectionError,
    PasswordGeneratorError,
    generate,
)
from .strength import StrengthReport, StrengthTier, score, score_details
from .cli import generate_password, generate_password_with_meta

__all__ = [
    "ALPHABETS",
    "CLASS_ORDER",
    "CharacterClass",
    "ConfigError",
    "DEFAULT_CONFIG",
    "PasswordConfig",
    "InvalidLengthError",
    "InvalidSelectionError",
    "PasswordGeneratorError",
    "generate",
    "StrengthReport",
    "StrengthTier",
    "score",
    "score_details",
    "generate_password",
    "generate_password_with_meta",
]
