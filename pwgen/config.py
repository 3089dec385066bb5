"""
Configuration for the pwgen password generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .charsets import CLASS_ORDER, CharacterClass
from .generator import PasswordGeneratorError

RANDOM_SOURCES = ("system", "secure", "quantum")


class ConfigError(PasswordGeneratorError):
    """Inconsistent configuration values."""


@dataclass
class PasswordConfig:
    # Desired password length in characters.
    password_length: int = 16

    # Bounds of the length slider / --length option.
    min_length: int = 4
    max_length: int = 64

    # Character classes enabled by default.
    selection: tuple[CharacterClass, ...] = field(
        default_factory=lambda: CLASS_ORDER
    )

    # "system" = random module, "secure" = SystemRandom,
    # "quantum" = qiskit simulator bits (see sources.py).
    random_source: str = "system"

    # Quantum source settings.
    # NOTE: Keep num_qubits <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    entropy_rounds: int = 2
    quantum_streams: int = 2

    # GUI timings, in milliseconds.
    clipboard_clear_ms: int = 15000
    notification_ms: int = 3000

    def validate(self) -> None:
        if self.min_length < 1:
            raise ConfigError("min_length must be at least 1.")
        if self.min_length > self.max_length:
            raise ConfigError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})."
            )
        if not self.min_length <= self.password_length <= self.max_length:
            raise ConfigError(
                f"password_length {self.password_length} is outside "
                f"[{self.min_length}, {self.max_length}]."
            )
        if self.random_source not in RANDOM_SOURCES:
            raise ConfigError(
                f"Unknown random source {self.random_source!r}; "
                f"expected one of {', '.join(RANDOM_SOURCES)}."
            )
        if not 1 <= self.num_qubits <= 29:
            raise ConfigError("num_qubits must be between 1 and 29.")
        if self.entropy_rounds < 0:
            raise ConfigError("entropy_rounds cannot be negative.")
        if self.quantum_streams < 1:
            raise ConfigError("quantum_streams must be at least 1.")


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
