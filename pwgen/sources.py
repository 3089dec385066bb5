"""
Random sources the generator can draw from.

Every source exposes ``randrange(stop)``; the generator never touches
anything else, so a stronger source can be swapped in without changing
the algorithm.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List

from .config import ConfigError, DEFAULT_CONFIG, PasswordConfig, RANDOM_SOURCES
from .entropy import amplify_entropy, bits_to_int, xor_bits
from .generator import RandomSource

logger = logging.getLogger(__name__)


class QuantumRandom:
    """
    ``randrange`` backed by qubit measurements.

    Pipeline per refill:
    - Sample ``quantum_streams`` independent runs of the quantum engine.
    - XOR-combine them into one bitstring.
    - Amplify/mix with SHA-256 (``entropy_rounds``).
    Bits are buffered and consumed by rejection sampling, so every value in
    range(stop) is equally likely.
    """

    def __init__(
        self,
        config: PasswordConfig | None = None,
        bit_source: Callable[[], List[int]] | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._bit_source = bit_source
        self._engine = None
        self._buffer: List[int] = []
        self.refills = 0

    def _sample(self) -> List[int]:
        if self._bit_source is not None:
            return self._bit_source()
        if self._engine is None:
            # Local import: qiskit is only loaded when this source is used.
            from .quantum_engine import QuantumEngine

            self._engine = QuantumEngine(self.config)
        return self._engine.get_raw_bits()

    def _refill(self) -> None:
        streams = [self._sample() for _ in range(max(1, self.config.quantum_streams))]
        bits = amplify_entropy(xor_bits(streams), self.config.entropy_rounds)
        if not bits:
            raise RuntimeError("Quantum bit source returned no bits.")
        self._buffer.extend(bits)
        self.refills += 1
        logger.debug("Quantum buffer refilled with %d bits", len(bits))

    def getrandbits(self, k: int) -> int:
        while len(self._buffer) < k:
            self._refill()
        taken, self._buffer = self._buffer[:k], self._buffer[k:]
        return bits_to_int(taken)

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"empty range for randrange({stop})")
        k = (stop - 1).bit_length()
        if k == 0:
            return 0
        while True:
            value = self.getrandbits(k)
            if value < stop:
                return value


def get_random_source(
    name: str | None = None,
    config: PasswordConfig | None = None,
) -> RandomSource:
    """
    Build the random source called ``name`` (defaults to the config's).
    """
    cfg = config or DEFAULT_CONFIG
    name = (name or cfg.random_source).strip().lower()

    if name == "system":
        return random
    if name == "secure":
        return random.SystemRandom()
    if name == "quantum":
        return QuantumRandom(cfg)

    raise ConfigError(
        f"Unknown random source {name!r}; expected one of {', '.join(RANDOM_SOURCES)}."
    )
