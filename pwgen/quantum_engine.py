"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.
"""

from __future__ import annotations

import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import ConfigError, DEFAULT_CONFIG, PasswordConfig

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Runs a one-shot superposition circuit on the local Aer simulator.
    Each run yields ``config.num_qubits`` raw bits.
    """

    def __init__(self, config: PasswordConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        # Ensure requested num_qubits does not exceed backend capability.
        configuration = getattr(self.backend, "configuration", None)
        backend_cfg = configuration() if callable(configuration) else None
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ConfigError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in PasswordConfig."
            )

        self._circuit: QuantumCircuit | None = None

    def _build_circuit(self) -> QuantumCircuit:
        """
        Hadamard on every qubit, then measure even qubits in the Z basis
        and odd qubits in the X basis (extra H before measuring).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return transpile(qc, self.backend)

    def get_raw_bits(self) -> list[int]:
        """
        Run the circuit once and return the measured bits, qubit 0 first.
        """
        if self._circuit is None:
            self._circuit = self._build_circuit()

        result = self.backend.run(self._circuit, shots=1).result()
        counts = result.get_counts()

        # counts is {'0101...': 1}; Qiskit orders bits as [q_(n-1) ... q_0].
        bitstring = next(iter(counts.keys()))[::-1]

        logger.debug("Quantum engine produced %d raw bits", len(bitstring))
        return [int(b) for b in bitstring]
