"""
Bit helpers for the quantum random source: packing, XOR mixing and
SHA-256 amplification of raw measured bits.
"""

from __future__ import annotations

import hashlib
from typing import List, Sequence


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """
    Pack bits [0,1,1,0,...] into bytes, MSB first.
    A trailing partial byte is zero-padded on the right.
    """
    if not bits:
        return b""

    out = bytearray()
    for i in range(0, len(bits), 8):
        chunk = list(bits[i : i + 8])
        chunk += [0] * (8 - len(chunk))
        out.append(bits_to_int(chunk))
    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    out_bits: List[int] = []
    for byte in data:
        for i in range(8):
            out_bits.append((byte >> (7 - i)) & 1)
    return out_bits


def bits_to_int(bits: Sequence[int]) -> int:
    """Interpret a bit sequence (MSB first) as an unsigned integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def xor_bits(streams: Sequence[Sequence[int]]) -> List[int]:
    """
    XOR-combine equally long bit streams into one.

    Raises ValueError if the streams differ in length.
    """
    if not streams:
        return []

    combined = list(streams[0])
    for stream in streams[1:]:
        if len(stream) != len(combined):
            raise ValueError(
                "Bit streams have different lengths "
                f"({len(stream)} != {len(combined)})."
            )
        combined = [a ^ b for a, b in zip(combined, stream)]
    return combined


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the bits with SHA-256 ``rounds`` times and return the digest bits.

    With rounds <= 0 the input is returned unchanged; otherwise the output
    is always 256 bits long.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
