# file: src/module5_link_codec/testing_utils.py

"""
Testing utilities for the link-layer codecs.

Provides error injection on bit-strings for validation and robustness
testing. Used only in test/evaluation contexts.
"""

import random
from typing import Optional


def flip_bit(bits: str, index: int) -> str:
    """Return ``bits`` with the bit at ``index`` inverted."""
    if not 0 <= index < len(bits):
        raise IndexError(f"index {index} out of range for {len(bits)} bits")

    flipped = '0' if bits[index] == '1' else '1'
    return bits[:index] + flipped + bits[index + 1:]


def inject_bit_errors(
    bits: str,
    error_rate: float,
    seed: Optional[int] = None
) -> str:
    """
    Flip a fraction of randomly chosen bits.

    Args:
        bits: Original bit-string
        error_rate: Fraction of bits to flip (0.0 to 1.0)
        seed: Random seed for reproducibility (optional)

    Returns:
        Bit-string with exactly int(len(bits) * error_rate) flipped bits
    """
    if not 0.0 <= error_rate <= 1.0:
        raise ValueError(f"error_rate must be in [0, 1], got {error_rate}")

    rng = random.Random(seed)
    corrupted = list(bits)

    num_errors = int(len(bits) * error_rate)
    for pos in rng.sample(range(len(bits)), num_errors):
        corrupted[pos] = '0' if corrupted[pos] == '1' else '1'

    return ''.join(corrupted)


def inject_burst_errors(
    bits: str,
    num_bursts: int,
    burst_length: int,
    seed: Optional[int] = None
) -> str:
    """
    Flip runs of consecutive bits.

    Bursts may overlap, in which case overlapping bits flip back.
    """
    if num_bursts * burst_length > len(bits):
        raise ValueError("Total burst bits exceed data length")

    rng = random.Random(seed)
    corrupted = list(bits)

    for _ in range(num_bursts):
        start = rng.randint(0, len(bits) - burst_length)
        for pos in range(start, start + burst_length):
            corrupted[pos] = '0' if corrupted[pos] == '1' else '1'

    return ''.join(corrupted)
