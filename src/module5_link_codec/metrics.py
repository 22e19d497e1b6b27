# file: src/module5_link_codec/metrics.py

"""
Link-layer codec metrics.

Bit error rate, Hamming distance and redundancy figures for bit-strings.
"""

import numpy as np

from module1_bitstring.bitstring import validate_bits, to_bit_array


def hamming_distance(a: str, b: str) -> int:
    """
    Number of positions at which two equal-length bit-strings differ.

    Raises:
        ValueError: If inputs have different lengths
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: a={len(a)}, b={len(b)}")

    validate_bits(a, name="a")
    validate_bits(b, name="b")

    return int(np.count_nonzero(to_bit_array(a) != to_bit_array(b)))


def compute_ber(original: str, received: str) -> float:
    """
    Compute Bit Error Rate (BER) between two bit-strings.

    BER = (number of bit errors) / (total number of bits)

    Args:
        original: Transmitted bits
        received: Received (possibly corrupted) bits

    Returns:
        BER as a float in [0.0, 1.0]

    Raises:
        ValueError: If inputs have different lengths

    Example:
        >>> compute_ber('0000', '0100')
        0.25
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )

    if len(original) == 0:
        return 0.0

    return hamming_distance(original, received) / len(original)


def compute_redundancy_overhead(original_length: int, encoded_length: int) -> float:
    """
    Compute redundancy overhead as a percentage.

    Overhead = ((encoded_length - original_length) / original_length) * 100

    Example:
        >>> compute_redundancy_overhead(8, 12)  # Hamming(12, 8)
        50.0
    """
    if original_length <= 0:
        raise ValueError(f"original_length must be > 0, got {original_length}")

    if encoded_length < original_length:
        raise ValueError(
            f"encoded_length {encoded_length} < original_length {original_length}"
        )

    return ((encoded_length - original_length) / original_length) * 100.0


def code_rate(original_length: int, encoded_length: int) -> float:
    """Code rate k / n."""
    if encoded_length <= 0:
        raise ValueError(f"encoded_length must be > 0, got {encoded_length}")

    return original_length / encoded_length
