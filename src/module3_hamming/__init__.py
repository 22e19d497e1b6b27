# file: src/module3_hamming/__init__.py

"""
Module 3: Hamming Codec

Generates Hamming codewords with parity bits at power-of-two positions.

Public Interface:
    - required_parity_bits(m) -> int
    - HammingCodec: codeword generator
    - hamming_encode(dataword) -> str

Example usage:
    >>> from module3_hamming import hamming_encode
    >>> hamming_encode("1011001")
    '10101001110'
"""

from .hamming_codec import (
    required_parity_bits,
    is_parity_position,
    parity_group,
    HammingCodec,
    hamming_encode,
)

__all__ = [
    "required_parity_bits",
    "is_parity_position",
    "parity_group",
    "HammingCodec",
    "hamming_encode",
]

__version__ = "1.0.0"
