# file: src/module3_hamming/hamming_codec.py

"""
Hamming single-error-correcting codeword generator.

Positions are numbered 1..n starting from the right-hand (last) character
of the emitted codeword. Power-of-two positions carry even-parity bits;
the remaining positions carry the data bits, whose left-to-right order is
kept in the codeword.
"""

import logging
from typing import List, Optional

import numpy as np

from module1_bitstring.bitstring import (
    DEFAULT_MAX_BITS,
    validate_bits,
    check_capacity,
    to_bit_array,
    from_bit_array,
)
from module1_bitstring.errors import BitStringError

logger = logging.getLogger(__name__)


def required_parity_bits(m: int) -> int:
    """
    Smallest r >= 0 with 2**r >= m + r + 1.

    Example:
        >>> required_parity_bits(4)
        3
        >>> required_parity_bits(7)
        4
    """
    if m < 0:
        raise BitStringError(f"Dataword length must be >= 0, got {m}")

    r = 0
    while (1 << r) < m + r + 1:
        r += 1
    return r


def is_parity_position(position: int) -> bool:
    """True for 1-indexed positions that are powers of two."""
    return position > 0 and (position & (position - 1)) == 0


def parity_group(parity_position: int, total_bits: int) -> List[int]:
    """Positions (1-indexed) covered by the parity bit at ``parity_position``."""
    return [i for i in range(1, total_bits + 1) if i & parity_position]


class HammingCodec:
    """
    Hamming codeword generator with even parity.

    Decoding and correction on receipt are not provided.
    """

    def __init__(self, max_bits: Optional[int] = DEFAULT_MAX_BITS):
        self.max_bits = max_bits

    def encode(self, dataword: str) -> str:
        """
        Generate the Hamming codeword for ``dataword``.

        Args:
            dataword: Data bits (may be empty)

        Returns:
            Codeword of length len(dataword) + required_parity_bits(len(dataword))

        Raises:
            NonBinaryCharacter: If dataword is not binary
            CodecOverflowError: If the codeword would exceed max_bits
        """
        validate_bits(dataword, name="dataword")

        m = len(dataword)
        r = required_parity_bits(m)
        total_bits = m + r
        check_capacity(total_bits, self.max_bits, name="Hamming codeword")

        if total_bits == 0:
            return ''

        # code[k] holds position k + 1, i.e. the codeword read right to left
        positions = np.arange(1, total_bits + 1)
        is_parity = (positions & (positions - 1)) == 0

        code = np.zeros(total_bits, dtype=np.uint8)
        code[~is_parity] = to_bit_array(dataword)[::-1]

        for i in range(r):
            p = 1 << i
            group = (positions & p) != 0
            # the parity slot is still zero, so it does not disturb the count
            code[p - 1] = int(code[group].sum()) & 1

        codeword = from_bit_array(code[::-1])
        logger.debug("Hamming encode %s -> %s (r=%d)", dataword, codeword, r)
        return codeword


def hamming_encode(dataword: str) -> str:
    """Generate the Hamming codeword for ``dataword``; see HammingCodec.encode."""
    return HammingCodec().encode(dataword)
