# file: src/module2_crc/crc_codec.py

"""
CRC codec based on modulo-2 polynomial long division.

Datawords, generators and codewords are bit-strings. Division runs over a
numpy bit array, so message length is limited only by the configured
``max_bits`` capacity and never by a machine integer width.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from module1_bitstring.bitstring import (
    DEFAULT_MAX_BITS,
    validate_bits,
    check_capacity,
    to_bit_array,
    from_bit_array,
)
from module1_bitstring.errors import InvalidGeneratorError, InvalidGeneratorLength

logger = logging.getLogger(__name__)


class CRCCodec:
    """
    Cyclic redundancy check codec for a fixed generator polynomial.

    Parameters:
        generator (str): Divisor polynomial as a bit-string, leading
            coefficient first (e.g. "10011" for x^4 + x + 1)
        max_bits (int): Largest codeword accepted, None for no limit

    Invariants:
        - len(codeword) == len(dataword) + len(generator) - 1
        - codeword starts with the unchanged dataword
        - dividing a codeword by the generator leaves a zero remainder
    """

    def __init__(self, generator: str, max_bits: Optional[int] = DEFAULT_MAX_BITS):
        if isinstance(generator, str) and len(generator) == 0:
            raise InvalidGeneratorLength("Generator must be at least 1 bit long")

        validate_bits(generator, name="generator")

        if generator[0] != '1':
            raise InvalidGeneratorError(
                f"Generator {generator!r} must start with '1' (leading coefficient)"
            )

        self.generator = generator
        self.degree = len(generator) - 1
        self.max_bits = max_bits
        self._divisor = to_bit_array(generator)

    def _divide(self, bits: np.ndarray) -> np.ndarray:
        """
        XOR long division of ``bits`` by the generator.

        Returns:
            Remainder as an array of exactly ``degree`` bits
        """
        if self.degree == 0:
            return np.zeros(0, dtype=np.uint8)

        work = bits.copy()
        if len(work) < self.degree:
            padding = np.zeros(self.degree - len(work), dtype=np.uint8)
            work = np.concatenate([padding, work])

        width = len(self._divisor)
        for lead in range(len(work) - self.degree):
            if work[lead]:
                work[lead:lead + width] ^= self._divisor

        return work[len(work) - self.degree:]

    def remainder(self, dataword: str) -> str:
        """
        Compute the redundancy bits for ``dataword``.

        Args:
            dataword: Message bits, at least one

        Returns:
            Remainder bit-string of length len(generator) - 1

        Raises:
            EmptyDataword: If dataword is empty
            NonBinaryCharacter: If dataword is not binary
            CodecOverflowError: If the codeword would exceed max_bits
        """
        validate_bits(dataword, allow_empty=False, name="dataword")
        check_capacity(len(dataword) + self.degree, self.max_bits, name="CRC codeword")

        dividend = np.concatenate([
            to_bit_array(dataword),
            np.zeros(self.degree, dtype=np.uint8),
        ])
        return from_bit_array(self._divide(dividend))

    def encode_with_remainder(self, dataword: str) -> Tuple[str, str]:
        """
        Encode ``dataword`` and also return the remainder that was appended.

        Example:
            >>> CRCCodec("10011").encode_with_remainder("1101011011")
            ('11010110111110', '1110')
        """
        rem = self.remainder(dataword)
        codeword = dataword + rem
        logger.debug("CRC encode %s / %s -> %s (remainder %s)",
                     dataword, self.generator, codeword, rem)
        return codeword, rem

    def encode(self, dataword: str) -> str:
        """Return ``dataword`` followed by its CRC remainder."""
        return self.encode_with_remainder(dataword)[0]

    def syndrome(self, received: str) -> str:
        """
        Divide a received codeword by the generator.

        Returns:
            Remainder bit-string of length len(generator) - 1; all zeros
            for an intact codeword
        """
        validate_bits(received, allow_empty=False, name="codeword")
        check_capacity(len(received), self.max_bits, name="CRC codeword")
        return from_bit_array(self._divide(to_bit_array(received)))

    def verify(self, received: str) -> bool:
        """Return True exactly when ``received`` leaves a zero remainder."""
        syndrome = self.syndrome(received)
        valid = '1' not in syndrome
        if not valid:
            logger.debug("CRC check failed for %s: remainder %s", received, syndrome)
        return valid


def crc_encode(dataword: str, generator: str) -> str:
    """Encode ``dataword`` with ``generator``; see CRCCodec.encode."""
    return CRCCodec(generator).encode(dataword)


def crc_remainder(dataword: str, generator: str) -> str:
    """Remainder of ``dataword`` shifted by len(generator) - 1, divided by ``generator``."""
    return CRCCodec(generator).remainder(dataword)


def crc_verify(received: str, generator: str) -> bool:
    """Check a received codeword without knowing the original dataword."""
    return CRCCodec(generator).verify(received)
