# file: src/module2_crc/__init__.py

"""
Module 2: CRC Codec

Cyclic redundancy check encoding and verification by modulo-2 long division.

Public API:
    - CRCCodec(generator, max_bits=...)
    - crc_encode(dataword, generator) -> str
    - crc_remainder(dataword, generator) -> str
    - crc_verify(received, generator) -> bool

Example usage:
    >>> from module2_crc import CRCCodec
    >>> codec = CRCCodec("10011")
    >>> codec.encode("1101011011")
    '11010110111110'
    >>> codec.verify("11010110111110")
    True
"""

from .crc_codec import CRCCodec, crc_encode, crc_remainder, crc_verify

__all__ = [
    "CRCCodec",
    "crc_encode",
    "crc_remainder",
    "crc_verify",
]

__version__ = "1.0.0"
