# file: src/module1_bitstring/__init__.py

"""
Module 1: Bit-String Utilities

Shared helpers for the link-layer codecs: bit-string validation, conversion
to and from numpy bit arrays, fixed-width base rendering of 32-bit integers,
and the exception hierarchy used by every codec package.

Public API:
    - validate_bits(bits, allow_empty=True, name=...) -> str
    - to_bit_array(bits) -> np.ndarray
    - from_bit_array(array) -> str
    - to_binary(value) / to_octal(value) / to_hex(value) -> str
    - convert_all(value) -> dict
"""

from .bitstring import (
    WORD_BITS,
    DEFAULT_MAX_BITS,
    validate_bits,
    check_capacity,
    to_bit_array,
    from_bit_array,
    to_binary,
    to_octal,
    to_hex,
    convert_all,
)
from .errors import (
    LinkCodecError,
    BitStringError,
    NonBinaryCharacter,
    EmptyDataword,
    MalformedStuffingError,
    CodecOverflowError,
    InvalidGeneratorError,
    InvalidGeneratorLength,
    ChecksumMismatchError,
    CodecConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "WORD_BITS",
    "DEFAULT_MAX_BITS",
    "validate_bits",
    "check_capacity",
    "to_bit_array",
    "from_bit_array",
    "to_binary",
    "to_octal",
    "to_hex",
    "convert_all",
    "LinkCodecError",
    "BitStringError",
    "NonBinaryCharacter",
    "EmptyDataword",
    "MalformedStuffingError",
    "CodecOverflowError",
    "InvalidGeneratorError",
    "InvalidGeneratorLength",
    "ChecksumMismatchError",
    "CodecConfigurationError",
]
