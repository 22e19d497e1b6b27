# file: src/module1_bitstring/bitstring.py

"""
Bit-string validation, bit-array conversion and fixed-width base rendering.

Bit-strings are plain ``str`` values over ``{'0', '1'}``, most significant
bit first. Codecs work on ``numpy`` ``uint8`` arrays internally so that no
machine word width limits the message length.
"""

from typing import Dict, Optional

import numpy as np

from .errors import BitStringError, NonBinaryCharacter, EmptyDataword, CodecOverflowError


WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
INT32_MIN = -(1 << (WORD_BITS - 1))
INT32_MAX = (1 << (WORD_BITS - 1)) - 1

# Upper bound on codec input/output length unless configured otherwise
DEFAULT_MAX_BITS = 65536

_ZERO = ord('0')


def validate_bits(bits: str, *, allow_empty: bool = True, name: str = "bit-string") -> str:
    """
    Check that ``bits`` is a string of '0' and '1' characters.

    Args:
        bits: Candidate bit-string
        allow_empty: Whether the empty string is acceptable
        name: Label used in error messages (e.g. "dataword")

    Returns:
        The same string, unchanged

    Raises:
        BitStringError: If ``bits`` is not a string
        EmptyDataword: If ``bits`` is empty and ``allow_empty`` is False
        NonBinaryCharacter: On the first character outside {'0', '1'}
    """
    if not isinstance(bits, str):
        raise BitStringError(f"{name} must be str, got {type(bits)}")

    if not bits and not allow_empty:
        raise EmptyDataword(f"{name} must contain at least one bit")

    for position, character in enumerate(bits):
        if character not in '01':
            raise NonBinaryCharacter(
                f"{name} has non-binary character {character!r} at position {position}",
                position=position,
                character=character,
            )

    return bits


def check_capacity(length: int, limit: Optional[int], name: str = "bit-string") -> None:
    """Raise CodecOverflowError when ``length`` exceeds ``limit`` (None = unbounded)."""
    if limit is not None and length > limit:
        raise CodecOverflowError(
            f"{name} of {length} bits exceeds capacity of {limit} bits",
            length=length,
            limit=limit,
        )


def to_bit_array(bits: str) -> np.ndarray:
    """
    Convert a validated bit-string to a ``uint8`` array of 0/1 values.

    The returned array is a fresh, writable copy.
    """
    return np.frombuffer(bits.encode('ascii'), dtype=np.uint8) - _ZERO


def from_bit_array(array: np.ndarray) -> str:
    """Convert an array of 0/1 values back into a bit-string."""
    if len(array) == 0:
        return ''
    return ((np.asarray(array).astype(np.uint8) & 1) + _ZERO).tobytes().decode('ascii')


def _as_word(value: int) -> int:
    """Return the unsigned 32-bit two's-complement pattern of ``value``."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise BitStringError(f"Value must be int, got {type(value)}")

    value = int(value)
    if not INT32_MIN <= value <= INT32_MAX:
        raise CodecOverflowError(
            f"Value {value} does not fit in a signed {WORD_BITS}-bit integer",
            length=value.bit_length() + 1,
            limit=WORD_BITS,
        )

    return value & WORD_MASK


def to_binary(value: int) -> str:
    """
    Render ``value`` as exactly 32 binary digits.

    Example:
        >>> to_binary(5)[-4:]
        '0101'
        >>> to_binary(-1) == '1' * 32
        True
    """
    return format(_as_word(value), f'0{WORD_BITS}b')


def to_octal(value: int) -> str:
    """Render the 32-bit pattern of ``value`` in octal without leading zeros."""
    return format(_as_word(value), 'o')


def to_hex(value: int) -> str:
    """Render the 32-bit pattern of ``value`` in upper-case hex without leading zeros."""
    return format(_as_word(value), 'X')


def convert_all(value: int) -> Dict[str, str]:
    """
    Render ``value`` in every supported base.

    Returns:
        Dictionary with keys 'binary', 'octal', 'hex'
    """
    return {
        'binary': to_binary(value),
        'octal': to_octal(value),
        'hex': to_hex(value),
    }
