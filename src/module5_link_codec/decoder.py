# file: src/module5_link_codec/decoder.py

"""
Link-layer decoding entry point.

Provides link_decode() with explicit integrity checking.
"""

import logging
from typing import Any, Dict

from module1_bitstring.errors import ChecksumMismatchError, CodecConfigurationError, EmptyDataword
from .config import get_codec_type, build_crc_codec, build_stuffing_codec

logger = logging.getLogger(__name__)


def link_decode(bits: str, config: Dict[str, Any]) -> str:
    """
    Recover the original message from a received bit-string.

    Args:
        bits: Received bit-string
        config: Configuration dictionary with a 'codec' section

    Returns:
        Original message bits

    Raises:
        ChecksumMismatchError: If a CRC codeword fails verification
        MalformedStuffingError: If a stuffed stream breaks the stuffing rule
        CodecConfigurationError: If configuration is invalid or the codec
            has no decoder

    Error Handling:
        - CRC: the remainder is checked and stripped, never returned silently
          on a mismatch
        - Hamming: codewords are generated only; decoding is rejected
    """
    codec_type = get_codec_type(config)

    if codec_type == 'crc':
        return _decode_crc(bits, config)
    elif codec_type == 'hamming':
        raise CodecConfigurationError("Hamming decoding is not supported (generation only)")
    else:
        return build_stuffing_codec(config).destuff(bits)


def _decode_crc(bits: str, config: Dict[str, Any]) -> str:
    codec = build_crc_codec(config)
    syndrome = codec.syndrome(bits)

    if len(bits) <= codec.degree:
        raise EmptyDataword(
            f"Codeword of {len(bits)} bits carries no data for a {codec.degree}-bit remainder"
        )

    if '1' in syndrome:
        logger.warning("CRC mismatch on %d-bit codeword (remainder %s)", len(bits), syndrome)
        raise ChecksumMismatchError(
            f"CRC check failed: remainder {syndrome} is not zero",
            syndrome=syndrome,
        )

    return bits[:len(bits) - codec.degree]
