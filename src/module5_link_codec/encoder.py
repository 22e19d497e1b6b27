# file: src/module5_link_codec/encoder.py

"""
Link-layer encoding entry point.

Provides link_encode() which selects a codec from configuration.
"""

from typing import Any, Dict

from .config import get_codec_type, build_crc_codec, build_hamming_codec, build_stuffing_codec


def link_encode(bits: str, config: Dict[str, Any]) -> str:
    """
    Encode a bit-string with the configured link-layer codec.

    Args:
        bits: Message bits ('0'/'1' characters)
        config: Configuration dictionary with a 'codec' section

    Returns:
        Encoded bit-string ready for transmission

    Raises:
        CodecConfigurationError: If configuration is invalid
        LinkCodecError: If the codec rejects the input

    Configuration Schema:
        config['codec']['type']: 'crc' | 'hamming' | 'bit_stuffing' (required)
        config['crc']['generator']: Generator polynomial (default: '10011')
        config['bit_stuffing']['run_length']: Ones before a guard bit (default: 5)

    Example:
        >>> config = {'codec': {'type': 'crc'}, 'crc': {'generator': '10011'}}
        >>> link_encode('1101011011', config)
        '11010110111110'
    """
    codec_type = get_codec_type(config)

    if codec_type == 'crc':
        return build_crc_codec(config).encode(bits)
    elif codec_type == 'hamming':
        return build_hamming_codec(config).encode(bits)
    else:
        return build_stuffing_codec(config).stuff(bits)
