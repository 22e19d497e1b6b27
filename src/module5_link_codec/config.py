# file: src/module5_link_codec/config.py

"""
Configuration loading and codec construction.

Configuration is a nested dictionary, normally read from
``default_config.yaml`` at the repository root. Missing sections fall back
to built-in defaults.
"""

import copy
import os
from typing import Any, Dict, Optional

import yaml

from module1_bitstring.errors import CodecConfigurationError
from module2_crc import CRCCodec
from module3_hamming import HammingCodec
from module4_bit_stuffing import BitStuffingCodec


DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), '..', '..', 'default_config.yaml'
)

CODEC_TYPES = ('crc', 'hamming', 'bit_stuffing')


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        'codec': {
            'type': 'crc',
        },
        'crc': {
            'generator': '10011',
            'max_bits': 65536,
        },
        'hamming': {
            'max_bits': 65536,
        },
        'bit_stuffing': {
            'run_length': 5,
            'gate_first_run': False,
            'max_bits': 65536,
        },
        'session': {
            'sentinels': ['end', '-1'],
        },
        'logging': {
            'level': 'WARNING',
            'format': '%(asctime)s [%(levelname)s] %(message)s',
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict):
            if value is None:
                continue
            if not isinstance(value, dict):
                raise CodecConfigurationError(
                    f"Config section '{key}' must be a mapping, got {type(value).__name__}"
                )
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file merged over the defaults.

    Args:
        config_path: Path to a YAML file. If None, ``default_config.yaml``
            is used when present, otherwise the built-in defaults.

    Returns:
        Configuration dictionary

    Raises:
        CodecConfigurationError: If an explicit path is missing or any file
            is not a valid YAML mapping
    """
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return get_default_config()
        config_path = DEFAULT_CONFIG_PATH
    elif not os.path.exists(config_path):
        raise CodecConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CodecConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise CodecConfigurationError(
            f"Config {config_path} must be a mapping, got {type(loaded).__name__}"
        )

    return _merge(get_default_config(), loaded)


def get_codec_type(config: Dict[str, Any]) -> str:
    """Read and check ``config['codec']['type']``."""
    try:
        codec_type = config['codec']['type']
    except (KeyError, TypeError) as e:
        raise CodecConfigurationError(f"Missing required config key: {e}") from e

    if codec_type not in CODEC_TYPES:
        raise CodecConfigurationError(f"Unknown codec type: {codec_type}")

    return codec_type


def build_crc_codec(config: Dict[str, Any]) -> CRCCodec:
    crc_config = config.get('crc', {})
    return CRCCodec(
        generator=crc_config.get('generator', '10011'),
        max_bits=crc_config.get('max_bits', 65536),
    )


def build_hamming_codec(config: Dict[str, Any]) -> HammingCodec:
    hamming_config = config.get('hamming', {})
    return HammingCodec(max_bits=hamming_config.get('max_bits', 65536))


def build_stuffing_codec(config: Dict[str, Any]) -> BitStuffingCodec:
    stuffing_config = config.get('bit_stuffing', {})
    return BitStuffingCodec(
        run_length=stuffing_config.get('run_length', 5),
        gate_first_run=stuffing_config.get('gate_first_run', False),
        max_bits=stuffing_config.get('max_bits', 65536),
    )
