# file: src/module5_link_codec/__init__.py

"""
Module 5: Link-Layer Codec Entry Points

Configuration-driven access to the CRC, Hamming and bit-stuffing codecs,
plus the metrics and session tooling used around them.

Public API:
    - link_encode(bits: str, config) -> str
    - link_decode(bits: str, config) -> str
    - load_config(config_path=None) -> dict
    - compute_ber(original: str, received: str) -> float
    - hamming_distance(a: str, b: str) -> int
    - compute_redundancy_overhead(original_length, encoded_length) -> float
    - run_session(lines, handler, sentinels) -> iterator of replies
"""

from .encoder import link_encode
from .decoder import link_decode
from .config import load_config, get_default_config
from .metrics import compute_ber, hamming_distance, compute_redundancy_overhead, code_rate
from .cli import run_session

__version__ = "1.0.0"

__all__ = [
    "link_encode",
    "link_decode",
    "load_config",
    "get_default_config",
    "compute_ber",
    "hamming_distance",
    "compute_redundancy_overhead",
    "code_rate",
    "run_session",
]
