# file: src/module4_bit_stuffing/__init__.py

"""
Module 4: Bit Stuffing

Inserts and removes guard bits after runs of consecutive '1' bits.

Public Interface:
    - BitStuffingCodec(run_length=5, gate_first_run=False, max_bits=...)
    - bit_stuff(stream) -> str
    - bit_destuff(stream) -> str
"""

from .stuffing import BitStuffingCodec, bit_stuff, bit_destuff

__all__ = [
    "BitStuffingCodec",
    "bit_stuff",
    "bit_destuff",
]

__version__ = "1.0.0"
