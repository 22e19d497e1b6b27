# file: src/module4_bit_stuffing/stuffing.py

"""
Run-length bit stuffing.

A '0' guard bit is inserted after every ``run_length`` consecutive '1'
bits so that the payload can never imitate a flag sequence. Destuffing
replays the same state machine over the recovered bits and drops exactly
the guard bits that stuffing inserted.
"""

import logging
from typing import Optional

from module1_bitstring.bitstring import DEFAULT_MAX_BITS, validate_bits, check_capacity
from module1_bitstring.errors import CodecConfigurationError, MalformedStuffingError

logger = logging.getLogger(__name__)


class BitStuffingCodec:
    """
    Bit stuffing / destuffing codec.

    Parameters:
        run_length (int): Number of consecutive '1' bits that triggers a guard
            bit (5 for HDLC)
        gate_first_run (bool): Only stuff once a '0' has been seen since the
            start of the stream or the previous guard bit. Matches the
            classroom demo this codec replaces; off by default.
        max_bits (int): Largest stream accepted, None for no limit

    Invariants:
        - destuff(stuff(s)) == s for every bit-string s
        - stuff never shortens a stream
    """

    def __init__(
        self,
        run_length: int = 5,
        gate_first_run: bool = False,
        max_bits: Optional[int] = DEFAULT_MAX_BITS
    ):
        if run_length < 1:
            raise CodecConfigurationError(f"run_length={run_length} must be >= 1")

        self.run_length = run_length
        self.gate_first_run = gate_first_run
        self.max_bits = max_bits

    def _guard_due(self, ones: int, seen_zero: bool) -> bool:
        return ones == self.run_length and (seen_zero or not self.gate_first_run)

    def stuff(self, stream: str) -> str:
        """
        Insert a '0' after each run of ``run_length`` '1' bits.

        Example:
            >>> BitStuffingCodec().stuff("111110")
            '1111100'
        """
        validate_bits(stream, name="stream")
        check_capacity(len(stream), self.max_bits, name="stream")

        out = []
        ones = 0
        seen_zero = False

        for bit in stream:
            out.append(bit)
            if bit == '1':
                ones += 1
                if self._guard_due(ones, seen_zero):
                    out.append('0')
                    ones = 0
                    seen_zero = False
            else:
                ones = 0
                seen_zero = True

        stuffed = ''.join(out)
        check_capacity(len(stuffed), self.max_bits, name="stuffed stream")
        logger.debug("Stuffed %d -> %d bits", len(stream), len(stuffed))
        return stuffed

    def destuff(self, stream: str) -> str:
        """
        Remove the guard bits inserted by stuff().

        Raises:
            MalformedStuffingError: If a guard position holds '1' or the
                stream ends where a guard bit is due
        """
        validate_bits(stream, name="stream")
        check_capacity(len(stream), self.max_bits, name="stream")

        out = []
        ones = 0
        seen_zero = False
        guard_next = False

        for position, bit in enumerate(stream):
            if guard_next:
                if bit != '0':
                    raise MalformedStuffingError(
                        f"Expected stuffed '0' at position {position}, found '1'",
                        position=position,
                    )
                guard_next = False
                continue

            out.append(bit)
            if bit == '1':
                ones += 1
                if self._guard_due(ones, seen_zero):
                    guard_next = True
                    ones = 0
                    seen_zero = False
            else:
                ones = 0
                seen_zero = True

        if guard_next:
            raise MalformedStuffingError(
                "Stream ends before the stuffed '0' after a run of "
                f"{self.run_length} ones",
                position=len(stream),
            )

        destuffed = ''.join(out)
        logger.debug("Destuffed %d -> %d bits", len(stream), len(destuffed))
        return destuffed


def bit_stuff(stream: str) -> str:
    """HDLC-style stuffing with the default run length of five."""
    return BitStuffingCodec().stuff(stream)


def bit_destuff(stream: str) -> str:
    """Inverse of bit_stuff()."""
    return BitStuffingCodec().destuff(stream)
