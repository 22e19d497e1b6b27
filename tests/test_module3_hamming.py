# file: tests/test_module3_hamming.py

"""
Unit tests for Module 3: Hamming Codec.
"""

import random

import pytest

from module1_bitstring import BitStringError, NonBinaryCharacter, CodecOverflowError
from module3_hamming import (
    required_parity_bits,
    is_parity_position,
    parity_group,
    HammingCodec,
    hamming_encode,
)


def _position_bit(codeword: str, position: int) -> int:
    """Bit at 1-indexed ``position``, counted from the right-hand end."""
    return int(codeword[len(codeword) - position])


def _syndrome(codeword: str) -> int:
    n = len(codeword)
    s = 0
    p = 1
    while p <= n:
        parity = 0
        for i in parity_group(p, n):
            parity ^= _position_bit(codeword, i)
        if parity:
            s |= p
        p <<= 1
    return s


class TestParityCount:
    """Test required_parity_bits()."""

    @pytest.mark.parametrize("m, r", [
        (0, 0),
        (1, 2),
        (4, 3),
        (7, 4),
        (11, 4),
        (12, 5),
        (26, 5),
        (57, 6),
    ])
    def test_known_values(self, m, r):
        assert required_parity_bits(m) == r

    def test_is_smallest_satisfying(self):
        for m in range(0, 300):
            r = required_parity_bits(m)
            assert 2 ** r >= m + r + 1
            if r > 0:
                assert 2 ** (r - 1) < m + (r - 1) + 1

    def test_negative_length_rejected(self):
        with pytest.raises(BitStringError):
            required_parity_bits(-1)


class TestPositions:
    """Test parity position helpers."""

    def test_is_parity_position(self):
        assert all(is_parity_position(p) for p in [1, 2, 4, 8, 16])
        assert not any(is_parity_position(p) for p in [0, 3, 5, 6, 7, 12])

    def test_parity_group(self):
        assert parity_group(1, 7) == [1, 3, 5, 7]
        assert parity_group(2, 7) == [2, 3, 6, 7]
        assert parity_group(4, 7) == [4, 5, 6, 7]


class TestHammingEncode:
    """Test codeword generation."""

    def test_textbook_example(self):
        codeword = hamming_encode('1011001')

        assert codeword == '10101001110'
        assert len(codeword) == 7 + 4

    def test_four_bit_example(self):
        assert hamming_encode('1011') == '1010101'

    def test_single_bit(self):
        assert hamming_encode('1') == '111'
        assert hamming_encode('0') == '000'

    def test_empty_dataword(self):
        assert hamming_encode('') == ''

    def test_all_zero_dataword(self):
        assert hamming_encode('0' * 8) == '0' * 12

    def test_deterministic(self):
        codec = HammingCodec()
        assert codec.encode('110100111') == codec.encode('110100111')

    def test_length_is_m_plus_r(self):
        for m in range(0, 40):
            dataword = '1' * m
            assert len(hamming_encode(dataword)) == m + required_parity_bits(m)

    def test_parity_groups_even(self):
        rng = random.Random(99)
        for _ in range(100):
            dataword = ''.join(rng.choice('01') for _ in range(rng.randint(1, 60)))
            assert _syndrome(hamming_encode(dataword)) == 0

    def test_data_bits_kept_in_order(self):
        rng = random.Random(5)
        dataword = ''.join(rng.choice('01') for _ in range(26))
        codeword = hamming_encode(dataword)
        n = len(codeword)

        data = ''.join(
            codeword[n - position]
            for position in range(n, 0, -1)
            if not is_parity_position(position)
        )
        assert data == dataword

    def test_single_error_gives_position(self):
        codeword = hamming_encode('1011001')
        n = len(codeword)

        for position in range(1, n + 1):
            index = n - position
            flipped = codeword[:index] + ('0' if codeword[index] == '1' else '1') + codeword[index + 1:]
            assert _syndrome(flipped) == position

    def test_non_binary_rejected(self):
        with pytest.raises(NonBinaryCharacter):
            hamming_encode('10 1')

    def test_capacity_exceeded(self):
        with pytest.raises(CodecOverflowError):
            HammingCodec(max_bits=10).encode('1011001')
