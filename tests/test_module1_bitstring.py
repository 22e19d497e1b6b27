# file: tests/test_module1_bitstring.py

"""
Unit tests for Module 1: Bit-String Utilities.

Test coverage:
    - Fixed-width binary rendering and zero-suppressed octal/hex
    - 32-bit range and type checks
    - Bit-string validation
    - Bit-array conversion
"""

import numpy as np
import pytest

from module1_bitstring import (
    WORD_BITS,
    validate_bits,
    check_capacity,
    to_bit_array,
    from_bit_array,
    to_binary,
    to_octal,
    to_hex,
    convert_all,
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


class TestBaseConverters:
    """Test binary/octal/hex rendering of 32-bit integers."""

    def test_binary_is_always_32_digits(self):
        for value in [0, 1, 5, 1023, -1, -2 ** 31, 2 ** 31 - 1]:
            assert len(to_binary(value)) == WORD_BITS

    def test_binary_values(self):
        assert to_binary(0) == '0' * 32
        assert to_binary(5) == '0' * 29 + '101'
        assert to_binary(-1) == '1' * 32
        assert to_binary(-2 ** 31) == '1' + '0' * 31

    def test_octal_suppresses_leading_zeros(self):
        assert to_octal(0) == '0'
        assert to_octal(8) == '10'
        assert to_octal(511) == '777'
        assert to_octal(2 ** 31 - 1) == '17777777777'

    def test_octal_negative_uses_32_bit_pattern(self):
        assert to_octal(-1) == '37777777777'

    def test_hex_values(self):
        assert to_hex(0) == '0'
        assert to_hex(255) == 'FF'
        assert to_hex(4096) == '1000'
        assert to_hex(-1) == 'FFFFFFFF'

    def test_convert_all(self):
        assert convert_all(10) == {
            'binary': '0' * 28 + '1010',
            'octal': '12',
            'hex': 'A',
        }

    def test_out_of_range_raises_overflow(self):
        with pytest.raises(CodecOverflowError):
            to_binary(2 ** 31)
        with pytest.raises(CodecOverflowError):
            to_hex(-2 ** 31 - 1)

    def test_non_integer_rejected(self):
        with pytest.raises(BitStringError, match="must be int"):
            to_octal("5")
        with pytest.raises(BitStringError):
            to_binary(True)

    def test_numpy_integer_accepted(self):
        assert to_hex(np.int32(255)) == 'FF'


class TestValidation:
    """Test bit-string validation."""

    def test_valid_bits_returned_unchanged(self):
        assert validate_bits('0110') == '0110'

    def test_empty_allowed_by_default(self):
        assert validate_bits('') == ''

    def test_empty_rejected_when_required(self):
        with pytest.raises(EmptyDataword):
            validate_bits('', allow_empty=False, name="dataword")

    def test_non_binary_character_position(self):
        with pytest.raises(NonBinaryCharacter) as exc_info:
            validate_bits('10a1')

        assert exc_info.value.position == 2
        assert exc_info.value.character == 'a'

    def test_sentinel_is_not_a_bit_stream(self):
        with pytest.raises(NonBinaryCharacter):
            validate_bits('end')

    def test_non_string_rejected(self):
        with pytest.raises(BitStringError, match="must be str"):
            validate_bits(101)

    def test_check_capacity(self):
        check_capacity(8, 8)
        check_capacity(10 ** 6, None)

        with pytest.raises(CodecOverflowError) as exc_info:
            check_capacity(10, 8)

        assert exc_info.value.length == 10
        assert exc_info.value.limit == 8


class TestBitArrays:
    """Test conversion between bit-strings and numpy arrays."""

    def test_to_bit_array(self):
        array = to_bit_array('1011')
        assert array.dtype == np.uint8
        assert array.tolist() == [1, 0, 1, 1]

    def test_to_bit_array_is_writable(self):
        array = to_bit_array('000')
        array[0] = 1
        assert array.tolist() == [1, 0, 0]

    def test_from_bit_array(self):
        assert from_bit_array(np.array([0, 1, 1, 0], dtype=np.uint8)) == '0110'
        assert from_bit_array(np.zeros(0, dtype=np.uint8)) == ''

    def test_conversion_preserves_leading_zeros(self):
        bits = '0001011000'
        assert from_bit_array(to_bit_array(bits)) == bits


class TestErrorHierarchy:
    """All codec errors share a common base class."""

    @pytest.mark.parametrize("error_class", [
        BitStringError,
        NonBinaryCharacter,
        EmptyDataword,
        MalformedStuffingError,
        CodecOverflowError,
        InvalidGeneratorError,
        InvalidGeneratorLength,
        ChecksumMismatchError,
        CodecConfigurationError,
    ])
    def test_subclass_of_base(self, error_class):
        assert issubclass(error_class, LinkCodecError)

    def test_generator_length_is_generator_error(self):
        assert issubclass(InvalidGeneratorLength, InvalidGeneratorError)
