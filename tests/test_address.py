"""
Unit Tests for Semi-Octet Address Encoding
==========================================
"""

import pytest

from pdu_lib.errors import BufferTooSmallError, InvalidDigitError
from pdu_lib.utils import (
    OutputBuffer,
    bcd_length,
    decode_bcd_digits,
    encode_bcd_digits,
    normalize_number,
    validate_digits,
)


class TestEncodeBcdDigits:
    """Tests for nibble-swapped BCD packing."""

    def test_even_length(self):
        """Each digit pair is stored low nibble first."""
        out = bytearray(5)

        written = encode_bcd_digits("1234567890", out)

        assert written == 5
        assert bytes(out) == bytes.fromhex("2143658709")

    def test_odd_length_is_padded(self):
        """An odd digit count puts 0xF in the last high nibble."""
        out = bytearray(5)

        written = encode_bcd_digits("381610401", out)

        assert written == 5
        assert bytes(out) == bytes.fromhex("83610104F1")
        assert out[-1] >> 4 == 0xF

    def test_single_digit(self):
        out = bytearray(1)
        assert encode_bcd_digits("7", out) == 1
        assert out[0] == 0xF7

    def test_empty(self):
        out = bytearray()
        assert encode_bcd_digits("", out) == 0

    def test_rejects_non_digit(self):
        """Letters, '+' and '*' are not decimal digits."""
        for digits in ("12A4", "+123", "12*4", "12 4"):
            with pytest.raises(InvalidDigitError):
                encode_bcd_digits(digits, bytearray(4))

    def test_buffer_too_small_writes_nothing(self):
        """A short buffer is rejected before any octet is stored."""
        out = bytearray(b"\xAA\xAA")

        with pytest.raises(BufferTooSmallError) as excinfo:
            encode_bcd_digits("12345", out)

        assert excinfo.value.required == 3
        assert excinfo.value.available == 2
        assert out == bytearray(b"\xAA\xAA")

    def test_writes_at_output_buffer_position(self):
        """An OutputBuffer continues from where it was left."""
        target = bytearray(4)
        writer = OutputBuffer(target)
        writer.push(0x91)

        encode_bcd_digits("123", writer)

        assert writer.position == 3
        assert bytes(target) == bytes.fromhex("9121F300")

    def test_length_is_half_rounded_up(self):
        for count in range(0, 21):
            assert bcd_length("1" * count) == (count + 1) // 2


class TestDecodeBcdDigits:
    """Tests for reversing the nibble swap."""

    def test_round_trip_even_lengths(self):
        for digits in ("", "00", "1234567890", "98765432109876543210"):
            out = bytearray(bcd_length(digits))
            encode_bcd_digits(digits, out)
            assert decode_bcd_digits(bytes(out), len(digits)) == digits

    def test_drops_padding(self):
        assert decode_bcd_digits(bytes.fromhex("83610104F1"), 9) == "381610401"

    def test_rejects_non_decimal_nibble(self):
        with pytest.raises(InvalidDigitError):
            decode_bcd_digits(b"\x2A", 2)


class TestValidateDigits:
    """Tests for address validation rules."""

    def test_empty_destination_rejected(self):
        with pytest.raises(InvalidDigitError):
            validate_digits("")

    def test_empty_allowed_when_requested(self):
        validate_digits("", allow_empty=True)

    def test_length_limit(self):
        validate_digits("1" * 20)
        with pytest.raises(InvalidDigitError):
            validate_digits("1" * 21)

    def test_reports_position(self):
        with pytest.raises(InvalidDigitError, match="position 2"):
            validate_digits("12A4567890")


class TestNormalizeNumber:
    def test_strips_leading_plus(self):
        assert normalize_number("+381659999999") == "381659999999"

    def test_leaves_plain_digits(self):
        assert normalize_number("0659999999") == "0659999999"

    def test_only_one_plus_removed(self):
        assert normalize_number("++1") == "+1"
