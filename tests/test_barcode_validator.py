"""
Tests for barcode validation functions.
"""

import pytest

from src.barcode.validator import (
    EAN13_WEIGHTS,
    calculate_ean13_checksum,
    is_checksum_valid,
    is_valid_ean13,
    validate_ean13_checksum,
)


class TestEAN13Checksum:
    """Tests for EAN-13 checksum validation."""

    def test_weights_alternate_from_one(self):
        """Test the per-position weights."""
        assert len(EAN13_WEIGHTS) == 13
        assert EAN13_WEIGHTS[0] == 1
        assert EAN13_WEIGHTS[1] == 3
        assert EAN13_WEIGHTS[-1] == 1

    def test_calculate_ean13_checksum(self):
        """Test checksum calculation for known EAN-13 codes."""
        # 4006381333931 - known valid EAN-13
        assert calculate_ean13_checksum("400638133393") == 1

        # 5901234123457 - known valid EAN-13
        assert calculate_ean13_checksum("590123412345") == 7

        # 0012345678905 - known valid EAN-13
        assert calculate_ean13_checksum("001234567890") == 5

    def test_calculate_rejects_short_code(self):
        """Test that fewer than 12 digits cannot produce a checksum."""
        with pytest.raises(ValueError, match="12 digits"):
            calculate_ean13_checksum("12345")

    def test_validate_ean13_valid(self):
        """Test validation of valid EAN-13 codes."""
        valid_codes = [
            "4006381333931",
            "5901234123457",
            "0012345678905",
            "4012345678901",
            "9780201379624",  # ISBN
        ]
        for code in valid_codes:
            assert validate_ean13_checksum(code), f"Expected {code} to be valid"

    def test_validate_ean13_invalid(self):
        """Test validation of invalid EAN-13 codes."""
        invalid_codes = [
            "4006381333932",  # Wrong checksum
            "5901234123450",  # Wrong checksum
            "1234567890123",  # Invalid structure
            "123456789012",  # Too short
            "12345678901234",  # Too long
            "400638133393A",  # Non-numeric
        ]
        for code in invalid_codes:
            assert not validate_ean13_checksum(code), f"Expected {code} to be invalid"


class TestDigitChecksum:
    """Tests for checksum validation on digit sequences."""

    def test_valid_digits(self):
        """Test a known valid number as a digit list."""
        assert is_checksum_valid([4, 0, 0, 6, 3, 8, 1, 3, 3, 3, 9, 3, 1])

    def test_all_zeros_is_valid(self):
        """Test that the all-zero number passes."""
        assert is_checksum_valid([0] * 13)

    def test_wrong_check_digit(self):
        """Test that a changed check digit fails."""
        assert not is_checksum_valid([4, 0, 0, 6, 3, 8, 1, 3, 3, 3, 9, 3, 2])

    def test_wrong_length(self):
        """Test that only 13 digits can be valid."""
        assert not is_checksum_valid([0] * 12)
        assert not is_checksum_valid([0] * 14)

    def test_tuple_input(self):
        """Test that tuples are accepted."""
        assert is_checksum_valid((5, 9, 0, 1, 2, 3, 4, 1, 2, 3, 4, 5, 7))


class TestBarcodeValidation:
    """Tests for complete barcode validation."""

    def test_valid_ean13(self):
        """Test full validation of valid EAN-13."""
        is_valid, error = is_valid_ean13("4006381333931")
        assert is_valid
        assert error == ""

    def test_invalid_checksum(self):
        """Test detection of invalid checksum."""
        is_valid, error = is_valid_ean13("4006381333932")
        assert not is_valid
        assert "checksum" in error.lower()

    def test_non_numeric(self):
        """Test rejection of non-numeric codes."""
        is_valid, error = is_valid_ean13("400638133393A")
        assert not is_valid
        assert "non-numeric" in error.lower()

    def test_wrong_length(self):
        """Test rejection of codes that are not 13 digits."""
        is_valid, error = is_valid_ean13("96385074")
        assert not is_valid
        assert "length" in error.lower()
