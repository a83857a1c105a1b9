"""
Unit tests for the Luhn checksum.
"""

import pytest

from organisationsnummer.luhn import luhn_checksum, luhn_valid


class TestLuhnChecksum:
    """Tests for Luhn checksum calculation."""

    def test_known_checksums(self):
        """Test with known valid checksums."""
        # Spotify AB: 556703-7485
        assert luhn_checksum("556703748") == 5
        # Test case from Skatteverket documentation
        assert luhn_checksum("811218987") == 6

    def test_all_zeros(self):
        """Test checksum of all zeros."""
        assert luhn_checksum("000000000") == 0

    def test_empty_string(self):
        """An empty string sums to zero."""
        assert luhn_checksum("") == 0

    def test_non_digit_raises(self):
        """Non-digit input is a caller error."""
        with pytest.raises(ValueError):
            luhn_checksum("55670A748")


class TestLuhnValid:
    """Tests for validating complete numbers."""

    @pytest.mark.parametrize(
        "number",
        ["5560160680", "5561034249", "5592440001", "5567037485", "8112189876"],
    )
    def test_valid_numbers(self, number):
        assert luhn_valid(number)

    @pytest.mark.parametrize("number", ["5560160681", "5567037480", "8112189870"])
    def test_invalid_numbers(self, number):
        assert not luhn_valid(number)

    def test_single_digit_change_is_detected(self):
        """Changing any one digit of a valid number breaks the checksum."""
        number = "5560160680"
        for position in range(len(number)):
            original = int(number[position])
            for delta in range(1, 10):
                changed = (
                    number[:position]
                    + str((original + delta) % 10)
                    + number[position + 1 :]
                )
                assert not luhn_valid(changed), changed

    def test_agrees_with_checksum_digit(self):
        """A number is valid exactly when its last digit is the checksum."""
        first_nine = "556016068"
        for check in range(10):
            assert luhn_valid(f"{first_nine}{check}") == (
                check == luhn_checksum(first_nine)
            )
