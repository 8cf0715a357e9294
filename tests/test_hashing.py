"""
Tests for short hash identifiers
"""

import pytest

from dogql.hashing import bitwise_hash, to_base, unique


class TestBitwiseHash:
    def test_empty_string_hashes_to_zero(self):
        assert bitwise_hash("") == 0

    def test_single_character(self):
        assert bitwise_hash("a") == 97

    def test_two_characters(self):
        assert bitwise_hash("ab") == 97 * 31 + 98

    def test_wraps_to_signed_32_bit(self):
        """Long inputs overflow and must stay within int32 range."""
        value = bitwise_hash("https://images.dog.ceo/breeds/pug/n02110958_1975.jpg" * 4)
        assert -(2**31) <= value < 2**31

    def test_hashes_utf16_code_units(self):
        """Characters outside the BMP contribute two code units."""
        # U+1F415 DOG is the surrogate pair D83D DC15
        expected = (0xD83D * 31 + 0xDC15) & 0xFFFFFFFF
        if expected >= 2**31:
            expected -= 2**32
        assert bitwise_hash("\U0001F415") == expected


class TestToBase:
    def test_zero_is_empty(self):
        assert to_base(0) == ""

    def test_base_61_digits(self):
        assert to_base(60) == "Y"
        assert to_base(61) == "10"

    def test_negative_values_keep_sign(self):
        assert to_base(-97) == "-1A"

    def test_rejects_unsupported_base(self):
        with pytest.raises(ValueError, match="base must be between"):
            to_base(10, base=63)


class TestUnique:
    def test_known_values(self):
        assert unique("a") == "1A"
        assert unique("ab") == "OT"
        assert unique("") == ""

    @pytest.mark.parametrize("breed", ["akita", "hound", "pug", "germanshepherd"])
    def test_breed_ids_are_deterministic(self, breed):
        assert unique(breed) == unique(breed)

    def test_image_ids_are_deterministic(self):
        url = "https://images.dog.ceo/breeds/pug/n02110958_1975.jpg"
        assert unique(url) == unique(url)

    def test_different_inputs_usually_differ(self):
        assert unique("akita") != unique("pug")

    def test_negative_hash_marked_with_z(self):
        assert bitwise_hash("poodle") == -982585203
        result = unique("poodle")
        assert result.startswith("Z")
        assert "-" not in result
