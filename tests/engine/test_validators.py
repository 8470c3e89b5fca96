"""
Fair Dice - Validator Tests

Tests for die face validation and prompt/startup input parsing.
"""

import pytest
from src.engine.base import DiceConfiguration
from src.engine.errors import ConfigurationError, InputFormatError, ValidationError
from src.engine.validators import (
    parse_choice,
    parse_dice_configuration,
    parse_integer,
    validate_faces,
)


class TestValidateFaces:
    """Tests for validate_faces()."""

    def test_returns_tuple(self):
        assert validate_faces([1, 2, 3]) == (1, 2, 3)

    def test_repeats_allowed(self):
        assert validate_faces((2, 2, 4, 4, 9, 9)) == (2, 2, 4, 4, 9, 9)

    def test_negative_and_zero_allowed(self):
        assert validate_faces((-1, 0)) == (-1, 0)

    def test_empty_raises(self):
        with pytest.raises(ConfigurationError, match="at least one face"):
            validate_faces(())

    def test_float_raises(self):
        with pytest.raises(ConfigurationError, match="index 1 must be an integer"):
            validate_faces((1, 2.5))

    def test_bool_raises(self):
        with pytest.raises(ConfigurationError):
            validate_faces((1, True))

    def test_string_raises(self):
        with pytest.raises(ConfigurationError):
            validate_faces("123")

    def test_non_iterable_raises(self):
        with pytest.raises(ConfigurationError):
            validate_faces(5)


class TestParseDiceConfiguration:
    """Tests for parse_dice_configuration()."""

    def test_valid_input(self):
        config = parse_dice_configuration("2,2,4,4,9,9")
        assert config == DiceConfiguration(values=(2, 2, 4, 4, 9, 9))

    def test_whitespace_tolerated(self):
        assert parse_dice_configuration(" 1, 2 ,3 ").values == (1, 2, 3)

    def test_exactly_three(self):
        assert len(parse_dice_configuration("1,2,3").values) == 3

    def test_two_values_rejected(self):
        with pytest.raises(ValidationError, match="got 2"):
            parse_dice_configuration("1,2")

    def test_missing_input_rejected(self):
        with pytest.raises(ValidationError):
            parse_dice_configuration(None)

    def test_blank_input_rejected(self):
        with pytest.raises(ValidationError):
            parse_dice_configuration("   ")

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="position 1"):
            parse_dice_configuration("1,a,3")

    @pytest.mark.parametrize("text", ["1,2_0,3", "1,\u0662,3"])
    def test_only_ascii_digits_accepted(self, text):
        with pytest.raises(ValidationError, match="position 1"):
            parse_dice_configuration(text)

    def test_custom_minimum(self):
        with pytest.raises(ValidationError):
            parse_dice_configuration("1,2,3", min_count=4)


class TestParseInteger:
    """Tests for parse_integer()."""

    def test_plain_number(self):
        assert parse_integer("4") == 4

    def test_surrounding_whitespace(self):
        assert parse_integer(" 2\n") == 2

    @pytest.mark.parametrize(
        "text", ["", "   ", "abc", "1.5", "1,2", "0x1", "0_1", "\u0661", "+-5", "- 1"]
    )
    def test_malformed_rejected(self, text):
        with pytest.raises(InputFormatError):
            parse_integer(text)

    @pytest.mark.parametrize("text, expected", [("-1", -1), ("+3", 3), ("007", 7)])
    def test_signed_and_padded(self, text, expected):
        assert parse_integer(text) == expected

    def test_comma_message(self):
        with pytest.raises(InputFormatError, match="without commas"):
            parse_integer("1,2")


class TestParseChoice:
    """Tests for parse_choice()."""

    @pytest.mark.parametrize("value", [0, 1, 2, 3, 4, 5])
    def test_in_range(self, value):
        assert parse_choice(str(value), 0, 5) == value

    @pytest.mark.parametrize("text", ["-1", "6", "10"])
    def test_out_of_range(self, text):
        with pytest.raises(InputFormatError, match="between 0 and 5"):
            parse_choice(text, 0, 5)
