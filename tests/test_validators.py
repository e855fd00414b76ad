"""Tests for controller validators."""

import pytest

from controller.validators import (
    InputValidationError,
    parse_positive_number,
    validate_name,
    validate_text_encoding,
)


class TestParsePositiveNumber:
    """Tests for parse_positive_number function."""

    def test_valid_number(self):
        """A positive number is returned as int."""
        assert parse_positive_number("42") == 42

    def test_surrounding_whitespace(self):
        """Whitespace around the number is ignored."""
        assert parse_positive_number(" 7 ") == 7

    def test_plus_sign(self):
        assert parse_positive_number("+5") == 5

    def test_zero_rejected(self):
        """Zero is not positive."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_positive_number("0")
        assert exc_info.value.title == "Not a positive number"

    def test_negative_rejected(self):
        """Negative numbers are rejected."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_positive_number("-3")
        assert exc_info.value.title == "Not a positive number"

    @pytest.mark.parametrize("text", ["1234.5678", "1,234", "0.9"])
    def test_separators_not_numeric(self, text):
        """Decimal and group separators are rejected, not truncated or dropped."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_positive_number(text)
        assert exc_info.value.title == "Input not numeric"

    @pytest.mark.parametrize("text", ["abc", "", "12a", "1 2"])
    def test_non_numeric_rejected(self, text):
        """Anything but base-10 digits is not numeric."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_positive_number(text)
        assert exc_info.value.title == "Input not numeric"

    def test_message_quotes_input(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_positive_number("abc")
        assert '"abc"' in exc_info.value.message


class TestValidateTextEncoding:
    """Tests for validate_text_encoding function."""

    def test_empty_is_valid(self):
        """Empty means no encoding."""
        assert validate_text_encoding("") == ""

    def test_whitespace_is_empty(self):
        assert validate_text_encoding("   ") == ""

    @pytest.mark.parametrize("name", ["UTF-8", "latin-1", "ISO-8859-1", "cp1252"])
    def test_known_encodings(self, name):
        """Encodings known to Python are accepted unchanged."""
        assert validate_text_encoding(name) == name

    def test_unknown_encoding(self):
        """Unknown encodings are rejected."""
        with pytest.raises(InputValidationError) as exc_info:
            validate_text_encoding("no-such-encoding")
        assert exc_info.value.title == "Text encoding validation failed"
        assert "no-such-encoding" in exc_info.value.message


class TestValidateName:
    """Tests for validate_name function."""

    def test_name_stripped(self):
        assert validate_name("  Fuego ") == "Fuego"

    def test_empty_name_rejected(self):
        """Blank names are rejected."""
        with pytest.raises(InputValidationError):
            validate_name("   ")


class TestInputValidationError:
    """Tests for the error type."""

    def test_str_includes_title_and_message(self):
        error = InputValidationError("Title", "Message")
        assert str(error) == "Title: Message"
