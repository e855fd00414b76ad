"""Validation functions for text typed into preference editors.

Each validator returns the cleaned value or raises InputValidationError with a
title and message for the user. The editor stays open so the user can fix
the input.
"""

import codecs
import re


class InputValidationError(Exception):
    """User input that cannot be committed."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(f"{title}: {message}")
        self.title = title
        self.message = message


def parse_positive_number(text: str) -> int:
    """Parse a base-10 integer greater than zero.

    Group separators and decimal parts make the text non-numeric
    ("1,234", "1234.5").

    Args:
        text: String value from the editor

    Returns:
        The parsed integer

    Raises:
        InputValidationError: If the text is not numeric or not positive
    """
    stripped = text.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", stripped):
        raise InputValidationError(
            "Input not numeric",
            f'The text "{text}" is not numeric. Please enter a valid number.',
        )
    number = int(stripped)
    if number <= 0:
        raise InputValidationError(
            "Not a positive number",
            f'The number "{text}" is zero or negative. Please enter a number greater than zero.',
        )
    return number


def validate_text_encoding(text: str) -> str:
    """Validate a text encoding name.

    Empty is valid (means no encoding is configured).
    """
    stripped = text.strip()
    if not stripped:
        return ""
    try:
        codecs.lookup(stripped)
    except LookupError:
        raise InputValidationError(
            "Text encoding validation failed",
            f'Conversion from text encoding "{stripped}" is not possible on this system.\n\n'
            "The text encoding is either invalid, or it is not supported on this system.",
        ) from None
    return stripped


def validate_name(text: str) -> str:
    """Validate a player or profile name: stripped, must not be empty."""
    stripped = text.strip()
    if not stripped:
        raise InputValidationError("Name missing", "Please enter a name.")
    return stripped
