"""Controller layer: binds preference screens to the settings models.

This package contains:
- adapter: PreferenceBindingAdapter rendering rows and applying edits
- validators: parsing and validation of text typed into editors
"""

from controller.adapter import (
    EditKindError,
    EditOutcome,
    EditStatus,
    OutOfRangeError,
    PreferenceBindingAdapter,
    PreferenceError,
    ReadOnlyFieldError,
    RenderedGroup,
    Row,
    UnknownFieldError,
    UnknownGroupError,
)
from controller.validators import (
    InputValidationError,
    parse_positive_number,
    validate_name,
    validate_text_encoding,
)

__all__ = [
    # Adapter
    "PreferenceBindingAdapter",
    "EditOutcome",
    "EditStatus",
    "RenderedGroup",
    "Row",
    # Errors
    "PreferenceError",
    "EditKindError",
    "OutOfRangeError",
    "ReadOnlyFieldError",
    "UnknownFieldError",
    "UnknownGroupError",
    # Validators
    "InputValidationError",
    "parse_positive_number",
    "validate_name",
    "validate_text_encoding",
]
