"""Custom Textual widgets for goprefs.

This package contains the row widgets of the preference screens.
"""

from ui.widgets.rows import (
    ActionRow,
    ChoiceRow,
    LinkRow,
    NumberListRow,
    PreferenceRow,
    SliderRow,
    SwitchRow,
    TextRow,
    make_row,
)

__all__ = [
    "PreferenceRow",
    "ActionRow",
    "ChoiceRow",
    "LinkRow",
    "NumberListRow",
    "SliderRow",
    "SwitchRow",
    "TextRow",
    "make_row",
]
