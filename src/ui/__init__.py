"""UI module containing the menu, preference screen views, modals and row widgets."""

from ui.widgets import (
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
from ui.modals import ConfirmModal, EditTextModal, ItemPickerModal, NumberListModal
from ui.screen_view import PreferenceScreenView
from ui.menu import MenuScreen
from ui import ids

__all__ = [
    # Widgets
    "ActionRow",
    "ChoiceRow",
    "LinkRow",
    "NumberListRow",
    "PreferenceRow",
    "SliderRow",
    "SwitchRow",
    "TextRow",
    "make_row",
    # Modals
    "ConfirmModal",
    "EditTextModal",
    "ItemPickerModal",
    "NumberListModal",
    # Screens
    "MenuScreen",
    "PreferenceScreenView",
]
