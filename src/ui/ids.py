"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, SCREEN_TITLE
        self.query_one(css(SCREEN_TITLE), Label)
    """
    return f"#{widget_id}"


def row_id(field_id: str) -> str:
    """Widget ID of the row showing a preference field."""
    return f"row-{field_id}"


def group_id(group_name: str) -> str:
    """Widget ID of the container holding a preference group."""
    return f"group-{group_name}"


def menu_screen_id(screen_name: str) -> str:
    return f"menu-{screen_name}"


def menu_player_id(index: int) -> str:
    return f"menu-player-{index}"


def menu_profile_id(index: int) -> str:
    return f"menu-profile-{index}"


# Root menu IDs
MENU_TITLE = "menu-title"
MENU_LIST = "menu-list"
MENU_PLAYERS_HEADER = "menu-players-header"
MENU_PROFILES_HEADER = "menu-profiles-header"
MENU_PLAYERS = "menu-players"
MENU_PROFILES = "menu-profiles"
NEW_PLAYER_BTN = "new-player-btn"
NEW_PROFILE_BTN = "new-profile-btn"
STATUS_BAR = "status-bar"

# Preference screen view IDs
SCREEN_TITLE = "screen-title"
SCREEN_BODY = "screen-body"
BACK_BTN = "back-btn"

# Modal IDs
MODAL_TITLE = "modal-title"
MODAL_FOOTER = "modal-footer"
MODAL_BUTTONS = "modal-buttons"
MODAL_ERROR = "modal-error"
CANCEL_BTN = "cancel-btn"
CONFIRM_BTN = "confirm-btn"
DONE_BTN = "done-btn"
PICKER_LIST = "picker-list"
PICKER_MODAL = "picker-modal"
EDIT_TEXT_MODAL = "edit-text-modal"
EDIT_TEXT_INPUT = "edit-text-input"
NUMBER_LIST_MODAL = "number-list-modal"
NUMBER_LIST_ITEMS = "number-list-items"
NUMBER_LIST_INPUT = "number-list-input"
ADD_NUMBER_BTN = "add-number-btn"
CONFIRM_MODAL = "confirm-modal"
CONFIRM_MESSAGE = "confirm-message"
