"""Enumerations for choice-valued settings.

Member order is the order in which item pickers list the choices.
"""

from enum import Enum


class ComputerAssistanceType(Enum):
    """What the computer does when the human asks for help."""

    PLAY_FOR_ME = "play-for-me"
    SUGGEST_MOVE = "suggest-move"
    NONE = "none"


class NewMoveInsertPolicy(Enum):
    """What happens to future board positions when a move is played mid-game."""

    RETAIN_FUTURE_BOARD_POSITIONS = "retain"
    REPLACE_FUTURE_BOARD_POSITIONS = "replace"


class NewVariationInsertPosition(Enum):
    """Where a new game variation goes in the node tree."""

    TOP = "top"
    BOTTOM = "bottom"
    ABOVE_CURRENT_VARIATION = "above-current"
    BELOW_CURRENT_VARIATION = "below-current"


class SelectedSymbolMarkupStyle(Enum):
    DOT_SYMBOL = "dot"
    CHECK_MARK = "check"


class MarkupPrecedence(Enum):
    SYMBOLS = "symbols"
    LABELS = "labels"


class InconsistentTerritoryMarkupType(Enum):
    DOT_SYMBOL = "dot"
    FILL_COLOR = "fill"
    NEUTRAL = "neutral"


class BranchingStyle(Enum):
    DIAGONAL = "diagonal"
    RIGHT_ANGLE = "right-angle"


class NodeSelectionStyle(Enum):
    LIGHT_CIRCULAR = "light-circular"
    HEAVY_CIRCULAR = "heavy-circular"
    HEAVY_RECTANGULAR = "heavy-rectangular"


class FocusMode(Enum):
    """How the node tree view scrolls when the selected node changes."""

    DISABLED = "disabled"
    MAKE_SELECTED_NODE_VISIBLE = "visible"
    MAKE_SELECTED_NODE_VISIBLE_CENTERED = "visible-centered"
    CENTER_SELECTED_NODE = "center"


class SgfLoadSuccessType(Enum):
    """Which SGFC messages may be present for SGF data to still load."""

    NO_WARNINGS_OR_ERRORS = "none"
    NO_CRITICAL_WARNINGS_OR_ERRORS = "no-critical"
    WITH_CRITICAL_WARNINGS_OR_ERRORS = "with-critical"


class SgfEncodingMode(Enum):
    SINGLE_ENCODING = "single"
    MULTIPLE_ENCODINGS = "multiple"
    BOTH = "both"
