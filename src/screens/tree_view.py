"""Node tree view screen."""

from __future__ import annotations

from model.enums import BranchingStyle, FocusMode, NodeSelectionStyle
from model.preference import ChoiceField, SwitchField, bound
from model.screen import PreferenceGroup, PreferenceScreen
from model.settings import GoSettings

BRANCHING_STYLE_LABELS = {
    BranchingStyle.DIAGONAL: "Diagonal",
    BranchingStyle.RIGHT_ANGLE: "Right angle",
}

NODE_SELECTION_STYLE_LABELS = {
    NodeSelectionStyle.LIGHT_CIRCULAR: "Light & circular",
    NodeSelectionStyle.HEAVY_CIRCULAR: "Heavy & circular",
    NodeSelectionStyle.HEAVY_RECTANGULAR: "Heavy & rectangular",
}

# DISABLED is expressed by the "Focus on selected node" switch, not by the picker
FOCUS_MODE_LABELS = {
    FocusMode.MAKE_SELECTED_NODE_VISIBLE: "Scroll to make visible",
    FocusMode.MAKE_SELECTED_NODE_VISIBLE_CENTERED: "Scroll to make visible centered",
    FocusMode.CENTER_SELECTED_NODE: "Scroll to center (even if visible)",
}


def build_tree_view_screen(settings: GoSettings) -> PreferenceScreen:
    view = settings.node_tree_view

    def focus_enabled() -> bool:
        return view.focus_mode != FocusMode.DISABLED

    def set_focus_enabled(on: bool) -> None:
        view.focus_mode = FocusMode.MAKE_SELECTED_NODE_VISIBLE if on else FocusMode.DISABLED

    return PreferenceScreen("tree-view", "Tree view settings", [
        PreferenceGroup("branching-style", [
            ChoiceField(
                "branching-style", "Branching style",
                values=list(BRANCHING_STYLE_LABELS), labels=list(BRANCHING_STYLE_LABELS.values()),
                picker_title="Select branching style",
                **bound(view, "branching_style"),
            ),
        ], footer="The last section of a branching line is drawn either diagonally, which "
                  "makes a tighter diagram, or at a right angle, which may be easier to read."),
        PreferenceGroup("align-moves", [
            SwitchField("align-moves", "Align moves", **bound(view, "align_move_nodes")),
        ], footer="Moves with the same number in different game variations are drawn at "
                  "the same position."),
        PreferenceGroup("condense-moves", [
            SwitchField("condense-moves", "Condense moves", **bound(view, "condense_move_nodes")),
        ], footer="Moves inside a sequence of moves are drawn smaller than the moves at the "
                  "beginning or end of the sequence."),
        PreferenceGroup("node-selection-style", [
            ChoiceField(
                "node-selection-style", "Node selection style",
                values=list(NODE_SELECTION_STYLE_LABELS),
                labels=list(NODE_SELECTION_STYLE_LABELS.values()),
                picker_title="Select node selection style",
                **bound(view, "node_selection_style"),
            ),
        ], footer="The marker drawn around the selected node."),
        PreferenceGroup("focus-mode", [
            SwitchField(
                "focus-on-selected-node", "Focus on selected node",
                getter=focus_enabled, setter=set_focus_enabled, default=True,
                affects=("focus-mode",),
            ),
            ChoiceField(
                "focus-mode", "Focus mode",
                values=list(FOCUS_MODE_LABELS), labels=list(FOCUS_MODE_LABELS.values()),
                picker_title="Select focus mode",
                picker_footer="The first two options scroll only if the newly selected node is "
                              "not fully visible, either just enough to show it at an edge or "
                              "to show it centered. The last option always scrolls to center "
                              "the newly selected node.",
                visible_when=focus_enabled,
                **bound(view, "focus_mode"),
            ),
        ], footer="When the selected node changes, the node tree view automatically scrolls "
                  "to focus on the newly selected node."),
    ])
