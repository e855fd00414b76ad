"""Screens for playing and scoring: computer assistance, game variations, markup, scoring."""

from __future__ import annotations

from model.enums import (
    ComputerAssistanceType,
    InconsistentTerritoryMarkupType,
    MarkupPrecedence,
    NewMoveInsertPolicy,
    NewVariationInsertPosition,
    SelectedSymbolMarkupStyle,
)
from model.preference import ChoiceField, SwitchField, bound
from model.screen import PreferenceGroup, PreferenceScreen
from model.settings import GoSettings

COMPUTER_ASSISTANCE_LABELS = {
    ComputerAssistanceType.PLAY_FOR_ME: "Play for me",
    ComputerAssistanceType.SUGGEST_MOVE: "Suggest move",
    ComputerAssistanceType.NONE: "No assistance",
}

INSERT_POLICY_LABELS = {
    NewMoveInsertPolicy.RETAIN_FUTURE_BOARD_POSITIONS: "Keep current game variation",
    NewMoveInsertPolicy.REPLACE_FUTURE_BOARD_POSITIONS: "Replace current game variation",
}

INSERT_POSITION_LABELS = {
    NewVariationInsertPosition.TOP: "Above all other game variations",
    NewVariationInsertPosition.BOTTOM: "Below all other game variations",
    NewVariationInsertPosition.ABOVE_CURRENT_VARIATION: "Above current game variation",
    NewVariationInsertPosition.BELOW_CURRENT_VARIATION: "Below current game variation",
}

SELECTED_SYMBOL_LABELS = {
    SelectedSymbolMarkupStyle.DOT_SYMBOL: "Dot symbol",
    SelectedSymbolMarkupStyle.CHECK_MARK: "Check mark",
}

MARKUP_PRECEDENCE_LABELS = {
    MarkupPrecedence.SYMBOLS: "Draw symbols first",
    MarkupPrecedence.LABELS: "Draw labels first",
}

INCONSISTENT_TERRITORY_LABELS = {
    InconsistentTerritoryMarkupType.DOT_SYMBOL: "Dot symbol",
    InconsistentTerritoryMarkupType.FILL_COLOR: "Fill color",
    InconsistentTerritoryMarkupType.NEUTRAL: "Neutral",
}


def _enum_choice(labels: dict, **kwargs) -> dict:
    """values/labels keyword arguments for a ChoiceField over an enum label table."""
    return {"values": list(labels), "labels": list(labels.values()), **kwargs}


def build_computer_assistance_screen(settings: GoSettings) -> PreferenceScreen:
    play = settings.play
    return PreferenceScreen("computer-assistance", "Computer assistance", [
        PreferenceGroup("assistance", [
            ChoiceField(
                "computer-assistance-type", "Computer assistance",
                **_enum_choice(COMPUTER_ASSISTANCE_LABELS, picker_title="Select assistance type"),
                **bound(play, "computer_assistance_type"),
            ),
        ], footer="When it is your turn you can ask the computer for assistance. It either "
                  "plays a move on your behalf (which you can still discard) or only suggests "
                  "a move that you then have to play yourself."),
    ])


def build_game_variations_screen(settings: GoSettings) -> PreferenceScreen:
    variation = settings.game_variation

    def keeps_current_variation() -> bool:
        return variation.new_move_insert_policy == NewMoveInsertPolicy.RETAIN_FUTURE_BOARD_POSITIONS

    return PreferenceScreen("game-variations", "Game variations settings", [
        PreferenceGroup("insert-policy", [
            ChoiceField(
                "new-move-insert-policy", "New move insert policy",
                **_enum_choice(INSERT_POLICY_LABELS, picker_title="Select new move insert policy"),
                affects=("insert-position",),
                **bound(variation, "new_move_insert_policy"),
            ),
        ], footer="What happens to the current game variation when you play a move while "
                  "viewing a board position in its middle: keep it and insert the new move as "
                  "a new game variation, or discard the remaining board positions and replace "
                  "them with the new move."),
        PreferenceGroup("insert-position", [
            ChoiceField(
                "new-variation-insert-position", "New game variation insert position",
                **_enum_choice(INSERT_POSITION_LABELS, picker_title="Select new game variation insert position"),
                enabled_when=keeps_current_variation,
                **bound(variation, "new_variation_insert_position"),
            ),
        ], footer="Where a game variation created because of the setting above is inserted "
                  "into the node tree."),
    ])


def build_markup_screen(settings: GoSettings) -> PreferenceScreen:
    markup = settings.markup
    return PreferenceScreen("markup", "Markup settings", [
        PreferenceGroup("selected-symbol", [
            ChoiceField(
                "selected-symbol-style", '"Selected" symbol style',
                **_enum_choice(SELECTED_SYMBOL_LABELS, picker_title="Select symbol style"),
                **bound(markup, "selected_symbol_markup_style"),
            ),
        ], footer='The style used to mark up an intersection with the "selected" symbol.'),
        PreferenceGroup("precedence", [
            ChoiceField(
                "markup-precedence", "Markup precedence",
                **_enum_choice(MARKUP_PRECEDENCE_LABELS, picker_title="Select markup precedence"),
                **bound(markup, "markup_precedence"),
            ),
        ], footer="Only one of symbol and label markup can be drawn on an intersection "
                  "that has both. This decides which one."),
        PreferenceGroup("unique-symbols", [
            SwitchField("unique-symbols", "Unique symbols", **bound(markup, "unique_symbols")),
        ], footer="Each placed symbol is one that is not yet on the board."),
        PreferenceGroup("connection-tool", [
            SwitchField(
                "connection-tool-allows-delete", "Connection tool allows delete",
                **bound(markup, "connection_tool_allows_delete"),
            ),
        ], footer="Tapping a connection's end point with the connection tool deletes the "
                  "connection. If turned off only the eraser deletes connections."),
        PreferenceGroup("marker-gaps", [
            SwitchField("fill-marker-gaps", "Fill marker gaps", **bound(markup, "fill_marker_gaps")),
        ], footer="With number markers 1, 2 and 4 on the board the next marker is 3 when "
                  "turned on, 5 when turned off."),
    ])


def build_scoring_screen(settings: GoSettings) -> PreferenceScreen:
    scoring = settings.scoring
    return PreferenceScreen("scoring", "Scoring settings", [
        PreferenceGroup("scoring", [
            SwitchField(
                "find-dead-stones", "Find dead stones",
                **bound(scoring, "ask_gtp_engine_for_dead_stones"),
            ),
            SwitchField(
                "mark-dead-stones-intelligently", "Mark dead stones intelligently",
                **bound(scoring, "mark_dead_stones_intelligently"),
            ),
            ChoiceField(
                "inconsistent-territory", "Inconsistent territory",
                **_enum_choice(
                    INCONSISTENT_TERRITORY_LABELS,
                    picker_title="Select style",
                    picker_footer="Select neutral to not mark inconsistent territory at all.",
                ),
                **bound(scoring, "inconsistent_territory_markup_type"),
            ),
        ], footer="Inconsistent territory is territory whose owner cannot be determined "
                  "because the dead or alive state of its neighbouring stones contradicts "
                  "itself."),
    ])
