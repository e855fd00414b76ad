"""Screens for how the Go board looks and reacts: display, board position, board setup, touch."""

from __future__ import annotations

from typing import Callable

from constants import MAXIMUM_ZOOM_SCALE_MAXIMUM, MAXIMUM_ZOOM_SCALE_MINIMUM
from model.preference import SliderField, SwitchField, bound
from model.screen import PreferenceGroup, PreferenceScreen
from model.settings import GoSettings


def build_display_screen(
    settings: GoSettings,
    toggle_territory_statistics: Callable[[], None] | None = None,
) -> PreferenceScreen:
    """Display settings.

    Args:
        settings: The application's backing models
        toggle_territory_statistics: Command run after "Display player influence"
            changes, so that influence statistics are computed or discarded
    """
    view = settings.board_view
    return PreferenceScreen("display", "Display settings", [
        PreferenceGroup("last-move", [
            SwitchField("mark-last-move", "Mark last move", **bound(view, "mark_last_move")),
        ]),
        PreferenceGroup("coordinates", [
            SwitchField("display-coordinates", "Display coordinates", **bound(view, "display_coordinates")),
        ], footer="On small boards you may need to zoom in to see coordinate labels."),
        PreferenceGroup("move-numbers", [
            SliderField(
                "move-numbers-percentage", "Display move numbers",
                minimum=0, maximum=100, scale=100, integral=False, unit="%",
                **bound(view, "move_numbers_percentage"),
            ),
        ], footer="The lowest setting displays no move numbers, the highest setting "
                  "displays all move numbers."),
        PreferenceGroup("player-influence", [
            SwitchField(
                "display-player-influence", "Display player influence",
                side_effect=toggle_territory_statistics,
                **bound(view, "display_player_influence"),
            ),
        ], footer="After turning this on, the board displays player influence as soon as "
                  "the computer player has made its next move."),
    ])


def build_board_position_screen(settings: GoSettings) -> PreferenceScreen:
    position = settings.board_position
    return PreferenceScreen("board-position", "Board position settings", [
        PreferenceGroup("next-move", [
            SwitchField("mark-next-move", "Mark next move", **bound(position, "mark_next_move")),
        ]),
        PreferenceGroup("discard-my-last-move", [
            SwitchField("discard-my-last-move", "Discard my last move", **bound(position, "discard_my_last_move")),
        ], footer="When you discard the computer player's last move this also discards your "
                  "own last move, so that you can immediately try out a different move. Turn "
                  "this off to discard only a single move, regardless of who made it. This "
                  "only affects computer vs. human games."),
        PreferenceGroup("discard-future-moves", [
            SwitchField(
                "discard-future-moves-alert", "Discard future moves alert",
                **bound(position, "discard_future_moves_alert"),
            ),
        ], footer="If you make or discard a move while you are viewing a board position in "
                  "the middle of the game, all moves after this position are discarded. If "
                  "this is turned off you are NOT alerted that this is going to happen."),
    ])


def build_board_setup_screen(settings: GoSettings) -> PreferenceScreen:
    setup = settings.board_setup
    return PreferenceScreen("board-setup", "Board setup settings", [
        PreferenceGroup("double-tap", [
            SwitchField("double-tap-to-zoom", "Double-tap to zoom", **bound(setup, "double_tap_to_zoom")),
        ], footer="Tapping the same intersection several times in a row cycles through the "
                  "setup stone colors but may also trigger the zoom gesture. Disable the "
                  "gesture here if it gets in your way in board setup mode."),
        PreferenceGroup("auto-enable", [
            SwitchField(
                "auto-enable-board-setup", "Auto-enable board setup",
                **bound(setup, "auto_enable_board_setup_mode"),
            ),
        ], footer="Switch to board setup mode automatically when a new game starts, e.g. "
                  "while creating a collection of Go problems."),
    ])


def build_touch_screen(settings: GoSettings) -> PreferenceScreen:
    touch = settings.touch
    return PreferenceScreen("touch", "Touch interaction", [
        PreferenceGroup("stone-distance", [
            SliderField(
                "stone-distance-from-fingertip", "Stone distance from fingertip",
                minimum=0, maximum=100, scale=100, integral=False, unit="%",
                **bound(touch, "stone_distance_from_fingertip"),
            ),
        ], footer="How far away from your fingertip the stone appears when you touch the "
                  "board. The lowest setting places the stone directly under your fingertip."),
        PreferenceGroup("zoom", [
            SliderField(
                "maximum-zoom-scale", "Maximum zoom",
                minimum=int(MAXIMUM_ZOOM_SCALE_MINIMUM * 10),
                maximum=int(MAXIMUM_ZOOM_SCALE_MAXIMUM * 10),
                scale=10, integral=False,
                formatter=lambda value: f"{value:.1f}x",
                **bound(touch, "maximum_zoom_scale"),
            ),
        ], footer="Zooming costs memory. A limit below the maximum keeps an accidental "
                  "zoom from exhausting it."),
    ])
