"""Registry of the top-level settings screens.

Player and engine profile screens are built per object and are not listed
here; see screens.players and screens.engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from model.screen import PreferenceScreen
from model.settings import GoSettings
from screens.board import (
    build_board_position_screen,
    build_board_setup_screen,
    build_display_screen,
    build_touch_screen,
)
from screens.play import (
    build_computer_assistance_screen,
    build_game_variations_screen,
    build_markup_screen,
    build_scoring_screen,
)
from screens.sgf import build_sgf_screen
from screens.tree_view import build_tree_view_screen


@dataclass(frozen=True)
class ScreenEntry:
    """A settings screen as listed in the root menu."""

    name: str
    title: str
    build: Callable[..., PreferenceScreen]
    # Keyword arguments the builder accepts besides the settings
    collaborators: tuple[str, ...] = ()


SCREENS: dict[str, ScreenEntry] = {
    entry.name: entry
    for entry in (
        ScreenEntry("display", "Display", build_display_screen, ("toggle_territory_statistics",)),
        ScreenEntry("board-position", "Board position", build_board_position_screen),
        ScreenEntry("board-setup", "Board setup", build_board_setup_screen),
        ScreenEntry("computer-assistance", "Computer assistance", build_computer_assistance_screen),
        ScreenEntry("game-variations", "Game variations", build_game_variations_screen),
        ScreenEntry("markup", "Markup", build_markup_screen),
        ScreenEntry("scoring", "Scoring", build_scoring_screen),
        ScreenEntry("tree-view", "Tree view", build_tree_view_screen),
        ScreenEntry("touch", "Touch interaction", build_touch_screen),
        ScreenEntry("sgf", "Smart Game Format (SGF)", build_sgf_screen),
    )
}


def build_screen(name: str, settings: GoSettings, **collaborators: Any) -> PreferenceScreen:
    """Build a registered screen.

    Collaborators the screen does not take are ignored, so callers can pass
    the same set to every screen.

    Raises:
        KeyError: If no screen is registered under ``name``
    """
    entry = SCREENS[name]
    kwargs = {key: value for key, value in collaborators.items() if key in entry.collaborators}
    return entry.build(settings, **kwargs)
