"""Settings screens declared as preference fields over the Go settings models."""

from screens.catalog import SCREENS, ScreenEntry, build_screen
from screens.engine import (
    build_playing_strength_screen,
    build_profile_screen,
    build_resign_behaviour_screen,
)
from screens.players import build_player_screen
from screens.sgf import build_sgf_syntax_checking_level_screen

__all__ = [
    "SCREENS",
    "ScreenEntry",
    "build_screen",
    # Per-object screens
    "build_player_screen",
    "build_profile_screen",
    # Child screens
    "build_playing_strength_screen",
    "build_resign_behaviour_screen",
    "build_sgf_syntax_checking_level_screen",
]
