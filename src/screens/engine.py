"""GTP engine profile screens: the profile itself, its playing strength and resign behaviour."""

from __future__ import annotations

from constants import (
    BOARD_SIZES,
    DEFAULT_PLAYING_STRENGTH,
    MAX_GAMES_BUCKETS,
    MAX_MEMORY_MAXIMUM,
    MAX_MEMORY_MINIMUM,
    MAX_PONDER_TIME_MAXIMUM,
    MAX_PONDER_TIME_MINIMUM,
    MAX_THINKING_TIME_MAXIMUM,
    MAX_THINKING_TIME_MINIMUM,
    MAXIMUM_PLAYING_STRENGTH,
    MINIMUM_PLAYING_STRENGTH,
    RESIGN_MIN_GAMES_BUCKETS,
    RESIGN_THRESHOLD_DEFAULT,
    RESIGN_THRESHOLD_MAXIMUM,
    RESIGN_THRESHOLD_MINIMUM,
    THREAD_COUNT_MAXIMUM,
    THREAD_COUNT_MINIMUM,
    UNLIMITED_MAX_GAMES,
)
from controller.validators import validate_name
from model.preference import (
    ActionField,
    ChoiceField,
    LinkField,
    SliderField,
    SwitchField,
    TextField,
    bound,
)
from model.screen import PreferenceGroup, PreferenceScreen
from model.settings import GtpEngineProfile

SECONDS_PER_MINUTE = 60


def max_games_label(max_games: int) -> str:
    """'Unlimited' for the maximum, thousands separated by an apostrophe otherwise."""
    if max_games == UNLIMITED_MAX_GAMES:
        return "Unlimited"
    if max_games < 10000:
        return str(max_games)
    return f"{max_games:,}".replace(",", "'")


def playing_strength_label(level: int) -> str:
    if MINIMUM_PLAYING_STRENGTH <= level <= MAXIMUM_PLAYING_STRENGTH:
        return str(level)
    return "Custom"


def build_profile_screen(profile: GtpEngineProfile) -> PreferenceScreen:
    """The engine profile with links to its advanced settings."""

    def set_playing_strength(level: int) -> None:
        profile.playing_strength = level

    levels = list(range(MINIMUM_PLAYING_STRENGTH, MAXIMUM_PLAYING_STRENGTH + 1))

    return PreferenceScreen("gtp-engine-profile", "Edit profile", [
        PreferenceGroup("name", [
            TextField(
                "profile-name", "Profile name",
                validator=validate_name, placeholder="Profile name",
                getter=lambda: profile.name, setter=lambda name: setattr(profile, "name", name),
            ),
            TextField(
                "profile-description", "Profile description",
                getter=lambda: profile.description,
                setter=lambda text: setattr(profile, "description", text),
            ),
        ], header="Profile name & description"),
        PreferenceGroup("playing-strength", [
            ChoiceField(
                "playing-strength", "Playing strength",
                values=levels, labels=[str(level) for level in levels],
                picker_title="Select playing strength",
                picker_footer=f"The default playing strength is {DEFAULT_PLAYING_STRENGTH}.",
                unmatched=playing_strength_label,
                getter=lambda: profile.playing_strength, setter=set_playing_strength,
                default=DEFAULT_PLAYING_STRENGTH,
            ),
            LinkField(
                "playing-strength-details", "Advanced configuration",
                target=lambda: build_playing_strength_screen(profile),
            ),
        ], header="Playing strength", footer="Changed settings are applied only after a new "
                                             "game with a player who uses this profile is started."),
        PreferenceGroup("resign-behaviour", [
            LinkField(
                "resign-behaviour", "Resign behaviour",
                target=lambda: build_resign_behaviour_screen(profile),
            ),
        ]),
        PreferenceGroup("reset", [
            ActionField(
                "reset-profile",
                resetter=profile.reset_to_default_values,
                confirm_message="This will reset the engine settings of this profile to their "
                                "default values. Name and description are kept.",
            ),
        ]),
    ])


def build_playing_strength_screen(profile: GtpEngineProfile) -> PreferenceScreen:
    """Engine parameters that together make up the playing strength."""
    return PreferenceScreen("playing-strength", "Playing strength", [
        PreferenceGroup("max-memory", [
            SliderField(
                "max-memory", "Max. memory (MB)",
                minimum=MAX_MEMORY_MINIMUM, maximum=MAX_MEMORY_MAXIMUM,
                **bound(profile, "max_memory"),
            ),
        ], footer="WARNING: Setting this value too high can exhaust the memory available "
                  "to the engine."),
        PreferenceGroup("threads", [
            SliderField(
                "thread-count", "Number of threads",
                minimum=THREAD_COUNT_MINIMUM, maximum=THREAD_COUNT_MAXIMUM,
                **bound(profile, "thread_count"),
            ),
        ]),
        PreferenceGroup("pondering", [
            SwitchField(
                "pondering", "Pondering",
                affects=("pondering",),
                **bound(profile, "pondering"),
            ),
            SliderField(
                "max-ponder-time", "Ponder time (minutes)",
                minimum=MAX_PONDER_TIME_MINIMUM // SECONDS_PER_MINUTE,
                maximum=MAX_PONDER_TIME_MAXIMUM // SECONDS_PER_MINUTE,
                scale=1 / SECONDS_PER_MINUTE,
                visible_when=lambda: profile.pondering,
                **bound(profile, "max_ponder_time"),
            ),
            # Forced on while pondering
            SwitchField(
                "reuse-subtree", "Reuse subtree",
                enabled_when=lambda: not profile.pondering,
                **bound(profile, "reuse_subtree"),
            ),
        ]),
        PreferenceGroup("playout-limits", [
            SliderField(
                "max-thinking-time", "Thinking time (seconds)",
                minimum=MAX_THINKING_TIME_MINIMUM, maximum=MAX_THINKING_TIME_MAXIMUM,
                **bound(profile, "max_thinking_time"),
            ),
            ChoiceField(
                "max-games", "Max. games",
                values=list(MAX_GAMES_BUCKETS),
                labels=[max_games_label(games) for games in MAX_GAMES_BUCKETS],
                unmatched=str,
                **bound(profile, "max_games"),
            ),
        ]),
        PreferenceGroup("reset", [
            ActionField(
                "reset-playing-strength",
                confirm_message="This will reset the playing strength settings to their "
                                "default values. Any changes you have made will be discarded.",
            ),
        ]),
    ])


def build_resign_behaviour_screen(profile: GtpEngineProfile) -> PreferenceScreen:
    """Per-board-size resign thresholds and the minimum number of playout games."""
    thresholds = [
        SliderField(
            f"resign-threshold-{size}", f"{size}x{size} boards",
            minimum=RESIGN_THRESHOLD_MINIMUM, maximum=RESIGN_THRESHOLD_MAXIMUM, unit="%",
            getter=lambda size=size: profile.resign_threshold(size),
            setter=lambda value, size=size: profile.set_resign_threshold(size, value),
            default=RESIGN_THRESHOLD_DEFAULT,
        )
        for size in BOARD_SIZES
    ]
    return PreferenceScreen("resign-behaviour", "Resign behaviour", [
        PreferenceGroup("resign-threshold", thresholds, header="Resign threshold",
                        footer="The computer player resigns if the quality of the best move it "
                               "could find is below this threshold. At 0% it never resigns."),
        PreferenceGroup("min-games", [
            SwitchField(
                "auto-select-min-games", "Auto-select",
                affects=("min-games",),
                **bound(profile, "auto_select_resign_min_games"),
            ),
            ChoiceField(
                "resign-min-games", "Minimum games",
                values=list(RESIGN_MIN_GAMES_BUCKETS),
                labels=[str(games) for games in RESIGN_MIN_GAMES_BUCKETS],
                picker_title="Resign min. games",
                unmatched=str,
                enabled_when=lambda: not profile.auto_select_resign_min_games,
                **bound(profile, "resign_min_games"),
            ),
        ], header="Minimum number of games",
           footer="Playout games the computer must calculate before the resign threshold "
                  "applies. Leave 'Auto-select' on: if this value exceeds 'Max. games' the "
                  "computer will NEVER resign."),
        PreferenceGroup("reset", [
            ActionField(
                "reset-resign-behaviour",
                resetter=profile.reset_resign_behaviour,
                confirm_message="This will reset the resign behaviour settings to their "
                                "default values. Any changes you have made will be discarded.",
            ),
        ]),
    ])
