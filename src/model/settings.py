"""Backing models for the Go settings screens.

Each model is a plain in-memory record. Preference screens read and write
these through getter/setter closures; the models know nothing about screens.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from constants import (
    AUTO_SELECT_RESIGN_MIN_GAMES_DEFAULT,
    BOARD_SIZES,
    CUSTOM_PLAYING_STRENGTH,
    CUSTOM_SYNTAX_CHECKING_LEVEL,
    DEFAULT_DISABLED_MESSAGES,
    DEFAULT_PLAYING_STRENGTH,
    MAX_GAMES_DEFAULT,
    MAX_MEMORY_DEFAULT,
    MAX_MEMORY_MAXIMUM,
    MAX_MEMORY_MINIMUM,
    MAX_PONDER_TIME_DEFAULT,
    MAX_PONDER_TIME_MAXIMUM,
    MAX_PONDER_TIME_MINIMUM,
    MAX_THINKING_TIME_DEFAULT,
    MAX_THINKING_TIME_MAXIMUM,
    MAX_THINKING_TIME_MINIMUM,
    MAXIMUM_ZOOM_SCALE_DEFAULT,
    MAXIMUM_ZOOM_SCALE_MAXIMUM,
    MAXIMUM_ZOOM_SCALE_MINIMUM,
    MOVE_NUMBERS_PERCENTAGE_DEFAULT,
    PLAYING_STRENGTH_PRESETS,
    PONDERING_DEFAULT,
    RESIGN_MIN_GAMES_DEFAULT,
    RESIGN_THRESHOLD_DEFAULT,
    RESIGN_THRESHOLD_MAXIMUM,
    RESIGN_THRESHOLD_MINIMUM,
    REUSE_SUBTREE_DEFAULT,
    STONE_DISTANCE_FROM_FINGERTIP_DEFAULT,
    THREAD_COUNT_DEFAULT,
    THREAD_COUNT_MAXIMUM,
    THREAD_COUNT_MINIMUM,
    UNLIMITED_MAX_GAMES,
)
from model.enums import (
    BranchingStyle,
    ComputerAssistanceType,
    FocusMode,
    InconsistentTerritoryMarkupType,
    MarkupPrecedence,
    NewMoveInsertPolicy,
    NewVariationInsertPosition,
    NodeSelectionStyle,
    SelectedSymbolMarkupStyle,
    SgfEncodingMode,
    SgfLoadSuccessType,
)
from model.setting import Setting, SettingsBase

log = logging.getLogger(__name__)


def _new_uuid() -> str:
    return str(uuid.uuid4())


class BoardViewModel(SettingsBase):
    """What the Go board draws on top of the stones."""

    mark_last_move = Setting(bool, False)
    display_coordinates = Setting(bool, False)
    move_numbers_percentage = Setting(float, MOVE_NUMBERS_PERCENTAGE_DEFAULT, minimum=0.0, maximum=1.0)
    display_player_influence = Setting(bool, False)


class BoardPositionModel(SettingsBase):
    mark_next_move = Setting(bool, True)
    discard_my_last_move = Setting(bool, True)
    discard_future_moves_alert = Setting(bool, True)


class BoardSetupModel(SettingsBase):
    double_tap_to_zoom = Setting(bool, True)
    auto_enable_board_setup_mode = Setting(bool, False)


class PlayModel(SettingsBase):
    computer_assistance_type = Setting(ComputerAssistanceType, ComputerAssistanceType.NONE)


class GameVariationModel(SettingsBase):
    new_move_insert_policy = Setting(
        NewMoveInsertPolicy, NewMoveInsertPolicy.RETAIN_FUTURE_BOARD_POSITIONS
    )
    new_variation_insert_position = Setting(
        NewVariationInsertPosition, NewVariationInsertPosition.BELOW_CURRENT_VARIATION
    )


class MarkupModel(SettingsBase):
    selected_symbol_markup_style = Setting(SelectedSymbolMarkupStyle, SelectedSymbolMarkupStyle.DOT_SYMBOL)
    markup_precedence = Setting(MarkupPrecedence, MarkupPrecedence.SYMBOLS)
    unique_symbols = Setting(bool, True)
    connection_tool_allows_delete = Setting(bool, True)
    fill_marker_gaps = Setting(bool, True)


class ScoringModel(SettingsBase):
    ask_gtp_engine_for_dead_stones = Setting(bool, True)
    mark_dead_stones_intelligently = Setting(bool, True)
    inconsistent_territory_markup_type = Setting(
        InconsistentTerritoryMarkupType, InconsistentTerritoryMarkupType.NEUTRAL
    )


class NodeTreeViewModel(SettingsBase):
    branching_style = Setting(BranchingStyle, BranchingStyle.DIAGONAL)
    align_move_nodes = Setting(bool, False)
    condense_move_nodes = Setting(bool, False)
    node_selection_style = Setting(NodeSelectionStyle, NodeSelectionStyle.LIGHT_CIRCULAR)
    focus_mode = Setting(FocusMode, FocusMode.MAKE_SELECTED_NODE_VISIBLE)


class TouchModel(SettingsBase):
    stone_distance_from_fingertip = Setting(
        float, STONE_DISTANCE_FROM_FINGERTIP_DEFAULT, minimum=0.0, maximum=1.0
    )
    maximum_zoom_scale = Setting(
        float, MAXIMUM_ZOOM_SCALE_DEFAULT,
        minimum=MAXIMUM_ZOOM_SCALE_MINIMUM, maximum=MAXIMUM_ZOOM_SCALE_MAXIMUM,
    )


class SgfSettingsModel(SettingsBase):
    """How strictly SGF data is checked when it is loaded.

    The four level-related properties (load success type, restrictive
    checking, disable all warnings, disabled messages) combine into a
    syntax checking level. Combinations that match no level are "custom".
    """

    SYNTAX_CHECKING_LEVEL_SETTINGS = (
        "load_success_type",
        "enable_restrictive_checking",
        "disable_all_warning_messages",
        "disabled_messages",
    )

    load_success_type = Setting(SgfLoadSuccessType, SgfLoadSuccessType.NO_CRITICAL_WARNINGS_OR_ERRORS)
    enable_restrictive_checking = Setting(bool, False)
    disable_all_warning_messages = Setting(bool, False)
    disabled_messages = Setting(list, default_factory=lambda: list(DEFAULT_DISABLED_MESSAGES))
    encoding_mode = Setting(SgfEncodingMode, SgfEncodingMode.BOTH)
    default_encoding = Setting(str, "")
    forced_encoding = Setting(str, "")
    reverse_variation_ordering = Setting(bool, False)

    def _has_default_disabled_messages(self) -> bool:
        return sorted(self.disabled_messages) == sorted(DEFAULT_DISABLED_MESSAGES)

    @property
    def syntax_checking_level(self) -> int:
        """Level 1-4 matching the current properties, or CUSTOM_SYNTAX_CHECKING_LEVEL."""
        restrictive = self.enable_restrictive_checking
        no_warnings = self.disable_all_warning_messages
        default_messages = self._has_default_disabled_messages()

        if self.load_success_type == SgfLoadSuccessType.WITH_CRITICAL_WARNINGS_OR_ERRORS:
            if not restrictive and no_warnings and default_messages:
                return 1
        elif self.load_success_type == SgfLoadSuccessType.NO_CRITICAL_WARNINGS_OR_ERRORS:
            if not restrictive and not no_warnings and default_messages:
                return 2
        elif self.load_success_type == SgfLoadSuccessType.NO_WARNINGS_OR_ERRORS:
            if restrictive and not no_warnings and not self.disabled_messages:
                return 4
            if not restrictive and not no_warnings and default_messages:
                return 3
        return CUSTOM_SYNTAX_CHECKING_LEVEL

    @syntax_checking_level.setter
    def syntax_checking_level(self, level: int) -> None:
        if level not in (1, 2, 3, 4):
            raise ValueError(f"Syntax checking level {level} is invalid")
        self.reset_syntax_checking_level()
        if level == 1:
            self.load_success_type = SgfLoadSuccessType.WITH_CRITICAL_WARNINGS_OR_ERRORS
            self.disable_all_warning_messages = True
        elif level == 3:
            self.load_success_type = SgfLoadSuccessType.NO_WARNINGS_OR_ERRORS
        elif level == 4:
            self.load_success_type = SgfLoadSuccessType.NO_WARNINGS_OR_ERRORS
            self.enable_restrictive_checking = True
            self.disabled_messages = []

    def reset_syntax_checking_level(self) -> None:
        """Reset the level-related properties (this yields level 2)."""
        self.reset_settings(self.SYNTAX_CHECKING_LEVEL_SETTINGS)


def _force_reuse_subtree(profile: GtpEngineProfile, pondering: bool) -> None:
    # Pondering only makes sense if the search tree survives between moves
    if pondering:
        profile.reuse_subtree = True


class GtpEngineProfile(SettingsBase):
    """Settings handed to the GTP engine when a computer player starts a game."""

    PLAYING_STRENGTH_SETTINGS = (
        "max_memory",
        "thread_count",
        "pondering",
        "max_ponder_time",
        "reuse_subtree",
        "max_thinking_time",
        "max_games",
    )

    uuid = Setting(str, default_factory=_new_uuid)
    name = Setting(str, "New profile")
    description = Setting(str, "")
    max_memory = Setting(int, MAX_MEMORY_DEFAULT, minimum=MAX_MEMORY_MINIMUM, maximum=MAX_MEMORY_MAXIMUM)
    thread_count = Setting(
        int, THREAD_COUNT_DEFAULT, minimum=THREAD_COUNT_MINIMUM, maximum=THREAD_COUNT_MAXIMUM
    )
    pondering = Setting(bool, PONDERING_DEFAULT, on_change=_force_reuse_subtree)
    max_ponder_time = Setting(
        int, MAX_PONDER_TIME_DEFAULT, minimum=MAX_PONDER_TIME_MINIMUM, maximum=MAX_PONDER_TIME_MAXIMUM
    )
    reuse_subtree = Setting(bool, REUSE_SUBTREE_DEFAULT)
    max_thinking_time = Setting(
        int, MAX_THINKING_TIME_DEFAULT,
        minimum=MAX_THINKING_TIME_MINIMUM, maximum=MAX_THINKING_TIME_MAXIMUM,
    )
    max_games = Setting(int, MAX_GAMES_DEFAULT, minimum=1, maximum=UNLIMITED_MAX_GAMES)
    auto_select_resign_min_games = Setting(bool, AUTO_SELECT_RESIGN_MIN_GAMES_DEFAULT)
    resign_min_games = Setting(int, RESIGN_MIN_GAMES_DEFAULT, minimum=0)
    resign_thresholds = Setting(
        dict, default_factory=lambda: {size: RESIGN_THRESHOLD_DEFAULT for size in BOARD_SIZES}
    )

    def resign_threshold(self, board_size: int) -> int:
        """Resign threshold in percent for a board size."""
        return self.resign_thresholds[board_size]

    def set_resign_threshold(self, board_size: int, threshold: int) -> None:
        if board_size not in BOARD_SIZES:
            raise ValueError(f"Invalid board size: {board_size}")
        if not RESIGN_THRESHOLD_MINIMUM <= threshold <= RESIGN_THRESHOLD_MAXIMUM:
            raise ValueError(f"Resign threshold {threshold} is out of range")
        self.resign_thresholds[board_size] = threshold

    @property
    def playing_strength(self) -> int:
        """Preset level 1-5 matching the current properties, or CUSTOM_PLAYING_STRENGTH.

        Levels 1-3 are told apart by max games alone. Memory, threads, ponder
        time and thinking time must be at their defaults for any level.
        """
        if (self.max_memory, self.thread_count, self.max_ponder_time, self.max_thinking_time) != (
            MAX_MEMORY_DEFAULT, THREAD_COUNT_DEFAULT, MAX_PONDER_TIME_DEFAULT, MAX_THINKING_TIME_DEFAULT
        ):
            return CUSTOM_PLAYING_STRENGTH
        for level, preset in PLAYING_STRENGTH_PRESETS.items():
            if preset["max_games"] != self.max_games:
                continue
            if self.max_games != UNLIMITED_MAX_GAMES:
                return level
            if (self.pondering, self.reuse_subtree) == (preset["pondering"], preset["reuse_subtree"]):
                return level
        return CUSTOM_PLAYING_STRENGTH

    @playing_strength.setter
    def playing_strength(self, level: int) -> None:
        if level not in PLAYING_STRENGTH_PRESETS:
            raise ValueError(f"Playing strength {level} is invalid")
        self.reset_playing_strength()
        preset = PLAYING_STRENGTH_PRESETS[level]
        # Pondering first: turning it on forces reuse_subtree
        self.pondering = preset["pondering"]
        self.reuse_subtree = preset["reuse_subtree"]
        self.max_games = preset["max_games"]

    def reset_playing_strength(self) -> None:
        self.reset_settings(self.PLAYING_STRENGTH_SETTINGS)

    def reset_resign_behaviour(self) -> None:
        self.reset_settings(
            ("resign_thresholds", "auto_select_resign_min_games", "resign_min_games")
        )

    def reset_to_default_values(self) -> None:
        """Reset everything except identity (uuid, name, description)."""
        self.reset_playing_strength()
        self.reset_resign_behaviour()


class PlayerInGameError(ValueError):
    """A player who takes part in the current game cannot be deleted."""


class Player(SettingsBase):
    uuid = Setting(str, default_factory=_new_uuid)
    name = Setting(str, "")
    human = Setting(bool, True)
    gtp_engine_profile_uuid = Setting(str, "")
    # Set while the player takes part in the current game
    is_playing = Setting(bool, False)


@dataclass
class GoSettings:
    """All backing models of the application.

    Passed explicitly to every screen builder.
    """

    board_view: BoardViewModel = field(default_factory=BoardViewModel)
    board_position: BoardPositionModel = field(default_factory=BoardPositionModel)
    board_setup: BoardSetupModel = field(default_factory=BoardSetupModel)
    play: PlayModel = field(default_factory=PlayModel)
    game_variation: GameVariationModel = field(default_factory=GameVariationModel)
    markup: MarkupModel = field(default_factory=MarkupModel)
    scoring: ScoringModel = field(default_factory=ScoringModel)
    node_tree_view: NodeTreeViewModel = field(default_factory=NodeTreeViewModel)
    touch: TouchModel = field(default_factory=TouchModel)
    sgf: SgfSettingsModel = field(default_factory=SgfSettingsModel)
    profiles: list[GtpEngineProfile] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)

    @classmethod
    def create_default(cls) -> GoSettings:
        """Settings with one engine profile, one human and one computer player."""
        profile = GtpEngineProfile(
            name="Default",
            description="Default profile for computer players",
        )
        human = Player(name="Human player", human=True)
        computer = Player(name="Fuego", human=False, gtp_engine_profile_uuid=profile.uuid)
        return cls(profiles=[profile], players=[human, computer])

    def profile(self, profile_uuid: str) -> GtpEngineProfile:
        for profile in self.profiles:
            if profile.uuid == profile_uuid:
                return profile
        raise KeyError(profile_uuid)

    def player(self, player_uuid: str) -> Player:
        for player in self.players:
            if player.uuid == player_uuid:
                return player
        raise KeyError(player_uuid)

    def player_named(self, name: str) -> Player:
        for player in self.players:
            if player.name == name:
                return player
        raise KeyError(name)

    def add_player(self, name: str, human: bool = True) -> Player:
        """Create a player. A new computer player starts on the first (fallback) profile."""
        player = Player(name=name, human=human)
        if not human and self.profiles:
            player.gtp_engine_profile_uuid = self.profiles[0].uuid
        self.players.append(player)
        log.info(f"Added player {name}")
        return player

    def remove_player(self, player: Player) -> None:
        if player.is_playing:
            raise PlayerInGameError(
                "Players that are participating in the current game cannot be deleted."
            )
        self.players.remove(player)
        log.info(f"Removed player {player.name}")

    def add_profile(self, name: str) -> GtpEngineProfile:
        """Create a profile at the default playing strength."""
        profile = GtpEngineProfile(name=name)
        profile.playing_strength = DEFAULT_PLAYING_STRENGTH
        self.profiles.append(profile)
        log.info(f"Added GTP engine profile {name}")
        return profile

    def remove_profile(self, profile: GtpEngineProfile) -> None:
        """Delete a profile. Players that used it are left without one."""
        self.profiles.remove(profile)
        for player in self.players:
            if player.gtp_engine_profile_uuid == profile.uuid:
                player.gtp_engine_profile_uuid = ""
        log.info(f"Removed GTP engine profile {profile.name}")
