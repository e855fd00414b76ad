"""Tests for the backing models."""

import pytest

from constants import (
    CUSTOM_PLAYING_STRENGTH,
    CUSTOM_SYNTAX_CHECKING_LEVEL,
    DEFAULT_DISABLED_MESSAGES,
    MAX_MEMORY_DEFAULT,
    RESIGN_MIN_GAMES_DEFAULT,
    UNLIMITED_MAX_GAMES,
)
from model import GoSettings, GtpEngineProfile, PlayerInGameError, SgfSettingsModel
from model.enums import SgfLoadSuccessType


class TestSyntaxCheckingLevel:
    """Test the level derived from the SGF checking properties."""

    def test_default_is_medium(self):
        """Fresh SGF settings are at level 2."""
        assert SgfSettingsModel().syntax_checking_level == 2

    @pytest.mark.parametrize("level", [1, 2, 3, 4])
    def test_set_level_reads_back(self, level):
        """Each level round-trips through its properties."""
        sgf = SgfSettingsModel()
        sgf.syntax_checking_level = level
        assert sgf.syntax_checking_level == level

    def test_level_four_clears_disabled_messages(self):
        """Maximum level enables restrictive checking and disables no messages."""
        sgf = SgfSettingsModel()
        sgf.syntax_checking_level = 4
        assert sgf.enable_restrictive_checking is True
        assert sgf.disabled_messages == []

    def test_level_one_accepts_critical_errors(self):
        sgf = SgfSettingsModel()
        sgf.syntax_checking_level = 1
        assert sgf.load_success_type == SgfLoadSuccessType.WITH_CRITICAL_WARNINGS_OR_ERRORS
        assert sgf.disable_all_warning_messages is True

    def test_unmatched_combination_is_custom(self):
        """Restrictive checking with the medium load type matches no level."""
        sgf = SgfSettingsModel()
        sgf.enable_restrictive_checking = True
        assert sgf.syntax_checking_level == CUSTOM_SYNTAX_CHECKING_LEVEL

    def test_extra_disabled_message_is_custom(self):
        sgf = SgfSettingsModel()
        sgf.disabled_messages = [*DEFAULT_DISABLED_MESSAGES, 7]
        assert sgf.syntax_checking_level == CUSTOM_SYNTAX_CHECKING_LEVEL

    def test_message_order_does_not_matter(self):
        """Default messages in a different order still match."""
        sgf = SgfSettingsModel()
        sgf.disabled_messages = list(reversed(DEFAULT_DISABLED_MESSAGES))
        assert sgf.syntax_checking_level == 2

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError):
            SgfSettingsModel().syntax_checking_level = 5

    def test_reset_restores_medium(self):
        """Resetting the level properties yields level 2 and keeps encodings."""
        sgf = SgfSettingsModel(default_encoding="UTF-8")
        sgf.syntax_checking_level = 4
        sgf.reset_syntax_checking_level()
        assert sgf.syntax_checking_level == 2
        assert sgf.default_encoding == "UTF-8"


class TestGtpEngineProfile:
    """Test playing strength presets and resets."""

    def test_default_playing_strength(self):
        """Default values read back as level 3."""
        assert GtpEngineProfile().playing_strength == 3

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
    def test_presets_read_back(self, level):
        profile = GtpEngineProfile()
        profile.playing_strength = level
        assert profile.playing_strength == level

    @pytest.mark.parametrize("level, max_games", [(1, 500), (2, 5000), (3, 10000)])
    def test_low_levels_only_limit_games(self, level, max_games):
        """Levels 1-3 turn pondering and subtree reuse off and limit the playouts."""
        profile = GtpEngineProfile()
        profile.playing_strength = level
        assert profile.pondering is False
        assert profile.reuse_subtree is False
        assert profile.max_games == max_games

    def test_level_four_reuses_subtree(self):
        profile = GtpEngineProfile()
        profile.playing_strength = 4
        assert profile.max_games == UNLIMITED_MAX_GAMES
        assert profile.reuse_subtree is True
        assert profile.pondering is False

    def test_level_five_ponders(self):
        profile = GtpEngineProfile()
        profile.playing_strength = 5
        assert profile.max_games == UNLIMITED_MAX_GAMES
        assert (profile.pondering, profile.reuse_subtree) == (True, True)

    def test_preset_keeps_time_limits_at_defaults(self):
        """Presets never change thinking or ponder time away from their defaults."""
        profile = GtpEngineProfile()
        profile.playing_strength = 1
        assert profile.max_thinking_time == 10
        assert profile.max_ponder_time == 300

    def test_preset_resets_max_memory(self):
        profile = GtpEngineProfile(max_memory=64)
        profile.playing_strength = 4
        assert profile.max_memory == MAX_MEMORY_DEFAULT

    def test_changed_max_memory_is_custom(self):
        assert GtpEngineProfile(max_memory=64).playing_strength == CUSTOM_PLAYING_STRENGTH

    def test_unlimited_games_without_reuse_is_custom(self):
        profile = GtpEngineProfile(pondering=False, reuse_subtree=False, max_games=UNLIMITED_MAX_GAMES)
        assert profile.playing_strength == CUSTOM_PLAYING_STRENGTH

    def test_pondering_ignored_below_level_four(self):
        """Max games alone identifies levels 1-3."""
        profile = GtpEngineProfile(pondering=True, max_games=5000)
        assert profile.playing_strength == 2

    def test_extra_threads_are_custom(self):
        """Any thread count other than the default is a custom strength."""
        profile = GtpEngineProfile(thread_count=2)
        assert profile.playing_strength == CUSTOM_PLAYING_STRENGTH

    def test_changed_thinking_time_is_custom(self):
        profile = GtpEngineProfile(max_thinking_time=11)
        assert profile.playing_strength == CUSTOM_PLAYING_STRENGTH

    def test_invalid_playing_strength_raises(self):
        with pytest.raises(ValueError):
            GtpEngineProfile().playing_strength = 0

    def test_pondering_forces_reuse_subtree(self):
        """Turning pondering on turns reuse subtree on."""
        profile = GtpEngineProfile(pondering=False, reuse_subtree=False)
        profile.pondering = True
        assert profile.reuse_subtree is True

    def test_pondering_off_keeps_reuse_subtree(self):
        profile = GtpEngineProfile()
        profile.pondering = False
        assert profile.reuse_subtree is True

    def test_max_games_defaults_to_level_three(self):
        assert GtpEngineProfile().max_games == 10000

    def test_max_memory_out_of_range(self):
        with pytest.raises(ValueError):
            GtpEngineProfile().max_memory = 8

    def test_resign_threshold_per_board_size(self):
        """Thresholds are stored per board size."""
        profile = GtpEngineProfile()
        profile.set_resign_threshold(9, 20)
        assert profile.resign_threshold(9) == 20
        assert profile.resign_threshold(19) == 5

    def test_resign_threshold_invalid_size(self):
        with pytest.raises(ValueError, match="board size"):
            GtpEngineProfile().set_resign_threshold(8, 10)

    def test_resign_threshold_out_of_range(self):
        with pytest.raises(ValueError):
            GtpEngineProfile().set_resign_threshold(9, 101)

    def test_thresholds_not_shared_between_profiles(self):
        first, second = GtpEngineProfile(), GtpEngineProfile()
        first.set_resign_threshold(13, 50)
        assert second.resign_threshold(13) == 5

    def test_reset_resign_behaviour(self):
        profile = GtpEngineProfile(auto_select_resign_min_games=False, resign_min_games=99)
        profile.set_resign_threshold(9, 40)
        profile.reset_resign_behaviour()
        assert profile.auto_select_resign_min_games is True
        assert profile.resign_min_games == RESIGN_MIN_GAMES_DEFAULT
        assert profile.resign_threshold(9) == 5

    def test_reset_to_default_values_keeps_identity(self):
        """Name, description and uuid survive a reset."""
        profile = GtpEngineProfile(name="Strong", description="Mine", max_memory=256, thread_count=4)
        uuid = profile.uuid
        profile.reset_to_default_values()
        assert (profile.name, profile.description, profile.uuid) == ("Strong", "Mine", uuid)
        assert profile.max_memory == MAX_MEMORY_DEFAULT
        assert profile.thread_count == 1


class TestGoSettings:
    """Test the default settings and lookups."""

    def test_default_players_and_profile(self, settings):
        """Default settings have a human and a computer using the default profile."""
        human, computer = settings.players
        assert human.human is True
        assert computer.human is False
        assert settings.profile(computer.gtp_engine_profile_uuid).name == "Default"

    def test_player_lookup(self, settings):
        player = settings.players[1]
        assert settings.player(player.uuid) is player
        assert settings.player_named("Fuego") is player

    def test_unknown_lookups_raise(self, settings):
        with pytest.raises(KeyError):
            settings.profile("missing")
        with pytest.raises(KeyError):
            settings.player("missing")
        with pytest.raises(KeyError):
            settings.player_named("Nobody")

    def test_uuids_unique(self):
        assert GoSettings.create_default().profiles[0].uuid != GoSettings.create_default().profiles[0].uuid


class TestPlayerAndProfileManagement:
    """Test creating and deleting players and profiles."""

    def test_add_human_player(self, settings):
        player = settings.add_player("Alice")
        assert settings.players[-1] is player
        assert player.human is True
        assert player.gtp_engine_profile_uuid == ""

    def test_add_computer_player_uses_first_profile(self, settings):
        player = settings.add_player("GnuGo", human=False)
        assert player.gtp_engine_profile_uuid == settings.profiles[0].uuid

    def test_remove_player(self, settings):
        human = settings.players[0]
        settings.remove_player(human)
        assert human not in settings.players
        assert len(settings.players) == 1

    def test_player_in_game_cannot_be_removed(self, settings):
        """Deleting a player who takes part in the current game is refused."""
        computer = settings.players[1]
        computer.is_playing = True
        with pytest.raises(PlayerInGameError, match="participating in the current game"):
            settings.remove_player(computer)
        assert computer in settings.players

    def test_add_profile_at_default_strength(self, settings):
        profile = settings.add_profile("Blitz")
        assert settings.profiles[-1] is profile
        assert profile.name == "Blitz"
        assert profile.playing_strength == 3

    def test_remove_profile_detaches_players(self, settings):
        """Players that used a deleted profile are left without one."""
        profile = settings.profiles[0]
        computer = settings.players[1]
        settings.remove_profile(profile)
        assert settings.profiles == []
        assert computer.gtp_engine_profile_uuid == ""
