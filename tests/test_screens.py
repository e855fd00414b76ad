"""Tests for the settings screen declarations."""

import pytest

from constants import UNLIMITED_MAX_GAMES
from controller import EditStatus, PreferenceBindingAdapter
from model import EnterText, LinkField, Pick, Toggle
from screens import (
    SCREENS,
    build_player_screen,
    build_profile_screen,
    build_resign_behaviour_screen,
    build_screen,
)
from screens.engine import max_games_label, playing_strength_label
from screens.sgf import syntax_checking_level_name


class TestCatalog:
    """Test the registry of top-level screens."""

    def test_screen_names(self):
        assert list(SCREENS) == [
            "display",
            "board-position",
            "board-setup",
            "computer-assistance",
            "game-variations",
            "markup",
            "scoring",
            "tree-view",
            "touch",
            "sgf",
        ]

    @pytest.mark.parametrize("name", list(SCREENS))
    def test_every_screen_renders(self, settings, name):
        """Every registered screen builds and renders at least one row."""
        screen = build_screen(name, settings)
        groups = PreferenceBindingAdapter(screen).render()
        assert screen.name == name
        assert any(group.rows for group in groups)

    def test_unknown_screen(self, settings):
        with pytest.raises(KeyError):
            build_screen("missing", settings)

    def test_unused_collaborators_ignored(self, settings):
        """Collaborators a screen does not take are dropped."""
        screen = build_screen("markup", settings, toggle_territory_statistics=lambda: None)
        assert screen.name == "markup"


class TestScoringScreen:
    """Test that each scoring row writes its own property."""

    def test_mark_dead_stones_row_bound_to_its_property(self, settings):
        adapter = PreferenceBindingAdapter(build_screen("scoring", settings))
        adapter.handle_edit(Toggle("mark-dead-stones-intelligently", False))
        assert settings.scoring.mark_dead_stones_intelligently is False
        assert settings.scoring.ask_gtp_engine_for_dead_stones is True


class TestTreeViewScreen:
    """Test the focus mode switch and picker."""

    def test_focus_off_hides_mode(self, settings):
        """Turning focus off removes the focus mode row."""
        adapter = PreferenceBindingAdapter(build_screen("tree-view", settings))
        outcome = adapter.handle_edit(Toggle("focus-on-selected-node", False))
        assert outcome.groups == ("focus-mode",)
        assert adapter.render_row("focus-mode") is None

    def test_focus_on_restores_default_mode(self, settings):
        adapter = PreferenceBindingAdapter(build_screen("tree-view", settings))
        adapter.handle_edit(Toggle("focus-on-selected-node", False))
        adapter.handle_edit(Toggle("focus-on-selected-node", True))
        assert adapter.render_row("focus-mode").control.index == 0


class TestGameVariationsScreen:
    """Test the dependency between insert policy and insert position."""

    def test_replace_disables_insert_position(self, settings):
        adapter = PreferenceBindingAdapter(build_screen("game-variations", settings))
        outcome = adapter.handle_edit(Pick("new-move-insert-policy", 1))
        assert outcome.groups == ("insert-position",)
        assert adapter.render_row("new-variation-insert-position").enabled is False


class TestSgfScreen:
    """Test the SGF screen."""

    def test_syntax_level_displays_custom(self, settings):
        """A combination matching no level is shown as Custom with nothing preselected."""
        settings.sgf.enable_restrictive_checking = True
        adapter = PreferenceBindingAdapter(build_screen("sgf", settings))
        assert adapter.render_row("syntax-checking-level").display == "Custom"
        assert adapter.picker("syntax-checking-level").index == -1

    def test_pick_level_sets_properties(self, settings):
        adapter = PreferenceBindingAdapter(build_screen("sgf", settings))
        adapter.handle_edit(Pick("syntax-checking-level", 3))
        assert settings.sgf.syntax_checking_level == 4
        assert settings.sgf.enable_restrictive_checking is True

    @pytest.mark.parametrize("text", ["", "UTF-8", "latin-1"])
    def test_valid_forced_encodings(self, settings, text):
        adapter = PreferenceBindingAdapter(build_screen("sgf", settings))
        outcome = adapter.handle_edit(EnterText("forced-encoding", text))
        assert outcome.status != EditStatus.REJECTED
        assert settings.sgf.forced_encoding == text

    def test_link_targets_detail_screen(self, settings):
        link = build_screen("sgf", settings).get_field("syntax-checking-details")
        assert isinstance(link, LinkField)
        assert link.target().name == "sgf-syntax-checking-level"

    def test_level_names(self):
        assert syntax_checking_level_name(1) == "Minimal"
        assert syntax_checking_level_name(-1) == "Custom"


class TestPlayerScreen:
    """Test the player screen."""

    def test_human_switch_read_only_while_playing(self, settings):
        """A player in the current game cannot switch between human and computer."""
        player = settings.players[0]
        player.is_playing = True
        adapter = PreferenceBindingAdapter(build_player_screen(settings, player))
        assert adapter.render_row("human-player").enabled is False

    def test_human_player_has_no_profile_rows(self, settings):
        """The profile group renders zero rows for a human player."""
        adapter = PreferenceBindingAdapter(build_player_screen(settings, settings.players[0]))
        group = next(group for group in adapter.render() if group.name == "gtp-engine-profile")
        assert group.rows == ()
        assert group.header is None

    def test_switch_to_computer_shows_profile(self, settings):
        player = settings.players[0]
        adapter = PreferenceBindingAdapter(build_player_screen(settings, player))
        outcome = adapter.handle_edit(Toggle("human-player", False))
        assert outcome.groups == ("gtp-engine-profile",)
        row = adapter.render_row("gtp-engine-profile")
        assert row.display == "<None>"
        assert row.control.index == -1

    def test_pick_profile(self, settings):
        computer = settings.players[1]
        computer.gtp_engine_profile_uuid = ""
        adapter = PreferenceBindingAdapter(build_player_screen(settings, computer))
        adapter.handle_edit(Pick("gtp-engine-profile", 0))
        assert computer.gtp_engine_profile_uuid == settings.profiles[0].uuid
        assert adapter.render_row("gtp-engine-profile").display == "Default"

    def test_empty_name_rejected(self, settings):
        player = settings.players[0]
        adapter = PreferenceBindingAdapter(build_player_screen(settings, player))
        outcome = adapter.handle_edit(EnterText("player-name", "  "))
        assert outcome.status == EditStatus.REJECTED
        assert player.name == "Human player"


class TestProfileScreen:
    """Test the engine profile screen."""

    def test_playing_strength_custom(self, profile):
        """Extra threads make the strength Custom with nothing preselected."""
        profile.thread_count = 2
        adapter = PreferenceBindingAdapter(build_profile_screen(profile))
        assert adapter.render_row("playing-strength").display == "Custom"
        assert adapter.picker("playing-strength").index == -1

    def test_pick_playing_strength(self, profile):
        adapter = PreferenceBindingAdapter(build_profile_screen(profile))
        adapter.handle_edit(Pick("playing-strength", 0))
        assert profile.playing_strength == 1
        assert profile.max_games == 500
        assert profile.max_thinking_time == 10

    def test_reset_profile_keeps_name(self, profile):
        profile.max_memory = 128
        adapter = PreferenceBindingAdapter(build_profile_screen(profile))
        adapter.run_action("reset-profile")
        assert profile.max_memory == 32
        assert profile.name == "Default"

    def test_reset_resign_behaviour(self, profile):
        profile.set_resign_threshold(9, 50)
        adapter = PreferenceBindingAdapter(build_resign_behaviour_screen(profile))
        adapter.run_action("reset-resign-behaviour")
        assert profile.resign_threshold(9) == 5


class TestLabels:
    """Test value labels."""

    def test_max_games_labels(self):
        assert max_games_label(UNLIMITED_MAX_GAMES) == "Unlimited"
        assert max_games_label(5000) == "5000"
        assert max_games_label(15000) == "15'000"

    def test_playing_strength_labels(self):
        assert playing_strength_label(3) == "3"
        assert playing_strength_label(-1) == "Custom"
