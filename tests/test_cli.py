"""Tests for CLI argument parsing and plain-text rendering."""

from unittest.mock import patch

import pytest

from cli import format_rendered, main, parse_args
from controller import PreferenceBindingAdapter
from model import GoSettings
from model.enums import NewMoveInsertPolicy
from screens import build_player_screen, build_screen


def render_text(screen):
    return format_rendered(screen.title, PreferenceBindingAdapter(screen).render())


class TestParseArgs:
    """Test parse_args() function."""

    def test_no_arguments(self):
        """No arguments opens the menu."""
        args = parse_args([])
        assert args.screen is None
        assert args.render is None
        assert args.list_screens is False
        assert args.playing == []

    def test_screen(self):
        assert parse_args(["--screen", "sgf"]).screen == "sgf"

    def test_render(self):
        assert parse_args(["--render", "markup"]).render == "markup"

    def test_playing_repeatable(self):
        """--playing can be given several times."""
        args = parse_args(["--playing", "Fuego", "--playing", "Human player"])
        assert args.playing == ["Fuego", "Human player"]

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "goprefs" in capsys.readouterr().out

    def test_help_shows_structured_text(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--help"])
        out = capsys.readouterr().out
        assert "--render <name>" in out
        assert "--list-screens" in out


class TestFormatRendered:
    """Test format_rendered() output."""

    def test_title_and_headers(self):
        """Title is underlined, headers are bracketed, rows are indented."""
        lines = render_text(build_screen("sgf", GoSettings.create_default())).splitlines()
        assert lines[0] == "Smart Game Format (SGF)"
        assert lines[1] == "=" * len(lines[0])
        assert "[Syntax checking level]" in lines
        assert "  Syntax checking level: Medium" in lines
        assert "  Default encoding: <None>" in lines

    def test_read_only_suffix(self):
        """Disabled rows are marked read-only."""
        settings = GoSettings.create_default()
        settings.game_variation.new_move_insert_policy = NewMoveInsertPolicy.REPLACE_FUTURE_BOARD_POSITIONS
        text = render_text(build_screen("game-variations", settings))
        assert "(read-only)" in text

    def test_footer_in_parentheses(self):
        text = render_text(build_screen("markup", GoSettings.create_default()))
        assert "  (Each placed symbol is one that is not yet on the board.)" in text.splitlines()

    def test_hidden_group_skipped(self):
        """A group without rows leaves no header behind."""
        settings = GoSettings.create_default()
        text = render_text(build_player_screen(settings, settings.players[0]))
        assert "[GTP engine profile]" not in text
        assert "[Player name]" in text


class TestMain:
    """Test main() for the inspection commands."""

    def test_render_prints_screen(self, capsys):
        with patch("sys.argv", ["goprefs", "--render", "tree-view"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert out.startswith("Tree view settings\n")
        assert "  Branching style: Diagonal" in out

    def test_unknown_screen_exits_with_error(self, capsys):
        """An unknown screen name prints an error box and exits 1."""
        with patch("sys.argv", ["goprefs", "--render", "nope"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error: Unknown screen: nope" in err
        assert "  sgf" in err

    def test_list_screens(self, capsys):
        with patch("sys.argv", ["goprefs", "--list-screens"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Smart Game Format (SGF)" in out
        assert out.splitlines()[0].startswith("display")

    def test_known_playing_player_accepted(self, capsys):
        """--playing is accepted for a known player."""
        with patch("sys.argv", ["goprefs", "--playing", "Fuego", "--render", "touch"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0

    def test_unknown_player_exits_with_error(self, capsys):
        with patch("sys.argv", ["goprefs", "--playing", "Nobody", "--render", "touch"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        assert "Unknown player: Nobody" in capsys.readouterr().err
