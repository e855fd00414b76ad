"""Command-line interface for goprefs."""

import argparse
import sys
from dataclasses import dataclass

from controller import PreferenceBindingAdapter, RenderedGroup
from model import GoSettings
from screens import SCREENS, build_screen

GOPREFS_VERSION = "0.3.0"


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    screen: str | None
    render: str | None
    list_screens: bool
    playing: list[str]


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class GoprefsHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "goprefs - Edit the settings of a Go game in the terminal.",
            f"Version: {GOPREFS_VERSION}",
            "",
            "Core:",
            "  goprefs                               Open the settings menu",
            "  goprefs --screen <name>               Open a settings screen directly",
            "",
            "Inspection:",
            "  goprefs --list-screens                List screen names and titles",
            "  goprefs --render <name>               Print a screen's rows without the TUI",
            "",
            "Options:",
            "  goprefs --playing <player>            Mark a player as taking part in a game",
            "                                        (repeatable; the player's 'Human player'",
            "                                        switch becomes read-only)",
            "  goprefs --version                     Show the version and exit",
            "",
            "Examples:",
            "",
            "  # Change the syntax checking level used when loading SGF files",
            "  goprefs --screen sgf",
            "",
            "  # Show what the tree view screen currently contains",
            "  goprefs --render tree-view",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for goprefs CLI."""
    parser = argparse.ArgumentParser(
        prog="goprefs",
        formatter_class=GoprefsHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--screen", metavar="NAME", help=argparse.SUPPRESS)
    parser.add_argument("--render", metavar="NAME", help=argparse.SUPPRESS)
    parser.add_argument("--list-screens", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--playing", metavar="PLAYER", action="append", default=[], help=argparse.SUPPRESS)
    parser.add_argument(
        "--version", action="version", version=f"goprefs {GOPREFS_VERSION}", help=argparse.SUPPRESS
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Returns:
        ParsedArgs with the screen to open or render and the playing players.
    """
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    return ParsedArgs(
        screen=args.screen,
        render=args.render,
        list_screens=args.list_screens,
        playing=args.playing,
    )


def format_rendered(title: str, groups: list[RenderedGroup]) -> str:
    """Plain-text form of a rendered screen, one line per row."""
    lines = [title, "=" * len(title)]
    for group in groups:
        if not group.rows:
            continue
        lines.append("")
        if group.header:
            lines.append(f"[{group.header}]")
        for row in group.rows:
            suffix = "" if row.enabled else "  (read-only)"
            value = f": {row.display}" if row.display else ""
            lines.append(f"  {row.label}{value}{suffix}")
        if group.footer:
            lines.append(f"  ({group.footer})")
    return "\n".join(lines)


def list_screens() -> None:
    width = max(len(name) for name in SCREENS)
    for name, entry in SCREENS.items():
        print(f"{name:<{width}}  {entry.title}")


def check_screen_name(name: str) -> None:
    """Exit with an error box when no screen is registered under ``name``."""
    if name not in SCREENS:
        print_error_box(
            f"Unknown screen: {name}",
            "Available screens:",
            *(f"  {screen}" for screen in SCREENS),
        )
        sys.exit(1)


def mark_playing(settings: GoSettings, names: list[str]) -> None:
    for name in names:
        try:
            settings.player_named(name).is_playing = True
        except KeyError:
            print_error_box(
                f"Unknown player: {name}",
                "Available players:",
                *(f"  {player.name}" for player in settings.players),
            )
            sys.exit(1)


def main() -> None:
    """Main entry point."""
    args = parse_args()

    if args.list_screens:
        list_screens()
        sys.exit(0)

    settings = GoSettings.create_default()
    mark_playing(settings, args.playing)

    if args.render:
        check_screen_name(args.render)
        screen = build_screen(args.render, settings)
        print(format_rendered(screen.title, PreferenceBindingAdapter(screen).render()))
        sys.exit(0)

    if args.screen:
        check_screen_name(args.screen)

    # Imported here so that inspection commands do not create the log file
    from app import GoSettingsApp

    app = GoSettingsApp(settings, initial_screen=args.screen, version=GOPREFS_VERSION)
    app.run()


if __name__ == "__main__":
    main()
