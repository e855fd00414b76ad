"""Main TUI application for goprefs."""

import logging
import os
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.css.query import NoMatches

from model import GoSettings
from ui import MenuScreen

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "goprefs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "goprefs.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class GoSettingsApp(App):
    """TUI for editing the settings of a Go game."""

    TITLE = "Go settings"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        settings: GoSettings | None = None,
        initial_screen: str | None = None,
        version: str = "0.0",
    ) -> None:
        super().__init__()
        self.settings = settings if settings is not None else GoSettings.create_default()
        self.initial_screen = initial_screen
        self.version = version
        self.territory_statistics_shown = False
        self.menu_screen: MenuScreen | None = None

    def toggle_territory_statistics(self) -> None:
        """Show or hide the territory statistics that accompany player influence."""
        self.territory_statistics_shown = self.settings.board_view.display_player_influence
        state = "shown" if self.territory_statistics_shown else "hidden"
        log.info(f"Territory statistics {state}")
        if self.menu_screen is None:
            return
        try:
            self.menu_screen.set_status(f"Territory statistics {state}")
        except NoMatches:
            log.debug("Status bar not mounted")

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        log.info(f"goprefs {self.version} started")
        self.menu_screen = MenuScreen(
            self.settings,
            toggle_territory_statistics=self.toggle_territory_statistics,
        )
        self.push_screen(self.menu_screen)
        if self.initial_screen:
            self.menu_screen.open_screen(self.initial_screen)
