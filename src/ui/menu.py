"""Root menu: settings screens, players and GTP engine profiles."""

from __future__ import annotations

import logging
from typing import Any, Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Label, Static

from controller.adapter import EditOutcome, EditStatus
from controller.validators import InputValidationError, validate_name
from model.screen import PreferenceScreen
from model.settings import GoSettings, PlayerInGameError
from screens import SCREENS, build_player_screen, build_profile_screen, build_screen
from ui.ids import css
from ui.modals import ConfirmModal, EditTextModal
from ui.screen_view import PreferenceScreenView
import ui.ids as ids

log = logging.getLogger(__name__)


class MenuScreen(Screen):
    """Lists every screen that can be opened.

    Players and profiles can be created here and deleted with the delete key
    while their entry has focus.
    """

    BINDINGS = [
        Binding("q", "app.quit", "Quit", show=True),
        Binding("delete", "delete_entry", "Delete", show=True),
    ]

    def __init__(self, settings: GoSettings, **collaborators: Any) -> None:
        super().__init__()
        self.settings = settings
        self.collaborators = collaborators

    def compose(self) -> ComposeResult:
        yield Label("Settings", id=ids.MENU_TITLE)
        with VerticalScroll(id=ids.MENU_LIST):
            for entry in SCREENS.values():
                yield Button(entry.title, id=ids.menu_screen_id(entry.name), classes="menu-item")
            yield Label("Players", id=ids.MENU_PLAYERS_HEADER, classes="group-header")
            with Vertical(id=ids.MENU_PLAYERS):
                yield from self._player_buttons()
            yield Button("New player", id=ids.NEW_PLAYER_BTN, classes="menu-action")
            yield Label("GTP engine profiles", id=ids.MENU_PROFILES_HEADER, classes="group-header")
            with Vertical(id=ids.MENU_PROFILES):
                yield from self._profile_buttons()
            yield Button("New profile", id=ids.NEW_PROFILE_BTN, classes="menu-action")
        yield Static("", id=ids.STATUS_BAR)
        yield Footer()

    def _player_buttons(self) -> list[Button]:
        return [
            Button(player.name, id=ids.menu_player_id(index), classes="menu-item player-item")
            for index, player in enumerate(self.settings.players)
        ]

    def _profile_buttons(self) -> list[Button]:
        return [
            Button(profile.name, id=ids.menu_profile_id(index), classes="menu-item profile-item")
            for index, profile in enumerate(self.settings.profiles)
        ]

    async def rebuild_entries(self) -> None:
        """Re-create the player and profile buttons after one was added or deleted."""
        players = self.query_one(css(ids.MENU_PLAYERS), Vertical)
        await players.remove_children()
        await players.mount_all(self._player_buttons())
        profiles = self.query_one(css(ids.MENU_PROFILES), Vertical)
        await profiles.remove_children()
        await profiles.mount_all(self._profile_buttons())

    def open_screen(self, name: str) -> PreferenceScreenView:
        """Push the view of a registered screen."""
        view = PreferenceScreenView(
            build_screen(name, self.settings, **self.collaborators),
            on_change=self._refresh_names,
        )
        self.app.push_screen(view)
        return view

    def set_status(self, message: str) -> None:
        self.query_one(css(ids.STATUS_BAR), Static).update(message)

    def _refresh_names(self) -> None:
        # Player and profile names may have been edited
        for index, player in enumerate(self.settings.players):
            self.query_one(css(ids.menu_player_id(index)), Button).label = player.name
        for index, profile in enumerate(self.settings.profiles):
            self.query_one(css(ids.menu_profile_id(index)), Button).label = profile.name

    @on(Button.Pressed, ".menu-item")
    def on_menu_item_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if button.has_class("player-item"):
            index = int(button.id.removeprefix("menu-player-"))
            screen = build_player_screen(self.settings, self.settings.players[index])
        elif button.has_class("profile-item"):
            index = int(button.id.removeprefix("menu-profile-"))
            screen = build_profile_screen(self.settings.profiles[index])
        else:
            self.open_screen(button.id.removeprefix("menu-"))
            return
        log.info(f"Opening {screen.name} from the menu")
        self.app.push_screen(PreferenceScreenView(screen, on_change=self._refresh_names))

    # =========================================================================
    # Creating entries
    # =========================================================================

    @on(Button.Pressed, css(ids.NEW_PLAYER_BTN))
    def on_new_player_pressed(self, event: Button.Pressed) -> None:
        self.new_player()

    @on(Button.Pressed, css(ids.NEW_PROFILE_BTN))
    def on_new_profile_pressed(self, event: Button.Pressed) -> None:
        self.new_profile()

    def new_player(self) -> None:
        """Ask for a name, create a human player and open its screen."""

        def create(name: str) -> PreferenceScreen:
            return build_player_screen(self.settings, self.settings.add_player(name))

        self._ask_name("New player", "Player name", create)

    def new_profile(self) -> None:
        """Ask for a name, create a profile and open its screen."""

        def create(name: str) -> PreferenceScreen:
            return build_profile_screen(self.settings.add_profile(name))

        self._ask_name("New profile", "Profile name", create)

    def _ask_name(
        self, title: str, placeholder: str, create: Callable[[str], PreferenceScreen]
    ) -> None:
        created: list[PreferenceScreen] = []

        def commit(text: str) -> EditOutcome:
            try:
                name = validate_name(text)
            except InputValidationError as e:
                return EditOutcome(EditStatus.REJECTED, title=e.title, message=e.message)
            created.append(create(name))
            return EditOutcome(EditStatus.APPLIED)

        async def on_closed(applied: bool | None) -> None:
            if not created:
                return
            await self.rebuild_entries()
            self.app.push_screen(PreferenceScreenView(created[0], on_change=self._refresh_names))

        self.app.push_screen(EditTextModal(title, "", commit, placeholder=placeholder), on_closed)

    # =========================================================================
    # Deleting entries
    # =========================================================================

    def action_delete_entry(self) -> None:
        focused = self.focused
        if not isinstance(focused, Button) or focused.id is None:
            return
        if focused.has_class("player-item"):
            self.delete_player(int(focused.id.removeprefix("menu-player-")))
        elif focused.has_class("profile-item"):
            self.delete_profile(int(focused.id.removeprefix("menu-profile-")))

    def delete_player(self, index: int) -> None:
        """Delete a player after confirmation. Players in the current game are refused."""
        player = self.settings.players[index]
        if player.is_playing:
            log.info(f"Refusing to delete {player.name}: player is in the current game")
            self.set_status("Players that are participating in the current game cannot be deleted.")
            return

        async def on_confirmed(confirmed: bool | None) -> None:
            if not confirmed:
                return
            try:
                self.settings.remove_player(player)
            except PlayerInGameError as e:
                self.set_status(str(e))
                return
            await self.rebuild_entries()
            self.set_status(f"Deleted player {player.name}")

        self.app.push_screen(
            ConfirmModal("Delete player", f'Delete the player "{player.name}"?', "Delete"),
            on_confirmed,
        )

    def delete_profile(self, index: int) -> None:
        """Delete a profile after confirmation. Its players are left without a profile."""
        profile = self.settings.profiles[index]

        async def on_confirmed(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.settings.remove_profile(profile)
            await self.rebuild_entries()
            self.set_status(f"Deleted profile {profile.name}")

        self.app.push_screen(
            ConfirmModal(
                "Delete profile",
                f'Delete the profile "{profile.name}"? Computer players that use it '
                "will have no profile.",
                "Delete",
            ),
            on_confirmed,
        )
