"""PreferenceScreenView: a Textual screen showing one preference screen."""

from __future__ import annotations

import logging
from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Button, Footer, Label, Static

from controller.adapter import EditOutcome, PreferenceBindingAdapter, RenderedGroup, Row
from model.edits import Cancel, Edit, EnterText, Pick
from model.preference import ActionField, LinkField, ValueKind
from model.screen import PreferenceScreen
from ui.ids import css
from ui.modals import ConfirmModal, EditTextModal, ItemPickerModal, NumberListModal
from ui.widgets import PreferenceRow, make_row
import ui.ids as ids

log = logging.getLogger(__name__)


class PreferenceScreenView(Screen):
    """Renders a preference screen through its adapter and routes edits back.

    ``on_change`` is called after every applied edit or reset. A parent view
    passes a callback that re-reads its own rows, so that summaries shown on
    the parent (e.g. the syntax checking level) follow a child screen.
    """

    BINDINGS = [
        Binding("escape", "back", "Back", show=True),
    ]

    def __init__(
        self,
        screen: PreferenceScreen,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        super().__init__()
        self.preference_screen = screen
        self._on_change = on_change
        self.adapter = PreferenceBindingAdapter(screen, delegate=self._settings_changed)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="screen-header"):
            yield Button("< Back", id=ids.BACK_BTN, variant="default")
            yield Label(self.preference_screen.title, id=ids.SCREEN_TITLE)
        with VerticalScroll(id=ids.SCREEN_BODY):
            for group in self.adapter.render():
                with Vertical(id=ids.group_id(group.name), classes="preference-group"):
                    yield from self._group_widgets(group)
        yield Footer()

    def _group_widgets(self, group: RenderedGroup) -> list[Widget]:
        widgets: list[Widget] = []
        if group.header:
            widgets.append(Label(group.header, classes="group-header"))
        widgets.extend(make_row(row, self.apply_edit, self.open_row) for row in group.rows)
        if group.footer and group.rows:
            widgets.append(Static(group.footer, classes="group-footer"))
        return widgets

    # =========================================================================
    # Edits
    # =========================================================================

    def _settings_changed(self, screen: PreferenceScreen) -> None:
        if self._on_change:
            self._on_change()

    def apply_edit(self, edit: Edit) -> EditOutcome:
        """Hand an edit to the adapter and redraw what it reports.

        Rejections are shown by the editor that produced the edit, which
        stays open.
        """
        outcome = self.adapter.handle_edit(edit)
        if outcome.applied:
            self.call_later(self.apply_outcome, outcome)
        return outcome

    async def apply_outcome(self, outcome: EditOutcome) -> None:
        for name in outcome.groups:
            await self.refresh_group(name)
        for field_id in outcome.rows:
            await self.refresh_row(field_id)

    async def refresh_group(self, name: str) -> None:
        """Recompose one group: its row count, header and footer may have changed."""
        group = self.preference_screen.get_group(name)
        try:
            container = self.query_one(css(ids.group_id(name)), Vertical)
        except NoMatches:
            log.debug(f"Group container {name} not mounted")
            return
        await container.remove_children()
        await container.mount_all(self._group_widgets(self.adapter.render_group(group)))

    async def refresh_row(self, field_id: str) -> None:
        row = self.adapter.render_row(field_id)
        if row is None:
            await self.refresh_group(self.preference_screen.group_of(field_id).name)
            return
        try:
            widget = self.query_one(css(ids.row_id(field_id)), PreferenceRow)
        except NoMatches:
            log.debug(f"Row {field_id} not mounted")
            return
        widget.update_row(row)

    async def refresh_rows(self) -> None:
        """Re-read every group, e.g. after a child screen changed the models."""
        for group in self.preference_screen.groups:
            await self.refresh_group(group.name)

    # =========================================================================
    # Editors
    # =========================================================================

    def open_row(self, row: Row) -> None:
        """Open the editor (or child screen) for a row that cannot be edited inline."""
        log.debug(f"Opening {row.kind.value} row {row.field_id}")
        if row.kind == ValueKind.CHOICE:
            self._open_picker(row)
        elif row.kind == ValueKind.TEXT:
            self._open_text_editor(row)
        elif row.kind == ValueKind.NUMBER_LIST:
            self._open_number_list(row)
        elif row.kind == ValueKind.LINK:
            self._open_link(row)
        elif row.kind == ValueKind.ACTION:
            self._confirm_action(row)
        else:
            raise ValueError(f"Row kind {row.kind.value} has no editor")

    def _open_picker(self, row: Row) -> None:
        def on_picked(index: int | None) -> None:
            if index is None:
                self.apply_edit(Cancel(row.field_id))
            else:
                self.apply_edit(Pick(row.field_id, index))

        self.app.push_screen(ItemPickerModal(self.adapter.picker(row.field_id)), on_picked)

    def _open_text_editor(self, row: Row) -> None:
        self.app.push_screen(
            EditTextModal(
                row.label,
                row.control.text,
                lambda text: self.apply_edit(EnterText(row.field_id, text)),
                placeholder=row.control.placeholder,
            )
        )

    def _open_number_list(self, row: Row) -> None:
        def current_items() -> tuple[int, ...]:
            return tuple(self.adapter.field(row.field_id).value() or ())

        self.app.push_screen(
            NumberListModal(row.label, current_items, self.apply_edit, row.field_id)
        )

    def _open_link(self, row: Row) -> None:
        link = self.adapter.field(row.field_id)
        if not isinstance(link, LinkField):
            raise ValueError(f"Field {row.field_id} is not a link")
        self.app.push_screen(PreferenceScreenView(link.target(), on_change=self._child_changed))

    def _child_changed(self) -> None:
        self.call_later(self.refresh_rows)
        self._settings_changed(self.preference_screen)

    def _confirm_action(self, row: Row) -> None:
        action = self.adapter.field(row.field_id)
        if not isinstance(action, ActionField):
            raise ValueError(f"Field {row.field_id} is not an action")

        async def on_confirmed(confirmed: bool | None) -> None:
            if not confirmed:
                log.debug(f"{row.field_id} cancelled")
                return
            await self.apply_outcome(self.adapter.run_action(row.field_id))

        self.app.push_screen(
            ConfirmModal(action.confirm_title, action.confirm_message, action.label),
            on_confirmed,
        )

    # =========================================================================
    # Navigation
    # =========================================================================

    @on(Button.Pressed, css(ids.BACK_BTN))
    def on_back_pressed(self, event: Button.Pressed) -> None:
        self.action_back()

    def action_back(self) -> None:
        self.app.pop_screen()
