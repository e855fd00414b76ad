"""Modal editors: item picker, text editor, number list editor and confirmation."""

from __future__ import annotations

import logging
from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from controller.adapter import EditOutcome, EditStatus
from model.edits import Edit, ListDelete, ListEntry, ListMove
from model.preference import ChoiceControl
from ui.ids import css
import ui.ids as ids

log = logging.getLogger(__name__)


class PickerItem(Static):
    """A clickable entry of the item picker."""

    def __init__(self, label: str, index: int, selected: bool) -> None:
        marker = "✓ " if selected else "  "
        super().__init__(f"{marker}{label}")
        self.index = index
        self.add_class("picker-item")
        if selected:
            self.add_class("selected")

    def on_click(self) -> None:
        """Handle click - dismiss picker with this index."""
        self.screen.dismiss(self.index)


class ItemPickerModal(ModalScreen[int | None]):
    """Pick one entry from a list. Nothing is preselected when the index is -1."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, choice: ChoiceControl) -> None:
        super().__init__()
        self.choice = choice

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.PICKER_MODAL):
            yield Label(self.choice.title, id=ids.MODAL_TITLE)
            with VerticalScroll(id=ids.PICKER_LIST):
                for index, label in enumerate(self.choice.labels):
                    yield PickerItem(label, index, index == self.choice.index)
            if self.choice.footer:
                yield Static(self.choice.footer, id=ids.MODAL_FOOTER)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)


class EditTextModal(ModalScreen[bool]):
    """Edit a text value.

    ``commit`` is called with the entered text. A rejected edit keeps the
    modal open and shows the validation message; dismissal returns whether a
    value was applied.
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(
        self,
        title: str,
        text: str,
        commit: Callable[[str], EditOutcome],
        placeholder: str = "",
    ) -> None:
        super().__init__()
        self.modal_title = title
        self.initial_text = text
        self._commit = commit
        self.placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.EDIT_TEXT_MODAL):
            yield Label(self.modal_title, id=ids.MODAL_TITLE)
            yield Input(value=self.initial_text, placeholder=self.placeholder, id=ids.EDIT_TEXT_INPUT)
            yield Static("", id=ids.MODAL_ERROR, classes="hidden")
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button("Done", id=ids.DONE_BTN, variant="success")

    def on_mount(self) -> None:
        self.query_one(css(ids.EDIT_TEXT_INPUT), Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.DONE_BTN))
    def on_done(self, event: Button.Pressed) -> None:
        self.submit(self.query_one(css(ids.EDIT_TEXT_INPUT), Input).value)

    @on(Input.Submitted, css(ids.EDIT_TEXT_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit(event.value)

    def submit(self, text: str) -> None:
        outcome = self._commit(text)
        if outcome.status == EditStatus.REJECTED:
            self.show_error(outcome.title, outcome.message)
            return
        self.dismiss(outcome.applied)

    def show_error(self, title: str, message: str) -> None:
        try:
            error = self.query_one(css(ids.MODAL_ERROR), Static)
        except NoMatches:
            log.debug("Error label not found in text editor")
            return
        error.update(f"{title}\n{message}")
        error.remove_class("hidden")


class NumberListItem(Horizontal):
    """One number of the list with move-up and delete buttons."""

    def __init__(self, number: int, index: int) -> None:
        super().__init__(classes="number-list-item")
        self.number = number
        self.index = index

    def compose(self) -> ComposeResult:
        yield Label(str(self.number), classes="number-value")
        yield Button("↑", classes="move-up-btn", disabled=self.index == 0)
        yield Button("x", classes="delete-btn", variant="error")


class NumberListModal(ModalScreen[bool]):
    """Edit an ordered list of numbers: add, delete and move entries.

    Each change is committed right away through ``commit``. Returns whether
    anything was applied while the modal was open.
    """

    BINDINGS = [("escape", "close", "Done")]

    def __init__(
        self,
        title: str,
        items: Callable[[], tuple[int, ...]],
        commit: Callable[[Edit], EditOutcome],
        field_id: str,
    ) -> None:
        super().__init__()
        self.modal_title = title
        self._items = items
        self._commit = commit
        self.field_id = field_id
        self.changed = False

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.NUMBER_LIST_MODAL):
            yield Label(self.modal_title, id=ids.MODAL_TITLE)
            with VerticalScroll(id=ids.NUMBER_LIST_ITEMS):
                yield from self._item_widgets()
            with Horizontal(classes="number-input-row"):
                yield Input(placeholder="Message number", id=ids.NUMBER_LIST_INPUT)
                yield Button("+", id=ids.ADD_NUMBER_BTN, variant="primary")
            yield Static("", id=ids.MODAL_ERROR, classes="hidden")
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Done", id=ids.DONE_BTN, variant="success")

    def _item_widgets(self) -> list[NumberListItem]:
        return [NumberListItem(number, index) for index, number in enumerate(self._items())]

    async def _reload_items(self) -> None:
        container = self.query_one(css(ids.NUMBER_LIST_ITEMS), VerticalScroll)
        await container.remove_children()
        await container.mount_all(self._item_widgets())

    async def apply(self, edit: Edit) -> EditOutcome:
        outcome = self._commit(edit)
        error = self.query_one(css(ids.MODAL_ERROR), Static)
        if outcome.status == EditStatus.REJECTED:
            error.update(f"{outcome.title}\n{outcome.message}")
            error.remove_class("hidden")
            return outcome
        error.add_class("hidden")
        if outcome.applied:
            self.changed = True
            await self._reload_items()
        return outcome

    async def add_entry(self, text: str) -> None:
        outcome = await self.apply(ListEntry(self.field_id, text))
        if outcome.status != EditStatus.REJECTED:
            self.query_one(css(ids.NUMBER_LIST_INPUT), Input).value = ""

    @on(Button.Pressed, css(ids.ADD_NUMBER_BTN))
    async def on_add_pressed(self, event: Button.Pressed) -> None:
        await self.add_entry(self.query_one(css(ids.NUMBER_LIST_INPUT), Input).value)

    @on(Input.Submitted, css(ids.NUMBER_LIST_INPUT))
    async def on_input_submitted(self, event: Input.Submitted) -> None:
        await self.add_entry(event.value)

    @on(Button.Pressed, ".delete-btn")
    async def on_delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        item = event.button.parent
        if isinstance(item, NumberListItem):
            await self.apply(ListDelete(self.field_id, item.index))

    @on(Button.Pressed, ".move-up-btn")
    async def on_move_up_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        item = event.button.parent
        if isinstance(item, NumberListItem):
            await self.apply(ListMove(self.field_id, item.index, item.index - 1))

    @on(Button.Pressed, css(ids.DONE_BTN))
    def on_done(self, event: Button.Pressed) -> None:
        self.dismiss(self.changed)

    def action_close(self) -> None:
        self.dismiss(self.changed)


class ConfirmModal(ModalScreen[bool]):
    """Ask before a destructive action."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str, message: str, confirm_label: str) -> None:
        super().__init__()
        self.modal_title = title
        self.confirm_message = message
        self.confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.CONFIRM_MODAL):
            yield Label(self.modal_title, id=ids.MODAL_TITLE)
            yield Static(self.confirm_message, id=ids.CONFIRM_MESSAGE)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button(self.confirm_label, id=ids.CONFIRM_BTN, variant="error")

    def action_cancel(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CONFIRM_BTN))
    def on_confirm(self, event: Button.Pressed) -> None:
        self.dismiss(True)
