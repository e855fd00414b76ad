"""Row widgets: one per preference field kind.

Rows never touch the settings models. A committed change is handed to
``on_edit`` as an Edit; rows that need a modal editor call ``on_open`` and
leave the rest to the screen view.
"""

from __future__ import annotations

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Label, Static, Switch

from controller.adapter import Row
from model.edits import Edit, SlideTo, Toggle
from model.preference import ValueKind
import ui.ids as ids

SLIDER_STEPS = 100


class PreferenceRow(Horizontal):
    """Base class for all rows."""

    def __init__(
        self,
        row: Row,
        on_edit: Callable[[Edit], None],
        on_open: Callable[[Row], None],
    ) -> None:
        super().__init__(id=ids.row_id(row.field_id), classes="preference-row")
        self.row = row
        self._on_edit = on_edit
        self._on_open = on_open
        self.set_class(not row.enabled, "read-only")

    def compose(self) -> ComposeResult:
        yield Label(self.row.label, classes="row-label")

    def update_row(self, row: Row) -> None:
        """Show a freshly rendered row without recomposing."""
        self.row = row
        self.set_class(not row.enabled, "read-only")
        self.query_one(".row-label", Label).update(row.label)


class SwitchRow(PreferenceRow):
    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Switch(value=self.row.control.on, disabled=not self.row.enabled, classes="row-switch")

    def update_row(self, row: Row) -> None:
        super().update_row(row)
        switch = self.query_one(".row-switch", Switch)
        with switch.prevent(Switch.Changed):
            switch.value = row.control.on
        switch.disabled = not row.enabled

    @on(Switch.Changed, ".row-switch")
    def on_switch_changed(self, event: Switch.Changed) -> None:
        event.stop()
        self._on_edit(Toggle(self.row.field_id, event.value))


class SliderRow(PreferenceRow):
    """A bounded slider drawn as -/+ buttons around the current value."""

    @property
    def step(self) -> int:
        control = self.row.control
        return max(1, (control.maximum - control.minimum) // SLIDER_STEPS)

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Button("-", classes="slider-decrement")
        yield Static(self.row.display, classes="row-value")
        yield Button("+", classes="slider-increment")

    def on_mount(self) -> None:
        self._sync_buttons()

    def _sync_buttons(self) -> None:
        control = self.row.control
        self.query_one(".slider-decrement", Button).disabled = (
            not self.row.enabled or control.position <= control.minimum
        )
        self.query_one(".slider-increment", Button).disabled = (
            not self.row.enabled or control.position >= control.maximum
        )

    def update_row(self, row: Row) -> None:
        super().update_row(row)
        self.query_one(".row-value", Static).update(row.display)
        self._sync_buttons()

    def _slide(self, delta: int) -> None:
        control = self.row.control
        position = min(control.maximum, max(control.minimum, control.position + delta))
        self._on_edit(SlideTo(self.row.field_id, position))

    @on(Button.Pressed, ".slider-decrement")
    def on_decrement(self, event: Button.Pressed) -> None:
        event.stop()
        self._slide(-self.step)

    @on(Button.Pressed, ".slider-increment")
    def on_increment(self, event: Button.Pressed) -> None:
        event.stop()
        self._slide(self.step)


class ValueButtonRow(PreferenceRow):
    """Label plus a button showing the value; pressing opens an editor."""

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Button(self.row.display or " ", classes="row-value-btn", disabled=not self.row.enabled)

    def update_row(self, row: Row) -> None:
        super().update_row(row)
        button = self.query_one(".row-value-btn", Button)
        button.label = row.display or " "
        button.disabled = not row.enabled

    @on(Button.Pressed, ".row-value-btn")
    def on_value_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_open(self.row)


class ChoiceRow(ValueButtonRow):
    pass


class TextRow(ValueButtonRow):
    pass


class NumberListRow(ValueButtonRow):
    pass


class LinkRow(PreferenceRow):
    """Navigates to a child screen."""

    def compose(self) -> ComposeResult:
        yield Button(f"{self.row.label} >", classes="link-btn")
        yield Static(self.row.display, classes="row-value")

    def update_row(self, row: Row) -> None:
        self.row = row
        self.query_one(".link-btn", Button).label = f"{row.label} >"
        self.query_one(".row-value", Static).update(row.display)

    @on(Button.Pressed, ".link-btn")
    def on_link_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_open(self.row)


class ActionRow(PreferenceRow):
    """A destructive button; the screen view asks for confirmation."""

    def compose(self) -> ComposeResult:
        yield Button(self.row.label, classes="action-btn", variant="error")

    def update_row(self, row: Row) -> None:
        self.row = row
        self.query_one(".action-btn", Button).label = row.label

    @on(Button.Pressed, ".action-btn")
    def on_action_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_open(self.row)


ROW_CLASSES: dict[ValueKind, type[PreferenceRow]] = {
    ValueKind.SWITCH: SwitchRow,
    ValueKind.SLIDER: SliderRow,
    ValueKind.CHOICE: ChoiceRow,
    ValueKind.TEXT: TextRow,
    ValueKind.NUMBER_LIST: NumberListRow,
    ValueKind.LINK: LinkRow,
    ValueKind.ACTION: ActionRow,
}


def make_row(
    row: Row,
    on_edit: Callable[[Edit], None],
    on_open: Callable[[Row], None],
) -> PreferenceRow:
    """Create the widget for a rendered row."""
    return ROW_CLASSES[row.kind](row, on_edit, on_open)
