"""PreferenceBindingAdapter: preference screen ⇄ backing model binding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from controller.validators import InputValidationError
from model.edits import (
    Cancel,
    Edit,
    EnterText,
    ListDelete,
    ListEntry,
    ListMove,
    Pick,
    SlideTo,
    Toggle,
)
from model.preference import (
    ActionField,
    ChoiceControl,
    ChoiceField,
    Control,
    NumberListField,
    PreferenceField,
    SliderField,
    SwitchField,
    TextField,
    ValueKind,
)
from model.screen import PreferenceGroup, PreferenceScreen

log = logging.getLogger(__name__)


# =============================================================================
# Errors (programming errors, never user errors)
# =============================================================================


class PreferenceError(Exception):
    """An edit that the declared screen makes impossible."""


class UnknownFieldError(PreferenceError):
    pass


class UnknownGroupError(PreferenceError):
    pass


class EditKindError(PreferenceError):
    """The edit variant does not fit the field's value kind."""


class ReadOnlyFieldError(PreferenceError):
    """The field is disabled, or is a link/action that cannot be edited."""


class OutOfRangeError(PreferenceError):
    """A slider position or picker index outside the bounds of its control."""


# =============================================================================
# Render and edit results
# =============================================================================


@dataclass(frozen=True)
class Row:
    """One rendered field."""

    field_id: str
    kind: ValueKind
    label: str
    value: Any
    display: str
    enabled: bool
    control: Control


@dataclass(frozen=True)
class RenderedGroup:
    name: str
    header: str | None
    footer: str | None
    rows: tuple[Row, ...]


class EditStatus(Enum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"  # same value as before: no write, no notification
    REJECTED = "rejected"  # validation failed: editor stays open
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class EditOutcome:
    """What an edit did and which parts of the screen must be redrawn."""

    status: EditStatus
    rows: tuple[str, ...] = ()  # field ids
    groups: tuple[str, ...] = ()  # group names
    title: str = ""  # validation failure title
    message: str = ""  # validation failure message

    @property
    def applied(self) -> bool:
        return self.status == EditStatus.APPLIED


class PreferenceBindingAdapter:
    """Renders a PreferenceScreen and applies user edits to its backing models.

    The adapter holds no values of its own. ``render()`` reads every value
    through the field getters on each call, so the rows always reflect the
    models as they are now. ``handle_edit()`` validates an edit, writes through
    the field setter, runs the field's side effect and notifies the delegate
    exactly once.

    Example usage:
        adapter = PreferenceBindingAdapter(screen, delegate=parent.refresh)
        outcome = adapter.handle_edit(Toggle("mark-last-move", True))
        if outcome.applied:
            redraw(outcome.rows, outcome.groups)
    """

    def __init__(
        self,
        screen: PreferenceScreen,
        delegate: Callable[[PreferenceScreen], None] | None = None,
    ) -> None:
        self.screen = screen
        self.delegate = delegate

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self) -> list[RenderedGroup]:
        """All groups in declaration order, with their currently visible rows."""
        return [self.render_group(group) for group in self.screen.groups]

    def render_group(self, group: PreferenceGroup) -> RenderedGroup:
        if not group.is_visible():
            return RenderedGroup(group.name, None, None, ())
        rows = tuple(self._row(item) for item in group.fields if item.is_visible())
        return RenderedGroup(group.name, group.header, group.footer, rows)

    def render_row(self, field_id: str) -> Row | None:
        """The row for one field, or None while it is hidden."""
        item = self.field(field_id)
        group = self.screen.group_of(field_id)
        if not group.is_visible() or not item.is_visible():
            return None
        return self._row(item)

    def _row(self, item: PreferenceField) -> Row:
        value = item.value()
        return Row(
            field_id=item.id,
            kind=item.kind,
            label=item.label,
            value=value,
            display=item.display(value),
            enabled=item.is_enabled(),
            control=item.control(value),
        )

    def field(self, field_id: str) -> PreferenceField:
        item = self.screen.get_field(field_id)
        if item is None:
            raise UnknownFieldError(f"No field '{field_id}' on screen '{self.screen.name}'")
        return item

    def picker(self, field_id: str) -> ChoiceControl:
        """Labels, current index (-1 for none), title and footer for an item picker."""
        item = self.field(field_id)
        if not isinstance(item, ChoiceField):
            raise EditKindError(f"Field '{field_id}' is not a choice field")
        return item.control(item.value())

    # =========================================================================
    # Editing
    # =========================================================================

    def handle_edit(self, edit: Edit) -> EditOutcome:
        """Validate and apply one committed user edit."""
        item = self.field(edit.field_id)
        if isinstance(edit, Cancel):
            return EditOutcome(EditStatus.CANCELLED)
        if not item.is_enabled() or item.setter is None:
            raise ReadOnlyFieldError(f"Field '{item.id}' cannot be edited right now")

        current = item.value()
        try:
            new_value = self._new_value(item, edit, current)
        except InputValidationError as e:
            log.info(f"Rejected edit of {item.id}: {e.title}")
            return EditOutcome(EditStatus.REJECTED, title=e.title, message=e.message)

        if new_value == current:
            log.debug(f"Edit of {item.id} leaves value unchanged: {current!r}")
            return EditOutcome(EditStatus.UNCHANGED)

        item.setter(new_value)
        log.info(f"{self.screen.name}.{item.id}: {current!r} -> {new_value!r}")
        if item.side_effect:
            item.side_effect()
        self._notify()

        if item.affects:
            return EditOutcome(EditStatus.APPLIED, groups=item.affects)
        return EditOutcome(EditStatus.APPLIED, rows=(item.id,))

    def _new_value(self, item: PreferenceField, edit: Edit, current: Any) -> Any:
        """Translate an edit into the value to store, for the field's kind."""
        if isinstance(edit, Toggle) and isinstance(item, SwitchField):
            return bool(edit.value)

        if isinstance(edit, SlideTo) and isinstance(item, SliderField):
            if not item.in_range(edit.position):
                raise OutOfRangeError(
                    f"Position {edit.position} outside [{item.minimum}, {item.maximum}] for '{item.id}'"
                )
            return item.value_at(edit.position)

        if isinstance(edit, Pick) and isinstance(item, ChoiceField):
            values = item.values()
            if not 0 <= edit.index < len(values):
                raise OutOfRangeError(f"Index {edit.index} outside the choices of '{item.id}'")
            return values[edit.index]

        if isinstance(edit, EnterText) and isinstance(item, TextField):
            return item.clean(edit.text)

        if isinstance(edit, ListEntry) and isinstance(item, NumberListField):
            number = item.parse_entry(edit.text)
            items = list(current or ())
            if edit.index is None:
                items.append(number)
            else:
                self._check_list_index(item, items, edit.index)
                items[edit.index] = number
            return items

        if isinstance(edit, ListDelete) and isinstance(item, NumberListField):
            items = list(current or ())
            self._check_list_index(item, items, edit.index)
            del items[edit.index]
            return items

        if isinstance(edit, ListMove) and isinstance(item, NumberListField):
            items = list(current or ())
            self._check_list_index(item, items, edit.source)
            self._check_list_index(item, items, edit.destination)
            items.insert(edit.destination, items.pop(edit.source))
            return items

        raise EditKindError(f"{type(edit).__name__} cannot edit {item.kind.value} field '{item.id}'")

    @staticmethod
    def _check_list_index(item: PreferenceField, items: list[Any], index: int) -> None:
        if not 0 <= index < len(items):
            raise OutOfRangeError(f"Index {index} outside the list of '{item.id}'")

    def reset_group(self, group_name: str | None = None) -> EditOutcome:
        """Write the declared default of every field in a group (or the whole screen).

        Fires exactly one notification, however many values actually changed.
        The caller is responsible for asking the user to confirm first.
        """
        if group_name is None:
            groups = self.screen.groups
        else:
            group = self.screen.get_group(group_name)
            if group is None:
                raise UnknownGroupError(f"No group '{group_name}' on screen '{self.screen.name}'")
            groups = [group]

        for group in groups:
            for item in group.fields:
                if item.has_default:
                    item.setter(item.default)
        log.info(f"{self.screen.name}: reset {group_name or 'all groups'} to default values")
        self._notify()
        return EditOutcome(EditStatus.APPLIED, groups=tuple(group.name for group in groups))

    def run_action(self, field_id: str) -> EditOutcome:
        """Perform a confirmed reset action."""
        item = self.field(field_id)
        if not isinstance(item, ActionField):
            raise EditKindError(f"Field '{field_id}' is not an action")
        if item.resetter is None:
            return self.reset_group(item.group)

        item.resetter()
        log.info(f"{self.screen.name}: {item.id} reset to default values")
        self._notify()
        return EditOutcome(EditStatus.APPLIED, groups=tuple(group.name for group in self.screen.groups))

    def _notify(self) -> None:
        if self.delegate:
            self.delegate(self.screen)
