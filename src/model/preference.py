"""Preference fields: one editable setting as presented on a settings screen.

A field never owns a value. It reads and writes the backing model through the
getter/setter closures it was declared with, so every render shows whatever
the model currently holds.

Declaring a field against a model Setting:

    SwitchField(
        "mark-last-move", "Mark last move",
        **bound(settings.board_view, "mark_last_move"),
    )

``bound()`` supplies the getter, the setter and the Setting's declared default
(used by "Reset to default values").
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Sequence

if TYPE_CHECKING:
    from model.screen import PreferenceScreen


class ValueKind(Enum):
    SWITCH = "switch"
    SLIDER = "slider"
    CHOICE = "choice"
    TEXT = "text"
    NUMBER_LIST = "number-list"
    LINK = "link"
    ACTION = "action"


# Marker for fields without a reset value
NO_DEFAULT = object()


# =============================================================================
# Control descriptors (what the presentation layer needs to draw a row)
# =============================================================================


@dataclass(frozen=True)
class SwitchControl:
    on: bool


@dataclass(frozen=True)
class SliderControl:
    minimum: int
    maximum: int
    position: int


@dataclass(frozen=True)
class ChoiceControl:
    labels: tuple[str, ...]
    index: int  # -1 when the stored value matches no choice
    title: str
    footer: str = ""


@dataclass(frozen=True)
class TextControl:
    text: str
    placeholder: str = ""


@dataclass(frozen=True)
class ListControl:
    items: tuple[int, ...]


@dataclass(frozen=True)
class LinkControl:
    title: str


@dataclass(frozen=True)
class ActionControl:
    confirm_title: str
    confirm_message: str


Control = (
    SwitchControl | SliderControl | ChoiceControl | TextControl
    | ListControl | LinkControl | ActionControl
)


def bound(obj: Any, name: str) -> dict[str, Any]:
    """Getter, setter and declared default for a Setting on a backing model."""
    setting = getattr(type(obj), name)
    return {
        "getter": lambda: getattr(obj, name),
        "setter": lambda value: setattr(obj, name, value),
        "default": setting.default,
    }


# =============================================================================
# Fields
# =============================================================================


class PreferenceField:
    """Base class for all preference fields."""

    kind: ValueKind
    editable = True

    def __init__(
        self,
        id: str,
        label: str,
        *,
        getter: Callable[[], Any] | None = None,
        setter: Callable[[Any], None] | None = None,
        default: Any = NO_DEFAULT,
        side_effect: Callable[[], Any] | None = None,
        enabled_when: Callable[[], bool] | None = None,
        visible_when: Callable[[], bool] | None = None,
        affects: Sequence[str] = (),
    ):
        """Create a preference field.

        Args:
            id: Stable identifier, unique within its screen
            label: Text shown for the row
            getter: Reads the current value from the backing model
            setter: Writes a validated value to the backing model
            default: Value written by "Reset to default values"
            side_effect: Run after every successful write; its result is ignored
            enabled_when: Row is read-only while this returns False
            visible_when: Row is not rendered while this returns False
            affects: Names of groups whose layout depends on this field's value
        """
        self.id = id
        self.label = label
        self.getter = getter
        self.setter = setter
        self._default = default
        self.side_effect = side_effect
        self.enabled_when = enabled_when
        self.visible_when = visible_when
        self.affects = tuple(affects)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"

    @property
    def has_default(self) -> bool:
        return self._default is not NO_DEFAULT and self.setter is not None

    @property
    def default(self) -> Any:
        # Copy so that a reset never hands a shared list to the model
        return copy.deepcopy(self._default)

    def value(self) -> Any:
        return self.getter() if self.getter else None

    def is_enabled(self) -> bool:
        return self.editable and (self.enabled_when is None or bool(self.enabled_when()))

    def is_visible(self) -> bool:
        return self.visible_when is None or bool(self.visible_when())

    def display(self, value: Any) -> str:
        """Human-readable form of a value."""
        return "" if value is None else str(value)

    def control(self, value: Any) -> Control:
        raise NotImplementedError


class SwitchField(PreferenceField):
    kind = ValueKind.SWITCH

    def display(self, value: Any) -> str:
        return "On" if value else "Off"

    def control(self, value: Any) -> SwitchControl:
        return SwitchControl(on=bool(value))


class SliderField(PreferenceField):
    """Numeric value edited with a slider bounded to [minimum, maximum].

    ``minimum`` and ``maximum`` are control positions. The stored value is
    ``position / scale``, e.g. a percentage slider over 0-100 with scale 100
    stores a fraction between 0.0 and 1.0.
    """

    kind = ValueKind.SLIDER

    def __init__(
        self,
        id: str,
        label: str,
        *,
        minimum: int,
        maximum: int,
        scale: float = 1.0,
        integral: bool = True,
        unit: str = "",
        formatter: Callable[[Any], str] | None = None,
        **kwargs: Any,
    ):
        super().__init__(id, label, **kwargs)
        self.minimum = minimum
        self.maximum = maximum
        self.scale = scale
        self.integral = integral
        self.unit = unit
        self.formatter = formatter

    def in_range(self, position: int) -> bool:
        return self.minimum <= position <= self.maximum

    def position_of(self, value: float) -> int:
        return int(round(value * self.scale))

    def value_at(self, position: int) -> float | int:
        value = position / self.scale
        return int(round(value)) if self.integral else value

    def display(self, value: Any) -> str:
        if self.formatter:
            return self.formatter(value)
        text = str(self.position_of(value))
        return f"{text}{self.unit}" if self.unit else text

    def control(self, value: Any) -> SliderControl:
        return SliderControl(self.minimum, self.maximum, self.position_of(value))


class ChoiceField(PreferenceField):
    """A value picked from a fixed, ordered list.

    Serves both enumerations and "named buckets" that present a large numeric
    range as a short list. A stored value that matches no entry is valid: the
    picker then opens with nothing selected (index -1).
    """

    kind = ValueKind.CHOICE

    def __init__(
        self,
        id: str,
        label: str,
        *,
        values: Sequence[Any] | Callable[[], Sequence[Any]],
        labels: Sequence[str] | Callable[[], Sequence[str]],
        picker_title: str = "",
        picker_footer: str = "",
        unmatched: Callable[[Any], str] | None = None,
        **kwargs: Any,
    ):
        super().__init__(id, label, **kwargs)
        self._values = values
        self._labels = labels
        self.picker_title = picker_title or label
        self.picker_footer = picker_footer
        self.unmatched = unmatched

    def values(self) -> list[Any]:
        return list(self._values() if callable(self._values) else self._values)

    def labels(self) -> list[str]:
        return list(self._labels() if callable(self._labels) else self._labels)

    def index_of(self, value: Any) -> int:
        values = self.values()
        return values.index(value) if value in values else -1

    def display(self, value: Any) -> str:
        index = self.index_of(value)
        if index >= 0:
            return self.labels()[index]
        if self.unmatched:
            return self.unmatched(value)
        return str(value)

    def control(self, value: Any) -> ChoiceControl:
        return ChoiceControl(
            labels=tuple(self.labels()),
            index=self.index_of(value),
            title=self.picker_title,
            footer=self.picker_footer,
        )


class TextField(PreferenceField):
    """Free-form text; ``validator`` returns the cleaned text or raises InputValidationError."""

    kind = ValueKind.TEXT

    def __init__(
        self,
        id: str,
        label: str,
        *,
        validator: Callable[[str], str] | None = None,
        placeholder: str = "",
        empty_display: str = "",
        **kwargs: Any,
    ):
        super().__init__(id, label, **kwargs)
        self.validator = validator
        self.placeholder = placeholder
        self.empty_display = empty_display

    def clean(self, text: str) -> str:
        return self.validator(text) if self.validator else text

    def display(self, value: Any) -> str:
        return value if value else self.empty_display

    def control(self, value: Any) -> TextControl:
        return TextControl(text=value or "", placeholder=self.placeholder)


class NumberListField(PreferenceField):
    """Ordered list of numbers; each entry is parsed with ``parse_entry``."""

    kind = ValueKind.NUMBER_LIST

    def __init__(self, id: str, label: str, *, parse_entry: Callable[[str], int], **kwargs: Any):
        super().__init__(id, label, **kwargs)
        self.parse_entry = parse_entry

    def display(self, value: Any) -> str:
        return ", ".join(str(number) for number in value or ())

    def control(self, value: Any) -> ListControl:
        return ListControl(items=tuple(value or ()))


class LinkField(PreferenceField):
    """Navigates to a child screen; shows an optional summary of it."""

    kind = ValueKind.LINK
    editable = False

    def __init__(self, id: str, label: str, *, target: Callable[[], PreferenceScreen], **kwargs: Any):
        super().__init__(id, label, **kwargs)
        self.target = target

    def display(self, value: Any) -> str:
        return "" if value is None else str(value)

    def control(self, value: Any) -> LinkControl:
        return LinkControl(title=self.label)


class ActionField(PreferenceField):
    """Resets a group (or the whole screen when ``group`` is None) after confirmation.

    A ``resetter`` replaces the per-field defaults with the model's own reset
    routine, for settings that are not all shown on the screen.
    """

    kind = ValueKind.ACTION
    editable = False

    def __init__(
        self,
        id: str,
        label: str = "Reset to default values",
        *,
        group: str | None = None,
        resetter: Callable[[], None] | None = None,
        confirm_title: str = "Please confirm",
        confirm_message: str = "This will reset the settings to a set of default values. "
        "Any changes you have made will be discarded.",
        **kwargs: Any,
    ):
        super().__init__(id, label, **kwargs)
        self.group = group
        self.resetter = resetter
        self.confirm_title = confirm_title
        self.confirm_message = confirm_message

    def display(self, value: Any) -> str:
        return ""

    def control(self, value: Any) -> ActionControl:
        return ActionControl(self.confirm_title, self.confirm_message)
