"""PreferenceGroup and PreferenceScreen: the declarative shape of a settings screen.

Each group:
- Contains related fields, rendered in declaration order
- Maps to one section of the screen, with optional header and footer text
- May disappear entirely (zero rows) while ``visible_when`` is False
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from model.preference import PreferenceField


@dataclass
class PreferenceGroup:
    """A section of related preference fields."""

    name: str  # identifier (e.g., "focus-mode")
    fields: list[PreferenceField] = field(default_factory=list)
    header: str | None = None
    footer: str | None = None
    visible_when: Callable[[], bool] | None = field(default=None, repr=False)

    def is_visible(self) -> bool:
        return self.visible_when is None or bool(self.visible_when())

    def get_field(self, field_id: str) -> PreferenceField | None:
        """Get a field by id."""
        for item in self.fields:
            if item.id == field_id:
                return item
        return None


@dataclass
class PreferenceScreen:
    """An ordered, grouped collection of preference fields."""

    name: str  # identifier (e.g., "sgf")
    title: str
    groups: list[PreferenceGroup] = field(default_factory=list)

    def __post_init__(self) -> None:
        group_names = [group.name for group in self.groups]
        if len(set(group_names)) != len(group_names):
            raise ValueError(f"Duplicate group name on screen '{self.name}'")
        field_ids = [item.id for item in self.fields()]
        if len(set(field_ids)) != len(field_ids):
            raise ValueError(f"Duplicate field id on screen '{self.name}'")

    def fields(self) -> list[PreferenceField]:
        """All fields, in render order."""
        return [item for group in self.groups for item in group.fields]

    def get_field(self, field_id: str) -> PreferenceField | None:
        for group in self.groups:
            item = group.get_field(field_id)
            if item is not None:
                return item
        return None

    def get_group(self, name: str) -> PreferenceGroup | None:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def group_of(self, field_id: str) -> PreferenceGroup | None:
        """The group that contains a field."""
        for group in self.groups:
            if group.get_field(field_id) is not None:
                return group
        return None
