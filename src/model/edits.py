"""User edits, one variant per kind of control.

Every edit names the field it applies to, so a picker or editor shared by
several rows hands back an edit instead of an untyped context token.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Toggle:
    field_id: str
    value: bool


@dataclass(frozen=True)
class SlideTo:
    """Slider released at a control position (not the stored unit)."""

    field_id: str
    position: int


@dataclass(frozen=True)
class Pick:
    """Item picker confirmed with the index of the chosen item."""

    field_id: str
    index: int


@dataclass(frozen=True)
class EnterText:
    field_id: str
    text: str


@dataclass(frozen=True)
class ListEntry:
    """Add a list entry (index None) or replace the entry at index."""

    field_id: str
    text: str
    index: int | None = None


@dataclass(frozen=True)
class ListDelete:
    field_id: str
    index: int


@dataclass(frozen=True)
class ListMove:
    field_id: str
    source: int
    destination: int


@dataclass(frozen=True)
class Cancel:
    """Editor dismissed without confirming; nothing is written."""

    field_id: str


Edit = Toggle | SlideTo | Pick | EnterText | ListEntry | ListDelete | ListMove | Cancel
