# -*- coding: utf-8 -*-
"""
models

Value objects shared by the controller, the store adapters and the views.

A :class:`Note` mirrors one row of the notes table. Rows arrive from the
store as plain mappings; :meth:`Note.from_row` validates the columns the
controller depends on and :meth:`Note.to_row` produces the JSON-friendly
representation used by the HTTP layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Mapping, Union

from .exceptions import InvalidNoteError

NoteId = Union[int, str]

REQUIRED_COLUMNS = ("id", "text")

_INTEGER_ID = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Note:
    """Represent a single note record as assigned by the store."""

    id: NoteId
    text: str
    completed: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Note":
        """Build a note from a store row, rejecting rows without required columns."""

        missing = [name for name in REQUIRED_COLUMNS if row.get(name) is None]
        if missing:
            raise InvalidNoteError(f"Row is missing column(s): {', '.join(missing)}")
        return cls(
            id=row["id"],
            text=str(row["text"]),
            completed=bool(row.get("completed", False)),
            created_at=parse_timestamp(row.get("created_at")),
        )

    def to_row(self) -> dict[str, Any]:
        """Return the note as a JSON-serialisable mapping."""

        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def with_completed(self, completed: bool) -> "Note":
        """Return a copy carrying ``completed``."""

        return replace(self, completed=completed)


@dataclass(frozen=True)
class NoteListView:
    """Immutable snapshot of the controller state handed to renderers."""

    notes: tuple[Note, ...] = field(default_factory=tuple)
    draft_text: str = ""
    is_loading: bool = False
    show_empty_message: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the snapshot as a JSON-serialisable mapping."""

        return {
            "notes": [note.to_row() for note in self.notes],
            "draft_text": self.draft_text,
            "is_loading": self.is_loading,
            "show_empty_message": self.show_empty_message,
        }


def parse_timestamp(value: Any) -> datetime | None:
    """Convert a store timestamp into ``datetime``."""

    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidNoteError(f"Invalid created_at value: {value!r}") from exc
    raise InvalidNoteError(f"Invalid created_at value: {value!r}")


def coerce_note_id(value: NoteId) -> NoteId:
    """Return ``value`` as ``int`` when it is a decimal string, unchanged otherwise."""

    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_ID.fullmatch(text):
            return int(text)
        return text
    return value


__all__ = [
    "Note",
    "NoteId",
    "NoteListView",
    "parse_timestamp",
    "coerce_note_id",
]


# The End
