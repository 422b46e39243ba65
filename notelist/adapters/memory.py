# -*- coding: utf-8 -*-
"""
memory

Process-local notes table used for development and tests.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import count
from typing import Any, Callable, Iterable, Mapping, TYPE_CHECKING

from ..exceptions import RemoteOperationError
from ..models import Note, NoteId
from .base import BaseStoreAdapter

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..conf import NoteListSettings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _sort_time(value: datetime | None) -> datetime:
    """Return an aware timestamp; naive values are read as UTC."""
    if value is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class MemoryStoreAdapter(BaseStoreAdapter):
    """Keep rows in a dictionary and emulate the remote table semantics.

    Updates and deletes that match no row succeed silently, as a filtered
    ``PATCH``/``DELETE`` against a hosted table does.
    """

    name = "memory"
    columns = ("text", "completed")

    def __init__(
        self,
        notes: Iterable[Note] | None = None,
        *,
        table_name: str = "todolist",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        super().__init__(table_name=table_name)
        self._rows: dict[NoteId, Note] = {}
        self._clock = clock
        for note in notes or ():
            self._rows[note.id] = note
        start = max((n.id for n in self._rows.values() if isinstance(n.id, int)), default=0)
        self._ids = count(start + 1)
        self._sequence = count()
        self._order: dict[NoteId, int] = {note_id: next(self._sequence) for note_id in self._rows}

    @classmethod
    def from_settings(cls, settings: "NoteListSettings") -> "MemoryStoreAdapter":
        return cls(table_name=settings.table_name)

    @property
    def rows(self) -> list[Note]:
        """Return the stored notes in insertion order."""
        return list(self._rows.values())

    async def list_notes(self) -> list[Note]:
        return sorted(
            self._rows.values(),
            key=lambda note: (_sort_time(note.created_at), self._order[note.id]),
            reverse=True,
        )

    async def insert_note(self, record: Mapping[str, Any]) -> Note:
        self._check_columns("insert", record)
        text = record.get("text")
        if not isinstance(text, str) or not text:
            raise RemoteOperationError("insert", "Column 'text' violates not-null constraint")
        note = Note(
            id=next(self._ids),
            text=text,
            completed=bool(record.get("completed", False)),
            created_at=self._clock(),
        )
        self._rows[note.id] = note
        self._order[note.id] = next(self._sequence)
        return note

    async def update_note(self, note_id: NoteId, patch: Mapping[str, Any]) -> None:
        self._check_columns("update", patch)
        current = self._rows.get(note_id)
        if current is None:
            return
        self._rows[note_id] = Note(
            id=current.id,
            text=str(patch.get("text", current.text)),
            completed=bool(patch.get("completed", current.completed)),
            created_at=current.created_at,
        )

    async def delete_note(self, note_id: NoteId) -> None:
        self._rows.pop(note_id, None)
        self._order.pop(note_id, None)

    def _check_columns(self, operation: str, values: Mapping[str, Any]) -> None:
        unknown = sorted(set(values) - set(self.columns))
        if unknown:
            raise RemoteOperationError(
                operation, f"Unknown column(s): {', '.join(unknown)}", status_code=400
            )


__all__ = ["MemoryStoreAdapter"]


# The End
