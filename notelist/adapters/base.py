# -*- coding: utf-8 -*-
"""
base

Abstract interface every note store adapter implements.

The controller consumes exactly four remote operations: list the table
newest-first, insert one record, patch one record by id and delete one
record by id. Adapters translate their own transport or ORM failures into
:class:`~notelist.exceptions.RemoteOperationError`.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, TYPE_CHECKING

from ..models import Note, NoteId

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..conf import NoteListSettings


class BaseStoreAdapter(ABC):
    """Base class for note store adapters."""

    name: str = ""

    def __init__(self, *, table_name: str = "todolist") -> None:
        """Remember the table the adapter operates on."""
        self.table_name = table_name

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: "NoteListSettings") -> "BaseStoreAdapter":
        """Build an adapter configured from ``settings``."""

    async def open(self) -> None:
        """Acquire connections or clients needed by the adapter."""
        return None

    async def close(self) -> None:
        """Release resources acquired in :meth:`open`."""
        return None

    async def __aenter__(self) -> "BaseStoreAdapter":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    @abstractmethod
    async def list_notes(self) -> list[Note]:
        """Return every note ordered by ``created_at`` descending."""

    @abstractmethod
    async def insert_note(self, record: Mapping[str, Any]) -> Note:
        """Insert ``record`` and return the stored note with its assigned fields."""

    @abstractmethod
    async def update_note(self, note_id: NoteId, patch: Mapping[str, Any]) -> None:
        """Apply ``patch`` to the row whose id equals ``note_id``."""

    @abstractmethod
    async def delete_note(self, note_id: NoteId) -> None:
        """Delete the row whose id equals ``note_id``."""


__all__ = ["BaseStoreAdapter"]


# The End
