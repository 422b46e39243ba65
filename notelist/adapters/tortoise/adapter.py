# -*- coding: utf-8 -*-
"""
adapter

Tortoise ORM store adapter.

This module defines :class:`TortoiseStoreAdapter`, which serves the notes
table from a relational database through Tortoise ORM. It exposes the same
four operations as the HTTP adapter so the controller can run against a
local database without depending on Tortoise APIs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TYPE_CHECKING

from tortoise import Tortoise, connections
from tortoise.exceptions import BaseORMException

from ...exceptions import RemoteOperationError
from ...models import Note, NoteId
from ..base import BaseStoreAdapter
from .models import NoteRecord

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ...conf import NoteListSettings


class TortoiseStoreAdapter(BaseStoreAdapter):
    """Facade over Tortoise ORM for the notes table."""

    name = "tortoise"
    app_label = "notelist"
    model_modules = ["notelist.adapters.tortoise.models"]
    columns = ("text", "completed")
    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        database_url: str = "sqlite://:memory:",
        *,
        table_name: str = "todolist",
        generate_schemas: bool = True,
    ) -> None:
        super().__init__(table_name=table_name)
        self.database_url = database_url
        self.generate_schemas = generate_schemas
        self._opened = False

    @classmethod
    def from_settings(cls, settings: "NoteListSettings") -> "TortoiseStoreAdapter":
        return cls(
            settings.database_url,
            table_name=settings.table_name,
            generate_schemas=settings.generate_schemas,
        )

    async def open(self) -> None:
        """Initialise Tortoise and create the table when requested."""

        if self._opened:
            return
        NoteRecord._meta.db_table = self.table_name
        await Tortoise.init(
            db_url=self.database_url,
            modules={self.app_label: list(self.model_modules)},
        )
        if self.generate_schemas:
            await Tortoise.generate_schemas(safe=True)
        self._opened = True
        self._logger.debug("Tortoise store opened on table %s", self.table_name)

    async def close(self) -> None:
        """Close every Tortoise connection opened by :meth:`open`."""

        if self._opened:
            await connections.close_all()
            self._opened = False

    async def list_notes(self) -> list[Note]:
        try:
            rows = await NoteRecord.all().order_by("-created_at", "-id").values(
                "id", "text", "completed", "created_at"
            )
        except BaseORMException as exc:
            raise RemoteOperationError("list", str(exc)) from exc
        return [Note.from_row(row) for row in rows]

    async def insert_note(self, record: Mapping[str, Any]) -> Note:
        values = self._clean("insert", record)
        try:
            obj = await NoteRecord.create(**values)
        except BaseORMException as exc:
            raise RemoteOperationError("insert", str(exc)) from exc
        return self._to_note(obj)

    async def update_note(self, note_id: NoteId, patch: Mapping[str, Any]) -> None:
        values = self._clean("update", patch)
        try:
            await NoteRecord.filter(id=note_id).update(**values)
        except (BaseORMException, TypeError, ValueError) as exc:
            raise RemoteOperationError("update", str(exc)) from exc

    async def delete_note(self, note_id: NoteId) -> None:
        try:
            await NoteRecord.filter(id=note_id).delete()
        except (BaseORMException, TypeError, ValueError) as exc:
            raise RemoteOperationError("delete", str(exc)) from exc

    def _clean(self, operation: str, values: Mapping[str, Any]) -> dict[str, Any]:
        """Reject columns the table does not define."""

        unknown = sorted(set(values) - set(self.columns))
        if unknown:
            raise RemoteOperationError(operation, f"Unknown column(s): {', '.join(unknown)}")
        return dict(values)

    @staticmethod
    def _to_note(obj: NoteRecord) -> Note:
        return Note(
            id=obj.id,
            text=obj.text,
            completed=obj.completed,
            created_at=obj.created_at,
        )


__all__ = ["TortoiseStoreAdapter"]


# The End
