# -*- coding: utf-8 -*-
"""
rest

HTTP adapter for hosted table services speaking the PostgREST query dialect.

Requests follow the conventions used by Supabase and other PostgREST
deployments: the table lives under ``{store_url}{rest_path}/{table}``,
filters are expressed as ``column=eq.value`` query parameters and the
``Prefer`` header selects whether the inserted representation is returned.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TYPE_CHECKING, cast

import httpx

from ..exceptions import ConfigurationError, InvalidNoteError, RemoteOperationError
from ..models import Note, NoteId
from .base import BaseStoreAdapter

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..conf import NoteListSettings


class RestStoreAdapter(BaseStoreAdapter):
    """Talk to the notes table through ``httpx.AsyncClient``."""

    name = "rest"
    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        *,
        table_name: str = "todolist",
        rest_path: str = "/rest/v1",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Store connection details; the client is created lazily on :meth:`open`."""

        super().__init__(table_name=table_name)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.rest_path = "/" + rest_path.strip("/") if rest_path.strip("/") else ""
        self.timeout = timeout
        self._transport = transport
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, settings: "NoteListSettings") -> "RestStoreAdapter":
        """Build the adapter from the ``store_*`` settings."""

        if not settings.store_url:
            raise ConfigurationError(
                "NOTELIST_STORE_URL must be set to use the rest adapter."
            )
        return cls(
            settings.store_url,
            settings.store_key,
            table_name=settings.table_name,
            rest_path=settings.rest_path,
            timeout=settings.request_timeout,
        )

    @property
    def table_url(self) -> str:
        """Return the absolute URL of the notes table endpoint."""

        return f"{self.base_url}{self.rest_path}/{self.table_name}"

    def build_headers(self) -> dict[str, str]:
        """Return authentication and content negotiation headers."""

        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def open(self) -> None:
        """Create the HTTP client when the adapter owns it."""

        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
            self._owns_client = True

    async def close(self) -> None:
        """Close the HTTP client if it was created by the adapter."""

        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def list_notes(self) -> list[Note]:
        """Fetch all rows ordered by ``created_at`` descending."""

        response = await self._request(
            "list",
            "GET",
            params={"select": "*", "order": "created_at.desc"},
        )
        rows = self._decode(response, "list")
        if not isinstance(rows, list):
            raise RemoteOperationError("list", "Expected a JSON array of rows")
        return [self._to_note(row, "list") for row in rows]

    async def insert_note(self, record: Mapping[str, Any]) -> Note:
        """Insert one row and return its stored representation."""

        response = await self._request(
            "insert",
            "POST",
            params={"select": "*"},
            json=[dict(record)],
            headers={"Prefer": "return=representation"},
        )
        rows = self._decode(response, "insert")
        if isinstance(rows, list):
            if not rows:
                raise RemoteOperationError("insert", "Store returned no inserted row")
            rows = rows[0]
        return self._to_note(rows, "insert")

    async def update_note(self, note_id: NoteId, patch: Mapping[str, Any]) -> None:
        """Patch the row matching ``note_id``; the response body is ignored."""

        await self._request(
            "update",
            "PATCH",
            params={"id": f"eq.{note_id}"},
            json=dict(patch),
            headers={"Prefer": "return=minimal"},
        )

    async def delete_note(self, note_id: NoteId) -> None:
        """Delete the row matching ``note_id``; the response body is ignored."""

        await self._request("delete", "DELETE", params={"id": f"eq.{note_id}"})

    async def _request(
        self,
        operation: str,
        method: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and translate transport failures and error statuses."""

        if self._client is None:
            await self.open()
        client = cast(httpx.AsyncClient, self._client)
        self._logger.debug("%s %s %s", method, self.table_url, dict(params or {}))
        try:
            response = await client.request(
                method,
                self.table_url,
                params=params,
                json=json,
                headers={**self.build_headers(), **dict(headers or {})},
            )
        except httpx.HTTPError as exc:
            raise RemoteOperationError(operation, str(exc) or type(exc).__name__) from exc
        if response.is_error:
            raise RemoteOperationError(
                operation,
                self._error_detail(response),
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, operation: str) -> Any:
        """Return the JSON payload of ``response``."""

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteOperationError(operation, "Response body is not valid JSON") from exc

    @staticmethod
    def _to_note(row: Any, operation: str) -> Note:
        """Convert ``row`` into a note, reporting malformed rows as remote failures."""

        if not isinstance(row, Mapping):
            raise RemoteOperationError(operation, f"Unexpected row payload: {row!r}")
        try:
            return Note.from_row(row)
        except InvalidNoteError as exc:
            raise RemoteOperationError(operation, str(exc)) from exc

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract the most useful message from an error response."""

        try:
            payload = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(payload, Mapping):
            for key in ("message", "error_description", "error", "hint", "details"):
                value = payload.get(key)
                if value:
                    return str(value)
        return str(payload)


__all__ = ["RestStoreAdapter"]


# The End
