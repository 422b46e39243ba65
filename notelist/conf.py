# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the note list.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Mapping

from .exceptions import ConfigurationError


@dataclass
class NoteListSettings:
    """Container for note list configuration derived from environment variables."""

    store_url: str = ""
    store_key: str = ""
    table_name: str = "todolist"
    adapter: str = "rest"
    database_url: str = "sqlite://:memory:"
    generate_schemas: bool = True
    request_timeout: float | None = None
    rest_path: str = "/rest/v1"
    page_title: str = "My Notes"
    api_prefix: str = "/api"

    def __post_init__(self) -> None:
        """Normalize paths and validate the table name."""
        self.table_name = (self.table_name or "").strip()
        if not self.table_name:
            raise ConfigurationError("Table name must not be empty.")
        self.adapter = (self.adapter or "rest").strip().lower()
        self.store_url = (self.store_url or "").strip().rstrip("/")
        self.rest_path = self._normalize_prefix(self.rest_path)
        api_prefix = self._normalize_prefix(self.api_prefix)
        self.api_prefix = "" if api_prefix == "/" else api_prefix.rstrip("/")
        if self.request_timeout is not None and self.request_timeout <= 0:
            self.request_timeout = None

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "NOTELIST_",
    ) -> "NoteListSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        store_url = data.get("STORE_URL") or source.get("SUPABASE_URL") or ""
        store_key = data.get("STORE_KEY") or source.get("SUPABASE_KEY") or ""
        table_name = data.get("TABLE_NAME") or "todolist"
        adapter = data.get("ADAPTER") or "rest"
        database_url = (
            data.get("DATABASE_URL") or source.get("DATABASE_URL") or "sqlite://:memory:"
        )
        generate_schemas = cls._to_bool(data.get("GENERATE_SCHEMAS"), default=True)
        request_timeout = cls._to_float(data.get("REQUEST_TIMEOUT"), default=None)
        rest_path = data.get("REST_PATH") or "/rest/v1"
        page_title = data.get("PAGE_TITLE") or "My Notes"
        api_prefix = data.get("API_PREFIX") or "/api"
        return cls(
            store_url=store_url,
            store_key=store_key,
            table_name=table_name,
            adapter=adapter,
            database_url=database_url,
            generate_schemas=generate_schemas,
            request_timeout=request_timeout,
            rest_path=rest_path,
            page_title=page_title,
            api_prefix=api_prefix,
        )

    @staticmethod
    def _to_float(value: str | None, *, default: float | None) -> float | None:
        """Return a float from ``value`` or ``default`` when conversion fails."""
        if value is None or not value.strip():
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths always contain a single leading slash."""
        normalized = value.strip()
        stripped = normalized.strip("/")
        if not stripped:
            return "/"
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``NoteListSettings`` instance."""

    def __init__(self, initial: NoteListSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[NoteListSettings], None]] = []

    def configure(self, settings: NoteListSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> NoteListSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = NoteListSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access re-reads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[NoteListSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[NoteListSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: NoteListSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> NoteListSettings:
    """Return the active settings instance used by note list components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings instance."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[NoteListSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[NoteListSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "NoteListSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
