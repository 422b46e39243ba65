# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the note list.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class NoteListError(Exception):
    """Base class for note list exceptions."""


class ConfigurationError(NoteListError):
    """Raised when settings are incomplete or invalid."""


class AdapterNotRegistered(NoteListError, LookupError):
    """Raised when a store adapter name is not registered."""


class InvalidNoteError(NoteListError, ValueError):
    """Raised when a store row cannot be converted into a note."""


class RemoteOperationError(NoteListError):
    """Raised by store adapters when a remote call fails.

    ``operation`` is one of ``list``, ``insert``, ``update`` or ``delete``;
    ``detail`` carries whatever the store reported.
    """

    def __init__(
        self,
        operation: str,
        detail: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        message = f"{operation} failed"
        if status_code is not None:
            message += f" ({status_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.operation = operation
        self.detail = detail
        self.status_code = status_code


__all__ = [
    "NoteListError",
    "ConfigurationError",
    "AdapterNotRegistered",
    "InvalidNoteError",
    "RemoteOperationError",
]


# The End
