# -*- coding: utf-8 -*-
"""
controller

Note list controller reconciling local state with the remote store.

The controller owns the newest-first list of notes, the draft text and the
loading flag. Each operation performs exactly one store call and patches
the local list only after that call succeeds; failures are logged and
leave the state untouched. Completions patch the list as it is when they
arrive, so completions for different notes commute.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Callable

from .adapters.base import BaseStoreAdapter
from .exceptions import RemoteOperationError
from .models import Note, NoteId, NoteListView

StateObserver = Callable[["NoteListController"], None]


class NoteListController:
    """Mirror list, create, toggle and delete operations onto an in-memory list."""

    _logger = logging.getLogger(__name__)

    def __init__(self, store: BaseStoreAdapter) -> None:
        """Bind the controller to ``store``; the list stays empty until :meth:`initialize`."""

        self._store = store
        self._notes: list[Note] = []
        self._draft_text = ""
        self._is_loading = True
        self._initialized = False
        self._disposed = False
        self._observers: list[StateObserver] = []

    @property
    def notes(self) -> tuple[Note, ...]:
        """Return the current notes, newest first."""

        return tuple(self._notes)

    @property
    def draft_text(self) -> str:
        """Return the text not yet submitted."""

        return self._draft_text

    @property
    def is_loading(self) -> bool:
        """Return ``True`` until the initial fetch completes."""

        return self._is_loading

    @property
    def show_empty_message(self) -> bool:
        """Return ``True`` when loading finished and there is nothing to show."""

        return not self._notes and not self._is_loading

    @property
    def disposed(self) -> bool:
        return self._disposed

    def view(self) -> NoteListView:
        """Return an immutable snapshot of the current state."""

        return NoteListView(
            notes=self.notes,
            draft_text=self._draft_text,
            is_loading=self._is_loading,
            show_empty_message=self.show_empty_message,
        )

    def register_observer(self, callback: StateObserver) -> None:
        """Register ``callback`` to run after every state change."""

        self._observers.append(callback)

    def unregister_observer(self, callback: StateObserver) -> None:
        """Remove ``callback`` if it was registered."""

        if callback in self._observers:
            self._observers.remove(callback)

    def set_draft(self, text: str) -> None:
        """Replace the draft text."""

        if self._disposed:
            return
        self._draft_text = text
        self._notify()

    def dispose(self) -> None:
        """Tear the controller down; late completions are ignored afterwards."""

        self._disposed = True
        self._observers.clear()

    async def initialize(self) -> bool:
        """Load every note from the store, newest first.

        Runs once per controller. Returns ``True`` when the fetched list was
        applied. On failure the error is logged, the list stays empty and
        loading still finishes.
        """

        if self._initialized:
            self._logger.warning("Note list controller already initialized; ignoring")
            return False
        self._initialized = True
        self._is_loading = True
        try:
            notes = await self._store.list_notes()
        except RemoteOperationError as exc:
            if self._ignore_completion("fetch"):
                return False
            self._logger.error("Error fetching notes: %s", exc)
            self._is_loading = False
            self._notify()
            return False
        if self._ignore_completion("fetch"):
            return False
        self._notes = list(notes)
        self._is_loading = False
        self._notify()
        return True

    async def submit_draft(self) -> Note | None:
        """Create a note from the draft and put it at the head of the list.

        A draft that is blank after trimming is ignored without contacting
        the store. The draft is cleared only when the store accepted it.
        """

        text = self._draft_text
        if not text.strip():
            return None
        try:
            note = await self._store.insert_note({"text": text, "completed": False})
        except RemoteOperationError as exc:
            if self._ignore_completion("insert"):
                return None
            self._logger.error("Error adding note: %s", exc)
            return None
        if self._ignore_completion("insert"):
            return None
        self._notes = [note, *self._notes]
        self._draft_text = ""
        self._notify()
        return note

    async def toggle_completion(self, note_id: NoteId, current_completed: bool) -> bool:
        """Flip the completed flag of ``note_id`` relative to ``current_completed``.

        The flag is supplied by the caller rather than read back from the
        store. Only the matching note is replaced; an id that is no longer
        in the list leaves it untouched.
        """

        completed = not current_completed
        try:
            await self._store.update_note(note_id, {"completed": completed})
        except RemoteOperationError as exc:
            if self._ignore_completion("update"):
                return False
            self._logger.error("Error updating note %s: %s", note_id, exc)
            return False
        if self._ignore_completion("update"):
            return False
        self._notes = [
            note.with_completed(completed) if note.id == note_id else note
            for note in self._notes
        ]
        self._notify()
        return True

    async def remove_note(self, note_id: NoteId) -> bool:
        """Delete ``note_id`` from the store and drop it from the list."""

        try:
            await self._store.delete_note(note_id)
        except RemoteOperationError as exc:
            if self._ignore_completion("delete"):
                return False
            self._logger.error("Error deleting note %s: %s", note_id, exc)
            return False
        if self._ignore_completion("delete"):
            return False
        self._notes = [note for note in self._notes if note.id != note_id]
        self._notify()
        return True

    def _ignore_completion(self, operation: str) -> bool:
        if self._disposed:
            self._logger.debug("Ignoring %s completion after dispose", operation)
            return True
        return False

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)


__all__ = ["NoteListController", "StateObserver"]


# The End
