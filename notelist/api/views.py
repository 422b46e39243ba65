# -*- coding: utf-8 -*-
"""views

JSON views exposing the note list controller over HTTP.

Remote store failures are not turned into HTTP errors: the controller
swallows them and the views report ``ok: false`` together with the
unchanged state.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, HTTPException, Request

from ..controller import NoteListController
from ..models import coerce_note_id


class BaseNoteView:
    """Base helper resolving the controller bound to the running application."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def get_controller(self, request: Request) -> NoteListController:
        """Return the controller stored on ``request.app.state``."""

        controller = getattr(request.app.state, "note_controller", None)
        if controller is None:
            self.logger.warning("Note list requested outside the application lifespan")
            raise HTTPException(status_code=503, detail="Note list is not ready")
        return controller


class NoteStateView(BaseNoteView):
    """Return the current view state."""

    async def get(self, request: Request) -> dict:
        return self.get_controller(request).view().to_dict()


class NoteDraftView(BaseNoteView):
    """Replace the draft text."""

    async def put(self, request: Request, text: str = Body(..., embed=True)) -> dict:
        controller = self.get_controller(request)
        controller.set_draft(text)
        return controller.view().to_dict()


class NoteCreateView(BaseNoteView):
    """Submit the draft, optionally replacing it first."""

    async def post(
        self,
        request: Request,
        text: str | None = Body(None, embed=True),
    ) -> dict:
        controller = self.get_controller(request)
        if text is not None:
            controller.set_draft(text)
        note = await controller.submit_draft()
        return {
            "ok": note is not None,
            "note": note.to_row() if note is not None else None,
            "view": controller.view().to_dict(),
        }


class NoteToggleView(BaseNoteView):
    """Flip the completed flag of one note."""

    async def post(
        self,
        request: Request,
        note_id: str,
        completed: bool = Body(..., embed=True),
    ) -> dict:
        controller = self.get_controller(request)
        ok = await controller.toggle_completion(coerce_note_id(note_id), completed)
        return {"ok": ok, "view": controller.view().to_dict()}


class NoteDeleteView(BaseNoteView):
    """Delete one note."""

    async def delete(self, request: Request, note_id: str) -> dict:
        controller = self.get_controller(request)
        ok = await controller.remove_note(coerce_note_id(note_id))
        return {"ok": ok, "view": controller.view().to_dict()}


class NoteAPIViewSet:
    """Group the note views and attach them to a router."""

    def __init__(self) -> None:
        self.state = NoteStateView()
        self.draft = NoteDraftView()
        self.create = NoteCreateView()
        self.toggle = NoteToggleView()
        self.remove = NoteDeleteView()

    def register(self, router: APIRouter) -> None:
        """Attach all view handlers to ``router``."""

        router.get("/notes", name="notes.list")(self.state.get)
        router.put("/notes/draft", name="notes.draft")(self.draft.put)
        router.post("/notes", name="notes.create")(self.create.post)
        router.post("/notes/{note_id}/toggle", name="notes.toggle")(self.toggle.post)
        router.delete("/notes/{note_id}", name="notes.delete")(self.remove.delete)


__all__ = [
    "BaseNoteView",
    "NoteAPIViewSet",
    "NoteCreateView",
    "NoteDeleteView",
    "NoteDraftView",
    "NoteStateView",
    "NoteToggleView",
]

# The End
