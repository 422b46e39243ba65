# -*- coding: utf-8 -*-
"""
views

Single page listing the notes.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from ..conf import NoteListSettings
from ..models import NoteListView
from .rendering import render_template


class NotebookPage:
    """Render the notebook page from the controller snapshot."""

    template_name = "index.html"

    def __init__(self, settings: NoteListSettings) -> None:
        self._settings = settings

    async def get(self, request: Request) -> HTMLResponse:
        controller = getattr(request.app.state, "note_controller", None)
        if controller is None:
            raise HTTPException(status_code=503, detail="Note list is not ready")
        view: NoteListView = controller.view()
        return render_template(
            self.template_name,
            {
                "title": self._settings.page_title,
                "api_prefix": self._settings.api_prefix,
                "view": view,
            },
            request=request,
        )

    def register(self, router: APIRouter) -> None:
        router.get("/", name="notes.page", response_class=HTMLResponse)(self.get)


__all__ = ["NotebookPage"]


# The End
