# -*- coding: utf-8 -*-
"""
api

HTTP API for the note list.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fastapi import APIRouter

from .views import NoteAPIViewSet


class NoteAPI:
    """Build the API router exposing the note list controller."""

    def __init__(self, *, prefix: str = "/api") -> None:
        self.viewset = NoteAPIViewSet()
        self.router = APIRouter(prefix=prefix, tags=["notes"])
        self.viewset.register(self.router)


__all__ = ["NoteAPI", "NoteAPIViewSet"]

# The End
