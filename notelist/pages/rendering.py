# -*- coding: utf-8 -*-
"""
pages.rendering

Helper utilities for rendering the note list page.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class TemplateRenderer:
    """Provide cached access to the page templates."""

    _templates: Jinja2Templates | None = None

    @classmethod
    def get_templates(cls) -> Jinja2Templates:
        """Return a cached ``Jinja2Templates`` instance."""

        if cls._templates is None:
            cls._templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
        return cls._templates

    @classmethod
    def render(
        cls,
        template_name: str,
        context: Mapping[str, Any],
        *,
        request: Request,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render ``template_name`` with ``context`` for ``request``."""

        return cls.get_templates().TemplateResponse(
            request, template_name, dict(context), status_code=status_code
        )


def render_template(
    template_name: str,
    context: Mapping[str, Any],
    *,
    request: Request,
) -> HTMLResponse:
    """Render ``template_name`` with ``context`` for use in FastAPI views."""

    return TemplateRenderer.render(template_name, context, request=request)


__all__ = ["TemplateRenderer", "render_template", "TEMPLATES_DIR"]


# The End
