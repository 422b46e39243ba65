# -*- coding: utf-8 -*-
"""
pages

HTML pages served next to the API.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .rendering import TemplateRenderer, render_template
from .views import NotebookPage

__all__ = ["NotebookPage", "TemplateRenderer", "render_template"]

# The End
