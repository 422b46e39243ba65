# -*- coding: utf-8 -*-
"""
__init__

Note list package entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import NoteListSettings, configure, current_settings
from .controller import NoteListController
from .exceptions import NoteListError, RemoteOperationError
from .meta import __version__
from .models import Note, NoteListView

__all__ = [
    "Note",
    "NoteListController",
    "NoteListError",
    "NoteListSettings",
    "NoteListView",
    "RemoteOperationError",
    "configure",
    "current_settings",
    "__version__",
]

# The End
