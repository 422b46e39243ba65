# -*- coding: utf-8 -*-
"""
cli

Command line interface for the note list.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .entrypoint import NoteListCLI, cli

__all__ = ["NoteListCLI", "cli"]

# The End
