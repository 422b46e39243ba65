# -*- coding: utf-8 -*-
"""
Tests package exports.

Expose the scripted store used across the suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .stores import ScriptedStore, make_note

__all__ = ["ScriptedStore", "make_note"]


# The End
