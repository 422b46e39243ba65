# -*- coding: utf-8 -*-
"""
models

Tortoise ORM model backing the notes table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from tortoise import fields
from tortoise.models import Model


class NoteRecord(Model):
    """Represent one row of the notes table."""

    id = fields.IntField(pk=True)
    text = fields.TextField()
    completed = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "todolist"
        ordering = ["-created_at", "-id"]


__all__ = ["NoteRecord"]


# The End
