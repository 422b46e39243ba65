# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM backed note store.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .adapter import TortoiseStoreAdapter

__all__ = ["TortoiseStoreAdapter"]

# The End
