# -*- coding: utf-8 -*-
"""
__init__

Store adapters for the note list controller.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseStoreAdapter
from .memory import MemoryStoreAdapter
from .registry import AdapterRegistry, registry
from .rest import RestStoreAdapter
from .tortoise import TortoiseStoreAdapter

registry.register(RestStoreAdapter)
registry.register(TortoiseStoreAdapter)
registry.register(MemoryStoreAdapter)

__all__ = [
    "BaseStoreAdapter",
    "AdapterRegistry",
    "registry",
    "MemoryStoreAdapter",
    "RestStoreAdapter",
    "TortoiseStoreAdapter",
]

# The End
