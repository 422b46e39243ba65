# -*- coding: utf-8 -*-
"""
registry

Registry for note store adapters.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import AdapterNotRegistered
from .base import BaseStoreAdapter

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..conf import NoteListSettings


class AdapterRegistry:
    """Registry for note store adapter classes."""

    def __init__(self) -> None:
        self._adapters: dict[str, type[BaseStoreAdapter]] = {}

    def register(self, adapter_cls: type[BaseStoreAdapter]) -> type[BaseStoreAdapter]:
        """Register an adapter class under its ``name``."""
        if not adapter_cls.name:
            raise ValueError(f"Adapter {adapter_cls.__name__} does not define a name")
        self._adapters[adapter_cls.name] = adapter_cls
        return adapter_cls

    def get(self, name: str) -> type[BaseStoreAdapter]:
        """Return adapter class by ``name``."""
        try:
            return self._adapters[name]
        except KeyError as exc:
            raise AdapterNotRegistered(f"Adapter '{name}' not registered") from exc

    def create(self, settings: "NoteListSettings") -> BaseStoreAdapter:
        """Instantiate the adapter selected by ``settings.adapter``."""
        return self.get(settings.adapter).from_settings(settings)

    def names(self) -> list[str]:
        """Return the registered adapter names."""
        return sorted(self._adapters)


registry = AdapterRegistry()

__all__ = ["AdapterRegistry", "registry"]

# The End
