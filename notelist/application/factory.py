# -*- coding: utf-8 -*-
"""
application.factory

Factories for assembling FastAPI applications serving the note list.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from fastapi import APIRouter, FastAPI

from ..adapters import BaseStoreAdapter, registry
from ..api import NoteAPI
from ..conf import NoteListSettings, current_settings
from ..controller import NoteListController
from ..pages import NotebookPage

LifecycleHook = Callable[[FastAPI], Awaitable[None] | None]


class ApplicationFactory:
    """Create configured FastAPI applications backed by a note list controller.

    The application lifespan opens the store adapter, creates one controller
    and runs its initial fetch. With ``eager_initialize`` disabled the fetch
    runs as a background task and the page renders its loading state. On
    shutdown the controller is disposed before the adapter is closed.
    """

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        *,
        settings: NoteListSettings | None = None,
        adapter: BaseStoreAdapter | None = None,
        eager_initialize: bool = True,
    ) -> None:
        """Persist configuration used for application builds."""

        self._settings = settings
        self._adapter = adapter
        self._eager_initialize = eager_initialize
        self._startup_hooks: list[LifecycleHook] = []
        self._shutdown_hooks: list[LifecycleHook] = []

    @property
    def settings(self) -> NoteListSettings:
        """Return explicit settings or the globally configured ones."""

        return self._settings or current_settings()

    def register_startup_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute once the controller exists."""

        self._startup_hooks.append(hook)

    def register_shutdown_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute before the adapter closes."""

        self._shutdown_hooks.append(hook)

    def build(self, *, settings: NoteListSettings | None = None) -> FastAPI:
        """Return a FastAPI instance wired with the note list."""

        if settings is not None:
            self._settings = settings
        active = self.settings
        app = FastAPI(title=active.page_title, lifespan=self._lifespan)
        app.state.notelist_settings = active
        self._mount_routers(app, active)
        return app

    def create_adapter(self, settings: NoteListSettings) -> BaseStoreAdapter:
        """Return the injected adapter or build the configured one."""

        if self._adapter is not None:
            return self._adapter
        return registry.create(settings)

    def _mount_routers(self, app: FastAPI, settings: NoteListSettings) -> None:
        app.include_router(NoteAPI(prefix=settings.api_prefix).router)
        pages = APIRouter()
        NotebookPage(settings).register(pages)
        app.include_router(pages)

    @contextlib.asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        settings: NoteListSettings = app.state.notelist_settings
        adapter = self.create_adapter(settings)
        await adapter.open()
        self._logger.info(
            "Serving notes from %s adapter, table %s", adapter.name, adapter.table_name
        )
        controller = NoteListController(adapter)
        app.state.note_adapter = adapter
        app.state.note_controller = controller
        task: asyncio.Task[bool] | None = None
        try:
            await self._run_hooks(self._startup_hooks, app)
            if self._eager_initialize:
                await controller.initialize()
            else:
                task = asyncio.create_task(controller.initialize())
            yield
        finally:
            controller.dispose()
            if task is not None and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
            try:
                await self._run_hooks(self._shutdown_hooks, app)
            finally:
                await adapter.close()
                app.state.note_controller = None

    async def _run_hooks(self, hooks: list[LifecycleHook], app: FastAPI) -> None:
        for hook in hooks:
            result: Any = hook(app)
            if inspect.isawaitable(result):
                await result


def create_app(
    settings: NoteListSettings | None = None,
    *,
    adapter: BaseStoreAdapter | None = None,
) -> FastAPI:
    """Build an application using ``settings`` or the active configuration."""

    return ApplicationFactory(settings=settings, adapter=adapter).build()


__all__ = ["ApplicationFactory", "LifecycleHook", "create_app"]


# The End
