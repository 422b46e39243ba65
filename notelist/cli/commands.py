# -*- coding: utf-8 -*-
"""
commands

Click command factories for the notelist CLI.

Every command opens the configured store, loads the list once through a
fresh controller and then performs a single operation on it.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator, Callable

import click

from ..adapters import BaseStoreAdapter, registry
from ..conf import NoteListSettings, current_settings
from ..controller import NoteListController
from ..exceptions import NoteListError
from ..models import Note, coerce_note_id

AdapterFactory = Callable[[NoteListSettings], BaseStoreAdapter]

EMPTY_MESSAGE = "No notes yet. Start writing!"


class ControllerSession:
    """Open a store adapter and hand out an initialized controller."""

    def __init__(
        self,
        adapter_factory: AdapterFactory | None = None,
        settings: NoteListSettings | None = None,
    ) -> None:
        self._adapter_factory = adapter_factory or registry.create
        self._settings = settings
        self.loaded = False

    @contextlib.asynccontextmanager
    async def open(self) -> AsyncIterator[NoteListController]:
        """Yield a controller whose initial fetch has completed."""

        adapter = self._adapter_factory(self._settings or current_settings())
        await adapter.open()
        controller = NoteListController(adapter)
        try:
            self.loaded = await controller.initialize()
            yield controller
        finally:
            controller.dispose()
            await adapter.close()


class BaseNoteCommand:
    """Shared plumbing for commands operating on the note list."""

    def __init__(self, session: ControllerSession) -> None:
        self._session = session

    def run(self, **params: object) -> None:
        """Run :meth:`handle` inside an event loop and map failures to exit codes."""

        try:
            succeeded = asyncio.run(self._run(params))
        except NoteListError as error:
            click.secho(str(error), fg="red")
            raise click.exceptions.Exit(1)
        if not succeeded:
            raise click.exceptions.Exit(1)

    async def _run(self, params: dict[str, object]) -> bool:
        async with self._session.open() as controller:
            return await self.handle(controller, **params)

    async def handle(self, controller: NoteListController, **params: object) -> bool:
        raise NotImplementedError

    @staticmethod
    def format_note(note: Note) -> str:
        mark = "x" if note.completed else " "
        return f"[{mark}] {note.id}  {note.text}"


class ListCommand(BaseNoteCommand):
    """Produce the `list` command."""

    async def handle(self, controller: NoteListController, **params: object) -> bool:
        if not self._session.loaded:
            click.secho("Could not load notes.", fg="yellow")
            return False
        if controller.show_empty_message:
            click.echo(EMPTY_MESSAGE)
            return True
        for note in controller.notes:
            click.echo(self.format_note(note))
        return True

    def to_click_command(self) -> click.Command:
        return click.Command(
            name="list",
            callback=self.run,
            help="Show notes, newest first.",
        )


class AddCommand(BaseNoteCommand):
    """Produce the `add` command."""

    async def handle(self, controller: NoteListController, **params: object) -> bool:
        controller.set_draft(str(params["text"]))
        if not controller.draft_text.strip():
            click.secho("Note text is empty; nothing added.", fg="yellow")
            return False
        note = await controller.submit_draft()
        if note is None:
            click.secho("Could not add note.", fg="yellow")
            return False
        click.secho(f"Added {self.format_note(note)}", fg="green")
        return True

    def to_click_command(self) -> click.Command:
        return click.Command(
            name="add",
            callback=self.run,
            params=[click.Argument(["text"], required=True)],
            help="Add a new note.",
        )


class ToggleCommand(BaseNoteCommand):
    """Produce the `toggle` command."""

    async def handle(self, controller: NoteListController, **params: object) -> bool:
        if not self._session.loaded:
            click.secho("Could not load notes.", fg="yellow")
            return False
        raw_id = params["note_id"]
        note_id = coerce_note_id(str(raw_id))
        note = next((item for item in controller.notes if item.id == note_id), None)
        if note is None:
            click.secho(f"Note {raw_id} not found.", fg="yellow")
            return False
        if not await controller.toggle_completion(note.id, note.completed):
            click.secho(f"Could not update note {raw_id}.", fg="yellow")
            return False
        state = "completed" if not note.completed else "not completed"
        click.secho(f"Note {note.id} marked {state}.", fg="green")
        return True

    def to_click_command(self) -> click.Command:
        return click.Command(
            name="toggle",
            callback=self.run,
            params=[click.Argument(["note_id"], required=True)],
            help="Flip the completed flag of a note.",
        )


class RemoveCommand(BaseNoteCommand):
    """Produce the `remove` command."""

    async def handle(self, controller: NoteListController, **params: object) -> bool:
        raw_id = params["note_id"]
        note_id = coerce_note_id(str(raw_id))
        if not await controller.remove_note(note_id):
            click.secho(f"Could not delete note {raw_id}.", fg="yellow")
            return False
        click.secho(f"Deleted note {note_id}.", fg="green")
        return True

    def to_click_command(self) -> click.Command:
        return click.Command(
            name="remove",
            callback=self.run,
            params=[click.Argument(["note_id"], required=True)],
            help="Delete a note.",
        )


__all__ = [
    "AddCommand",
    "BaseNoteCommand",
    "ControllerSession",
    "ListCommand",
    "RemoveCommand",
    "ToggleCommand",
]


# The End
