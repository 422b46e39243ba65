# -*- coding: utf-8 -*-
"""
cli

Click entry point for the notelist toolkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

import click

from ..conf import NoteListSettings
from .commands import (
    AdapterFactory,
    AddCommand,
    ControllerSession,
    ListCommand,
    RemoveCommand,
    ToggleCommand,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class NoteListCLI:
    """Aggregate all CLI commands exposed by the package."""

    def __init__(
        self,
        *,
        adapter_factory: AdapterFactory | None = None,
        settings: NoteListSettings | None = None,
    ) -> None:
        """Create command instances sharing one controller session factory."""
        session = ControllerSession(adapter_factory, settings)
        self._list_command = ListCommand(session)
        self._add_command = AddCommand(session)
        self._toggle_command = ToggleCommand(session)
        self._remove_command = RemoveCommand(session)

    @staticmethod
    def configure_logging(log_level: str) -> None:
        """Send log records to stderr at ``log_level``."""
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.WARNING),
            format="%(levelname)s %(name)s: %(message)s",
        )

    def create_cli(self) -> click.Group:
        """Build the Click group with all registered commands."""
        group = click.Group(
            name="notelist",
            help="Command line tools for managing the note list.",
            callback=self.configure_logging,
            params=[
                click.Option(
                    ["--log-level"],
                    type=click.Choice(LOG_LEVELS, case_sensitive=False),
                    default="WARNING",
                    show_default=True,
                    help="Logging verbosity.",
                )
            ],
        )
        group.add_command(self._list_command.to_click_command())
        group.add_command(self._add_command.to_click_command())
        group.add_command(self._toggle_command.to_click_command())
        group.add_command(self._remove_command.to_click_command())
        return group


cli = NoteListCLI().create_cli()

__all__ = ["LOG_LEVELS", "NoteListCLI", "cli"]


# The End
