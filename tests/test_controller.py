# -*- coding: utf-8 -*-
"""
test_controller

Tests for the note list controller reconciliation rules.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

import pytest

from notelist.controller import NoteListController
from tests.stores import BASE_TIME, ScriptedStore, make_note


async def settle() -> None:
    """Let pending tasks run up to their next suspension point."""

    for _ in range(5):
        await asyncio.sleep(0)


async def loaded_controller(store: ScriptedStore) -> NoteListController:
    controller = NoteListController(store)
    assert await controller.initialize() is True
    return controller


class TestInitialize:
    """Verify the one-time initial fetch."""

    def test_starts_in_loading_state(self) -> None:
        controller = NoteListController(ScriptedStore())

        assert controller.is_loading is True
        assert controller.notes == ()
        assert controller.show_empty_message is False

    @pytest.mark.asyncio
    async def test_keeps_store_order_verbatim(self) -> None:
        older = make_note(1, minutes=0)
        newer = make_note(2, minutes=10)
        store = ScriptedStore(listing=[older, newer])

        controller = await loaded_controller(store)

        assert controller.notes == (older, newer)
        assert controller.is_loading is False

    @pytest.mark.asyncio
    async def test_memory_store_lists_newest_first(self) -> None:
        first = make_note(1, minutes=0)
        second = make_note(2, minutes=5)
        store = ScriptedStore([first, second])

        controller = await loaded_controller(store)

        assert [note.id for note in controller.notes] == [2, 1]

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_loading_finishes(self, caplog) -> None:
        store = ScriptedStore([make_note(1)])
        store.fail("list", "connection refused")
        controller = NoteListController(store)

        assert await controller.initialize() is False

        assert controller.notes == ()
        assert controller.is_loading is False
        assert controller.show_empty_message is True
        assert "Error fetching notes" in caplog.text
        assert "connection refused" in caplog.text

    @pytest.mark.asyncio
    async def test_runs_only_once(self, caplog) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)

        assert await controller.initialize() is False

        assert store.count("list") == 1
        assert "already initialized" in caplog.text

    @pytest.mark.asyncio
    async def test_result_ignored_after_dispose(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="notelist.controller")
        store = ScriptedStore([make_note(1)])
        gate = store.hold("list")
        controller = NoteListController(store)
        changes: list[int] = []
        controller.register_observer(lambda ctrl: changes.append(len(ctrl.notes)))

        task = asyncio.create_task(controller.initialize())
        await settle()
        controller.dispose()
        gate.set()

        assert await task is False
        assert controller.notes == ()
        assert controller.disposed is True
        assert changes == []
        assert "Ignoring fetch completion after dispose" in caplog.text

    @pytest.mark.asyncio
    async def test_failure_after_dispose_is_not_logged(self, caplog) -> None:
        store = ScriptedStore()
        store.fail("list", "late failure", after_apply=True)
        gate = store.hold("list")
        controller = NoteListController(store)

        task = asyncio.create_task(controller.initialize())
        await settle()
        controller.dispose()
        gate.set()

        assert await task is False
        assert "late failure" not in caplog.text


class TestSubmitDraft:
    """Verify note creation from the draft."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("draft", ["", " ", "\t\n"])
    async def test_blank_draft_is_a_no_op(self, draft: str) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        before = controller.notes
        controller.set_draft(draft)

        assert await controller.submit_draft() is None

        assert store.count("insert") == 0
        assert controller.notes == before
        assert controller.draft_text == draft

    @pytest.mark.asyncio
    async def test_prepends_without_resorting(self) -> None:
        older = make_note(1, minutes=0)
        newer = make_note(2, minutes=10)
        store = ScriptedStore(
            [older, newer], clock=lambda: BASE_TIME - timedelta(days=1)
        )
        controller = await loaded_controller(store)
        assert [note.id for note in controller.notes] == [2, 1]

        controller.set_draft("written last, dated first")
        created = await controller.submit_draft()

        assert created is not None
        assert created.created_at < newer.created_at
        assert controller.notes == (created, newer, older)

    @pytest.mark.asyncio
    async def test_sends_draft_verbatim_and_clears_it(self) -> None:
        store = ScriptedStore()
        controller = await loaded_controller(store)
        controller.set_draft("  buy milk ")

        created = await controller.submit_draft()

        assert store.calls[-1] == ("insert", ({"text": "  buy milk ", "completed": False},))
        assert created is not None
        assert created.text == "  buy milk "
        assert created.completed is False
        assert controller.draft_text == ""

    @pytest.mark.asyncio
    async def test_failure_keeps_draft_and_notes(self, caplog) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        before = controller.notes
        store.fail("insert", "insert rejected")
        controller.set_draft("buy milk")

        assert await controller.submit_draft() is None

        assert controller.notes == before
        assert controller.draft_text == "buy milk"
        assert "Error adding note" in caplog.text


class TestToggleCompletion:
    """Verify the identity-preserving completed-flag toggle."""

    @pytest.mark.asyncio
    async def test_replaces_only_the_matching_note(self) -> None:
        store = ScriptedStore([make_note(4, minutes=2), make_note(5, minutes=1), make_note(6)])
        controller = await loaded_controller(store)
        before = controller.notes

        assert await controller.toggle_completion(5, False) is True

        after = controller.notes
        assert len(after) == len(before)
        for old, new in zip(before, after):
            if old.id == 5:
                assert new.completed is True
                assert new.text == old.text
                assert new.created_at == old.created_at
            else:
                assert new is old

    @pytest.mark.asyncio
    async def test_uses_caller_supplied_flag(self) -> None:
        store = ScriptedStore([make_note(1, completed=False)])
        controller = await loaded_controller(store)

        await controller.toggle_completion(1, True)

        assert store.calls[-1] == ("update", (1, {"completed": False}))
        assert controller.notes[0].completed is False

    @pytest.mark.asyncio
    async def test_unknown_id_leaves_list_untouched(self) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        before = controller.notes

        assert await controller.toggle_completion(99, False) is True

        assert controller.notes == before
        assert controller.notes[0] is before[0]

    @pytest.mark.asyncio
    async def test_failure_leaves_notes_unchanged(self, caplog) -> None:
        store = ScriptedStore([make_note(1), make_note(2, minutes=1)])
        controller = await loaded_controller(store)
        before = controller.notes
        store.fail("update", "update rejected")

        assert await controller.toggle_completion(1, False) is False

        assert controller.notes == before
        assert all(new is old for new, old in zip(controller.notes, before))
        assert "Error updating note 1" in caplog.text

    @pytest.mark.asyncio
    async def test_failed_response_after_remote_apply_diverges(self) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        store.fail("update", "gateway timeout", after_apply=True)

        assert await controller.toggle_completion(1, False) is False

        assert store.rows[0].completed is True
        assert controller.notes[0].completed is False


class TestRemoveNote:
    """Verify deletion by id."""

    @pytest.mark.asyncio
    async def test_removes_matching_id_in_order(self) -> None:
        store = ScriptedStore(listing=[make_note(1), make_note(2), make_note(3)])
        controller = await loaded_controller(store)

        assert await controller.remove_note(2) is True

        assert [note.id for note in controller.notes] == [1, 3]

    @pytest.mark.asyncio
    async def test_failure_keeps_the_note(self, caplog) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        store.fail("delete", "permission denied")

        assert await controller.remove_note(1) is False

        assert [note.id for note in controller.notes] == [1]
        assert "Error deleting note 1" in caplog.text


class TestConcurrentCompletions:
    """Verify how overlapping store calls patch the list."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delete_first", [True, False])
    async def test_different_rows_commute(self, delete_first: bool) -> None:
        store = ScriptedStore([make_note(1, minutes=1), make_note(2)])
        controller = await loaded_controller(store)
        toggle_gate = store.hold("update")
        delete_gate = store.hold("delete")

        toggle = asyncio.create_task(controller.toggle_completion(1, False))
        delete = asyncio.create_task(controller.remove_note(2))
        await settle()
        for gate in ((delete_gate, toggle_gate) if delete_first else (toggle_gate, delete_gate)):
            gate.set()
            await settle()

        assert await toggle is True
        assert await delete is True
        assert [(note.id, note.completed) for note in controller.notes] == [(1, True)]

    @pytest.mark.asyncio
    async def test_same_row_toggles_are_not_sequenced(self) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        first_gate = store.hold("update")
        second_gate = store.hold("update")

        first = asyncio.create_task(controller.toggle_completion(1, False))
        await settle()
        second = asyncio.create_task(controller.toggle_completion(1, True))
        await settle()
        second_gate.set()
        await settle()
        first_gate.set()
        await asyncio.gather(first, second)

        assert store.rows[0].completed is False
        assert controller.notes[0].completed is True


class TestViewState:
    """Verify derived state and observer notifications."""

    @pytest.mark.asyncio
    async def test_empty_add_toggle_delete_scenario(self) -> None:
        store = ScriptedStore()
        controller = await loaded_controller(store)
        assert controller.notes == ()
        assert controller.show_empty_message is True

        controller.set_draft("buy milk")
        created = await controller.submit_draft()
        assert created is not None
        assert [(n.text, n.completed) for n in controller.notes] == [("buy milk", False)]
        assert controller.show_empty_message is False

        await controller.toggle_completion(created.id, created.completed)
        assert controller.notes[0].completed is True

        await controller.remove_note(created.id)
        assert controller.notes == ()
        assert controller.show_empty_message is True

    @pytest.mark.asyncio
    async def test_view_snapshot(self) -> None:
        note = make_note(1)
        controller = await loaded_controller(ScriptedStore([note]))
        controller.set_draft("draft")

        view = controller.view()

        assert view.notes == (note,)
        assert view.draft_text == "draft"
        assert view.is_loading is False
        assert view.show_empty_message is False
        assert view.to_dict()["notes"][0]["id"] == 1

    @pytest.mark.asyncio
    async def test_observers_run_after_successful_changes_only(self) -> None:
        store = ScriptedStore([make_note(1)])
        controller = NoteListController(store)
        seen: list[tuple[int, bool]] = []

        def observer(ctrl: NoteListController) -> None:
            seen.append((len(ctrl.notes), ctrl.is_loading))

        controller.register_observer(observer)
        await controller.initialize()
        store.fail("update")
        await controller.toggle_completion(1, False)
        await controller.remove_note(1)
        controller.unregister_observer(observer)
        controller.set_draft("ignored")

        assert seen == [(1, False), (0, False)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("operation", "call"),
        [
            ("insert", lambda ctrl: ctrl.submit_draft()),
            ("update", lambda ctrl: ctrl.toggle_completion(1, False)),
            ("delete", lambda ctrl: ctrl.remove_note(1)),
        ],
    )
    async def test_failures_after_dispose_are_not_logged(self, operation, call, caplog) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        controller.set_draft("late draft")
        store.fail(operation, "late failure", after_apply=True)
        gate = store.hold(operation)

        task = asyncio.create_task(call(controller))
        await settle()
        controller.dispose()
        gate.set()

        assert await task in (None, False)
        assert "late failure" not in caplog.text
        assert [note.id for note in controller.notes] == [1]

    @pytest.mark.asyncio
    async def test_mutations_ignored_after_dispose(self) -> None:
        store = ScriptedStore([make_note(1)])
        controller = await loaded_controller(store)
        controller.dispose()

        assert await controller.remove_note(1) is False

        assert store.rows == []
        assert [note.id for note in controller.notes] == [1]


# The End
