from __future__ import annotations

import pytest

from undo_redo import (
    UndoManager,
    get_default_undo_manager,
    register_undo,
    set_default_undo_manager,
)

pytestmark = pytest.mark.usefixtures("reset_default_manager")


def test_default_manager_is_created_once() -> None:
    first = get_default_undo_manager()

    assert isinstance(first, UndoManager)
    assert get_default_undo_manager() is first


def test_set_default_manager_replaces_instance() -> None:
    custom = UndoManager()
    set_default_undo_manager(custom)

    assert get_default_undo_manager() is custom


def test_resetting_default_builds_new_instance() -> None:
    first = get_default_undo_manager()
    set_default_undo_manager(None)

    assert get_default_undo_manager() is not first


def test_register_undo_uses_default_manager() -> None:
    values = [1, 2]

    register_undo(values, lambda v: v.pop())

    manager = get_default_undo_manager()
    assert manager.can_undo
    manager.undo()
    assert values == [1]
