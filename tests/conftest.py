"""Shared fixtures for undo-redo tests."""

from __future__ import annotations

from typing import Any

import pytest

from undo_redo import UndoManager, set_default_undo_manager


class Document:
    """Minimal undoable model: every change registers its own inverse."""

    def __init__(self, manager: UndoManager, title: str = "") -> None:
        self.manager = manager
        self.title = title
        self.history: list[str] = []

    def set_title(self, title: str) -> None:
        old = self.title
        self.title = title
        self.history.append(title)
        self.manager.register(self, lambda d: d.set_title(old))


@pytest.fixture
def manager() -> UndoManager:
    """A fresh, private undo manager."""
    return UndoManager()


@pytest.fixture
def document(manager: UndoManager) -> Document:
    return Document(manager)


@pytest.fixture
def calls() -> list[Any]:
    """Collects arguments of recorded operations in invocation order."""
    return []


@pytest.fixture
def reset_default_manager() -> Any:
    set_default_undo_manager(None)
    yield
    set_default_undo_manager(None)
