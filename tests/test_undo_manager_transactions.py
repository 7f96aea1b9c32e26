from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from undo_redo import (
    InvalidArgumentError,
    Transaction,
    TransactionNotOpenError,
    UndoManager,
    UndoRedoState,
)


class RecordingTransaction(Transaction):
    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.registered = False
        self.committed = False

    def register(self, invocation: Any) -> None:
        self.registered = True
        super().register(invocation)

    def commit(self) -> None:
        self.committed = True
        super().commit()


class RecordingTransactionFactory:
    def __init__(self) -> None:
        self.created: list[RecordingTransaction] = []

    def create_transaction(self, owner: Any) -> RecordingTransaction:
        transaction = RecordingTransaction(owner)
        self.created.append(transaction)
        return transaction


@pytest.fixture
def factory() -> RecordingTransactionFactory:
    return RecordingTransactionFactory()


def test_register_without_transaction_uses_private_transaction(
    factory: RecordingTransactionFactory,
) -> None:
    manager = UndoManager(factory)

    manager.register_invocation(MagicMock())

    (transaction,) = factory.created
    assert transaction.registered
    assert transaction.committed
    assert manager.can_undo
    assert not manager.can_redo


def test_register_with_transaction_uses_public_transaction(
    factory: RecordingTransactionFactory,
) -> None:
    manager = UndoManager(factory)

    with manager.create_transaction():
        manager.register_invocation(MagicMock())

    (transaction,) = factory.created
    assert transaction.registered
    assert transaction.committed
    assert manager.can_undo
    assert not manager.can_redo


def test_open_transaction_counts_as_undoable(manager: UndoManager) -> None:
    manager.create_transaction()

    assert manager.can_undo
    assert manager.open_transaction_count == 1


def test_nested_transaction_folds_into_parent(
    manager: UndoManager, calls: list[Any]
) -> None:
    parent = manager.create_transaction()
    with manager.create_transaction() as child:
        manager.register_call(calls.append, "child")

    assert len(parent) == 1
    assert list(parent) == [child]
    assert manager.undo_depth == 0

    parent.commit()

    assert manager.can_undo
    assert manager.undo_depth == 1
    assert manager.open_transaction_count == 0


def test_nested_transactions_undo_as_one_unit(
    manager: UndoManager, calls: list[Any]
) -> None:
    with manager.create_transaction():
        manager.register_call(calls.append, "outer-1")
        with manager.create_transaction():
            manager.register_call(calls.append, "inner")
        manager.register_call(calls.append, "outer-2")

    assert manager.undo_depth == 1
    manager.undo()

    assert calls == ["outer-2", "inner", "outer-1"]


def test_empty_nested_transactions_are_discarded(
    manager: UndoManager, calls: list[Any]
) -> None:
    with manager.create_transaction() as parent:
        manager.register_call(calls.append, "parent")
        with manager.create_transaction():
            pass
        assert len(parent) == 1

    assert manager.undo_depth == 1


def test_empty_transaction_is_not_filed(manager: UndoManager) -> None:
    with manager.create_transaction():
        with manager.create_transaction():
            pass

    assert not manager.can_undo
    assert manager.undo_depth == 0


def test_commit_transactions_collapses_all_nesting(
    manager: UndoManager, calls: list[Any]
) -> None:
    manager.create_transaction()
    manager.register_call(calls.append, "outer")
    manager.create_transaction()
    manager.register_call(calls.append, "inner")

    manager.commit_transactions()

    assert manager.open_transaction_count == 0
    assert manager.undo_depth == 1
    manager.undo()
    assert calls == ["inner", "outer"]


def test_scope_exit_after_outer_commit_is_noop(
    manager: UndoManager, calls: list[Any]
) -> None:
    with manager.create_transaction():
        with manager.create_transaction():
            manager.register_call(calls.append, "inner")
            manager.commit_transactions()

    assert manager.undo_depth == 1
    assert manager.open_transaction_count == 0


def test_scope_exit_after_explicit_commit_is_noop(
    manager: UndoManager, calls: list[Any]
) -> None:
    with manager.create_transaction() as transaction:
        manager.register_call(calls.append, "x")
        transaction.commit()

    assert manager.undo_depth == 1


def test_second_explicit_commit_raises(manager: UndoManager, calls: list[Any]) -> None:
    transaction = manager.create_transaction()
    manager.register_call(calls.append, "x")
    transaction.commit()

    with pytest.raises(TransactionNotOpenError, match="commit"):
        transaction.commit()

    assert manager.undo_depth == 1


def test_scope_exit_commits_when_block_raises(
    manager: UndoManager, calls: list[Any]
) -> None:
    with pytest.raises(RuntimeError, match="boom"), manager.create_transaction():
        manager.register_call(calls.append, "x")
        raise RuntimeError("boom")

    assert manager.undo_depth == 1
    assert calls == []


def test_committing_foreign_transaction_raises(manager: UndoManager) -> None:
    other = UndoManager()
    transaction = other.create_transaction()

    with pytest.raises(TransactionNotOpenError):
        manager.commit_transaction(transaction)
    with pytest.raises(TransactionNotOpenError, match="roll back"):
        manager.rollback_transaction(transaction)

    assert other.is_open_transaction(transaction)


def test_commit_transaction_rejects_none(manager: UndoManager) -> None:
    with pytest.raises(InvalidArgumentError, match="transaction"):
        manager.commit_transaction(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="transaction"):
        manager.rollback_transaction(None)  # type: ignore[arg-type]


def test_rollback_runs_operations_without_recording_them(
    manager: UndoManager,
) -> None:
    ran: list[str] = []

    def inverse(target: str) -> None:
        ran.append(target)
        manager.register(target, inverse)

    manager.create_transaction()
    manager.register("doc", inverse)

    manager.rollback_transactions()

    assert ran == ["doc"]
    assert not manager.can_undo
    assert not manager.can_redo
    assert manager.state is UndoRedoState.IDLE


def test_rollback_restores_document(manager: UndoManager, document: Any) -> None:
    document.set_title("kept")
    with manager.create_transaction() as transaction:
        document.set_title("draft-1")
        document.set_title("draft-2")
        transaction.rollback()

    assert document.title == "kept"
    assert manager.undo_depth == 1
    assert manager.undo_action_name == ""


def test_rollback_transactions_unwinds_innermost_first(
    manager: UndoManager, calls: list[Any]
) -> None:
    manager.create_transaction()
    manager.register_call(calls.append, "outer")
    manager.create_transaction()
    manager.register_call(calls.append, "inner")

    manager.rollback_transactions()

    assert calls == ["inner", "outer"]
    assert manager.open_transaction_count == 0


def test_rollback_of_inner_transaction_keeps_outer_open(
    manager: UndoManager, calls: list[Any]
) -> None:
    outer = manager.create_transaction()
    manager.register_call(calls.append, "outer")
    inner = manager.create_transaction()
    manager.register_call(calls.append, "inner")

    inner.rollback()

    assert calls == ["inner"]
    assert manager.is_open_transaction(outer)
    assert not manager.is_open_transaction(inner)
    outer.commit()
    assert manager.undo_depth == 1


def test_rollback_errors_propagate_unwrapped(manager: UndoManager) -> None:
    def fail(_target: Any) -> None:
        raise ValueError("rollback failed")

    manager.create_transaction()
    manager.register("target", fail)

    with pytest.raises(ValueError, match="rollback failed"):
        manager.rollback_transactions()

    assert manager.state is UndoRedoState.IDLE


def test_state_during_rollback_is_rolling_back(manager: UndoManager) -> None:
    observed: list[UndoRedoState] = []
    manager.create_transaction()
    manager.register(manager, lambda m: observed.append(m.state))

    manager.rollback_transactions()

    assert observed == [UndoRedoState.ROLLING_BACK]


def test_nested_transaction_inside_undo_lands_in_redo_history(
    manager: UndoManager,
) -> None:
    replays: list[str] = []

    def grouped_inverse(target: str) -> None:
        replays.append(target)
        with manager.create_transaction():
            manager.register(target, grouped_inverse)

    manager.register("doc", grouped_inverse)

    manager.undo()
    assert manager.redo_depth == 1
    assert manager.undo_depth == 0

    manager.redo()
    assert manager.undo_depth == 1
    assert manager.redo_depth == 0
    assert replays == ["doc", "doc"]
