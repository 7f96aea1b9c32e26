"""UndoManager — records invocations into transactions and replays them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .instrumentation import (
    OPERATION_COMMIT,
    OPERATION_REDO,
    OPERATION_ROLLBACK,
    OPERATION_UNDO,
    HookRegistry,
)
from .invocations.bound_call import BoundCallInvocation
from .invocations.expression import ExpressionInvocation
from .labels import DEFAULT_MENU_LABELS, MenuLabels
from .ports.invocation import IInvocation
from .ports.transaction_factory import ITransactionFactory
from .primitives.exceptions import (
    ActionInvocationError,
    EmptyHistoryError,
    InvalidArgumentError,
    NoOpenTransactionError,
    TransactionNotOpenError,
)
from .state import UndoRedoState, switch_state
from .transactions.factory import TransactionFactory

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports.invocation import IInvocationSource
    from .transactions.transaction import Transaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UndoManager:
    """Records undo operations and provides undo and redo.

    Operations are registered as invocations that *reverse* a change the
    caller just made. Every registered invocation lands in exactly one
    transaction: the innermost open one, or a one-shot transaction that
    is committed immediately when none is open.

    Undo replays the newest undo-history entry. The replayed operations
    are expected to register their own inverses; those are recorded in a
    fresh transaction that is filed into the redo history (and vice
    versa for redo)::

        manager = UndoManager()

        def set_title(doc, title):
            old = doc.title
            doc.title = title
            manager.register(doc, lambda d: set_title(d, old))

        set_title(doc, "new")
        manager.undo()   # doc.title == old, can_redo is True
        manager.redo()   # doc.title == "new"

    Parameters
    ----------
    transaction_factory:
        Optional :class:`~undo_redo.ports.ITransactionFactory`. Defaults to
        :class:`~undo_redo.transactions.TransactionFactory`.
    labels:
        Optional :class:`~undo_redo.labels.MenuLabels` used for the menu
        item titles.
    hooks:
        Optional :class:`~undo_redo.instrumentation.HookRegistry` wrapping
        undo, redo, commit and rollback.

    Not thread-safe: use one manager per logical call stack.
    """

    def __init__(
        self,
        transaction_factory: ITransactionFactory | None = None,
        *,
        labels: MenuLabels | None = None,
        hooks: HookRegistry | None = None,
    ) -> None:
        factory = (
            transaction_factory
            if transaction_factory is not None
            else TransactionFactory()
        )
        if not isinstance(factory, ITransactionFactory):
            raise InvalidArgumentError(
                "transaction_factory", "must provide create_transaction()"
            )

        self._transaction_factory = factory
        self._labels = labels if labels is not None else DEFAULT_MENU_LABELS
        self._hooks = hooks if hooks is not None else HookRegistry()

        # Stacks: the end of each list is the most recent entry.
        self._undo_history: list[Transaction] = []
        self._redo_history: list[Transaction] = []
        self._open_transactions: list[Transaction] = []

        self._state = UndoRedoState.IDLE
        self._action_name = ""

    # ── State ────────────────────────────────────────────────────

    @property
    def state(self) -> UndoRedoState:
        """``IDLE`` whenever a public call has returned."""
        return self._state

    def _set_state(self, value: UndoRedoState) -> None:
        # Only switch_state() calls this.
        self._state = value

    @property
    def is_undoing(self) -> bool:
        return self._state is UndoRedoState.UNDOING

    @property
    def is_redoing(self) -> bool:
        return self._state is UndoRedoState.REDOING

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_history) or bool(self._open_transactions)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_history)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_history)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_history)

    @property
    def open_transaction_count(self) -> int:
        return len(self._open_transactions)

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def labels(self) -> MenuLabels:
        return self._labels

    # ── Registration ─────────────────────────────────────────────

    def register_invocation(self, invocation: IInvocation) -> None:
        """Record *invocation* in the innermost open transaction.

        With no open transaction a one-shot transaction is created,
        filled and committed right away. Ignored while rolling back, so
        operations replayed by a rollback are not recorded again.
        """
        if invocation is None:
            raise InvalidArgumentError("invocation")
        if not isinstance(invocation, IInvocation):
            raise InvalidArgumentError("invocation", "must provide invoke()")

        if self._state is UndoRedoState.ROLLING_BACK:
            logger.debug("Ignoring %r registered during rollback", invocation)
            return

        recording = self._recording_transaction()
        if recording is not None:
            recording.register(invocation)
            logger.debug("Registered %r in %r", invocation, recording)
            return

        with self._open_transaction(self._action_name) as transaction:
            transaction.register(invocation)
            logger.debug("Registered %r in one-shot transaction", invocation)

    register_invokation = register_invocation

    def register(self, target: T, operation: Callable[[T], object]) -> None:
        """Record ``operation(target)`` as the undo of a change to *target*."""
        self.register_invocation(ExpressionInvocation(target, operation))

    def register_call(self, operation: Callable[[T], object], argument: T) -> None:
        """Record ``operation(argument)``."""
        self.register_invocation(BoundCallInvocation(operation, argument))

    def register_from(
        self,
        source: IInvocationSource,
        target: Any,
        operation: Any,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Record the invocation *source* builds for *target* and *operation*."""
        if source is None:
            raise InvalidArgumentError("source")
        self.register_invocation(
            source.create_invocation(target, operation, *args, **kwargs)
        )

    # ── Transactions ─────────────────────────────────────────────

    def create_transaction(self) -> Transaction:
        """Open a (possibly nested) transaction named with the current action name.

        Use it as a context manager; leaving the block commits it.
        """
        return self._open_transaction(self._action_name)

    def commit_transactions(self) -> None:
        """Commit the outermost open transaction and everything nested in it."""
        if not self._open_transactions:
            raise NoOpenTransactionError("commit")
        self._open_transactions[0].commit()

    def rollback_transactions(self) -> None:
        """Roll back every open transaction, running their recorded operations."""
        if not self._open_transactions:
            raise NoOpenTransactionError("roll back")
        self._open_transactions[0].rollback()

    # ── ITransactionManager ──────────────────────────────────────

    def is_open_transaction(self, transaction: Transaction) -> bool:
        return any(t is transaction for t in self._open_transactions)

    def commit_transaction(self, transaction: Transaction) -> None:
        """Pop the open stack down to *transaction*.

        Empty transactions are discarded. A non-empty one is folded into
        the transaction below it, or filed into history once the stack
        is empty: the redo history while undoing, else the undo history.
        """
        self._check_open(transaction, "commit")
        self._hooks.execute_all(
            OPERATION_COMMIT,
            self._attributes(transaction.action_name),
            lambda: self._commit(transaction),
        )

    def rollback_transaction(self, transaction: Transaction) -> None:
        """Pop the open stack down to *transaction*, invoking every popped
        transaction instead of recording it."""
        self._check_open(transaction, "roll back")
        self._hooks.execute_all(
            OPERATION_ROLLBACK,
            self._attributes(transaction.action_name),
            lambda: self._rollback(transaction),
        )

    # ── Undo / Redo ──────────────────────────────────────────────

    def undo(self) -> None:
        """Replay the most recent undo-history entry.

        Open transactions are committed first. Raises
        :class:`~undo_redo.primitives.EmptyHistoryError` with nothing to
        undo and :class:`~undo_redo.primitives.ActionInvocationError` when
        a recorded operation fails.
        """
        if self._open_transactions:
            self.commit_transactions()
        if not self._undo_history:
            raise EmptyHistoryError("undo")

        self._hooks.execute_all(
            OPERATION_UNDO,
            self._attributes(self.undo_action_name),
            lambda: self._replay(self._undo_history, UndoRedoState.UNDOING),
        )

    def redo(self) -> None:
        """Replay the most recent redo-history entry; see :meth:`undo`."""
        if self._open_transactions:
            self.commit_transactions()
        if not self._redo_history:
            raise EmptyHistoryError("redo")

        self._hooks.execute_all(
            OPERATION_REDO,
            self._attributes(self.redo_action_name),
            lambda: self._replay(self._redo_history, UndoRedoState.REDOING),
        )

    # ── Action names ─────────────────────────────────────────────

    @property
    def action_name(self) -> str:
        """Name given to the next transaction created."""
        return self._action_name

    @action_name.setter
    def action_name(self, value: str | None) -> None:
        self.set_action_name(value)

    def set_action_name(self, action_name: str | None) -> None:
        """Set the name for the next transaction and relabel the innermost
        open one, so it can be called before or right after the action."""
        self._action_name = action_name if action_name is not None else ""
        recording = self._recording_transaction()
        if recording is not None:
            recording.action_name = self._action_name

    @property
    def undo_action_name(self) -> str:
        return self._undo_history[-1].action_name if self._undo_history else ""

    @property
    def redo_action_name(self) -> str:
        return self._redo_history[-1].action_name if self._redo_history else ""

    @property
    def undo_menu_item_title(self) -> str:
        return self._labels.undo_title(self.undo_action_name)

    @property
    def redo_menu_item_title(self) -> str:
        return self._labels.redo_title(self.redo_action_name)

    @staticmethod
    def undo_menu_title_for(
        action_name: str | None, labels: MenuLabels = DEFAULT_MENU_LABELS
    ) -> str:
        """``Undo "<name>"``, or ``Undo`` for an empty name."""
        return labels.undo_title(action_name)

    @staticmethod
    def redo_menu_title_for(
        action_name: str | None, labels: MenuLabels = DEFAULT_MENU_LABELS
    ) -> str:
        """``Redo "<name>"``, or ``Redo`` for an empty name."""
        return labels.redo_title(action_name)

    # ── Internals ────────────────────────────────────────────────

    def _open_transaction(self, action_name: str) -> Transaction:
        transaction = self._transaction_factory.create_transaction(self)
        transaction.action_name = action_name
        self._open_transactions.append(transaction)
        logger.debug(
            "Opened transaction %r (depth=%d)",
            transaction.action_name,
            len(self._open_transactions),
        )
        return transaction

    def _recording_transaction(self) -> Transaction | None:
        return self._open_transactions[-1] if self._open_transactions else None

    def _check_open(self, transaction: Transaction, operation: str) -> None:
        if transaction is None:
            raise InvalidArgumentError("transaction")
        if not self.is_open_transaction(transaction):
            raise TransactionNotOpenError(operation)

    def _commit(self, transaction: Transaction) -> None:
        # Undoing/redoing must survive the commit of the recording transaction.
        state = (
            UndoRedoState.COMMITTING
            if self._state is UndoRedoState.IDLE
            else self._state
        )
        with switch_state(self, state):
            while self.is_open_transaction(transaction):
                popped = self._open_transactions.pop()
                if len(popped) == 0:
                    logger.debug("Discarded empty transaction %r", popped.action_name)
                    continue
                if self._open_transactions:
                    self._open_transactions[-1].register(popped)
                    logger.debug(
                        "Folded transaction %r into %r",
                        popped.action_name,
                        self._open_transactions[-1].action_name,
                    )
                    continue
                history = (
                    self._redo_history if self.is_undoing else self._undo_history
                )
                history.append(popped)
                logger.debug(
                    "Filed transaction %r into %s history",
                    popped.action_name,
                    "redo" if history is self._redo_history else "undo",
                )

    def _rollback(self, transaction: Transaction) -> None:
        with switch_state(self, UndoRedoState.ROLLING_BACK):
            while self.is_open_transaction(transaction):
                popped = self._open_transactions.pop()
                logger.debug("Rolling back transaction %r", popped.action_name)
                popped.invoke()

    def _replay(self, history: list[Transaction], state: UndoRedoState) -> None:
        with switch_state(self, state):
            entry = history.pop()
            # Collects the inverses the replayed operations register.
            with self._open_transaction(entry.action_name):
                try:
                    entry.invoke()
                except Exception as exc:
                    raise ActionInvocationError(exc, entry.action_name) from exc

    def _attributes(self, action_name: str) -> dict[str, Any]:
        return {
            "action_name": action_name,
            "state": self._state.value,
            "undo_depth": len(self._undo_history),
            "redo_depth": len(self._redo_history),
            "open_transactions": len(self._open_transactions),
        }

    def __repr__(self) -> str:
        return (
            f"<UndoManager state={self._state.value} undo={len(self._undo_history)}"
            f" redo={len(self._redo_history)} open={len(self._open_transactions)}>"
        )
