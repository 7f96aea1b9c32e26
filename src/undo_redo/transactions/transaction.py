"""Transaction — an ordered, invocable group of recorded operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..invocations.expression import ExpressionInvocation
from ..primitives.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from ..ports.invocation import IInvocation
    from ..ports.transaction_manager import ITransactionManager

logger = logging.getLogger("undo_redo.transaction")


class Transaction:
    """Records invocations and replays them newest-first.

    A transaction is owned by exactly one
    :class:`~undo_redo.ports.ITransactionManager`; :meth:`commit` and
    :meth:`rollback` delegate to it. Used as a context manager, leaving
    the block commits the transaction if it is still open, also when the
    block raised (the exception still propagates)::

        with manager.create_transaction() as txn:
            txn.action_name = "Rename"
            manager.register(doc, lambda d: d.rename(old_name))

    A transaction is itself an invocation: :meth:`invoke` drains the
    recorded invocations in reverse registration order.
    """

    def __init__(self, owner: ITransactionManager) -> None:
        if owner is None:
            raise InvalidArgumentError("owner")

        self._owner = owner
        self._invocations: list[IInvocation] = []
        self._action_name = ""

    # ── Recording ────────────────────────────────────────────────

    def register(self, invocation: IInvocation) -> None:
        """Push *invocation* on top of the recorded operations."""
        if invocation is None:
            raise InvalidArgumentError("invocation")
        self._invocations.append(invocation)

    def register_expression(
        self, target: Any, operation: Callable[[Any], object]
    ) -> None:
        """Record ``operation(target)`` as an
        :class:`~undo_redo.invocations.ExpressionInvocation`."""
        self.register(ExpressionInvocation(target, operation))

    @property
    def action_name(self) -> str:
        return self._action_name

    @action_name.setter
    def action_name(self, value: str | None) -> None:
        self._action_name = value if value is not None else ""

    @property
    def owner(self) -> ITransactionManager:
        return self._owner

    @property
    def is_empty(self) -> bool:
        return not self._invocations

    # ── Finalization ─────────────────────────────────────────────

    def commit(self) -> None:
        """Ask the owner to commit this transaction."""
        self._owner.commit_transaction(self)

    def rollback(self) -> None:
        """Ask the owner to roll back this transaction, running its operations."""
        self._owner.rollback_transaction(self)

    # ── IInvocation ──────────────────────────────────────────────

    def invoke(self) -> None:
        """Pop and invoke every recorded invocation, newest first."""
        logger.debug(
            "Invoking transaction %r with %d operation(s)",
            self._action_name,
            len(self._invocations),
        )
        while self._invocations:
            invocation = self._invocations.pop()
            invocation.invoke()

    # ── Container protocol ───────────────────────────────────────

    def __len__(self) -> int:
        return len(self._invocations)

    def __iter__(self) -> Iterator[IInvocation]:
        """Iterate newest-first, the order :meth:`invoke` would run them."""
        return reversed(list(self._invocations))

    # ── Context manager ──────────────────────────────────────────

    def __enter__(self) -> Transaction:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Commit on every exit path unless already committed, rolled back,
        or folded into a parent by an outer commit."""
        if self._owner.is_open_transaction(self):
            self.commit()

    def __repr__(self) -> str:
        return (
            f"<Transaction action_name={self._action_name!r}"
            f" operations={len(self._invocations)}>"
        )
