"""ITransactionManager — the owner side of a transaction's commit/rollback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..transactions.transaction import Transaction


@runtime_checkable
class ITransactionManager(Protocol):
    """Protocol implemented by whatever owns open transactions.

    A :class:`~undo_redo.transactions.Transaction` never finalizes itself;
    ``commit()`` and ``rollback()`` hand the transaction back to its owner
    through this protocol.
    """

    def commit_transaction(self, transaction: Transaction) -> None:
        """Finalize *transaction* and everything nested inside it.

        Raises :class:`~undo_redo.primitives.InvalidArgumentError` for a
        missing transaction and
        :class:`~undo_redo.primitives.TransactionNotOpenError` when the
        transaction is not open under this manager.
        """
        ...

    def rollback_transaction(self, transaction: Transaction) -> None:
        """Discard *transaction*, invoking the operations it recorded.

        Same preconditions as :meth:`commit_transaction`.
        """
        ...

    def is_open_transaction(self, transaction: Transaction) -> bool:
        """Return ``True`` while *transaction* is still open under this manager."""
        ...
