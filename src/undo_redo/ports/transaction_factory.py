"""ITransactionFactory — pluggable transaction construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..transactions.transaction import Transaction
    from .transaction_manager import ITransactionManager


@runtime_checkable
class ITransactionFactory(Protocol):
    """Creates transactions owned by a given manager.

    The undo manager builds every transaction through a factory so tests
    can substitute recording stubs.
    """

    def create_transaction(self, owner: ITransactionManager) -> Transaction:
        """Return a new, empty transaction owned by *owner*."""
        ...
