"""TransactionFactory — default transaction construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .transaction import Transaction

if TYPE_CHECKING:
    from ..ports.transaction_manager import ITransactionManager


class TransactionFactory:
    """Builds plain :class:`Transaction` instances."""

    def create_transaction(self, owner: ITransactionManager) -> Transaction:
        return Transaction(owner)
