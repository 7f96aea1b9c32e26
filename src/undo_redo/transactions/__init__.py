from .factory import TransactionFactory
from .transaction import Transaction

__all__ = [
    "Transaction",
    "TransactionFactory",
]
