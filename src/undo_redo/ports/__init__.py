from .invocation import IInvocation, IInvocationSource
from .transaction_factory import ITransactionFactory
from .transaction_manager import ITransactionManager

__all__ = [
    "IInvocation",
    "IInvocationSource",
    "ITransactionFactory",
    "ITransactionManager",
]
