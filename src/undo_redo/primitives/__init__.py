"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ActionInvocationError,
    EmptyHistoryError,
    InvalidArgumentError,
    InvalidStateError,
    NoOpenTransactionError,
    TransactionNotOpenError,
    UndoRedoError,
)

__all__ = [
    "ActionInvocationError",
    "EmptyHistoryError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NoOpenTransactionError",
    "TransactionNotOpenError",
    "UndoRedoError",
]
