"""Exceptions raised by the undo/redo engine."""

from __future__ import annotations


class UndoRedoError(Exception):
    """Root exception for the entire undo-redo package."""


class InvalidArgumentError(UndoRedoError, ValueError):
    """Raised when a required argument is missing or unusable.

    Usage: Invocations, transactions and the manager raise this
    synchronously when a target, operation, invocation or collaborator
    is ``None``.
    """

    def __init__(self, argument: str, reason: str | None = None) -> None:
        self.argument = argument
        self.reason = reason
        msg = f"Argument {argument!r} must not be None"
        if reason:
            msg = f"Argument {argument!r} is invalid - {reason}"
        super().__init__(msg)


class InvalidStateError(UndoRedoError, RuntimeError):
    """Base class for operations requested while the manager cannot serve them.

    The manager state is left unchanged when one of these is raised."""


class NoOpenTransactionError(InvalidStateError):
    """Raised when committing or rolling back with no open transaction."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"There is no open transaction available to {operation}."
        )


class TransactionNotOpenError(InvalidStateError):
    """Raised when a transaction is finalized that the manager does not hold open.

    Usage: A second explicit ``commit()`` on the same transaction, or a
    transaction created by a different manager.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Can not find the transaction to {operation}.")


class EmptyHistoryError(InvalidStateError):
    """Raised by ``undo()`` / ``redo()`` when there is nothing to replay."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No {kind} operations recorded.")


class ActionInvocationError(UndoRedoError):
    """Wraps an error raised by a registered operation during undo or redo.

    The original exception is available as ``original`` and ``__cause__``.
    Operations that already ran before the failure are not reverted.
    """

    def __init__(self, original: BaseException, action_name: str = "") -> None:
        self.original = original
        self.action_name = action_name
        msg = "An error occurred while performing the registered operation"
        if action_name:
            msg += f" of {action_name!r}"
        super().__init__(f"{msg}: {original}")
