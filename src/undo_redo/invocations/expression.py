"""ExpressionInvocation — a callable evaluated lazily against a target."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from ..primitives.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

TTarget = TypeVar("TTarget")


class ExpressionInvocation(Generic[TTarget]):
    """Evaluates ``operation(target)`` on every :meth:`invoke`.

    This is the invocation built by ``register(target, operation)``::

        manager.register(document, lambda d: d.set_title("old"))

    The target is held by reference; values the operation needs should be
    captured in the callable when it is created.
    """

    __slots__ = ("_operation", "_target")

    def __init__(self, target: TTarget, operation: Callable[[TTarget], object]) -> None:
        if target is None:
            raise InvalidArgumentError("target")
        if operation is None:
            raise InvalidArgumentError("operation")
        if not callable(operation):
            raise InvalidArgumentError("operation", "must be callable")

        self._target = target
        self._operation = operation

    @property
    def target(self) -> TTarget:
        return self._target

    def invoke(self) -> None:
        self._operation(self._target)

    def __repr__(self) -> str:
        return f"<ExpressionInvocation target={self._target!r}>"
