"""Invocation sources — build invocations from a target and an operation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..invocations.expression import ExpressionInvocation
from ..invocations.method import MethodInvocation
from ..primitives.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable


class ExpressionInvocationSource:
    """Treats *operation* as a callable taking the target.

    Extra positional and keyword arguments are bound after the target::

        source.create_invocation(doc, Document.resize, 10, height=20)
        # invokes Document.resize(doc, 10, height=20)
    """

    def create_invocation(
        self,
        target: Any,
        operation: Callable[..., object],
        *args: Any,
        **kwargs: Any,
    ) -> ExpressionInvocation[Any]:
        if operation is None:
            raise InvalidArgumentError("operation")
        if not callable(operation):
            raise InvalidArgumentError("operation", "must be callable")
        if not args and not kwargs:
            return ExpressionInvocation(target, operation)

        def bound(obj: Any) -> object:
            return operation(obj, *args, **kwargs)

        return ExpressionInvocation(target, bound)


class MethodInvocationSource:
    """Treats *operation* as the name of a method on the target."""

    def create_invocation(
        self,
        target: Any,
        operation: str,
        *args: Any,
        **kwargs: Any,
    ) -> MethodInvocation:
        return MethodInvocation(target, operation, args, kwargs)
