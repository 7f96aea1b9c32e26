"""BoundCallInvocation — a one-argument callable with its argument."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from ..primitives.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

TArgument = TypeVar("TArgument")


class BoundCallInvocation(Generic[TArgument]):
    """Calls ``operation(argument)`` each time it is invoked.

    The argument is captured at construction; ``None`` is rejected so a
    missing value is reported where it was registered, not during undo.
    """

    __slots__ = ("_argument", "_operation")

    def __init__(
        self,
        operation: Callable[[TArgument], object],
        argument: TArgument,
    ) -> None:
        if operation is None:
            raise InvalidArgumentError("operation")
        if not callable(operation):
            raise InvalidArgumentError("operation", "must be callable")
        if argument is None:
            raise InvalidArgumentError("argument")

        self._operation = operation
        self._argument = argument

    @property
    def operation(self) -> Callable[[TArgument], object]:
        return self._operation

    @property
    def argument(self) -> TArgument:
        return self._argument

    def invoke(self) -> None:
        self._operation(self._argument)

    def __repr__(self) -> str:
        name = getattr(self._operation, "__qualname__", repr(self._operation))
        return f"<BoundCallInvocation {name}({self._argument!r})>"
