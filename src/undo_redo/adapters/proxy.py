"""InvocationTarget — a proxy that records method calls instead of running them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..invocations.method import MethodInvocation
from ..primitives.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..manager import UndoManager


class InvocationTarget:
    """Stands in for *target*; every method called on it is registered
    with *manager* as a :class:`~undo_redo.invocations.MethodInvocation`
    and **not** executed::

        def set_width(self, width):
            prepare_with_invocation_target(manager, self).set_width(self.width)
            self.width = width

    Any attribute looked up on the proxy is treated as a method name.
    """

    __slots__ = ("_manager", "_target")

    def __init__(self, manager: UndoManager, target: Any) -> None:
        if manager is None:
            raise InvalidArgumentError("manager")
        if target is None:
            raise InvalidArgumentError("target")
        object.__setattr__(self, "_manager", manager)
        object.__setattr__(self, "_target", target)

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)

        manager = self._manager
        target = self._target

        def record(*args: Any, **kwargs: Any) -> None:
            manager.register_invocation(MethodInvocation(target, name, args, kwargs))

        record.__name__ = name
        return record

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} does not record attribute writes")

    def __repr__(self) -> str:
        return f"<InvocationTarget for {self._target!r}>"


def prepare_with_invocation_target(manager: UndoManager, target: Any) -> Any:
    """Return an :class:`InvocationTarget` recording calls against *target*."""
    return InvocationTarget(manager, target)
