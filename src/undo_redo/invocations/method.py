"""MethodInvocation — a method call recorded by name."""

from __future__ import annotations

from typing import Any

from ..primitives.exceptions import InvalidArgumentError


class MethodInvocation:
    """Calls ``getattr(target, method_name)(*args, **kwargs)`` when invoked.

    The method is resolved at invoke time, so a method replaced on the
    target after registration is the one that runs. Produced by
    :class:`~undo_redo.adapters.InvocationTarget` and
    :class:`~undo_redo.adapters.MethodInvocationSource`.
    """

    __slots__ = ("_args", "_kwargs", "_method_name", "_target")

    def __init__(
        self,
        target: Any,
        method_name: str,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> None:
        if target is None:
            raise InvalidArgumentError("target")
        if method_name is None:
            raise InvalidArgumentError("method_name")
        if not isinstance(method_name, str) or not method_name:
            raise InvalidArgumentError("method_name", "must be a non-empty string")
        if args is None:
            raise InvalidArgumentError("args")

        self._target = target
        self._method_name = method_name
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})

    @property
    def target(self) -> Any:
        return self._target

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    @property
    def kwargs(self) -> dict[str, Any]:
        return dict(self._kwargs)

    def invoke(self) -> None:
        method = getattr(self._target, self._method_name)
        method(*self._args, **self._kwargs)

    def __repr__(self) -> str:
        return (
            f"<MethodInvocation {type(self._target).__name__}.{self._method_name}"
            f" args={self._args!r} kwargs={self._kwargs!r}>"
        )
