"""Instrumentation hooks — wrap undo/redo/commit/rollback with filtering."""

from __future__ import annotations

import fnmatch
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("undo_redo.instrumentation")

#: Operation names the undo manager reports to hooks.
OPERATION_UNDO = "undo"
OPERATION_REDO = "redo"
OPERATION_COMMIT = "transaction.commit"
OPERATION_ROLLBACK = "transaction.rollback"


@runtime_checkable
class IInstrumentationHook(Protocol):
    """Protocol for instrumentation hooks (logging, metrics, etc.)."""

    def __call__(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        """Wrap an operation; must call ``next_handler()`` to proceed."""
        ...


class HookRegistration:
    """A registered hook with filtering and priority."""

    def __init__(
        self,
        hook: IInstrumentationHook,
        *,
        priority: int = 0,
        predicate: Callable[[str, dict[str, Any]], bool] | None = None,
        operations: list[str] | None = None,
        enabled: bool = True,
    ) -> None:
        self.hook = hook
        self.priority = priority
        self.predicate = predicate
        self.operations = operations or []
        self.enabled = enabled

    def matches(self, operation: str, attributes: dict[str, Any]) -> bool:
        """Check if this registration applies to the operation."""
        if not self.enabled:
            return False

        if self.predicate is not None and not self.predicate(operation, attributes):
            return False

        return self._matches_operation(operation)

    def _matches_operation(self, operation: str) -> bool:
        if not self.operations:
            return True
        return any(fnmatch.fnmatch(operation, pattern) for pattern in self.operations)


class HookRegistry:
    """Registry for multiple instrumentation hooks with filtering.

    Hooks run as a chain in ascending ``priority`` order: the lowest
    priority is the outermost wrapper.
    """

    def __init__(self) -> None:
        self._registrations: list[HookRegistration] = []

    def register(
        self,
        hook: IInstrumentationHook,
        *,
        priority: int = 0,
        predicate: Callable[[str, dict[str, Any]], bool] | None = None,
        operations: list[str] | None = None,
        enabled: bool = True,
    ) -> HookRegistration:
        """Register a hook with optional filtering."""
        registration = HookRegistration(
            hook=hook,
            priority=priority,
            predicate=predicate,
            operations=operations,
            enabled=enabled,
        )
        self._registrations.append(registration)
        self._registrations.sort(key=lambda r: r.priority)
        logger.debug(
            "Registered hook %s (priority=%d)", type(hook).__name__, priority
        )
        return registration

    def unregister(self, registration: HookRegistration) -> None:
        """Remove a registration returned by :meth:`register`."""
        self._registrations.remove(registration)

    @property
    def registrations(self) -> list[HookRegistration]:
        return list(self._registrations)

    def execute_all(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        """Execute all matching hooks in priority order around *next_handler*."""
        matching = [r for r in self._registrations if r.matches(operation, attributes)]
        if not matching:
            return next_handler()

        def pipeline(index: int = 0) -> Any:
            if index >= len(matching):
                return next_handler()
            registration = matching[index]
            return registration.hook(
                operation,
                attributes,
                lambda: pipeline(index + 1),
            )

        return pipeline()

    def clear(self) -> None:
        """Remove all registrations."""
        self._registrations.clear()
