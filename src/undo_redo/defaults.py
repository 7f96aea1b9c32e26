"""Process-wide default undo manager."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from .manager import UndoManager

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("undo_redo.defaults")

_default_manager: UndoManager | None = None
_default_lock = threading.Lock()


def get_default_undo_manager() -> UndoManager:
    """Return the process-wide manager, creating it on first access.

    Only the creation is guarded; the manager itself is not thread-safe
    and must be used from a single logical call stack.
    """
    global _default_manager
    if _default_manager is None:
        with _default_lock:
            if _default_manager is None:
                _default_manager = UndoManager()
                logger.debug("Created default undo manager")
    return _default_manager


def set_default_undo_manager(manager: UndoManager | None) -> None:
    """Replace the default manager; ``None`` makes the next access build a new one."""
    global _default_manager
    with _default_lock:
        _default_manager = manager


def register_undo(target: Any, operation: Callable[[Any], object]) -> None:
    """Record ``operation(target)`` with the default manager."""
    get_default_undo_manager().register(target, operation)
