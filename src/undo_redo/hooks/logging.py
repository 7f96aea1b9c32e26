"""LoggingHook — logs undo manager operations."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

_log = logging.getLogger("undo_redo.hooks")


class LoggingHook:
    """Logs operation name, action name and duration."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log

    def __call__(
        self,
        operation: str,
        attributes: dict[str, Any],
        next_handler: Callable[[], Any],
    ) -> Any:
        action_name = attributes.get("action_name", "")
        self._log.info(
            "Starting %s (action_name=%r, undo_depth=%s, redo_depth=%s)",
            operation,
            action_name,
            attributes.get("undo_depth"),
            attributes.get("redo_depth"),
        )
        start = time.perf_counter()
        try:
            result = next_handler()
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            self._log.exception("%s failed after %.2fms", operation, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        self._log.info("%s completed in %.2fms", operation, elapsed)
        return result
