"""Undo manager states and the exception-safe state switch."""

from __future__ import annotations

import contextlib
import logging
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("undo_redo.state")


class UndoRedoState(str, Enum):
    """What the undo manager is doing right now.

    Every state other than ``IDLE`` is transient and only visible from
    code running inside the manager (e.g. an operation being replayed).
    """

    IDLE = "idle"
    UNDOING = "undoing"
    REDOING = "redoing"
    COMMITTING = "committing"
    ROLLING_BACK = "rolling_back"


@runtime_checkable
class IStateHost(Protocol):
    """Anything whose :class:`UndoRedoState` can be switched.

    ``state`` is read-only to callers; only :func:`switch_state` changes
    it, through ``_set_state``.
    """

    @property
    def state(self) -> UndoRedoState: ...

    def _set_state(self, value: UndoRedoState) -> None: ...


@contextlib.contextmanager
def switch_state(host: IStateHost, state: UndoRedoState) -> Iterator[UndoRedoState]:
    """Set *host* to *state* for the duration of the block.

    The previous state is restored on every exit path, so nested switches
    (committing while undoing) unwind correctly under exceptions. Yields
    the previous state.
    """
    backup = host.state
    host._set_state(state)
    logger.debug("State %s -> %s", backup.value, state.value)
    try:
        yield backup
    finally:
        host._set_state(backup)
        logger.debug("State %s -> %s", state.value, backup.value)
