"""undo-redo — in-process undo/redo engine with nested transactions.

Zero infrastructure dependencies. pydantic for the menu-label value object.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import (
    ExpressionInvocationSource,
    InvocationTarget,
    MethodInvocationSource,
    prepare_with_invocation_target,
)
from .defaults import get_default_undo_manager, register_undo, set_default_undo_manager

# ── Instrumentation ─────────────────────────────────────────────
from .hooks import LoggingHook
from .instrumentation import HookRegistration, HookRegistry, IInstrumentationHook

# ── Invocations ─────────────────────────────────────────────────
from .invocations import BoundCallInvocation, ExpressionInvocation, MethodInvocation
from .labels import DEFAULT_MENU_LABELS, MenuLabels

# ── Manager ─────────────────────────────────────────────────────
from .manager import UndoManager

# ── Ports ───────────────────────────────────────────────────────
from .ports import (
    IInvocation,
    IInvocationSource,
    ITransactionFactory,
    ITransactionManager,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ActionInvocationError,
    EmptyHistoryError,
    InvalidArgumentError,
    InvalidStateError,
    NoOpenTransactionError,
    TransactionNotOpenError,
    UndoRedoError,
)
from .state import UndoRedoState, switch_state

# ── Transactions ────────────────────────────────────────────────
from .transactions import Transaction, TransactionFactory

__all__ = [
    "DEFAULT_MENU_LABELS",
    "ActionInvocationError",
    "BoundCallInvocation",
    "EmptyHistoryError",
    "ExpressionInvocation",
    "ExpressionInvocationSource",
    "HookRegistration",
    "HookRegistry",
    "IInstrumentationHook",
    "IInvocation",
    "IInvocationSource",
    "ITransactionFactory",
    "ITransactionManager",
    "InvalidArgumentError",
    "InvalidStateError",
    "InvocationTarget",
    "LoggingHook",
    "MenuLabels",
    "MethodInvocation",
    "MethodInvocationSource",
    "NoOpenTransactionError",
    "Transaction",
    "TransactionFactory",
    "TransactionNotOpenError",
    "UndoManager",
    "UndoRedoError",
    "UndoRedoState",
    "get_default_undo_manager",
    "prepare_with_invocation_target",
    "register_undo",
    "set_default_undo_manager",
    "switch_state",
]
