"""Invocation-source adapters; the core never imports these."""

from __future__ import annotations

from .proxy import InvocationTarget, prepare_with_invocation_target
from .sources import ExpressionInvocationSource, MethodInvocationSource

__all__ = [
    "ExpressionInvocationSource",
    "InvocationTarget",
    "MethodInvocationSource",
    "prepare_with_invocation_target",
]
