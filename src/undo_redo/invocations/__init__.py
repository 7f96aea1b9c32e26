"""Concrete invocations: bound call, lazy expression, named method call."""

from __future__ import annotations

from .bound_call import BoundCallInvocation
from .expression import ExpressionInvocation
from .method import MethodInvocation

__all__ = [
    "BoundCallInvocation",
    "ExpressionInvocation",
    "MethodInvocation",
]
