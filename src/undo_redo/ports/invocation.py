"""IInvocation / IInvocationSource — deferred operation protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IInvocation(Protocol):
    """Protocol for a single deferred operation bound to a target.

    Every call to :meth:`invoke` re-executes the stored operation; results
    are never memoized. Transactions satisfy this protocol too, which is
    how nested transactions fold into their parent.
    """

    def invoke(self) -> None:
        """Execute the stored operation against the stored target.

        Exceptions raised by the operation propagate unchanged.
        """
        ...


@runtime_checkable
class IInvocationSource(Protocol):
    """Protocol for adapters that build invocations from a target and an
    operation description.

    The engine only consumes the produced :class:`IInvocation`; how the
    operation is described (a callable, a method name, a recorded call)
    is up to the adapter.
    """

    def create_invocation(
        self,
        target: Any,
        operation: Any,
        *args: Any,
        **kwargs: Any,
    ) -> IInvocation:
        """Return an invocation performing *operation* on *target*."""
        ...
