"""Reporter protocol: contract for all stack reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from callstack.domain.location import Stack


class ReporterProtocol(Protocol):
    """Protocol for call stack reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, stack: Stack) -> str:
        """Format call stack as string.

        Args:
            stack: Captured call stack.

        Returns:
            Formatted string representation.
        """
        ...
