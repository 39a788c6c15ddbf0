"""Plain text reporter.

Stdlib-only reporter: one numbered line per frame.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from callstack.domain.location import Stack

UNRESOLVED_MARK = "<unresolved>"


class PlainTextReporter:
    """Plain text reporter.

    Frame 0 first, same order as the stack. Unresolved frames
    are kept in place so indices match Stack indices.
    """

    def __init__(self, *, indent: str = "  ") -> None:
        """Initialize reporter.

        Args:
            indent: Prefix for each frame line.
        """
        self._indent = indent

    def report(self, stack: Stack) -> str:
        """Format stack as numbered lines."""
        lines = [f"Call stack ({len(stack)} frames):"]
        for index, loc in enumerate(stack):
            text = str(loc) if loc.is_resolved else UNRESOLVED_MARK
            lines.append(f"{self._indent}#{index} {text}")
        return "\n".join(lines)
