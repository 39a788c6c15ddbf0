"""JSON reporter: Stack → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from callstack.domain.location import Stack


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema matches Location fields 1:1 with summary added.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, stack: Stack) -> str:
        """Format stack as JSON string.

        Returns:
            JSON string with frames and summary.
        """
        data = {
            "frames": [loc.to_dict() for loc in stack],
            "summary": _build_summary(stack),
        }
        return json.dumps(data, indent=self._indent)


def _build_summary(stack: Stack) -> dict[str, object]:
    """Build summary section."""
    resolved = sum(1 for loc in stack if loc.is_resolved)
    return {
        "depth": len(stack),
        "resolved": resolved,
        "unresolved": len(stack) - resolved,
    }
