"""Console reporter: Stack → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from callstack.domain.exceptions import InvalidConfigError

if TYPE_CHECKING:
    from callstack.domain.location import Location, Stack


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        title: Heading rendered above the table.
        show_unresolved: Include UNRESOLVED frames as dimmed rows.
        width: Console width in columns.
        max_frames: Max frames to display. None = unlimited.
    """

    title: str = "CALL STACK"
    show_unresolved: bool = True
    width: int = 120
    max_frames: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise InvalidConfigError(field="width", reason=f"must be >= 20, got {self.width}")
        if self.max_frames is not None and self.max_frames < 1:
            raise InvalidConfigError(
                field="max_frames", reason=f"must be >= 1 or None, got {self.max_frames}"
            )


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, stack: Stack) -> str:
        """Format stack as rich formatted string.

        Args:
            stack: Call stack to format.

        Returns:
            Formatted string with colors and a frame table.
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False
        )

        rows = self._select_rows(stack)
        resolved = sum(1 for _, loc in rows if loc.is_resolved)

        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print(f"[bold]Frames:[/bold] {len(rows)} (resolved: {resolved})")
        console.print(self._build_table(rows))

        return output.getvalue()

    def _select_rows(self, stack: Stack) -> list[tuple[int, Location]]:
        """Apply config filters, keep original frame indices."""
        rows: list[tuple[int, Location]] = []
        for index, loc in enumerate(stack):
            if self._config.max_frames is not None and len(rows) >= self._config.max_frames:
                break
            if not loc.is_resolved and not self._config.show_unresolved:
                continue
            rows.append((index, loc))
        return rows

    def _build_table(self, rows: list[tuple[int, Location]]) -> Table:
        """Create frame table."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Package", style="cyan")
        table.add_column("File")
        table.add_column("Function", style="green")
        table.add_column("Line", justify="right")

        for index, loc in rows:
            if loc.is_resolved:
                table.add_row(str(index), loc.package, loc.file, loc.function, str(loc.line))
            else:
                table.add_row(str(index), "?", "?", "?", "0", style="dim")
        return table
