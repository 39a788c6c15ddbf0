"""Call site value objects: Location and Stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from callstack.domain.exceptions import PartialLocationError

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Location:
    """Resolved call site.

    Immutable value object with FAIL-FIRST validation.
    Either fully resolved or entirely zero-valued, never partial.

    Attributes:
        package: Slash-delimited package path (e.g., "tests/unit/test_api")
        file: Base name of the source file (e.g., "test_api.py")
        function: Function name without package prefix (e.g., "TestHere.test_here")
        line: Line number (1-based, 0 when unresolved)
    """

    package: str = ""
    file: str = ""
    function: str = ""
    line: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        fields = {
            "package": bool(self.package),
            "file": bool(self.file),
            "function": bool(self.function),
            "line": self.line > 0,
        }
        missing = tuple(name for name, populated in fields.items() if not populated)
        if missing and len(missing) != len(fields):
            raise PartialLocationError(missing)

    @property
    def is_resolved(self) -> bool:
        """True unless this is the zero value."""
        return self.line > 0

    def to_dict(self) -> dict[str, object]:
        """Plain dict with all four fields."""
        return {
            "package": self.package,
            "file": self.file,
            "function": self.function,
            "line": self.line,
        }

    def __str__(self) -> str:
        """Format as (package:file:function:line)."""
        return f"({self.package}:{self.file}:{self.function}:{self.line})"


UNRESOLVED = Location()


@dataclass(frozen=True, slots=True)
class Stack:
    """Call stack, nearest caller first.

    Index 0 is the frame closest to the capture point.
    Frames past the real stack depth are UNRESOLVED, never dropped.

    Attributes:
        locations: Captured locations in capture order
    """

    locations: tuple[Location, ...] = ()

    def __post_init__(self) -> None:
        """Own a tuple copy of locations, then validate. FAIL-FIRST."""
        object.__setattr__(self, "locations", tuple(self.locations))
        for loc in self.locations:
            if not isinstance(loc, Location):
                raise TypeError(f"stack element must be Location, got {type(loc).__name__}")

    @property
    def resolved(self) -> tuple[Location, ...]:
        """Leading run of resolved locations."""
        result: list[Location] = []
        for loc in self.locations:
            if not loc.is_resolved:
                break
            result.append(loc)
        return tuple(result)

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.locations)

    @overload
    def __getitem__(self, index: int) -> Location: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Location, ...]: ...

    def __getitem__(self, index: int | slice) -> Location | tuple[Location, ...]:
        return self.locations[index]

    def __str__(self) -> str:
        """Format as location strings joined by ' :: '."""
        return " :: ".join(str(loc) for loc in self.locations)
