"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from __future__ import annotations

from collections.abc import Hashable

from callstack.domain.location import Location, Stack
from callstack.domain.naming import module_path
from callstack.domain.ports import FrameSymbol, FrameWalkerPort

DEFAULT_PACKAGE = "app/services"
DEFAULT_FILE = "dashboard.py"

# Frames a resolver adds above the walker call: _locate + at/here.
RESOLVER_FRAMES = 2
# Frames a stack builder adds: _locate + at + dive.
BUILDER_FRAMES = 3


def make_location(
    function: str = "handle",
    line: int = 1,
    package: str = DEFAULT_PACKAGE,
    file: str = DEFAULT_FILE,
) -> Location:
    """Create a resolved Location for tests."""
    return Location(package=package, file=file, function=function, line=line)


def make_stack(*locations: Location) -> Stack:
    """Create a Stack from locations."""
    return Stack(tuple(locations))


def make_symbol(
    qualified_name: str = "app/services/dashboard.handle",
    file_path: str = "/srv/app/services/dashboard.py",
    line: int = 1,
) -> FrameSymbol:
    """Create a FrameSymbol for tests."""
    return FrameSymbol(qualified_name=qualified_name, file_path=file_path, line=line)


def expected_package(module_name: str) -> str:
    """Package path a test module's own frames resolve to."""
    return module_path(module_name)


class FakeWalker(FrameWalkerPort):
    """Frame walker over a synthetic stack.

    symbols[0] is the frame `base` levels above the walker call,
    i.e. the caller of the component under test. None entries
    simulate frames without symbol information.

    Attributes:
        resolve_calls: Handles passed to resolve(), in call order.
    """

    def __init__(self, symbols: list[FrameSymbol | None], *, base: int = RESOLVER_FRAMES) -> None:
        self._symbols = symbols
        self._base = base
        self.resolve_calls: list[Hashable] = []

    def frames_from(self, skip: int, count: int) -> tuple[Hashable, ...]:
        start = max(skip - self._base, 0)
        end = min(start + count, len(self._symbols))
        return tuple(("frame", index) for index in range(start, end))

    def resolve(self, handle: Hashable) -> FrameSymbol | None:
        self.resolve_calls.append(handle)
        assert isinstance(handle, tuple)
        return self._symbols[handle[1]]
