"""Frame walker port (interface) and its result value object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable


@dataclass(frozen=True, slots=True)
class FrameSymbol:
    """Symbol information for one raw frame handle.

    Attributes:
        qualified_name: Slash-delimited package path plus dotted function path
        file_path: Source file path as recorded by the interpreter
        line: Line number (1-based)
    """

    qualified_name: str
    file_path: str
    line: int


class FrameWalkerPort(ABC):
    """Port for walking the calling thread's frames.

    Infrastructure layer must provide implementation.
    Handles are opaque to callers; only hashability and
    stability for the process lifetime are relied upon.
    """

    @abstractmethod
    def frames_from(self, skip: int, count: int) -> tuple[Hashable, ...]:
        """Return raw handles of the calling thread's stack.

        Args:
            skip: Frames to skip above the caller of frames_from.
                  0 is the caller itself.
            count: Maximum number of handles

        Returns:
            Up to count handles, nearest first. Fewer (or none)
            when the stack is exhausted.
        """
        ...

    @abstractmethod
    def resolve(self, handle: Hashable) -> FrameSymbol | None:
        """Map raw handle to symbol information.

        Args:
            handle: Handle returned by frames_from

        Returns:
            FrameSymbol, or None if the handle cannot be symbolized
        """
        ...
