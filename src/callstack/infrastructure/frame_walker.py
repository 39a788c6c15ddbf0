"""Infrastructure layer: interpreter-backed frame walker.

Walks the calling thread's frames via sys._getframe.
Handles identify a call site as (code object, bytecode offset);
the line is resolved lazily from the code object's line table.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from callstack.domain.naming import module_path
from callstack.domain.ports import FrameSymbol, FrameWalkerPort

if TYPE_CHECKING:
    from collections.abc import Hashable
    from types import CodeType, FrameType


@dataclass(frozen=True, slots=True, eq=False)
class FrameHandle:
    """Raw handle of one frame.

    Equality and hash use code object identity plus offset.
    Holding the code object keeps its identity stable while
    the handle lives (e.g., as a cache key).

    Attributes:
        code: Code object executing in the frame
        offset: Bytecode offset of the last attempted instruction
        module: Value of __name__ in the frame's globals
    """

    code: CodeType
    offset: int
    module: str = field(default="")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrameHandle):
            return NotImplemented
        return self.code is other.code and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((id(self.code), self.offset))


def _handle_of(frame: FrameType) -> FrameHandle:
    """Capture handle of a live frame. Does not keep the frame."""
    module = frame.f_globals.get("__name__")
    return FrameHandle(
        code=frame.f_code,
        offset=frame.f_lasti,
        module=module if isinstance(module, str) else "",
    )


def line_at(code: CodeType, offset: int) -> int | None:
    """Line number of the instruction at offset, None if not mapped."""
    for start, end, line in code.co_lines():
        if start <= offset < end:
            return line
    return None


class SysFrameWalker(FrameWalkerPort):
    """Frame walker over the current thread's interpreter frames.

    Stateless. Only the calling thread's stack is visible.
    """

    def frames_from(self, skip: int, count: int) -> tuple[Hashable, ...]:
        """Return handles starting skip frames above the caller.

        Args:
            skip: 0 is the caller of frames_from. Negative treated as 0.
            count: Maximum number of handles

        Returns:
            Up to count FrameHandle objects, nearest first
        """
        if count < 1:
            return ()
        try:
            # +1: this method's own frame
            frame: FrameType | None = sys._getframe(max(skip, 0) + 1)  # noqa: SLF001
        except (ValueError, OverflowError):
            return ()

        handles: list[Hashable] = []
        while frame is not None and len(handles) < count:
            handles.append(_handle_of(frame))
            frame = frame.f_back
        return tuple(handles)

    def resolve(self, handle: Hashable) -> FrameSymbol | None:
        """Resolve FrameHandle to qualified name, file path and line.

        Returns:
            FrameSymbol, or None for foreign handles, frames without
            a module name, or offsets missing from the line table
        """
        if not isinstance(handle, FrameHandle) or not handle.module:
            return None
        line = line_at(handle.code, handle.offset)
        if line is None or line < 1:
            return None
        return FrameSymbol(
            qualified_name=f"{module_path(handle.module)}.{handle.code.co_qualname}",
            file_path=handle.code.co_filename,
            line=line,
        )
