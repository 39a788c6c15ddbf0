"""Process-wide entry points: here(), at(), dive().

Bound to one LocationResolver over the process-wide cache and the
interpreter frame walker. Each function adds exactly one frame,
compensated below so offsets stay relative to the user's code.
"""

from __future__ import annotations

from callstack.application.resolver import LocationResolver, require_int
from callstack.application.stack_builder import StackBuilder
from callstack.domain.location import Location, Stack
from callstack.infrastructure.frame_walker import SysFrameWalker
from callstack.infrastructure.location_cache import PROCESS_CACHE, CacheStats

_resolver = LocationResolver(walker=SysFrameWalker(), cache=PROCESS_CACHE)
_builder = StackBuilder(_resolver)


def here() -> Location:
    """Location of the caller of here().

    Example:
        >>> def handler():
        ...     return here().function
        >>> handler()
        'handler'
    """
    return _resolver.at(1)


def at(offset: int = 0) -> Location:
    """Location offset frames above the caller of at().

    Args:
        offset: 0 for the caller's own location, 1 for its caller, etc.
                Negative values are clamped to 0.

    Returns:
        Location, UNRESOLVED if the stack is not that deep.

    Raises:
        InvalidOffsetError: offset is not an int.
    """
    require_int(offset, "offset")
    return _resolver.at(max(offset, 0) + 1)


def dive(depth: int) -> Stack:
    """Call stack of max(depth, 1) frames, caller of dive() first.

    Raises:
        InvalidOffsetError: depth is not an int.
    """
    return _builder.dive(depth, skip=1)


def cache_stats() -> CacheStats:
    """Counters of the process-wide location cache."""
    return PROCESS_CACHE.stats
