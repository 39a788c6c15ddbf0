"""Infrastructure layer: frame walking and caching."""

from callstack.infrastructure.frame_walker import FrameHandle, SysFrameWalker
from callstack.infrastructure.location_cache import PROCESS_CACHE, CacheStats, LocationCache

__all__ = [
    "PROCESS_CACHE",
    "CacheStats",
    "FrameHandle",
    "LocationCache",
    "SysFrameWalker",
]
