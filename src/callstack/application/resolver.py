"""Location resolver: frame offset → Location.

Flow:
  frames_from(skip, 1) → handle → cache lookup
                                      │ miss
                               resolve(handle) → split name → store

Never raises on missing frames or missing symbols: returns UNRESOLVED.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from callstack.domain.exceptions import InvalidOffsetError
from callstack.domain.location import UNRESOLVED, Location
from callstack.domain.naming import base_name, split_qualified_name
from callstack.infrastructure.frame_walker import SysFrameWalker
from callstack.infrastructure.location_cache import PROCESS_CACHE

if TYPE_CHECKING:
    from callstack.domain.ports import FrameSymbol, FrameWalkerPort
    from callstack.infrastructure.location_cache import LocationCache

logger = logging.getLogger(__name__)

# Frames between the walker call and the user: _locate + public method.
_OWN_FRAMES = 2


def require_int(value: object, name: str) -> int:
    """FAIL-FIRST: raise unless value is a plain int (bool rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOffsetError(name=name, got=type(value))
    return value


def location_from_symbol(symbol: FrameSymbol) -> Location:
    """Build Location from resolved symbol.

    Returns UNRESOLVED if any part comes out empty.
    """
    package, function = split_qualified_name(symbol.qualified_name)
    file = base_name(symbol.file_path)
    if not (package and file and function) or symbol.line < 1:
        return UNRESOLVED
    return Location(package=package, file=file, function=function, line=symbol.line)


class LocationResolver:
    """Resolves call sites relative to the caller.

    Offsets:
        at(0)  → caller of at ("my own location")
        at(1)  → caller's caller
        at(-n) → clamped to at(0)

    Contracts:
        - Missing frame or symbol → UNRESOLVED, never an exception
        - Resolved locations cached per handle, unresolved never cached
    """

    __slots__ = ("_cache", "_walker")

    def __init__(
        self,
        walker: FrameWalkerPort | None = None,
        cache: LocationCache | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            walker: Frame walker. Defaults to SysFrameWalker().
            cache: Location cache. Defaults to the process-wide cache.
        """
        self._walker = walker if walker is not None else SysFrameWalker()
        self._cache = cache if cache is not None else PROCESS_CACHE

    @property
    def cache(self) -> LocationCache:
        """Cache used by this resolver."""
        return self._cache

    def here(self) -> Location:
        """Location of the caller of here()."""
        return self._locate(_OWN_FRAMES)

    def at(self, offset: int = 0) -> Location:
        """Location offset frames above the caller of at().

        Args:
            offset: 0 for the caller itself, 1 for its caller, etc.
                    Negative values are clamped to 0.

        Raises:
            InvalidOffsetError: offset is not an int.
        """
        require_int(offset, "offset")
        return self._locate(_OWN_FRAMES + max(offset, 0))

    def _locate(self, skip: int) -> Location:
        """Resolve the frame skip levels above this method."""
        handles = self._walker.frames_from(skip, 1)
        if not handles:
            return UNRESOLVED
        handle = handles[0]

        location, found = self._cache.lookup(handle)
        if found:
            return location

        symbol = self._walker.resolve(handle)
        if symbol is None:
            logger.debug("No symbol for frame handle %r", handle)
            return UNRESOLVED

        location = location_from_symbol(symbol)
        if not location.is_resolved:
            logger.debug("Incomplete symbol %r for frame handle %r", symbol, handle)
            return UNRESOLVED

        self._cache.store(handle, location)
        logger.debug("Resolved %s", location)
        return location
