"""Process-wide location cache.

Maps raw frame handles to resolved Locations.
Write-once in practice: resolution is deterministic, so a repeated
store for the same handle writes an equal value. No eviction: the
number of distinct call sites is bounded by code size.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from callstack.domain.location import UNRESOLVED, Location

if TYPE_CHECKING:
    from collections.abc import Hashable


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Snapshot of cache counters.

    Attributes:
        size: Number of cached handles
        hits: Lookups that found an entry
        misses: Lookups that found nothing
    """

    size: int
    hits: int
    misses: int


class LocationCache:
    """Handle → Location mapping guarded by one lock.

    Thread Safety:
      - _lock protects _entries and counters
      - lookup and store are each atomic; resolution between them
        runs unlocked, concurrent misses on one handle store equal values
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[Hashable, Location] = {}
        self._hits = 0
        self._misses = 0

    def lookup(self, handle: Hashable) -> tuple[Location, bool]:
        """Return (cached location, True) or (UNRESOLVED, False)."""
        with self._lock:
            location = self._entries.get(handle)
            if location is None:
                self._misses += 1
                return UNRESOLVED, False
            self._hits += 1
            return location, True

    def store(self, handle: Hashable, location: Location) -> None:
        """Insert or overwrite entry for handle."""
        with self._lock:
            self._entries[handle] = location

    @property
    def stats(self) -> CacheStats:
        """Current size and counters."""
        with self._lock:
            return CacheStats(size=len(self._entries), hits=self._hits, misses=self._misses)

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0


# Process-wide instance: empty at import, never torn down.
PROCESS_CACHE = LocationCache()
