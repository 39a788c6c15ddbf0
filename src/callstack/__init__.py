"""callstack - call site locations and call stacks for logging and error reporting.

    here = callstack.here()
    caller = callstack.at(1)
    stack = callstack.dive(5)

Resolved locations are cached per call site for the process lifetime.
"""

__version__ = "0.1.0"

from callstack.api import at, cache_stats, dive, here
from callstack.domain.exceptions import CallstackError, InvalidOffsetError, PartialLocationError
from callstack.domain.location import UNRESOLVED, Location, Stack

__all__ = [
    "UNRESOLVED",
    "CallstackError",
    "InvalidOffsetError",
    "Location",
    "PartialLocationError",
    "Stack",
    "__version__",
    "at",
    "cache_stats",
    "dive",
    "here",
]
