"""Domain layer: value objects, ports, exceptions."""

from callstack.domain.exceptions import (
    CallstackError,
    InvalidConfigError,
    InvalidOffsetError,
    PartialLocationError,
)
from callstack.domain.location import UNRESOLVED, Location, Stack
from callstack.domain.naming import base_name, module_path, split_qualified_name
from callstack.domain.ports import FrameSymbol, FrameWalkerPort

__all__ = [
    "UNRESOLVED",
    "CallstackError",
    "FrameSymbol",
    "FrameWalkerPort",
    "InvalidConfigError",
    "InvalidOffsetError",
    "Location",
    "PartialLocationError",
    "Stack",
    "base_name",
    "module_path",
    "split_qualified_name",
]
