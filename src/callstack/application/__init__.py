"""Application layer: resolver, stack builder, reporters."""

from callstack.application.resolver import LocationResolver, location_from_symbol
from callstack.application.stack_builder import StackBuilder

__all__ = [
    "LocationResolver",
    "StackBuilder",
    "location_from_symbol",
]
