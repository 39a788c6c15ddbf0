"""Stack builder: repeated resolution at increasing offsets."""

from __future__ import annotations

from callstack.application.resolver import LocationResolver, require_int
from callstack.domain.location import Location, Stack


class StackBuilder:
    """Builds call stacks of bounded depth.

    Length of the result always equals max(depth, 1): frames past
    the real stack are UNRESOLVED, not truncated.
    """

    __slots__ = ("_resolver",)

    def __init__(self, resolver: LocationResolver | None = None) -> None:
        """Initialize builder.

        Args:
            resolver: Location resolver. Defaults to LocationResolver().
        """
        self._resolver = resolver if resolver is not None else LocationResolver()

    def dive(self, depth: int, *, skip: int = 0) -> Stack:
        """Capture stack starting at the caller of dive().

        Args:
            depth: Number of frames. Values < 1 are clamped to 1.
            skip: Wrapper frames between the user and dive() to leave out.

        Returns:
            Stack with frame 0 = caller of dive() (after skip).

        Raises:
            InvalidOffsetError: depth or skip is not an int.
        """
        require_int(depth, "depth")
        require_int(skip, "skip")
        locations: list[Location] = []
        # Plain loop: a comprehension may run in its own frame.
        for index in range(max(depth, 1)):
            locations.append(self._resolver.at(max(skip, 0) + index + 1))
        return Stack(tuple(locations))
