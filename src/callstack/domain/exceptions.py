"""Domain exceptions: all public errors of callstack.

Hexagonal architecture: all exceptions visible to users defined in domain.
Resolution failures are NOT errors: they degrade to an unresolved Location.
Only misuse (invalid values, invalid types) raises.
"""


class CallstackError(Exception):
    """Base for all callstack error exceptions.

    Allows: except CallstackError to catch all library errors.
    """


class PartialLocationError(CallstackError, ValueError):
    """Location is neither fully resolved nor entirely zero-valued.

    Inherits ValueError for semantic correctness (invalid field values).

    Attributes:
        missing: Names of the fields left empty.
    """

    def __init__(self, missing: tuple[str, ...]) -> None:
        """Initialize with names of the unpopulated fields."""
        self.missing = missing
        super().__init__(f"location partially resolved, missing: {', '.join(missing)}")


class InvalidOffsetError(CallstackError, TypeError):
    """Offset or depth is not an int.

    Inherits TypeError for semantic correctness (expected int, got X).

    Attributes:
        name: Parameter name ("offset" or "depth").
        got: Actual type received.
    """

    def __init__(self, *, name: str, got: type) -> None:
        """Initialize with parameter name and actual type."""
        self.name = name
        self.got = got
        super().__init__(f"{name} must be int, got {got.__name__}")


class InvalidConfigError(CallstackError, ValueError):
    """Reporter configuration value out of range.

    Attributes:
        field: Name of the invalid field.
        reason: Error description.
    """

    def __init__(self, *, field: str, reason: str) -> None:
        """Initialize with field name and reason."""
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
