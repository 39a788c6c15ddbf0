"""Tests for domain/exceptions.py."""

import pytest

from callstack.domain.exceptions import (
    CallstackError,
    InvalidConfigError,
    InvalidOffsetError,
    PartialLocationError,
)


class TestHierarchy:
    """All errors catchable as CallstackError and as their builtin base."""

    @pytest.mark.parametrize(
        ("exc", "builtin"),
        [
            (PartialLocationError(("line",)), ValueError),
            (InvalidOffsetError(name="offset", got=str), TypeError),
            (InvalidConfigError(field="width", reason="too small"), ValueError),
        ],
    )
    def test_inherits(self, exc: CallstackError, builtin: type[Exception]) -> None:
        assert isinstance(exc, CallstackError)
        assert isinstance(exc, builtin)


class TestMessages:
    """Tests for error attributes and messages."""

    def test_partial_location(self) -> None:
        exc = PartialLocationError(("file", "line"))
        assert exc.missing == ("file", "line")
        assert str(exc) == "location partially resolved, missing: file, line"

    def test_invalid_offset(self) -> None:
        exc = InvalidOffsetError(name="depth", got=float)
        assert exc.name == "depth"
        assert exc.got is float
        assert str(exc) == "depth must be int, got float"

    def test_invalid_config(self) -> None:
        exc = InvalidConfigError(field="width", reason="must be >= 20, got 5")
        assert exc.field == "width"
        assert str(exc) == "width: must be >= 20, got 5"
