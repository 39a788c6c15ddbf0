"""Tests for PlainTextReporter."""

import pytest

from callstack.application.reporters import ConsoleReporter, JsonReporter, ReporterProtocol
from callstack.application.reporters.plain_text import UNRESOLVED_MARK, PlainTextReporter
from callstack.domain.location import UNRESOLVED
from tests.factories import make_location, make_stack


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_header(self) -> None:
        output = PlainTextReporter().report(make_stack(make_location(), make_location()))
        assert output.splitlines()[0] == "Call stack (2 frames):"

    def test_numbered_frames(self) -> None:
        stack = make_stack(make_location(function="h", line=3), make_location(function="g", line=8))
        lines = PlainTextReporter().report(stack).splitlines()
        assert lines[1] == "  #0 (app/services:dashboard.py:h:3)"
        assert lines[2] == "  #1 (app/services:dashboard.py:g:8)"

    def test_unresolved_kept_in_place(self) -> None:
        stack = make_stack(UNRESOLVED, make_location(function="g"))
        lines = PlainTextReporter().report(stack).splitlines()
        assert lines[1] == f"  #0 {UNRESOLVED_MARK}"
        assert lines[2].startswith("  #1 (")

    def test_custom_indent(self) -> None:
        lines = PlainTextReporter(indent="> ").report(make_stack(make_location())).splitlines()
        assert lines[1].startswith("> #0 ")

    def test_empty_stack(self) -> None:
        assert PlainTextReporter().report(make_stack()) == "Call stack (0 frames):"


class TestReporterProtocol:
    """All built-in reporters share the report(stack) -> str contract."""

    @pytest.mark.parametrize(
        "reporter",
        [PlainTextReporter(), JsonReporter(), ConsoleReporter()],
        ids=["plain", "json", "console"],
    )
    def test_report_returns_str(self, reporter: ReporterProtocol) -> None:
        output = reporter.report(make_stack(make_location(function="handler_a")))
        assert isinstance(output, str)
        assert "handler_a" in output
