"""Tests for JsonReporter.

Tests:
- report() returns valid JSON string
- Frame serialization matches Location fields
- Summary statistics
"""

import json

from callstack.application.reporters.json import JsonReporter
from callstack.domain.location import UNRESOLVED
from tests.factories import make_location, make_stack


class TestJsonReporter:
    """Tests for JsonReporter."""

    def test_report_is_valid_json(self) -> None:
        output = JsonReporter().report(make_stack(make_location()))
        data = json.loads(output)
        assert set(data) == {"frames", "summary"}

    def test_frames_in_order(self) -> None:
        stack = make_stack(make_location(function="h", line=3), make_location(function="g", line=8))
        data = json.loads(JsonReporter().report(stack))
        assert data["frames"] == [
            {"package": "app/services", "file": "dashboard.py", "function": "h", "line": 3},
            {"package": "app/services", "file": "dashboard.py", "function": "g", "line": 8},
        ]

    def test_unresolved_frame(self) -> None:
        data = json.loads(JsonReporter().report(make_stack(UNRESOLVED)))
        assert data["frames"] == [{"package": "", "file": "", "function": "", "line": 0}]

    def test_summary(self) -> None:
        stack = make_stack(make_location(), make_location(), UNRESOLVED)
        data = json.loads(JsonReporter().report(stack))
        assert data["summary"] == {"depth": 3, "resolved": 2, "unresolved": 1}

    def test_compact(self) -> None:
        output = JsonReporter(indent=None).report(make_stack(make_location()))
        assert "\n" not in output

    def test_indented(self) -> None:
        output = JsonReporter().report(make_stack(make_location()))
        assert "\n  " in output
