"""Reporters for captured call stacks.

PlainTextReporter and JsonReporter use stdlib only,
ConsoleReporter renders with rich.
"""

from callstack.application.reporters.console import ConsoleConfig, ConsoleReporter
from callstack.application.reporters.json import JsonReporter
from callstack.application.reporters.plain_text import PlainTextReporter
from callstack.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
