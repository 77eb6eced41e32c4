"""Triage result reporters.

Provides JSON, Markdown and rich console renderings of a TriageResult.
"""

from .console_reporter import ConsoleReporter
from .json_reporter import JsonReporter
from .markdown_reporter import MarkdownReporter

__all__ = [
    "ConsoleReporter",
    "JsonReporter",
    "MarkdownReporter",
]
