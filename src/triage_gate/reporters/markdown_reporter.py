"""Markdown report generator for triage results.

This module generates GitHub-flavored markdown suitable for pull request
comments and job summaries.
"""

import logging
from typing import List

from ..models.triage_models import CATEGORY_ORDER, Severity, TriageResult, Verdict

logger = logging.getLogger(__name__)

VERDICT_EMOJI = {
    Verdict.PASS: "✅",
    Verdict.WARN: "⚠️",
    Verdict.FAIL: "❌",
}


class MarkdownReporter:
    """
    Generate Markdown reports for PR comments.

    PATTERN: GitHub-flavored markdown with tables
    GOTCHA: Pipes in messages would break table cells and are escaped
    """

    def __init__(self, max_issues: int = 50):
        """
        Initialize Markdown reporter.

        Args:
            max_issues: Issue rows listed before the table is truncated
        """
        self.max_issues = max_issues
        self.logger = logger

    def generate_report(self, result: TriageResult) -> str:
        sections = [
            self._generate_header(result),
            self._generate_summary(result),
            self._generate_issues_section(result),
            self._generate_recommendations_section(result),
        ]

        markdown = "\n\n".join(filter(None, sections))
        self.logger.debug(f"Markdown report generated ({len(markdown)} chars)")
        return markdown + "\n"

    def _generate_header(self, result: TriageResult) -> str:
        return (
            f"# Triage Result {VERDICT_EMOJI[result.verdict]}\n\n"
            f"**Verdict:** {result.verdict.value}\n"
            f"**Score:** {result.score}/100\n"
            f"**Generated:** {result.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z')}"
        )

    def _generate_summary(self, result: TriageResult) -> str:
        by_severity = result.count_by_severity()
        by_category = result.count_by_category()

        summary = "## Summary\n\n"
        summary += "| Metric | Count |\n"
        summary += "|--------|-------|\n"
        summary += f"| Files analyzed | {result.analyzed_files} |\n"
        summary += f"| Issues | {len(result.issues)} |\n"
        for severity in Severity:
            summary += f"| {severity.value.capitalize()}s | {by_severity[severity]} |\n"
        for category in CATEGORY_ORDER:
            summary += f"| {category.value.capitalize()} issues | {by_category[category]} |\n"
        return summary.rstrip("\n")

    def _generate_issues_section(self, result: TriageResult) -> str:
        if not result.issues:
            return ""

        lines: List[str] = [
            "## Issues",
            "",
            "| Severity | Category | Location | Message | Fix |",
            "|----------|----------|----------|---------|-----|",
        ]
        for issue in result.issues[: self.max_issues]:
            lines.append(
                f"| {issue.severity.value.upper()} | {issue.category.value} "
                f"| `{issue.location}` | {self._escape(issue.message)} "
                f"| {self._escape(issue.fix or '')} |"
            )

        hidden = len(result.issues) - self.max_issues
        if hidden > 0:
            lines.append("")
            lines.append(f"_{hidden} more issues not shown._")
        return "\n".join(lines)

    def _generate_recommendations_section(self, result: TriageResult) -> str:
        if not result.recommendations:
            return ""
        lines = ["## Recommendations", ""]
        lines.extend(f"- {rec}" for rec in result.recommendations)
        return "\n".join(lines)

    @staticmethod
    def _escape(text: str) -> str:
        return text.replace("|", "\\|")
