"""Rich console rendering of triage results."""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..models.triage_models import Severity, TriageResult, Verdict

logger = logging.getLogger(__name__)

VERDICT_STYLES = {
    Verdict.PASS: "bold green",
    Verdict.WARN: "bold yellow",
    Verdict.FAIL: "bold red",
}

SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


class ConsoleReporter:
    """
    Human-readable rendering for terminals and CI logs.

    Shows verdict, score, file and issue counts, every issue with its
    severity, location, message and fix, then the recommendations.
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Args:
            console: Rich console (creates new if not provided)
        """
        self.console = console or Console()

    def render(self, result: TriageResult) -> None:
        verdict_style = VERDICT_STYLES[result.verdict]
        summary = (
            f"Verdict: [{verdict_style}]{result.verdict.value}[/{verdict_style}]\n"
            f"Score: {result.score}/100\n"
            f"Files analyzed: {result.analyzed_files}\n"
            f"Issues found: {len(result.issues)}"
        )
        self.console.print(Panel(summary, title="📋 TRIAGE RESULT", border_style=verdict_style))

        if result.issues:
            self.console.print("\n🔎 Issues:")
            for issue in result.issues:
                style = SEVERITY_STYLES[issue.severity]
                self.console.print(
                    f"  [{style}]{escape('[' + issue.severity.value.upper() + ']')}[/{style}] "
                    f"{escape(issue.location)}",
                    highlight=False,
                )
                self.console.print(f"    {escape(issue.message)}", highlight=False)
                if issue.fix:
                    self.console.print(f"    💡 {escape(issue.fix)}", highlight=False)

        self.console.print("\n💡 Recommendations:")
        for rec in result.recommendations:
            self.console.print(f"  • {escape(rec)}", highlight=False)
