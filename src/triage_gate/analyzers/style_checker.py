"""Style enforcement for JavaScript and TypeScript sources."""

import logging
from typing import List, Sequence

from ..models.triage_models import Category, Issue, Severity, StyleConfig
from ..patterns import (
    DEBUG_OUTPUT_PATTERN,
    LEGACY_VAR_PATTERN,
    MAX_LINE_LENGTH,
    SOURCE_EXTENSIONS,
    TEST_FILE_MARKERS,
)
from .base import BaseAnalyzer

logger = logging.getLogger(__name__)


class StyleChecker(BaseAnalyzer):
    """
    Line-level style rules.

    GOTCHA: enforce_format and lint_rules do not select rules yet,
    every preset runs the same checks.
    """

    category = Category.STYLE

    async def analyze(self, files: Sequence[str], config: StyleConfig) -> List[Issue]:
        issues: List[Issue] = []

        for path in files:
            if not path.endswith(SOURCE_EXTENSIONS):
                continue

            lines = self._read_lines(path)
            if lines is None:
                continue

            is_test = any(marker in path for marker in TEST_FILE_MARKERS)
            for idx, line in enumerate(lines):
                issues.extend(self._check_line(path, idx + 1, line, is_test))

        self.logger.debug(
            f"Style check ({config.lint_rules.value}) found {len(issues)} issues"
        )
        return issues

    def _check_line(self, path: str, line_no: int, line: str, is_test: bool) -> List[Issue]:
        issues = []

        if len(line) > MAX_LINE_LENGTH:
            issues.append(self._issue(
                Severity.WARNING,
                path,
                f"Line exceeds {MAX_LINE_LENGTH} characters ({len(line)})",
                line=line_no,
            ))

        if not is_test and DEBUG_OUTPUT_PATTERN.search(line):
            issues.append(self._issue(
                Severity.WARNING,
                path,
                "console.log should not be in production code",
                line=line_no,
                fix="Use a proper logging library",
            ))

        if LEGACY_VAR_PATTERN.search(line):
            issues.append(self._issue(
                Severity.WARNING,
                path,
                "Prefer const or let over var",
                line=line_no,
            ))

        return issues
