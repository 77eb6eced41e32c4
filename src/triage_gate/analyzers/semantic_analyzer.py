"""Semantic smell detection.

PATTERN: Line-oriented heuristics, no parser required
CRITICAL: Nesting depth is a brace count, meaningful only for brace-delimited code
GOTCHA: The hallucinated-package check is advisory and has false positives
"""

import logging
import re
from typing import List, Sequence

from ..models.triage_models import Category, Issue, SemanticConfig, Severity
from ..patterns import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    MODULE_PATH_SEPARATOR,
    MODULE_REFERENCE_PATTERNS,
    PACKAGE_LIKE_CAPITALS,
    RELATIVE_MODULE_PREFIX,
)
from .base import BaseAnalyzer

logger = logging.getLogger(__name__)


class SemanticAnalyzer(BaseAnalyzer):
    """
    Code smell and complexity analyzer.

    Runs three checks on every readable file, in this order:
    - Forbidden patterns (case-insensitive regex per line)
    - Brace nesting depth against a quarter of the complexity budget
    - Package-like module references that are probably invented
    """

    category = Category.SEMANTIC

    async def analyze(
        self, files: Sequence[str], config: SemanticConfig
    ) -> List[Issue]:
        patterns = [
            (source, re.compile(source, re.IGNORECASE))
            for source in config.forbidden_patterns
        ]

        issues: List[Issue] = []
        for path in files:
            lines = self._read_lines(path)
            if lines is None:
                continue

            issues.extend(self._check_forbidden_patterns(path, lines, patterns))
            issues.extend(self._check_nesting(path, lines, config.max_complexity))
            issues.extend(self._check_module_references(path, lines))

        self.logger.debug(f"Semantic analysis found {len(issues)} issues in {len(files)} files")
        return issues

    def _check_forbidden_patterns(self, path, lines, patterns) -> List[Issue]:
        issues = []
        for source, regex in patterns:
            for idx, line in enumerate(lines):
                if regex.search(line):
                    issues.append(self._issue(
                        Severity.WARNING,
                        path,
                        f"Forbidden pattern detected: {source}",
                        line=idx + 1,
                        fix="Consider using a more specific type or approach",
                    ))
        return issues

    def _check_nesting(self, path: str, lines: List[str], max_complexity: int) -> List[Issue]:
        """
        Track a running brace depth and flag every line above the budget.

        The budget is max_complexity / 4, so the default of 20 flags
        lines nested deeper than 5 levels.
        """
        limit = max_complexity / 4
        depth = 0
        max_depth = 0
        issues = []

        for idx, line in enumerate(lines):
            depth += line.count(BLOCK_OPEN)
            depth -= line.count(BLOCK_CLOSE)
            max_depth = max(max_depth, depth)

            if depth > limit:
                issues.append(self._issue(
                    Severity.WARNING,
                    path,
                    f"High nesting complexity: {depth} levels",
                    line=idx + 1,
                    fix="Consider extracting nested logic into separate functions",
                ))

        if max_depth > limit:
            self.logger.debug(f"{path}: max nesting {max_depth} exceeds {limit}")
        return issues

    def _check_module_references(self, path: str, lines: List[str]) -> List[Issue]:
        issues = []
        for idx, line in enumerate(lines):
            for regex in MODULE_REFERENCE_PATTERNS:
                for match in regex.finditer(line):
                    module = match.group(1)
                    if self._is_suspicious_module(module):
                        issues.append(self._issue(
                            Severity.WARNING,
                            path,
                            f"Potentially hallucinated package: {module}",
                            line=idx + 1,
                            fix="Verify this package exists in the package registry",
                        ))
        return issues

    @staticmethod
    def _is_suspicious_module(module: str) -> bool:
        if module.startswith(RELATIVE_MODULE_PREFIX):
            return False
        if MODULE_PATH_SEPARATOR in module:
            return False
        return PACKAGE_LIKE_CAPITALS.search(module) is not None
