"""Issue aggregation, scoring and verdict rules.

The score and the verdict are derived independently from the same issue
sequence. The verdict depends only on which severities are present, never
on the score.
"""

import logging
from typing import Dict, List, Mapping, Sequence

from .models.triage_models import CATEGORY_ORDER, Category, Issue, Severity, Verdict

logger = logging.getLogger(__name__)

BASE_SCORE = 100
MIN_SCORE = 0

SEVERITY_PENALTIES: Dict[Severity, int] = {
    Severity.ERROR: 20,
    Severity.WARNING: 5,
    Severity.INFO: 1,
}


def aggregate(results: Mapping[Category, Sequence[Issue]]) -> List[Issue]:
    """
    Concatenate analyzer output in the fixed category order.

    Args:
        results: Issues keyed by the category of the analyzer that produced them

    Returns:
        Semantic issues, then security, then style, each in analyzer order
    """
    issues: List[Issue] = []
    for category in CATEGORY_ORDER:
        issues.extend(results.get(category, ()))
    return issues


def calculate_score(issues: Sequence[Issue]) -> int:
    """Start at 100, subtract a fixed penalty per issue severity, floor at 0."""
    score = BASE_SCORE
    for issue in issues:
        score -= SEVERITY_PENALTIES[issue.severity]
    return max(MIN_SCORE, score)


def determine_verdict(issues: Sequence[Issue]) -> Verdict:
    """FAIL on any error, WARN on any warning, otherwise PASS."""
    severities = {issue.severity for issue in issues}
    if Severity.ERROR in severities:
        return Verdict.FAIL
    if Severity.WARNING in severities:
        return Verdict.WARN
    return Verdict.PASS
