"""Human-facing guidance derived from issue statistics."""

from typing import List, Sequence

from .models.triage_models import Category, Issue, Severity

SECURITY_NOTICE = "🚨 CRITICAL: Address security issues before merging"
REFACTOR_SUGGESTION = "Consider refactoring to reduce code complexity"
FORMATTER_SUGGESTION = "Run formatter (prettier/eslint --fix) before committing"
READY_FOR_REVIEW = "✅ Code looks good! Ready for human review."

SEMANTIC_ISSUE_LIMIT = 3
STYLE_ISSUE_LIMIT = 5


def generate_recommendations(issues: Sequence[Issue]) -> List[str]:
    """
    Build recommendations for an issue sequence.

    Every applicable message is included, in this order: security notice,
    refactor suggestion, formatter suggestion, ready-for-review.

    Args:
        issues: Aggregated issues

    Returns:
        Recommendation strings
    """
    recommendations = []

    has_security_errors = any(
        issue.category == Category.SECURITY and issue.severity == Severity.ERROR
        for issue in issues
    )
    semantic_count = sum(1 for issue in issues if issue.category == Category.SEMANTIC)
    style_count = sum(1 for issue in issues if issue.category == Category.STYLE)

    if has_security_errors:
        recommendations.append(SECURITY_NOTICE)

    if semantic_count > SEMANTIC_ISSUE_LIMIT:
        recommendations.append(REFACTOR_SUGGESTION)

    if style_count > STYLE_ISSUE_LIMIT:
        recommendations.append(FORMATTER_SUGGESTION)

    if not issues:
        recommendations.append(READY_FOR_REVIEW)

    return recommendations
