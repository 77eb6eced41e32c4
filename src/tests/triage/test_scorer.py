"""Tests for aggregation, scoring and verdict rules."""

import pytest

from triage_gate.models.triage_models import Category, Issue, Severity, Verdict
from triage_gate.recommendations import (
    FORMATTER_SUGGESTION,
    READY_FOR_REVIEW,
    REFACTOR_SUGGESTION,
    SECURITY_NOTICE,
    generate_recommendations,
)
from triage_gate.scorer import aggregate, calculate_score, determine_verdict


def make_issue(severity=Severity.WARNING, category=Category.SEMANTIC, line=1):
    return Issue(
        category=category,
        severity=severity,
        file="src/app.ts",
        line=line,
        message=f"{category.value} {severity.value}",
    )


def issues_of(errors=0, warnings=0, infos=0, category=Category.SEMANTIC):
    return (
        [make_issue(Severity.ERROR, category) for _ in range(errors)]
        + [make_issue(Severity.WARNING, category) for _ in range(warnings)]
        + [make_issue(Severity.INFO, category) for _ in range(infos)]
    )


class TestAggregate:
    """Tests for issue aggregation."""

    def test_fixed_category_order(self):
        """Test output order is semantic, security, style regardless of input order."""
        style = [make_issue(category=Category.STYLE, line=1)]
        security = [make_issue(category=Category.SECURITY, line=2)]
        semantic = [make_issue(category=Category.SEMANTIC, line=3)]

        issues = aggregate({
            Category.STYLE: style,
            Category.SECURITY: security,
            Category.SEMANTIC: semantic,
        })

        assert [i.category for i in issues] == [
            Category.SEMANTIC,
            Category.SECURITY,
            Category.STYLE,
        ]

    def test_preserves_analyzer_order(self):
        """Test issues within a category keep their discovery order."""
        semantic = [make_issue(line=n) for n in (5, 1, 3)]

        issues = aggregate({Category.SEMANTIC: semantic})

        assert [i.line for i in issues] == [5, 1, 3]

    def test_missing_categories(self):
        """Test absent analyzers contribute nothing."""
        assert aggregate({}) == []


class TestScore:
    """Tests for the score formula."""

    def test_no_issues(self):
        """Test a clean run scores 100."""
        assert calculate_score([]) == 100

    @pytest.mark.parametrize(
        "errors,warnings,infos,expected",
        [
            (1, 0, 0, 80),
            (0, 1, 0, 95),
            (0, 0, 1, 99),
            (1, 2, 3, 67),
            (0, 4, 0, 80),
            (5, 0, 0, 0),
            (6, 3, 0, 0),
        ],
    )
    def test_penalties(self, errors, warnings, infos, expected):
        """Test 20/5/1 penalties with a floor of zero."""
        assert calculate_score(issues_of(errors, warnings, infos)) == expected

    def test_monotonic_in_errors(self):
        """Test adding an error never increases the score."""
        issues = issues_of(errors=1, warnings=3, infos=2)
        previous = calculate_score(issues)

        for _ in range(10):
            issues.append(make_issue(Severity.ERROR))
            score = calculate_score(issues)
            assert score <= previous
            previous = score


class TestVerdict:
    """Tests for the verdict rule."""

    def test_pass(self):
        """Test no issues pass."""
        assert determine_verdict([]) == Verdict.PASS

    def test_infos_only_pass(self):
        """Test info findings alone still pass."""
        assert determine_verdict(issues_of(infos=30)) == Verdict.PASS

    def test_warn(self):
        """Test warnings without errors warn."""
        assert determine_verdict(issues_of(warnings=1, infos=2)) == Verdict.WARN

    def test_fail(self):
        """Test any error fails."""
        assert determine_verdict(issues_of(errors=1, warnings=5)) == Verdict.FAIL

    def test_verdict_independent_of_score(self):
        """Test many warnings with a zero score still only warn."""
        issues = issues_of(warnings=40)

        assert calculate_score(issues) == 0
        assert determine_verdict(issues) == Verdict.WARN

    def test_fail_is_sticky(self):
        """Test adding errors to a failing sequence keeps it failing."""
        issues = issues_of(errors=1)
        for _ in range(5):
            issues.append(make_issue(Severity.ERROR))
            assert determine_verdict(issues) == Verdict.FAIL


class TestRecommendations:
    """Tests for recommendation generation."""

    def test_clean_run(self):
        """Test no issues yields only the ready-for-review message."""
        assert generate_recommendations([]) == [READY_FOR_REVIEW]

    def test_security_error(self):
        """Test a security error yields the critical notice."""
        issues = issues_of(errors=1, category=Category.SECURITY)
        assert generate_recommendations(issues) == [SECURITY_NOTICE]

    def test_security_warning_not_critical(self):
        """Test non-error security findings do not trigger the notice."""
        issues = issues_of(warnings=1, infos=1, category=Category.SECURITY)
        assert generate_recommendations(issues) == []

    def test_non_security_error_not_critical(self):
        """Test errors from other analyzers do not trigger the notice."""
        issues = issues_of(errors=1, category=Category.STYLE)
        assert generate_recommendations(issues) == []

    def test_semantic_threshold(self):
        """Test refactoring is suggested above three semantic issues."""
        assert generate_recommendations(issues_of(warnings=3)) == []
        assert generate_recommendations(issues_of(warnings=4)) == [REFACTOR_SUGGESTION]

    def test_style_threshold(self):
        """Test the formatter is suggested above five style issues."""
        assert generate_recommendations(issues_of(warnings=5, category=Category.STYLE)) == []
        assert generate_recommendations(issues_of(warnings=6, category=Category.STYLE)) == [
            FORMATTER_SUGGESTION,
        ]

    def test_all_triggers_in_order(self):
        """Test co-occurring triggers are all included in fixed order."""
        issues = (
            issues_of(warnings=6, category=Category.STYLE)
            + issues_of(errors=1, category=Category.SECURITY)
            + issues_of(infos=4, category=Category.SEMANTIC)
        )

        assert generate_recommendations(issues) == [
            SECURITY_NOTICE,
            REFACTOR_SUGGESTION,
            FORMATTER_SUGGESTION,
        ]
