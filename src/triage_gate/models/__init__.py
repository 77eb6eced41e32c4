"""Data models for the triage gate."""

from .triage_models import (
    CATEGORY_ORDER,
    Category,
    Issue,
    LintRules,
    SecurityConfig,
    SemanticConfig,
    Severity,
    StyleConfig,
    TriageConfig,
    TriageResult,
    Verdict,
)

__all__ = [
    "CATEGORY_ORDER",
    "Category",
    "Issue",
    "LintRules",
    "SecurityConfig",
    "SemanticConfig",
    "Severity",
    "StyleConfig",
    "TriageConfig",
    "TriageResult",
    "Verdict",
]
