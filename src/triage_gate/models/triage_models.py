"""Data models for the triage gate.

This module contains the Pydantic models shared by every analyzer, the scorer,
the reporters and the CLI: issues, verdicts, the layered triage configuration
and the final triage result.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..patterns import DEFAULT_FORBIDDEN_PACKAGES, DEFAULT_FORBIDDEN_PATTERNS


class Category(str, Enum):
    """Analyzer that produced an issue."""

    SEMANTIC = "semantic"
    SECURITY = "security"
    STYLE = "style"


# Aggregation order of analyzer output
CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.SEMANTIC,
    Category.SECURITY,
    Category.STYLE,
)


class Severity(str, Enum):
    """Issue severity levels, ordered error > warning > info."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.ERROR: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
}


class Verdict(str, Enum):
    """Overall gate decision."""

    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


class LintRules(str, Enum):
    """Lint rule presets accepted by the style configuration."""

    STRICT = "strict"
    STANDARD = "standard"
    RELAXED = "relaxed"


class Issue(BaseModel):
    """One finding produced by an analyzer."""

    model_config = ConfigDict(frozen=True)

    category: Category = Field(description="Analyzer that produced the issue")
    severity: Severity = Field(description="Issue severity")
    file: str = Field(description="Path relative to the repository root")
    line: Optional[int] = Field(
        default=None,
        ge=1,
        description="1-based line number, absent for file-scoped findings",
    )
    message: str = Field(description="Human-readable description")
    fix: Optional[str] = Field(default=None, description="Suggested remediation")

    @property
    def location(self) -> str:
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"


class _ConfigSection(BaseModel):
    """Base for config sections: camelCase keys in files, immutable in code."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class SemanticConfig(_ConfigSection):
    """Semantic analyzer configuration."""

    max_complexity: int = Field(
        default=20,
        ge=0,
        alias="maxComplexity",
        description="Nesting-depth budget, warnings fire above a quarter of it",
    )
    forbidden_patterns: Tuple[str, ...] = Field(
        default=DEFAULT_FORBIDDEN_PATTERNS,
        alias="forbiddenPatterns",
        description="Regex sources matched case-insensitively against each line",
    )

    @field_validator("forbidden_patterns")
    @classmethod
    def _patterns_compile(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for pattern in value:
            try:
                re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise ValueError(f"invalid forbidden pattern {pattern!r}: {e}") from e
        return value


class SecurityConfig(_ConfigSection):
    """Security scanner configuration."""

    scan_secrets: bool = Field(default=True, alias="scanSecrets")
    check_dependencies: bool = Field(default=True, alias="checkDependencies")
    forbidden_packages: Tuple[str, ...] = Field(
        default=DEFAULT_FORBIDDEN_PACKAGES,
        alias="forbiddenPackages",
        description="Package names that must not be declared in the manifest",
    )

    @field_validator("forbidden_packages")
    @classmethod
    def _dedupe_packages(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # Set semantics with a stable iteration order
        return tuple(dict.fromkeys(value))


class StyleConfig(_ConfigSection):
    """Style checker configuration.

    Both fields are accepted for future rule selection; the current ruleset
    is the same for every value.
    """

    enforce_format: bool = Field(default=True, alias="enforceFormat")
    lint_rules: LintRules = Field(default=LintRules.STRICT, alias="lintRules")


class TriageConfig(BaseModel):
    """Complete, immutable triage configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    semantic: SemanticConfig = Field(default_factory=SemanticConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)

    def section(self, category: Category) -> _ConfigSection:
        """Return the config slice consumed by the analyzer of ``category``."""
        return getattr(self, category.value)


class TriageResult(BaseModel):
    """Outcome of one triage run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verdict: Verdict = Field(description="Overall gate decision")
    score: int = Field(ge=0, le=100, description="Quality score")
    issues: Tuple[Issue, ...] = Field(
        default=(),
        description="Issues ordered semantic, security, style",
    )
    recommendations: Tuple[str, ...] = Field(default=())
    analyzed_files: int = Field(
        ge=0,
        alias="analyzedFiles",
        description="Number of files requested for analysis",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @property
    def passed(self) -> bool:
        return self.verdict != Verdict.FAIL

    def count_by_severity(self) -> Dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts

    def count_by_category(self) -> Dict[Category, int]:
        counts = {category: 0 for category in CATEGORY_ORDER}
        for issue in self.issues:
            counts[issue.category] += 1
        return counts

    def to_document(self) -> Dict[str, Any]:
        """JSON-ready dictionary with camelCase keys and unset optionals omitted."""
        return {
            "verdict": self.verdict.value,
            "score": self.score,
            "issues": [
                issue.model_dump(mode="json", exclude_none=True)
                for issue in self.issues
            ],
            "recommendations": list(self.recommendations),
            "analyzedFiles": self.analyzed_files,
            "timestamp": self.timestamp.isoformat(),
        }
