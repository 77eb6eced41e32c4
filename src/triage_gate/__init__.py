"""Multi-analyzer code-quality gate.

Runs semantic, security and style analyzers over a set of changed files,
scores the findings and renders a PASS/WARN/FAIL verdict.
"""

from .exceptions import ConfigurationError, DiffRetrievalError, TriageError
from .gate_engine import TriageEngine, triage
from .models.triage_models import Issue, TriageConfig, TriageResult, Verdict

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DiffRetrievalError",
    "Issue",
    "TriageConfig",
    "TriageEngine",
    "TriageError",
    "TriageResult",
    "Verdict",
    "triage",
]
