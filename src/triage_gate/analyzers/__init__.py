"""Triage analyzers.

Each analyzer covers one issue category:
- Semantic: forbidden patterns, nesting depth, invented package names
- Security: committed secrets and forbidden dependencies
- Style: line length, debug output, legacy declarations
"""

from typing import List, Optional

from ..file_reader import FileReader
from ..patterns import DEFAULT_MANIFEST
from .base import BaseAnalyzer
from .semantic_analyzer import SemanticAnalyzer
from .security_scanner import SecurityScanner
from .style_checker import StyleChecker


def default_analyzers(
    file_reader: Optional[FileReader] = None,
    manifest_path: str = DEFAULT_MANIFEST,
) -> List[BaseAnalyzer]:
    """Build the standard analyzer set sharing one file reader."""
    return [
        SemanticAnalyzer(file_reader),
        SecurityScanner(file_reader, manifest_path=manifest_path),
        StyleChecker(file_reader),
    ]


__all__ = [
    "BaseAnalyzer",
    "SemanticAnalyzer",
    "SecurityScanner",
    "StyleChecker",
    "default_analyzers",
]
