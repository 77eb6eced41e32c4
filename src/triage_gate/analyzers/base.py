"""Base classes for triage analyzers."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..exceptions import FileReadError
from ..file_reader import FileReader, LocalFileReader
from ..models.triage_models import Category, Issue, Severity

logger = logging.getLogger(__name__)


class BaseAnalyzer(ABC):
    """
    Abstract base class for triage analyzers.

    PATTERN: analyze(files, config_slice) -> issues, no shared mutable state
    CRITICAL: A file that cannot be read is skipped, never fatal
    GOTCHA: Issue order must follow file then line discovery order
    """

    category: Category

    def __init__(self, file_reader: Optional[FileReader] = None):
        """
        Initialize base analyzer.

        Args:
            file_reader: Text reader for repository files
        """
        self.file_reader = file_reader or LocalFileReader()
        self.logger = logger

    @abstractmethod
    async def analyze(self, files: Sequence[str], config) -> List[Issue]:
        """
        Analyze files and report issues.

        Args:
            files: Repository-relative paths
            config: This analyzer's configuration section

        Returns:
            Issues in discovery order
        """

    def _read_lines(self, path: str) -> Optional[List[str]]:
        """Return the file split into lines, or None when it cannot be read."""
        try:
            content = self.file_reader.read_text(path)
        except FileReadError as e:
            self.logger.debug(f"Skipping {path}: {e.reason}")
            return None
        return content.split("\n")

    def _issue(
        self,
        severity: Severity,
        file: str,
        message: str,
        line: Optional[int] = None,
        fix: Optional[str] = None,
    ) -> Issue:
        return Issue(
            category=self.category,
            severity=severity,
            file=file,
            line=line,
            message=message,
            fix=fix,
        )
