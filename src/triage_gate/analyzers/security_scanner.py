"""Secret and dependency security scanning.

PATTERN: Signature scan per line plus a manifest dependency check
CRITICAL: Every (signature, line) match is its own error
GOTCHA: A missing manifest means nothing to check, an unparsable one is reported as info
"""

import json
import logging
from typing import Dict, List, Optional, Sequence

from ..exceptions import FileNotFound, FileReadError
from ..file_reader import FileReader
from ..models.triage_models import Category, Issue, SecurityConfig, Severity
from ..patterns import DEFAULT_MANIFEST, MANIFEST_DEPENDENCY_KEYS, SECRET_SIGNATURES
from .base import BaseAnalyzer

logger = logging.getLogger(__name__)


class SecurityScanner(BaseAnalyzer):
    """
    Scanner for committed credentials and forbidden dependencies.

    The manifest is read through the same file reader as the sources, so
    its path is relative to the repository root.
    """

    category = Category.SECURITY

    def __init__(
        self,
        file_reader: Optional[FileReader] = None,
        manifest_path: str = DEFAULT_MANIFEST,
    ):
        """
        Initialize security scanner.

        Args:
            file_reader: Text reader for repository files
            manifest_path: Dependency manifest relative to the repository root
        """
        super().__init__(file_reader)
        self.manifest_path = manifest_path

    async def analyze(
        self, files: Sequence[str], config: SecurityConfig
    ) -> List[Issue]:
        issues: List[Issue] = []

        if config.scan_secrets:
            for path in files:
                lines = self._read_lines(path)
                if lines is None:
                    continue
                issues.extend(self._scan_secrets(path, lines))

        if config.check_dependencies:
            issues.extend(self._check_dependencies(config.forbidden_packages))

        self.logger.debug(f"Security scan found {len(issues)} issues")
        return issues

    def _scan_secrets(self, path: str, lines: List[str]) -> List[Issue]:
        issues = []
        for signature in SECRET_SIGNATURES:
            for idx, line in enumerate(lines):
                if signature.pattern.search(line):
                    issues.append(self._issue(
                        Severity.ERROR,
                        path,
                        f"Potential secret or credential detected ({signature.name})",
                        line=idx + 1,
                        fix="Remove secret and use environment variables",
                    ))
        return issues

    def _check_dependencies(self, forbidden_packages: Sequence[str]) -> List[Issue]:
        dependencies = self._load_manifest_dependencies()
        if dependencies is None:
            return [self._issue(
                Severity.INFO,
                self.manifest_path,
                "Dependency check skipped: manifest could not be parsed",
                fix="Fix the manifest so declared dependencies can be checked",
            )]

        return [
            self._issue(
                Severity.ERROR,
                self.manifest_path,
                f"Forbidden package detected: {package}",
                fix="Remove this package - it has known security issues",
            )
            for package in forbidden_packages
            if package in dependencies
        ]

    def _load_manifest_dependencies(self) -> Optional[Dict[str, str]]:
        """
        Merge runtime and development dependencies from the manifest.

        Returns:
            Declared dependencies (empty when there is no manifest), or
            None when the manifest exists but cannot be parsed
        """
        try:
            content = self.file_reader.read_text(self.manifest_path)
        except FileNotFound:
            self.logger.debug(f"No manifest at {self.manifest_path}, dependency check has nothing to do")
            return {}
        except FileReadError as e:
            self.logger.warning(f"Manifest unreadable, dependency check skipped: {e}")
            return None

        try:
            manifest = json.loads(content)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Failed to parse {self.manifest_path}: {e}")
            return None

        if not isinstance(manifest, dict):
            self.logger.warning(f"{self.manifest_path} is not a JSON object")
            return None

        merged: Dict[str, str] = {}
        for key in MANIFEST_DEPENDENCY_KEYS:
            section = manifest.get(key) or {}
            if not isinstance(section, dict):
                self.logger.warning(f"{self.manifest_path}: '{key}' is not an object")
                return None
            merged.update(section)
        return merged
