"""Triage engine orchestrating all analyzers.

PATTERN: Service orchestration with parallel analyzer execution
CRITICAL: Configuration is merged once, before any analyzer runs
GOTCHA: A failed diff yields an empty file set unless fail_on_diff_error is set
"""

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .analyzers import BaseAnalyzer, default_analyzers
from .config_manager import merge_config
from .diff_source import DEFAULT_BASE, DiffSource, GitDiffSource
from .exceptions import DiffRetrievalError
from .file_reader import FileReader, LocalFileReader
from .models.triage_models import Category, Issue, TriageConfig, TriageResult
from .patterns import DEFAULT_MANIFEST
from .recommendations import generate_recommendations
from .scorer import aggregate, calculate_score, determine_verdict

logger = logging.getLogger(__name__)

ConfigInput = Optional[Union[Mapping[str, Any], TriageConfig]]


class TriageEngine:
    """
    Runs every registered analyzer over a file set and scores the result.

    PATTERN: Analyzers are registered in a list and invoked uniformly
    CRITICAL: Aggregation order is fixed by category, not completion time
    GOTCHA: Finding problems is a normal FAIL verdict, not an exception

    The engine resolves the file set (explicit list or version-control
    diff), merges caller configuration over the defaults, runs the
    analyzers concurrently, and assembles an immutable TriageResult.
    """

    def __init__(
        self,
        analyzers: Optional[Sequence[BaseAnalyzer]] = None,
        file_reader: Optional[FileReader] = None,
        diff_source: Optional[DiffSource] = None,
        root: Union[str, Path] = ".",
        manifest_path: str = DEFAULT_MANIFEST,
        fail_on_diff_error: bool = False,
    ):
        """
        Initialize triage engine.

        Args:
            analyzers: Analyzer set (defaults to semantic, security, style)
            file_reader: Reader shared by the default analyzers
            diff_source: Changed-file collaborator used when no files are given
            root: Repository root for the default reader and diff source
            manifest_path: Dependency manifest relative to the root
            fail_on_diff_error: Raise instead of analyzing nothing when the diff fails
        """
        self.logger = logger
        self.root = Path(root)
        self.file_reader = file_reader or LocalFileReader(self.root)
        self.analyzers: List[BaseAnalyzer] = list(
            analyzers
            if analyzers is not None
            else default_analyzers(self.file_reader, manifest_path=manifest_path)
        )
        self.diff_source = diff_source or GitDiffSource(repo_path=str(self.root))
        self.fail_on_diff_error = fail_on_diff_error

        categories = [analyzer.category for analyzer in self.analyzers]
        if len(set(categories)) != len(categories):
            raise ValueError(f"Duplicate analyzer categories: {categories}")

    async def triage(
        self,
        files: Optional[Sequence[str]] = None,
        base: Optional[str] = None,
        config: ConfigInput = None,
        shadow: bool = False,
    ) -> TriageResult:
        """
        Triage a set of changed files.

        Args:
            files: Repository-relative paths; taken from the diff when omitted
            base: Diff base used when files are omitted (default HEAD~1)
            config: Partial configuration merged over the defaults
            shadow: Advisory flag for the caller, does not affect the result

        Returns:
            Verdict, score, ordered issues and recommendations

        Raises:
            ConfigurationError: If the configuration is malformed
            DiffRetrievalError: If the diff fails and fail_on_diff_error is set
        """
        start_time = datetime.now()

        # Merge first so a bad config never produces partial analysis
        triage_config = merge_config(config)

        if files is None:
            file_list = await self._resolve_changed_files(base or DEFAULT_BASE)
        else:
            file_list = list(files)

        self.logger.info(
            f"Triaging {len(file_list)} files"
            + (" (shadow mode)" if shadow else "")
        )

        results = await self._run_analyzers(file_list, triage_config)
        issues = aggregate(results)

        result = TriageResult(
            verdict=determine_verdict(issues),
            score=calculate_score(issues),
            issues=tuple(issues),
            recommendations=tuple(generate_recommendations(issues)),
            analyzed_files=len(file_list),
            timestamp=datetime.now(timezone.utc),
        )

        duration = (datetime.now() - start_time).total_seconds()
        self.logger.info(
            f"Triage completed in {duration:.2f}s "
            f"(verdict: {result.verdict.value}, score: {result.score}, issues: {len(issues)})"
        )
        return result

    async def _resolve_changed_files(self, base: str) -> List[str]:
        try:
            return await self.diff_source.changed_files(base)
        except DiffRetrievalError as e:
            if self.fail_on_diff_error:
                raise
            self.logger.error(f"Failed to get changed files: {e}")
            return []

    async def _run_analyzers(
        self, files: List[str], config: TriageConfig
    ) -> Dict[Category, List[Issue]]:
        tasks = [
            analyzer.analyze(files, config.section(analyzer.category))
            for analyzer in self.analyzers
        ]
        outputs = await asyncio.gather(*tasks)
        return {
            analyzer.category: issues
            for analyzer, issues in zip(self.analyzers, outputs)
        }


async def triage(
    files: Optional[Sequence[str]] = None,
    base: Optional[str] = None,
    config: ConfigInput = None,
    shadow: bool = False,
    root: Union[str, Path] = ".",
) -> TriageResult:
    """Triage with the default analyzers rooted at ``root``."""
    engine = TriageEngine(root=root)
    return await engine.triage(files=files, base=base, config=config, shadow=shadow)
