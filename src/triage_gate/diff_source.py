"""Changed-file discovery from version control.

PATTERN: Subprocess collaborators behind one async interface
CRITICAL: Every failure surfaces as DiffRetrievalError
GOTCHA: Deleted files are listed too, analyzers skip them as unreadable
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .exceptions import DiffRetrievalError

logger = logging.getLogger(__name__)

DEFAULT_BASE = "HEAD~1"


class DiffSource(ABC):
    """Source of the changed-file list for a triage run."""

    @abstractmethod
    async def changed_files(self, base: Optional[str] = None) -> List[str]:
        """
        List repository-relative paths changed against ``base``.

        Raises:
            DiffRetrievalError: If the list cannot be obtained
        """


class _CommandDiffSource(DiffSource):
    """Runs a command that prints one changed path per line."""

    def __init__(self, repo_path: str = ".", timeout: float = 60):
        self.repo_path = repo_path
        self.timeout = timeout
        self.logger = logger

    async def _run(self, cmd: Sequence[str]) -> List[str]:
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=self.repo_path,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise DiffRetrievalError(f"{cmd[0]} is not installed") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise DiffRetrievalError(
                f"{' '.join(cmd)} timed out after {self.timeout}s"
            ) from e

        if process.returncode != 0:
            raise DiffRetrievalError(
                f"{' '.join(cmd)} exited with {process.returncode}: "
                f"{stderr.decode(errors='replace').strip()}"
            )

        files = parse_name_only(stdout.decode(errors="replace"))
        self.logger.debug(f"{' '.join(cmd)} listed {len(files)} files")
        return files


class GitDiffSource(_CommandDiffSource):
    """Changed files from ``git diff --name-only <base>``."""

    async def changed_files(self, base: Optional[str] = None) -> List[str]:
        return await self._run(["git", "diff", "--name-only", base or DEFAULT_BASE])


class PullRequestDiffSource(_CommandDiffSource):
    """Changed files of a hosted pull request, via the ``gh`` CLI."""

    def __init__(self, pr: str, repo_path: str = ".", timeout: float = 60):
        super().__init__(repo_path=repo_path, timeout=timeout)
        self.pr = pr

    async def changed_files(self, base: Optional[str] = None) -> List[str]:
        # The pull request defines its own base
        return await self._run(["gh", "pr", "diff", str(self.pr), "--name-only"])


def parse_name_only(output: str) -> List[str]:
    """Split ``--name-only`` output into paths, dropping blank lines."""
    return [line.strip() for line in output.splitlines() if line.strip()]
