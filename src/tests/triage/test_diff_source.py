"""Tests for changed-file discovery."""

import asyncio
import pytest
from unittest.mock import AsyncMock, Mock, patch

from triage_gate.diff_source import (
    GitDiffSource,
    PullRequestDiffSource,
    parse_name_only,
)
from triage_gate.exceptions import DiffRetrievalError

SUBPROCESS = "triage_gate.diff_source.asyncio.create_subprocess_exec"


def make_process(stdout=b"", stderr=b"", returncode=0):
    process = Mock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.returncode = returncode
    process.kill = Mock()
    process.wait = AsyncMock(return_value=-9)
    return process


class TestParseNameOnly:
    """Tests for name-only output parsing."""

    def test_splits_lines(self):
        """Test one path per line with blanks dropped."""
        output = "src/app.ts\n\nsrc/util.ts\n  \n"
        assert parse_name_only(output) == ["src/app.ts", "src/util.ts"]

    def test_empty_output(self):
        """Test no changes yields an empty list."""
        assert parse_name_only("") == []


class TestGitDiffSource:
    """Tests for the git diff collaborator."""

    @pytest.mark.asyncio
    async def test_default_base(self):
        """Test HEAD~1 is used when no base is given."""
        process = make_process(stdout=b"a.ts\nb.ts\n")
        with patch(SUBPROCESS, AsyncMock(return_value=process)) as mock_exec:
            files = await GitDiffSource(repo_path="/repo").changed_files()

        assert files == ["a.ts", "b.ts"]
        args, kwargs = mock_exec.call_args
        assert args == ("git", "diff", "--name-only", "HEAD~1")
        assert kwargs["cwd"] == "/repo"

    @pytest.mark.asyncio
    async def test_custom_base(self):
        """Test an explicit base is forwarded to git."""
        process = make_process(stdout=b"")
        with patch(SUBPROCESS, AsyncMock(return_value=process)) as mock_exec:
            files = await GitDiffSource().changed_files("origin/main")

        assert files == []
        assert mock_exec.call_args[0][-1] == "origin/main"

    @pytest.mark.asyncio
    async def test_non_zero_exit(self):
        """Test a failing git command raises with its stderr."""
        process = make_process(stderr=b"fatal: bad revision", returncode=128)
        with patch(SUBPROCESS, AsyncMock(return_value=process)):
            with pytest.raises(DiffRetrievalError) as exc_info:
                await GitDiffSource().changed_files()

        assert "128" in str(exc_info.value)
        assert "bad revision" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_git_not_installed(self):
        """Test a missing executable raises DiffRetrievalError."""
        with patch(SUBPROCESS, AsyncMock(side_effect=FileNotFoundError("git"))):
            with pytest.raises(DiffRetrievalError, match="git is not installed"):
                await GitDiffSource().changed_files()

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self):
        """Test a hung command is killed and reported."""
        async def hang():
            await asyncio.sleep(10)

        process = make_process()
        process.communicate = hang
        with patch(SUBPROCESS, AsyncMock(return_value=process)):
            with pytest.raises(DiffRetrievalError, match="timed out"):
                await GitDiffSource(timeout=0.01).changed_files()

        process.kill.assert_called_once()
        process.wait.assert_awaited_once()


class TestPullRequestDiffSource:
    """Tests for the pull request collaborator."""

    @pytest.mark.asyncio
    async def test_pr_command(self):
        """Test the PR number is passed to gh and base is ignored."""
        process = make_process(stdout=b"src/app.ts\n")
        with patch(SUBPROCESS, AsyncMock(return_value=process)) as mock_exec:
            files = await PullRequestDiffSource("42").changed_files("origin/main")

        assert files == ["src/app.ts"]
        assert mock_exec.call_args[0] == ("gh", "pr", "diff", "42", "--name-only")

    @pytest.mark.asyncio
    async def test_gh_not_installed(self):
        """Test a missing gh executable raises DiffRetrievalError."""
        with patch(SUBPROCESS, AsyncMock(side_effect=FileNotFoundError("gh"))):
            with pytest.raises(DiffRetrievalError, match="gh is not installed"):
                await PullRequestDiffSource(7).changed_files()
