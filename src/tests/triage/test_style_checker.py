"""Tests for the style checker."""

import pytest

from triage_gate.analyzers.style_checker import StyleChecker
from triage_gate.file_reader import InMemoryFileReader
from triage_gate.models.triage_models import Category, LintRules, Severity, StyleConfig


def check(files, paths=None, config=None):
    checker = StyleChecker(InMemoryFileReader(files))
    return checker.analyze(list(paths or files), config or StyleConfig())


class TestLineLength:
    """Tests for the line length rule."""

    @pytest.mark.asyncio
    async def test_long_line(self):
        """Test lines over 120 characters are flagged with their length."""
        issues = await check({"src/app.ts": "ok\n" + "x" * 130})

        assert len(issues) == 1
        assert issues[0].category == Category.STYLE
        assert issues[0].severity == Severity.WARNING
        assert issues[0].line == 2
        assert issues[0].message == "Line exceeds 120 characters (130)"
        assert issues[0].fix is None

    @pytest.mark.asyncio
    async def test_exactly_at_limit(self):
        """Test a 120 character line is allowed."""
        assert await check({"src/app.ts": "x" * 120}) == []


class TestDebugOutput:
    """Tests for console debug output detection."""

    @pytest.mark.asyncio
    async def test_console_log_in_source(self):
        """Test console.log and console.debug are flagged."""
        issues = await check({"src/app.js": "console.log('a');\nconsole.debug('b');\nconsole.error('c');"})

        assert [i.line for i in issues] == [1, 2]
        assert issues[0].message == "console.log should not be in production code"
        assert issues[0].fix == "Use a proper logging library"

    @pytest.mark.asyncio
    async def test_console_log_in_tests_allowed(self):
        """Test files named as tests may print."""
        issues = await check({
            "src/app.test.js": "console.log('a');",
            "src/app.spec.ts": "console.log('a');",
        })

        assert issues == []


class TestLegacyVar:
    """Tests for legacy var declarations."""

    @pytest.mark.asyncio
    async def test_var_declaration(self):
        """Test var declarations are flagged."""
        issues = await check({"a.js": "var count = 1;\nlet variable = 2;\nconst invariant = 3;"})

        assert len(issues) == 1
        assert issues[0].line == 1
        assert issues[0].message == "Prefer const or let over var"

    @pytest.mark.asyncio
    async def test_var_flagged_in_tests(self):
        """Test the var rule applies to test files as well."""
        issues = await check({"a.test.js": "var x = 1;"})

        assert len(issues) == 1


class TestFileSelection:
    """Tests for file filtering and ordering."""

    @pytest.mark.asyncio
    async def test_non_source_files_skipped(self):
        """Test files without a source extension are ignored."""
        issues = await check({
            "README.md": "var x = 1; console.log(x); " + "y" * 130,
            "script.py": "var = 1",
        })

        assert issues == []

    @pytest.mark.asyncio
    async def test_recognized_extensions(self):
        """Test every JavaScript and TypeScript extension is checked."""
        files = {
            f"mod{ext}": "var x = 1;"
            for ext in (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")
        }

        issues = await check(files)

        assert len(issues) == 6

    @pytest.mark.asyncio
    async def test_rules_in_line_order(self):
        """Test one line can trigger every rule, reported in rule order."""
        line = "var x = 1; console.log(x); // " + "z" * 100

        issues = await check({"a.ts": line})

        assert [i.message for i in issues] == [
            f"Line exceeds 120 characters ({len(line)})",
            "console.log should not be in production code",
            "Prefer const or let over var",
        ]

    @pytest.mark.asyncio
    async def test_lint_rules_do_not_change_results(self):
        """Test every lint preset runs the same rules."""
        files = {"a.ts": "var x = 1;\nconsole.log(x);"}

        strict = await check(files)
        relaxed = await check(files, config=StyleConfig(lint_rules=LintRules.RELAXED))
        unformatted = await check(files, config=StyleConfig(enforce_format=False))

        assert strict == relaxed == unformatted

    @pytest.mark.asyncio
    async def test_missing_file_skipped(self):
        """Test missing source files are skipped."""
        issues = await check({"b.ts": "var y;"}, paths=["a.ts", "b.ts"])

        assert [i.file for i in issues] == ["b.ts"]
