"""Triage gate CLI entry point."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from dotenv import load_dotenv
from rich.console import Console

from ..config_manager import load_config, merge_config
from ..diff_source import DEFAULT_BASE, GitDiffSource, PullRequestDiffSource
from ..exceptions import ConfigurationError
from ..gate_engine import TriageEngine
from ..models.triage_models import TriageResult, Verdict
from ..reporters import ConsoleReporter, JsonReporter, MarkdownReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def exit_code_for(result: TriageResult, shadow: bool) -> int:
    """FAIL exits non-zero unless shadow mode is active."""
    if result.verdict == Verdict.FAIL and not shadow:
        return EXIT_FAILED
    return EXIT_OK


@click.command()
@click.argument("files", nargs=-1)
@click.option(
    "--pr", "pr",
    help="Pull request number whose changed files are triaged",
)
@click.option(
    "--diff", "base",
    help=f"Diff base for changed files (default: {DEFAULT_BASE})",
)
@click.option(
    "--shadow",
    is_flag=True,
    envvar="TRIAGE_GATE_SHADOW",
    help="Report the verdict but never fail the build",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    envvar="TRIAGE_GATE_CONFIG",
    help="Configuration file (YAML or JSON)",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Repository root",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["console", "json", "markdown"]),
    default="console",
    show_default=True,
    help="Output format written to stdout",
)
@click.option(
    "--output", "output_path",
    type=click.Path(dir_okay=False),
    help="Also write the JSON result document to this path",
)
@click.option(
    "--strict-diff",
    is_flag=True,
    help="Fail instead of analyzing nothing when the diff cannot be retrieved",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def main(
    files: Tuple[str, ...],
    pr: Optional[str],
    base: Optional[str],
    shadow: bool,
    config_path: Optional[str],
    root: str,
    output_format: str,
    output_path: Optional[str],
    strict_diff: bool,
    verbose: bool,
) -> None:
    """
    Triage changed files and report a PASS/WARN/FAIL verdict.

    Triage the last commit:
        triage-gate

    Triage against a branch:
        triage-gate --diff origin/main

    Triage a pull request without blocking it:
        triage-gate --pr 42 --shadow

    Triage explicit files:
        triage-gate src/app.ts src/util.ts
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if pr and base:
        click.echo("Usage error: --pr and --diff are mutually exclusive", err=True)
        sys.exit(EXIT_FAILED)

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    try:
        result = asyncio.run(run_triage(
            files=list(files) or None,
            pr=pr,
            base=base,
            shadow=shadow,
            config_path=config_path,
            root=root,
            strict_diff=strict_diff,
        ))
        if output_path:
            JsonReporter().save_report(result, output_path)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(EXIT_FAILED)
    except Exception as e:
        if verbose:
            logger.exception("Triage failed")
        click.echo(f"Triage failed: {e}", err=True)
        sys.exit(EXIT_FAILED)

    if output_format == "json":
        click.echo(JsonReporter().generate_report(result))
    elif output_format == "markdown":
        click.echo(MarkdownReporter().generate_report(result), nl=False)
    else:
        ConsoleReporter(Console()).render(result)

    if shadow and result.verdict == Verdict.FAIL:
        click.echo("Shadow mode: FAIL verdict reported without failing", err=True)

    sys.exit(exit_code_for(result, shadow))


async def run_triage(
    files: Optional[list] = None,
    pr: Optional[str] = None,
    base: Optional[str] = None,
    shadow: bool = False,
    config_path: Optional[str] = None,
    root: str = ".",
    strict_diff: bool = False,
) -> TriageResult:
    """
    Load configuration and run the engine for one CLI invocation.

    Raises:
        ConfigurationError: Before any analysis when the config is malformed
    """
    config = merge_config(load_config(config_path, root=root))

    if pr:
        diff_source = PullRequestDiffSource(pr, repo_path=root)
    else:
        diff_source = GitDiffSource(repo_path=root)

    engine = TriageEngine(
        diff_source=diff_source,
        root=root,
        fail_on_diff_error=strict_diff,
    )
    return await engine.triage(files=files, base=base, config=config, shadow=shadow)
