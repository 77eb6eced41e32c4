"""Command-line interface for the triage gate."""

from .app import exit_code_for, main

__all__ = ["exit_code_for", "main"]
