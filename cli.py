#!/usr/bin/env python
"""
Triage gate CLI entry point.

Usage:
    python cli.py                        # Triage changes since HEAD~1
    python cli.py --diff origin/main     # Triage changes against a base
    python cli.py --pr 42 --shadow       # Triage a pull request, never fail
    python cli.py src/app.ts             # Triage explicit files
"""

from triage_gate.cli.app import main

if __name__ == "__main__":
    main()
