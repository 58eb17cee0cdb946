"""Allow ``python -m glitch_export`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m glitch_export`` behaves identically to the
``glitch-project-export`` console script.
"""

from __future__ import annotations

from glitch_export.cli.app import cli

if __name__ == "__main__":
    cli()
