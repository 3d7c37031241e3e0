"""Allow ``python -m slim_predict`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m slim_predict`` behaves identically to the
``slim-predict`` console script.
"""

from __future__ import annotations

from slim_predict.cli.app import cli

if __name__ == "__main__":
    cli()
