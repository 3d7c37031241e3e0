"""CLI application entry point for slim-predict.

This module is the **sole error boundary** for the entire application.
It catches :class:`~slim_predict.exceptions.SlimPredictError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No parsing logic lives here. :func:`~slim_predict.core.options.interpret`
  returns an outcome and this module only decides what to print and
  which exit code to use.
* Unknown options and a wrong positional count are *lenient* by default:
  help is printed and the exit code is 0.  ``strict=True`` turns both
  into :data:`~slim_predict.cli.exit_codes.USAGE_ERROR`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from slim_predict.cli import exit_codes
from slim_predict.cli.console import console, escape_markup
from slim_predict.cli.help_text import print_long_help, print_short_help
from slim_predict.core.models import (
    HelpRequested,
    Parsed,
    PositionalCountMismatch,
    PredictConfig,
    UnknownOption,
    VersionRequested,
)
from slim_predict.core.options import PROG, interpret, preview_debug_level
from slim_predict.core.protocols import PredictionEngine
from slim_predict.exceptions import SlimPredictError
from slim_predict.infra.file_checks import LocalFileChecker
from slim_predict.utils.log import configure_logging
from slim_predict.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcome handlers
# ---------------------------------------------------------------------------

def _usage_exit_code(strict: bool) -> int:
    return exit_codes.USAGE_ERROR if strict else exit_codes.LENIENT_USAGE


def _handle_unknown_option(outcome: UnknownOption, *, strict: bool) -> int:
    if strict:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(outcome.message)}")
    print_long_help()
    return _usage_exit_code(strict)


def _handle_positional_count(outcome: PositionalCountMismatch, *, strict: bool) -> int:
    if strict:
        console.print(
            "[bold red]Error:[/bold red] expected 2 or 3 positional arguments, "
            f"got {outcome.count}."
        )
    print_short_help()
    return _usage_exit_code(strict)


def _handle_predict(config: PredictConfig, engine: PredictionEngine | None) -> int:
    """Hand an accepted configuration to the prediction engine."""
    configure_logging(config.debug_level)
    logger.info("Accepted configuration: %s", config)

    if config.debug_level > 0:
        from slim_predict.cli.summary import render_summary

        render_summary(config)

    if engine is None:
        return exit_codes.SUCCESS
    return engine.run(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    engine: PredictionEngine | None = None,
    strict: bool = False,
) -> int:
    """Run the slim-predict CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    engine:
        Consumer of the accepted configuration.  When ``None`` the
        configuration is validated (and summarised at ``-dbglvl`` > 0)
        and the run ends successfully.
    strict:
        Report unknown options and a wrong positional count with
        :data:`exit_codes.USAGE_ERROR` instead of exit code 0.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SlimPredictError
        Validation failures propagate to :func:`cli`.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging(preview_debug_level(args))
    outcome = interpret(args, file_checker=LocalFileChecker())

    if isinstance(outcome, HelpRequested):
        print_long_help()
        return exit_codes.SUCCESS
    if isinstance(outcome, VersionRequested):
        print(f"{PROG} {__version__}")
        return exit_codes.SUCCESS
    if isinstance(outcome, UnknownOption):
        return _handle_unknown_option(outcome, strict=strict)
    if isinstance(outcome, PositionalCountMismatch):
        return _handle_positional_count(outcome, strict=strict)
    if isinstance(outcome, Parsed):
        return _handle_predict(outcome.config, engine)
    raise TypeError(f"Unhandled parse outcome: {outcome!r}")


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SlimPredictError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
