"""Configuration summary shown when ``-dbglvl`` is above zero.

Renders the accepted :class:`PredictConfig` as a Rich table on stderr,
or as a fixed-width plain table when Rich is not installed.
"""

from __future__ import annotations

import sys

from slim_predict.cli.console import console, escape_markup
from slim_predict.core.models import PredictConfig


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def _format_name(config: PredictConfig) -> str:
    if not config.read_values:
        return "csrnv"
    return config.input_format.value


def summary_rows(config: PredictConfig) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows describing *config*."""
    return [
        ("Model file", config.model_path),
        ("Old file", config.reference_data_path),
        ("Test file", config.test_data_path or "none"),
        ("Input format", _format_name(config)),
        ("Read values", "yes" if config.read_values else "no"),
        ("Binarize", "yes" if config.binarize else "no"),
        ("Output file", config.output_path or "none (no output)"),
        ("Recommendations", str(config.num_recommendations)),
        ("Debug level", str(config.debug_level)),
    ]


def _print_plain_summary(rows: list[tuple[str, str]]) -> None:
    """Render the summary without Rich."""
    print("\nslim_predict parameters", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    for label, value in rows:
        print(f"{label:<18} {value}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_summary(config: PredictConfig) -> None:
    """Print the parameter table for *config* to stderr."""
    rows = summary_rows(config)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        return

    table = Table(
        title="slim_predict parameters",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Parameter", style="bold", min_width=18)
    table.add_column("Value", min_width=20, overflow="fold")

    for label, value in rows:
        table.add_row(label, escape_markup(value))

    console.print()
    console.print(table)
    console.print()
