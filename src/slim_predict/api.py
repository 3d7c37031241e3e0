"""Library entry points wired to the local filesystem.

:mod:`slim_predict.core.options` takes its file checker explicitly; the
helpers here supply :class:`~slim_predict.infra.file_checks.LocalFileChecker`
so callers embedding the interpreter only pass the argument list.
"""

from __future__ import annotations

from collections.abc import Sequence

from slim_predict.core import options
from slim_predict.core.models import ParseOutcome, PredictConfig
from slim_predict.infra.file_checks import LocalFileChecker


def interpret(args: Sequence[str]) -> ParseOutcome:
    """Interpret *args* (no program name) against the local filesystem."""
    return options.interpret(args, file_checker=LocalFileChecker())


def parse(args: Sequence[str]) -> PredictConfig:
    """Return the :class:`PredictConfig` for *args* or raise.

    Raises
    ------
    UsageError
        On help, version, unknown-option or positional-count outcomes.
    ConfigValidationError
        On a bad option value or a missing input file.
    """
    return options.parse(args, file_checker=LocalFileChecker())
