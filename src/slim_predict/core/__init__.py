"""Core / service layer — pure interpretation logic and data models.

Rules
-----
* No ``print()`` calls and no ``sys.exit``.
* No filesystem I/O except through :class:`FileChecker`.
* No imports from ``cli`` or ``infra``.
"""

from slim_predict.core.models import (
    HelpRequested,
    InputFormat,
    Parsed,
    ParseOutcome,
    PositionalCountMismatch,
    PredictConfig,
    UnknownOption,
    VersionRequested,
)
from slim_predict.core.options import interpret, parse
from slim_predict.core.protocols import FileChecker, PredictionEngine

__all__: list[str] = [
    "FileChecker",
    "HelpRequested",
    "InputFormat",
    "ParseOutcome",
    "Parsed",
    "PositionalCountMismatch",
    "PredictConfig",
    "PredictionEngine",
    "UnknownOption",
    "VersionRequested",
    "interpret",
    "parse",
]
