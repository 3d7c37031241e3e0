"""Custom exception hierarchy for slim-predict.

Every error that leaves the interpreter is a subclass of
:class:`SlimPredictError`, so the CLI error boundary can render a clean
message and pick the exit code without leaking stack traces.

Hierarchy
---------
SlimPredictError
├── ConfigValidationError
│   ├── InvalidInputFormatError
│   ├── InvalidIntegerError
│   ├── NegativeParameterError
│   └── InputFileNotFoundError
└── UsageError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slim_predict.core.models import ParseOutcome

_HELP_HINT = "Use 'slim_predict -help' for a summary of the options."


class SlimPredictError(Exception):
    """Base exception for all slim-predict errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validation ------------------------------------------------------------

class ConfigValidationError(SlimPredictError):
    """A command-line value was recognised but is not acceptable."""


class InvalidInputFormatError(ConfigValidationError):
    """Raised when ``-ifmt`` names a format that is not in the lookup table."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid -ifmt of {value}.",
            hint="Valid formats are: csr, csrnv, cluto, ijv.",
        )
        self.value: str = value


class InvalidIntegerError(ConfigValidationError):
    """Raised when a numeric option does not hold an integer."""

    def __init__(self, option: str, value: str) -> None:
        super().__init__(
            f"The -{option} parameter should be an integer, got {value}.",
            hint=_HELP_HINT,
        )
        self.option: str = option
        self.value: str = value


class NegativeParameterError(ConfigValidationError):
    """Raised when ``-nrcmds`` or ``-dbglvl`` is below zero."""

    def __init__(self, option: str, value: int) -> None:
        super().__init__(
            f"The -{option} parameter should be non-negative.",
            hint=_HELP_HINT,
        )
        self.option: str = option
        self.value: int = value


class InputFileNotFoundError(ConfigValidationError):
    """Raised when a positional input file is missing.

    *role* is one of ``"model"``, ``"old"`` or ``"test"``, matching the
    wording of the diagnostic.
    """

    def __init__(self, role: str, path: str) -> None:
        super().__init__(f"Input {role} file {path} does not exist.")
        self.role: str = role
        self.path: str = path


# --- Usage -----------------------------------------------------------------

class UsageError(SlimPredictError):
    """Raised by :func:`~slim_predict.core.options.parse` on a non-config outcome.

    The CLI never sees this exception; it works with the outcome values
    directly.  Library callers that only want a config get it instead.
    """

    def __init__(self, outcome: ParseOutcome) -> None:
        super().__init__(f"No configuration produced: {outcome}", hint=_HELP_HINT)
        self.outcome: ParseOutcome = outcome
