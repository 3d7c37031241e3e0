"""Command-line interpreter for ``slim_predict``.

Pipeline order (enforced by :func:`interpret`):

1. **Scan**: detached values are joined to their option and a bare ``--``
   ends option scanning; argparse then splits options from positionals and
   records each option occurrence in command-line order.
2. **Short-circuit**: ``-help`` / ``-version`` anywhere wins.
3. **Apply**: option values are validated and folded into the defaults,
   in the order they were given.
4. **Positionals**: arity check, then model → old → test file checks.

Nothing here prints or exits; the CLI layer decides what to do with the
returned outcome.  Validation failures raise
:class:`~slim_predict.exceptions.ConfigValidationError` subclasses.
"""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, NoReturn

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
from slim_predict.core.protocols import FileChecker
from slim_predict.exceptions import (
    InputFileNotFoundError,
    InvalidInputFormatError,
    InvalidIntegerError,
    NegativeParameterError,
    UsageError,
)

logger = logging.getLogger(__name__)

PROG: str = "slim_predict"

MIN_POSITIONALS: int = 2
MAX_POSITIONALS: int = 3

_INTEGER = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One row of the option table."""

    name: str
    takes_value: bool


OPTIONS: Mapping[str, OptionSpec] = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            OptionSpec("ifmt", takes_value=True),
            OptionSpec("binarize", takes_value=False),
            OptionSpec("outfile", takes_value=True),
            OptionSpec("nrcmds", takes_value=True),
            OptionSpec("dbglvl", takes_value=True),
            OptionSpec("help", takes_value=False),
            OptionSpec("version", takes_value=False),
        )
    }
)
"""Recognised options, keyed by their long name."""

INPUT_FORMATS: Mapping[str, tuple[InputFormat, bool]] = MappingProxyType(
    {
        "csr": (InputFormat.CSR, True),
        "csrnv": (InputFormat.CSR, False),
        "cluto": (InputFormat.CLUTO, True),
        "ijv": (InputFormat.IJV, True),
    }
)
"""``-ifmt`` name → (format, read_values).  ``csrnv`` is CSR without ratings."""


# ---------------------------------------------------------------------------
# 1. Scan
# ---------------------------------------------------------------------------

class _ScanRejected(Exception):
    """Internal signal: argparse refused the argument list."""


class _OptionScanner(argparse.ArgumentParser):
    """ArgumentParser that reports failures instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise _ScanRejected(message)


class _RecordOccurrence(argparse.Action):
    """Append ``(name, value)`` to ``namespace.occurrences``.

    Keeping every occurrence, in order, lets validation run in
    command-line order the way a getopt loop would.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        value = values if isinstance(values, str) else None
        occurrences = list(getattr(namespace, "occurrences", None) or [])
        occurrences.append((self.dest, value))
        namespace.occurrences = occurrences


def _build_scanner() -> _OptionScanner:
    scanner = _OptionScanner(prog=PROG, add_help=False, allow_abbrev=True)
    for spec in OPTIONS.values():
        scanner.add_argument(
            f"-{spec.name}",
            f"--{spec.name}",
            dest=spec.name,
            action=_RecordOccurrence,
            nargs=None if spec.takes_value else 0,
        )
    scanner.add_argument("positionals", nargs="*")
    return scanner


def _resolve_option(token: str) -> OptionSpec | None:
    """Return the option *token* names (exactly or by unique prefix), if any."""
    if not token.startswith("-") or "=" in token:
        return None
    name = token[2:] if token.startswith("--") else token[1:]
    if not name:
        return None
    if name in OPTIONS:
        return OPTIONS[name]
    candidates = [spec for key, spec in OPTIONS.items() if key.startswith(name)]
    return candidates[0] if len(candidates) == 1 else None


def _split_terminator(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Prepare *args* for argparse the way a getopt loop reads them.

    A value option followed by a separate token takes that token as its
    value even when it starts with ``-``; the pair is joined into
    ``-name=value``.  The first bare ``--`` that is not such a value ends
    option scanning: everything after it is returned as trailing
    positionals, untouched.
    """
    head: list[str] = []
    index = 0
    while index < len(args):
        token = args[index]
        if token == "--":
            return head, list(args[index + 1:])
        spec = _resolve_option(token)
        if spec is not None and spec.takes_value and index + 1 < len(args):
            head.append(f"-{spec.name}={args[index + 1]}")
            index += 2
            continue
        head.append(token)
        index += 1
    return head, []


def scan(args: Sequence[str]) -> tuple[list[tuple[str, str | None]], list[str]]:
    """Split *args* into option occurrences and positional arguments.

    Raises
    ------
    _ScanRejected
        When an option is unknown, ambiguous, missing its value or
        given a value it does not take.
    """
    head, trailing = _split_terminator(args)
    namespace = _build_scanner().parse_intermixed_args(head)
    occurrences: list[tuple[str, str | None]] = list(
        getattr(namespace, "occurrences", None) or []
    )
    return occurrences, list(namespace.positionals or []) + trailing


def preview_debug_level(args: Sequence[str]) -> int:
    """Best-effort read of ``-dbglvl`` before full interpretation.

    Lets the caller set up logging first so the scan and file-check
    records are visible.  Any problem with the arguments yields 0; the
    real validation happens in :func:`interpret`.
    """
    try:
        occurrences, _ = scan(args)
    except _ScanRejected:
        return 0
    level = 0
    for name, value in occurrences:
        if name == "dbglvl" and value is not None and _INTEGER.fullmatch(value):
            level = max(int(value), 0)
    return level


# ---------------------------------------------------------------------------
# 3. Apply option values
# ---------------------------------------------------------------------------

def parse_input_format(value: str) -> tuple[InputFormat, bool]:
    """Look up an ``-ifmt`` name.  Returns ``(format, read_values)``."""
    try:
        return INPUT_FORMATS[value]
    except KeyError:
        raise InvalidInputFormatError(value) from None


def parse_non_negative(option: str, value: str) -> int:
    """Convert the value of ``-nrcmds`` / ``-dbglvl`` to a non-negative int.

    Only an optional sign followed by ASCII digits is accepted.
    """
    if not _INTEGER.fullmatch(value):
        raise InvalidIntegerError(option, value)
    number = int(value)
    if number < 0:
        raise NegativeParameterError(option, number)
    return number


def _apply_options(occurrences: Sequence[tuple[str, str | None]]) -> dict[str, Any]:
    """Fold option occurrences into keyword arguments for :class:`PredictConfig`."""
    settings: dict[str, Any] = {}
    for name, value in occurrences:
        if name == "ifmt":
            settings["input_format"], settings["read_values"] = parse_input_format(
                str(value)
            )
        elif name == "binarize":
            settings["binarize"] = True
        elif name == "outfile":
            settings["output_path"] = value or None
        elif name == "nrcmds":
            settings["num_recommendations"] = parse_non_negative(name, str(value))
        elif name == "dbglvl":
            settings["debug_level"] = parse_non_negative(name, str(value))
    return settings


# ---------------------------------------------------------------------------
# 4. Positionals
# ---------------------------------------------------------------------------

def _require_file(checker: FileChecker, role: str, path: str) -> str:
    if not checker.exists(path):
        raise InputFileNotFoundError(role, path)
    return path


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def interpret(
    args: Sequence[str],
    *,
    file_checker: FileChecker,
) -> ParseOutcome:
    """Interpret the argument vector (without the program name).

    Parameters
    ----------
    args:
        Raw arguments, e.g. ``sys.argv[1:]``.
    file_checker:
        Existence check for the positional files.

    Returns
    -------
    ParseOutcome
        :class:`Parsed` on success, otherwise the help / version / usage
        variant that applies.

    Raises
    ------
    ConfigValidationError
        On an invalid ``-ifmt``, a bad ``-nrcmds`` / ``-dbglvl`` or a
        missing input file.  Files are checked in the order model, old,
        test, and only after every option value was accepted.
    """
    try:
        occurrences, positionals = scan(args)
    except _ScanRejected as exc:
        logger.debug("Option scan rejected %r: %s", list(args), exc)
        return UnknownOption(message=str(exc))

    names = {name for name, _ in occurrences}
    if "help" in names:
        return HelpRequested()
    if "version" in names:
        return VersionRequested()

    settings = _apply_options(occurrences)
    logger.debug("Options: %s; positionals: %s", settings, positionals)

    if not MIN_POSITIONALS <= len(positionals) <= MAX_POSITIONALS:
        return PositionalCountMismatch(count=len(positionals))

    model_path = _require_file(file_checker, "model", positionals[0])
    reference_path = _require_file(file_checker, "old", positionals[1])
    test_path = None
    if len(positionals) == MAX_POSITIONALS:
        test_path = _require_file(file_checker, "test", positionals[2])

    config = PredictConfig(
        model_path=model_path,
        reference_data_path=reference_path,
        test_data_path=test_path,
        **settings,
    )
    return Parsed(config=config)


def parse(
    args: Sequence[str],
    *,
    file_checker: FileChecker,
) -> PredictConfig:
    """Like :func:`interpret`, but return the config or raise.

    Raises
    ------
    UsageError
        When the outcome is anything other than :class:`Parsed`.
    """
    outcome = interpret(args, file_checker=file_checker)
    if isinstance(outcome, Parsed):
        return outcome.config
    raise UsageError(outcome)
