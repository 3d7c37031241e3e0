"""Domain models for slim-predict.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Input format
# ---------------------------------------------------------------------------

class InputFormat(enum.Enum):
    """Sparse-matrix encodings accepted for the data files."""

    CSR = "csr"
    """One row per user, ``col val`` pairs on each line."""

    CLUTO = "cluto"
    """CLUTO matrix format (header line with dimensions)."""

    IJV = "ijv"
    """One ``row col val`` triplet per line."""


# ---------------------------------------------------------------------------
# Prediction configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PredictConfig:
    """Validated settings handed to the prediction engine."""

    model_path: str
    """Model produced by ``slim_learn``.  Always an existing file."""

    reference_data_path: str
    """Historical (old) user-item data.  Always an existing file."""

    test_data_path: str | None = None
    """Hidden items per user, or ``None`` when no evaluation is wanted."""

    input_format: InputFormat = InputFormat.CSR

    read_values: bool = True
    """``False`` for the ``csrnv`` variant: entries carry no ratings."""

    binarize: bool = False

    output_path: str | None = None
    """Prediction output file.  ``None`` means no output is written."""

    num_recommendations: int = 10

    debug_level: int = 0

    @property
    def has_test_data(self) -> bool:
        return self.test_data_path is not None

    @property
    def produces_output(self) -> bool:
        return self.output_path is not None


# ---------------------------------------------------------------------------
# Interpreter outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Parsed:
    """The arguments produced a configuration."""

    config: PredictConfig


@dataclass(frozen=True, slots=True)
class HelpRequested:
    """``-help`` appeared somewhere in the argument list."""


@dataclass(frozen=True, slots=True)
class VersionRequested:
    """``-version`` appeared somewhere in the argument list."""


@dataclass(frozen=True, slots=True)
class UnknownOption:
    """The option scanner rejected an argument.

    Covers unrecognised names, ambiguous prefixes, a missing value and a
    value given to a flag.
    """

    message: str


@dataclass(frozen=True, slots=True)
class PositionalCountMismatch:
    """Fewer than two or more than three positional arguments."""

    count: int


ParseOutcome = Union[
    Parsed,
    HelpRequested,
    VersionRequested,
    UnknownOption,
    PositionalCountMismatch,
]
