"""Protocols (interfaces) at the edges of the core layer.

Core code depends ONLY on these protocols, never on concrete
implementations, so the interpreter can be tested without touching the
filesystem and the CLI can hand its result to any engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from slim_predict.core.models import PredictConfig


class FileChecker(Protocol):
    """Contract for the input-file existence check."""

    def exists(self, path: str) -> bool:
        """Return ``True`` when *path* names an existing regular file."""
        ...  # pragma: no cover


class PredictionEngine(Protocol):
    """Contract for the component that consumes a :class:`PredictConfig`.

    The engine loads the model and data files, computes the top-N lists
    and writes them to ``config.output_path`` when one is set.
    """

    def run(self, config: PredictConfig) -> int:
        """Run predictions for *config* and return a process exit code.

        Implementations must map their own failures to
        :class:`~slim_predict.exceptions.SlimPredictError` subclasses.
        """
        ...  # pragma: no cover
