"""Infrastructure: input-file existence checks.

Rules
-----
* Only ``stat``-level checks; files are never opened or read.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def file_exists(path: str) -> bool:
    """Return ``True`` when *path* is an existing regular file.

    Directories, dangling links and paths that cannot be stat-ed (for
    example because of a permission error on a parent directory) all
    count as missing.
    """
    try:
        found = Path(path).is_file()
    except OSError as exc:
        logger.debug("Could not stat %s: %s", path, exc)
        return False
    logger.debug("File check %s -> %s", path, "found" if found else "missing")
    return found


class LocalFileChecker:
    """Default :class:`~slim_predict.core.protocols.FileChecker` backed by the local filesystem."""

    def exists(self, path: str) -> bool:
        return file_exists(path)
