"""Shared pytest fixtures and configuration for the slim-predict test suite.

Guidelines
----------
* Core tests use :class:`FakeFileChecker` instead of the filesystem.
* CLI tests create real input files under ``tmp_path``.
* The ``slim_predict`` logger is reset after every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest


class FakeFileChecker:
    """In-memory :class:`~slim_predict.core.protocols.FileChecker`."""

    def __init__(self, existing: Iterable[str] = ()) -> None:
        self.existing: set[str] = set(existing)
        self.calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.existing


@pytest.fixture
def checker() -> FakeFileChecker:
    return FakeFileChecker({"model.bin", "old.csr", "test.csr"})


@pytest.fixture
def input_files(tmp_path: Path) -> dict[str, str]:
    """Create model, old and test files; return their paths by role."""
    paths: dict[str, str] = {}
    for role, name in (("model", "model.bin"), ("old", "old.csr"), ("test", "test.csr")):
        path = tmp_path / name
        path.write_text("1 1.0\n", encoding="utf-8")
        paths[role] = str(path)
    return paths


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("slim_predict")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_checker() -> type[FakeFileChecker]:
    """Return the fake checker class for tests that need a custom file set."""
    return FakeFileChecker
