"""Infrastructure layer — operating-system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from slim_predict.infra.file_checks import LocalFileChecker, file_exists

__all__: list[str] = [
    "LocalFileChecker",
    "file_exists",
]
