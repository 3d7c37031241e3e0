"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit. Configuration accepted, or help / version shown."""

GENERAL_ERROR: int = 1
"""A known SlimPredictError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

USAGE_ERROR: int = 64
"""Unknown option or wrong positional count in strict mode (sysexits ``EX_USAGE``)."""

LENIENT_USAGE: int = SUCCESS
"""Unknown option or wrong positional count in the default, compatible mode."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
