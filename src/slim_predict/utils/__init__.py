"""Shared utilities — cross-cutting concerns usable from any layer.

Rules
-----
* No business logic.
* No imports from ``cli``.
"""
