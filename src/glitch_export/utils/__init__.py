"""Shared utilities — constants and cross-cutting configuration.

Rules
-----
* No business logic.
* No user-facing output.
* Importable by any layer.
"""
