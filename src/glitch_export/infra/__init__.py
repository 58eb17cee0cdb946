"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Glitch API, the cache file
and child processes.  Every raw third-party exception must be caught
here and re-raised as a :class:`~glitch_export.exceptions.GlitchExportError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from glitch_export.infra.cache_store import CacheStore
from glitch_export.infra.glitch_api import GlitchApiClient, parse_page
from glitch_export.infra.process_runner import ProcessRunner

__all__: list[str] = [
    "CacheStore",
    "GlitchApiClient",
    "ProcessRunner",
    "parse_page",
]
