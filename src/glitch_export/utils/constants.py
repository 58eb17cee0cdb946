"""Constants shared across layers.

``API_HOST`` may be overridden through the ``GLITCH_API_HOST``
environment variable; see :func:`resolve_api_host`.
"""

from __future__ import annotations

import os

API_HOST: str = "https://api.glitch.com"
"""Base URL of the Glitch API, also used to build git remote URLs."""

API_HOST_ENV_VAR: str = "GLITCH_API_HOST"

PAGE_SIZE: int = 100
"""Number of projects requested per API page."""

UPDATE_BATCH_SIZE: int = 5
"""Maximum number of ``git pull`` processes running at once."""

CACHE_FILENAME: str = "cache.json"

GIT_COMMAND: str = "git"


def resolve_api_host(environ: dict[str, str] | None = None) -> str:
    """Return the API host, honouring the environment override."""
    env = os.environ if environ is None else environ
    host = env.get(API_HOST_ENV_VAR, "").strip() or API_HOST
    return host.rstrip("/")
