"""Pure planning helpers for the ``update`` command.

Rules
-----
* Deterministic and side-effect free.
* No knowledge of git, HTTP or the filesystem.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from glitch_export.core.models import CacheDocument


def should_reuse_cache(cache: CacheDocument, username: str | None) -> bool:
    """Decide whether the cached project list can be used as-is.

    The cache is reused iff it holds a project list and either no
    username was given or the given username matches the cached login.
    """
    if cache.projects is None:
        return False
    return not username or username == cache.login


def batched(items: Sequence[str], size: int) -> Iterator[list[str]]:
    """Yield consecutive slices of *items* of at most *size* elements."""
    if size < 1:
        raise ValueError("batch size must be at least 1")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])
