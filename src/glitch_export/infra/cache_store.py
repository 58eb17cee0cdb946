"""Infrastructure: ``cache.json`` persistence.

The cache lives in the working directory and holds the last project
list plus the login it belongs to.  The whole document is rewritten on
every save; there is no locking and no schema versioning.
"""

from __future__ import annotations

import json
from pathlib import Path

from glitch_export.core.models import CacheDocument
from glitch_export.exceptions import CacheParseError
from glitch_export.utils.constants import CACHE_FILENAME


class CacheStore:
    """Read and write a :class:`CacheDocument` at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    @classmethod
    def for_directory(cls, workdir: Path) -> CacheStore:
        return cls(workdir / CACHE_FILENAME)

    def load(self) -> CacheDocument:
        """Return the cached document, or an empty one if there is no file.

        Raises
        ------
        CacheParseError
            If the file exists but is not a JSON object.
        """
        if not self.path.exists():
            return CacheDocument()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CacheParseError(
                f"Could not parse {self.path}: {exc}",
                hint="Delete the file to rebuild it on the next run.",
            ) from exc

        if not isinstance(raw, dict):
            raise CacheParseError(
                f"Unexpected content in {self.path}: expected a JSON object.",
                hint="Delete the file to rebuild it on the next run.",
            )
        return CacheDocument.from_dict(raw)

    def save(self, document: CacheDocument) -> None:
        """Overwrite the cache file with *document*, pretty-printed."""
        self.path.write_text(
            json.dumps(document.to_dict(), indent=2),
            encoding="utf-8",
        )
