"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters must satisfy.
Handlers depend ONLY on these protocols, never on concrete
implementations, so tests can substitute fakes freely.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from glitch_export.core.models import CacheDocument, Page, RunOutcome


ProgressCallback = Callable[[str], None]
"""Receives a human-readable progress message."""

PromptFunc = Callable[..., "str | None"]
"""``prompt(text, default=None)`` returning the answer or the default."""


class PageSource(Protocol):
    """Contract for project-listing backends.

    Implementations must map all backend-specific exceptions to
    :class:`~glitch_export.exceptions.GlitchExportError` subclasses.
    """

    def fetch_first_page(self, login: str, limit: int) -> Page:
        """Fetch the first page of *login*'s projects."""
        ...  # pragma: no cover

    def fetch_page(self, path: str) -> Page:
        """Fetch a follow-up page from the ``nextPage`` *path*."""
        ...  # pragma: no cover


class ProjectLister(Protocol):
    """Contract for anything that can build a complete project list."""

    def build_project_list(
        self,
        login: str,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> list[str]:
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for subprocess runners.

    ``run`` must never raise for a failed command; failures are reported
    through the returned :class:`~glitch_export.core.models.RunOutcome`.
    """

    def run(
        self,
        command: str,
        args: Sequence[str],
        working_directory: Path | None = None,
        output_prefix: str = "",
    ) -> RunOutcome:
        ...  # pragma: no cover


class CacheBackend(Protocol):
    """Contract for cache persistence."""

    def load(self) -> CacheDocument:
        ...  # pragma: no cover

    def save(self, document: CacheDocument) -> None:
        ...  # pragma: no cover
