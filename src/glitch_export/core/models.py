"""Domain models for glitch-project-export.

Value objects are **frozen** dataclasses.  The one exception is
:class:`CacheDocument`, which handlers mutate in memory before flushing
it back to disk.  None of these models perform I/O.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from glitch_export.core.protocols import (
        CacheBackend,
        CommandRunner,
        ProjectLister,
        PromptFunc,
    )


# ---------------------------------------------------------------------------
# Cache document
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class CacheDocument:
    """In-memory form of ``cache.json``.

    Both fields are optional; an absent field is omitted on write so a
    fresh document serializes to ``{}``.
    """

    projects: list[str] | None = None
    """Project identifiers from the last list build, in API order."""

    login: str | None = None
    """Username the cached ``projects`` belong to."""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CacheDocument:
        projects = raw.get("projects")
        login = raw.get("login")
        return cls(
            projects=[str(p) for p in projects] if isinstance(projects, list) else None,
            login=str(login) if login is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.projects is not None:
            data["projects"] = list(self.projects)
        if self.login is not None:
            data["login"] = self.login
        return data


# ---------------------------------------------------------------------------
# API page
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Page:
    """One page of the paginated project listing."""

    items: tuple[str, ...]
    """Project identifiers (``domain`` values) on this page."""

    has_more: bool

    next_page: str | None = None
    """Path of the next page relative to the API host."""


# ---------------------------------------------------------------------------
# Subprocess outcomes
# ---------------------------------------------------------------------------

class RunStatus(enum.Enum):
    SUCCEEDED = "succeeded"
    EXITED_WITH_CODE = "exited_with_code"
    FAILED_TO_START = "failed_to_start"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """What happened to a single subprocess invocation."""

    status: RunStatus
    returncode: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.SUCCEEDED


@dataclass(frozen=True, slots=True)
class ProjectResult:
    """Per-project result of an ``export`` or ``update`` run."""

    project: str
    action: str
    """One of ``"cloned"``, ``"pulled"``, ``"skipped"`` or ``"missing"``."""

    outcome: RunOutcome | None = None
    """Subprocess outcome, ``None`` when nothing was spawned."""

    @property
    def failed(self) -> bool:
        return self.outcome is not None and not self.outcome.ok


# ---------------------------------------------------------------------------
# Run context
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RunContext:
    """Everything a command handler needs, built once per invocation.

    The context itself is immutable; ``cache`` is the shared mutable
    document that handlers update and flush through ``cache_store``.
    """

    username: str | None
    """Username given with ``-u``, or ``None``."""

    workdir: Path
    api_host: str
    cache_store: CacheBackend
    project_service: ProjectLister
    runner: CommandRunner
    prompt: PromptFunc
    cache: CacheDocument = field(default_factory=CacheDocument)

    def project_dir(self, project: str) -> Path:
        return self.workdir / project

    def clone_url(self, project: str) -> str:
        return f"{self.api_host}/git/{project}"
