"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from glitch_export.core.models import (
    CacheDocument,
    Page,
    ProjectResult,
    RunContext,
    RunOutcome,
    RunStatus,
)
from glitch_export.core.project_service import ProjectService
from glitch_export.core.protocols import (
    CacheBackend,
    CommandRunner,
    PageSource,
    ProjectLister,
)
from glitch_export.core.update_plan import batched, should_reuse_cache

__all__: list[str] = [
    "CacheBackend",
    "CacheDocument",
    "CommandRunner",
    "Page",
    "PageSource",
    "ProjectLister",
    "ProjectResult",
    "ProjectService",
    "RunContext",
    "RunOutcome",
    "RunStatus",
    "batched",
    "should_reuse_cache",
]
