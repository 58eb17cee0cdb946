"""Custom exception hierarchy for glitch-project-export.

All exceptions that cross layer boundaries must inherit from
:class:`GlitchExportError`.  Raw third-party exceptions (``requests``,
``json``) must NEVER propagate beyond the infrastructure layer; they
are caught and re-raised as a typed subclass defined here.

Subprocess failures are deliberately absent: the runner reports them
as :class:`~glitch_export.core.models.RunOutcome` values instead.

Hierarchy
---------
GlitchExportError
├── InvalidLoginError
├── NoProjectsFoundError
├── ProjectListError
│   └── ApiResponseError
├── CacheParseError
└── EnvironmentError
"""

from __future__ import annotations


class GlitchExportError(Exception):
    """Base exception for all glitch-project-export errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InvalidLoginError(GlitchExportError):
    """Raised when no usable username was supplied."""


# --- Project discovery -----------------------------------------------------

class NoProjectsFoundError(GlitchExportError):
    """Raised when the API reports zero projects for the requested user."""


class ProjectListError(GlitchExportError):
    """Raised when the project list cannot be fetched."""


class ApiResponseError(ProjectListError):
    """Raised when the API answers with an unexpected payload shape."""


# --- Cache -----------------------------------------------------------------

class CacheParseError(GlitchExportError):
    """Raised when ``cache.json`` exists but cannot be parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GlitchExportError):
    """Raised when an optional runtime dependency is not available."""
