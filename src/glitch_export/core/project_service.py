"""Core project service — builds a user's full project list.

This is the central service consumed by the CLI handlers.  It depends
on a :class:`~glitch_export.core.protocols.PageSource` injected at
construction time, keeping the core free of any HTTP imports.

Guarantees
----------
* Pure orchestration, no ``print()``; progress is reported through a
  callback.
* Only :class:`~glitch_export.exceptions.GlitchExportError` subclasses
  escape.
* Pages are followed until ``has_more`` is false; order is preserved.
"""

from __future__ import annotations

from collections.abc import Callable

from glitch_export.core.models import Page
from glitch_export.core.protocols import PageSource, ProgressCallback
from glitch_export.exceptions import (
    ApiResponseError,
    GlitchExportError,
    InvalidLoginError,
    NoProjectsFoundError,
    ProjectListError,
)
from glitch_export.utils.constants import PAGE_SIZE


class ProjectService:
    """Stateless service that follows the API pagination.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`PageSource` protocol.
    page_size:
        Number of projects requested for the first page.
    """

    def __init__(self, source: PageSource, *, page_size: int = PAGE_SIZE) -> None:
        self._source: PageSource = source
        self._page_size: int = page_size

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_project_list(
        self,
        login: str,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> list[str]:
        """Return every project identifier owned by *login*.

        Raises
        ------
        InvalidLoginError
            If *login* is empty.
        NoProjectsFoundError
            If the first page contains no projects.  No further pages
            are requested in that case.
        ProjectListError
            If any page cannot be fetched or parsed.
        """
        login = self._validate_login(login)
        report = on_progress or _ignore

        report("fetching projects...")
        page = self._fetch(lambda: self._source.fetch_first_page(login, self._page_size))
        if not page.items:
            raise NoProjectsFoundError(
                f"No projects found for user '{login}'",
                hint="Check the spelling of the username, or pass it with -u.",
            )

        projects: list[str] = list(page.items)
        while page.has_more:
            next_page = page.next_page
            if not next_page:
                raise ApiResponseError(
                    "API reported more projects but sent no next page link.",
                )
            report("fetching more projects...")
            page = self._fetch(lambda: self._source.fetch_page(next_page))
            projects.extend(page.items)

        return projects

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_login(login: str | None) -> str:
        stripped = (login or "").strip()
        if not stripped:
            raise InvalidLoginError(
                "A Glitch username is required.",
                hint="Pass it with -u <username>.",
            )
        return stripped

    @staticmethod
    def _fetch(call: Callable[[], Page]) -> Page:
        """Call the source and ensure only our exceptions escape."""
        try:
            return call()
        except GlitchExportError:
            raise
        except Exception as exc:
            raise ProjectListError(
                f"Unexpected error while fetching projects: {exc}",
            ) from exc


def _ignore(_message: str) -> None:
    return None
