"""``requests`` backed implementation of :class:`~glitch_export.core.protocols.PageSource`.

This module is the **only** place in the codebase that imports
``requests``.  Transport and HTTP errors are caught here and re-raised
as :class:`~glitch_export.exceptions.ProjectListError`; malformed
payloads become :class:`~glitch_export.exceptions.ApiResponseError`.
"""

from __future__ import annotations

from typing import Any

import requests

from glitch_export.core.models import Page
from glitch_export.exceptions import ApiResponseError, ProjectListError
from glitch_export.utils.constants import API_HOST

_PROJECTS_PATH = "/v1/users/by/login/projects"


class GlitchApiClient:
    """Concrete :class:`PageSource` for the Glitch REST API.

    Parameters
    ----------
    api_host:
        Base URL without a trailing slash.
    session:
        Optional pre-configured :class:`requests.Session`; one is created
        when omitted.
    """

    def __init__(
        self,
        api_host: str = API_HOST,
        session: requests.Session | None = None,
    ) -> None:
        self.api_host: str = api_host.rstrip("/")
        self._session: requests.Session = session or requests.Session()

    # ------------------------------------------------------------------
    # PageSource
    # ------------------------------------------------------------------

    def fetch_first_page(self, login: str, limit: int) -> Page:
        payload = self._get_json(
            f"{self.api_host}{_PROJECTS_PATH}",
            params={"limit": limit, "login": login},
        )
        return parse_page(payload)

    def fetch_page(self, path: str) -> Page:
        return parse_page(
            self._get_json(f"{self.api_host}{path}"),
            require_items=True,
        )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = self._session.get(url, params=params)
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise ProjectListError(
                f"Glitch API returned an error for {url}: {exc}",
            ) from exc
        except requests.RequestException as exc:
            raise ProjectListError(
                f"Could not reach the Glitch API: {exc}",
                hint="Check your network connection.",
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ApiResponseError(
                f"Glitch API returned invalid JSON for {url}.",
            ) from exc


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------

def parse_page(payload: Any, *, require_items: bool = False) -> Page:
    """Convert a raw ``{items, hasMore, nextPage}`` payload into a :class:`Page`.

    A missing ``items`` list is treated as an empty page, which the
    first page uses to signal "no projects".  Follow-up pages pass
    *require_items* so that a body without ``items`` or ``hasMore``
    raises instead of silently ending the listing.
    """
    if not isinstance(payload, dict):
        raise ApiResponseError("Glitch API returned an unexpected response body.")

    raw_items = payload.get("items")
    if require_items and (
        not isinstance(raw_items, list) or not isinstance(payload.get("hasMore"), bool)
    ):
        raise ApiResponseError(
            "Glitch API returned a page without items.",
            hint=_error_hint(payload),
        )

    items: list[str] = []
    if isinstance(raw_items, list):
        for entry in raw_items:
            domain = entry.get("domain") if isinstance(entry, dict) else None
            if not isinstance(domain, str):
                raise ApiResponseError(
                    "Glitch API returned a project without a domain.",
                )
            items.append(domain)

    next_page = payload.get("nextPage")
    return Page(
        items=tuple(items),
        has_more=bool(payload.get("hasMore")),
        next_page=next_page if isinstance(next_page, str) else None,
    )


def _error_hint(payload: dict[str, Any]) -> str | None:
    message = payload.get("message")
    if isinstance(message, str) and message:
        return f"The API said: {message}"
    return None
