"""Tests for the Glitch API client (infra/glitch_api.py).

The ``requests`` session is a :class:`MagicMock`; no network access.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from glitch_export.core.models import Page
from glitch_export.core.project_service import ProjectService
from glitch_export.exceptions import ApiResponseError, ProjectListError
from glitch_export.infra.glitch_api import GlitchApiClient, parse_page


def _session(payload: Any) -> MagicMock:
    session = MagicMock()
    session.get.return_value.json.return_value = payload
    return session


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class TestRequests:
    def test_first_page_url_and_params(self) -> None:
        session = _session({"items": [{"domain": "a"}], "hasMore": False})
        client = GlitchApiClient("https://api.glitch.com", session=session)

        page = client.fetch_first_page("alice", 100)

        session.get.assert_called_once_with(
            "https://api.glitch.com/v1/users/by/login/projects",
            params={"limit": 100, "login": "alice"},
        )
        assert page == Page(items=("a",), has_more=False)

    def test_next_page_is_relative_to_host(self) -> None:
        session = _session({"items": [{"domain": "b"}], "hasMore": False})
        client = GlitchApiClient("https://api.glitch.com/", session=session)

        client.fetch_page("/v1/users/by/login/projects?lastOrderValue=x")

        session.get.assert_called_once_with(
            "https://api.glitch.com/v1/users/by/login/projects?lastOrderValue=x",
            params=None,
        )

    def test_connection_error_is_wrapped(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        client = GlitchApiClient(session=session)

        with pytest.raises(ProjectListError, match="Could not reach") as exc_info:
            client.fetch_first_page("alice", 100)
        assert exc_info.value.hint is not None

    def test_http_error_is_wrapped(self) -> None:
        session = MagicMock()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        client = GlitchApiClient(session=session)

        with pytest.raises(ProjectListError, match="returned an error"):
            client.fetch_page("/missing")

    def test_invalid_json_is_api_response_error(self) -> None:
        session = MagicMock()
        session.get.return_value.json.side_effect = ValueError("no json")
        client = GlitchApiClient(session=session)

        with pytest.raises(ApiResponseError, match="invalid JSON"):
            client.fetch_first_page("alice", 100)


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------

class TestParsePage:
    def test_full_payload(self) -> None:
        page = parse_page(
            {
                "items": [{"domain": "a", "id": 1}, {"domain": "b"}],
                "hasMore": True,
                "nextPage": "/v1/next",
            }
        )
        assert page == Page(items=("a", "b"), has_more=True, next_page="/v1/next")

    def test_missing_items_is_empty_page(self) -> None:
        page = parse_page({"hasMore": False})
        assert page.items == ()
        assert page.has_more is False

    def test_missing_has_more_means_last_page(self) -> None:
        assert parse_page({"items": [{"domain": "a"}]}).has_more is False

    @pytest.mark.parametrize("payload", [None, [], "text", 3])
    def test_non_object_body_raises(self, payload: Any) -> None:
        with pytest.raises(ApiResponseError):
            parse_page(payload)

    @pytest.mark.parametrize("item", [{"id": 1}, {"domain": 5}, "a"])
    def test_item_without_domain_raises(self, item: Any) -> None:
        with pytest.raises(ApiResponseError, match="without a domain"):
            parse_page({"items": [item], "hasMore": False})


# ---------------------------------------------------------------------------
# Follow-up pages
# ---------------------------------------------------------------------------

class TestFollowUpPages:
    def test_error_body_on_next_page_raises(self) -> None:
        client = GlitchApiClient(session=_session({"message": "Too many requests"}))

        with pytest.raises(ApiResponseError, match="without items") as exc_info:
            client.fetch_page("/p2")
        assert exc_info.value.hint == "The API said: Too many requests"

    def test_next_page_without_has_more_raises(self) -> None:
        client = GlitchApiClient(session=_session({"items": [{"domain": "b"}]}))

        with pytest.raises(ApiResponseError, match="without items"):
            client.fetch_page("/p2")

    def test_first_page_without_items_is_still_empty(self) -> None:
        client = GlitchApiClient(session=_session({"message": "nope"}))
        assert client.fetch_first_page("ghost", 100).items == ()

    def test_listing_is_not_cut_short_by_a_broken_page(self) -> None:
        session = MagicMock()
        session.get.return_value.json.side_effect = [
            {"items": [{"domain": "a"}], "hasMore": True, "nextPage": "/p2"},
            {"message": "Too many requests"},
        ]
        service = ProjectService(GlitchApiClient(session=session))

        with pytest.raises(ApiResponseError):
            service.build_project_list("alice")
        assert session.get.call_count == 2
