"""Shared pytest fixtures and configuration for the glitch-project-export suite.

Guidelines
----------
* No internet access in any test; the HTTP session is always mocked.
* ``git`` is never executed; handlers get a fake runner.
* Filesystem effects are confined to ``tmp_path``.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from glitch_export.core.models import CacheDocument, RunContext, RunOutcome, RunStatus
from glitch_export.infra.cache_store import CacheStore

API_HOST = "https://api.example.test"


class FakeRunner:
    """Thread-safe :class:`CommandRunner` that records every call."""

    def __init__(
        self,
        outcome: RunOutcome | None = None,
        delay: float = 0.0,
    ) -> None:
        self.outcome = outcome or RunOutcome(status=RunStatus.SUCCEEDED, returncode=0)
        self.delay = delay
        self.calls: list[tuple[str, list[str], Path | None, str]] = []
        self.events: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def run(
        self,
        command: str,
        args: Sequence[str],
        working_directory: Path | None = None,
        output_prefix: str = "",
    ) -> RunOutcome:
        name = output_prefix or (working_directory.name if working_directory else "")
        with self._lock:
            self.calls.append((command, list(args), working_directory, output_prefix))
            self.events.append(("start", name))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.in_flight -= 1
            self.events.append(("end", name))
        return self.outcome


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def project_service() -> MagicMock:
    service = MagicMock()
    service.build_project_list.return_value = ["alpha", "beta"]
    return service


@pytest.fixture
def make_context(
    tmp_path: Path,
    fake_runner: FakeRunner,
    project_service: MagicMock,
) -> Callable[..., RunContext]:
    """Factory for a :class:`RunContext` rooted in ``tmp_path``."""

    def _make(
        username: str | None = None,
        cache: CacheDocument | None = None,
        **overrides: object,
    ) -> RunContext:
        values: dict[str, object] = {
            "username": username,
            "workdir": tmp_path,
            "api_host": API_HOST,
            "cache_store": CacheStore.for_directory(tmp_path),
            "project_service": project_service,
            "runner": fake_runner,
            "prompt": MagicMock(return_value=None),
            "cache": cache if cache is not None else CacheDocument(),
        }
        values.update(overrides)
        return RunContext(**values)  # type: ignore[arg-type]

    return _make
