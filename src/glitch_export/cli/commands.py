"""Command handlers for ``list``, ``export`` and ``update``.

Each handler receives the :class:`~glitch_export.core.models.RunContext`
built by :mod:`glitch_export.cli.app` and orchestrates the project
service, the subprocess runner and the cache store.  Subprocess
failures are logged by the runner and collected as results; they never
abort a run.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from glitch_export.cli.console import console, err_console
from glitch_export.core.models import ProjectResult, RunContext, RunOutcome
from glitch_export.core.update_plan import batched, should_reuse_cache
from glitch_export.exceptions import InvalidLoginError
from glitch_export.utils.constants import GIT_COMMAND, UPDATE_BATCH_SIZE

USAGE = """usage: glitch-project-export [command] [-u username]

Available commands:
  list:   list all discovered projects
  export: exports all projects using 'git clone'
  update: updates all cloned projects using 'git pull'

Available options:
  -u  use the provided username to fetch the project list"""

USERNAME_PROMPT = "enter your Glitch username:"


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------

def print_usage() -> None:
    console.raw(USAGE)


def resolve_username(ctx: RunContext) -> str:
    """Return the ``-u`` username, prompting for one when it is absent."""
    if ctx.username:
        return ctx.username

    answer = ctx.prompt(USERNAME_PROMPT)
    if not answer or not answer.strip():
        raise InvalidLoginError(
            "A Glitch username is required.",
            hint="Pass it with -u <username>.",
        )
    return answer.strip()


def _build_project_list(ctx: RunContext, login: str) -> list[str]:
    return ctx.project_service.build_project_list(login, on_progress=console.raw)


def _report_failures(results: Sequence[ProjectResult]) -> None:
    failed = sum(1 for result in results if result.failed)
    if failed:
        err_console.print(
            f"[yellow]{failed} of {len(results)} operations failed[/yellow]",
        )


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

def handle_list(ctx: RunContext) -> list[str]:
    """Print every project identifier of the user, one per line."""
    projects = _build_project_list(ctx, resolve_username(ctx))
    for project in projects:
        console.raw(project)
    return projects


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------

def handle_export(ctx: RunContext) -> list[ProjectResult]:
    """Clone every project that has no local directory yet, one at a time."""
    projects = _build_project_list(ctx, resolve_username(ctx))
    ctx.cache.projects = projects
    ctx.cache_store.save(ctx.cache)

    console.raw("cloning projects...")
    results: list[ProjectResult] = []
    total = len(projects)
    for num, project in enumerate(projects, start=1):
        console.raw(f"cloning {project} ({num}/{total})")
        if ctx.project_dir(project).exists():
            console.raw("> project already cloned!")
            results.append(ProjectResult(project=project, action="skipped"))
            continue

        outcome = ctx.runner.run(
            GIT_COMMAND,
            ["clone", ctx.clone_url(project)],
            ctx.workdir,
        )
        results.append(ProjectResult(project=project, action="cloned", outcome=outcome))

    _report_failures(results)
    return results


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

def handle_update(
    ctx: RunContext,
    *,
    batch_size: int = UPDATE_BATCH_SIZE,
) -> list[ProjectResult]:
    """Pull every cloned project, *batch_size* projects at a time.

    All pulls of a batch run in parallel; the next batch starts only
    once each of them has finished.
    """
    if should_reuse_cache(ctx.cache, ctx.username):
        console.raw("using cached project list")
        projects = list(ctx.cache.projects or [])
    else:
        login = resolve_username(ctx)
        projects = _build_project_list(ctx, login)
        ctx.cache.projects = projects
        ctx.cache.login = login
        ctx.cache_store.save(ctx.cache)

    console.raw("updating projects...")
    results: list[ProjectResult] = []
    total = len(projects)
    num = 0
    for batch in batched(projects, batch_size):
        pending: list[tuple[str, Future[RunOutcome] | None]] = []
        with ThreadPoolExecutor(max_workers=len(batch)) as pool:
            for project in batch:
                num += 1
                console.raw(f"updating {project} ({num}/{total})")
                project_dir = ctx.project_dir(project)
                if project_dir.exists():
                    future = pool.submit(
                        ctx.runner.run,
                        GIT_COMMAND,
                        ["pull"],
                        project_dir,
                        project,
                    )
                    pending.append((project, future))
                else:
                    console.raw("> project not found, try running export to download it?")
                    pending.append((project, None))

        for project, future in pending:
            if future is None:
                results.append(ProjectResult(project=project, action="missing"))
            else:
                results.append(
                    ProjectResult(project=project, action="pulled", outcome=future.result()),
                )

    _report_failures(results)
    return results
