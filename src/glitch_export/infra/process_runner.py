"""Infrastructure: best-effort subprocess runner.

Spawns an external command, streams its output line by line to the
supplied sinks, and reports how it ended as a
:class:`~glitch_export.core.models.RunOutcome`.

Rules
-----
* ``run`` never raises for a failed command: spawn errors and
  non-zero exits are outcomes, not exceptions.
* No ``print()``; output goes through the sinks given by the caller.
* Safe to call from several worker threads at once.
"""

from __future__ import annotations

import subprocess
import threading
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import IO

from glitch_export.core.models import RunOutcome, RunStatus

LineSink = Callable[[str], None]


class ProcessRunner:
    """Concrete :class:`~glitch_export.core.protocols.CommandRunner`.

    Parameters
    ----------
    stdout_sink:
        Receives each prefixed stdout line, and spawn error messages.
    stderr_sink:
        Receives each prefixed stderr line.
    """

    def __init__(self, stdout_sink: LineSink, stderr_sink: LineSink) -> None:
        self._stdout_sink: LineSink = stdout_sink
        self._stderr_sink: LineSink = stderr_sink

    def run(
        self,
        command: str,
        args: Sequence[str],
        working_directory: Path | None = None,
        output_prefix: str = "",
    ) -> RunOutcome:
        """Run ``command *args`` in *working_directory* and wait for it.

        Every output line is forwarded as ``f"{output_prefix}> {line}"``.
        """
        marker = f"{output_prefix}> "
        try:
            process = subprocess.Popen(
                [command, *args],
                cwd=str(working_directory) if working_directory else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            self._stdout_sink(f"{marker}Error: {exc}")
            return RunOutcome(status=RunStatus.FAILED_TO_START, error=str(exc))

        readers = [
            _start_reader(process.stdout, self._stdout_sink, marker),
            _start_reader(process.stderr, self._stderr_sink, marker),
        ]
        returncode = process.wait()
        for reader in readers:
            reader.join()

        if returncode == 0:
            return RunOutcome(status=RunStatus.SUCCEEDED, returncode=0)
        return RunOutcome(status=RunStatus.EXITED_WITH_CODE, returncode=returncode)


# ---------------------------------------------------------------------------
# Stream pumping
# ---------------------------------------------------------------------------

def _start_reader(
    stream: IO[str] | None,
    sink: LineSink,
    marker: str,
) -> threading.Thread:
    thread = threading.Thread(
        target=_pump,
        args=(stream, sink, marker),
        daemon=True,
    )
    thread.start()
    return thread


def _pump(stream: IO[str] | None, sink: LineSink, marker: str) -> None:
    if stream is None:
        return
    try:
        for line in stream:
            sink(f"{marker}{line.rstrip()}")
    finally:
        stream.close()
