"""Run external tools (package manager, schema tool) inside the project."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Sequence

__all__ = ["CommandRunner", "resolve_command", "run_command", "run_best_effort"]


LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str], Path], int]


def resolve_command(command: Sequence[str]) -> list[str]:
    """Return ``command`` with its executable resolved on ``PATH``.

    Resolving first lets ``npm.cmd``-style shims work on Windows without a
    shell. Raises ``FileNotFoundError`` when the executable is missing.
    """

    if not command:
        raise ValueError("command must not be empty")
    executable = shutil.which(command[0])
    if executable is None:
        raise FileNotFoundError(f"executable not found: {command[0]}")
    return [executable, *command[1:]]


def run_command(command: Sequence[str], cwd: Path) -> int:
    """Run ``command`` in ``cwd`` with inherited standard streams.

    Only the exit code is observed.
    """

    resolved = resolve_command(command)
    LOGGER.debug("running %s in %s", " ".join(command), cwd)
    completed = subprocess.run(resolved, cwd=str(cwd), check=False)
    return completed.returncode


def run_best_effort(
    command: Sequence[str],
    cwd: Path,
    *,
    runner: CommandRunner = run_command,
) -> bool:
    """Run ``command`` and report whether it succeeded.

    A missing executable or a non-zero exit code is logged and reported
    as ``False`` rather than raised. Callers warn the operator.
    """

    display = " ".join(command)
    try:
        returncode = runner(command, cwd)
    except OSError as exc:
        LOGGER.info("could not run %s: %s", display, exc)
        return False

    if returncode != 0:
        LOGGER.info("%s exited with code %d", display, returncode)
        return False
    return True
