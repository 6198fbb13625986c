"""Running external commands: single, piped, redirected and in the background."""

from __future__ import annotations

import os
import subprocess
from typing import Any, Iterable, Sequence

from microkit.shell_parser import RedirectMode

MAX_PIPELINE = 10

_OPEN_FLAGS = {
    RedirectMode.STD_IN: os.O_RDONLY,
    RedirectMode.STD_OUT: os.O_WRONLY | os.O_CREAT,
    RedirectMode.APPEND: os.O_WRONLY | os.O_APPEND,
}


class ExecutionError(Exception):
    """Raised when a command cannot be started or its file cannot be opened."""


def _start(argv: Sequence[str], label: str, **streams: Any) -> subprocess.Popen:
    args = list(argv)
    if not args:
        raise ExecutionError(f"{label}: invalid input: empty command")
    try:
        return subprocess.Popen(args, **streams)
    except OSError as exc:
        raise ExecutionError(
            f"{label}: invalid input: {args[0]}: {exc.strerror or exc}"
        ) from exc


def run_command(argv: Sequence[str]) -> int:
    """Run one command in the foreground and return its exit status."""
    return _start(argv, "S_execution").wait()


def run_pipeline(commands: Iterable[Sequence[str]]) -> list[int]:
    """Run commands connected by pipes and return their exit statuses.

    At most MAX_PIPELINE commands are accepted. A command that cannot be
    started gives its successor an empty input; the others still run and
    an ExecutionError is raised once they have finished.
    """
    stages = [list(argv) for argv in commands]
    if len(stages) > MAX_PIPELINE:
        raise ExecutionError(
            f"pipeline of {len(stages)} commands exceeds the limit of {MAX_PIPELINE}"
        )
    processes: list[subprocess.Popen] = []
    errors: list[str] = []
    upstream = None
    for index, argv in enumerate(stages):
        last = index == len(stages) - 1
        if index == 0:
            stdin = None
        else:
            stdin = upstream if upstream is not None else subprocess.DEVNULL
        proc = None
        try:
            proc = _start(
                argv,
                "P_execution",
                stdin=stdin,
                stdout=None if last else subprocess.PIPE,
            )
        except ExecutionError as exc:
            errors.append(str(exc))
        finally:
            if upstream is not None:
                upstream.close()
        upstream = proc.stdout if proc is not None and not last else None
        if proc is not None:
            processes.append(proc)
    statuses = [proc.wait() for proc in processes]
    if errors:
        raise ExecutionError("; ".join(errors))
    return statuses


def run_redirect(argv: Sequence[str], path: str, mode: RedirectMode) -> int:
    """Run a command with its input or output connected to ``path``.

    Output files are created when missing but not truncated; appending
    requires the file to exist.
    """
    mode = RedirectMode(mode)
    try:
        fd = os.open(path, _OPEN_FLAGS[mode], 0o664)
    except OSError as exc:
        raise ExecutionError(
            f"Microshell: cannot open file: {path}: {exc.strerror}"
        ) from exc
    try:
        stream = {"stdin": fd} if mode is RedirectMode.STD_IN else {"stdout": fd}
        return _start(argv, "R_execution", **stream).wait()
    finally:
        os.close(fd)


def run_background(commands: Iterable[Sequence[str]]) -> list[int]:
    """Start all commands at once, wait for every one, return their statuses."""
    processes: list[subprocess.Popen] = []
    errors: list[str] = []
    for argv in commands:
        try:
            processes.append(_start(argv, "B_execution"))
        except ExecutionError as exc:
            errors.append(str(exc))
    statuses = [proc.wait() for proc in processes]
    if errors:
        raise ExecutionError("; ".join(errors))
    return statuses