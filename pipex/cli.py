"""Run ``infile | cmd1 | cmd2 > outfile`` the way a shell would."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.command import (
    ERR_OUTFILE,
    EXIT_FAILURE,
    CommandError,
    resolve_command,
)


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _report(prefix: str, error: OSError) -> None:
    _error(f"{prefix}: {error.strerror or error}")


def _open_infile(path: str) -> int | None:
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as error:
        _report(path, error)
        return None


def _open_outfile(path: str) -> int | None:
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as error:
        _report(path, error)
        return None


def _start(
    cmd: str, env: Mapping[str, str], stdin: int, stdout: int
) -> subprocess.Popen | int:
    """Start one command, or return the exit status it would have failed with."""
    try:
        path, args = resolve_command(cmd, env)
    except CommandError as error:
        _error(error.message)
        return error.status
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as error:
        _report("Execve failed", error)
        return EXIT_FAILURE


def _wait(child: subprocess.Popen | int) -> int:
    if isinstance(child, int):
        return child
    status = child.wait()
    # A child killed by a signal reports the signal number.
    return -status if status < 0 else status


def _close(*fds: int | None) -> None:
    for fd in fds:
        if fd is not None:
            os.close(fd)


def run_pipeline(
    infile: str,
    first_cmd: str,
    second_cmd: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through both commands into ``outfile``.

    Returns the exit status of the second command. A missing input file
    makes the first command fail with status 1 while the second still
    runs; an output file that cannot be opened aborts with status 1.
    """
    env = os.environ if env is None else env
    fd_in = _open_infile(infile)
    fd_out = _open_outfile(outfile)
    if fd_out is None:
        _close(fd_in)
        return ERR_OUTFILE
    try:
        read_end, write_end = os.pipe()
    except OSError as error:
        _report("Error creating pipe", error)
        _error("Pipe error")
        _close(fd_in, fd_out)
        return EXIT_FAILURE
    try:
        if fd_in is None:
            first: subprocess.Popen | int = EXIT_FAILURE
        else:
            first = _start(first_cmd, env, fd_in, write_end)
        second = _start(second_cmd, env, read_end, fd_out)
    finally:
        _close(read_end, write_end, fd_in, fd_out)
    _wait(first)
    return _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _error("Invalid number of arguments")
        return EXIT_FAILURE
    infile, first_cmd, second_cmd, outfile = args
    return run_pipeline(infile, first_cmd, second_cmd, outfile, os.environ)