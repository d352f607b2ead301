"""Locating and preparing the commands of a pipeline."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.textutil import split

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
CMD_NO_PERMISSION = 126
CMD_NOT_FOUND = 127
ERR_OUTFILE = 1


class CommandError(Exception):
    """A command could not be prepared; ``status`` is the exit status to use."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def _executable(path: str) -> bool:
    return os.access(path, os.X_OK)


def find_command_path(name: str, env: Mapping[str, str]) -> str | None:
    """Find the executable for ``name``.

    A name holding a slash is used as is when executable. Otherwise each
    non-empty directory of ``env["PATH"]`` is tried in order. Returns
    None when nothing executable is found.
    """
    if not name:
        return None
    if "/" in name and _executable(name):
        return name
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split(search, ":"):
        candidate = f"{directory}/{name}"
        if _executable(candidate):
            return candidate
    return None


def resolve_command(cmd: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split ``cmd`` on spaces and find its program.

    Returns the program path and the argument list. Raises CommandError
    with status 127 when there is no command or it cannot be found, and
    126 when the program found is not executable.
    """
    args = split(cmd, " ")
    if not args:
        raise CommandError(CMD_NOT_FOUND, "No command provided")
    path = find_command_path(args[0], env)
    if path is None:
        raise CommandError(CMD_NOT_FOUND, f"Command not found: {args[0]}")
    if not _executable(path):
        raise CommandError(CMD_NO_PERMISSION, f"{path}: Permission denied")
    return path, args