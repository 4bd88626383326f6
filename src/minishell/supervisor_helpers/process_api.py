from __future__ import annotations

"""Operating-system process primitives used by the supervisor."""


import os
from dataclasses import dataclass
from typing import Callable, NoReturn, Sequence, Tuple

STDOUT_FILENO = 1
STDERR_FILENO = 2
REDIRECT_FILE_MODE = 0o644


def write_stderr(data: bytes) -> None:
    """Write straight to descriptor 2, bypassing Python-level buffers."""
    os.write(STDERR_FILENO, data)


def redirect_stdout(path: str) -> None:
    """Point descriptor 1 at *path*, creating or truncating it.

    Raises:
        OSError: If the file cannot be opened or the descriptor duplicated.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, REDIRECT_FILE_MODE)
    try:
        os.dup2(fd, STDOUT_FILENO)
    finally:
        if fd != STDOUT_FILENO:
            os.close(fd)


@dataclass(frozen=True)
class ProcessApi:
    """Container for the primitives one launch cycle needs."""

    fork: Callable[[], int]
    execvp: Callable[[str, Sequence[str]], NoReturn]
    waitpid: Callable[[int, int], Tuple[int, int]]
    exit: Callable[[int], NoReturn]
    write_stderr: Callable[[bytes], None]
    redirect_stdout: Callable[[str], None]


class ProcessApiFactory:
    """Factory for the process API backed by the ``os`` module."""

    @staticmethod
    def create() -> ProcessApi:
        return ProcessApi(
            fork=os.fork,
            execvp=os.execvp,
            waitpid=os.waitpid,
            exit=os._exit,
            write_stderr=write_stderr,
            redirect_stdout=redirect_stdout,
        )


__all__ = ["ProcessApi", "ProcessApiFactory", "redirect_stdout", "write_stderr"]
