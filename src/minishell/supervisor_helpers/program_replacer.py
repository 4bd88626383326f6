"""Child-side half of a launch: become the requested program or exit."""

from __future__ import annotations

from typing import List, NoReturn, Optional

from ..command import Command
from .process_api import ProcessApi
from .signal_guard import SavedHandlers, reset_child_signals


def build_exec_argv(command: Command) -> List[str]:
    """Argument vector for ``execvp``; the OS layer appends the NULL terminator."""
    return list(command.argv)


def replace_program(command: Command, api: ProcessApi) -> Exception:
    """Replace this process image with ``command.program``, searching ``PATH``.

    Only returns when replacement failed, and then returns the failure.
    """
    try:
        api.execvp(command.program, build_exec_argv(command))
    except (OSError, ValueError) as exc:
        # ValueError covers arguments the OS cannot represent (embedded NUL)
        return exc
    return OSError(f"{command.program}: program replacement returned without replacing the process")


def run_child_path(
    command: Command,
    *,
    api: ProcessApi,
    exec_failure_status: int,
    stdout_path: Optional[str] = None,
    saved_signals: Optional[SavedHandlers] = None,
) -> NoReturn:
    """Everything the child does between duplication and termination.

    Diagnostics go straight to descriptor 2 because the launching caller
    lives in another process and cannot see a return value from here.
    """
    try:
        reset_child_signals(saved_signals or {})
        if _prepare_stdout(api, stdout_path):
            error = replace_program(command, api)
            _report(api, f"exec error: {command.program}: {describe_error(error)}")
    except Exception as exc:
        _report(api, f"exec error: {command.program}: {exc}")
    finally:
        # Never unwind into frames shared with the parent
        api.exit(exec_failure_status)


def _prepare_stdout(api: ProcessApi, stdout_path: Optional[str]) -> bool:
    if stdout_path is None:
        return True
    try:
        api.redirect_stdout(stdout_path)
    except OSError as exc:
        _report(api, f"redirect error: {stdout_path}: {describe_error(exc)}")
        return False
    return True


def describe_error(error: Exception) -> str:
    strerror = getattr(error, "strerror", None)
    return strerror if strerror else str(error)


def _report(api: ProcessApi, message: str) -> None:
    try:
        api.write_stderr((message + "\n").encode("utf-8", "backslashreplace"))
    except OSError:  # Best-effort: the child exits next and has no other channel
        pass


__all__ = ["build_exec_argv", "describe_error", "replace_program", "run_child_path"]
