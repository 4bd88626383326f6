"""
Process supervisor: the fork/exec/wait cycle behind every command.

One ``launch`` call spawns exactly one child, turns that child into the
requested program, and blocks until that specific child has been reaped.
Nothing is left running or unreaped when ``launch`` returns.

Usage:
    from minishell.supervisor import ProcessSupervisor
    from minishell.command import Command

    outcome = ProcessSupervisor().launch(Command(("echo", "hi")))
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .command import Command
from .config.settings import DEFAULT_EXEC_FAILURE_STATUS
from .exceptions import ProcessStateError
from .outcomes import Completed, LaunchOutcome, ReapFailed, SpawnFailed
from .supervisor_helpers import (
    ChildFlow,
    ProcessApi,
    ProcessApiFactory,
    ignore_interactive_signals,
    keep_children_waitable,
    run_child_path,
    spawn_and_fork,
)

logger = logging.getLogger(__name__)


class LaunchState(Enum):
    IDLE = "idle"
    SPAWNING = "spawning"
    CHILD_PATH = "child_path"
    PARENT_WAITING = "parent_waiting"
    REAPED = "reaped"


@dataclass(frozen=True)
class LaunchOptions:
    """Per-launch adjustments applied in the child before program replacement."""

    stdout_path: Optional[str] = None


class ProcessSupervisor:
    """Runs commands one at a time, each as a fully reaped child process."""

    def __init__(
        self,
        *,
        exec_failure_status: int = DEFAULT_EXEC_FAILURE_STATUS,
        api: Optional[ProcessApi] = None,
    ) -> None:
        self._exec_failure_status = exec_failure_status
        self._api = api or ProcessApiFactory.create()
        self._state = LaunchState.IDLE
        self.spawn_count = 0
        self.reap_count = 0
        self.last_pid: Optional[int] = None

    @property
    def state(self) -> LaunchState:
        return self._state

    @property
    def exec_failure_status(self) -> int:
        return self._exec_failure_status

    def launch(self, command: Command, options: Optional[LaunchOptions] = None) -> LaunchOutcome:
        """Spawn ``command`` as a child and wait for it to terminate.

        Args:
            command: Non-empty command; ``command[0]`` is looked up on ``PATH``.
            options: Optional child-side adjustments such as stdout redirection.

        Returns:
            ``Completed`` with the child's disposition, ``SpawnFailed`` when
            no child could be created, or ``ReapFailed`` when the child's
            status could not be collected.

        Raises:
            ValueError: If ``command`` is empty.
        """
        if command.is_empty:
            raise ValueError("Cannot launch an empty command")
        options = options or LaunchOptions()

        self._transition(LaunchState.SPAWNING)
        with ignore_interactive_signals() as saved_signals, keep_children_waitable() as saved_sigchld:
            try:
                flow = spawn_and_fork(self._api)
            except OSError as exc:
                logger.debug("Could not spawn process for %r: %s", command.program, exc)
                self._transition(LaunchState.IDLE)
                return SpawnFailed(exc)

            if isinstance(flow, ChildFlow):
                # No logging here: the child shares the parent's handlers
                self._state = LaunchState.CHILD_PATH
                run_child_path(
                    command,
                    api=self._api,
                    exec_failure_status=self._exec_failure_status,
                    stdout_path=options.stdout_path,
                    saved_signals={**saved_signals, **saved_sigchld},
                )

            handle = flow.handle
            self.spawn_count += 1
            self.last_pid = handle.pid
            self._transition(LaunchState.PARENT_WAITING)
            logger.debug("Spawned %s as pid %s", command, handle.pid)

            try:
                disposition = handle.wait()
            except ProcessStateError as exc:
                # The child is no longer ours to wait on; the handle is spent
                self.reap_count += 1
                logger.debug("Could not reap pid %s: %s", handle.pid, exc)
                self._transition(LaunchState.IDLE)
                return ReapFailed(handle.pid, exc)
            self.reap_count += 1
            self._transition(LaunchState.REAPED)
            logger.debug("parent of %s (pid: %s): child %s", handle.pid, os.getpid(), disposition.describe())

        return Completed(disposition)

    def _transition(self, new_state: LaunchState) -> None:
        logger.debug("Supervisor state %s -> %s", self._state.value, new_state.value)
        self._state = new_state


__all__ = ["LaunchOptions", "LaunchState", "ProcessSupervisor"]
