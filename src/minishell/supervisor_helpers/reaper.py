"""Ownership and reaping of one spawned child."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Tuple

from ..disposition import ExitDisposition, from_wait_status
from ..exceptions import AlreadyReapedError, ProcessStateError

logger = logging.getLogger(__name__)

WaitPid = Callable[[int, int], Tuple[int, int]]


class ProcessHandle:
    """Identifier of a child owned by the supervisor until it is reaped."""

    def __init__(self, pid: int, *, waitpid: WaitPid = os.waitpid) -> None:
        if pid <= 0:
            raise ValueError(f"Process handle requires a positive pid (got {pid})")
        self._pid = pid
        self._waitpid = waitpid
        self._disposition: Optional[ExitDisposition] = None

    @property
    def pid(self) -> int:
        return self._pid

    @property
    def reaped(self) -> bool:
        return self._disposition is not None

    @property
    def disposition(self) -> Optional[ExitDisposition]:
        return self._disposition

    def wait(self) -> ExitDisposition:
        """Block until this specific child terminates and collect its disposition.

        Raises:
            AlreadyReapedError: If the handle was already waited on.
            ProcessStateError: If the child is not ours to wait on or the
                kernel reports a different pid.
        """
        if self._disposition is not None:
            raise AlreadyReapedError(pid=self._pid)

        try:
            waited_pid, status = self._waitpid(self._pid, 0)
        except ChildProcessError as exc:
            raise ProcessStateError(f"Process {self._pid} is not a child awaiting reaping", pid=self._pid) from exc

        if waited_pid != self._pid:
            raise ProcessStateError(f"waitpid({self._pid}) returned pid {waited_pid}", pid=self._pid)

        self._disposition = from_wait_status(status)
        logger.debug("Reaped process %s: %s", self._pid, self._disposition.describe())
        return self._disposition

    def __repr__(self) -> str:
        state = "reaped" if self.reaped else "running"
        return f"ProcessHandle(pid={self._pid}, {state})"


__all__ = ["ProcessHandle"]
