"""Exit dispositions decoded from raw wait statuses."""

from __future__ import annotations

import os
import signal
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Exited:
    """Child exited normally with ``code``."""

    code: int

    @property
    def succeeded(self) -> bool:
        return self.code == 0

    def describe(self) -> str:
        return f"exited with code {self.code}"


@dataclass(frozen=True)
class Signaled:
    """Child was terminated by ``signal_number``."""

    signal_number: int
    core_dumped: bool = False

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def signal_name(self) -> str:
        try:
            return signal.Signals(self.signal_number).name
        except ValueError:
            return f"signal {self.signal_number}"

    def describe(self) -> str:
        suffix = " (core dumped)" if self.core_dumped else ""
        return f"killed by {self.signal_name}{suffix}"


ExitDisposition = Union[Exited, Signaled]


def from_wait_status(status: int) -> ExitDisposition:
    """Decode the status word returned by ``os.waitpid``.

    Raises:
        ValueError: If the status describes a stopped or continued child,
            which cannot happen without ``WUNTRACED``/``WCONTINUED``.
    """
    if os.WIFEXITED(status):
        return Exited(os.WEXITSTATUS(status))
    if os.WIFSIGNALED(status):
        return Signaled(os.WTERMSIG(status), core_dumped=os.WCOREDUMP(status))
    raise ValueError(f"Wait status {status:#x} does not describe a terminated process")


__all__ = ["ExitDisposition", "Exited", "Signaled", "from_wait_status"]
