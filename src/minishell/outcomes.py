"""Results returned by ``ProcessSupervisor.launch``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .disposition import ExitDisposition
from .exceptions import ProcessStateError


@dataclass(frozen=True)
class Completed:
    """The child was spawned and reaped; ``disposition`` is how it ended.

    A program that could not be started also lands here, carrying the
    configured exec failure status.
    """

    disposition: ExitDisposition

    @property
    def succeeded(self) -> bool:
        return self.disposition.succeeded


@dataclass(frozen=True)
class SpawnFailed:
    """The operating system refused to create a child process."""

    error: OSError

    @property
    def succeeded(self) -> bool:
        return False


@dataclass(frozen=True)
class ReapFailed:
    """The child was spawned but its termination status could not be collected."""

    pid: int
    error: ProcessStateError

    @property
    def succeeded(self) -> bool:
        return False


LaunchOutcome = Union[Completed, SpawnFailed, ReapFailed]

__all__ = ["Completed", "LaunchOutcome", "ReapFailed", "SpawnFailed"]
