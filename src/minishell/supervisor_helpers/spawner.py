"""Process duplication with an explicit parent/child result."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union

from .process_api import ProcessApi
from .reaper import ProcessHandle


@dataclass(frozen=True)
class ParentFlow:
    """Resumption seen by the original process; owns the new child."""

    handle: ProcessHandle


@dataclass(frozen=True)
class ChildFlow:
    """Resumption seen inside the freshly created child."""


ForkResult = Union[ParentFlow, ChildFlow]


def spawn_and_fork(api: ProcessApi) -> ForkResult:
    """Duplicate the calling process once and report which side we are on.

    Both processes return from this call. The discriminator from ``fork`` is
    zero in the child and the child pid in the parent.

    Raises:
        OSError: If the operating system cannot create a process.
    """
    # Anything still buffered would otherwise be written by both processes
    sys.stdout.flush()
    sys.stderr.flush()

    discriminator = api.fork()
    if discriminator == 0:
        return ChildFlow()
    if discriminator < 0:
        raise OSError(f"fork returned invalid discriminator {discriminator}")
    return ParentFlow(ProcessHandle(discriminator, waitpid=api.waitpid))


__all__ = ["ChildFlow", "ForkResult", "ParentFlow", "spawn_and_fork"]
