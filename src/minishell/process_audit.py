"""Detect children that terminated but were never reaped."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import psutil

logger = logging.getLogger(__name__)


def find_unreaped_children(pid: Optional[int] = None) -> List[int]:
    """Return pids of direct children of *pid* (default: this process) that are zombies."""
    target = pid if pid is not None else os.getpid()
    try:
        parent = psutil.Process(target)
        children = parent.children(recursive=False)
    except psutil.NoSuchProcess as exc:
        raise RuntimeError(f"Process {target} does not exist") from exc

    zombies: List[int] = []
    for child in children:
        try:
            if child.status() == psutil.STATUS_ZOMBIE:
                zombies.append(child.pid)
        except psutil.NoSuchProcess:
            # Reaped between listing and inspection
            logger.debug("Child %s disappeared during audit", child.pid)
    return zombies


def warn_about_unreaped_children() -> List[int]:
    """Log a warning naming any zombie children and return their pids."""
    try:
        zombies = find_unreaped_children()
    except (RuntimeError, psutil.AccessDenied) as exc:
        logger.warning("Could not audit child processes: %s", exc)
        return []
    if zombies:
        logger.warning("Unreaped child processes remain: %s", ", ".join(str(pid) for pid in zombies))
    return zombies


__all__ = ["find_unreaped_children", "warn_about_unreaped_children"]
