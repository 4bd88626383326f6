"""Keyboard signal handling around a foreground child."""

from __future__ import annotations

import logging
import signal
from contextlib import contextmanager
from typing import Dict, Iterator

logger = logging.getLogger(__name__)

# Terminal-generated signals that belong to the foreground child
INTERACTIVE_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGINT", None), getattr(signal, "SIGQUIT", None)) if sig is not None
)

SavedHandlers = Dict[int, object]


@contextmanager
def ignore_interactive_signals() -> Iterator[SavedHandlers]:
    """Ignore SIGINT/SIGQUIT in this process for the duration of the block.

    Yields the handlers that were replaced so a child can decide what to
    restore. Handlers cannot be changed outside the main thread; in that
    case nothing is changed and an empty mapping is yielded.
    """
    saved: SavedHandlers = {}
    try:
        for sig in INTERACTIVE_SIGNALS:
            saved[sig] = signal.signal(sig, signal.SIG_IGN)
    except ValueError:
        # Raised when signals are configured outside the main thread.
        logger.debug("Cannot ignore interactive signals outside the main thread")
        _restore(saved)
        saved = {}

    try:
        yield saved
    finally:
        _restore(saved)


@contextmanager
def keep_children_waitable() -> Iterator[SavedHandlers]:
    """Restore default SIGCHLD handling for the block if it is ignored.

    With SIGCHLD ignored (inheritable from whoever started the shell) the
    kernel discards terminated children and ``waitpid`` fails with ECHILD.
    Yields the replaced handler, if any, so a child can inherit it back.
    """
    saved: SavedHandlers = {}
    sigchld = getattr(signal, "SIGCHLD", None)
    if sigchld is not None and signal.getsignal(sigchld) == signal.SIG_IGN:
        try:
            saved[sigchld] = signal.signal(sigchld, signal.SIG_DFL)
        except ValueError:
            logger.debug("Cannot reset SIGCHLD outside the main thread")

    try:
        yield saved
    finally:
        _restore(saved)


def reset_child_signals(saved: SavedHandlers) -> None:
    """Give a child the signal dispositions it would have had without the shell.

    Signals the shell itself was started with ignored stay ignored.
    """
    for sig, previous in saved.items():
        signal.signal(sig, signal.SIG_IGN if previous == signal.SIG_IGN else signal.SIG_DFL)


def _restore(saved: SavedHandlers) -> None:
    for sig, previous in saved.items():
        signal.signal(sig, previous if previous is not None else signal.SIG_DFL)


__all__ = [
    "INTERACTIVE_SIGNALS",
    "ignore_interactive_signals",
    "keep_children_waitable",
    "reset_child_signals",
]
