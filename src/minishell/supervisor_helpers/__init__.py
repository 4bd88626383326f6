"""Helper modules for ProcessSupervisor."""

from .process_api import ProcessApi, ProcessApiFactory
from .program_replacer import replace_program, run_child_path
from .reaper import ProcessHandle
from .signal_guard import ignore_interactive_signals, keep_children_waitable, reset_child_signals
from .spawner import ChildFlow, ParentFlow, spawn_and_fork

__all__ = [
    "ChildFlow",
    "ParentFlow",
    "ProcessApi",
    "ProcessApiFactory",
    "ProcessHandle",
    "ignore_interactive_signals",
    "keep_children_waitable",
    "replace_program",
    "reset_child_signals",
    "run_child_path",
    "spawn_and_fork",
]
