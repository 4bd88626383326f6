"""Minimal interactive command runner built on fork/exec/wait."""

from .command import Command
from .command_reader import END_OF_INPUT, CommandReader
from .disposition import ExitDisposition, Exited, Signaled
from .outcomes import Completed, LaunchOutcome, ReapFailed, SpawnFailed
from .runner import ShellLoop
from .supervisor import LaunchOptions, LaunchState, ProcessSupervisor

__version__ = "0.1.0"

__all__ = [
    "END_OF_INPUT",
    "Command",
    "CommandReader",
    "Completed",
    "ExitDisposition",
    "Exited",
    "LaunchOptions",
    "LaunchOutcome",
    "LaunchState",
    "ProcessSupervisor",
    "ReapFailed",
    "ShellLoop",
    "Signaled",
    "SpawnFailed",
]
