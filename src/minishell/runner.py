"""The read/launch loop tying the command reader to the supervisor."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from .command import Command
from .command_reader import END_OF_INPUT, CommandReader
from .config.settings import DEFAULT_PROMPT
from .disposition import Exited, Signaled
from .exceptions import CommandLineTooLongError
from .outcomes import Completed, LaunchOutcome, ReapFailed, SpawnFailed
from .process_audit import warn_about_unreaped_children
from .supervisor import ProcessSupervisor
from .supervisor_helpers.program_replacer import describe_error

logger = logging.getLogger(__name__)

EXIT_OK = 0


class ShellLoop:
    """Prompt, read, launch, repeat until the input runs out."""

    def __init__(
        self,
        reader: CommandReader,
        supervisor: ProcessSupervisor,
        *,
        output: TextIO,
        errors: TextIO,
        prompt: str = DEFAULT_PROMPT,
        audit_on_exit: bool = True,
    ) -> None:
        self._reader = reader
        self._supervisor = supervisor
        self._output = output
        self._errors = errors
        self._prompt = prompt
        self._audit_on_exit = audit_on_exit
        self.last_outcome: Optional[LaunchOutcome] = None
        self.commands_run = 0

    def run(self) -> int:
        """Run until end of input and return the shell's exit status."""
        while True:
            self._show_prompt()
            try:
                command = self._reader.read_command()
            except CommandLineTooLongError as exc:
                self._diagnostic(str(exc))
                continue
            except KeyboardInterrupt:
                # Ctrl-C at the prompt abandons the line
                self._output.write("\n")
                continue
            except (OSError, ValueError) as exc:
                logger.warning("Input source failed, shutting down: %s", exc)
                break

            if command is END_OF_INPUT:
                break
            if command.is_empty:
                continue
            self.run_command(command)

        if self._audit_on_exit:
            warn_about_unreaped_children()
        logger.debug("End of input after %s commands", self.commands_run)
        return EXIT_OK

    def run_command(self, command: Command) -> LaunchOutcome:
        outcome = self._supervisor.launch(command)
        self.commands_run += 1
        self.last_outcome = outcome
        self._report(command, outcome)
        return outcome

    def _report(self, command: Command, outcome: LaunchOutcome) -> None:
        if isinstance(outcome, SpawnFailed):
            self._diagnostic(f"fork error: {describe_error(outcome.error)}")
            return
        if isinstance(outcome, ReapFailed):
            self._diagnostic(f"wait error: {outcome.error}")
            return
        if not isinstance(outcome, Completed) or outcome.succeeded:
            return

        disposition = outcome.disposition
        if isinstance(disposition, Exited):
            logger.info("%s: Program terminated with exit code %s", command.program, disposition.code)
        elif isinstance(disposition, Signaled):
            logger.info("%s: Program %s", command.program, disposition.describe())

    def _show_prompt(self) -> None:
        if self._prompt:
            self._output.write(self._prompt)
        self._output.flush()

    def _diagnostic(self, message: str) -> None:
        self._errors.write(message + "\n")
        self._errors.flush()


__all__ = ["EXIT_OK", "ShellLoop"]
