"""Command-line entry point: ``minishell`` / ``python -m minishell``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .command_reader import CommandReader
from .config import ConfigurationError, ShellSettings, load_settings
from .logging_config import setup_logging
from .runner import ShellLoop
from .supervisor import ProcessSupervisor

EXIT_INIT_FAILURE = 1

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minishell",
        description="Read one command per line, run it as a child process, wait for it, repeat.",
    )
    parser.add_argument("--prompt", help="Prompt printed before each read (env: MINISHELL_PROMPT)")
    parser.add_argument("--max-line", type=int, help="Longest accepted input line (env: MINISHELL_MAX_LINE)")
    parser.add_argument(
        "--exec-failure-status",
        type=int,
        help="Exit status of a child whose program could not be started (env: MINISHELL_EXEC_FAILURE_STATUS)",
    )
    parser.add_argument("--log-level", help="Console log level (env: MINISHELL_LOG_LEVEL)")
    parser.add_argument("--log-file", help="Also write logs to this file (env: MINISHELL_LOG_FILE)")
    return parser


def build_shell(settings: ShellSettings, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> ShellLoop:
    reader = CommandReader(stdin, max_line=settings.max_line)
    supervisor = ProcessSupervisor(exec_failure_status=settings.exec_failure_status)
    return ShellLoop(reader, supervisor, output=stdout, errors=stderr, prompt=settings.prompt)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        settings = load_settings(
            prompt=args.prompt,
            max_line=args.max_line,
            exec_failure_status=args.exec_failure_status,
            log_level=args.log_level,
            log_file=args.log_file,
        )
        setup_logging(settings.log_level_number, settings.log_file, append=settings.log_append)
    except (ConfigurationError, OSError) as exc:
        stderr.write(f"minishell: {exc}\n")
        return EXIT_INIT_FAILURE

    if stdin is None:
        stderr.write("minishell: no input stream available\n")
        return EXIT_INIT_FAILURE
    _tolerate_undecodable_input(stdin)

    logger.debug("Starting with %s", settings)
    return build_shell(settings, stdin, stdout, stderr).run()


def _tolerate_undecodable_input(stream: TextIO) -> None:
    # Undecodable bytes round-trip through execvp unchanged
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def run() -> None:
    """Console-script wrapper."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
