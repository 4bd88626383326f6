"""Turn lines of text into commands."""

from __future__ import annotations

import enum
import logging
from typing import Protocol, Union

from .command import Command
from .config.settings import DEFAULT_MAX_LINE
from .exceptions import CommandLineTooLongError

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    """Minimal contract for the text stream commands are read from."""

    def readline(self, size: int = -1) -> str: ...


class _EndOfInput(enum.Enum):
    END_OF_INPUT = "end-of-input"

    def __repr__(self) -> str:
        return "END_OF_INPUT"


END_OF_INPUT = _EndOfInput.END_OF_INPUT

ReadResult = Union[Command, _EndOfInput]


class CommandReader:
    """Reads one command per line from ``source``."""

    def __init__(self, source: LineSource, *, max_line: int = DEFAULT_MAX_LINE) -> None:
        if max_line < 1:
            raise ValueError(f"max_line must be at least 1 (got {max_line})")
        self._source = source
        self._max_line = max_line

    @property
    def max_line(self) -> int:
        return self._max_line

    def read_command(self) -> ReadResult:
        """Consume one line and parse it.

        Returns:
            The parsed ``Command`` (empty for a blank line), or
            ``END_OF_INPUT`` once the source is exhausted.

        Raises:
            CommandLineTooLongError: If the line, without its terminator, is
                longer than ``max_line``. The whole line is consumed first.
        """
        # Room for the longest accepted line plus a CRLF terminator
        limit = self._max_line + 2
        chunk = self._source.readline(limit)
        if chunk == "":
            return END_OF_INPUT

        if len(chunk) == limit and not chunk.endswith("\n"):
            length = self._discard_rest_of_line(chunk, limit)
            logger.debug("Discarded overlong input line of %s characters", length)
            raise CommandLineTooLongError(length=length, limit=self._max_line)

        text = strip_line_terminator(chunk)
        if len(text) > self._max_line:
            raise CommandLineTooLongError(length=len(text), limit=self._max_line)
        return Command.parse(text)

    def _discard_rest_of_line(self, first: str, limit: int) -> int:
        """Consume the remainder of an overlong line and return its full length."""
        length = len(first)
        previous = first
        while True:
            chunk = self._source.readline(limit)
            if chunk == "":
                return length
            if chunk.endswith("\n"):
                length += len(strip_line_terminator(chunk))
                if chunk == "\n" and previous.endswith("\r"):
                    # CRLF split across two reads
                    length -= 1
                return length
            length += len(chunk)
            previous = chunk


def strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``, leaving everything else intact."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


__all__ = ["END_OF_INPUT", "CommandReader", "LineSource", "ReadResult", "strip_line_terminator"]
