"""Parsed command value passed from the reader to the supervisor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Command:
    """Program name followed by its positional arguments.

    An empty command represents a blank input line and must not be launched.
    """

    argv: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.argv, tuple):
            object.__setattr__(self, "argv", tuple(self.argv))

    @classmethod
    def parse(cls, text: str) -> "Command":
        """Split *text* on runs of whitespace."""
        return cls(tuple(text.split()))

    @property
    def is_empty(self) -> bool:
        return not self.argv

    @property
    def program(self) -> str:
        if not self.argv:
            raise ValueError("Empty command has no program")
        return self.argv[0]

    @property
    def arguments(self) -> Tuple[str, ...]:
        return self.argv[1:]

    def __len__(self) -> int:
        return len(self.argv)

    def __iter__(self) -> Iterator[str]:
        return iter(self.argv)

    def __getitem__(self, index):
        return self.argv[index]

    def __str__(self) -> str:
        return " ".join(self.argv)


__all__ = ["Command"]
