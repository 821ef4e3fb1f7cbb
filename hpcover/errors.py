"""Error catalogue shared by the cover generator and the dimension inputs."""

from __future__ import annotations

from enum import IntEnum
from itertools import islice
from os import PathLike
from typing import Iterable, Union

PathType = Union[str, "PathLike[str]"]


class GenError(IntEnum):
    """Reasons why a standard cover could not be generated."""

    TOO_LONG = 0
    TOO_WIDE = 1
    TOO_HIGH = 2
    NO_PART_LENGTH = 3
    NO_PART_WIDTH = 4
    LEFT_COLLISION = 5
    RIGHT_COLLISION = 6
    BACK_COLLISION = 7


class InputError(IntEnum):
    """Reasons why a typed dimension was rejected."""

    WRONG_FORMAT = 0
    WRONG_VALUE = 1
    TOO_HIGH_VALUE = 2


def read_messages(path: PathType, limit: int) -> list[str]:
    """Read up to ``limit`` non-empty lines, each wrapped in newlines.

    Raises ``OSError`` when the file cannot be opened.
    """
    with open(path, encoding="utf-8", newline=None) as handle:
        lines = (line.rstrip("\n") for line in handle)
        return [f"\n{line}\n" for line in islice(filter(None, lines), limit)]


class GeneratorError:
    """Holds the message catalogues and the most recently raised error."""

    def __init__(
        self,
        generator_messages: Iterable[str] = (),
        input_messages: Iterable[str] = (),
    ) -> None:
        self.generator_messages = list(generator_messages)
        self.input_messages = list(input_messages)
        self.error: GenError | InputError | None = None
        self.message = ""

    @classmethod
    def from_files(cls, generator_path: PathType, input_path: PathType) -> "GeneratorError":
        """Build the catalogues from two message files."""
        return cls(
            read_messages(generator_path, len(GenError)),
            read_messages(input_path, len(InputError)),
        )

    def raise_error(self, error: GenError | InputError) -> None:
        """Make ``error`` the current one and look up its message."""
        if isinstance(error, GenError):
            catalogue = self.generator_messages
        elif isinstance(error, InputError):
            catalogue = self.input_messages
        else:
            raise TypeError(f"unknown error kind: {error!r}")
        self.error = error
        self.message = catalogue[error] if error < len(catalogue) else ""