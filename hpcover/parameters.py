"""Configuration of the parts library used by the cover generator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]

_LIST_KEYS = {
    "lengths": "lengths",
    "widths": "widths",
    "heights": "heights",
}

_SCALAR_KEYS = {
    "out_length_param": "out_length",
    "out_width_param": "out_width",
    "out_height_param": "out_height",
    "acc_length_param": "acc_length",
    "acc_width_param": "acc_width",
    "acc_height_param": "acc_height",
    "front_space": "front_space",
    "side_space": "side_space",
    "back_space": "back_space",
    "top_space": "top_space",
    "wall_space": "wall_space",
}

_LEADING_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ParameterError(ValueError):
    """Raised when the configuration text cannot be parsed."""

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


def _to_float(token: str) -> float:
    """Read the leading number of ``token``; trailing characters are ignored."""
    match = _LEADING_FLOAT.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return float(match.group(0))


@dataclass
class CoverParameters:
    """Available base dimensions and correction values of the cover parts."""

    lengths: list[float] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    heights: list[float] = field(default_factory=list)
    out_length: float = 0.0
    out_width: float = 0.0
    out_height: float = 0.0
    acc_length: float = 0.0
    acc_width: float = 0.0
    acc_height: float = 0.0
    front_space: float = 0.0
    side_space: float = 0.0
    back_space: float = 0.0
    top_space: float = 0.0
    wall_space: float = 0.0

    @property
    def base_dimensions(self) -> tuple[list[float], list[float], list[float]]:
        """Base widths, depths and module heights, in that order."""
        return (self.lengths, self.widths, self.heights)

    @property
    def acc_in_dimensions(self) -> tuple[float, float, float]:
        """Corrections from approximate to precise inner dimensions."""
        return (self.acc_length, self.acc_width, self.acc_height)

    @property
    def acc_out_dimensions(self) -> tuple[float, float, float]:
        """Corrections from inner to outer dimensions."""
        return (self.out_length, self.out_width, self.out_height)

    @property
    def inner_offsets(self) -> tuple[float, float, float, float]:
        """Default inner spaces: front, side, back and top."""
        return (self.front_space, self.side_space, self.back_space, self.top_space)

    def format(self) -> str:
        """Human-readable listing of all loaded parameters."""

        def row(values) -> str:
            return "".join(f"{value:g} " for value in values)

        parts = ["\nBase dimensions: \n"]
        parts.extend(f"\t{row(values)}\n" for values in self.base_dimensions)
        parts.append(f"\nOuter dimensions add-ons: \n\t{row(self.acc_out_dimensions)}")
        parts.append(f"\n\nInner dimensions add-ons: \n\t{row(self.acc_in_dimensions)}")
        parts.append(f"\n\nMinimal spaces: \n\t{row(self.inner_offsets)}")
        parts.append(f"\n\nWall offset: \n\t{self.wall_space:g}\n")
        return "".join(parts)


def _apply_line(params: CoverParameters, line: str, line_number: int) -> None:
    stripped = line.lstrip()
    name, _, rest = stripped.partition(" ") if stripped else ("", "", "")
    # A name token ends at any whitespace, not only a space.
    match = re.match(r"(\S*)(.*)", stripped, re.DOTALL)
    name, rest = match.group(1), match.group(2)
    rest = rest.lstrip()
    if not rest.startswith(":"):
        raise ParameterError("missing ':' after the parameter name", line_number)
    tokens = rest[1:].split()

    try:
        if name in _LIST_KEYS:
            getattr(params, _LIST_KEYS[name]).extend(_to_float(t) for t in tokens)
        elif name in _SCALAR_KEYS:
            if not tokens:
                raise ValueError(f"no value given for {name!r}")
            setattr(params, _SCALAR_KEYS[name], _to_float(tokens[0]))
    except ValueError as exc:
        raise ParameterError(str(exc), line_number) from exc


def parse_parameters(text: str) -> CoverParameters:
    """Parse configuration text into ``CoverParameters``.

    Lines starting with ``#`` and empty lines are skipped; unknown names
    are ignored. Raises ``ParameterError`` on a malformed line.
    """
    params = CoverParameters()
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line or line.startswith("#"):
            continue
        _apply_line(params, line, line_number)
    return params


def load_parameters(path: PathType) -> CoverParameters:
    """Read and parse a configuration file; ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_parameters(handle.read())