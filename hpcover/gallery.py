"""Circular browsing of cover images and of the parts of a cover."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Union

PathType = Union[str, "PathLike[str]"]

_COVER_SIZES = {0: "S", 2: "M", 4: "L", 6: "XL"}


class Step(Enum):
    """Steps of the generator, each with its own set of example images."""

    STEP_1 = 0
    STEP_2 = 1
    STEP_3 = 2


class Direction(Enum):
    """Direction in which the images are browsed."""

    LEFT = "left"
    RIGHT = "right"


def cover_size_for_modules(modules: int) -> Optional[str]:
    """Size symbol (S, M, L or XL) of a standard cover with ``modules`` wall modules.

    Returns ``None`` for a module count that has no result images.
    """
    return _COVER_SIZES.get(modules)


class ImageCarousel:
    """A circular list of image files with a remembered browsing direction."""

    def __init__(self, step_dirs: Optional[Mapping[Step, PathType]] = None) -> None:
        self.step_dirs: dict[Step, Path] = {
            step: Path(path) for step, path in (step_dirs or {}).items()
        }
        self.files: list[Path] = []
        self.index = 0
        self.direction = Direction.RIGHT
        self.load_step(Step.STEP_1)

    def __len__(self) -> int:
        return len(self.files)

    @property
    def current(self) -> Optional[Path]:
        """File shown at the current position, or ``None`` if there is none."""
        if 0 <= self.index < len(self.files):
            return self.files[self.index]
        return None

    def load_directory(self, path: PathType) -> list[Path]:
        """Replace the images with every file in ``path``, sorted by name.

        A missing directory leaves the carousel empty.
        """
        directory = Path(path)
        try:
            entries: Iterable[Path] = [p for p in directory.iterdir() if p.is_file()]
        except OSError:
            entries = []
        self.files = sorted(entries, key=lambda p: (p.name.lower(), p.name))
        return self.files

    def load_step(self, step: Step) -> list[Path]:
        """Load the example images configured for ``step``; unknown steps change nothing."""
        directory = self.step_dirs.get(step)
        if directory is None:
            return self.files
        return self.load_directory(directory)

    def next(self) -> Optional[Path]:
        """Move to the next image, wrapping to the first, and browse rightwards."""
        if self.files:
            self.index = 0 if self.index >= len(self.files) - 1 else self.index + 1
        self.direction = Direction.RIGHT
        return self.current

    def previous(self) -> Optional[Path]:
        """Move to the previous image, wrapping to the last, and browse leftwards."""
        if self.files:
            self.index = len(self.files) - 1 if self.index == 0 else self.index - 1
        self.direction = Direction.LEFT
        return self.current

    def advance(self) -> Optional[Path]:
        """Move one image in the last browsing direction (used by a slide show)."""
        if self.direction is Direction.RIGHT:
            return self.next()
        return self.previous()


class PartCarousel:
    """A circular list of cover parts, each a model path and a quantity."""

    def __init__(self, parts: Sequence[tuple[str, int]] = ()) -> None:
        self.parts: list[tuple[str, int]] = []
        self.index = 0
        self.label = " "
        if parts:
            self.set_parts(parts)

    def __len__(self) -> int:
        return len(self.parts)

    def set_parts(self, parts: Sequence[tuple[str, int]]) -> Optional[str]:
        """Replace the parts and return the description of the current one."""
        self.parts = [(str(path), int(count)) for path, count in parts]
        if not 0 <= self.index < len(self.parts):
            self.index = 0
        return self._refresh()

    def _refresh(self) -> Optional[str]:
        if not self.parts:
            return None
        self.label = self.part_info()
        return self.label

    def next(self) -> Optional[str]:
        """Show the next part, wrapping to the first."""
        self.index += 1
        if self.index >= len(self.parts):
            self.index = 0
        return self._refresh()

    def previous(self) -> Optional[str]:
        """Show the previous part, wrapping to the last."""
        self.index -= 1
        if self.index < 0:
            self.index = len(self.parts) - 1
        return self._refresh()

    def part_info(self) -> str:
        """File name of the current part followed by `` x<quantity>``.

        Raises ``IndexError`` when there are no parts.
        """
        if not 0 <= self.index < len(self.parts):
            raise IndexError("no part at the current position")
        path, count = self.parts[self.index]
        return f"{path.split('/')[-1]} x{count}"