"""Generation of a standard heat-pump cover from the user's dimensions."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .errors import GenError, GeneratorError, InputError
from .parameters import CoverParameters

NOT_GIVEN = -1
MAX_WALL_MODULES = 3

# Expected lengths of the rows of the dimension matrix:
# device size, distances to obstacles, inner spaces.
_ROW_LENGTHS = (3, 3, 4)


def _u16(value: float) -> int:
    """Store a value the way an unsigned 16-bit field would."""
    return math.trunc(value) % 65536


def _half(value: int) -> int:
    """Integer half, truncated toward zero."""
    return math.trunc(value / 2)


def _first_failure(checks: Sequence[tuple[bool, GenError]]) -> Optional[GenError]:
    return next((error for ok, error in checks if not ok), None)


class HPCover:
    """Decides whether a standard cover fits the device and computes its size.

    ``generate`` takes a matrix of three rows: the device's width, depth and
    height; the distances to obstacles on the left, right and behind; and the
    inner spaces at the sides, front, back and top. ``-1`` means "not given".
    """

    def __init__(
        self,
        parameters: CoverParameters,
        errors: Optional[GeneratorError] = None,
    ) -> None:
        self.parameters = parameters
        self.errors = errors if errors is not None else GeneratorError()
        self.dimensions: list[list[int]] = []
        self.inner_dimensions = [0, 0, 0]
        self.outer_dimensions = [0, 0, 0]
        self.approx_inner_dimensions = [0, 0, 0]
        self.modules = 0
        self._base: tuple[list[float], list[float], list[float]] = ([], [], [])

    @property
    def error(self) -> GenError | InputError | None:
        """The most recently raised generator error."""
        return self.errors.error

    def _validate(self, dimensions: list[list[int]]) -> None:
        if len(dimensions) < len(_ROW_LENGTHS):
            raise ValueError("dimension matrix needs three rows")
        for row, (values, needed) in enumerate(zip(dimensions, _ROW_LENGTHS)):
            if len(values) < needed:
                raise ValueError(f"row {row} needs {needed} values")
        lengths, widths, heights = self.parameters.base_dimensions
        if not lengths or not widths:
            raise ValueError("no base lengths or widths configured")
        if len(heights) < 3:
            raise ValueError("base, standard and top module heights are required")

    def generate(self, dimensions: Sequence[Sequence[int]]) -> bool:
        """Generate the cover; ``False`` when no standard cover fits.

        The reason of a failure is raised on ``errors``.
        """
        matrix = [list(row) for row in dimensions]
        self._validate(matrix)
        self.dimensions = matrix
        self._base = tuple(sorted(values) for values in self.parameters.base_dimensions)

        length_ok = self._count_inner_length()
        width_ok = self._count_inner_width()
        height_ok = self._count_inner_height()

        failure = _first_failure(
            [
                (length_ok, GenError.TOO_LONG),
                (width_ok, GenError.TOO_WIDE),
                (height_ok, GenError.TOO_HIGH),
            ]
        )
        if failure is not None:
            self.errors.raise_error(failure)
            return False

        if not self._search_parts_library():
            return False

        self._count_outer_dimensions()

        obstacles = self.dimensions[1]
        failure = _first_failure(
            [
                (self._no_length_collision(obstacles[0]), GenError.LEFT_COLLISION),
                (self._no_length_collision(obstacles[1]), GenError.RIGHT_COLLISION),
                (self._no_width_collision(obstacles[2]), GenError.BACK_COLLISION),
            ]
        )
        if failure is not None:
            self.errors.raise_error(failure)
            return False
        return True

    def _count_inner_length(self) -> bool:
        acc = self.parameters.acc_in_dimensions
        max_length = math.trunc(self._base[0][-1] + acc[0])
        spaces = self.dimensions[2]
        if spaces[0] == NOT_GIVEN:
            spaces[0] = math.trunc(self.parameters.side_space)
        self.approx_inner_dimensions[0] = _u16(self.dimensions[0][0] + 2 * spaces[0])
        return self.approx_inner_dimensions[0] <= max_length

    def _count_inner_width(self) -> bool:
        acc = self.parameters.acc_in_dimensions
        max_width = math.trunc(self._base[1][-1] + acc[1])
        spaces = self.dimensions[2]
        if spaces[1] == NOT_GIVEN:
            spaces[1] = math.trunc(self.parameters.front_space)
        if spaces[2] == NOT_GIVEN:
            spaces[2] = math.trunc(self.parameters.back_space)
        self.approx_inner_dimensions[1] = _u16(self.dimensions[0][1] + spaces[1] + spaces[2])
        return self.approx_inner_dimensions[1] <= max_width

    def _count_inner_height(self) -> bool:
        heights = self._base[2]
        max_height = math.trunc(heights[0] + heights[2])
        max_height = math.trunc(max_height + heights[1] * MAX_WALL_MODULES)
        spaces = self.dimensions[2]
        if spaces[3] == NOT_GIVEN:
            spaces[3] = math.trunc(self.parameters.top_space)
        self.approx_inner_dimensions[2] = _u16(self.dimensions[0][2] + spaces[3])
        return self.approx_inner_dimensions[2] <= max_height

    def _pick_dimension(self, index: int) -> float:
        acc = self.parameters.acc_in_dimensions[index]
        required = self.approx_inner_dimensions[index]
        found = next(
            (available for available in self._base[index] if available + acc >= required),
            -1.0,
        )
        self.inner_dimensions[index] = _u16(found + acc)
        return found

    def _pick_modules_quantity(self) -> int:
        heights = self._base[2]
        required = self.approx_inner_dimensions[2]
        total = _u16(heights[0] + heights[2] + self.parameters.acc_height)
        count = 0
        while total < required:
            if heights[1] <= 0:
                raise ValueError("standard module height must be positive")
            total = _u16(total + heights[1])
            count += 1
        self.inner_dimensions[2] = total
        return count * 2

    def _search_parts_library(self) -> bool:
        length = math.trunc(self._pick_dimension(0))
        width = math.trunc(self._pick_dimension(1))
        if length == -1:
            self.errors.raise_error(GenError.NO_PART_LENGTH)
            return False
        if width == -1:
            self.errors.raise_error(GenError.NO_PART_WIDTH)
            return False
        self.modules = self._pick_modules_quantity()
        return True

    def _count_outer_dimensions(self) -> None:
        self.outer_dimensions = [
            _u16(inner + out)
            for inner, out in zip(self.inner_dimensions, self.parameters.acc_out_dimensions)
        ]

    def _no_length_collision(self, constraint: int) -> bool:
        if constraint == NOT_GIVEN:
            return True
        half_cover = self.outer_dimensions[0] // 2
        to_obstacle = _half(self.dimensions[0][0]) + constraint
        return to_obstacle > half_cover

    def _no_width_collision(self, constraint: int) -> bool:
        if constraint == NOT_GIVEN:
            return True
        depth = self.dimensions[0][1]
        to_obstacle = _half(depth) + constraint
        offset = self.inner_dimensions[1] // 2 - _half(depth) - self.dimensions[2][2]
        half_cover = self.outer_dimensions[1] // 2 - offset
        return to_obstacle > half_cover