"""Collection of the generator's input dimensions across its steps."""

from __future__ import annotations

from enum import Enum
from itertools import islice
from os import PathLike
from typing import Mapping, Optional, Sequence, Union

from .dimensions import NOT_GIVEN, DimensionInput, DimensionStatus
from .gallery import Step

PathType = Union[str, "PathLike[str]"]

INPUT_COUNTS = {Step.STEP_1: 3, Step.STEP_2: 3, Step.STEP_3: 4}


class InputsState(Enum):
    """Overall state of the inputs of one step."""

    NO_INPUTS = "no_inputs"
    ALL_CORRECT = "all_correct"
    ONE_WRONG = "one_wrong"
    EDITING = "editing"


def read_descriptions(path: PathType, limit: int) -> list[str]:
    """Read up to ``limit`` non-empty lines; ``OSError`` if the file cannot be opened."""
    with open(path, encoding="utf-8", newline=None) as handle:
        lines = (line.rstrip("\n") for line in handle)
        return list(islice(filter(None, lines), limit))


class DataCollector:
    """Holds the dimensions typed in each step, ``-1`` where not given."""

    def __init__(
        self,
        step_titles: Sequence[str] = (),
        labels: Optional[Mapping[Step, Sequence[str]]] = None,
    ) -> None:
        self.step_titles = list(step_titles)
        self.labels = {step: list(texts) for step, texts in (labels or {}).items()}
        self.dimensions = [[NOT_GIVEN] * INPUT_COUNTS[step] for step in Step]

    @classmethod
    def from_files(
        cls, label_paths: Mapping[Step, PathType], titles_path: PathType
    ) -> "DataCollector":
        """Read the step titles and the input labels of each step from files."""
        labels = {
            step: read_descriptions(path, INPUT_COUNTS[step])
            for step, path in label_paths.items()
        }
        return cls(read_descriptions(titles_path, len(Step)), labels)

    def check_inputs(
        self, inputs: Sequence[DimensionInput]
    ) -> tuple[Optional[InputsState], str]:
        """Overall state of a step's inputs and the message of a wrong one.

        The state is ``None`` when none of the conditions applies.
        """
        statuses = [field.status for field in inputs]
        if all(status is DimensionStatus.DISABLED for status in statuses):
            return InputsState.NO_INPUTS, ""
        if all(
            status in (DimensionStatus.CORRECT, DimensionStatus.DISABLED)
            for status in statuses
        ):
            return InputsState.ALL_CORRECT, ""
        wrong = next((f for f in inputs if f.status is DimensionStatus.WRONG), None)
        if wrong is not None:
            return InputsState.ONE_WRONG, wrong.error_message
        if any(status is DimensionStatus.NEUTRAL for status in statuses):
            return InputsState.EDITING, ""
        return None, ""

    def save(self, step: Step, values: Sequence[int]) -> list[int]:
        """Store the values of ``step``; their number must match the step's inputs."""
        expected = INPUT_COUNTS[step]
        if len(values) != expected:
            raise ValueError(f"{step.name} takes {expected} values, got {len(values)}")
        self.dimensions[step.value] = [int(value) for value in values]
        return self.dimensions[step.value]