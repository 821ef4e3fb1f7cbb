"""Validation and state of numeric dimension inputs (millimetres)."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Optional

from .errors import GeneratorError, InputError

NOT_GIVEN = -1
MAX_DIMENSION = 2000

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


class DimensionStatus(Enum):
    """State of the data held by an input."""

    WRONG = "wrong"
    CORRECT = "correct"
    NEUTRAL = "neutral"
    DISABLED = "disabled"


class DimensionError(ValueError):
    """Raised when a typed dimension is rejected."""

    def __init__(self, error: InputError, text: str) -> None:
        super().__init__(f"{error.name}: {text!r}")
        self.error = error


class DimensionInput:
    """A single dimension field: typed text, status and accepted value."""

    def __init__(
        self,
        errors: Optional[GeneratorError] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.errors = errors if errors is not None else GeneratorError()
        self.on_change = on_change
        self.text = ""
        self.dimension = 0
        self.status = DimensionStatus.NEUTRAL

    @property
    def error_message(self) -> str:
        """Message of the last rejected input."""
        return self.errors.message

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _reject(self, error: InputError, text: str) -> DimensionError:
        self.errors.raise_error(error)
        return DimensionError(error, text)

    def check(self, text: str) -> int:
        """Return the dimension in ``text`` or raise ``DimensionError``."""
        if not _INTEGER.fullmatch(text):
            raise self._reject(InputError.WRONG_FORMAT, text)
        number = int(text)
        if not _INT32_MIN <= number <= _INT32_MAX:
            raise self._reject(InputError.WRONG_FORMAT, text)
        if number < 0:
            raise self._reject(InputError.WRONG_VALUE, text)
        if number >= MAX_DIMENSION:
            raise self._reject(InputError.TOO_HIGH_VALUE, text)
        return number

    def submit(self, text: str) -> DimensionStatus:
        """Accept finished editing of ``text`` and update the status."""
        self.text = text
        if not text:
            self.status = DimensionStatus.NEUTRAL
        else:
            try:
                self.dimension = self.check(text)
            except DimensionError:
                self.status = DimensionStatus.WRONG
            else:
                self.status = DimensionStatus.CORRECT
        self._notify()
        return self.status

    def edit(self) -> None:
        """Mark the field as being edited."""
        self.status = DimensionStatus.NEUTRAL
        self._notify()

    def display_saved(self, value: int) -> None:
        """Show a previously accepted value as correct."""
        self.dimension = value
        self.text = str(value)
        self.status = DimensionStatus.CORRECT

    def clear(self) -> None:
        """Empty the field and reset its value."""
        self.text = ""
        self.dimension = 0
        self.status = DimensionStatus.NEUTRAL

    def value(self) -> int:
        """Accepted dimension, or ``NOT_GIVEN`` unless the status is correct."""
        if self.status is DimensionStatus.CORRECT:
            return self.dimension
        return NOT_GIVEN


class OptionalDimensionInput(DimensionInput):
    """A dimension field that is switched on and off by a check box."""

    def __init__(
        self,
        errors: Optional[GeneratorError] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(errors)
        self.enabled = False
        self._disable()
        self.on_change = on_change

    def _disable(self) -> None:
        if not self.text:
            self.status = DimensionStatus.DISABLED
        else:
            try:
                self.check(self.text)
            except DimensionError:
                self.status = DimensionStatus.WRONG
            else:
                self.status = DimensionStatus.DISABLED
        self._notify()

    def set_enabled(self, enabled: bool) -> DimensionStatus:
        """Switch the field on (re-validating its text) or off."""
        self.enabled = enabled
        if enabled:
            self.submit(self.text)
        else:
            self._disable()
        return self.status