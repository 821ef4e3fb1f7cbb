import pytest

from hpcover.dimensions import (
    NOT_GIVEN,
    DimensionError,
    DimensionInput,
    DimensionStatus,
    OptionalDimensionInput,
)
from hpcover.errors import GeneratorError, InputError


@pytest.mark.parametrize("text", ["0", "150", "1999", " 42 ", "+7"])
def test_check_accepts_valid(text):
    assert DimensionInput().check(text) == int(text)


@pytest.mark.parametrize(
    "text, error",
    [
        ("abc", InputError.WRONG_FORMAT),
        ("1_000", InputError.WRONG_FORMAT),
        ("12.5", InputError.WRONG_FORMAT),
        ("99999999999", InputError.WRONG_FORMAT),
        ("-1", InputError.WRONG_VALUE),
        ("2000", InputError.TOO_HIGH_VALUE),
        ("5000", InputError.TOO_HIGH_VALUE),
    ],
)
def test_check_rejects(text, error):
    with pytest.raises(DimensionError) as info:
        DimensionInput().check(text)
    assert info.value.error is error


def test_check_records_message_in_handler():
    handler = GeneratorError([], ["fmt", "neg", "high"])
    field = DimensionInput(handler)
    with pytest.raises(DimensionError):
        field.check("-3")
    assert field.error_message == "neg"


def test_submit_valid_sets_correct_and_value():
    field = DimensionInput()
    assert field.submit("850") is DimensionStatus.CORRECT
    assert field.value() == 850


def test_submit_empty_is_neutral():
    field = DimensionInput()
    assert field.submit("") is DimensionStatus.NEUTRAL
    assert field.value() == NOT_GIVEN


def test_submit_wrong_keeps_previous_dimension_hidden():
    field = DimensionInput()
    field.submit("300")
    assert field.submit("x") is DimensionStatus.WRONG
    assert field.value() == NOT_GIVEN
    assert field.dimension == 300


def test_submit_notifies():
    calls = []
    field = DimensionInput(on_change=lambda: calls.append(1))
    field.submit("10")
    field.submit("")
    field.edit()
    assert len(calls) == 3


def test_edit_makes_value_unavailable():
    field = DimensionInput()
    field.submit("120")
    field.edit()
    assert field.status is DimensionStatus.NEUTRAL
    assert field.value() == NOT_GIVEN


def test_display_saved_round_trip():
    field = DimensionInput()
    field.display_saved(640)
    assert field.text == "640"
    assert field.status is DimensionStatus.CORRECT
    assert field.value() == 640


def test_clear_resets():
    field = DimensionInput()
    field.submit("640")
    field.clear()
    assert (field.text, field.dimension, field.status) == ("", 0, DimensionStatus.NEUTRAL)


def test_optional_starts_disabled():
    field = OptionalDimensionInput()
    assert field.status is DimensionStatus.DISABLED
    assert field.enabled is False
    assert field.value() == NOT_GIVEN


def test_optional_enable_empty_is_neutral():
    field = OptionalDimensionInput()
    assert field.set_enabled(True) is DimensionStatus.NEUTRAL


def test_optional_enable_then_submit_and_disable():
    field = OptionalDimensionInput()
    field.set_enabled(True)
    field.submit("500")
    assert field.value() == 500
    assert field.set_enabled(False) is DimensionStatus.DISABLED
    assert field.value() == NOT_GIVEN
    assert field.set_enabled(True) is DimensionStatus.CORRECT
    assert field.value() == 500


def test_optional_disable_with_wrong_text_is_wrong():
    field = OptionalDimensionInput()
    field.set_enabled(True)
    field.submit("abc")
    assert field.set_enabled(False) is DimensionStatus.WRONG


def test_optional_construction_does_not_notify():
    calls = []
    field = OptionalDimensionInput(on_change=lambda: calls.append(1))
    assert calls == []
    field.set_enabled(False)
    assert calls == [1]