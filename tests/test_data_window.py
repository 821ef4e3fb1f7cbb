import pytest

from hpcover.data_window import DataCollector, InputsState, read_descriptions
from hpcover.dimensions import DimensionInput, OptionalDimensionInput
from hpcover.errors import GeneratorError
from hpcover.gallery import Step


def test_read_descriptions_skips_empty_and_limits(tmp_path):
    path = tmp_path / "desc.txt"
    path.write_text("Width\n\nDepth\nHeight\nExtra\n", encoding="utf-8")
    assert read_descriptions(path, 3) == ["Width", "Depth", "Height"]


def test_read_descriptions_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_descriptions(tmp_path / "missing.txt", 3)


def test_initial_dimensions_not_given():
    collector = DataCollector()
    assert collector.dimensions == [[-1, -1, -1], [-1, -1, -1], [-1, -1, -1, -1]]


def test_save_stores_step_values():
    collector = DataCollector()
    collector.save(Step.STEP_2, [10, -1, 30])
    assert collector.dimensions[1] == [10, -1, 30]
    assert collector.dimensions[0] == [-1, -1, -1]


def test_save_wrong_count_raises():
    collector = DataCollector()
    with pytest.raises(ValueError):
        collector.save(Step.STEP_3, [1, 2, 3])


def test_all_disabled_gives_no_inputs():
    inputs = [OptionalDimensionInput() for _ in range(3)]
    assert DataCollector().check_inputs(inputs) == (InputsState.NO_INPUTS, "")


def test_all_correct():
    inputs = [DimensionInput() for _ in range(3)]
    for field, text in zip(inputs, ["100", "200", "300"]):
        field.submit(text)
    state, _ = DataCollector().check_inputs(inputs)
    assert state is InputsState.ALL_CORRECT


def test_correct_mixed_with_disabled_is_correct():
    correct = OptionalDimensionInput()
    correct.text = "50"
    correct.set_enabled(True)
    inputs = [correct, OptionalDimensionInput()]
    state, _ = DataCollector().check_inputs(inputs)
    assert state is InputsState.ALL_CORRECT


def test_one_wrong_reports_message():
    errors = GeneratorError(input_messages=["\nformat\n", "\nnegative\n", "\ntoo high\n"])
    inputs = [DimensionInput(errors), DimensionInput(errors)]
    inputs[0].submit("100")
    inputs[1].submit("abc")
    assert DataCollector().check_inputs(inputs) == (InputsState.ONE_WRONG, "\nformat\n")


def test_editing_state():
    inputs = [DimensionInput(), DimensionInput()]
    inputs[0].submit("100")
    state, message = DataCollector().check_inputs(inputs)
    assert state is InputsState.EDITING
    assert message == ""


def test_from_files(tmp_path):
    titles = tmp_path / "titles.txt"
    titles.write_text("First\nSecond\nThird\n", encoding="utf-8")
    labels = tmp_path / "labels.txt"
    labels.write_text("a\nb\nc\nd\ne\n", encoding="utf-8")
    collector = DataCollector.from_files({Step.STEP_3: labels}, titles)
    assert collector.step_titles == ["First", "Second", "Third"]
    assert collector.labels[Step.STEP_3] == ["a", "b", "c", "d"]