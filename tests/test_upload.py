"""Tests for the input collector: file numbers and selection state."""

import pytest

from econstruct.context import Coordinate
from econstruct.upload import (
    DEFAULT_CENTER,
    MISSING_NUMBER_ERROR,
    NO_LOCATION_ERROR,
    OUT_OF_RANGE_ERROR,
    SelectionIncomplete,
    SelectionState,
    extract_trailing_number,
    format_code,
)

HERE = Coordinate(lat=-36.80837, lng=174.72353)


class TestExtractTrailingNumber:
    @pytest.mark.parametrize(
        "name, number",
        [
            ("something333.ifc", None),
            ("building-042.ifc", 42),
            ("plan7.csv", 7),
            ("tower100.ifc", 100),
            ("model001", 1),
            ("archive.tar.5", None),
        ],
    )
    def test_numbers(self, name, number) -> None:
        assert extract_trailing_number(name).number == number

    def test_missing_digits(self) -> None:
        result = extract_trailing_number("report.ifc")
        assert result.number is None
        assert result.error == MISSING_NUMBER_ERROR

    @pytest.mark.parametrize("name", ["something333.ifc", "zero000.ifc", "x101.csv", "big1000.ifc"])
    def test_out_of_range(self, name) -> None:
        result = extract_trailing_number(name)
        assert result.number is None
        assert result.error == OUT_OF_RANGE_ERROR

    def test_only_last_extension_is_dropped(self) -> None:
        assert extract_trailing_number("site12.v2.ifc").number == 2

    def test_empty_name(self) -> None:
        assert extract_trailing_number("").error == MISSING_NUMBER_ERROR

    @pytest.mark.parametrize("name", ["plan7\n", "plan7.ifc.\n", "plan\n7\n"])
    def test_trailing_newline_is_not_a_number_end(self, name) -> None:
        assert extract_trailing_number(name).number is None


def test_format_code() -> None:
    assert format_code(7) == "007"
    assert format_code(42) == "042"
    assert format_code(100) == "100"


class TestSelectionState:
    def test_defaults(self) -> None:
        state = SelectionState()
        assert state.center == DEFAULT_CENTER
        assert state.marker is None
        assert not state.can_continue

    def test_requires_file_and_marker(self) -> None:
        state = SelectionState().with_file("plan7.ifc")
        assert not state.can_continue
        state = state.with_marker(HERE)
        assert state.can_continue
        assert state.continue_code() == "007"

    def test_invalid_file_blocks_continue(self) -> None:
        state = SelectionState().with_marker(HERE).with_file("report.ifc")
        assert not state.can_continue
        with pytest.raises(SelectionIncomplete, match="must end in a number"):
            state.continue_code()

    def test_missing_marker_blocks_continue(self) -> None:
        state = SelectionState().with_file("plan7.ifc")
        with pytest.raises(SelectionIncomplete, match=NO_LOCATION_ERROR):
            state.continue_code()

    def test_new_file_replaces_previous_error(self) -> None:
        state = SelectionState().with_file("report.ifc").with_file("plan8.ifc")
        assert state.file_error == ""
        assert state.file_number == 8

    def test_search_result_moves_center_and_marker(self) -> None:
        state = SelectionState(search_error="No results.").with_search_result(HERE)
        assert state.center == HERE and state.marker == HERE
        assert state.search_error == ""

    def test_failed_search_keeps_marker(self) -> None:
        state = SelectionState().with_marker(HERE).with_search_result(None, "Search failed.")
        assert state.marker == HERE
        assert state.search_error == "Search failed."

    def test_blank_search_clears_previous_error(self) -> None:
        state = SelectionState().with_marker(HERE).with_search_result(None, "No results.")
        state = state.with_search_result(None)
        assert state.search_error == ""
        assert state.marker == HERE

    def test_dashboard_context(self) -> None:
        ctx = SelectionState().with_file("plan7.ifc").with_marker(HERE).dashboard_context()
        assert ctx.file_name == "plan7.ifc"
        assert ctx.location == HERE
