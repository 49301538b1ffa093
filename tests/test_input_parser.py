"""Tests for console input parsing."""

import pytest

from broadside.interface.input_parser import (
    ErrorType,
    InputParseError,
    parse_grid_index,
    parse_integer,
    parse_orientation,
)
from broadside.models import Orientation


def test_parse_integer():
    """Test whole numbers with surrounding whitespace."""
    assert parse_integer("7") == 7
    assert parse_integer(" -3 \n") == -3


def test_parse_integer_rejects_text():
    """Test non-integers raise with the re-prompt message."""
    for bad in ["", "abc", "1.5", "2 3"]:
        with pytest.raises(InputParseError) as exc_info:
            parse_integer(bad)
        assert exc_info.value.error_type == ErrorType.NOT_AN_INTEGER
        assert exc_info.value.message == "Please enter a valid integer: "


def test_parse_grid_index_is_zero_based():
    """Test 1-indexed input becomes 0-indexed."""
    assert parse_grid_index("1") == 0
    assert parse_grid_index("10") == 9
    assert parse_grid_index("0") == -1


def test_parse_orientation():
    """Test H/V letters in either case."""
    assert parse_orientation("H") is Orientation.HORIZONTAL
    assert parse_orientation("h") is Orientation.HORIZONTAL
    assert parse_orientation("V\n") is Orientation.VERTICAL
    assert parse_orientation("v") is Orientation.VERTICAL


def test_parse_orientation_rejects_other_letters():
    """Test anything but H or V is rejected."""
    for bad in ["", "X", "horizontal", "HV"]:
        with pytest.raises(InputParseError) as exc_info:
            parse_orientation(bad)
        assert exc_info.value.error_type == ErrorType.BAD_ORIENTATION
        assert exc_info.value.message == "Please enter either H or V: "
