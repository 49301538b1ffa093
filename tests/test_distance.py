"""Tests for distance calculations."""

import math

from broadside.utils.distance import axis_delta, euclidean_distance


def test_axis_delta():
    """Test absolute per-axis difference."""
    assert axis_delta(3, 7) == 4
    assert axis_delta(7, 3) == 4
    assert axis_delta(-2, 2) == 4


def test_euclidean_distance():
    """Test straight-line distance."""
    assert euclidean_distance(0, 0, 3, 4) == 5.0
    assert euclidean_distance(1, 1, 1, 1) == 0.0
    assert math.isclose(euclidean_distance(0, 0, 1, 2), math.sqrt(5))


def test_euclidean_distance_is_symmetric():
    """Test distance does not depend on argument order."""
    assert euclidean_distance(2, 9, 5, 1) == euclidean_distance(5, 1, 2, 9)
