"""Distance calculations for the game grid."""

import math


def axis_delta(a: int, b: int) -> int:
    """Absolute difference between two positions on one axis."""
    return abs(a - b)


def euclidean_distance(x1: int, y1: int, x2: int, y2: int) -> float:
    """Calculate straight-line distance between two grid points.

    The per-axis deltas are integers; only the final square root is a float.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance(0, 0, 3, 4)
        5.0
        >>> euclidean_distance(2, 2, 2, 2)
        0.0
    """
    dx = axis_delta(x1, x2)
    dy = axis_delta(y1, y2)
    return math.sqrt(dx**2 + dy**2)
