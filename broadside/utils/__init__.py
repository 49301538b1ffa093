"""Utility functions and constants for Broadside."""

from .constants import (
    BOARD_SIZE,
    FLEET_COMPOSITION,
    MAX_INPUT_ATTEMPTS,
    SERVER_HOST,
    SERVER_PORT,
)
from .distance import axis_delta, euclidean_distance

__all__ = [
    "BOARD_SIZE",
    "FLEET_COMPOSITION",
    "MAX_INPUT_ATTEMPTS",
    "SERVER_HOST",
    "SERVER_PORT",
    "axis_delta",
    "euclidean_distance",
]
