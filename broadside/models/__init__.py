"""Data models for Broadside."""

from .board import Board, BoardView
from .coordinate import Coordinate, Direction
from .player import Player
from .vessel import Orientation, Vessel

__all__ = [
    "Coordinate",
    "Direction",
    "Orientation",
    "Vessel",
    "Board",
    "BoardView",
    "Player",
]
