"""Grid coordinate value type."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.distance import axis_delta, euclidean_distance


class Direction(Enum):
    """Single-step movement on the grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_input(cls, text: str) -> Optional["Direction"]:
        """Parse a direction typed by a player.

        Accepts the full name or its first letter, in any case.

        Args:
            text: Raw user input (e.g., "up", "U", "Right")

        Returns:
            Matching Direction, or None if the text is not recognized
        """
        aliases = {
            "UP": cls.UP,
            "U": cls.UP,
            "DOWN": cls.DOWN,
            "D": cls.DOWN,
            "LEFT": cls.LEFT,
            "L": cls.LEFT,
            "RIGHT": cls.RIGHT,
            "R": cls.RIGHT,
        }
        return aliases.get(text.strip().upper())


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable 2D grid position.

    Ordered by x, then y, so coordinates can be sorted and used as
    set members or dictionary keys.
    """

    x: int  # Column (0-based)
    y: int  # Row (0-based)

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def distance_to(self, other: "Coordinate") -> float:
        """Euclidean distance to another coordinate."""
        return euclidean_distance(self.x, self.y, other.x, other.y)

    def is_adjacent(self, other: "Coordinate") -> bool:
        """Check whether another coordinate counts as a neighbour.

        Only rejects coordinates that are more than one step away on BOTH
        axes, so (0, 0) and (0, 7) are adjacent here.

        Args:
            other: Coordinate to compare against

        Returns:
            False only if both axis deltas exceed 1
        """
        return not (axis_delta(self.x, other.x) > 1 and axis_delta(self.y, other.y) > 1)

    def moved(self, direction: Direction) -> "Coordinate":
        """Return the coordinate one step away in the given direction."""
        if direction is Direction.UP:
            return Coordinate(self.x, self.y + 1)
        elif direction is Direction.DOWN:
            return Coordinate(self.x, self.y - 1)
        elif direction is Direction.LEFT:
            return Coordinate(self.x - 1, self.y)
        else:
            return Coordinate(self.x + 1, self.y)
