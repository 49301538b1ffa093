"""Vessel data model for ships placed on a board."""

from enum import Enum
from typing import List

from .coordinate import Coordinate


class Orientation(Enum):
    """Axis a vessel extends along from its start coordinate."""

    HORIZONTAL = "H"  # Steps along x
    VERTICAL = "V"  # Steps along y


class Vessel:
    """A contiguous run of coordinates representing one ship.

    Each coordinate carries a hit flag. The coordinate list is fixed at
    construction; the only mutation afterwards is recording a hit. Bounds
    are not checked here, that is the board's job.
    """

    def __init__(self, start: Coordinate, orientation: Orientation, length: int):
        """Build a vessel stepping from start along the orientation's axis.

        Args:
            start: First (top/left-most) coordinate of the vessel
            orientation: HORIZONTAL or VERTICAL
            length: Number of cells (must be >= 1)

        Raises:
            ValueError: If length is less than 1
        """
        if length < 1:
            raise ValueError(f"Invalid length: {length} (must be >= 1)")

        self.orientation = orientation
        self._coordinates: List[Coordinate] = []
        for offset in range(length):
            if orientation is Orientation.HORIZONTAL:
                self._coordinates.append(Coordinate(start.x + offset, start.y))
            else:
                self._coordinates.append(Coordinate(start.x, start.y + offset))

        # Hit flags aligned with self._coordinates
        self._hits: List[bool] = [False] * length

    def __len__(self) -> int:
        return len(self._coordinates)

    def __contains__(self, coord: Coordinate) -> bool:
        return coord in self._coordinates

    def __repr__(self) -> str:
        return (
            f"Vessel(start={self._coordinates[0]}, "
            f"orientation={self.orientation.name}, length={len(self)})"
        )

    @property
    def coordinates(self) -> List[Coordinate]:
        """Occupied coordinates in order from the start cell."""
        return list(self._coordinates)

    @property
    def hit_coordinates(self) -> List[Coordinate]:
        """Occupied coordinates that have been hit."""
        return [c for c, hit in zip(self._coordinates, self._hits) if hit]

    @property
    def is_destroyed(self) -> bool:
        """True once every coordinate has been hit."""
        return all(self._hits)

    def record_guess(self, coord: Coordinate) -> bool:
        """Record a guess against this vessel.

        Guessing an already-hit coordinate is a no-op that still reports a hit.

        Args:
            coord: Guessed coordinate

        Returns:
            True if the coordinate belongs to this vessel, False otherwise
        """
        try:
            index = self._coordinates.index(coord)
        except ValueError:
            return False
        self._hits[index] = True
        return True
