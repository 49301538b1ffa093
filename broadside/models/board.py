"""Board data model: one player's grid and fleet."""

from typing import List

from ..errors import OutOfBoundsError, OverlapError
from .coordinate import Coordinate
from .vessel import Vessel


class Board:
    """A size x size playing surface owning a player's vessels.

    Vessels are appended during setup and never removed. No two vessels
    share a coordinate and every occupied coordinate is in [0, size) on
    both axes.
    """

    def __init__(self, size: int):
        """Create an empty board.

        Args:
            size: Width and height of the grid (must be > 0)

        Raises:
            ValueError: If size is not positive
        """
        if size <= 0:
            raise ValueError(f"Invalid size: {size} (must be > 0)")
        self.size = size
        self._vessels: List[Vessel] = []

    @property
    def vessels(self) -> List[Vessel]:
        """Vessels in placement order."""
        return list(self._vessels)

    @property
    def vessel_count(self) -> int:
        return len(self._vessels)

    def in_bounds(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.size and 0 <= coord.y < self.size

    def place_vessel(self, vessel: Vessel) -> None:
        """Add a vessel to the board.

        Overlap is checked before bounds, so a vessel that both overlaps
        and sticks out of the grid is reported as an overlap.

        Args:
            vessel: Vessel to place

        Raises:
            OverlapError: If any coordinate is already occupied
            OutOfBoundsError: If any coordinate lies outside the grid
        """
        occupied = set(self.all_occupied_coordinates())
        clashes = occupied.intersection(vessel.coordinates)
        if clashes:
            first = min(clashes)
            raise OverlapError(f"ship overlaps an existing ship at {first}")

        for coord in vessel.coordinates:
            if not self.in_bounds(coord):
                raise OutOfBoundsError(
                    f"ship is out of bounds at {coord} (grid is {self.size}x{self.size})"
                )

        self._vessels.append(vessel)

    def resolve_guess(self, coord: Coordinate) -> bool:
        """Fire at a coordinate on this board.

        Args:
            coord: Guessed coordinate

        Returns:
            True if a vessel occupies the coordinate, False on a miss
        """
        for vessel in self._vessels:
            if vessel.record_guess(coord):
                return True
        return False

    def all_occupied_coordinates(self) -> List[Coordinate]:
        """Every occupied coordinate, in placement order then vessel order."""
        return [c for vessel in self._vessels for c in vessel.coordinates]

    def all_hit_coordinates(self) -> List[Coordinate]:
        """Every coordinate that has been hit."""
        return [c for vessel in self._vessels for c in vessel.hit_coordinates]

    def is_fully_destroyed(self) -> bool:
        """True when every occupied coordinate has been hit.

        An empty board counts as destroyed.
        """
        return len(self.all_hit_coordinates()) == len(self.all_occupied_coordinates())


class BoardView:
    """Read-only window onto a Board.

    Exposes the board's queries but not place_vessel or resolve_guess, so
    holders of a view cannot change the fleet behind the match's back.
    """

    def __init__(self, board: Board):
        self._board = board

    def __repr__(self) -> str:
        return f"BoardView(size={self.size}, vessels={self.vessel_count})"

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def vessels(self) -> List[Vessel]:
        return self._board.vessels

    @property
    def vessel_count(self) -> int:
        return self._board.vessel_count

    def in_bounds(self, coord: Coordinate) -> bool:
        return self._board.in_bounds(coord)

    def all_occupied_coordinates(self) -> List[Coordinate]:
        return self._board.all_occupied_coordinates()

    def all_hit_coordinates(self) -> List[Coordinate]:
        return self._board.all_hit_coordinates()

    def is_fully_destroyed(self) -> bool:
        return self._board.is_fully_destroyed()
