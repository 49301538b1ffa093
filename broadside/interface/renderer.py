"""ASCII board rendering with optional ship reveal.

This module renders a board as a text grid, either from its owner's
point of view (ships visible) or from the opponent's (hits only).
"""

from typing import Union

from ..models.board import Board, BoardView
from ..models.coordinate import Coordinate


class BoardRenderer:
    """Renders a size x size board as ASCII art."""

    def __init__(self, board: Union[Board, BoardView], reveal_unhit: bool):
        """Initialize renderer.

        Args:
            board: Board to render (read only)
            reveal_unhit: If True, show unhit ship cells (owner view)
        """
        self.board = board
        self.reveal_unhit = reveal_unhit

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """Render the board.

        Output format (3x3 board, owner view):
          1 2 3
        A o o .
        B x . .
        C . . .

        Legend:
        - 'x' = hit ship cell
        - 'o' = unhit ship cell (owner view only)
        - '.' = water, or unhit ship cell in opponent view

        Every line carries a trailing space and ends with a newline.

        Returns:
            Multi-line string representing the board
        """
        size = self.board.size
        occupied = set(self.board.all_occupied_coordinates())
        hit = set(self.board.all_hit_coordinates())

        lines = ["  " + "".join(f"{n} " for n in range(1, size + 1))]
        for y in range(size):
            cells = [self._render_cell(Coordinate(x, y), occupied, hit) for x in range(size)]
            lines.append(f"{self._row_label(y)} " + "".join(f"{c} " for c in cells))

        return "\n".join(lines) + "\n"

    def _render_cell(self, coord: Coordinate, occupied: set, hit: set) -> str:
        if coord in hit:
            return "x"
        elif self.reveal_unhit and coord in occupied:
            return "o"
        else:
            return "."

    @staticmethod
    def _row_label(row: int) -> str:
        """Letter label for a row, 'A' for row 0."""
        return chr(ord("A") + row)


def owner_view(board: Union[Board, BoardView]) -> str:
    """Board as its owner sees it, ships included."""
    return BoardRenderer(board, reveal_unhit=True).render()


def opponent_view(board: Union[Board, BoardView]) -> str:
    """Board as the opponent sees it, confirmed hits only."""
    return BoardRenderer(board, reveal_unhit=False).render()
