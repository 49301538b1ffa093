"""Tests for ASCII board renderer."""

from broadside.interface.renderer import BoardRenderer, opponent_view, owner_view
from broadside.models import Board, Coordinate, Orientation, Vessel


def create_board() -> Board:
    """3x3 board with a 2-long ship on row A, one cell hit, and a miss elsewhere."""
    board = Board(3)
    board.place_vessel(Vessel(Coordinate(0, 0), Orientation.HORIZONTAL, 2))
    board.resolve_guess(Coordinate(1, 0))
    board.resolve_guess(Coordinate(2, 2))  # Miss leaves no mark
    return board


def test_render_empty_board():
    """Test rendering a board with no ships."""
    rendered = BoardRenderer(Board(3), reveal_unhit=True).render()
    assert rendered == "  1 2 3 \nA . . . \nB . . . \nC . . . \n"


def test_owner_view_shows_ships():
    """Test the owner view marks unhit ship cells with 'o'."""
    rendered = BoardRenderer(create_board(), reveal_unhit=True).render()
    assert rendered == "  1 2 3 \nA o x . \nB . . . \nC . . . \n"


def test_opponent_view_hides_ships():
    """Test the opponent view only shows hits."""
    rendered = BoardRenderer(create_board(), reveal_unhit=False).render()
    assert rendered == "  1 2 3 \nA . x . \nB . . . \nC . . . \n"


def test_view_helpers_match_renderer():
    """Test the owner/opponent shortcuts."""
    board = create_board()
    assert owner_view(board) == BoardRenderer(board, True).render()
    assert opponent_view(board) == BoardRenderer(board, False).render()


def test_str_matches_render():
    """Test str() of a renderer gives the rendered board."""
    board = create_board()
    renderer = BoardRenderer(board, reveal_unhit=True)
    assert str(renderer) == renderer.render()


def test_standard_board_labels():
    """Test a 10x10 board has columns 1-10 and rows A-J."""
    lines = BoardRenderer(Board(10), reveal_unhit=False).render().split("\n")

    assert lines[0] == "  1 2 3 4 5 6 7 8 9 10 "
    assert [line[0] for line in lines[1:11]] == list("ABCDEFGHIJ")
    assert lines[-1] == ""  # Trailing newline


def test_vertical_ship_rendering():
    """Test a vertical ship occupies one column across rows."""
    board = Board(4)
    board.place_vessel(Vessel(Coordinate(2, 1), Orientation.VERTICAL, 3))
    board.resolve_guess(Coordinate(2, 3))

    lines = owner_view(board).split("\n")
    assert lines[1] == "A . . . . "
    assert lines[2] == "B . . o . "
    assert lines[3] == "C . . o . "
    assert lines[4] == "D . . x . "
