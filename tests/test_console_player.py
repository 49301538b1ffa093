"""Tests for the console player controller and game orchestrator."""

from unittest.mock import Mock

import pytest

from broadside.engine import Match
from broadside.errors import WrongPhaseError
from broadside.interface.console_player import ConsolePlayer
from broadside.interface.input_parser import InputAttemptsExceeded, parse_grid_index
from broadside.models import Board, Coordinate, Orientation, Player
from game import GameOrchestrator


class ScriptedConsole:
    """Feeds canned input lines and records prompts and output."""

    def __init__(self, lines):
        self.lines = iter(lines)
        self.prompts = []
        self.output = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return next(self.lines)

    def print(self, text: str) -> None:
        self.output.append(text)


def create_player(player: Player, console: ScriptedConsole, **kwargs) -> ConsolePlayer:
    return ConsolePlayer(player, input_func=console.input, output_func=console.print, **kwargs)


def test_read_value_retries_with_error_prompt():
    """Test a bad line re-prompts with the parser's message."""
    console = ScriptedConsole(["abc", "", "4"])
    controller = create_player(Player.PLAYER_ONE, console)

    value = controller.read_value("Enter the starting X coordinate: ", parse_grid_index)

    assert value == 3
    assert console.prompts == [
        "Enter the starting X coordinate: ",
        "Please enter a valid integer: ",
        "Please enter a valid integer: ",
    ]


def test_read_value_gives_up():
    """Test the retry loop is bounded."""
    console = ScriptedConsole(["x"] * 10)
    controller = create_player(Player.PLAYER_ONE, console, max_attempts=3)

    with pytest.raises(InputAttemptsExceeded):
        controller.read_value("Enter the X coordinate: ", parse_grid_index)
    assert len(console.prompts) == 3


def test_place_fleet_converts_to_zero_based():
    """Test 1-indexed console input lands on 0-indexed board cells."""
    match = Match(size=5, fleet_composition=(2,))
    console = ScriptedConsole(["2", "3", "V"])
    create_player(Player.PLAYER_ONE, console).place_fleet(match)

    vessel = match.board_of(Player.PLAYER_ONE).vessels[0]
    assert vessel.coordinates == [Coordinate(1, 2), Coordinate(1, 3)]
    # Owner view printed before the vessel was placed
    assert console.output[0].startswith("  1 2 3 4 5")


def test_place_fleet_retries_rejected_placement():
    """Test an invalid placement is reported and asked for again."""
    match = Match(size=5, fleet_composition=(3,))
    console = ScriptedConsole(["4", "1", "H", "q", "1", "1", "h"])
    create_player(Player.PLAYER_ONE, console).place_fleet(match)

    assert any(
        line.startswith("The ship could not be placed because:") for line in console.output
    )
    vessel = match.board_of(Player.PLAYER_ONE).vessels[0]
    assert vessel.coordinates == [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0)]


def test_place_fleet_raises_when_out_of_sync():
    """Test errors that are not user mistakes are not retried."""
    match = Mock()
    match.fleet_complete.return_value = False
    match.board_of.return_value = Board(5)
    match.place_vessel.side_effect = WrongPhaseError("the game is not in the setup phase")

    console = ScriptedConsole(["1", "1", "H"])
    with pytest.raises(WrongPhaseError):
        create_player(Player.PLAYER_ONE, console).place_fleet(match)
    assert match.place_vessel.call_count == 1


def test_take_turn_reports_hit_and_miss():
    """Test guess feedback and the win check result."""
    match = Match(size=5, fleet_composition=(2,))
    match.place_vessel(Player.PLAYER_ONE, Coordinate(0, 0), Orientation.HORIZONTAL)
    match.place_vessel(Player.PLAYER_TWO, Coordinate(0, 0), Orientation.VERTICAL)
    match.begin_play()

    console = ScriptedConsole(["1", "1", "5", "5"])
    p1 = create_player(Player.PLAYER_ONE, console)
    p2 = create_player(Player.PLAYER_TWO, console)

    assert p1.take_turn(match) is None
    assert "You have hit an enemy ship!" in console.output
    assert "Player 1 please type your guess:" in console.output

    assert p2.take_turn(match) is None
    assert "You missed!" in console.output


def test_full_console_game():
    """Test a scripted game where Player One sinks every ship first."""
    lines = []
    # Player One: horizontal ships on rows 1-5
    for row in range(1, 6):
        lines += ["1", str(row), "H"]
    # Player Two: vertical ships on columns 1-5
    for column in range(1, 6):
        lines += [str(column), "1", "V"]
    # Player One walks down each column; Player Two always fires off the board
    for column, length in enumerate([2, 3, 3, 4, 5], start=1):
        for row in range(1, length + 1):
            lines += [str(column), str(row)]
            lines += ["0", "0"]

    console = ScriptedConsole(lines)
    orchestrator = GameOrchestrator(
        Match(),
        create_player(Player.PLAYER_ONE, console),
        create_player(Player.PLAYER_TWO, console),
        output_func=console.print,
    )

    winner = orchestrator.run()

    assert winner is Player.PLAYER_ONE
    assert console.output[-1] == "Congratulations Player 1!"
    assert "Player 1 please place your ships on the grid:" in console.output
    assert "Player 2 please place your ships on the grid:" in console.output
    assert orchestrator.match.is_finished


def test_orchestrator_player_two_wins():
    """Test the loop stops as soon as Player Two wins."""
    lines = ["1", "1", "H", "1", "1", "H"]  # One 2-long ship each at A1-A2
    lines += ["5", "5", "1", "1"]  # P1 misses, P2 hits
    lines += ["5", "4", "2", "1"]  # P1 misses, P2 sinks the ship

    console = ScriptedConsole(lines)
    orchestrator = GameOrchestrator(
        Match(size=5, fleet_composition=(2,)),
        create_player(Player.PLAYER_ONE, console),
        create_player(Player.PLAYER_TWO, console),
        output_func=console.print,
    )

    assert orchestrator.run() is Player.PLAYER_TWO
    assert console.output[-1] == "Congratulations Player 2!"
