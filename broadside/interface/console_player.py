"""Console player controller for hot-seat play.

This module provides the ConsolePlayer class which collects ship
placements and guesses from a human at the terminal and drives the
match with them.
"""

import logging
from typing import Callable, Optional, TypeVar

from ..engine.match import Match
from ..errors import MatchError
from ..models.coordinate import Coordinate
from ..models.player import Player
from ..utils.constants import MAX_INPUT_ATTEMPTS
from .input_parser import (
    InputAttemptsExceeded,
    InputParseError,
    parse_grid_index,
    parse_orientation,
)
from .renderer import opponent_view, owner_view

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConsolePlayer:
    """Human player controller class.

    Reads input through input_func and writes through output_func so the
    controller can be scripted in tests.
    """

    def __init__(
        self,
        player: Player,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        max_attempts: int = MAX_INPUT_ATTEMPTS,
    ):
        """Initialize console player controller.

        Args:
            player: Seat this controller plays
            input_func: Prompting line reader (defaults to builtin input)
            output_func: Line writer (defaults to builtin print)
            max_attempts: Prompts allowed per value before giving up
        """
        self.player = player
        self.input_func = input_func
        self.output_func = output_func
        self.max_attempts = max_attempts

    def read_value(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Prompt until the input parses.

        After a bad line, the parser's error message becomes the next prompt.

        Args:
            prompt: Initial prompt
            parse: Parser raising InputParseError on bad input

        Returns:
            Parsed value

        Raises:
            InputAttemptsExceeded: If max_attempts lines in a row fail to parse
        """
        current_prompt = prompt
        for _ in range(self.max_attempts):
            line = self.input_func(current_prompt)
            try:
                return parse(line)
            except InputParseError as e:
                logger.debug(f"Rejected input {line!r}: {e.error_type.value}")
                current_prompt = e.message

        raise InputAttemptsExceeded(
            f"Player {self.player.number} gave {self.max_attempts} invalid answers in a row"
        )

    def place_fleet(self, match: Match) -> None:
        """Place every vessel of this player's fleet.

        A placement the match rejects is reported and asked for again.
        """
        while not match.fleet_complete(self.player):
            self.output_func(owner_view(match.board_of(self.player)))
            while True:
                x = self.read_value("Enter the starting X coordinate: ", parse_grid_index)
                y = self.read_value("Enter the starting Y coordinate: ", parse_grid_index)
                orientation = self.read_value(
                    "Do you want it to be horizontal ('H') or vertical ('V'): ",
                    parse_orientation,
                )
                try:
                    match.place_vessel(self.player, Coordinate(x, y), orientation)
                    break
                except MatchError as e:
                    if not e.kind.user_correctable:
                        raise
                    self.output_func(f"The ship could not be placed because: {e.message}")

    def take_turn(self, match: Match) -> Optional[Player]:
        """Make one guess against the opponent and check for a winner.

        Returns:
            Winning player, or None if the match goes on
        """
        opponent_board = match.board_of(self.player.other())

        self.output_func("================")
        self.output_func(opponent_view(opponent_board))
        self.output_func(f"Player {self.player.number} please type your guess:")

        x = self.read_value("Enter the X coordinate: ", parse_grid_index)
        y = self.read_value("Enter the Y coordinate: ", parse_grid_index)

        if match.guess(self.player, Coordinate(x, y)):
            self.output_func("You have hit an enemy ship!")
        else:
            self.output_func("You missed!")

        self.output_func(opponent_view(opponent_board))
        return match.check_winner()
