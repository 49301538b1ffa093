"""Match state machine: setup, alternating guesses, win detection.

A match moves through three phases, never backwards:

1. Setup    - both players place their fleets
2. Active   - players alternate guesses, Player One first
3. Finished - a fleet has been destroyed

The match does no locking. A driver sharing one match between
connections must serialize calls itself.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from ..errors import (
    FleetCompleteError,
    IncompleteFleetError,
    WrongPhaseError,
    WrongPlayerError,
)
from ..models.board import Board, BoardView
from ..models.coordinate import Coordinate
from ..models.player import Player
from ..models.vessel import Orientation, Vessel
from ..utils.constants import BOARD_SIZE, FLEET_COMPOSITION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupPhase:
    """Both boards are being populated."""

    boards: Tuple[Board, Board]


@dataclass(frozen=True)
class ActivePhase:
    """Guessing phase. turn is the player allowed to guess next."""

    boards: Tuple[Board, Board]
    turn: Player


@dataclass(frozen=True)
class FinishedPhase:
    """Terminal phase."""

    boards: Tuple[Board, Board]


Phase = Union[SetupPhase, ActivePhase, FinishedPhase]


class Match:
    """Two-player match composing one board per player.

    Rule violations raise a MatchError subclass and leave the match
    untouched.
    """

    def __init__(
        self,
        size: int = BOARD_SIZE,
        fleet_composition: Sequence[int] = FLEET_COMPOSITION,
        finish_on_any_win: bool = True,
    ):
        """Create a match in the setup phase with two empty boards.

        Args:
            size: Board width and height
            fleet_composition: Vessel lengths each player places, in order
            finish_on_any_win: If True (default), check_winner moves to Finished
                whichever fleet is destroyed. If False, only the destruction
                of Player One's fleet finishes the match.

        Raises:
            ValueError: If the fleet composition is empty or has a length < 1
        """
        if not fleet_composition:
            raise ValueError("fleet_composition cannot be empty")
        if any(length < 1 for length in fleet_composition):
            raise ValueError(
                f"Invalid fleet_composition: {list(fleet_composition)} (lengths must be >= 1)"
            )

        self.size = size
        self.fleet_composition = tuple(fleet_composition)
        self.finish_on_any_win = finish_on_any_win
        self._phase: Phase = SetupPhase(boards=(Board(size), Board(size)))

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def turn(self) -> Optional[Player]:
        """Player to guess next, or None outside the active phase."""
        if isinstance(self._phase, ActivePhase):
            return self._phase.turn
        return None

    @property
    def is_finished(self) -> bool:
        return isinstance(self._phase, FinishedPhase)

    def board_of(self, player: Player) -> BoardView:
        """Get a read-only view of a player's board. Valid in any phase.

        The view tracks the live board, so it reflects later placements
        and guesses. Changes go through place_vessel and guess only.
        """
        return BoardView(self._board(player))

    def _board(self, player: Player) -> Board:
        return self._phase.boards[player.value]

    def placed_count(self, player: Player) -> int:
        return self.board_of(player).vessel_count

    def fleet_complete(self, player: Player) -> bool:
        return self.placed_count(player) >= len(self.fleet_composition)

    def next_vessel_length(self, player: Player) -> Optional[int]:
        """Length of the vessel the player places next, None if fleet is complete."""
        if self.fleet_complete(player):
            return None
        return self.fleet_composition[self.placed_count(player)]

    def place_vessel(
        self, player: Player, start: Coordinate, orientation: Orientation
    ) -> None:
        """Place the player's next vessel.

        The vessel length comes from the fleet composition, indexed by how
        many vessels the player has already placed.

        Args:
            player: Player placing the vessel
            start: First coordinate of the vessel
            orientation: HORIZONTAL or VERTICAL

        Raises:
            WrongPhaseError: If the match is not in setup
            FleetCompleteError: If the player has already placed the full fleet
            OverlapError: If the vessel collides with one of the player's vessels
            OutOfBoundsError: If the vessel extends outside the grid
        """
        if not isinstance(self._phase, SetupPhase):
            raise WrongPhaseError("the game is not in the setup phase")

        length = self.next_vessel_length(player)
        if length is None:
            raise FleetCompleteError(
                f"Player {player.number} has already placed all "
                f"{len(self.fleet_composition)} ships"
            )

        vessel = Vessel(start, orientation, length)
        self._board(player).place_vessel(vessel)
        logger.debug(f"Player {player.number} placed {vessel}")

    def begin_play(self) -> None:
        """Leave setup and start guessing with Player One.

        Raises:
            WrongPhaseError: If the match is not in setup
            IncompleteFleetError: If either player has not placed the full fleet
        """
        if not isinstance(self._phase, SetupPhase):
            raise WrongPhaseError("the game is not in the setup phase")

        short = [p for p in Player if not self.fleet_complete(p)]
        if short:
            names = ", ".join(f"Player {p.number}" for p in short)
            raise IncompleteFleetError(f"fleet not complete for {names}")

        self._phase = ActivePhase(boards=self._phase.boards, turn=Player.PLAYER_ONE)
        logger.info("All ships placed, match is now active")

    def guess(self, player: Player, coord: Coordinate) -> bool:
        """Fire at the opponent's board.

        The turn passes to the other player after every guess, hit or miss.

        Args:
            player: Player making the guess
            coord: Target coordinate on the opponent's board

        Returns:
            True on a hit, False on a miss

        Raises:
            WrongPhaseError: If the match is not active
            WrongPlayerError: If it is not the player's turn
        """
        if not isinstance(self._phase, ActivePhase):
            raise WrongPhaseError("the game is not in the playing phase")
        if player is not self._phase.turn:
            raise WrongPlayerError(
                f"Player {player.number} guessed out of turn "
                f"(Player {self._phase.turn.number} to play)"
            )

        hit = self._board(player.other()).resolve_guess(coord)
        self._phase = ActivePhase(boards=self._phase.boards, turn=player.other())
        logger.debug(f"Player {player.number} guessed {coord}: {'hit' if hit else 'miss'}")
        return hit

    def check_winner(self) -> Optional[Player]:
        """Check whether either fleet has been destroyed.

        Player One's board is checked first. Destroying it finishes the
        match. Destroying Player Two's board reports Player One as winner
        and finishes the match unless finish_on_any_win is off.

        Returns:
            The winning player, or None if both fleets survive

        Raises:
            WrongPhaseError: If the match is still in setup
        """
        if isinstance(self._phase, SetupPhase):
            raise WrongPhaseError("the game is not in the playing phase")

        boards = self._phase.boards
        if boards[Player.PLAYER_ONE.value].is_fully_destroyed():
            self._finish(Player.PLAYER_TWO)
            return Player.PLAYER_TWO
        elif boards[Player.PLAYER_TWO.value].is_fully_destroyed():
            if self.finish_on_any_win:
                self._finish(Player.PLAYER_ONE)
            return Player.PLAYER_ONE
        else:
            return None

    def _finish(self, winner: Player) -> None:
        if not self.is_finished:
            self._phase = FinishedPhase(boards=self._phase.boards)
            logger.info(f"Player {winner.number} has won the match")
