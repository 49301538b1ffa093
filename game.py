#!/usr/bin/env python3
"""Broadside - Main entry point.

A two-player hot-seat naval combat game: each player hides a fleet on
their own grid, then both take turns guessing where the enemy ships are.
"""

import argparse
import logging
import sys

from broadside.engine.match import Match
from broadside.interface.console_player import ConsolePlayer
from broadside.interface.input_parser import InputAttemptsExceeded
from broadside.models.player import Player
from broadside.utils.constants import BOARD_SIZE


class GameOrchestrator:
    """Manages the setup phase and the turn loop for two controllers."""

    def __init__(self, match: Match, p1_controller, p2_controller, output_func=print):
        """Initialize game orchestrator.

        Args:
            match: Match in the setup phase
            p1_controller: Controller for player 1 (ConsolePlayer or compatible)
            p2_controller: Controller for player 2
            output_func: Line writer for announcements
        """
        self.match = match
        self.players = {
            Player.PLAYER_ONE: p1_controller,
            Player.PLAYER_TWO: p2_controller,
        }
        self.output_func = output_func

    def run(self) -> Player:
        """Play a full match and return the winner."""
        for player, controller in self.players.items():
            self.output_func(f"Player {player.number} please place your ships on the grid:")
            controller.place_fleet(self.match)

        self.match.begin_play()

        winner = None
        while winner is None:
            for controller in self.players.values():
                winner = controller.take_turn(self.match)
                if winner is not None:
                    break

        self.output_func(f"Congratulations Player {winner.number}!")
        return winner


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Broadside - two-player naval combat in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                       # Standard 10x10 game
  %(prog)s --size 8              # Smaller grid
  %(prog)s --legacy-win-check    # Only Player One's defeat ends the match phase
        """,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=BOARD_SIZE,
        help=f"Grid width and height (default: {BOARD_SIZE})",
    )
    parser.add_argument(
        "--legacy-win-check",
        action="store_true",
        help="Do not move the match to Finished when Player Two's fleet is destroyed",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        match = Match(size=args.size, finish_on_any_win=not args.legacy_win_check)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    orchestrator = GameOrchestrator(
        match, ConsolePlayer(Player.PLAYER_ONE), ConsolePlayer(Player.PLAYER_TWO)
    )

    try:
        orchestrator.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user. Exiting...")
        sys.exit(0)
    except InputAttemptsExceeded as e:
        print(f"\n{e}. Exiting...")
        sys.exit(1)


if __name__ == "__main__":
    main()
