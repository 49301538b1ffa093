"""Player identity."""

from enum import Enum


class Player(Enum):
    """One of the two seats in a match."""

    PLAYER_ONE = 0
    PLAYER_TWO = 1

    def other(self) -> "Player":
        """The opposing player."""
        if self is Player.PLAYER_ONE:
            return Player.PLAYER_TWO
        return Player.PLAYER_ONE

    @property
    def number(self) -> int:
        """1-based player number for display ("Player 1", "Player 2")."""
        return self.value + 1
