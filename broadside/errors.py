"""Error taxonomy for match operations.

Every rule violation raised by the board or the match derives from
MatchError and carries an ErrorKind, so drivers can decide whether to
ask the player to retry or to abort the session.
"""

from enum import Enum


class ErrorKind(Enum):
    """Classification of match errors."""

    WRONG_PHASE = "wrong_phase"
    WRONG_PLAYER = "wrong_player"
    FLEET_COMPLETE = "fleet_complete"
    INCOMPLETE_FLEET = "incomplete_fleet"
    OVERLAP = "overlap"
    OUT_OF_BOUNDS = "out_of_bounds"

    @property
    def user_correctable(self) -> bool:
        """True for mistakes a player can fix by trying again.

        WRONG_PHASE and WRONG_PLAYER mean the driver and the match are out
        of sync rather than a bad move.
        """
        return self not in (ErrorKind.WRONG_PHASE, ErrorKind.WRONG_PLAYER)


class MatchError(Exception):
    """Base class for rule violations. State is unchanged when raised."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class WrongPhaseError(MatchError):
    """Operation invoked while the match is not in the required phase."""

    kind = ErrorKind.WRONG_PHASE


class WrongPlayerError(MatchError):
    """Guess submitted by the player whose turn it is not."""

    kind = ErrorKind.WRONG_PLAYER


class FleetCompleteError(MatchError):
    """Placement attempted after the full fleet is already on the board."""

    kind = ErrorKind.FLEET_COMPLETE


class IncompleteFleetError(MatchError):
    """Play started before both fleets were fully placed."""

    kind = ErrorKind.INCOMPLETE_FLEET


class PlacementError(MatchError):
    """A vessel could not be added to a board."""


class OverlapError(PlacementError):
    """Vessel collides with one already on the board."""

    kind = ErrorKind.OVERLAP


class OutOfBoundsError(PlacementError):
    """Vessel extends outside the grid."""

    kind = ErrorKind.OUT_OF_BOUNDS
