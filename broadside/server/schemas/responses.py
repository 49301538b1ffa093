"""Pydantic schemas for outgoing messages and HTTP responses."""

from pydantic import BaseModel, Field

from ...models.board import Board, BoardView
from .requests import LocationModel


class AddingState(BaseModel):
    """The receiving player's ships placed so far, one list per ship."""

    ships: list[list[LocationModel]] = Field(default_factory=list)

    @classmethod
    def from_board(cls, board: Board | BoardView) -> "AddingState":
        return cls(
            ships=[
                [LocationModel.from_coordinate(c) for c in vessel.coordinates]
                for vessel in board.vessels
            ]
        )


class AddingMessage(BaseModel):
    """Setup progress sent after every setup command."""

    Adding: AddingState  # noqa: N815


class GuessingState(BaseModel):
    """Empty payload announcing that the guessing phase has begun."""


class GuessingMessage(BaseModel):
    """Sent to both players when the match becomes active."""

    Guessing: GuessingState = Field(default_factory=GuessingState)  # noqa: N815


class ErrorDetail(BaseModel):
    """A rejected command."""

    kind: str
    message: str


class ErrorMessage(BaseModel):
    """Sent to the player whose command was rejected."""

    Error: ErrorDetail  # noqa: N815


class HealthResponse(BaseModel):
    """Response for the root health check."""

    service: str
    status: str
    waitingPlayers: int  # noqa: N815
    activeGames: int  # noqa: N815
