"""Pydantic schemas for incoming websocket commands.

Commands are externally tagged JSON objects, e.g.
{"AddShip": {"loc": {"x": 0, "y": 0}, "dir": "Horz"}} or
{"GuessPos": {"loc": {"x": 3, "y": 4}}}.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...models.coordinate import Coordinate
from ...models.vessel import Orientation


class LocationModel(BaseModel):
    """A 0-indexed grid coordinate."""

    x: int
    y: int

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> "LocationModel":
        return cls(x=coord.x, y=coord.y)


class AddShipCommand(BaseModel):
    """Place the sender's next ship."""

    loc: LocationModel = Field(description="Start coordinate of the ship")
    dir: Literal["Horz", "Vert"] = Field(description="Horizontal or vertical")

    @property
    def orientation(self) -> Orientation:
        return Orientation.HORIZONTAL if self.dir == "Horz" else Orientation.VERTICAL


class GuessPosCommand(BaseModel):
    """Fire at a coordinate on the opponent's board."""

    loc: LocationModel = Field(description="Target coordinate")


class CommandEnvelope(BaseModel):
    """Tagged wrapper; exactly one field is expected to be set."""

    model_config = ConfigDict(extra="forbid")

    AddShip: AddShipCommand | None = None  # noqa: N815
    GuessPos: GuessPosCommand | None = None  # noqa: N815


Command = AddShipCommand | GuessPosCommand


def parse_command(text: str) -> Command | None:
    """Decode one websocket text frame into a command.

    Args:
        text: Raw JSON text

    Returns:
        The decoded command, or None if the frame is not exactly one
        well-formed command
    """
    try:
        envelope = CommandEnvelope.model_validate_json(text)
    except ValidationError:
        return None

    commands = [c for c in (envelope.AddShip, envelope.GuessPos) if c is not None]
    if len(commands) != 1:
        return None
    return commands[0]
