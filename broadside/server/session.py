"""Match session management for two websocket players."""

import asyncio
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field

from fastapi import WebSocket
from pydantic import BaseModel

from ..engine.match import ActivePhase, Match, SetupPhase
from ..errors import ErrorKind, IncompleteFleetError, MatchError
from ..models.player import Player
from .schemas.requests import AddShipCommand, GuessPosCommand, parse_command
from .schemas.responses import (
    AddingMessage,
    AddingState,
    ErrorDetail,
    ErrorMessage,
    GuessingMessage,
)

logger = logging.getLogger(__name__)

# Close codes (RFC 6455)
CLOSE_NORMAL = 1000
CLOSE_ERROR = 1011


@dataclass
class MatchSession:
    """Drives one match from two websocket connections.

    Both connection handlers feed frames into handle_message. The lock
    serializes them so each placement/guess/win-check sequence runs as
    one unit against the match.
    """

    id: str
    match: Match
    connections: list[WebSocket]  # Index 0 is Player One, index 1 is Player Two
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    finished: bool = False
    winner: Player | None = None

    def connection_of(self, player: Player) -> WebSocket:
        return self.connections[player.value]

    async def start(self) -> None:
        """Announce the match and send each player their (empty) setup state."""
        await self.broadcast_text("Game started!")
        await self._send_adding_state()
        logger.info(f"Match {self.id} started")

    async def handle_message(self, player: Player, text: str) -> None:
        """Apply one incoming frame from a player.

        Frames that are not a command for the current phase are ignored.

        Args:
            player: Sender
            text: Raw JSON frame
        """
        async with self.lock:
            if self.finished:
                return

            command = parse_command(text)
            if command is None:
                logger.debug(
                    f"Match {self.id}: ignoring malformed frame from Player {player.number}"
                )
                return

            try:
                phase = self.match.phase
                if isinstance(phase, SetupPhase) and isinstance(command, AddShipCommand):
                    await self._handle_add_ship(player, command)
                elif isinstance(phase, ActivePhase) and isinstance(command, GuessPosCommand):
                    await self._handle_guess(player, command)
                else:
                    logger.debug(
                        f"Match {self.id}: ignoring {type(command).__name__} "
                        f"from Player {player.number} in {type(phase).__name__}"
                    )
            except MatchError as e:
                if e.kind.user_correctable or e.kind is ErrorKind.WRONG_PLAYER:
                    logger.info(f"Match {self.id}: Player {player.number} rejected: {e.message}")
                    detail = ErrorDetail(kind=e.kind.value, message=e.message)
                    await self.send(player, ErrorMessage(Error=detail))
                else:
                    logger.error(f"Match {self.id}: out of sync: {e.message}")
                    await self.abort(e.message)

    async def _handle_add_ship(self, player: Player, command: AddShipCommand) -> None:
        logger.debug(f"Match {self.id}: Player {player.number} adds ship at {command.loc}")
        try:
            self.match.place_vessel(player, command.loc.to_coordinate(), command.orientation)
        finally:
            await self._send_adding_state()

        try:
            self.match.begin_play()
        except IncompleteFleetError:
            return

        logger.info(f"Match {self.id}: all ships received, guessing begins")
        await self.broadcast(GuessingMessage())

    async def _handle_guess(self, player: Player, command: GuessPosCommand) -> None:
        coord = command.loc.to_coordinate()
        hit = self.match.guess(player, coord)
        outcome = "destroyed" if hit else "missed"
        await self.broadcast_text(
            f"Player {player.number} has guessed {coord} and {outcome} an enemy ship!"
        )

        winner = self.match.check_winner()
        if winner is not None:
            self.winner = winner
            await self.broadcast_text(f"Player {winner.number} has won the game!")
            logger.info(f"Match {self.id} ended: winner = Player {winner.number}")
            await self.close_all(CLOSE_NORMAL, "Game Finished")

    async def _send_adding_state(self) -> None:
        for player in Player:
            state = AddingState.from_board(self.match.board_of(player))
            await self.send(player, AddingMessage(Adding=state))

    async def send(self, player: Player, message: BaseModel) -> None:
        await self.connection_of(player).send_json(message.model_dump())

    async def broadcast(self, message: BaseModel) -> None:
        for player in Player:
            await self.send(player, message)

    async def broadcast_text(self, text: str) -> None:
        for ws in self.connections:
            await ws.send_text(text)

    async def abort(self, reason: str) -> None:
        """End the session early, closing both sockets with an error code."""
        logger.warning(f"Match {self.id} aborted: {reason}")
        await self.close_all(CLOSE_ERROR, "Game Error")

    async def close_all(self, code: int, reason: str) -> None:
        """Mark the session finished and close every connection."""
        self.finished = True
        for ws in self.connections:
            try:
                await ws.close(code=code, reason=reason)
            except Exception as e:
                logger.warning(f"Failed to close WebSocket: {e}")


class SessionManager:
    """Manages all active match sessions.

    In-memory only; sessions disappear with the process.
    """

    def __init__(self, match_factory: Callable[[], Match] = Match):
        """Initialize manager.

        Args:
            match_factory: Builds the match for each new session
        """
        self.match_factory = match_factory
        self.sessions: dict[str, MatchSession] = {}

    def create_session(self, connections: list[WebSocket]) -> MatchSession:
        """Create a session for a pair of connections.

        Args:
            connections: [Player One socket, Player Two socket]

        Returns:
            Newly created MatchSession
        """
        session_id = f"match-{uuid.uuid4().hex[:8]}"
        session = MatchSession(
            id=session_id,
            match=self.match_factory(),
            connections=list(connections),
        )
        self.sessions[session_id] = session
        logger.info(f"Created match {session_id}")
        return session

    def delete(self, session_id: str) -> bool:
        """Delete a session.

        Returns:
            True if deleted, False if not found
        """
        if session_id in self.sessions:
            del self.sessions[session_id]
            logger.info(f"Deleted match {session_id}")
            return True
        return False

    async def cleanup_all(self) -> None:
        """Close every session (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} match sessions")
        for session in list(self.sessions.values()):
            if not session.finished:
                await session.abort("server shutting down")
        self.sessions.clear()
