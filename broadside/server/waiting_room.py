"""Waiting room that pairs incoming connections into match sessions."""

import asyncio
import logging

from fastapi import WebSocket

from ..models.player import Player
from .session import MatchSession, SessionManager

logger = logging.getLogger(__name__)


class WaitingRoom:
    """Pairs websocket connections two at a time.

    The first connection waits; the second one creates the session,
    starts it and releases the first. The room is then empty again and
    ready for the next pair.
    """

    CAPACITY = len(Player)

    def __init__(self, sessions: SessionManager):
        """Initialize waiting room.

        Args:
            sessions: Registry that creates and tracks paired sessions
        """
        self.sessions = sessions
        self._waiting: list[tuple[WebSocket, asyncio.Future]] = []
        self._lock = asyncio.Lock()

    @property
    def waiting_count(self) -> int:
        return len(self._waiting)

    async def join(self, websocket: WebSocket) -> tuple[Player, MatchSession]:
        """Seat an accepted connection and wait for its opponent.

        Args:
            websocket: Accepted connection

        Returns:
            The seat assigned to this connection and the session it plays in

        Raises:
            Exception: Whatever stopped the session from starting. Every
                connection of that pair gets the same error and the session
                is discarded.
        """
        async with self._lock:
            player = Player(len(self._waiting))
            if player.number < self.CAPACITY:
                seat: asyncio.Future = asyncio.get_running_loop().create_future()
                self._waiting.append((websocket, seat))

            await websocket.send_text(f"You are player {player.number}/{self.CAPACITY}.")
            logger.info(f"Player {player.number}/{self.CAPACITY} joined the waiting room")

            if player.number == self.CAPACITY:
                pending, self._waiting = self._waiting, []
                connections = [ws for ws, _ in pending] + [websocket]
                session = self.sessions.create_session(connections)
                try:
                    await session.start()
                except Exception as e:
                    logger.error(f"Match {session.id} failed to start: {e}")
                    self.sessions.delete(session.id)
                    for _, other_seat in pending:
                        if not other_seat.done():
                            other_seat.set_exception(e)
                    raise
                for _, other_seat in pending:
                    other_seat.set_result(session)
                return player, session

        try:
            return player, await seat
        except asyncio.CancelledError:
            self.leave(websocket)
            raise

    def leave(self, websocket: WebSocket) -> bool:
        """Remove a connection that is still waiting for an opponent.

        Returns:
            True if the connection was waiting, False otherwise
        """
        for index, (ws, seat) in enumerate(self._waiting):
            if ws is websocket:
                del self._waiting[index]
                seat.cancel()
                logger.info("A waiting player left the waiting room")
                return True
        return False
