"""FastAPI server for Broadside.

Provides a websocket endpoint that pairs two players into a match and a
small HTTP health check.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from ..models.player import Player
from .schemas.responses import HealthResponse
from .session import CLOSE_ERROR, MatchSession, SessionManager
from .waiting_room import WaitingRoom

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(waiting_room: WaitingRoom | None = None) -> FastAPI:
    """Build the application around a waiting room.

    Args:
        waiting_room: Room pairing connections (a fresh one if None)

    Returns:
        Configured FastAPI app
    """
    if waiting_room is None:
        waiting_room = WaitingRoom(SessionManager())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup/shutdown."""
        logger.info("Broadside server starting...")
        yield
        logger.info("Broadside server shutting down...")
        await app.state.waiting_room.sessions.cleanup_all()

    app = FastAPI(
        title="Broadside API",
        description="Websocket API for two-player Broadside matches",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.waiting_room = waiting_room

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_api_route("/", root, methods=["GET"], response_model=HealthResponse)
    app.add_api_websocket_route("/ws", websocket_endpoint)
    return app


# ============================================
# ENDPOINTS
# ============================================


async def root(request: Request) -> HealthResponse:
    """Server health check."""
    room: WaitingRoom = request.app.state.waiting_room
    return HealthResponse(
        service="Broadside",
        status="operational",
        waitingPlayers=room.waiting_count,
        activeGames=len(room.sessions.sessions),
    )


async def websocket_endpoint(websocket: WebSocket):
    """WebSocket connection for one player.

    Clients receive:
    - "You are player N/2." on connection
    - "Game started!" once paired, then {"Adding": {...}} setup states
    - {"Guessing": {}} when both fleets are placed
    - guess results and "Player N has won the game!" as text
    - {"Error": {...}} when one of their commands is rejected

    Args:
        websocket: WebSocket connection
    """
    room: WaitingRoom = websocket.app.state.waiting_room
    await websocket.accept()

    try:
        player, session = await room.join(websocket)
    except WebSocketDisconnect:
        logger.info("Connection closed before a match started")
        return
    except Exception as e:
        logger.error(f"Could not start a match: {e}", exc_info=True)
        try:
            await websocket.close(code=CLOSE_ERROR, reason="Game Error")
        except Exception as close_error:
            logger.warning(f"Failed to close WebSocket: {close_error}")
        return

    try:
        await _play(websocket, player, session)
    except WebSocketDisconnect:
        if not session.finished:
            logger.info(f"Player {player.number} disconnected from match {session.id}")
            await session.abort(f"Player {player.number} disconnected")
    except Exception as e:
        logger.error(f"WebSocket error in match {session.id}: {e}", exc_info=True)
        if not session.finished:
            await session.abort(str(e))
    finally:
        room.sessions.delete(session.id)


async def _play(websocket: WebSocket, player: Player, session: MatchSession) -> None:
    while not session.finished:
        text = await websocket.receive_text()
        await session.handle_message(player, text)


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from ..utils.constants import SERVER_HOST, SERVER_PORT

    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_level="info")
