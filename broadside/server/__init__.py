"""FastAPI websocket server pairing two players into a match."""
