"""Pydantic schemas for the websocket server."""
