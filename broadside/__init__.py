"""Broadside - two-player grid naval combat."""

__version__ = "1.0.0"
