"""Matchmaker - in-memory matchmaking backend."""

__version__ = "1.0.0"
