"""Turn flow for a human vs AI game."""

from .session import GameSession

__all__ = ["GameSession"]
