"""Core board model and rules engine."""

from .board import (
    AI,
    BOARD_SIZE,
    HUMAN,
    INITIAL_BOARD,
    NUM_PITS,
    NUM_SEEDS,
    PLAYER_SIDES,
    PlayerSide,
    get_opposite_pit,
    get_side,
    render_board,
    validate_board,
)
from .engine import InvalidMoveError, MancalaEngine
from .summary import Capture, MoveSummary, Scores, SimulatedMove, Sweep

__all__ = [
    "AI",
    "BOARD_SIZE",
    "HUMAN",
    "INITIAL_BOARD",
    "NUM_PITS",
    "NUM_SEEDS",
    "PLAYER_SIDES",
    "PlayerSide",
    "get_opposite_pit",
    "get_side",
    "render_board",
    "validate_board",
    "InvalidMoveError",
    "MancalaEngine",
    "Capture",
    "MoveSummary",
    "Scores",
    "SimulatedMove",
    "Sweep",
]
