"""Immutable records produced by the engine for each move."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Optional, Tuple

from .board import HUMAN

if TYPE_CHECKING:
    from .engine import MancalaEngine


@dataclass(frozen=True)
class Scores:
    """Store contents of both players."""

    human: int
    ai: int

    def of(self, player: int) -> int:
        """Store contents of player."""
        return self.human if player == HUMAN else self.ai

    def margin(self, player: int) -> int:
        """Own store minus the opponent's store, from player's point of view."""
        return self.of(player) - self.of(1 - player)


@dataclass(frozen=True)
class Capture:
    """Stones taken when the last stone lands in an empty own pit."""

    pit: int
    opposite: int
    store: int
    captured: int


@dataclass(frozen=True)
class Sweep:
    """End-of-game transfer of remaining pit stones into the stores."""

    human_remaining: int
    ai_remaining: int
    board: Tuple[int, ...]
    scores: Scores


@dataclass(frozen=True)
class MoveSummary:
    """
    Everything that happened during one applied move.

    `sequence` lists the slots stones were dropped into, in drop order.
    `board`, `current_player`, `game_over` and `scores` describe the
    position after the move (after capture and sweep).
    """

    player: int
    pit_index: int
    stones_picked: int
    sequence: Tuple[int, ...]
    last_position: int
    landed_in_store: bool
    board: Tuple[int, ...]
    current_player: int
    game_over: bool
    scores: Scores
    capture: Optional[Capture] = None
    sweep: Optional[Sweep] = None

    @property
    def extra_turn(self) -> bool:
        """Mover plays again; always equal to landed_in_store."""
        return self.landed_in_store


class SimulatedMove(NamedTuple):
    """Result of simulate_move: the moved copy and its summary."""

    engine: "MancalaEngine"
    result: MoveSummary
