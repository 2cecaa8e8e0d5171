"""
Board layout and player sides for Kalah(6,4).

Board layout:
          AI Pits (12-7)
       [12][11][10][9][8][7]
    [13]                    [6]  <- Stores
       [0] [1] [2] [3][4][5]
          Human Pits (0-5)

Indices:
- Human (player 0) pits: 0 to 5, store: 6
- AI (player 1) pits: 7 to 12, store: 13
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

NUM_PITS = 6  # Pits per player
NUM_SEEDS = 4  # Initial stones per pit
BOARD_SIZE = 2 * NUM_PITS + 2  # pits + stores

HUMAN = 0
AI = 1

INITIAL_BOARD: Tuple[int, ...] = tuple(
    [NUM_SEEDS] * NUM_PITS + [0] + [NUM_SEEDS] * NUM_PITS + [0]
)


@dataclass(frozen=True)
class PlayerSide:
    """Pit range and store of one player."""

    start: int
    end: int
    store: int

    @property
    def pits(self) -> range:
        """Pit indices of this side, in sowing order."""
        return range(self.start, self.end + 1)

    def owns_pit(self, position: int) -> bool:
        """True if position is one of this side's pits (store excluded)."""
        return self.start <= position <= self.end


PLAYER_SIDES: Tuple[PlayerSide, PlayerSide] = (
    PlayerSide(start=0, end=NUM_PITS - 1, store=NUM_PITS),
    PlayerSide(start=NUM_PITS + 1, end=2 * NUM_PITS, store=2 * NUM_PITS + 1),
)


def get_side(player: int) -> Optional[PlayerSide]:
    """Return the side for a player id, or None for an unknown player."""
    if isinstance(player, bool) or player not in (HUMAN, AI):
        return None
    return PLAYER_SIDES[player]


def get_opposite_pit(pit_idx: int) -> int:
    """
    Get the opposite pit index for the capture rule.

    Formula: opposite_of(pit_i) = (2 * NUM_PITS) - pit_i

    Args:
        pit_idx: Pit index

    Returns:
        Opposite pit index
    """
    if pit_idx in (side.store for side in PLAYER_SIDES):
        raise ValueError(f"Cannot get opposite of store {pit_idx}")

    return (2 * NUM_PITS) - pit_idx


def validate_board(board: Sequence[int]) -> List[int]:
    """
    Check a board and return it as a fresh list.

    Args:
        board: Candidate board, one stone count per slot

    Returns:
        Copy of the board as a list

    Raises:
        ValueError: Wrong size, non-integer or negative slot
    """
    slots = list(board)
    if len(slots) != BOARD_SIZE:
        raise ValueError(
            f"Board size {len(slots)} doesn't match expected {BOARD_SIZE}"
        )
    for idx, stones in enumerate(slots):
        if isinstance(stones, bool) or not isinstance(stones, int):
            raise ValueError(f"Slot {idx} holds non-integer value {stones!r}")
        if stones < 0:
            raise ValueError(f"Negative stone count in slot {idx}")
    return slots


def validate_player(player: int) -> int:
    """Return player unchanged, raising ValueError if it is not 0 or 1."""
    if get_side(player) is None:
        raise ValueError(f"Invalid player {player!r}, must be 0 or 1")
    return player


def render_board(board: Sequence[int], current_player: Optional[int] = None) -> str:
    """Plain-text board picture, AI row on top."""
    ai_side, human_side = PLAYER_SIDES[AI], PLAYER_SIDES[HUMAN]
    ai_pits = [board[pit] for pit in reversed(ai_side.pits)]
    human_pits = [board[pit] for pit in human_side.pits]

    pit_width = 3
    ai_str = " ".join(f"{s:>{pit_width}}" for s in ai_pits)
    human_str = " ".join(f"{s:>{pit_width}}" for s in human_pits)
    store_width = len(ai_str)

    lines = [
        f"      {ai_str}",
        f"[{board[ai_side.store]:>2}] {' ' * store_width} [{board[human_side.store]:>2}]",
        f"      {human_str}",
    ]
    if current_player is not None:
        name = "Human" if current_player == HUMAN else "AI"
        lines.append("")
        lines.append(f"{name}'s turn")
    return "\n".join(lines)
