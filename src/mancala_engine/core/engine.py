"""
Kalah game engine.

Implements standard Kalah rules on a mutable 14-slot board:
- Counter-clockwise sowing, skipping the opponent's store
- Capture when landing in empty own pit with stones opposite
- Extra turn when landing in own store
- Game ends when one side is empty; the other side is swept into its store
"""

import logging
from typing import List, Optional, Sequence

from .board import (
    BOARD_SIZE,
    INITIAL_BOARD,
    PLAYER_SIDES,
    HUMAN,
    AI,
    get_opposite_pit,
    get_side,
    render_board,
    validate_board,
    validate_player,
)
from .summary import Capture, MoveSummary, Scores, SimulatedMove, Sweep

logger = logging.getLogger(__name__)


class InvalidMoveError(ValueError):
    """Raised when a move cannot be applied to the current position."""


class MancalaEngine:
    """
    Rules engine owning the board, the player to move and the game-over flag.

    Accessors hand out copies; the only mutator is apply_move (plus reset).
    """

    def __init__(self, board: Optional[Sequence[int]] = None, current_player: int = HUMAN):
        """
        Initialize engine.

        Args:
            board: Initial 14-slot board (default: 4 stones per pit)
            current_player: Player to move first (0 = human, 1 = AI)

        Raises:
            ValueError: Malformed board or unknown player
        """
        self._initial_board = validate_board(INITIAL_BOARD if board is None else board)
        self._initial_player = validate_player(current_player)
        self.reset(self._initial_board, current_player)

    def reset(self, board: Optional[Sequence[int]] = None, current_player: Optional[int] = None) -> None:
        """
        Start over from a board.

        Without a board, the last board given to the constructor or to reset
        is reused. Without a player, a freshly supplied board starts with
        player 0; otherwise the previously recorded starting player moves.
        """
        slots = self._initial_board if board is None else validate_board(board)

        if current_player is None:
            current_player = HUMAN if board is not None else self._initial_player
        validate_player(current_player)

        # Both arguments are checked before any state changes
        self._initial_board = slots
        self._initial_player = current_player
        self._board = list(slots)
        self._current_player = current_player
        self._game_over = False

    def clone(self, current_player: Optional[int] = None) -> "MancalaEngine":
        """
        Independent copy of the current position.

        Args:
            current_player: Hand the turn to this player on the copy

        Returns:
            New engine sharing no state with this one
        """
        player = self._current_player if current_player is None else current_player
        clone = MancalaEngine(self._board, player)
        clone._game_over = self._game_over
        return clone

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def total_stones(self) -> int:
        """Stones on the board, stores included."""
        return sum(self._board)

    def get_board(self) -> List[int]:
        return list(self._board)

    def get_scores(self) -> Scores:
        return Scores(
            human=self._board[PLAYER_SIDES[HUMAN].store],
            ai=self._board[PLAYER_SIDES[AI].store],
        )

    def get_valid_moves(self, player: Optional[int] = None) -> List[int]:
        """Pits of player (default: player to move) holding at least one stone."""
        if self._game_over:
            return []
        side = get_side(self._current_player if player is None else player)
        if side is None:
            return []
        return [pit for pit in side.pits if self._board[pit] > 0]

    def is_valid_move(self, pit_idx: int, player: Optional[int] = None) -> bool:
        if self._game_over:
            return False
        side = get_side(self._current_player if player is None else player)
        if side is None:
            return False
        return side.owns_pit(pit_idx) and self._board[pit_idx] > 0

    def apply_move(self, pit_idx: int) -> MoveSummary:
        """
        Play pit_idx for the player to move.

        Steps:
        1. Pick up all stones from the chosen pit
        2. Sow forward one per slot, skipping the opponent's store
        3. Last stone in own store: extra turn
        4. Last stone in own empty pit with stones opposite: capture
        5. One side empty: sweep the other side and end the game

        Args:
            pit_idx: Pit index to move from

        Returns:
            MoveSummary describing the move and the resulting position

        Raises:
            InvalidMoveError: Game is over, or pit is not a legal move.
                No state is changed in that case.
        """
        if self._game_over:
            raise InvalidMoveError("Cannot make a move after the game has ended")

        if not self.is_valid_move(pit_idx, self._current_player):
            raise InvalidMoveError(f"Invalid move: pit {pit_idx}")

        player = self._current_player
        side = PLAYER_SIDES[player]
        opponent_store = PLAYER_SIDES[1 - player].store

        stones_picked = self._board[pit_idx]
        stones = stones_picked
        self._board[pit_idx] = 0
        position = pit_idx
        sequence = []

        while stones > 0:
            position = (position + 1) % BOARD_SIZE

            if position == opponent_store:
                continue

            self._board[position] += 1
            stones -= 1
            sequence.append(position)

        landed_in_store = position == side.store

        capture = None
        if not landed_in_store:
            capture = self._try_capture(position, player)

        sweep = None
        if self._is_side_empty(HUMAN) or self._is_side_empty(AI):
            sweep = self._collect_remaining_stones()
            self._game_over = True

        if not landed_in_store and not self._game_over:
            self._current_player = 1 - player

        logger.debug(
            f"Player {player} sowed {stones_picked} from pit {pit_idx}, "
            f"last stone in {position}"
            + (" (extra turn)" if landed_in_store else "")
        )

        return MoveSummary(
            player=player,
            pit_index=pit_idx,
            stones_picked=stones_picked,
            sequence=tuple(sequence),
            last_position=position,
            landed_in_store=landed_in_store,
            board=tuple(self._board),
            current_player=self._current_player,
            game_over=self._game_over,
            scores=self.get_scores(),
            capture=capture,
            sweep=sweep,
        )

    def simulate_move(self, pit_idx: int) -> SimulatedMove:
        """Apply pit_idx on a clone; this engine is left untouched."""
        clone = self.clone()
        result = clone.apply_move(pit_idx)
        return SimulatedMove(engine=clone, result=result)

    def get_winner(self) -> Optional[int]:
        """Player with the larger store once the game is over; None for a tie or a game in progress."""
        if not self._game_over:
            return None
        margin = self.get_scores().margin(HUMAN)
        if margin > 0:
            return HUMAN
        if margin < 0:
            return AI
        return None

    def get_result(self) -> Optional[str]:
        """
        Get human-readable game result.

        Returns:
            Result string or None if the game is still in progress
        """
        if not self._game_over:
            return None

        margin = self.get_scores().margin(HUMAN)
        if margin > 0:
            return f"Human wins by {margin}"
        elif margin < 0:
            return f"AI wins by {-margin}"
        else:
            return "Tie game"

    def _try_capture(self, position: int, player: int) -> Optional[Capture]:
        side = PLAYER_SIDES[player]
        if not side.owns_pit(position):
            return None

        # A single stone means the pit was empty before the last drop
        if self._board[position] != 1:
            return None

        opposite = get_opposite_pit(position)
        opposite_stones = self._board[opposite]
        if opposite_stones == 0:
            return None

        captured = opposite_stones + 1
        self._board[side.store] += captured
        self._board[position] = 0
        self._board[opposite] = 0

        logger.debug(f"Player {player} captured {captured} stones from pit {opposite}")
        return Capture(pit=position, opposite=opposite, store=side.store, captured=captured)

    def _is_side_empty(self, player: int) -> bool:
        return all(self._board[pit] == 0 for pit in PLAYER_SIDES[player].pits)

    def _sum_side(self, player: int) -> int:
        return sum(self._board[pit] for pit in PLAYER_SIDES[player].pits)

    def _collect_remaining_stones(self) -> Sweep:
        human_remaining = self._sum_side(HUMAN)
        ai_remaining = self._sum_side(AI)

        for player, remaining in ((HUMAN, human_remaining), (AI, ai_remaining)):
            if remaining > 0:
                side = PLAYER_SIDES[player]
                self._board[side.store] += remaining
                for pit in side.pits:
                    self._board[pit] = 0

        logger.debug(
            f"Game over: swept {human_remaining} human and {ai_remaining} AI stones"
        )
        return Sweep(
            human_remaining=human_remaining,
            ai_remaining=ai_remaining,
            board=tuple(self._board),
            scores=self.get_scores(),
        )

    def __str__(self) -> str:
        """Human-readable board representation."""
        return render_board(self._board, None if self._game_over else self._current_player)
