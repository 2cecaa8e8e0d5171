"""
Human vs AI game session.

Drives turn flow on top of MancalaEngine: validates whose turn it is,
lets the AI answer, computes hints and turns move summaries into the
status messages shown to the player.
"""

import logging
from typing import List, Optional, Tuple

from ..core import AI, HUMAN, InvalidMoveError, MancalaEngine, MoveSummary
from ..solver import MoveEvaluator

logger = logging.getLogger(__name__)


class GameSession:
    """One human vs AI game, human moving first."""

    def __init__(self, evaluator: Optional[MoveEvaluator] = None, engine: Optional[MancalaEngine] = None):
        """
        Initialize session.

        Args:
            evaluator: Move scorer used for the AI and for hints
            engine: Engine to drive (default: fresh standard board)
        """
        self.evaluator = evaluator or MoveEvaluator()
        self.engine = engine or MancalaEngine()

    def new_game(self) -> None:
        """Reset to the standard starting board, human to move."""
        self.engine = MancalaEngine()
        logger.info("New game started")

    @property
    def is_human_turn(self) -> bool:
        return not self.engine.game_over and self.engine.current_player == HUMAN

    @property
    def is_ai_turn(self) -> bool:
        return not self.engine.game_over and self.engine.current_player == AI

    def play_human(self, pit_idx: int) -> MoveSummary:
        """
        Play one of the human's pits.

        Raises:
            InvalidMoveError: Game over, not the human's turn, or empty pit
        """
        if self.engine.game_over:
            raise InvalidMoveError("The game is over.")
        if self.engine.current_player != HUMAN:
            raise InvalidMoveError("It's not your turn right now!")
        if not self.engine.is_valid_move(pit_idx, HUMAN):
            raise InvalidMoveError("Choose a pit that contains stones.")

        summary = self.engine.apply_move(pit_idx)
        logger.debug(f"Human played pit {pit_idx}")
        return summary

    def play_ai(self) -> Optional[MoveSummary]:
        """Let the AI make one move; None when it is not the AI's turn or it has no move."""
        if not self.is_ai_turn:
            return None

        move = self.evaluator.choose_best(self.engine, AI)
        if move is None:
            logger.info("AI has no moves")
            return None

        summary = self.engine.apply_move(move)
        logger.debug(f"AI played pit {move}")
        return summary

    def run_ai_turns(self) -> List[MoveSummary]:
        """Play AI moves for as long as the AI keeps the turn."""
        summaries = []
        while self.is_ai_turn:
            summary = self.play_ai()
            if summary is None:
                break
            summaries.append(summary)
        return summaries

    def hint(self) -> Optional[int]:
        """Best pit for the human, or None if no hint applies."""
        if not self.is_human_turn:
            return None
        return self.evaluator.choose_best(self.engine, HUMAN)

    def final_message(self) -> Optional[str]:
        if not self.engine.game_over:
            return None

        winner = self.engine.get_winner()
        if winner == HUMAN:
            return "Congratulations! You won!"
        elif winner == AI:
            return "AI wins this time. Try again!"
        else:
            return "It's a tie! Great game!"

    def final_kind(self) -> Optional[str]:
        """Message kind of the final message: success, error or info."""
        if not self.engine.game_over:
            return None

        winner = self.engine.get_winner()
        if winner == HUMAN:
            return "success"
        elif winner == AI:
            return "error"
        else:
            return "info"

    def describe(self, summary: MoveSummary) -> List[Tuple[str, str]]:
        """
        Status messages for a move, in display order.

        Returns:
            (kind, message) pairs; kind is one of success, info, warning, error
        """
        by_human = summary.player == HUMAN
        messages = []

        if summary.capture:
            captured = summary.capture.captured
            if by_human:
                messages.append(("success", f"Captured {captured} stones!"))
            else:
                messages.append(("warning", f"AI captured {captured} stones!"))

        if summary.game_over:
            messages.append((self.final_kind(), self.final_message()))
        elif summary.extra_turn:
            if by_human:
                messages.append(("success", "You get another turn!"))
            else:
                messages.append(("info", "AI gets another turn!"))

        return messages
