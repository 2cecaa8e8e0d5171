"""
Heuristic move evaluation.

Scores a candidate move by simulating it, then penalizing it by the
opponent's best single reply (a damped one-ply minimax). Used to pick the
AI's move and to compute hints for the human player.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import MancalaEngine, MoveSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeuristicWeights:
    """Weights for move scoring, own move and opponent reply."""

    score_margin: float = 6.0
    extra_turn: float = 40.0
    capture_base: float = 15.0
    capture_per_stone: float = 3.0
    terminal_margin: float = 20.0
    opponent_stuck: float = 10.0

    reply_extra_turn: float = 35.0
    reply_capture_base: float = 15.0
    reply_capture_per_stone: float = 2.0
    reply_terminal_margin: float = 15.0
    reply_damping: float = 0.6


class MoveEvaluator:
    """
    Stateless move scorer.

    Never mutates the engine it is given: every simulation runs on a clone.
    """

    def __init__(self, weights: Optional[HeuristicWeights] = None):
        self.weights = weights or HeuristicWeights()

    def evaluate_move(self, engine: MancalaEngine, player: int, pit_idx: int) -> float:
        """
        Score pit_idx for player.

        Args:
            engine: Position to evaluate from
            player: Player making the move
            pit_idx: Pit to play

        Returns:
            Score; higher is better for player

        Raises:
            InvalidMoveError: pit_idx is not a legal move for player
        """
        w = self.weights
        sim_engine, result = engine.clone(current_player=player).simulate_move(pit_idx)

        score = result.scores.margin(player) * w.score_margin

        if result.extra_turn:
            score += w.extra_turn
        if result.capture:
            score += w.capture_base + result.capture.captured * w.capture_per_stone
        if result.game_over:
            score += result.scores.margin(player) * w.terminal_margin
            return score

        # Same player moves again, nothing to answer
        if result.extra_turn:
            return score

        opponent = 1 - player
        opponent_moves = sim_engine.get_valid_moves(opponent)
        if not opponent_moves:
            score += w.opponent_stuck
        else:
            worst_opponent = max(
                self._score_reply(sim_engine, opponent, opp_pit)
                for opp_pit in opponent_moves
            )
            score -= worst_opponent * w.reply_damping

        return score

    def _score_reply(self, engine: MancalaEngine, opponent: int, pit_idx: int) -> float:
        """Score an opponent reply from the opponent's point of view."""
        w = self.weights
        reply: MoveSummary = engine.clone(current_player=opponent).apply_move(pit_idx)

        score = reply.scores.margin(opponent) * w.score_margin
        if reply.extra_turn:
            score += w.reply_extra_turn
        if reply.capture:
            score += w.reply_capture_base + reply.capture.captured * w.reply_capture_per_stone
        if reply.game_over:
            score += reply.scores.margin(opponent) * w.reply_terminal_margin
        return score

    def rank_moves(self, engine: MancalaEngine, player: int) -> List[Tuple[int, float]]:
        """(pit, score) for every valid move of player, in pit order."""
        return [
            (pit, self.evaluate_move(engine, player, pit))
            for pit in engine.get_valid_moves(player)
        ]

    def choose_best(self, engine: MancalaEngine, player: int) -> Optional[int]:
        """
        Pick the highest scoring move for player.

        Ties go to the first (lowest) pit.

        Returns:
            Pit index, or None if player has no valid move
        """
        best_move = None
        best_score = float("-inf")

        for pit, score in self.rank_moves(engine, player):
            if score > best_score:
                best_score = score
                best_move = pit

        if best_move is not None:
            logger.debug(f"Player {player} best move: pit {best_move} (score {best_score:.1f})")
        return best_move


_default_evaluator = MoveEvaluator()


def evaluate_move(engine: MancalaEngine, player: int, pit_idx: int) -> float:
    """Score a move with the default weights."""
    return _default_evaluator.evaluate_move(engine, player, pit_idx)


def choose_best(engine: MancalaEngine, player: int) -> Optional[int]:
    """Best move for player with the default weights, or None."""
    return _default_evaluator.choose_best(engine, player)
