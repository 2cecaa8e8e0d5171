"""Move selection for AI play and hints."""

from .heuristic import HeuristicWeights, MoveEvaluator, choose_best, evaluate_move

__all__ = [
    "HeuristicWeights",
    "MoveEvaluator",
    "choose_best",
    "evaluate_move",
]
