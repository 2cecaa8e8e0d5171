"""Tests for heuristic move evaluation."""

import random
from dataclasses import fields

import pytest
from mancala_engine.core import AI, HUMAN, InvalidMoveError, MancalaEngine
from mancala_engine.solver import HeuristicWeights, MoveEvaluator, choose_best, evaluate_move


def test_extra_turn_score():
    """Extra turn move: margin plus bonus, no reply lookahead."""
    engine = MancalaEngine()

    # Pit 2 ends in the store: 1 * 6 + 40
    assert evaluate_move(engine, HUMAN, 2) == pytest.approx(46.0)


def test_opening_best_moves():
    engine = MancalaEngine()

    assert choose_best(engine, HUMAN) == 2
    # Works for the player not to move as well
    assert choose_best(engine, AI) == 9
    assert evaluate_move(engine, AI, 9) == pytest.approx(46.0)


def test_terminal_move_score():
    """Game-ending move: margin, bonuses and final margin * 20."""
    engine = MancalaEngine([0, 0, 0, 0, 0, 1, 20, 0, 0, 0, 0, 0, 5, 15])

    # Final 21 - 20: 6 + 40 (extra turn) + 20
    assert evaluate_move(engine, HUMAN, 5) == pytest.approx(66.0)


def test_capture_score():
    engine = MancalaEngine([0, 0, 0, 1, 0, 0, 0, 4, 3, 4, 4, 4, 4, 0])

    # Capture of 4 ends the game at 4 - 20:
    # -16 * 6 + (15 + 4 * 3) - 16 * 20
    assert evaluate_move(engine, HUMAN, 3) == pytest.approx(-389.0)


def test_opponent_reply_penalty():
    engine = MancalaEngine([1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1, 0])

    # Pit 5: margin 1 * 6, AI's best reply (pit 12, extra turn) scores 35
    assert evaluate_move(engine, HUMAN, 5) == pytest.approx(6 - 35 * 0.6)
    # Pit 0: AI's only reply ends the game 1 - 3: -2 * 6 + 35 - 2 * 15 = -7
    assert evaluate_move(engine, HUMAN, 0) == pytest.approx(7 * 0.6)

    assert choose_best(engine, HUMAN) == 0


def test_rank_moves():
    engine = MancalaEngine([1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1, 0])
    rankings = MoveEvaluator().rank_moves(engine, HUMAN)

    assert [pit for pit, _ in rankings] == [0, 5]
    assert rankings[0][1] == pytest.approx(4.2)
    assert rankings[1][1] == pytest.approx(-15.0)


def test_ties_go_to_lowest_pit():
    flat = HeuristicWeights(**{f.name: 0.0 for f in fields(HeuristicWeights)})
    evaluator = MoveEvaluator(flat)
    engine = MancalaEngine([0, 0, 3, 0, 2, 1, 0, 4, 4, 4, 4, 4, 4, 0])

    assert evaluator.choose_best(engine, HUMAN) == 2


def test_custom_weights():
    evaluator = MoveEvaluator(HeuristicWeights(extra_turn=100.0))
    engine = MancalaEngine()

    assert evaluator.evaluate_move(engine, HUMAN, 2) == pytest.approx(106.0)


def test_evaluation_does_not_mutate_engine():
    engine = MancalaEngine()
    engine.apply_move(0)
    before = engine.get_board()
    player = engine.current_player

    MoveEvaluator().rank_moves(engine, AI)
    MoveEvaluator().rank_moves(engine, HUMAN)

    assert engine.get_board() == before
    assert engine.current_player == player
    assert engine.game_over is False


def test_choose_best_none_without_moves():
    engine = MancalaEngine([0, 0, 0, 0, 0, 1, 20, 0, 0, 0, 0, 0, 5, 15])
    engine.apply_move(5)

    assert engine.get_valid_moves(HUMAN) == []
    assert choose_best(engine, HUMAN) is None
    assert choose_best(engine, AI) is None


def test_evaluate_invalid_pit_raises():
    engine = MancalaEngine()

    with pytest.raises(InvalidMoveError):
        evaluate_move(engine, HUMAN, 8)


@pytest.mark.parametrize("seed", range(10))
def test_choose_best_always_valid(seed):
    """The chosen move is always legal, across whole games."""
    rng = random.Random(seed)
    engine = MancalaEngine()

    while not engine.game_over:
        player = engine.current_player
        best = choose_best(engine, player)
        assert best is not None
        assert engine.is_valid_move(best, player)

        # Mix heuristic and random moves to reach varied positions
        move = best if rng.random() < 0.5 else rng.choice(engine.get_valid_moves())
        engine.apply_move(move)

    assert choose_best(engine, HUMAN) is None
