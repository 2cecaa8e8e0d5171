"""
Main CLI for the Mancala engine.
"""

import argparse
import logging
import random
import sys
from typing import List

from tqdm import tqdm

from ..core import AI, HUMAN, PLAYER_SIDES, InvalidMoveError, MancalaEngine, validate_board
from ..game import GameSession
from ..solver import MoveEvaluator
from ..utils.rich_display import GameDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_board(text: str) -> List[int]:
    """Parse 14 comma-separated stone counts."""
    try:
        board = [int(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Board must be comma-separated integers: {text!r}")

    try:
        validate_board(board)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return board


def play_command(args):
    """Play an interactive game against the AI."""
    setup_rich_logging(getattr(logging, args.log_level.upper()))
    display = GameDisplay()
    session = GameSession()

    display.show_header("Mancala - Kalah(6,4)")
    display.log_info("Your turn! Pick one of your pits to start.")

    while True:
        engine = session.engine
        display.show_board(engine.get_board(), None if engine.game_over else engine.current_player)

        if engine.game_over:
            scores = engine.get_scores()
            display.show_result(session.final_message(), scores.human, scores.ai)
            choice = display.console.input("Play again? \\[y/N] ").strip().lower()
            if choice != "y":
                return
            session.new_game()
            display.log_info("New game started! Your turn.")
            continue

        if session.is_ai_turn:
            for summary in session.run_ai_turns():
                display.show_move(summary)
                for kind, message in session.describe(summary):
                    display.show_message(kind, message)
            continue

        choice = display.console.input("Your move: ").strip().lower()
        if choice == "q":
            return
        if choice == "n":
            session.new_game()
            display.log_info("New game started! Your turn.")
            continue
        if choice == "h":
            hint = session.hint()
            if hint is None:
                display.log_warning("No moves available!")
            else:
                display.log_info(f"Hint: Try pit {hint + 1}.")
            continue

        if not choice.isdigit() or not 1 <= int(choice) <= len(PLAYER_SIDES[HUMAN].pits):
            display.log_warning("Enter a pit number from 1 to 6, h, n or q.")
            continue

        try:
            summary = session.play_human(int(choice) - 1)
        except InvalidMoveError as e:
            display.log_warning(str(e))
            continue

        display.show_move(summary)
        for kind, message in session.describe(summary):
            display.show_message(kind, message)


def hint_command(args):
    """Print the best move for a position."""
    setup_logging(args.log_level)
    display = GameDisplay()

    engine = MancalaEngine(args.board, args.player)
    best = MoveEvaluator().choose_best(engine, args.player)
    if best is None:
        display.log_error("No moves available!")
        sys.exit(1)
    display.log(str(best))


def rank_command(args):
    """Print the score of every valid move for a position."""
    setup_logging(args.log_level)
    display = GameDisplay()

    engine = MancalaEngine(args.board, args.player)
    evaluator = MoveEvaluator()
    rankings = evaluator.rank_moves(engine, args.player)
    if not rankings:
        display.log_error("No moves available!")
        sys.exit(1)
    display.show_board(engine.get_board(), args.player)
    display.show_rankings(rankings, best=evaluator.choose_best(engine, args.player))


def play_selfplay_game(evaluator: MoveEvaluator, rng: random.Random, ai_player: int) -> MancalaEngine:
    """Heuristic player against uniformly random moves; returns the finished engine."""
    engine = MancalaEngine()
    while not engine.game_over:
        if engine.current_player == ai_player:
            move = evaluator.choose_best(engine, ai_player)
        else:
            move = rng.choice(engine.get_valid_moves())
        engine.apply_move(move)
    return engine


def selfplay_command(args):
    """Play the heuristic AI against a random mover."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    rng = random.Random(args.seed)
    evaluator = MoveEvaluator()
    wins = losses = ties = 0

    for game_idx in tqdm(range(args.games), desc="Self-play", unit=" game"):
        # Alternate who moves first
        ai_player = AI if game_idx % 2 == 0 else HUMAN
        engine = play_selfplay_game(evaluator, rng, ai_player)
        winner = engine.get_winner()
        if winner is None:
            ties += 1
        elif winner == ai_player:
            wins += 1
        else:
            losses += 1
        logger.debug(f"Game {game_idx}: {engine.get_result()}")

    display.log_success(f"Heuristic AI: {wins} wins, {losses} losses, {ties} ties")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Mancala (Kalah 6x4) engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play against the AI")
    play_parser.set_defaults(func=play_command)

    for name, func, help_text in (
        ("hint", hint_command, "Best move for a position"),
        ("rank", rank_command, "Score every valid move of a position"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--board",
            type=parse_board,
            required=True,
            help="14 comma-separated stone counts (pits 0-5, store, pits 7-12, store)",
        )
        sub.add_argument(
            "--player", type=int, choices=[HUMAN, AI], default=HUMAN, help="Player to move"
        )
        sub.set_defaults(func=func)

    selfplay_parser = subparsers.add_parser("selfplay", help="Heuristic AI vs random mover")
    selfplay_parser.add_argument("--games", type=int, default=100, help="Number of games")
    selfplay_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    selfplay_parser.set_defaults(func=selfplay_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
