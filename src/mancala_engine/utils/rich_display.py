"""
Rich-based terminal display for Mancala games.

Provides clean, formatted output with:
- Board panel (AI row on top, stores on the sides)
- Move and status messages
- Move ranking tables
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core import AI, HUMAN, PLAYER_SIDES, MoveSummary

console = Console()
logger = logging.getLogger(__name__)


class GameDisplay:
    """
    Rich-based display for a game in progress.

    Shows:
    - The board, with the player to move
    - Moves played and their consequences
    - Hints and move scores
    """

    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_message(self, kind: str, message: str):
        """Log message with the style of its kind (success, info, warning, error)."""
        log = {
            "success": self.log_success,
            "warning": self.log_warning,
            "error": self.log_error,
        }.get(kind, self.log_info)
        log(message)

    def show_header(self, title: str):
        """Show game header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print("Keys: [bold]1-6[/bold] play a pit, [bold]h[/bold] hint, "
                           "[bold]n[/bold] new game, [bold]q[/bold] quit")
        self.console.print()

    def board_table(self, board: Sequence[int], highlight: Optional[int] = None) -> Table:
        """Create board table: AI pits right to left on top, human pits below."""
        human_side, ai_side = PLAYER_SIDES[HUMAN], PLAYER_SIDES[AI]

        def cell(pit: int) -> str:
            value = f"{board[pit]:>2}"
            return f"[reverse]{value}[/reverse]" if pit == highlight else value

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("AI store", style="red", justify="center")
        for _ in human_side.pits:
            table.add_column(justify="center")
        table.add_column("Human store", style="green", justify="center")

        table.add_row("", *[f"[red]{cell(pit)}[/red]" for pit in reversed(ai_side.pits)], "")
        table.add_row(f"[bold]{board[ai_side.store]:>2}[/bold]", *[""] * len(human_side.pits),
                      f"[bold]{board[human_side.store]:>2}[/bold]")
        table.add_row("", *[f"[green]{cell(pit)}[/green]" for pit in human_side.pits], "")
        table.add_row("", *[f"[dim]{n}[/dim]" for n in range(1, len(human_side.pits) + 1)], "")
        return table

    def show_board(self, board: Sequence[int], current_player: Optional[int] = None,
                   highlight: Optional[int] = None):
        """Show the board in a panel titled with the player to move."""
        if current_player is None:
            title = "Game over"
        else:
            title = "Your turn" if current_player == HUMAN else "AI's turn"
        self.console.print(Panel.fit(self.board_table(board, highlight), title=title))

    def show_move(self, summary: MoveSummary):
        """One-line description of a move."""
        who = "You" if summary.player == HUMAN else "AI"
        pit_label = summary.pit_index - PLAYER_SIDES[summary.player].start + 1
        self.log_info(
            f"{who} played pit {pit_label} ({summary.stones_picked} stones, "
            f"last stone in slot {summary.last_position})"
        )

    def show_rankings(self, rankings: Iterable[Tuple[int, float]], best: Optional[int] = None):
        """Table of move scores."""
        table = Table(title="Move scores")
        table.add_column("Pit", justify="right", style="cyan")
        table.add_column("Score", justify="right")
        for pit, score in rankings:
            style = "bold green" if pit == best else ""
            table.add_row(str(pit), f"{score:.1f}", style=style)
        self.console.print(table)

    def show_result(self, result: str, human_score: int, ai_score: int):
        """Final score line."""
        self.console.rule("[bold]Game over[/bold]")
        self.console.print(f"Final score: You {human_score} - AI {ai_score}")
        self.console.print(f"[bold]{result}[/bold]")


def setup_rich_logging(level: int = logging.INFO):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[rich_handler],
        format="%(message)s",
    )
