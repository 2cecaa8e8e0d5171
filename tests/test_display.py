"""Tests for the rich terminal display."""

import io

import pytest
from rich.console import Console
from mancala_engine.core import INITIAL_BOARD, MancalaEngine
from mancala_engine.utils import GameDisplay


def make_display():
    buffer = io.StringIO()
    return GameDisplay(Console(file=buffer, width=80)), buffer


@pytest.mark.parametrize(
    "kind, marker",
    [("success", "✓"), ("warning", "⚠"), ("error", "✗"), ("info", "ℹ")],
)
def test_show_message_styles_by_kind(kind, marker):
    display, buffer = make_display()
    display.show_message(kind, "Congratulations! You won!")

    out = buffer.getvalue().strip()
    assert out.startswith(marker)
    assert out.endswith("Congratulations! You won!")


def test_show_board():
    display, buffer = make_display()
    display.show_board(list(INITIAL_BOARD), current_player=0)

    out = buffer.getvalue()
    assert "Your turn" in out
    assert out.count(" 4") >= 12


def test_show_move():
    display, buffer = make_display()
    summary = MancalaEngine().apply_move(2)
    display.show_move(summary)

    assert "You played pit 3 (4 stones, last stone in slot 6)" in buffer.getvalue()
