"""Tests for board layout and validation."""

import pytest
from mancala_engine.core import (
    AI,
    HUMAN,
    INITIAL_BOARD,
    PLAYER_SIDES,
    get_opposite_pit,
    get_side,
    render_board,
    validate_board,
)


def test_initial_board():
    """Test the standard starting layout."""
    assert list(INITIAL_BOARD) == [4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0]
    assert sum(INITIAL_BOARD) == 48


def test_player_sides():
    """Test pit ranges and stores of both players."""
    assert list(PLAYER_SIDES[HUMAN].pits) == [0, 1, 2, 3, 4, 5]
    assert list(PLAYER_SIDES[AI].pits) == [7, 8, 9, 10, 11, 12]
    assert PLAYER_SIDES[HUMAN].store == 6
    assert PLAYER_SIDES[AI].store == 13

    assert PLAYER_SIDES[HUMAN].owns_pit(5)
    assert not PLAYER_SIDES[HUMAN].owns_pit(6)
    assert not PLAYER_SIDES[AI].owns_pit(13)


def test_get_side_unknown_player():
    """Unknown player ids have no side."""
    assert get_side(0) is PLAYER_SIDES[0]
    assert get_side(2) is None
    assert get_side(-1) is None


def test_opposite_pit():
    """Test opposite pit calculation."""
    assert get_opposite_pit(0) == 12
    assert get_opposite_pit(4) == 8
    assert get_opposite_pit(5) == 7
    assert get_opposite_pit(8) == 4
    assert get_opposite_pit(12) == 0

    with pytest.raises(ValueError):
        get_opposite_pit(6)
    with pytest.raises(ValueError):
        get_opposite_pit(13)


def test_validate_board_returns_copy():
    board = list(INITIAL_BOARD)
    validated = validate_board(board)

    assert validated == board
    validated[0] = 99
    assert board[0] == 4


def test_board_validation():
    """Test validation catches malformed boards."""
    # Wrong board size
    with pytest.raises(ValueError):
        validate_board([4] * 12)

    # Negative stones
    with pytest.raises(ValueError):
        validate_board([4, -1, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0])

    # Non-integer slot
    with pytest.raises(ValueError):
        validate_board([4, 4.5, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0])


def test_render_board():
    """AI pits are drawn right to left above the human pits."""
    text = render_board([1, 2, 3, 4, 5, 6, 10, 7, 8, 9, 10, 11, 12, 20], current_player=AI)
    lines = text.splitlines()

    assert lines[0].split() == ["12", "11", "10", "9", "8", "7"]
    assert lines[1].startswith("[20]")
    assert lines[1].endswith("[10]")
    assert lines[2].split() == ["1", "2", "3", "4", "5", "6"]
    assert lines[-1] == "AI's turn"
