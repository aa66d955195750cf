"""
Shared test fixtures for tictactoe_engine tests.

Design principles:
- Size-agnostic fixtures where possible
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, List, Tuple

import pytest

from tictactoe_engine.games.game_rules import WinPatternTable
from tictactoe_engine.games.tic_tac_toe import TicTacToe


Move = Tuple[int, int]


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> TicTacToe:
    """Fresh 3x3 game."""
    return TicTacToe(3)


@pytest.fixture
def pattern_table() -> WinPatternTable:
    """Empty pattern table."""
    return WinPatternTable()


@pytest.fixture
def play() -> Callable[[TicTacToe, List[Move]], None]:
    """Apply moves in order, asserting each one succeeds."""
    def _play(game: TicTacToe, moves: List[Move]) -> None:
        for r, c in moves:
            outcome = game.make_move(r, c)
            assert outcome.ok, f"move ({r},{c}) returned {outcome}"
    return _play


# =============================================================================
# Move Sequences (3x3)
# =============================================================================

@pytest.fixture
def x_top_row_win() -> List[Move]:
    """X takes the top row on the fifth move."""
    return [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]


@pytest.fixture
def draw_moves() -> List[Move]:
    """Nine moves that fill the board with no line."""
    return [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (2, 0), (1, 2), (2, 2), (2, 1)]


@pytest.fixture
def won_game(game: TicTacToe, play, x_top_row_win) -> TicTacToe:
    """3x3 game X has won on the top row."""
    play(game, x_top_row_win)
    return game


@pytest.fixture
def drawn_game(game: TicTacToe, play, draw_moves) -> TicTacToe:
    """3x3 game that ended in a draw."""
    play(game, draw_moves)
    return game
