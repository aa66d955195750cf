"""
Factory functions for creating games.
"""

from typing import Optional

from tictactoe_engine.games.game_rules import WinPatternTable
from tictactoe_engine.games.tic_tac_toe import TicTacToe
from tictactoe_engine.utils.config import Config


def create_game(
    board_size: Optional[int] = None,
    config: Optional[Config] = None,
    patterns: Optional[WinPatternTable] = None,
) -> TicTacToe:
    """
    Create a game in its initial state.

    Args:
        board_size: Side length. Takes precedence over config.
        config: Configuration to read the board size from.
        patterns: Shared pattern table, e.g. when creating many games
            of the same size.

    Returns:
        Fresh TicTacToe instance
    """
    if board_size is None:
        board_size = (config or Config()).board_size
    return TicTacToe(board_size, patterns=patterns)
