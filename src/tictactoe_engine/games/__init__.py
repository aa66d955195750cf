"""
Games module - the bit-mask TicTacToe engine and its rules.
"""

from tictactoe_engine.games.game_state import GameState
from tictactoe_engine.games.game_rules import (
    WinPatternTable,
    in_bounds,
    board_full,
    full_board_mask,
    generate_winning_patterns,
    mask_to_coordinates,
)
from tictactoe_engine.games.tic_tac_toe import TicTacToe

__all__ = [
    "GameState",
    "TicTacToe",
    "WinPatternTable",
    "in_bounds",
    "board_full",
    "full_board_mask",
    "generate_winning_patterns",
    "mask_to_coordinates",
]
