"""
Core module - fundamental types and errors.
"""

from tictactoe_engine.core.types import (
    CELL_STRINGS,
    GameStatus,
    MoveOutcome,
    Player,
    Status,
)
from tictactoe_engine.core.errors import InvalidBoardSize, TicTacToeError

__all__ = [
    # Types
    "Player",
    "Status",
    "GameStatus",
    "MoveOutcome",
    # Constants
    "CELL_STRINGS",
    # Errors
    "TicTacToeError",
    "InvalidBoardSize",
]
