"""
TicTacToe Engine - N x N TicTacToe game state on bit masks.

Tracks board occupancy, turn order, move legality and win/draw detection
for square boards from 1x1 up to 8x8. Rendering and input handling are
left to the caller, which drives the engine through a handful of calls.

Quick Start:
    from tictactoe_engine import TicTacToe, MoveOutcome

    game = TicTacToe(board_size=3)
    game.make_move(0, 0)            # MoveOutcome.SUCCESS
    game.player_at(0, 0)            # Player.X
    game.status                     # GameStatus(ONGOING, None)
    game.winning_coordinates()      # None until someone wins
    game.reset()

Modules:
    core   - Player, GameStatus, MoveOutcome and errors
    games  - The engine, its state container and bit-mask rules
    utils  - Board limits, configuration and factory helpers
    debug  - Timing helpers for benchmarks
"""

from tictactoe_engine.core import (
    GameStatus,
    InvalidBoardSize,
    MoveOutcome,
    Player,
    Status,
    TicTacToeError,
)
from tictactoe_engine.games import GameState, TicTacToe, WinPatternTable

__version__ = "1.0.0"

__all__ = [
    # Engine
    "TicTacToe",
    "GameState",
    "WinPatternTable",
    # Types
    "Player",
    "Status",
    "GameStatus",
    "MoveOutcome",
    # Errors
    "TicTacToeError",
    "InvalidBoardSize",
]
