"""
Configuration and board limits.
"""

import logging
import math


# ---------------------------------------------------------------------------
# Board Limits
# ---------------------------------------------------------------------------

# Masks are stored as uint64, one bit per cell
MASK_BITS = 64

MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = math.isqrt(MASK_BITS)  # 8x8 = 64 cells

DEFAULT_BOARD_SIZE = 3


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        log_level: int = logging.WARNING,
    ):
        # Imported here: game_rules reads the limits above from this module
        from tictactoe_engine.games.game_rules import validate_board_size

        self.board_size = validate_board_size(board_size)
        self.log_level = log_level

    @property
    def num_cells(self) -> int:
        return self.board_size * self.board_size

    def __repr__(self) -> str:
        return (
            f"Config(board_size={self.board_size}, "
            f"log_level={logging.getLevelName(self.log_level)})"
        )
