"""
N x N TicTacToe engine on bit masks.

Each player's stones are one integer with bit (row * N + col) set per
occupied cell. A player has won when their mask contains every bit of
some winning pattern:

    (mask & pattern) == pattern

Patterns are checked rows first, then columns, then the main diagonal,
then the anti-diagonal. The first match is the recorded winning line.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from tictactoe_engine.core.types import CELL_STRINGS, GameStatus, MoveOutcome, Player
from tictactoe_engine.games.game_rules import (
    WinPatternTable,
    board_full,
    first_contained_pattern,
    in_bounds,
    mask_to_coordinates,
    mask_to_indices,
    popcount,
    position_to_bit,
    validate_board_size,
)
from tictactoe_engine.games.game_state import GameState
from tictactoe_engine.utils.config import DEFAULT_BOARD_SIZE

logger = logging.getLogger(__name__)


class TicTacToe:
    """
    Game engine for an N x N board. X always moves first.

    Not thread-safe: callers sharing an instance across threads must
    serialize access themselves.
    """

    __slots__ = ('_size', '_table', 'state')

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        patterns: Optional[WinPatternTable] = None,
    ):
        """
        Args:
            board_size: Side length N, between 1 and 8.
            patterns: Lookup table to build winning patterns into. A fresh
                table is created when omitted.

        Raises:
            InvalidBoardSize: board_size is below 1 or too large for a mask.
        """
        self._size = validate_board_size(board_size)
        self._table = patterns if patterns is not None else WinPatternTable()
        self._table.ensure(self._size)
        self.state = GameState.initial()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def board_size(self) -> int:
        return self._size

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def winner(self) -> Optional[Player]:
        return self.state.status.winner

    @property
    def move_count(self) -> int:
        return popcount(self.state.occupied)

    @property
    def winning_patterns(self) -> np.ndarray:
        return self._table.lookup(self._size)

    def is_over(self) -> bool:
        return self.state.status.is_over

    def get_state(self) -> GameState:
        return self.state

    def snapshot(self) -> GameState:
        """Independent copy of the current state."""
        return self.state.copy()

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def make_move(self, row: int, col: int) -> MoveOutcome:
        """
        Place the current player's mark at (row, col).

        Coordinates are checked before the game-over check, so an
        out-of-range move is reported as INVALID_COORDINATES even after
        the game has ended. Anything but SUCCESS leaves the game unchanged.
        """
        if not in_bounds(self._size, row, col):
            logger.debug("Rejected move (%d, %d): outside %dx%d board", row, col, self._size, self._size)
            return MoveOutcome.INVALID_COORDINATES

        state = self.state
        if state.status.is_over:
            logger.debug("Rejected move (%d, %d): game is %s", row, col, state.status)
            return MoveOutcome.GAME_ALREADY_OVER

        bit = position_to_bit(self._size, row, col)
        if state.occupied & bit:
            logger.debug("Rejected move (%d, %d): position taken", row, col)
            return MoveOutcome.POSITION_TAKEN

        player = state.current_player
        mask = state.mask_for(player) | bit
        state.set_mask(player, mask)

        pattern = first_contained_pattern(self.winning_patterns, mask)
        if pattern is not None:
            state.winning_pattern = pattern
            state.status = GameStatus.won(player)
            logger.debug("%s wins with %s", player.symbol, mask_to_coordinates(self._size, pattern))
        elif board_full(self._size, state.occupied):
            state.status = GameStatus.draw()
            logger.debug("Board full: draw")
        else:
            state.current_player = player.next

        return MoveOutcome.SUCCESS

    def reset(self) -> None:
        """Clear the board and hand the first move back to X. Board size is kept."""
        self.state = GameState.initial()
        logger.debug("Reset %dx%d board", self._size, self._size)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def player_at(self, row: int, col: int) -> Optional[Player]:
        """Owner of (row, col), or None if empty or out of range."""
        if not in_bounds(self._size, row, col):
            return None
        bit = position_to_bit(self._size, row, col)
        if self.state.x_mask & bit:
            return Player.X
        if self.state.o_mask & bit:
            return Player.O
        return None

    def winning_coordinates(self) -> Optional[List[Tuple[int, int]]]:
        """
        Cells of the winning line in ascending row-major order, or None
        unless the game was won. The first and last entries are the two
        ends of the line.
        """
        if self.winner is None:
            return None
        return mask_to_coordinates(self._size, self.state.winning_pattern)

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells in row-major order; empty once the game is over."""
        if self.is_over():
            return []
        free = ~self.state.occupied
        return [
            divmod(i, self._size)
            for i in range(self._size * self._size)
            if (free >> i) & 1
        ]

    def to_array(self) -> np.ndarray:
        """(N, N) int8 board: 0 = empty, 1 = X, 2 = O."""
        n = self._size
        flat = np.zeros(n * n, dtype=np.int8)
        flat[mask_to_indices(n, self.state.x_mask)] = Player.X.value
        flat[mask_to_indices(n, self.state.o_mask)] = Player.O.value
        return flat.reshape(n, n)

    def state_string(self) -> str:
        board = self.to_array()
        n = self._size
        lines = ["╭" + "┬".join(["───"] * n) + "╮"]
        for i in range(n):
            row = "│ " + " │ ".join(CELL_STRINGS[board[i, j]] for j in range(n)) + " │"
            lines.append(row)
            if i < n - 1:
                lines.append("├" + "┼".join(["───"] * n) + "┤")
        lines.append("╰" + "┴".join(["───"] * n) + "╯")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TicTacToe(board_size={self._size}, status={self.status})"
