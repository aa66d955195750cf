"""
Tests for tictactoe_engine.core.errors
"""

import pytest

from tictactoe_engine.core.errors import InvalidBoardSize, TicTacToeError


class TestInvalidBoardSize:
    """InvalidBoardSize tests."""

    def test_is_value_error(self):
        """Callers can catch it as a ValueError."""
        assert issubclass(InvalidBoardSize, ValueError)
        assert issubclass(InvalidBoardSize, TicTacToeError)

    def test_carries_size(self):
        err = InvalidBoardSize(0, 8)
        assert err.board_size == 0
        assert err.max_size == 8
        assert "0" in str(err)
        assert "8" in str(err)

    def test_raisable(self):
        with pytest.raises(TicTacToeError):
            raise InvalidBoardSize(-1, 8)
