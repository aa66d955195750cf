"""
Tests for tictactoe_engine.core.types

Tests Player, GameStatus and MoveOutcome.
"""

import pytest

from tictactoe_engine.core.types import (
    CELL_STRINGS,
    GameStatus,
    MoveOutcome,
    Player,
    Status,
)


class TestPlayer:
    """Player enum tests."""

    def test_cell_encoding(self):
        """X and O use the int8 cell values 1 and 2."""
        assert Player.X.value == 1
        assert Player.O.value == 2

    def test_next_alternates(self):
        """next returns the other player."""
        assert Player.X.next is Player.O
        assert Player.O.next is Player.X

    def test_symbols(self):
        """Symbols come from CELL_STRINGS."""
        assert Player.X.symbol == "X"
        assert Player.O.symbol == "O"
        assert CELL_STRINGS[0] == " "


class TestGameStatus:
    """GameStatus tests."""

    def test_default_is_ongoing(self):
        assert GameStatus() == GameStatus.ongoing()
        assert GameStatus().winner is None

    def test_won_carries_winner(self):
        status = GameStatus.won(Player.O)
        assert status.status is Status.WON
        assert status.winner is Player.O

    def test_won_compares_by_player(self):
        """Won(X) equals Won(X) but not Won(O)."""
        assert GameStatus.won(Player.X) == GameStatus.won(Player.X)
        assert GameStatus.won(Player.X) != GameStatus.won(Player.O)

    @pytest.mark.parametrize("status, over", [
        (GameStatus.ongoing(), False),
        (GameStatus.won(Player.X), True),
        (GameStatus.draw(), True),
    ])
    def test_is_over(self, status, over):
        assert status.is_over is over

    def test_str(self):
        assert str(GameStatus.ongoing()) == "Ongoing"
        assert str(GameStatus.draw()) == "Draw"
        assert str(GameStatus.won(Player.X)) == "Won(X)"


class TestMoveOutcome:
    """MoveOutcome tests."""

    def test_only_success_is_ok(self):
        assert MoveOutcome.SUCCESS.ok
        for outcome in MoveOutcome:
            if outcome is not MoveOutcome.SUCCESS:
                assert not outcome.ok

    def test_four_outcomes(self):
        assert len(MoveOutcome) == 4
