"""
Core types and enums.

This module contains the fundamental types used throughout the engine:
- Player: the two sides, using the int8 cell encoding (0 = empty)
- Status / GameStatus: where the game stands
- MoveOutcome: what happened to a move request
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional


class Player(Enum):
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return CELL_STRINGS[self.value]

    @property
    def next(self) -> "Player":
        """The player who moves after this one."""
        return Player.O if self is Player.X else Player.X


# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}


class Status(Enum):
    ONGOING = auto()
    WON = auto()
    DRAW = auto()


class GameStatus(NamedTuple):
    """Game status with the winner attached when there is one."""

    status: Status = Status.ONGOING
    winner: Optional[Player] = None

    @classmethod
    def ongoing(cls) -> "GameStatus":
        return cls(Status.ONGOING, None)

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(Status.WON, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Status.DRAW, None)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.ONGOING

    def __str__(self) -> str:
        if self.status is Status.WON:
            return f"Won({self.winner.symbol})"
        return self.status.name.capitalize()


class MoveOutcome(Enum):
    """
    Result of a move request.

    Only SUCCESS mutates the game. The other three leave it untouched.
    """

    SUCCESS = auto()
    POSITION_TAKEN = auto()
    INVALID_COORDINATES = auto()
    GAME_ALREADY_OVER = auto()

    @property
    def ok(self) -> bool:
        return self is MoveOutcome.SUCCESS
