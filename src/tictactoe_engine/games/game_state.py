"""
GameState - mutable game state container.

Cheap to copy: two ints, an enum and a named tuple.
"""

from __future__ import annotations

from typing import Optional

from tictactoe_engine.core.types import GameStatus, Player


class GameState:
    """
    Lightweight game state container.

    Occupancy is held as two bit masks, one per player:
        bit (row * N + col) set in x_mask -> X owns that cell
        bit (row * N + col) set in o_mask -> O owns that cell
    The masks never share a bit.
    """
    __slots__ = ('x_mask', 'o_mask', 'current_player', 'status', 'winning_pattern')

    def __init__(
        self,
        x_mask: int = 0,
        o_mask: int = 0,
        current_player: Player = Player.X,
        status: GameStatus = GameStatus.ongoing(),
        winning_pattern: Optional[int] = None,
    ):
        self.x_mask = x_mask
        self.o_mask = o_mask
        self.current_player = current_player
        self.status = status
        self.winning_pattern = winning_pattern

    @classmethod
    def initial(cls) -> "GameState":
        return cls()

    @property
    def occupied(self) -> int:
        return self.x_mask | self.o_mask

    def mask_for(self, player: Player) -> int:
        return self.x_mask if player is Player.X else self.o_mask

    def set_mask(self, player: Player, mask: int) -> None:
        if player is Player.X:
            self.x_mask = mask
        else:
            self.o_mask = mask

    def copy(self) -> "GameState":
        return GameState(
            self.x_mask,
            self.o_mask,
            self.current_player,
            self.status,
            self.winning_pattern,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.x_mask == other.x_mask
            and self.o_mask == other.o_mask
            and self.current_player is other.current_player
            and self.status == other.status
            and self.winning_pattern == other.winning_pattern
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"GameState(x_mask={self.x_mask:#x}, o_mask={self.o_mask:#x}, "
            f"current_player={self.current_player.name}, status={self.status})"
        )
