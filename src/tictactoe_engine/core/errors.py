"""
Engine exceptions.

Only construction can fail. Move-time problems are reported as
MoveOutcome values instead.
"""


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidBoardSize(TicTacToeError, ValueError):
    """Board size is below 1 or needs more cells than a mask can hold."""

    def __init__(self, board_size, max_size: int):
        self.board_size = board_size
        self.max_size = max_size
        super().__init__(
            f"Invalid board size: {board_size!r}. "
            f"Expected an integer between 1 and {max_size}."
        )
