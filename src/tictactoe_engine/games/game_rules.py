"""
Bit-mask utilities for N x N boards.

A board of side N is flattened row-major into a single integer, one bit
per cell:

    bit index = row * N + col

Winning patterns are uint64 arrays so a player's mask can be tested
against every line at once.
"""

from __future__ import annotations

import operator
from typing import List, Tuple

import numpy as np

from tictactoe_engine.core.errors import InvalidBoardSize
from tictactoe_engine.utils.config import MAX_BOARD_SIZE, MIN_BOARD_SIZE

PATTERN_DTYPE = np.uint64


def validate_board_size(size) -> int:
    """Return size if it is a usable board size, else raise InvalidBoardSize."""
    # bool is an int subclass; True is not a board size
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidBoardSize(size, MAX_BOARD_SIZE)
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise InvalidBoardSize(size, MAX_BOARD_SIZE)
    return int(size)


def in_bounds(size: int, r: int, c: int) -> bool:
    """Return True if (r, c) is inside a size x size board."""
    return 0 <= r < size and 0 <= c < size


def position_to_bit(size: int, r: int, c: int) -> int:
    # Python ints: numpy scalars would wrap at bit 63
    return 1 << (operator.index(r) * size + operator.index(c))


def full_board_mask(size: int) -> int:
    """Mask with all size*size cell bits set."""
    return (1 << (size * size)) - 1


def row_masks(size: int) -> List[int]:
    """One mask per row, top to bottom."""
    row = (1 << size) - 1
    return [row << (r * size) for r in range(size)]


def col_masks(size: int) -> List[int]:
    """One mask per column, left to right."""
    col = sum(1 << (r * size) for r in range(size))
    return [col << c for c in range(size)]


def diagonal_masks(size: int) -> List[int]:
    """Main diagonal then anti-diagonal."""
    major = sum(1 << (i * size + i) for i in range(size))
    minor = sum(1 << (i * size + (size - 1 - i)) for i in range(size))
    return [major, minor]


def generate_winning_patterns(size: int) -> np.ndarray:
    """
    All 2N + 2 winning lines for a board of the given size.

    Order is fixed: rows, columns, main diagonal, anti-diagonal. On a 1x1
    board every pattern is the same single bit.
    """
    patterns = row_masks(size) + col_masks(size) + diagonal_masks(size)
    return np.array(patterns, dtype=PATTERN_DTYPE)


def first_contained_pattern(patterns: np.ndarray, mask: int) -> int | None:
    """Return the first pattern fully contained in mask, or None."""
    m = PATTERN_DTYPE(mask)
    hits = np.flatnonzero((patterns & m) == patterns)
    if hits.size == 0:
        return None
    return int(patterns[hits[0]])


def mask_to_indices(size: int, mask: int) -> List[int]:
    """Linear indices of the set bits, ascending."""
    return [i for i in range(size * size) if (mask >> i) & 1]


def mask_to_coordinates(size: int, mask: int) -> List[Tuple[int, int]]:
    """(row, col) of each set bit, ascending by linear index."""
    return [divmod(i, size) for i in mask_to_indices(size, mask)]


def popcount(mask: int) -> int:
    return bin(mask).count("1")


def board_full(size: int, occupied: int) -> bool:
    """Return True if every cell bit is set in occupied."""
    return occupied == full_board_mask(size)


class WinPatternTable:
    """
    Winning patterns keyed by board size.

    Each engine owns one unless a table is passed in, so engines never
    share mutable state behind the caller's back.
    """

    __slots__ = ('_patterns',)

    def __init__(self):
        self._patterns: dict[int, np.ndarray] = {}

    def ensure(self, size: int) -> np.ndarray:
        """Return the patterns for size, generating them on first use."""
        patterns = self._patterns.get(size)
        if patterns is None:
            patterns = generate_winning_patterns(size)
            patterns.flags.writeable = False
            self._patterns[size] = patterns
        return patterns

    def lookup(self, size: int) -> np.ndarray:
        """Return patterns that ensure() already built for size."""
        patterns = self._patterns.get(size)
        assert patterns is not None, f"no winning patterns built for size {size}"
        return patterns

    def __contains__(self, size: int) -> bool:
        return size in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
