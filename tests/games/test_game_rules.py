"""
Tests for tictactoe_engine.games.game_rules

Tests bit-mask helpers and winning pattern generation.
"""

import numpy as np
import pytest

from tictactoe_engine.core.errors import InvalidBoardSize
from tictactoe_engine.games.game_rules import (
    WinPatternTable,
    board_full,
    col_masks,
    diagonal_masks,
    first_contained_pattern,
    full_board_mask,
    generate_winning_patterns,
    in_bounds,
    mask_to_coordinates,
    mask_to_indices,
    popcount,
    position_to_bit,
    row_masks,
    validate_board_size,
)


class TestValidateBoardSize:
    """validate_board_size tests."""

    @pytest.mark.parametrize("size", [1, 2, 3, 8])
    def test_accepts_valid(self, size):
        assert validate_board_size(size) == size

    def test_accepts_numpy_int(self):
        assert validate_board_size(np.int64(4)) == 4

    @pytest.mark.parametrize("size", [0, -1, 9, 100])
    def test_rejects_out_of_range(self, size):
        with pytest.raises(InvalidBoardSize):
            validate_board_size(size)

    @pytest.mark.parametrize("size", [2.5, "3", None, True])
    def test_rejects_non_integers(self, size):
        with pytest.raises(InvalidBoardSize):
            validate_board_size(size)


class TestBitHelpers:
    """Coordinate <-> bit helpers."""

    def test_in_bounds(self):
        assert in_bounds(3, 0, 0)
        assert in_bounds(3, 2, 2)
        assert not in_bounds(3, 3, 0)
        assert not in_bounds(3, 0, -1)

    def test_position_to_bit_row_major(self):
        assert position_to_bit(3, 0, 0) == 1
        assert position_to_bit(3, 0, 2) == 1 << 2
        assert position_to_bit(3, 1, 0) == 1 << 3
        assert position_to_bit(4, 3, 3) == 1 << 15

    def test_position_to_bit_numpy_top_bit(self):
        """numpy scalars do not wrap at bit 63."""
        bit = position_to_bit(8, np.int64(7), np.int64(7))
        assert type(bit) is int
        assert bit == 1 << 63

    def test_full_board_mask(self):
        assert full_board_mask(1) == 0b1
        assert full_board_mask(3) == 0b111_111_111
        assert full_board_mask(8) == 2**64 - 1

    def test_board_full(self):
        assert board_full(2, 0b1111)
        assert not board_full(2, 0b0111)

    def test_popcount(self):
        assert popcount(0) == 0
        assert popcount(0b1011) == 3

    def test_mask_to_indices_ascending(self):
        assert mask_to_indices(3, 0b100_010_001) == [0, 4, 8]

    def test_mask_to_coordinates(self):
        """Anti-diagonal comes back in row-major order."""
        assert mask_to_coordinates(3, 0b001_010_100) == [(0, 2), (1, 1), (2, 0)]


class TestWinningPatterns:
    """Pattern generation tests."""

    def test_3x3_lines(self):
        assert row_masks(3) == [0b111, 0b111_000, 0b111_000_000]
        assert col_masks(3) == [0b001_001_001, 0b010_010_010, 0b100_100_100]
        assert diagonal_masks(3) == [0b100_010_001, 0b001_010_100]

    @pytest.mark.parametrize("size", range(1, 9))
    def test_count_and_width(self, size):
        """2N + 2 patterns, each with exactly N bits."""
        patterns = generate_winning_patterns(size)
        assert patterns.dtype == np.uint64
        assert len(patterns) == 2 * size + 2
        assert all(popcount(int(p)) == size for p in patterns)

    def test_order_rows_cols_diagonals(self):
        patterns = [int(p) for p in generate_winning_patterns(3)]
        assert patterns == row_masks(3) + col_masks(3) + diagonal_masks(3)

    def test_single_cell_board(self):
        assert [int(p) for p in generate_winning_patterns(1)] == [1, 1, 1, 1]

    def test_8x8_top_bit(self):
        """Bit 63 survives the uint64 conversion."""
        patterns = generate_winning_patterns(8)
        assert int(patterns[7]) == 0xFF << 56


class TestFirstContainedPattern:
    """first_contained_pattern tests."""

    def test_none_when_no_line(self):
        patterns = generate_winning_patterns(3)
        assert first_contained_pattern(patterns, 0b000_010_011) is None

    def test_extra_bits_still_match(self):
        patterns = generate_winning_patterns(3)
        assert first_contained_pattern(patterns, 0b000_011_111) == 0b111

    def test_row_before_column(self):
        """Top row and left column both complete: the row wins."""
        patterns = generate_winning_patterns(3)
        mask = 0b111 | 0b001_001_001
        assert first_contained_pattern(patterns, mask) == 0b111


class TestWinPatternTable:
    """WinPatternTable tests."""

    def test_ensure_builds_once(self, pattern_table):
        first = pattern_table.ensure(4)
        assert pattern_table.ensure(4) is first
        assert 4 in pattern_table
        assert len(pattern_table) == 1

    def test_patterns_read_only(self, pattern_table):
        patterns = pattern_table.ensure(3)
        with pytest.raises(ValueError):
            patterns[0] = 0

    def test_lookup_after_ensure(self, pattern_table):
        built = pattern_table.ensure(5)
        assert pattern_table.lookup(5) is built

    def test_lookup_missing_is_a_defect(self, pattern_table):
        """Looking up a size never built trips an assertion."""
        with pytest.raises(AssertionError):
            pattern_table.lookup(3)
