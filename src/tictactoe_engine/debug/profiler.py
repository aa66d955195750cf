"""
Profiling utility for engine performance analysis.

Location: src/tictactoe_engine/debug/profiler.py

Usage:
    from tictactoe_engine.debug.profiler import (
        profile_engine_ops,
        profile_games,
        timed,
        print_timing_summary,
    )

    # Per-operation breakdown on a 3x3 board
    profile_engine_ops(board_size=3, num_iters=10_000)

    # cProfile of many complete games
    profile_games(board_size=5, num_games=500)

    # Time specific blocks
    with timed("my_operation"):
        do_something()
    print_timing_summary()
"""

import cProfile
import io
import pstats
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict

from tictactoe_engine.games.game_rules import WinPatternTable
from tictactoe_engine.games.tic_tac_toe import TicTacToe


# ---------------------------------------------------------------------------
# Timing Context Manager
# ---------------------------------------------------------------------------

@dataclass
class TimingStats:
    """Accumulated timing statistics."""
    total_time: float = 0.0
    call_count: int = 0
    min_time: float = float('inf')
    max_time: float = 0.0

    @property
    def avg_time(self) -> float:
        return self.total_time / self.call_count if self.call_count else 0.0

    def record(self, elapsed: float) -> None:
        self.total_time += elapsed
        self.call_count += 1
        self.min_time = min(self.min_time, elapsed)
        self.max_time = max(self.max_time, elapsed)


# Global timing registry
_timing_registry: Dict[str, TimingStats] = {}


@contextmanager
def timed(name: str):
    """
    Context manager to time a block of code.

    Usage:
        with timed("make_move"):
            game.make_move(0, 0)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        _timing_registry.setdefault(name, TimingStats()).record(elapsed)


def print_timing_summary():
    """Print summary of all timed operations."""
    if not _timing_registry:
        print("No timing data collected.")
        return

    print("\n" + "=" * 85)
    print(f"{'TIMING SUMMARY':^85}")
    print("=" * 85)
    print(f"{'Operation':<30} {'Calls':>8} {'Total':>10} {'Avg':>10} {'Min':>8} {'Max':>8} {'%':>6}")
    print("-" * 85)

    sorted_items = sorted(
        _timing_registry.items(),
        key=lambda x: x[1].total_time,
        reverse=True
    )

    total_tracked = sum(s.total_time for _, s in sorted_items)

    for name, stats in sorted_items:
        pct = (stats.total_time / total_tracked * 100) if total_tracked else 0
        min_us = stats.min_time * 1_000_000 if stats.min_time != float('inf') else 0
        print(
            f"{name:<30} "
            f"{stats.call_count:>8} "
            f"{stats.total_time*1000:>8.1f}ms "
            f"{stats.avg_time*1_000_000:>8.2f}μs "
            f"{min_us:>6.2f}μs "
            f"{stats.max_time*1_000_000:>6.1f}μs "
            f"{pct:>5.1f}%"
        )

    print("=" * 85)


def clear_timing_stats():
    """Clear all accumulated timing data."""
    _timing_registry.clear()


def get_timing_stats() -> Dict[str, TimingStats]:
    """Get a copy of the timing registry."""
    return _timing_registry.copy()


# ---------------------------------------------------------------------------
# Engine Workloads
# ---------------------------------------------------------------------------

def play_row_major(game: TicTacToe) -> int:
    """
    Fill cells in row-major order until the game ends.

    Returns the number of successful moves.
    """
    n = game.board_size
    played = 0
    for i in range(n * n):
        if game.is_over():
            break
        if game.make_move(i // n, i % n).ok:
            played += 1
    return played


def profile_engine_ops(board_size: int = 3, num_iters: int = 10_000):
    """
    Time engine operations in isolation.

    Tests: construction, make_move, player_at, winning_coordinates, reset
    """
    print("\n" + "=" * 85)
    print(f"{'ENGINE OPERATIONS PROFILE':^85}")
    print("=" * 85)
    print(f"Board: {board_size}x{board_size}, {num_iters} iterations\n")

    clear_timing_stats()

    table = WinPatternTable()
    game = TicTacToe(board_size, patterns=table)
    n = board_size

    for i in range(num_iters):
        with timed("construct (fresh table)"):
            TicTacToe(board_size)

        with timed("construct (shared table)"):
            TicTacToe(board_size, patterns=table)

        cell = i % (n * n)
        with timed("make_move"):
            game.make_move(cell // n, cell % n)

        with timed("player_at"):
            game.player_at(cell // n, cell % n)

        if game.is_over():
            with timed("winning_coordinates"):
                game.winning_coordinates()
            with timed("reset"):
                game.reset()

    print_timing_summary()


def profile_games(board_size: int = 3, num_games: int = 1000, top_n: int = 20):
    """cProfile of complete row-major games on one shared pattern table."""
    table = WinPatternTable()

    def run():
        for _ in range(num_games):
            play_row_major(TicTacToe(board_size, patterns=table))

    pr = cProfile.Profile()
    start = time.perf_counter()
    pr.enable()
    run()
    pr.disable()
    elapsed = time.perf_counter() - start

    print("\n" + "=" * 85)
    print(f"{'FULL GAMES PROFILE':^85}")
    print("=" * 85)
    print(f"{num_games} games on {board_size}x{board_size}: "
          f"{elapsed*1000:.1f}ms total, {elapsed/num_games*1_000_000:.1f}μs per game")

    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(top_n)
    print(s.getvalue())
