#!/usr/bin/env python3
"""
Engine Performance Benchmark
============================

Location: scripts/benchmarks.py

Measures how long the engine takes to construct, make moves, detect
wins, play whole games and reset.

USAGE
-----
    python -m tictactoe_engine.scripts.benchmarks [size ...] [options]

ARGUMENTS
---------
    size        Board sizes to benchmark (default: 3 5 8)

OPTIONS
-------
    --iters N   Iterations per measurement (default: 10000)
    --profile   Also print a cProfile breakdown of full games

EXAMPLES
--------
    # Default sizes
    python -m tictactoe_engine.scripts.benchmarks

    # Just 4x4, with cProfile output
    python -m tictactoe_engine.scripts.benchmarks 4 --profile
"""

import sys
from typing import List, Tuple

from tictactoe_engine.debug.profiler import (
    clear_timing_stats,
    print_timing_summary,
    profile_engine_ops,
    profile_games,
    play_row_major,
    timed,
)
from tictactoe_engine.games.game_rules import WinPatternTable, validate_board_size
from tictactoe_engine.games.tic_tac_toe import TicTacToe
from tictactoe_engine.utils.config import MAX_BOARD_SIZE


def benchmark_size(board_size: int, iters: int) -> None:
    """Initialization, move making, win check, full game and reset for one size."""
    clear_timing_stats()
    n = board_size
    table = WinPatternTable()
    game = TicTacToe(n, patterns=table)

    for _ in range(iters):
        with timed("initialization"):
            TicTacToe(n, patterns=table)

    for i in range(iters):
        cell = i % (n * n)
        with timed("make_move"):
            game.make_move(cell // n, cell % n)
        if game.is_over():
            game.reset()

    # X fills the first row while O stays on the second
    game.reset()
    for c in range(n - 1):
        game.make_move(0, c)
        game.make_move(1, c)
    before = game.snapshot()
    for _ in range(iters):
        with timed("winning move"):
            game.make_move(0, n - 1)
        game.state = before.copy()

    for _ in range(iters // 10 or 1):
        with timed("full game"):
            play_row_major(TicTacToe(n, patterns=table))

    for _ in range(iters):
        with timed("reset"):
            game.reset()

    print(f"\n{n}x{n} board")
    print_timing_summary()


def parse_args(argv: List[str]) -> Tuple[List[int], int, bool]:
    """
    Parse benchmark arguments.

    Returns:
        (sizes, iters, do_profile)

    Raises:
        ValueError: Unknown argument, bad board size or bad --iters value.
    """
    iters = 10_000
    do_profile = False
    sizes = []

    args = iter(argv)
    for arg in args:
        if arg == "--iters":
            value = next(args, None)
            if value is None or not value.isdigit() or int(value) < 1:
                raise ValueError(f"--iters expects a positive integer, got {value!r}")
            iters = int(value)
        elif arg == "--profile":
            do_profile = True
        elif arg.isdigit():
            sizes.append(validate_board_size(int(arg)))
        else:
            raise ValueError(f"Unknown argument: {arg}")

    return sizes or [3, 5, 8], iters, do_profile


def main():
    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    try:
        sizes, iters, do_profile = parse_args(sys.argv[1:])
    except ValueError as e:
        print(e)
        print(f"Board sizes must be between 1 and {MAX_BOARD_SIZE}")
        print("Use --help for usage information")
        sys.exit(1)

    print(f"\n{'='*85}")
    print(f"Benchmarking sizes: {', '.join(f'{n}x{n}' for n in sizes)}")
    print(f"Iterations: {iters}")
    print(f"{'='*85}")

    for n in sizes:
        benchmark_size(n, iters)

    if do_profile:
        profile_engine_ops(sizes[0], num_iters=iters)
        profile_games(sizes[0], num_games=max(iters // 10, 1))

    print("\nDone!")


if __name__ == "__main__":
    main()
