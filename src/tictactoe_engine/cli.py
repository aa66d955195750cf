"""
Command-line interface for playing on the engine.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple

from tictactoe_engine.core.types import MoveOutcome, Status
from tictactoe_engine.games.tic_tac_toe import TicTacToe
from tictactoe_engine.utils.config import Config, DEFAULT_BOARD_SIZE, MAX_BOARD_SIZE
from tictactoe_engine.utils.factory import create_game

logger = logging.getLogger(__name__)

OUTCOME_MESSAGES = {
    MoveOutcome.POSITION_TAKEN: "That cell is already taken.",
    MoveOutcome.INVALID_COORDINATES: "Coordinates are off the board.",
    MoveOutcome.GAME_ALREADY_OVER: "The game is over. Enter 'r' to play again.",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play N x N TicTacToe in the terminal"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board side length, 1-{MAX_BOARD_SIZE} (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--moves", "-m",
        type=str,
        default=None,
        help="Space-separated 'row,col' moves to play instead of prompting (e.g. '0,0 1,1')",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine decisions",
    )
    return parser.parse_args(argv)


def parse_moves(moves_str: str) -> List[Tuple[int, int]]:
    """Parse a move list like '0,0 1,1 2,2'."""
    moves = []
    for token in moves_str.split():
        try:
            row, col = (int(p) for p in token.split(","))
        except ValueError as e:
            raise ValueError(
                f"Invalid move: '{token}'. Expected 'row,col' (e.g., '1,2')."
            ) from e
        moves.append((row, col))
    return moves


def describe_result(game: TicTacToe) -> str:
    status = game.status
    if status.status is Status.WON:
        line = " ".join(f"({r},{c})" for r, c in game.winning_coordinates())
        return f"{status.winner.symbol} wins! Line: {line}"
    if status.status is Status.DRAW:
        return "It's a draw."
    return f"{game.current_player.symbol} to move."


def play_scripted(
    game: TicTacToe,
    moves: List[Tuple[int, int]],
    out: Callable[[str], None] = print,
) -> None:
    """Play moves in order, reporting any that were rejected."""
    for row, col in moves:
        outcome = game.make_move(row, col)
        if not outcome.ok:
            out(f"({row},{col}): {OUTCOME_MESSAGES[outcome]}")
    out(game.state_string())
    out(describe_result(game))


def play_interactive(
    game: TicTacToe,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> None:
    """Prompt for 'row col' until the player quits or input runs out."""
    out(game.state_string())
    while True:
        try:
            line = read(f"{game.current_player.symbol} > ").strip().lower()
        except EOFError:
            return

        if line in ("q", "quit"):
            return
        if line in ("r", "reset"):
            game.reset()
            out(game.state_string())
            continue

        try:
            row, col = (int(p) for p in line.replace(",", " ").split())
        except ValueError:
            out("Enter 'row col', 'r' to reset or 'q' to quit.")
            continue

        outcome = game.make_move(row, col)
        if not outcome.ok:
            out(OUTCOME_MESSAGES[outcome])
            continue

        out(game.state_string())
        if game.is_over():
            out(describe_result(game))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = Config(
            board_size=args.size,
            log_level=logging.DEBUG if args.verbose else logging.WARNING,
        )
        moves = parse_moves(args.moves) if args.moves is not None else None
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Starting with %r", config)

    game = create_game(config=config)
    if moves is not None:
        play_scripted(game, moves)
    else:
        play_interactive(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
