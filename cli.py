# cli.py
# Console entry point: solve one puzzle and print the solution.

import argparse
import logging
import random
import sys
from typing import List, Optional

from board import GOAL, Board, InvalidBoardError
from display import format_board, format_solution, format_trace
from generator import random_board, shuffle_via_legal_moves
from solver_impl import AStarSolver

logger = logging.getLogger(__name__)


def _board_arg(text: str) -> Board:
    try:
        return Board.parse(text)
    except InvalidBoardError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eight-puzzle",
        description="Solve the 8-puzzle with A* and the Manhattan-distance heuristic.")
    parser.add_argument("--start", type=_board_arg, default=None,
                        help="Start board as 9 integers, row-major, 0 = blank (default: random)")
    parser.add_argument("--goal", type=_board_arg, default=GOAL,
                        help="Goal board as 9 integers (default: 1 2 3 8 0 4 7 6 5)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random start board")
    parser.add_argument("--shuffle", type=int, default=None, metavar="N",
                        help="Build the start with N legal moves from the goal instead of a full shuffle")
    parser.add_argument("--trace", action="store_true",
                        help="Also print every expanded board")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()],
    )

    if args.shuffle is not None and args.shuffle < 0:
        parser.error("--shuffle must be non-negative")

    goal: Board = args.goal
    rng = random.Random(args.seed)
    if args.start is not None:
        start = args.start
        label = "Starting State:"
    elif args.shuffle is not None:
        start = shuffle_via_legal_moves(args.shuffle, goal, rng)
        label = "Random Starting State:"
    else:
        start = random_board(rng)
        label = "Random Starting State:"

    print("Goal State:")
    print(format_board(goal))
    print()
    print(label)
    print(format_board(start))
    print()

    result = AStarSolver().solve(start, goal)
    logger.debug("expanded=%d generated=%d max_frontier=%d elapsed=%.4f",
                 result.expanded, result.generated, result.max_frontier, result.elapsed)

    if args.trace:
        print(format_trace(result.states))

    if result.success:
        print("Solved!")
        print(f"Moves ({len(result.moves)}): {' '.join(result.moves)}")
        print()
        print(format_solution(result.moves, result.path))
        return 0

    print("A* failed to find a solution.")
    print(f"Expanded {result.expanded} states.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
