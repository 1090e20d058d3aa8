# generator.py
import logging
import random
from typing import Optional

from board import GOAL, SIZE, Board

logger = logging.getLogger(__name__)

DEFAULT_SHUFFLE_STEPS = 40


def random_board(rng: Optional[random.Random] = None) -> Board:
    """Uniform shuffle of 0..8; half of these boards cannot reach a given goal."""
    rng = rng or random.Random()
    cells = list(range(SIZE * SIZE))
    rng.shuffle(cells)
    return Board(tuple(cells))


def shuffle_via_legal_moves(steps: int = DEFAULT_SHUFFLE_STEPS, goal: Board = GOAL,
                            rng: Optional[random.Random] = None) -> Board:
    """Shuffle by valid moves from goal (always solvable)."""
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    rng = rng or random.Random()
    board = goal
    prev: Optional[Board] = None
    for _ in range(steps):
        opts = [b for b, _ in board.possible_moves()]
        if prev in opts and len(opts) > 1:
            opts = [b for b in opts if b != prev]  # avoid immediate undo
        prev, board = board, rng.choice(opts)
    return board


def inversion_count(board: Board) -> int:
    """Pairs of tiles out of order in row-major reading, blank ignored."""
    tiles = [t for t in board.cells if t != 0]
    inv = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if tiles[i] > tiles[j]:
                inv += 1
    return inv


def is_solvable(start: Board, goal: Board = GOAL) -> bool:
    """On an odd-width board the blank's row never changes the parity, so
    start reaches goal iff both have the same inversion parity."""
    return inversion_count(start) % 2 == inversion_count(goal) % 2


def random_solvable_board(goal: Board = GOAL, rng: Optional[random.Random] = None) -> Board:
    rng = rng or random.Random()
    while True:
        board = random_board(rng)
        if is_solvable(board, goal):
            return board
        logger.debug("Rejected unsolvable board %s", board.signature)
