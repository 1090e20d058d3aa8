# solver_impl.py
import heapq
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

from board import GOAL, Board, BoardLike, as_board

logger = logging.getLogger(__name__)

# Log search progress every this many expansions
PROGRESS_EVERY = 10000


@dataclass(frozen=True, eq=False)
class SearchNode:
    board: Board
    parent: Optional["SearchNode"]
    move: Optional[str]  # label that produced this node; None for the root
    g: int
    h: int
    f: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "f", self.g + self.h)

    def solution_path(self) -> List[str]:
        """Move labels from the root to this node."""
        path: List[str] = []
        node = self
        while node.parent is not None:
            path.append(node.move)  # type: ignore[arg-type]
            node = node.parent
        path.reverse()
        return path

    def path_boards(self) -> List[Board]:
        """Boards from the root to this node, inclusive."""
        boards: List[Board] = []
        node: Optional[SearchNode] = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


class Frontier:
    """Min-heap of nodes keyed by (f, insertion sequence)."""

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._seq = 0

    def insert(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.f, self._seq, node))
        self._seq += 1

    def extract_min(self) -> SearchNode:
        if not self._heap:
            raise IndexError("extract_min from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class VisitedSet:
    """Signatures of boards already enqueued (visited on generation).

    Marking boards when they are generated rather than when they are expanded
    is only sound for a consistent heuristic, which Manhattan distance is on
    the sliding-tile puzzle.
    """

    def __init__(self) -> None:
        self._seen: Set[str] = set()

    def contains(self, signature: str) -> bool:
        return signature in self._seen

    def add(self, signature: str) -> None:
        self._seen.add(signature)

    def __contains__(self, signature: str) -> bool:
        return self.contains(signature)

    def __len__(self) -> int:
        return len(self._seen)


class SolverStatus(Enum):
    INIT = "init"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SolveResult:
    success: bool
    moves: Optional[List[str]]
    path: Optional[List[Board]]
    states: List[Board]  # every board in expansion order
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0

    @property
    def cost(self) -> Optional[int]:
        return None if self.moves is None else len(self.moves)


class AStarSolver:
    """A* over 8-puzzle boards with the Manhattan-distance heuristic."""

    def __init__(self) -> None:
        self.status = SolverStatus.INIT

    def solve(self, start: BoardLike, goal: BoardLike = GOAL) -> SolveResult:
        start_board = as_board(start)
        goal_board = as_board(goal)
        started = time.time()

        frontier = Frontier()
        visited = VisitedSet()
        trace: List[Board] = []

        root = SearchNode(start_board, None, None, 0, start_board.manhattan_distance(goal_board))
        frontier.insert(root)
        visited.add(start_board.signature)
        generated = 1
        max_frontier = 1

        self.status = SolverStatus.RUNNING
        logger.debug("A* start h=%d start=%s goal=%s", root.h, start_board.signature, goal_board.signature)

        while not frontier.is_empty():
            current = frontier.extract_min()
            trace.append(current.board)

            if current.board == goal_board:
                self.status = SolverStatus.SOLVED
                moves = current.solution_path()
                elapsed = time.time() - started
                logger.info("Solved in %d moves, %d expanded, %.4f s.", len(moves), len(trace), elapsed)
                return SolveResult(True, moves, current.path_boards(), trace,
                                   len(trace), generated, max_frontier, elapsed)

            if len(trace) % PROGRESS_EVERY == 0:
                logger.debug("Expanded %d nodes (f=%d, g=%d, frontier=%d)",
                             len(trace), current.f, current.g, len(frontier))

            for neighbor, label in current.board.possible_moves():
                key = neighbor.signature
                if visited.contains(key):
                    continue
                visited.add(key)
                frontier.insert(SearchNode(neighbor, current, label, current.g + 1,
                                           neighbor.manhattan_distance(goal_board)))
                generated += 1
            max_frontier = max(max_frontier, len(frontier))

        self.status = SolverStatus.EXHAUSTED
        elapsed = time.time() - started
        logger.info("No solution: frontier exhausted after %d expansions.", len(trace))
        return SolveResult(False, None, None, trace, len(trace), generated, max_frontier, elapsed)


def solve_puzzle(start: BoardLike, goal: BoardLike = GOAL) -> SolveResult:
    """Solve the puzzle using A* algorithm with Manhattan distance."""
    return AStarSolver().solve(start, goal)
