# board.py
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, Union

# 9 cells, row-major; 0 = blank
Grid = Tuple[int, ...]
Rows = Tuple[Tuple[int, int, int], ...]

SIZE = 3

# Direction the blank travels, in enumeration order
DIRECTIONS: Tuple[Tuple[int, int, str], ...] = (
    (1, 0, "Down"),
    (-1, 0, "Up"),
    (0, 1, "Right"),
    (0, -1, "Left"),
)
INVERSE_MOVES = {"Down": "Up", "Up": "Down", "Right": "Left", "Left": "Right"}
_OFFSETS = {name: (dr, dc) for dr, dc, name in DIRECTIONS}


class InvalidBoardError(ValueError):
    """Raised when a grid is not a 3x3 permutation of 0..8."""


@dataclass(frozen=True)
class Board:
    """Immutable 3x3 sliding-tile board."""

    cells: Grid
    _blank: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            cells = tuple(self.cells)
        except TypeError:
            raise InvalidBoardError(f"Board cells must be a sequence, got {self.cells!r}.") from None
        if len(cells) != SIZE * SIZE:
            raise InvalidBoardError(f"Board needs {SIZE * SIZE} cells, got {len(cells)}.")
        if any(not isinstance(v, int) or isinstance(v, bool) for v in cells):
            raise InvalidBoardError(f"Board cells must be integers: {cells}")
        if sorted(cells) != list(range(SIZE * SIZE)):
            raise InvalidBoardError(f"Board must contain each of 0..8 exactly once: {cells}")
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "_blank", cells.index(0))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from three rows of three values."""
        try:
            rows = [list(r) for r in rows]
        except TypeError:
            raise InvalidBoardError(f"Board must be {SIZE}x{SIZE} rows: {rows!r}") from None
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise InvalidBoardError(f"Board must be {SIZE}x{SIZE}: {rows}")
        return cls(tuple(v for r in rows for v in r))

    @classmethod
    def parse(cls, text: str) -> "Board":
        """Parse 9 integers separated by whitespace and/or commas."""
        parts = text.replace(",", " ").split()
        try:
            values = tuple(int(p) for p in parts)
        except ValueError:
            raise InvalidBoardError(f"Board values must be integers: {text!r}") from None
        return cls(values)

    @property
    def rows(self) -> Rows:
        c = self.cells
        return tuple(tuple(c[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    @property
    def blank_position(self) -> Tuple[int, int]:
        assert self.cells[self._blank] == 0, "blank index out of sync with cells"
        return divmod(self._blank, SIZE)

    @property
    def signature(self) -> str:
        """Canonical dedup key: row-major values joined by commas."""
        return ",".join(str(v) for v in self.cells)

    def manhattan_distance(self, goal: "Board") -> int:
        """Sum of |drow| + |dcol| of every non-blank tile to its place in goal."""
        where = {tile: divmod(i, SIZE) for i, tile in enumerate(goal.cells)}
        total = 0
        for i, tile in enumerate(self.cells):
            if tile != 0:
                r, c = divmod(i, SIZE)
                gr, gc = where[tile]
                total += abs(r - gr) + abs(c - gc)
        return total

    def _swap_blank(self, row: int, col: int) -> "Board":
        cells = list(self.cells)
        j = row * SIZE + col
        cells[self._blank], cells[j] = cells[j], cells[self._blank]
        return Board(tuple(cells))

    def possible_moves(self) -> List[Tuple["Board", str]]:
        """Neighbor boards with their move labels, in Down/Up/Right/Left order."""
        br, bc = self.blank_position
        moves: List[Tuple[Board, str]] = []
        for dr, dc, name in DIRECTIONS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                moves.append((self._swap_blank(nr, nc), name))
        return moves

    def move(self, label: str) -> "Board":
        """Apply one labelled move; raises ValueError if it leaves the board."""
        if label not in _OFFSETS:
            raise ValueError(f"Unknown move {label!r}; expected one of {list(_OFFSETS)}.")
        dr, dc = _OFFSETS[label]
        br, bc = self.blank_position
        nr, nc = br + dr, bc + dc
        if not (0 <= nr < SIZE and 0 <= nc < SIZE):
            raise ValueError(f"Move {label!r} is not possible from blank at {(br, bc)}.")
        return self._swap_blank(nr, nc)

    def apply_moves(self, labels: Iterable[str]) -> "Board":
        board = self
        for label in labels:
            board = board.move(label)
        return board


BoardLike = Union[Board, Sequence[int], Sequence[Sequence[int]]]


def as_board(value: BoardLike) -> Board:
    """Accept a Board, a flat 9-sequence or nested 3x3 rows."""
    if isinstance(value, Board):
        return value
    try:
        items = list(value)
    except TypeError:
        raise InvalidBoardError(f"Cannot build a board from {value!r}.") from None
    if items and all(isinstance(r, (list, tuple)) for r in items):
        return Board.from_rows(items)
    return Board(tuple(items))


# Spiral goal used by the console program
GOAL = Board.from_rows([[1, 2, 3], [8, 0, 4], [7, 6, 5]])
# Row-major goal used by the UI's "classic" option
ORDERED_GOAL = Board((1, 2, 3, 4, 5, 6, 7, 8, 0))
