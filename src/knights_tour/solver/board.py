"""
Board Module - Immutable chessboard description and knight geometry.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from ..exceptions import InvalidBoardSize, InvalidStart

# (x, y) with x the column and y the row, y growing downwards
Square = Tuple[int, int]

# Canonical move order: clockwise, starting north-north-east.
# Used as the naive move order and as the Warnsdorff tie-break.
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, -2), (2, -1), (2, 1), (1, 2),
    (-1, 2), (-2, 1), (-2, -1), (-1, -2),
)


@dataclass(frozen=True)
class Board:
    """
    Immutable rows x cols board.

    Square boards are the normal case (see Board.square); rectangular
    boards exist for the quadrants of the structural solver.

    Attributes:
        rows: Number of rows (y range)
        cols: Number of columns (x range)
    """
    rows: int
    cols: int

    def __post_init__(self):
        for dim in (self.rows, self.cols):
            if not isinstance(dim, int) or dim < 1:
                raise InvalidBoardSize(
                    f"Board dimensions must be positive integers, got {self.rows}x{self.cols}"
                )

    @classmethod
    def square(cls, size: int) -> 'Board':
        """Create an n x n board."""
        return cls(rows=size, cols=size)

    @property
    def total_squares(self) -> int:
        """Number of squares a complete tour visits."""
        return self.rows * self.cols

    def in_bounds(self, square: Square) -> bool:
        x, y = square
        return 0 <= x < self.cols and 0 <= y < self.rows

    def validate_square(self, square: Square) -> Square:
        """
        Check a caller-supplied square.

        Args:
            square: (x, y) pair

        Returns:
            The square as a tuple of ints

        Raises:
            InvalidStart: If the square is malformed or off the board
        """
        try:
            x, y = square
        except (TypeError, ValueError):
            raise InvalidStart(f"Not a square: {square!r}") from None
        if not all(isinstance(v, (int, np.integer)) for v in (x, y)):
            raise InvalidStart(f"Not a square: {square!r}")
        if not self.in_bounds((x, y)):
            raise InvalidStart(
                f"Square ({x}, {y}) is outside the {self.cols}x{self.rows} board"
            )
        return (int(x), int(y))

    def squares(self) -> Iterator[Square]:
        """Iterate all squares in row-major order."""
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)

    @cached_property
    def _move_table(self) -> Dict[Square, Tuple[Square, ...]]:
        table = {}
        for x, y in self.squares():
            table[(x, y)] = tuple(
                (x + dx, y + dy)
                for dx, dy in KNIGHT_OFFSETS
                if 0 <= x + dx < self.cols and 0 <= y + dy < self.rows
            )
        return table

    def neighbors(self, square: Square) -> Tuple[Square, ...]:
        """
        All squares one knight move from square, in canonical order.

        Args:
            square: In-bounds (x, y) square

        Returns:
            Tuple of reachable squares (2 to 8 entries on a normal board)
        """
        return self._move_table[square]

    @staticmethod
    def is_knight_move(a: Square, b: Square) -> bool:
        """True if a and b are one knight move apart."""
        return abs(a[0] - b[0]) * abs(a[1] - b[1]) == 2

    def empty_visited(self) -> np.ndarray:
        """Fresh visited array: 0 = unvisited, k >= 1 = visit ordinal."""
        return np.zeros((self.rows, self.cols), dtype=np.int32)


def closed_tour_possible(board: Board) -> bool:
    """
    Schwenk's theorem for closed tours on an m x k board (m <= k).

    A closed tour exists unless m and k are both odd, m is 1, 2 or 4,
    or m is 3 and k is 4, 6 or 8.
    """
    m, k = sorted((board.rows, board.cols))
    if m % 2 == 1 and k % 2 == 1:
        return False
    if m in (1, 2, 4):
        return False
    if m == 3 and k in (4, 6, 8):
        return False
    return True


def is_valid_tour(board: Board, tour: Sequence[Square],
                  closed: bool = False, complete: bool = True) -> bool:
    """
    Check a tour against the board.

    Args:
        board: Board the tour was computed on
        tour: Ordered squares
        closed: Also require last -> first to be a knight move
        complete: Require every square to be visited

    Returns:
        True if every step is a knight move and no square repeats
    """
    if not tour:
        return False
    if complete and len(tour) != board.total_squares:
        return False

    arr = np.asarray(tour, dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        return False

    xs, ys = arr[:, 0], arr[:, 1]
    if (xs < 0).any() or (xs >= board.cols).any() or (ys < 0).any() or (ys >= board.rows).any():
        return False

    flat = ys * board.cols + xs
    if np.unique(flat).size != flat.size:
        return False

    steps = np.diff(arr, axis=0)
    if closed:
        steps = np.vstack([steps, arr[:1] - arr[-1:]])
    # |dx| * |dy| == 2 only for (1, 2) and (2, 1)
    products = np.abs(steps[:, 0]) * np.abs(steps[:, 1])
    return bool((products == 2).all())


def visit_order_grid(board: Board, tour: List[Square]) -> np.ndarray:
    """Grid of 1-based visit ordinals (0 for unvisited squares)."""
    grid = board.empty_visited()
    for ordinal, (x, y) in enumerate(tour, start=1):
        grid[y, x] = ordinal
    return grid
