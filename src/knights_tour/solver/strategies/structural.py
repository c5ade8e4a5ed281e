"""
Structural Strategy - Divide-and-conquer closed tours for large boards.

The board is cut into even-sided blocks, each block gets its own closed
tour, and the block cycles are stitched into one cycle.

Partition:
    A side k >= threshold splits into two parts, the first being k // 2
    rounded down to even: 12 -> 6 + 6, 14 -> 6 + 8, 16 -> 8 + 8. Sides
    below the threshold stay whole. Blocks still at or above the
    threshold split again.

Join rule:
    For cycles A and B, find a tour edge (a, a') in A and an edge (b, b')
    in B with a-b and a'-b' both knight moves. Removing the two edges and
    adding the two cross moves leaves a single cycle. Blocks are merged in
    boustrophedon order so each block borders the merged region.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from ...exceptions import NoTourFound
from ..base import SolverStrategy
from ..board import KNIGHT_OFFSETS, Board, Square, closed_tour_possible, is_valid_tour
from ..context import SolutionContext
from ..factory import register_strategy
from ..solution import SolutionMetrics
from .closed import ClosedTourStrategy, reroot

logger = logging.getLogger(__name__)

# Smallest side that splits into two even parts of at least 6
MIN_STRUCTURAL_THRESHOLD = 12

# Local start squares tried for a block before a join is given up on
MAX_BLOCK_RETRIES = 3


def split_dimension(length: int, threshold: int) -> List[int]:
    """Split one side of the board into block lengths."""
    if length < threshold:
        return [length]
    half = length // 2
    first = half if half % 2 == 0 else half - 1
    return [first, length - first]


def block_layout(board: Board, threshold: int) -> List[Tuple[int, int, Board]]:
    """
    Blocks covering the board, in boustrophedon order.

    Returns:
        (x_offset, y_offset, block_board) tuples; consecutive blocks share
        an edge
    """
    row_parts = split_dimension(board.rows, threshold)
    col_parts = split_dimension(board.cols, threshold)

    x_offsets = [sum(col_parts[:i]) for i in range(len(col_parts))]
    blocks = []
    y_offset = 0
    for r, height in enumerate(row_parts):
        columns = range(len(col_parts))
        if r % 2 == 1:
            columns = reversed(columns)
        for c in columns:
            blocks.append((x_offsets[c], y_offset, Board(rows=height, cols=col_parts[c])))
        y_offset += height
    return blocks


def join_cycles(a: Sequence[Square], b: Sequence[Square]) -> Optional[List[Square]]:
    """
    Stitch two disjoint cycles into one.

    Args:
        a: First cycle (global coordinates)
        b: Second cycle (global coordinates)

    Returns:
        Combined cycle, or None if no compatible pair of edges exists
    """
    position_b = {sq: j for j, sq in enumerate(b)}
    m = len(b)

    for i, square in enumerate(a):
        following = a[(i + 1) % len(a)]
        for dx, dy in KNIGHT_OFFSETS:
            j = position_b.get((square[0] + dx, square[1] + dy))
            if j is None:
                continue

            after = b[(j + 1) % m]
            if Board.is_knight_move(following, after):
                # Walk B backwards from b[j] so it ends on b[j + 1]
                walk = [b[(j - k) % m] for k in range(m)]
                return list(a[:i + 1]) + walk + list(a[i + 1:])

            before = b[(j - 1) % m]
            if Board.is_knight_move(following, before):
                walk = [b[(j + k) % m] for k in range(m)]
                return list(a[:i + 1]) + walk + list(a[i + 1:])

    return None


@register_strategy
class StructuralStrategy(SolverStrategy):
    """
    Divide-and-conquer closed tour.

    Boards with both sides below the threshold go straight to the closed
    strategy. Larger boards are tiled with blocks whose closed tours are
    found by the closed strategy and joined.

    Parameters:
        structural_threshold: Side length from which boards are split
            (default 12, minimum 12)
    """
    name = "structural"
    description = "Structural - closed block tours stitched together"
    timeout_sec = 60.0
    max_comparisons = 2_000_000
    closed = True

    def __init__(self, max_comparisons: Optional[int] = None,
                 structural_threshold: int = MIN_STRUCTURAL_THRESHOLD):
        super().__init__(max_comparisons=max_comparisons)
        if structural_threshold < MIN_STRUCTURAL_THRESHOLD:
            raise ValueError(
                f"structural_threshold must be at least {MIN_STRUCTURAL_THRESHOLD}, "
                f"got {structural_threshold}"
            )
        self.structural_threshold = structural_threshold
        self._closed = ClosedTourStrategy(max_comparisons=self.max_comparisons)

    def find_tour(self, context: SolutionContext, start: Square,
                  metrics: SolutionMetrics) -> List[Square]:
        board = context.board
        if not closed_tour_possible(board):
            raise NoTourFound(f"no closed tour exists on a {board.cols}x{board.rows} board")

        if self._is_leaf(board):
            return self._closed.find_tour(context, start, metrics)

        cycle = self._build_cycle(board, context, metrics)
        return reroot(cycle, start)

    def _is_leaf(self, board: Board) -> bool:
        return board.rows < self.structural_threshold and board.cols < self.structural_threshold

    def _build_cycle(self, board: Board, context: SolutionContext,
                     metrics: SolutionMetrics, attempt: int = 0) -> List[Square]:
        """Closed tour of board in its own coordinates."""
        if self._is_leaf(board):
            local_start = (attempt, 0)
            block_context = replace(context, board=board, start=local_start)
            block_metrics = SolutionMetrics(strategy_name=self._closed.name)
            try:
                cycle = self._closed.find_tour(block_context, local_start, block_metrics)
            finally:
                metrics.absorb(block_metrics)
            logger.debug(
                f"Block {board.cols}x{board.rows} from {local_start}: "
                f"{block_metrics.comparisons} comparisons"
            )
            if not is_valid_tour(board, cycle, closed=True):
                raise NoTourFound(f"block {board.cols}x{board.rows} tour is not closed")
            return cycle

        merged: Optional[List[Square]] = None
        blocks = block_layout(board, self.structural_threshold)

        for index, (x0, y0, block) in enumerate(blocks):
            retries = MAX_BLOCK_RETRIES if self._is_leaf(block) else 1
            for block_attempt in range(retries):
                cycle = self._build_cycle(block, context, metrics, block_attempt)
                shifted = [(x + x0, y + y0) for x, y in cycle]
                if merged is None:
                    merged = shifted
                    break
                joined = join_cycles(merged, shifted)
                if joined is not None:
                    merged = joined
                    break
                logger.warning(
                    f"No join for block {block.cols}x{block.rows} at ({x0}, {y0}), "
                    f"attempt {block_attempt + 1}/{retries}"
                )
            else:
                raise NoTourFound(f"no compatible join for block at ({x0}, {y0})")

            context.report_progress((index + 1) / len(blocks), f"block {index + 1}/{len(blocks)}")

        return merged
