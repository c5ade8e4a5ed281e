"""
Closed Tour Strategy - Warnsdorff search that must end next to the start.

A complete open path is accepted only if it is already closed or can be
turned into a closed tour by Posa rotations: for a path v1..vN and an edge
vN-vi, the path v1..vi, vN, vN-1, .., vi+1 is also a tour, with a new end.
Rotations at both ends are explored breadth-first. If none closes the
path, the engine rejects it and keeps backtracking.
"""

import logging
from collections import deque
from typing import List, Optional, Sequence

from ...exceptions import NoTourFound
from ..board import Board, Square, closed_tour_possible
from ..context import SolutionContext
from ..engine import search
from ..factory import register_strategy
from ..solution import SolutionMetrics
from .heuristic import HeuristicOpenStrategy, warnsdorff_order

logger = logging.getLogger(__name__)

# Distinct endpoint pairs explored before a path is given up on
MAX_ROTATION_STATES = 4000


def close_path(board: Board, path: Sequence[Square],
               max_states: int = MAX_ROTATION_STATES) -> Optional[List[Square]]:
    """
    Turn a complete path into a Hamiltonian cycle by rotations.

    Args:
        board: Board the path covers
        path: Complete path (every square exactly once)
        max_states: Limit on distinct endpoint pairs explored

    Returns:
        Squares in cycle order (first and last a knight move apart),
        or None if no rotation sequence within the limit closes it
    """
    first = tuple(path)
    if board.is_knight_move(first[0], first[-1]):
        return list(first)

    queue = deque([first])
    seen = {frozenset((first[0], first[-1]))}

    while queue:
        current = queue.popleft()
        for oriented in (current, current[::-1]):
            position = {sq: i for i, sq in enumerate(oriented)}
            end = oriented[-1]
            for neighbor in board.neighbors(end):
                i = position[neighbor]
                if i >= len(oriented) - 2:
                    continue
                rotated = oriented[:i + 1] + oriented[:i:-1]
                if board.is_knight_move(rotated[0], rotated[-1]):
                    return list(rotated)
                key = frozenset((rotated[0], rotated[-1]))
                if key in seen:
                    continue
                if len(seen) >= max_states:
                    return None
                seen.add(key)
                queue.append(rotated)

    return None


def reroot(cycle: Sequence[Square], start: Square) -> List[Square]:
    """Rotate a cycle so it begins at start."""
    index = list(cycle).index(start)
    return list(cycle[index:]) + list(cycle[:index])


@register_strategy
class ClosedTourStrategy(HeuristicOpenStrategy):
    """
    Closed tour search.

    Same move ranking as the open heuristic, stronger acceptance test.
    Boards without any closed tour (odd boards, n < 6) are rejected
    before searching.
    """
    name = "closed"
    description = "Closed tour - Warnsdorff search closed by rotations"
    closed = True

    def find_tour(self, context: SolutionContext, start: Square,
                  metrics: SolutionMetrics) -> List[Square]:
        board = context.board
        if not closed_tour_possible(board):
            raise NoTourFound(f"no closed tour exists on a {board.cols}x{board.rows} board")

        def accept_closed(path: List[Square]) -> bool:
            closable = close_path(board, path) is not None
            if not closable:
                logger.debug(f"Complete path from {path[0]} could not be closed, backtracking")
            return closable

        path = search(
            board, start, warnsdorff_order, accept_closed, metrics,
            context=context, max_comparisons=self._budget(context), ranked=True,
        )
        return reroot(close_path(board, path), start)
