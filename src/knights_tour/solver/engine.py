"""
Search Engine Module - Depth-first backtracking over a board.

Strategies plug in a move order and an acceptance test; the engine owns
the visited array, the path and the comparison counter.

Algorithm:
    1. Mark the start square visited (ordinal 1) and put it on the path
    2. Draw the next candidate from the top square's order_fn iterator,
       counting one comparison per candidate
    3. Skip visited candidates; otherwise place the candidate and, unless
       the path is complete, push its candidate iterator
    4. A complete path is returned if accept_fn accepts it, else undone
    5. An exhausted iterator pops its square (backtrack)

Comparisons:
    A comparison is one neighbouring square examined while choosing the
    next move. A lazy order (canonical) is examined as it is drawn, so
    every drawn candidate counts, visited or not. A ranked order
    (Warnsdorff) has examined every neighbour of the square before the
    first draw, so with ranked=True each expansion is charged the full
    neighbour count and draws are free.

The candidate stack replaces recursion so depth is not capped by the
interpreter recursion limit on large boards.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional

import numpy as np

from ..exceptions import NoTourFound, SearchAborted
from .board import Board, Square
from .context import SolutionContext
from .solution import SolutionMetrics

logger = logging.getLogger(__name__)

OrderFn = Callable[[Board, np.ndarray, Square], Iterable[Square]]
AcceptFn = Callable[[List[Square]], bool]

# Placements between cancellation checks
CANCEL_CHECK_INTERVAL = 256


def accept_open(path: List[Square]) -> bool:
    """Any complete path is an open tour."""
    return True


def search(
    board: Board,
    start: Square,
    order_fn: OrderFn,
    accept_fn: AcceptFn,
    metrics: SolutionMetrics,
    context: Optional[SolutionContext] = None,
    max_comparisons: Optional[int] = None,
    ranked: bool = False,
) -> List[Square]:
    """
    Find a complete path accepted by accept_fn.

    Args:
        board: Board to tour
        start: In-bounds start square
        order_fn: Candidate order for the square on top of the path
        accept_fn: Acceptance test for a path covering every square
        metrics: Counters updated in place
        context: Optional context polled for cancellation/timeout
        max_comparisons: Effort budget; exceeding it ends the search
        ranked: order_fn examines every neighbour before returning

    Returns:
        The accepted path (a new list)

    Raises:
        NoTourFound: If every branch is exhausted or the budget runs out
        SearchAborted: If the context is cancelled or times out
    """
    total = board.total_squares
    visited = board.empty_visited()
    path: List[Square] = [start]
    visited[start[1], start[0]] = 1
    metrics.attempts += 1

    if total == 1 and accept_fn(path):
        return list(path)

    def charge(count: int) -> None:
        metrics.comparisons += count
        if max_comparisons is not None and metrics.comparisons > max_comparisons:
            logger.debug(
                f"Budget of {max_comparisons} comparisons exhausted at depth {len(path)}"
            )
            raise NoTourFound("search budget exhausted")

    def expand(square: Square) -> Iterator[Square]:
        if ranked:
            charge(len(board.neighbors(square)))
        return iter(order_fn(board, visited, square))

    stack: List[Iterator[Square]] = [expand(start)]

    while stack:
        advanced = False

        for candidate in stack[-1]:
            if not ranked:
                charge(1)

            cx, cy = candidate
            if visited[cy, cx]:
                continue

            path.append(candidate)
            visited[cy, cx] = len(path)
            metrics.attempts += 1

            if context is not None and metrics.attempts % CANCEL_CHECK_INTERVAL == 0:
                if context.is_cancelled():
                    raise SearchAborted(
                        f"search aborted after {context.elapsed_time():.1f}s"
                    )
                context.report_progress(len(path) / total, f"depth {len(path)}/{total}")

            if len(path) == total:
                if accept_fn(path):
                    return list(path)
                # Complete but rejected: undo and keep drawing candidates
                path.pop()
                visited[cy, cx] = 0
                metrics.backtracks += 1
                continue

            stack.append(expand(candidate))
            advanced = True
            break

        if not advanced:
            stack.pop()
            x, y = path.pop()
            visited[y, x] = 0
            metrics.backtracks += 1

    raise NoTourFound("search exhausted")
