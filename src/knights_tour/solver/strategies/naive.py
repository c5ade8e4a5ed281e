"""
Naive Strategy - Plain backtracking in canonical move order.
"""

from typing import List, Tuple

import numpy as np

from ..base import SolverStrategy
from ..board import Board, Square
from ..context import SolutionContext
from ..engine import accept_open, search
from ..factory import register_strategy
from ..solution import SolutionMetrics


def canonical_order(board: Board, visited: np.ndarray, square: Square) -> Tuple[Square, ...]:
    """Every neighbour, visited or not, in the board's canonical order."""
    return board.neighbors(square)


@register_strategy
class NaiveStrategy(SolverStrategy):
    """
    Backtracking with no heuristic.

    Tries moves in the fixed compass order. Fine up to 5x5 or 6x6; on
    larger boards the search is exponential and usually ends on the
    comparison budget.
    """
    name = "naive"
    description = "Naive backtracking - fixed compass move order"
    timeout_sec = 60.0
    max_comparisons = 20_000_000

    def find_tour(self, context: SolutionContext, start: Square,
                  metrics: SolutionMetrics) -> List[Square]:
        return search(
            context.board, start, canonical_order, accept_open, metrics,
            context=context, max_comparisons=self._budget(context),
        )
