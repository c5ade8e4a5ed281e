"""
Base Strategy Module - Abstract base class for tour strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from ..exceptions import NoTourFound, SearchAborted
from .board import Board, Square
from .context import SolutionContext
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all tour strategies.

    solve() is the instrumentation wrapper shared by every strategy: it
    validates the start, times the run and turns search outcomes into a
    Solution. Subclasses implement find_tour().

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the shell
        timeout_sec: Default timeout for this strategy
        max_comparisons: Default effort budget (None = unbounded)
        closed: True if the strategy only produces closed tours
    """
    name: str = "base"
    description: str = "Base strategy"
    timeout_sec: float = 20.0
    max_comparisons: Optional[int] = None
    closed: bool = False

    def __init__(self, max_comparisons: Optional[int] = None):
        if max_comparisons is not None:
            self.max_comparisons = max_comparisons

    def default_start(self, board: Board) -> Square:
        """Start square used when the request gives none."""
        return (0, 0)

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute a tour for the context's board.

        Args:
            context: Solution context with board, start and cancellation

        Returns:
            Solution; found=False when no tour was found or the search
            was aborted

        Raises:
            InvalidStart: If the requested start is off the board
        """
        board = context.board
        # Timeout runs from this solve, not from context creation
        context.start_time = time.time()
        if context.start is None:
            start = self.default_start(board)
        else:
            start = board.validate_square(context.start)

        metrics = SolutionMetrics(strategy_name=self.name)
        solution = Solution(board=board, start=start, metrics=metrics)
        start_time = time.perf_counter()

        try:
            tour = self.find_tour(context, start, metrics)
        except NoTourFound as e:
            solution.reason = e.reason
        except SearchAborted as e:
            solution.reason = e.reason
            solution.was_cancelled = True
        else:
            solution.tour = tour
            solution.found = True
            solution.closed = len(tour) > 1 and board.is_knight_move(tour[0], tour[-1])

        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000

        if solution.found:
            logger.info(
                f"{self.name}: {board.cols}x{board.rows} tour from {start} in "
                f"{metrics.computation_time_ms:.1f}ms, {metrics.comparisons} comparisons"
            )
        else:
            logger.info(
                f"{self.name}: no tour on {board.cols}x{board.rows} from {start} "
                f"({solution.reason}), {metrics.comparisons} comparisons"
            )
        return solution

    @abstractmethod
    def find_tour(self, context: SolutionContext, start: Square,
                  metrics: SolutionMetrics) -> List[Square]:
        """
        Search for a tour.

        Args:
            context: Solution context (board, cancellation, budget override)
            start: Validated start square
            metrics: Counters to update

        Returns:
            Complete tour starting at start

        Raises:
            NoTourFound: Search exhausted or budget exhausted
            SearchAborted: Cancelled or timed out
        """
        pass

    def _budget(self, context: SolutionContext) -> Optional[int]:
        """Effort budget: context override, else the strategy default."""
        if context.max_comparisons is not None:
            return context.max_comparisons
        return self.max_comparisons
