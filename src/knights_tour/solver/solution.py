"""
Solution Module - Result of a tour computation and its metrics.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, Square


@dataclass
class SolutionMetrics:
    """
    Performance metrics for one solve.

    Attributes:
        computation_time_ms: Wall-clock time in milliseconds
        comparisons: Candidate squares examined by the search engine
        attempts: Squares placed on the path (including ones later undone)
        backtracks: Squares removed from the path
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    comparisons: int = 0
    attempts: int = 0
    backtracks: int = 0
    strategy_name: str = ""

    def absorb(self, other: 'SolutionMetrics') -> None:
        """Add the search counters of a sub-solve to these metrics."""
        self.comparisons += other.comparisons
        self.attempts += other.attempts
        self.backtracks += other.backtracks


@dataclass
class Solution:
    """
    Result of a strategy computation.

    A failed solve carries found=False, an empty tour and a reason, so the
    shell can show "no solution" instead of stale data.

    Attributes:
        board: Board that was toured
        start: Start square actually used
        tour: Ordered squares of the tour (empty on failure)
        found: True if a complete tour satisfying the strategy was found
        closed: True if the last square is a knight move from the first
        was_cancelled: True if stopped by cancel flag or timeout
        reason: Failure explanation (empty on success)
        metrics: Performance statistics
    """
    board: Board
    start: Optional[Square] = None
    tour: List[Square] = field(default_factory=list)
    found: bool = False
    closed: bool = False
    was_cancelled: bool = False
    reason: str = ""
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def length(self) -> int:
        """Number of squares in the tour."""
        return len(self.tour)

    @property
    def elapsed_seconds(self) -> float:
        return self.metrics.computation_time_ms / 1000.0

    def segments(self) -> List[Tuple[Square, Square]]:
        """
        Line segments a shell draws for this tour, in path order.

        Returns:
            k - 1 (from, to) pairs for a tour of length k
        """
        return list(zip(self.tour, self.tour[1:]))
