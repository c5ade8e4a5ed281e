"""
Request Module - Boundary between a presentation shell and the solvers.

The shell sends a TourRequest and renders the TourResponse it gets back;
nothing is kept between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import InvalidBoardSize
from .settings import DEFAULT_SETTINGS
from .solver import (
    Board,
    Solution,
    SolutionContext,
    SolverStrategy,
    Square,
    create_strategy,
)
from .solver.factory import DEFAULT_STRATEGY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TourRequest:
    """
    One solve request.

    Attributes:
        board_size: Side length n of the n x n board
        start: Start square, or None for the strategy's default
        strategy: Registered strategy name
    """
    board_size: int
    start: Optional[Square] = None
    strategy: str = DEFAULT_STRATEGY


@dataclass
class TourResponse:
    """
    What the shell renders.

    Attributes:
        tour: Squares in path order (empty when found is False)
        elapsed_duration: Solve time in seconds
        comparison_count: Candidate squares examined
        found: True if a tour was found
        closed: True if the tour returns next to its start
        reason: Why no tour was found
    """
    tour: List[Square] = field(default_factory=list)
    elapsed_duration: float = 0.0
    comparison_count: int = 0
    found: bool = False
    closed: bool = False
    reason: str = ""

    @classmethod
    def from_solution(cls, solution: Solution) -> 'TourResponse':
        return cls(
            tour=list(solution.tour),
            elapsed_duration=solution.elapsed_seconds,
            comparison_count=solution.metrics.comparisons,
            found=solution.found,
            closed=solution.closed,
            reason=solution.reason,
        )


def build_context(request: TourRequest, strategy: SolverStrategy,
                  settings: Dict[str, Any]) -> SolutionContext:
    """
    Create the solution context for a request.

    Raises:
        InvalidBoardSize: If board_size is not a positive integer
    """
    if not isinstance(request.board_size, int) or request.board_size < 1:
        raise InvalidBoardSize(f"Board size must be a positive integer, got {request.board_size!r}")

    timeout = settings["timeout_sec"]
    if timeout is None:
        timeout = strategy.timeout_sec

    return SolutionContext(
        board=Board.square(request.board_size),
        start=request.start,
        timeout_sec=timeout,
        max_comparisons=settings["max_comparisons"],
    )


def solve_request(request: TourRequest,
                  settings: Optional[Dict[str, Any]] = None) -> TourResponse:
    """
    Run one request to completion.

    Args:
        request: Board size, start and strategy name
        settings: Solver settings (defaults if None)

    Returns:
        TourResponse; found=False for "no tour found" and aborted searches

    Raises:
        InvalidBoardSize: Non-positive board size
        InvalidStart: Start square off the board
        ValueError: Unknown strategy name
    """
    merged = DEFAULT_SETTINGS.copy()
    if settings:
        merged.update(settings)

    kwargs: Dict[str, Any] = {}
    if request.strategy == "structural":
        kwargs["structural_threshold"] = merged["structural_threshold"]
    strategy = create_strategy(request.strategy, **kwargs)

    context = build_context(request, strategy, merged)
    logger.debug(
        f"Solving {request.board_size}x{request.board_size} with {strategy.name}, "
        f"start={request.start}"
    )
    return TourResponse.from_solution(strategy.solve(context))
