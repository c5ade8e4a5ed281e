"""
Solver Package - Pluggable knight's tour strategies.

Public API:
    - Board: Immutable board description
    - Solution: Result of a solve (tour or "no tour found")
    - SolutionMetrics: Timing and comparison counters
    - SolutionContext: Per-solve request state
    - SolverStrategy: Abstract base for strategies
    - search(): Backtracking engine used by the strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from knights_tour.solver import Board, SolutionContext, create_strategy

    context = SolutionContext(board=Board.square(8), start=(0, 0))
    solution = create_strategy("closed").solve(context)

    if solution.found:
        for a, b in solution.segments():
            print(f"{a} -> {b}")
    print(f"{solution.metrics.comparisons} comparisons")
"""

# Core data structures
from .board import (
    Board,
    Square,
    KNIGHT_OFFSETS,
    closed_tour_possible,
    is_valid_tour,
    visit_order_grid,
)
from .solution import Solution, SolutionMetrics
from .context import SolutionContext
from .engine import search

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Board",
    "Square",
    "KNIGHT_OFFSETS",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    "closed_tour_possible",
    "is_valid_tour",
    "visit_order_grid",
    # Engine
    "search",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
