"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .naive import NaiveStrategy
from .heuristic import HeuristicOpenStrategy, HeuristicOpenBadStartStrategy
from .closed import ClosedTourStrategy
from .structural import StructuralStrategy

__all__ = [
    "NaiveStrategy",
    "HeuristicOpenStrategy",
    "HeuristicOpenBadStartStrategy",
    "ClosedTourStrategy",
    "StructuralStrategy",
]
