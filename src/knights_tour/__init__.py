"""
Knight's Tour solver.

Usage:
    from knights_tour import TourRequest, solve_request

    response = solve_request(TourRequest(board_size=8, strategy="closed"))
    if response.found:
        print(response.tour)
"""

from .exceptions import (
    KnightsTourError,
    InvalidBoardSize,
    InvalidStart,
    NoTourFound,
    SearchAborted,
)
from .request import TourRequest, TourResponse, solve_request

__all__ = [
    "KnightsTourError",
    "InvalidBoardSize",
    "InvalidStart",
    "NoTourFound",
    "SearchAborted",
    "TourRequest",
    "TourResponse",
    "solve_request",
]
