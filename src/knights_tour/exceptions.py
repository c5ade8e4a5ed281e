"""
Exceptions Module - Error taxonomy for tour requests and searches.

Request errors (bad size, bad start) are raised to the caller. Search
outcomes (no tour, aborted) are caught by the solve wrapper and turned
into a failed Solution.
"""


class KnightsTourError(Exception):
    """Base class for all knight's tour errors."""


class InvalidBoardSize(KnightsTourError, ValueError):
    """Board size is non-positive or below a strategy's minimum."""


class InvalidStart(KnightsTourError, ValueError):
    """Start square lies outside the board."""


class NoTourFound(KnightsTourError):
    """
    Search finished without a tour satisfying the acceptance test.

    This is an expected outcome, not a defect.

    Attributes:
        reason: Short human-readable explanation for the shell
    """

    def __init__(self, reason: str = "search exhausted"):
        super().__init__(reason)
        self.reason = reason


class SearchAborted(KnightsTourError):
    """Search stopped by the cancel flag or the timeout."""

    def __init__(self, reason: str = "search aborted"):
        super().__init__(reason)
        self.reason = reason
