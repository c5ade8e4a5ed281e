"""
Solution Context Module - Per-solve request state for strategies.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board, Square


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the board, the requested
    start, cancellation and progress reporting.

    Attributes:
        board: Board to tour
        start: Requested start square, or None for the strategy default
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds
        max_comparisons: Effort budget override (None = strategy default)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: Board
    start: Optional[Square] = None
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: float = 20.0
    max_comparisons: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the shell.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time
