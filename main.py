"""
Knight's Tour Solver - Entry Point

Runs one tour request and prints the result.

Example:
    python main.py --size 8
    python main.py --size 8 --strategy closed --start 3 4
    python main.py --size 24 --strategy structural --grid
"""

import sys
import logging
import argparse

from knights_tour import KnightsTourError, TourRequest, solve_request
from knights_tour.settings import load_settings
from knights_tour.solver import Board, get_strategy_info, visit_order_grid


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    settings = load_settings()
    names = [info["name"] for info in get_strategy_info()]

    parser = argparse.ArgumentParser(
        description="Knight's Tour Solver - compute a tour with a chosen strategy"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=8,
        help="Board size n for an n x n board (default: 8)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=names,
        default=settings["strategy_name"],
        help=f"Strategy to run (default: {settings['strategy_name']})"
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="Start square (default: strategy's own)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Timeout in seconds (default: strategy's own)"
    )
    parser.add_argument(
        "--budget", "-b",
        type=int,
        help="Maximum comparisons before giving up"
    )
    parser.add_argument(
        "--grid", "-g",
        action="store_true",
        help="Print the visit-order grid"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        default=settings["debug_enabled"],
        help="Enable debug logging"
    )
    return parser.parse_args(argv), settings


def format_grid(size: int, tour) -> str:
    """Visit ordinals laid out as the board, one row per line."""
    grid = visit_order_grid(Board.square(size), tour)
    width = len(str(size * size))
    return "\n".join(" ".join(f"{v:>{width}}" for v in row) for row in grid)


def main(argv=None) -> int:
    """Run a single request; exit code 0 = tour found, 1 = none, 2 = bad input."""
    args, settings = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()]
    )

    if args.timeout is not None:
        settings["timeout_sec"] = args.timeout
    if args.budget is not None:
        settings["max_comparisons"] = args.budget

    request = TourRequest(
        board_size=args.size,
        start=tuple(args.start) if args.start else None,
        strategy=args.strategy,
    )

    try:
        response = solve_request(request, settings)
    except (KnightsTourError, ValueError) as e:
        # Unknown strategy_name or a bad structural_threshold from config.json
        # surface here as ValueError
        logger.error(f"Invalid request: {e}")
        return 2

    print(f"Running Time: {response.elapsed_duration * 1000:.1f} ms")
    print(f"Comparisons:  {response.comparison_count}")

    if not response.found:
        print(f"No solution ({response.reason})")
        return 1

    kind = "closed" if response.closed else "open"
    print(f"Tour ({kind}, {len(response.tour)} squares):")
    print(" ".join(f"({x},{y})" for x, y in response.tour))
    if args.grid:
        print(format_grid(args.size, response.tour))
    return 0


if __name__ == "__main__":
    sys.exit(main())
