"""
Test script for the structural (divide-and-conquer) strategy

Usage:
    python tests/test_structural.py
    pytest tests/
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from knights_tour.solver import Board, SolutionContext, create_strategy, is_valid_tour
from knights_tour.solver.strategies import structural
from knights_tour.solver.strategies.structural import (
    MAX_BLOCK_RETRIES,
    block_layout,
    join_cycles,
    split_dimension,
)


def test_split_dimension():
    """Sides split into two even parts of at least 6."""
    print("\n" + "="*60)
    print("TEST: Partition")
    print("="*60)

    assert split_dimension(10, 12) == [10]
    assert split_dimension(12, 12) == [6, 6]
    assert split_dimension(14, 12) == [6, 8]
    assert split_dimension(16, 12) == [8, 8]
    assert split_dimension(26, 12) == [12, 14]
    assert split_dimension(20, 24) == [20]

    blocks = block_layout(Board.square(12), 12)
    offsets = [(x0, y0) for x0, y0, _ in blocks]
    print(f"  12x12 blocks at {offsets}")
    assert offsets == [(0, 0), (6, 0), (6, 6), (0, 6)]
    assert all(block == Board.square(6) for _, _, block in blocks)

    blocks = block_layout(Board.square(14), 12)
    assert [(b.cols, b.rows) for _, _, b in blocks] == [(6, 6), (8, 6), (8, 8), (6, 8)]
    print("  [PASS] Partition")


def test_join_cycles():
    """Two 4-cycles next to each other merge into one 8-cycle."""
    print("\n" + "="*60)
    print("TEST: Join rule")
    print("="*60)

    # Smallest knight cycle, and a copy one knight move away
    a = [(0, 1), (1, 3), (3, 2), (2, 0)]
    b = [(x + 2, y + 1) for x, y in a]
    assert not set(a) & set(b)
    assert all(Board.is_knight_move(p, q) for p, q in zip(a, a[1:] + a[:1]))

    joined = join_cycles(a, b)
    print(f"  Joined: {joined}")
    assert joined is not None
    assert sorted(joined) == sorted(a + b)
    assert len(set(joined)) == 8
    assert all(Board.is_knight_move(p, q) for p, q in zip(joined, joined[1:] + joined[:1]))

    # Far apart: nothing to join
    far = [(x + 20, y + 20) for x, y in a]
    assert join_cycles(a, far) is None
    print("  [PASS] Join rule")


def test_structural_tours():
    """12x12 and 14x14 are built from blocks and come out closed."""
    print("\n" + "="*60)
    print("TEST: Structural tours")
    print("="*60)

    for size, start in ((12, None), (14, (5, 9))):
        context = SolutionContext(board=Board.square(size), start=start)
        solution = create_strategy("structural").solve(context)
        print(f"  {size}x{size}: found={solution.found}, "
              f"comparisons={solution.metrics.comparisons}, "
              f"time={solution.metrics.computation_time_ms:.1f}ms")

        assert solution.found
        assert solution.closed
        assert solution.tour[0] == solution.start
        assert is_valid_tour(solution.board, solution.tour, closed=True)
        assert solution.metrics.comparisons > 0
    print("  [PASS] Structural tours")


def test_structural_join_failure(monkeypatch):
    """A block that never joins is retried, then the solve reports no tour."""
    print("\n" + "="*60)
    print("TEST: Structural join failure")
    print("="*60)

    monkeypatch.setattr(structural, "join_cycles", lambda merged, cycle: None)

    solution = create_strategy("structural").solve(
        SolutionContext(board=Board.square(12))
    )
    print(f"  found={solution.found} ({solution.reason}), "
          f"comparisons={solution.metrics.comparisons}")

    assert solution.found is False
    assert solution.tour == []
    assert not solution.was_cancelled
    assert "no compatible join" in solution.reason

    # First 6x6 block from (0, 0), then the second block from each retry start
    block_starts = [(0, 0)] + [(attempt, 0) for attempt in range(MAX_BLOCK_RETRIES)]
    expected = 0
    for start in block_starts:
        block = create_strategy("closed").solve(
            SolutionContext(board=Board.square(6), start=start)
        )
        assert block.found, start
        expected += block.metrics.comparisons
    assert solution.metrics.comparisons == expected
    print("  [PASS] Structural join failure")


def test_structural_small_and_odd_boards():
    """Below the threshold it is the closed strategy; odd boards fail."""
    context = SolutionContext(board=Board.square(8))
    structural = create_strategy("structural").solve(context)
    closed = create_strategy("closed").solve(SolutionContext(board=Board.square(8)))
    assert structural.found
    assert structural.tour == closed.tour
    assert structural.metrics.comparisons == closed.metrics.comparisons

    odd = create_strategy("structural").solve(SolutionContext(board=Board.square(13)))
    assert not odd.found
    assert odd.tour == []
    assert odd.metrics.comparisons == 0


def test_structural_threshold():
    """Thresholds below 12 cannot produce even blocks of at least 6."""
    with pytest.raises(ValueError):
        create_strategy("structural", structural_threshold=10)

    # Raising the threshold keeps 12x12 a single closed search
    strategy = create_strategy("structural", structural_threshold=16)
    solution = strategy.solve(SolutionContext(board=Board.square(12)))
    assert solution.found
    assert is_valid_tour(solution.board, solution.tour, closed=True)


def main():
    """Run all tests."""
    tests = [
        ("Partition", test_split_dimension),
        ("Join Rule", test_join_cycles),
        ("Structural Tours", test_structural_tours),
        ("Small And Odd Boards", test_structural_small_and_odd_boards),
        ("Threshold", test_structural_threshold),
    ]
    failed = 0
    for name, test in tests:
        try:
            test()
            print(f"  {name}: [PASS]")
        except AssertionError as e:
            print(f"  {name}: [FAIL] {e}")
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
