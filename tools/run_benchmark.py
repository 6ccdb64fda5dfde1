#!/usr/bin/env python3
"""
Search Benchmark Runner

Runs the tic-tac-toe position suite with the baseline strategy and with
alpha-beta pruning at several depths, and reports how many nodes pruning
saves and whether it always chose the same move.

Usage:
    python tools/run_benchmark.py [--depths 1,2,4] [--full] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game_search.games import TicTacToe
from game_search.utils.testing import run_benchmark, tictactoe_positions


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_count(nodes: int) -> str:
    """Format a node count"""
    if nodes < 10_000:
        return f"{nodes}"
    elif nodes < 10_000_000:
        return f"{nodes / 1000:.1f}k"
    else:
        return f"{nodes / 1_000_000:.1f}M"


def run(depths, full: bool = False, verbose: bool = False):
    """
    Run the benchmark at each depth (None = unbounded).

    Args:
        depths: List of depths to test
        full: If True, include the empty board (slow for the naive baseline)
        verbose: If True, print detailed results for each position
    """
    game = TicTacToe()
    positions = tictactoe_positions(game)
    if not full:
        positions = [p for p in positions if p.id != "TTT.06"]

    print("=" * 80)
    print("SEARCH BENCHMARK - Tic-Tac-Toe")
    print("=" * 80)
    print(f"Positions: {', '.join(p.id for p in positions)}")
    print(f"Depths: {['unbounded' if d is None else d for d in depths]}")
    print("=" * 80)

    all_results = []
    for depth in depths:
        summary = run_benchmark(game, positions, depth=depth, verbose=verbose)
        all_results.append((depth, summary))

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<12} {'Agree':<8} {'Correct':<9} {'Baseline':<12} {'Pruned':<12} {'Saved':<8}")
    print("-" * 80)

    for depth, s in all_results:
        label = "unbounded" if depth is None else str(depth)
        print(
            f"{label:<12} {s['agreement']}/{s['total']:<6} {s['correct']}/{s['total']:<7} "
            f"{format_count(s['baseline_nodes']):<12} {format_count(s['pruned_nodes']):<12} "
            f"{s['node_reduction']:.1f}%"
        )

    print("=" * 80)

    disagreements = [
        comparison["prune"].position.id
        for _, s in all_results
        for comparison in s['results']
        if not comparison["prune"].agrees_with_baseline
    ]
    if disagreements:
        print(f"\nPruning changed the chosen move on: {', '.join(sorted(set(disagreements)))}")

    return all_results


def parse_depths(text: str):
    """Parse '1,2,none' into [1, 2, None]."""
    depths = []
    for item in text.split(","):
        item = item.strip().lower()
        depths.append(None if item in ("none", "full", "") else int(item))
    return depths


def main():
    parser = argparse.ArgumentParser(
        description="Compare naive and pruned search on the tic-tac-toe suite"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="2,4,none",
        help="Comma-separated list of depths, 'none' for unbounded (default: 2,4,none)"
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Include the empty-board position"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        depths = parse_depths(args.depths)
    except ValueError:
        print("Error: depths must be comma-separated integers or 'none'")
        sys.exit(1)

    if any(d is not None and d < 0 for d in depths):
        print("Error: depths must be non-negative")
        sys.exit(1)

    try:
        run(depths, full=args.full, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
