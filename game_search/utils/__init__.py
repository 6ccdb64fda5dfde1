"""
Utilities Module

This module provides benchmarking utilities for the search strategies.

Key Components:
    - Tic-tac-toe position suite with known game-theoretic values
    - compare_strategies: Baseline vs. pruned search on one position
    - run_benchmark: Agreement, correctness and node counts over a suite

Success Metrics:
    - Agreement: always 100% (pruning never changes the chosen move)
    - Node reduction: pruning should visit substantially fewer nodes
"""

from game_search.utils.testing import (
    BenchmarkPosition,
    BenchmarkResult,
    benchmark_position,
    compare_strategies,
    run_benchmark,
    tictactoe_positions,
)

__all__ = [
    'BenchmarkPosition',
    'BenchmarkResult',
    'benchmark_position',
    'compare_strategies',
    'run_benchmark',
    'tictactoe_positions',
]
