"""
Search Benchmarking

This module provides a position suite and benchmarking tools for comparing
the search strategies.

Each position is searched with the baseline strategy (naive minimax, or
depth-bounded minimax when a depth is given) and with alpha-beta pruning at
the same depth. The pruned search must choose the same child with the same
score; the interesting number is how many fewer nodes it visits.

Evaluation Metrics:
    - Agreement: Whether pruning chose the same child as the baseline
    - Correct: Whether the score matches the known game-theoretic value
    - Nodes Searched: States visited, root included
    - Time per Position: Wall-clock search time
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from game_search.games.tictactoe import TicTacToe
from game_search.search.config import SearchConfig
from game_search.search.minimax import find_best_child
from game_search.state.contract import Game


@dataclass
class BenchmarkPosition:
    """
    A position with its known value.

    Attributes:
        id: Position identifier (e.g., "TTT.01")
        state: State to search from
        expected_score: Game-theoretic value for the player to move (None if unknown)
        description: Human-readable description of the position
    """
    id: str
    state: Any
    expected_score: Optional[float] = None
    description: str = ""


@dataclass
class BenchmarkResult:
    """
    Result of searching a single position with one strategy.

    Attributes:
        position: The benchmark position
        strategy: 'naive', 'depth' or 'prune'
        depth: Depth bound used (None = unbounded)
        chosen: Child state the search chose
        score: Value of the chosen child
        nodes_searched: States visited
        time_taken: Time spent searching (seconds)
        agrees_with_baseline: Same child and score as the baseline strategy
            (None for the baseline itself)
    """
    position: BenchmarkPosition
    strategy: str
    depth: Optional[int]
    chosen: Any
    score: float
    nodes_searched: int
    time_taken: float
    agrees_with_baseline: Optional[bool] = None

    @property
    def correct(self) -> Optional[bool]:
        """Whether the score matches the position's known value."""
        if self.position.expected_score is None:
            return None
        return self.score == self.position.expected_score


# ============================================================================
# Tic-Tac-Toe Suite
# ============================================================================
# (id, moves from the empty board, value for the player to move, description)

TICTACTOE_SUITE: List[Tuple[str, Sequence[Tuple[int, int]], float, str]] = [
    ("TTT.01", [(0, 0), (1, 0), (0, 1), (1, 1)], 1, "X completes the top row"),
    ("TTT.02", [(0, 0), (1, 1), (0, 1)], 0, "O must block the top row"),
    ("TTT.03", [(0, 0), (0, 1)], 1, "X wins after O answers the corner with an edge"),
    ("TTT.04", [(1, 1), (0, 0)], 0, "Center against corner is a draw"),
    ("TTT.05", [(0, 0), (1, 1), (2, 2)], 0, "O must play an edge to hold the draw"),
    ("TTT.06", [], 0, "Empty board: perfect play draws"),
]


def tictactoe_positions(game: Optional[TicTacToe] = None) -> List[BenchmarkPosition]:
    """
    Build the tic-tac-toe benchmark positions.

    Args:
        game: Rules used to play out the move lists (default: TicTacToe())

    Returns:
        List of BenchmarkPosition
    """
    game = game if game else TicTacToe()
    return [
        BenchmarkPosition(
            id=position_id,
            state=game.from_moves(moves),
            expected_score=expected,
            description=description,
        )
        for position_id, moves, expected, description in TICTACTOE_SUITE
    ]


def benchmark_position(
    position: BenchmarkPosition,
    game: Game,
    config: SearchConfig,
) -> BenchmarkResult:
    """
    Search a single position with one configuration.

    Args:
        position: Position to search
        game: Rules of the position's game
        config: Search configuration

    Returns:
        BenchmarkResult with the chosen child, score, nodes and time
    """
    start_time = time.perf_counter()
    result = find_best_child(position.state, game, config)
    time_taken = time.perf_counter() - start_time

    return BenchmarkResult(
        position=position,
        strategy=config.strategy,
        depth=config.depth,
        chosen=result.state,
        score=result.score,
        nodes_searched=result.nodes,
        time_taken=time_taken,
    )


def compare_strategies(
    position: BenchmarkPosition,
    game: Game,
    depth: Optional[int] = None,
    verbose: bool = False,
) -> Dict[str, BenchmarkResult]:
    """
    Search a position with the baseline strategy and with pruning.

    Args:
        position: Position to search
        game: Rules of the position's game
        depth: Depth bound (None = naive baseline, full-depth pruning)
        verbose: If True, print a line per strategy

    Returns:
        Dictionary mapping strategy name → BenchmarkResult
    """
    baseline_strategy = "naive" if depth is None else "depth"
    baseline = benchmark_position(
        position, game, SearchConfig(strategy=baseline_strategy, depth=depth)
    )
    pruned = benchmark_position(position, game, SearchConfig(strategy="prune", depth=depth))
    pruned.agrees_with_baseline = (
        pruned.chosen == baseline.chosen and pruned.score == baseline.score
    )

    if verbose:
        print(f"\n{position.id}: {position.description}")
        for result in (baseline, pruned):
            print(
                f"  {result.strategy:<6} score={result.score:+.0f} "
                f"nodes={result.nodes_searched:,} time={result.time_taken:.3f}s"
            )
        print(f"  Agreement: {'yes' if pruned.agrees_with_baseline else 'NO'}")

    return {baseline_strategy: baseline, "prune": pruned}


def run_benchmark(
    game: Game,
    positions: Sequence[BenchmarkPosition],
    depth: Optional[int] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run a position suite with the baseline strategy and with pruning.

    Args:
        game: Rules of the positions' game
        positions: Positions to search
        depth: Depth bound (None = unbounded)
        verbose: If True, print detailed results

    Returns:
        Dictionary with benchmark results:
            - results: List of {strategy: BenchmarkResult} per position
            - agreement: Number of positions where pruning agreed
            - correct: Number of positions where pruning found the known value
            - total: Total number of positions
            - baseline_nodes / pruned_nodes: Total nodes per strategy
            - node_reduction: Percentage of nodes saved by pruning
    """
    if verbose:
        print("=" * 70)
        depth_label = "unbounded" if depth is None else f"depth {depth}"
        print(f"SEARCH BENCHMARK ({depth_label})")
        print("=" * 70)

    results = []
    agreement = 0
    correct = 0
    baseline_nodes = 0
    pruned_nodes = 0

    for position in positions:
        comparison = compare_strategies(position, game, depth, verbose=verbose)
        results.append(comparison)

        pruned = comparison["prune"]
        baseline = comparison["naive" if depth is None else "depth"]

        if pruned.agrees_with_baseline:
            agreement += 1
        if pruned.correct:
            correct += 1

        baseline_nodes += baseline.nodes_searched
        pruned_nodes += pruned.nodes_searched

    node_reduction = (
        (1 - pruned_nodes / baseline_nodes) * 100 if baseline_nodes else 0.0
    )

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Agreement: {agreement}/{len(positions)}")
        print(f"Correct values: {correct}/{len(positions)}")
        print(f"Nodes: baseline {baseline_nodes:,}, pruned {pruned_nodes:,} "
              f"({node_reduction:.1f}% fewer)")

    return {
        'results': results,
        'agreement': agreement,
        'correct': correct,
        'total': len(positions),
        'baseline_nodes': baseline_nodes,
        'pruned_nodes': pruned_nodes,
        'node_reduction': node_reduction,
    }
