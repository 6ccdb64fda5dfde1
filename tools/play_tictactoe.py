#!/usr/bin/env python3
"""
Tic-tac-toe self-play.

Plays a game where each side searches for its move, and prints the board
after every move.

Usage:
    python tools/play_tictactoe.py [--strategy prune] [--depth 3] [--tt] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game_search.games import TicTacToe
from game_search.search import SearchConfig, find_best_child
from game_search.search.config import STRATEGIES
from game_search.search.transposition import TranspositionTable


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main():
    """Main self-play script."""
    parser = argparse.ArgumentParser(
        description="Tic-tac-toe engine self-play",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default="prune",
        choices=list(STRATEGIES),
        help="Search strategy",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Depth bound in plies (required for 'depth')",
    )
    parser.add_argument(
        "--tt",
        action="store_true",
        help="Use a transposition table",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = SearchConfig(
            strategy=args.strategy,
            depth=args.depth,
            use_transposition_table=args.tt,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(f"Configuration: {config}")

    game = TicTacToe()
    table = TranspositionTable(max_size=config.tt_size) if config.use_transposition_table else None
    state = game.initial()
    total_nodes = 0

    print(game.render(state))
    while game.is_live(state):
        mover = state.player
        result = find_best_child(state, game, config, table)
        total_nodes += result.nodes
        state = result.state

        print(f"\n{mover} plays (score {result.score:+.0f}, {result.nodes:,} nodes)")
        print(game.render(state))

    winner = game.winner(state)
    print(f"\nResult: {'draw' if winner is None else f'{winner} wins'}")
    logger.info(f"Total nodes searched: {total_nodes:,}")
    if table is not None:
        logger.info(f"Transposition table: {table}")


if __name__ == "__main__":
    main()
