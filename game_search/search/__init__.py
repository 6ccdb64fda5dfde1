"""
Search Module

This module implements the game tree search. Children of a state are
produced by the successor enumerator, and three minimax strategies choose
among them: naive (exhaustive), depth-bounded, and alpha-beta pruned. An
optional transposition table caches node values across move orders.

Key Components:
    - enumerate_children: Lazy child generation by candidate cycle detection
    - search_naive / search_depth / search_prune: Entry points returning a child
    - find_best_child: Configurable root search returning a SearchResult
    - TranspositionTable: Cache keyed by (state, player)
"""

from game_search.search.config import SearchConfig
from game_search.search.enumerator import enumerate_children, count_children
from game_search.search.errors import SearchError, NoLegalMovesError, InvalidDepthError
from game_search.search.minimax import (
    SearchResult,
    minimax_value,
    alphabeta_value,
    find_best_child,
    search_naive,
    search_depth,
    search_prune,
    principal_variation,
)
from game_search.search.transposition import TranspositionTable, NodeType

__all__ = [
    'SearchConfig',
    'enumerate_children',
    'count_children',
    'SearchError',
    'NoLegalMovesError',
    'InvalidDepthError',
    'SearchResult',
    'minimax_value',
    'alphabeta_value',
    'find_best_child',
    'search_naive',
    'search_depth',
    'search_prune',
    'principal_variation',
    'TranspositionTable',
    'NodeType',
]
