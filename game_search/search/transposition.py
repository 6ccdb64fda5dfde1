"""
Transposition Table

This module implements a transposition table (TT) - a cache of node values
that lets the search skip positions it has already searched through a
different move order. In tic-tac-toe the same board is reached by many move
orders, so the savings are large.

Entries are keyed by (state, player): the state itself (states are
immutable and hashable, so no separate position hash is needed) together
with the player whose perspective the value is expressed in.

References:
    - Transposition Table: https://www.chessprogramming.org/Transposition_Table
"""

from collections import OrderedDict
from enum import Enum
from typing import Any, Dict, Hashable, Optional, Tuple

# Depth recorded for values computed without a depth bound. Such values are
# exact for any requested depth.
MAX_DEPTH = 1_000_000


class NodeType(Enum):
    """
    Type of node in search tree.

    This determines how we can use the cached value:
        - EXACT: The exact value (all children searched)
        - LOWER_BOUND: Cutoff at a maximizing node (value is at least this)
        - UPPER_BOUND: Cutoff at a minimizing node, or every child failed
          low (value is at most this)
    """
    EXACT = 0
    LOWER_BOUND = 1
    UPPER_BOUND = 2


TTKey = Tuple[Hashable, Hashable]


class TTEntry:
    """
    Entry in the transposition table.

    Attributes:
        key: (state, perspective player)
        depth: Remaining depth the value was searched to (MAX_DEPTH if unbounded)
        value: Node value from the perspective player's point of view
        node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
        best_child: Best child found from this state, if any
    """

    __slots__ = ("key", "depth", "value", "node_type", "best_child")

    def __init__(
        self,
        key: TTKey,
        depth: int,
        value: float,
        node_type: NodeType,
        best_child: Any = None,
    ):
        self.key = key
        self.depth = depth
        self.value = value
        self.node_type = node_type
        self.best_child = best_child

    def __repr__(self) -> str:
        return (
            f"TTEntry(depth={self.depth}, value={self.value:.2f}, "
            f"type={self.node_type.name})"
        )


def make_key(state: Hashable, player: Hashable) -> TTKey:
    """Build the table key for a state searched from player's point of view."""
    return (state, player)


class TranspositionTable:
    """
    Transposition table for caching node values.

    Attributes:
        max_size: Maximum number of entries (memory limit)
        table: Ordered mapping key → TTEntry, oldest first
        hits: Successful lookups
        misses: Failed lookups
    """

    def __init__(self, max_size: int = 1_000_000):
        """
        Initialize transposition table.

        Args:
            max_size: Maximum number of entries (default 1M)

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self.table: "OrderedDict[TTKey, TTEntry]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def store(
        self,
        key: TTKey,
        depth: int,
        value: float,
        node_type: NodeType,
        best_child: Any = None,
    ):
        """
        Store a node value in the transposition table.

        An existing entry is only replaced by one searched at least as deep.
        When the table is full the oldest entry is evicted.

        Args:
            key: Key from make_key()
            depth: Remaining depth this value was searched to
            value: Node value
            node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
            best_child: Best child found (optional)
        """
        existing = self.table.get(key)
        if existing is not None and depth < existing.depth:
            return

        self.table[key] = TTEntry(key, depth, value, node_type, best_child)

        if len(self.table) > self.max_size:
            self.table.popitem(last=False)

    def lookup(
        self, key: TTKey, depth: int = 0, exact_depth: bool = False
    ) -> Optional[TTEntry]:
        """
        Look up a node in the transposition table.

        A value searched deeper is a different value, not a better one, for
        a depth-bounded search: pass exact_depth=True to only accept an
        entry searched to exactly the requested depth.

        Args:
            key: Key from make_key()
            depth: Remaining depth required (only use if cached depth >= this)
            exact_depth: Only use the entry if cached depth == depth

        Returns:
            TTEntry if found and usable, None otherwise
        """
        entry = self.table.get(key)

        if entry is not None:
            usable = entry.depth == depth if exact_depth else entry.depth >= depth
            if usable:
                self.hits += 1
                return entry

        self.misses += 1
        return None

    def clear(self):
        """Clear all entries from the transposition table."""

        self.table.clear()
        self.hits = 0
        self.misses = 0

    def hit_rate(self) -> float:
        """Percentage of lookups that found a usable entry."""
        total_lookups = self.hits + self.misses
        return (self.hits / total_lookups * 100) if total_lookups > 0 else 0.0

    def get_stats(self) -> Dict[str, float]:
        """Get statistics about transposition table usage."""

        return {
            'entries': len(self.table),
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hit_rate(),
        }

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        return (
            f"TranspositionTable(entries={len(self.table)}, "
            f"hit_rate={self.hit_rate():.1f}%)"
        )
