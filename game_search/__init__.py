"""
game_search: Generic Adversarial Search

A small library for two-player, zero-sum game tree search. Any game whose
states expose a score, a set of flags and the player on turn can be plugged
in; the library enumerates successor states and picks the best move with
minimax.

## Architecture

The library is organized into several key modules:

1. **state**: The state contract
   - Flag enumeration (TERMINAL, ILLEGAL)
   - GameState protocol and the Game interface (initial/candidate/successor)

2. **search**: Search algorithms
   - Successor enumeration by candidate cycle detection
   - Naive minimax, depth-bounded minimax, alpha-beta pruning
   - Transposition table keyed by state

3. **games**: Example games exercising the contract
   - TicTacToe (3x3 grid)
   - Nim (single heap)

4. **utils**: Benchmarking utilities
   - Node counts and timings per strategy on a fixed position suite

## Quick Start

```python
from game_search.games import TicTacToe
from game_search.search import search_prune

game = TicTacToe()
state = game.initial()
while game.is_live(state):
    state = search_prune(state, game)
print(game.render(state))
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from game_search.state import Flag, Game, FunctionalGame
from game_search.search import (
    enumerate_children,
    search_naive,
    search_depth,
    search_prune,
    find_best_child,
    SearchConfig,
)

__all__ = [
    'Flag',
    'Game',
    'FunctionalGame',
    'enumerate_children',
    'search_naive',
    'search_depth',
    'search_prune',
    'find_best_child',
    'SearchConfig',
]
