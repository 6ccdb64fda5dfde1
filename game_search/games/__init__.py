"""
Games Module

Example games implementing the state contract. They are used by the tests,
the benchmark utilities and the command-line tools.

Key Components:
    - TicTacToe: 3x3 tic-tac-toe, moves are (row, col) pairs
    - Nim: Single-heap Nim, moves are stone counts
"""

from game_search.games.tictactoe import TicTacToe, TicTacToeState, Player, board_to_array
from game_search.games.nim import Nim, NimState

__all__ = [
    'TicTacToe',
    'TicTacToeState',
    'Player',
    'board_to_array',
    'Nim',
    'NimState',
]
