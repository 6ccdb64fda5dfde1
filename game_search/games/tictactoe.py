"""
Tic-Tac-Toe

A 3x3 tic-tac-toe implementation of the game contract.

Board Representation:
    The board is a tuple of 9 cells in row-major order:
        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8
    Each cell holds 1 (X), -1 (O) or 0 (empty). For win detection the
    tuple is converted to a (3, 3) numpy array, where a line belongs to a
    player when its sum is +3 or -3.

Moves:
    A move is a (row, col) pair. candidate(state, i) cycles through the
    empty cells in row-major order, so a state with n empty cells has
    exactly n candidate moves.

Scoring:
    - A win scores 1, credited to the player who completed the line
    - A full board without a line scores 0
    - Live states score 0 (no heuristic evaluation)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Tuple

import numpy as np

from game_search.state.contract import Flag, Game, is_illegal, is_live

Move = Tuple[int, int]

BOARD_SIZE = 3
EMPTY = 0


class Player(Enum):
    """The two tic-tac-toe players. Values are the cell markers."""
    X = 1
    O = -1

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TicTacToeState:
    """
    Immutable tic-tac-toe position.

    Attributes:
        board: 9 cells in row-major order (1 = X, -1 = O, 0 = empty)
        score: 1 for a win, 0 otherwise, credited to player
        flags: Subset of {Flag.TERMINAL, Flag.ILLEGAL}
        player: Player to move, or the credited player when terminal
    """
    board: Tuple[int, ...] = (EMPTY,) * (BOARD_SIZE * BOARD_SIZE)
    score: float = 0
    flags: FrozenSet[Flag] = field(default_factory=frozenset)
    player: Player = Player.X

    def cell(self, row: int, col: int) -> int:
        return self.board[row * BOARD_SIZE + col]

    def empty_cells(self) -> Tuple[Move, ...]:
        """Coordinates of the empty cells in row-major order."""
        return tuple(
            divmod(index, BOARD_SIZE)
            for index, value in enumerate(self.board)
            if value == EMPTY
        )


# Every illegal move produces this same state
ILLEGAL_STATE = TicTacToeState(flags=frozenset({Flag.ILLEGAL}))


def board_to_array(state: TicTacToeState) -> np.ndarray:
    """
    Convert a state's board to a (3, 3) numpy array.

    Args:
        state: Tic-tac-toe state

    Returns:
        numpy array of shape (3, 3) with dtype int8
        (1 = X, -1 = O, 0 = empty)
    """
    return np.array(state.board, dtype=np.int8).reshape(BOARD_SIZE, BOARD_SIZE)


def line_sums(array: np.ndarray) -> np.ndarray:
    """
    Sum every row, column and diagonal of a board array.

    Returns:
        numpy array of 8 sums: 3 rows, 3 columns, main and anti diagonal
    """
    return np.concatenate([
        array.sum(axis=1),
        array.sum(axis=0),
        [np.trace(array), np.trace(np.fliplr(array))],
    ])


def has_line(array: np.ndarray, player: Player) -> bool:
    """Return True if player owns a complete row, column or diagonal."""
    return bool(np.any(line_sums(array) == player.value * BOARD_SIZE))


class TicTacToe(Game[TicTacToeState, Move]):
    """
    Tic-tac-toe rules.

    Example:
        >>> game = TicTacToe()
        >>> state = game.from_moves([(1, 1), (0, 0)])
        >>> print(game.render(state))
        O . .
        . X .
        . . .
    """

    def initial(self) -> TicTacToeState:
        return TicTacToeState()

    def candidate(self, state: TicTacToeState, index: int) -> Move:
        """
        Return the index-th empty cell, cycling over the empty cells.

        Flagged states (and a full board) have a single candidate, (0, 0).
        """
        if not is_live(state):
            return (0, 0)

        empties = state.empty_cells()
        if not empties:
            return (0, 0)

        return empties[index % len(empties)]

    def successor(self, state: TicTacToeState, move: Move) -> TicTacToeState:
        """
        Place the mover's mark on a cell.

        Returns:
            - ILLEGAL_STATE for an occupied or out-of-range cell, or when
              moving from an illegal state
            - the state itself when it is already terminal
            - a TERMINAL state when the move completes a line or fills the board
            - otherwise a live state with the opponent to move
        """
        if is_illegal(state):
            return ILLEGAL_STATE

        if not is_live(state):
            return state

        row, col = move
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ILLEGAL_STATE

        index = row * BOARD_SIZE + col
        if state.board[index] != EMPTY:
            return ILLEGAL_STATE

        mover = state.player
        board = state.board[:index] + (mover.value,) + state.board[index + 1:]
        placed = TicTacToeState(board=board, player=mover.opponent)
        array = board_to_array(placed)

        if has_line(array, mover):
            return TicTacToeState(
                board=board,
                score=1,
                flags=frozenset({Flag.TERMINAL}),
                player=mover,
            )

        if not np.any(array == EMPTY):
            # Draw
            return TicTacToeState(
                board=board,
                score=0,
                flags=frozenset({Flag.TERMINAL}),
                player=mover,
            )

        return placed

    def from_moves(self, moves: Iterable[Move]) -> TicTacToeState:
        """
        Build a position by playing moves from the initial state.

        Args:
            moves: Sequence of (row, col) pairs, X moving first

        Returns:
            The resulting state (ILLEGAL_STATE if any move was illegal)
        """
        state = self.initial()
        for move in moves:
            state = self.successor(state, move)
        return state

    def winner(self, state: TicTacToeState):
        """Return the winning Player, or None for a draw or an unfinished game."""
        if Flag.TERMINAL in state.flags and state.score > 0:
            return state.player
        return None

    def render(self, state: TicTacToeState) -> str:
        """Render the board as three lines of 'X', 'O' and '.'."""
        if is_illegal(state):
            return "<illegal>"

        symbols = {Player.X.value: "X", Player.O.value: "O", EMPTY: "."}
        rows = []
        for row in range(BOARD_SIZE):
            rows.append(" ".join(symbols[state.cell(row, col)] for col in range(BOARD_SIZE)))
        return "\n".join(rows)
