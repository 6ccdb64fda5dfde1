"""
Unit Tests for Example Games

Tests for the tic-tac-toe and Nim rules, focusing on:
    - Initial state
    - Wins, draws and illegal moves
    - Board array conversion
"""

import numpy as np
import pytest
from game_search.games import Nim, NimState, Player, TicTacToe, TicTacToeState, board_to_array
from game_search.games.tictactoe import ILLEGAL_STATE, has_line
from game_search.state import Flag


class TestTicTacToe:
    """Tests for tic-tac-toe rules."""

    @pytest.fixture
    def game(self):
        return TicTacToe()

    def test_initial_state(self, game):
        state = game.initial()

        assert state.flags == frozenset()
        assert state.player == Player.X
        assert state.score == 0
        assert state.board == (0,) * 9

    def test_players_alternate(self, game):
        state = game.successor(game.initial(), (1, 1))

        assert state.player == Player.O
        assert state.cell(1, 1) == Player.X.value
        assert game.successor(state, (0, 0)).player == Player.X

    def test_diagonal_win(self, game):
        """X takes the center and completes the main diagonal."""
        state = game.from_moves([(1, 1), (0, 1), (0, 0), (1, 0), (2, 2)])

        assert state.flags == frozenset({Flag.TERMINAL})
        assert state.score == 1
        assert state.player == Player.X
        assert game.winner(state) == Player.X

    def test_anti_diagonal_win_for_o(self, game):
        state = game.from_moves([(0, 0), (0, 2), (0, 1), (1, 1), (2, 2), (2, 0)])

        assert state.flags == frozenset({Flag.TERMINAL})
        assert state.score == 1
        assert state.player == Player.O

    def test_occupied_cell_is_illegal(self, game):
        state = game.successor(game.from_moves([(1, 1)]), (1, 1))

        assert state.flags == frozenset({Flag.ILLEGAL})
        assert state.score == 0

    def test_off_board_is_illegal(self, game):
        assert game.successor(game.initial(), (3, 0)) == ILLEGAL_STATE

    def test_illegal_is_canonical(self, game):
        """The same illegal move twice gives the same state."""
        state = game.from_moves([(0, 0)])

        first = game.successor(state, (0, 0))
        second = game.successor(state, (0, 0))

        assert first == second == ILLEGAL_STATE
        assert game.successor(first, (1, 1)) == ILLEGAL_STATE

    def test_full_board_draw(self, game):
        state = game.from_moves([
            (0, 0), (0, 1), (0, 2),
            (1, 1), (1, 0), (1, 2),
            (2, 1), (2, 0), (2, 2),
        ])

        assert state.flags == frozenset({Flag.TERMINAL})
        assert state.score == 0
        assert game.winner(state) is None

    def test_terminal_state_reproduces_itself(self, game):
        state = game.from_moves([(1, 1), (0, 1), (0, 0), (1, 0), (2, 2)])

        assert game.candidate(state, 0) == game.candidate(state, 1)
        assert game.successor(state, game.candidate(state, 0)) == state

    def test_candidates_cycle_over_empty_cells(self, game):
        state = game.from_moves([(0, 0), (1, 1)])

        candidates = [game.candidate(state, i) for i in range(14)]

        assert candidates[:7] == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)]
        assert candidates[7:] == candidates[:7]

    def test_states_are_hashable_values(self, game):
        a = game.from_moves([(0, 0), (1, 1), (2, 2)])
        b = game.from_moves([(2, 2), (1, 1), (0, 0)])

        assert a == b
        assert hash(a) == hash(b)

    def test_render(self, game):
        state = game.from_moves([(1, 1), (0, 0)])

        assert game.render(state) == "O . .\n. X .\n. . ."
        assert game.render(ILLEGAL_STATE) == "<illegal>"


class TestBoardArray:
    """Tests for numpy board conversion."""

    def test_shape_and_values(self):
        state = TicTacToe().from_moves([(0, 2), (2, 0)])

        array = board_to_array(state)

        assert array.shape == (3, 3)
        assert array.dtype == np.int8
        assert array[0, 2] == 1
        assert array[2, 0] == -1
        assert np.count_nonzero(array) == 2

    def test_has_line(self):
        array = np.array([[1, 1, 1], [-1, -1, 0], [0, 0, 0]], dtype=np.int8)

        assert has_line(array, Player.X)
        assert not has_line(array, Player.O)

    def test_column_line(self):
        board = (-1, 1, 0, -1, 1, 0, -1, 0, 1)
        array = board_to_array(TicTacToeState(board=board))

        assert has_line(array, Player.O)
        assert not has_line(array, Player.X)


class TestNim:
    """Tests for Nim rules."""

    def test_initial_state(self):
        state = Nim(heap=5).initial()

        assert state == NimState(heap=5)
        assert state.flags == frozenset()

    def test_taking_last_stone_wins(self):
        game = Nim(heap=2)

        state = game.successor(game.initial(), 2)

        assert state.flags == frozenset({Flag.TERMINAL})
        assert state.score == 1
        assert state.player == 0

    def test_too_many_stones_is_illegal(self):
        game = Nim(heap=2)

        assert Flag.ILLEGAL in game.successor(game.initial(), 3).flags
        assert Flag.ILLEGAL in Nim(heap=9).successor(Nim(heap=9).initial(), 4).flags

    def test_empty_heap_is_terminal(self):
        assert Flag.TERMINAL in Nim(heap=0).initial().flags

    @pytest.mark.parametrize("heap, max_take", [(-1, 3), (5, 0)])
    def test_invalid_parameters(self, heap, max_take):
        with pytest.raises(ValueError):
            Nim(heap=heap, max_take=max_take)
