"""
Unit Tests for State Module

Tests for the game state contract:
    - Flag helpers (terminal / illegal / live)
    - Perspective scoring
    - FunctionalGame adapter
    - Structural GameState protocol
"""

import pytest
from game_search.state import (
    Flag,
    Game,
    GameState,
    FunctionalGame,
    is_illegal,
    is_terminal,
    is_live,
    perspective_score,
)
from game_search.games import NimState, TicTacToeState
from game_search.search import search_naive, count_children
from tests.trees import TreeNode, MAX, MIN


class TestFlags:
    """Tests for flag helpers."""

    def test_live_state(self):
        state = TreeNode("a")

        assert is_live(state)
        assert not is_terminal(state)
        assert not is_illegal(state)

    def test_terminal_state(self):
        state = TreeNode("a", flags=frozenset({Flag.TERMINAL}))

        assert is_terminal(state)
        assert not is_live(state)
        assert not is_illegal(state)

    def test_illegal_state(self):
        state = TreeNode("a", flags=frozenset({Flag.ILLEGAL}))

        assert is_illegal(state)
        assert not is_live(state)
        assert not is_terminal(state)

    def test_illegal_wins_over_terminal(self):
        """A state carrying both flags is handled as illegal."""
        state = TreeNode("a", flags=frozenset({Flag.TERMINAL, Flag.ILLEGAL}))

        assert is_illegal(state)
        assert not is_terminal(state)
        assert not is_live(state)

    def test_other_flags_are_ignored(self):
        state = TreeNode("a", flags=frozenset({"check"}))

        assert is_live(state)


class TestPerspectiveScore:
    """Tests for zero-sum perspective conversion."""

    def test_own_score_kept(self):
        state = TreeNode("a", score=2, player=MAX)
        assert perspective_score(state, MAX) == 2

    def test_opponent_score_negated(self):
        state = TreeNode("a", score=2, player=MIN)
        assert perspective_score(state, MAX) == -2

    def test_zero_is_symmetric(self):
        state = TreeNode("a", score=0, player=MIN)
        assert perspective_score(state, MAX) == 0


class TestGameInterface:
    """Tests for the Game interface and its adapters."""

    def test_game_is_abstract(self):
        with pytest.raises(TypeError):
            Game()

    def test_functional_game(self):
        """A game assembled from plain functions can be searched."""

        def initial():
            return NimState(heap=5)

        def candidate(state, index):
            return 1 + index % min(2, state.heap) if is_live(state) else 1

        def successor(state, move):
            if not is_live(state) or move > state.heap:
                return NimState(flags=frozenset({Flag.ILLEGAL}))
            heap = state.heap - move
            if heap == 0:
                return NimState(score=1, flags=frozenset({Flag.TERMINAL}), player=state.player)
            return NimState(heap=heap, player=1 - state.player)

        game = FunctionalGame(initial, candidate, successor)
        state = game.initial()

        assert count_children(state, game) == 2
        # Heap 5, take 1 or 2: leave a multiple of 3
        assert search_naive(state, game).heap == 3
        assert "successor" in repr(game)

    def test_is_live_on_game(self):
        game = FunctionalGame(lambda: TreeNode("a"), lambda s, i: 0, lambda s, m: s)
        assert game.is_live(game.initial())


class TestGameStateProtocol:
    """Tests for the structural GameState protocol."""

    def test_dataclass_states_conform(self):
        assert isinstance(TicTacToeState(), GameState)
        assert isinstance(NimState(), GameState)
        assert isinstance(TreeNode("a"), GameState)

    def test_missing_field_does_not_conform(self):
        class NoPlayer:
            score = 0
            flags = frozenset()

        assert not isinstance(NoPlayer(), GameState)
