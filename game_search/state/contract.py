"""
Game State Contract

This module defines what a game has to provide so the search algorithms can
work with it. The search never looks inside a state beyond three fields and
never looks inside a move at all, so any game implementing the contract can
be searched without modifying the search code.

Key Principles:
    1. States are immutable values; every move produces a new state
    2. score is always from the perspective of state.player
    3. Illegal moves are data (an ILLEGAL-flagged state), not exceptions
    4. The legal moves of a state are discovered by cycling through
       candidate(state, 0), candidate(state, 1), ... until the first
       candidate comes around again

Convention:
    - TERMINAL states carry the authoritative score, credited to state.player
    - ILLEGAL states have zero score and only the ILLEGAL flag set
    - Any other flags are game-specific payload and ignored by the search
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import (
    AbstractSet,
    Callable,
    Generic,
    Hashable,
    Protocol,
    TypeVar,
    runtime_checkable,
)


class Flag(Enum):
    """
    Status markers the search engine interprets.

    A state is ILLEGAL, TERMINAL or live (neither flag set). If a state
    carries both flags it is treated as ILLEGAL.
    """
    TERMINAL = "terminal"
    ILLEGAL = "illegal"


@runtime_checkable
class GameState(Protocol):
    """
    Structural interface of a searchable state.

    Any object with these three attributes satisfies the protocol; no base
    class is required.

    Attributes:
        score: Value of the state from the perspective of player
        flags: Set of Flag values (and any game-specific markers)
        player: Whose turn it is, or who is credited with score when terminal
    """

    score: float
    flags: AbstractSet
    player: Hashable


StateT = TypeVar("StateT")
MoveT = TypeVar("MoveT")


def is_illegal(state: GameState) -> bool:
    """Return True if the state represents a rejected move."""
    return Flag.ILLEGAL in state.flags


def is_terminal(state: GameState) -> bool:
    """Return True if the state ends the game (and is not illegal)."""
    return Flag.TERMINAL in state.flags and Flag.ILLEGAL not in state.flags


def is_live(state: GameState) -> bool:
    """Return True if moves can still be generated from the state."""
    return not (Flag.TERMINAL in state.flags or Flag.ILLEGAL in state.flags)


def perspective_score(state: GameState, player: Hashable) -> float:
    """
    Express a state's score from the point of view of a given player.

    Scores are zero-sum: one player's gain is the other's loss, so a score
    credited to the opponent is negated.

    Args:
        state: State whose score to read
        player: Player whose point of view is wanted

    Returns:
        float: state.score if state.player is player, else -state.score
    """
    if state.player == player:
        return state.score
    return -state.score


class Game(ABC, Generic[StateT, MoveT]):
    """
    Abstract interface bundling the rules of a game.

    All games must implement initial(), candidate() and successor(). The
    search engine only ever calls these three methods.

    Methods:
        initial(): Starting state of the game
        candidate(state, index): The index-th candidate move, periodic in index
        successor(state, move): State reached by playing move in state
    """

    @abstractmethod
    def initial(self) -> StateT:
        """
        Build the starting state.

        Returns:
            A state with score 0, no flags and the first player on turn
        """
        pass

    @abstractmethod
    def candidate(self, state: StateT, index: int) -> MoveT:
        """
        Return the index-th candidate move for a state.

        Must be deterministic and periodic: with K the number of legal
        moves of the state, candidate(state, i) == candidate(state, i + K)
        for every i >= 0, and the first K candidates must be distinct.
        Flagged states may return a single constant candidate (K = 1).

        Args:
            state: State to generate a move for
            index: Non-negative candidate index

        Returns:
            An opaque move descriptor comparable with ==
        """
        pass

    @abstractmethod
    def successor(self, state: StateT, move: MoveT) -> StateT:
        """
        Apply a move to a state.

        Args:
            state: Parent state (left untouched)
            move: Move descriptor, usually from candidate()

        Returns:
            The child state; ILLEGAL-flagged if the move is not legal,
            TERMINAL-flagged if the move ends the game
        """
        pass

    def is_live(self, state: StateT) -> bool:
        """Return True if the game can continue from the state."""
        return is_live(state)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class FunctionalGame(Game[StateT, MoveT]):
    """
    Game built from three plain functions.

    Lets a state type and its move functions be plugged into the search
    without writing a Game subclass.

    Example:
        >>> game = FunctionalGame(NimState, nim_candidate, nim_successor)
        >>> search_naive(game.initial(), game)
    """

    def __init__(
        self,
        initial: Callable[[], StateT],
        candidate: Callable[[StateT, int], MoveT],
        successor: Callable[[StateT, MoveT], StateT],
    ):
        self._initial = initial
        self._candidate = candidate
        self._successor = successor

    def initial(self) -> StateT:
        return self._initial()

    def candidate(self, state: StateT, index: int) -> MoveT:
        return self._candidate(state, index)

    def successor(self, state: StateT, move: MoveT) -> StateT:
        return self._successor(state, move)

    def __repr__(self) -> str:
        name = getattr(self._successor, "__name__", repr(self._successor))
        return f"FunctionalGame(successor={name})"
