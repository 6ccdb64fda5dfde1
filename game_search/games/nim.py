"""
Single-heap Nim.

Players alternately take between 1 and max_take stones from one heap. The
player who takes the last stone wins. Positions where the heap is a multiple
of (max_take + 1) are lost for the player to move.
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from game_search.state.contract import Flag, Game, is_illegal, is_live

FIRST_PLAYER = 0
SECOND_PLAYER = 1


@dataclass(frozen=True)
class NimState:
    heap: int = 0
    score: float = 0
    flags: FrozenSet[Flag] = field(default_factory=frozenset)
    player: int = FIRST_PLAYER


ILLEGAL_STATE = NimState(flags=frozenset({Flag.ILLEGAL}))


class Nim(Game[NimState, int]):
    """
    Nim rules for a given starting heap.

    A move is the number of stones to take.
    """

    def __init__(self, heap: int = 7, max_take: int = 3):
        if heap < 0:
            raise ValueError(f"heap must be non-negative, got {heap}")
        if max_take < 1:
            raise ValueError(f"max_take must be at least 1, got {max_take}")
        self.heap = heap
        self.max_take = max_take

    def initial(self) -> NimState:
        if self.heap == 0:
            # Nothing to take: the game is over before it starts
            return NimState(heap=0, flags=frozenset({Flag.TERMINAL}))
        return NimState(heap=self.heap)

    def candidate(self, state: NimState, index: int) -> int:
        if not is_live(state):
            return 1
        return 1 + index % min(self.max_take, state.heap)

    def successor(self, state: NimState, move: int) -> NimState:
        if is_illegal(state):
            return ILLEGAL_STATE
        if not is_live(state):
            return state
        if move < 1 or move > self.max_take or move > state.heap:
            return ILLEGAL_STATE

        heap = state.heap - move
        if heap == 0:
            return NimState(heap=0, score=1, flags=frozenset({Flag.TERMINAL}), player=state.player)
        return NimState(heap=heap, player=1 - state.player)

    def is_losing(self, state: NimState) -> bool:
        """True if the player to move loses against perfect play."""
        return state.heap % (self.max_take + 1) == 0

    def __repr__(self) -> str:
        return f"Nim(heap={self.heap}, max_take={self.max_take})"
