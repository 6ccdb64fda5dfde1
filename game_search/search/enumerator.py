"""
Successor Enumeration

This module turns a game's candidate() function into the finite sequence of
child states of a position. Games never declare how many moves a state has;
instead candidate(state, i) is required to be periodic in i, and the end of
the legal moves is detected when the first candidate comes around again.

Algorithm:
    1. first = candidate(state, 0)
    2. For i = 0, 1, 2, ...:
        a. move = candidate(state, i)
        b. If i > 0 and move == first: stop (this child is not yielded)
        c. Yield successor(state, move)

Properties:
    - Finite: at most K children, K being the period of candidate()
    - Restartable: calling again on the same state yields the same sequence
    - Lazy: children are built one at a time, so a pruned search only pays
      for the children it actually looks at
"""

import logging
from typing import Iterator, TypeVar

from game_search.search.config import DEFAULT_MAX_CANDIDATES
from game_search.state.contract import Game, is_illegal

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")


def enumerate_children(
    state: StateT,
    game: Game,
    skip_illegal: bool = False,
    max_candidates: int = DEFAULT_MAX_CANDIDATES,
) -> Iterator[StateT]:
    """
    Lazily generate the child states of a position.

    Illegal children are yielded like any other (the search decides what to
    do with them) unless skip_illegal is set.

    Args:
        state: Position to expand
        game: Rules providing candidate() and successor()
        skip_illegal: If True, do not yield ILLEGAL-flagged children
        max_candidates: Stop after this many candidates even if the
            candidate sequence never repeats

    Yields:
        Child states in candidate order

    Example:
        >>> game = TicTacToe()
        >>> len(list(enumerate_children(game.initial(), game)))
        9
    """
    first = game.candidate(state, 0)
    index = 0

    while True:
        move = first if index == 0 else game.candidate(state, index)

        # Cycle detected: every legal move has been produced
        if index > 0 and move == first:
            return

        if index >= max_candidates:
            logger.warning(
                f"Candidate sequence did not cycle within {max_candidates} moves "
                f"for {state!r}; stopping enumeration"
            )
            return

        child = game.successor(state, move)
        index += 1

        if skip_illegal and is_illegal(child):
            continue

        yield child


def count_children(
    state: StateT,
    game: Game,
    max_candidates: int = DEFAULT_MAX_CANDIDATES,
) -> int:
    """
    Count the moves of a position (the period K of candidate()).

    Args:
        state: Position to expand
        game: Rules providing candidate() and successor()
        max_candidates: Enumeration cap, see enumerate_children()

    Returns:
        int: Number of children, illegal ones included
    """
    return sum(1 for _ in enumerate_children(state, game, max_candidates=max_candidates))
