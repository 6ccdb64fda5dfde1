"""
Minimax Search with Alpha-Beta Pruning

This module implements the search algorithms of the library. Minimax
explores the game tree to find the best move, assuming both players play
optimally; alpha-beta pruning skips the branches that cannot change the
result.

Key Concepts:
    - Naive minimax: Visits every node of the tree (correctness baseline)
    - Depth-bounded minimax: Stops after a fixed number of plies and uses
      the state's own score there
    - Alpha-Beta: Same result as minimax while visiting fewer nodes

Perspective:
    Every value is expressed from the point of view of the player on turn
    at the root. A node where that player moves takes the maximum over its
    children, any other node takes the minimum. Scores credited to the
    opponent are negated (zero-sum).

Tie-break:
    Among children of equal value the first one in enumeration order is
    chosen, for every strategy.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor, d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import math
from typing import Any, Hashable, List, NamedTuple, Optional

from game_search.search.config import DEFAULT_MAX_CANDIDATES, SearchConfig
from game_search.search.enumerator import enumerate_children
from game_search.search.errors import InvalidDepthError, NoLegalMovesError
from game_search.search.transposition import (
    MAX_DEPTH,
    NodeType,
    TranspositionTable,
    make_key,
)
from game_search.state.contract import (
    Game,
    is_live,
    is_terminal,
    perspective_score,
)

logger = logging.getLogger(__name__)

INFINITY = math.inf


class SearchResult(NamedTuple):
    """
    Outcome of a root search.

    Attributes:
        state: The chosen child state
        score: Value of the chosen child from the root player's point of view
        nodes: Number of states visited, root included
    """
    state: Any
    score: float
    nodes: int


def _child_depth(depth: Optional[int]) -> Optional[int]:
    return None if depth is None else depth - 1


def _table_depth(depth: Optional[int]) -> int:
    return MAX_DEPTH if depth is None else depth


def minimax_value(
    state: Any,
    game: Game,
    player: Hashable,
    depth: Optional[int] = None,
    transposition_table: Optional[TranspositionTable] = None,
    nodes_searched: Optional[List[int]] = None,
    max_candidates: int = DEFAULT_MAX_CANDIDATES,
) -> float:
    """
    Plain minimax value of a state.

    Used for both the naive (depth=None) and the depth-bounded search.

    Args:
        state: State to evaluate
        game: Rules used to expand the state
        player: Player whose point of view values are expressed in
        depth: Remaining plies (None = search to the end of the game)
        transposition_table: Optional cache of exact node values
        nodes_searched: Optional mutable list [count] to track states visited
        max_candidates: Enumeration cap per state

    Returns:
        float: Value of the state for player

    Algorithm:
        1. Terminal state or depth = 0 → the state's own score
        2. Recursively value each legal child (illegal children skipped)
        3. Max over children if player moves here, min otherwise
        4. No legal child → the state is scored like a terminal state
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    # Base case: leaf node
    if is_terminal(state) or depth == 0:
        return perspective_score(state, player)

    key = None
    if transposition_table is not None:
        key = make_key(state, player)
        entry = transposition_table.lookup(key, _table_depth(depth), exact_depth=True)
        if entry is not None and entry.node_type == NodeType.EXACT:
            return entry.value

    maximizing = state.player == player
    best_value: Optional[float] = None
    best_child = None

    for child in enumerate_children(
        state, game, skip_illegal=True, max_candidates=max_candidates
    ):
        value = minimax_value(
            child,
            game,
            player,
            _child_depth(depth),
            transposition_table,
            nodes_searched,
            max_candidates,
        )

        if best_value is None or (value > best_value if maximizing else value < best_value):
            best_value = value
            best_child = child

    # Live state without a single legal move: treat it as terminal
    if best_value is None:
        best_value = perspective_score(state, player)

    if key is not None:
        transposition_table.store(
            key, _table_depth(depth), best_value, NodeType.EXACT, best_child
        )

    return best_value


def alphabeta_value(
    state: Any,
    game: Game,
    player: Hashable,
    alpha: float = -INFINITY,
    beta: float = INFINITY,
    depth: Optional[int] = None,
    transposition_table: Optional[TranspositionTable] = None,
    nodes_searched: Optional[List[int]] = None,
    max_candidates: int = DEFAULT_MAX_CANDIDATES,
) -> float:
    """
    Minimax value of a state with alpha-beta pruning (fail-soft).

    If the true value lies strictly between alpha and beta it is returned
    exactly. Otherwise the returned value is a bound on the same side of
    the window as the true value.

    Args:
        state: State to evaluate
        game: Rules used to expand the state
        player: Player whose point of view values are expressed in
        alpha: Best value the maximizer can already guarantee
        beta: Best value the minimizer can already guarantee
        depth: Remaining plies (None = search to the end of the game)
        transposition_table: Optional cache for node values and bounds
        nodes_searched: Optional mutable list [count] to track states visited
        max_candidates: Enumeration cap per state

    Returns:
        float: Value of the state for player

    Example:
        If the maximizer has already found a move worth 5 (alpha=5) and,
        below another move, the minimizer finds a reply worth 3, the rest
        of that reply list is skipped: the maximizer will never allow it.
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    # Base case: leaf node
    if is_terminal(state) or depth == 0:
        return perspective_score(state, player)

    alpha_orig, beta_orig = alpha, beta

    key = None
    if transposition_table is not None:
        key = make_key(state, player)
        entry = transposition_table.lookup(key, _table_depth(depth), exact_depth=True)
        if entry is not None:
            if entry.node_type == NodeType.EXACT:
                return entry.value
            if entry.node_type == NodeType.LOWER_BOUND:
                alpha = max(alpha, entry.value)
            elif entry.node_type == NodeType.UPPER_BOUND:
                beta = min(beta, entry.value)
            if alpha >= beta:
                return entry.value

    maximizing = state.player == player
    value = -INFINITY if maximizing else INFINITY
    best_child = None
    searched_any = False

    for child in enumerate_children(
        state, game, skip_illegal=True, max_candidates=max_candidates
    ):
        child_value = alphabeta_value(
            child,
            game,
            player,
            alpha,
            beta,
            _child_depth(depth),
            transposition_table,
            nodes_searched,
            max_candidates,
        )

        if maximizing:
            if not searched_any or child_value > value:
                value = child_value
                best_child = child
            alpha = max(alpha, value)
        else:
            if not searched_any or child_value < value:
                value = child_value
                best_child = child
            beta = min(beta, value)
        searched_any = True

        # Cutoff: the other player will never allow this line
        if alpha >= beta:
            break

    if not searched_any:
        value = perspective_score(state, player)
        node_type = NodeType.EXACT
    elif value <= alpha_orig:
        node_type = NodeType.UPPER_BOUND
    elif value >= beta_orig:
        node_type = NodeType.LOWER_BOUND
    else:
        node_type = NodeType.EXACT

    if key is not None:
        transposition_table.store(key, _table_depth(depth), value, node_type, best_child)

    return value


def find_best_child(
    state: Any,
    game: Game,
    config: Optional[SearchConfig] = None,
    transposition_table: Optional[TranspositionTable] = None,
) -> SearchResult:
    """
    Find the best child of a state.

    The root is always a maximizing node: values are expressed from the
    point of view of state.player. Each child is valued with the configured
    strategy and the first child of maximal value wins. With pruning, the
    best value so far is passed down as alpha, so later children are only
    searched far enough to show they are not strictly better.

    Args:
        state: Current state (must be live)
        game: Rules used to expand states
        config: Strategy and limits (default: unbounded alpha-beta)
        transposition_table: Optional cache; one is created when
            config.use_transposition_table is set and none is given

    Returns:
        SearchResult(state, score, nodes)

    Raises:
        NoLegalMovesError: If the state is terminal, illegal, or has no
            legal child
    """
    if config is None:
        config = SearchConfig()

    if not is_live(state):
        raise NoLegalMovesError(state)

    if transposition_table is None and config.use_transposition_table:
        transposition_table = TranspositionTable(max_size=config.tt_size)

    player = state.player
    child_depth = None if config.depth is None else max(config.depth - 1, 0)
    nodes = [1]

    best_state = None
    best_score = -INFINITY

    for child in enumerate_children(
        state, game, skip_illegal=True, max_candidates=config.max_candidates
    ):
        if config.strategy == "prune":
            score = alphabeta_value(
                child,
                game,
                player,
                best_score,
                INFINITY,
                child_depth,
                transposition_table,
                nodes,
                config.max_candidates,
            )
        else:
            score = minimax_value(
                child,
                game,
                player,
                child_depth,
                transposition_table,
                nodes,
                config.max_candidates,
            )

        if best_state is None or score > best_score:
            best_state = child
            best_score = score

    if best_state is None:
        raise NoLegalMovesError(state)

    logger.debug(
        f"{config.strategy} search (depth={config.depth}): "
        f"score={best_score}, nodes={nodes[0]}"
    )

    return SearchResult(best_state, best_score, nodes[0])


def search_naive(state: Any, game: Game) -> Any:
    """
    Choose a child by exhaustive minimax.

    Args:
        state: Current state (must be live)
        game: Rules used to expand states

    Returns:
        The chosen child state

    Raises:
        NoLegalMovesError: If the state has no legal move
    """
    return find_best_child(state, game, SearchConfig(strategy="naive")).state


def search_depth(state: Any, depth: int, game: Game) -> Any:
    """
    Choose a child by minimax limited to depth plies.

    Depth counts plies from the root. The root is always expanded, so
    depth 0 and depth 1 both rank the children by their own scores.

    Args:
        state: Current state (must be live)
        depth: Number of plies to look ahead (>= 0)
        game: Rules used to expand states

    Returns:
        The chosen child state

    Raises:
        InvalidDepthError: If depth is negative
        NoLegalMovesError: If the state has no legal move
    """
    if depth < 0:
        raise InvalidDepthError(depth)
    return find_best_child(state, game, SearchConfig(strategy="depth", depth=depth)).state


def search_prune(state: Any, game: Game, depth: Optional[int] = None) -> Any:
    """
    Choose a child by minimax with alpha-beta pruning.

    Always returns the same child as search_naive() (or search_depth()
    with the same depth).

    Args:
        state: Current state (must be live)
        game: Rules used to expand states
        depth: Optional depth bound in plies

    Returns:
        The chosen child state

    Raises:
        InvalidDepthError: If depth is negative
        NoLegalMovesError: If the state has no legal move
    """
    if depth is not None and depth < 0:
        raise InvalidDepthError(depth)
    return find_best_child(state, game, SearchConfig(strategy="prune", depth=depth)).state


def principal_variation(
    state: Any,
    game: Game,
    config: Optional[SearchConfig] = None,
    transposition_table: Optional[TranspositionTable] = None,
    max_length: Optional[int] = None,
) -> List[Any]:
    """
    Play out the line the configured search would choose.

    Starting from state, repeatedly applies find_best_child() until a state
    with no legal move is reached (or max_length moves were played). Each
    move is searched from the point of view of the player on turn.

    Args:
        state: Starting state
        game: Rules used to expand states
        config: Strategy and limits (default: unbounded alpha-beta)
        transposition_table: Optional cache shared by all the searches
        max_length: Maximum number of moves to play (None = to the end)

    Returns:
        List of states, starting with state itself
    """
    if config is None:
        config = SearchConfig()

    if transposition_table is None and config.use_transposition_table:
        transposition_table = TranspositionTable(max_size=config.tt_size)

    line = [state]
    current = state

    while is_live(current):
        if max_length is not None and len(line) > max_length:
            break
        try:
            result = find_best_child(current, game, config, transposition_table)
        except NoLegalMovesError:
            break
        current = result.state
        line.append(current)

    return line
