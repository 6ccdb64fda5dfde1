"""
Explicit game trees for tests.

build_tree() turns a nested list into a TreeGame:
    - a number is a terminal leaf whose score is credited to MAX
    - Leaf(...) is a leaf with explicit score, flags and player
    - Inner(children, score) is an inner node with its own static score
    - ILLEGAL is a child reached by an illegal move
    - a list is an inner node whose children are its items

The root belongs to MAX and players alternate with depth.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from game_search.state import Flag, Game

MAX = "max"
MIN = "min"
ILLEGAL = "illegal"

TERMINAL_FLAGS = frozenset({Flag.TERMINAL})


@dataclass(frozen=True)
class TreeNode:
    name: str
    score: float = 0
    flags: FrozenSet[Flag] = field(default_factory=frozenset)
    player: str = MAX


ILLEGAL_NODE = TreeNode("illegal", flags=frozenset({Flag.ILLEGAL}))


@dataclass(frozen=True)
class Leaf:
    score: float
    flags: FrozenSet[Flag] = TERMINAL_FLAGS
    player: Optional[str] = None


@dataclass(frozen=True)
class Inner:
    children: list
    score: float = 0


def other(player: str) -> str:
    return MIN if player == MAX else MAX


class TreeGame(Game[TreeNode, int]):
    """Game whose moves are child indices in an explicit tree."""

    def __init__(self, root: TreeNode, edges: Dict[str, List[TreeNode]]):
        self.root = root
        self.edges = edges

    def initial(self) -> TreeNode:
        return self.root

    def candidate(self, state: TreeNode, index: int) -> int:
        children = self.edges.get(state.name)
        if not children:
            return -1
        return index % len(children)

    def successor(self, state: TreeNode, move: int) -> TreeNode:
        children = self.edges.get(state.name)
        if not children or not 0 <= move < len(children):
            return ILLEGAL_NODE
        return children[move]

    def node(self, name: str) -> TreeNode:
        """Find a node by name (e.g. 'r.0.1')."""
        if name == self.root.name:
            return self.root
        parent, _, index = name.rpartition(".")
        return self.edges[parent][int(index)]


def _build(spec, player: str, name: str, edges: Dict[str, List[TreeNode]]) -> TreeNode:
    if isinstance(spec, (int, float)):
        return TreeNode(name, score=spec, flags=TERMINAL_FLAGS, player=MAX)
    if isinstance(spec, Leaf):
        return TreeNode(name, score=spec.score, flags=spec.flags, player=spec.player or player)
    if spec == ILLEGAL:
        return ILLEGAL_NODE

    score = 0
    if isinstance(spec, Inner):
        spec, score = spec.children, spec.score

    edges[name] = [
        _build(child, other(player), f"{name}.{index}", edges)
        for index, child in enumerate(spec)
    ]
    return TreeNode(name, score=score, player=player)


def build_tree(spec) -> TreeGame:
    """Build a TreeGame from a nested list, root named 'r'."""
    edges: Dict[str, List[TreeNode]] = {}
    root = _build(spec, MAX, "r", edges)
    return TreeGame(root, edges)


def random_tree_spec(rng: random.Random, depth: int, branching: int, scores=range(-3, 4)):
    """Nested list with a random branching factor (1..branching) and leaf scores."""
    if depth == 0:
        return rng.choice(list(scores))
    return [
        random_tree_spec(rng, depth - 1, branching, scores)
        for _ in range(rng.randint(1, branching))
    ]
