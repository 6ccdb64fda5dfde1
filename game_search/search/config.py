"""
Search configuration.
"""

from dataclasses import dataclass
from typing import Optional

from game_search.search.errors import InvalidDepthError

STRATEGIES = ("naive", "depth", "prune")

DEFAULT_MAX_CANDIDATES = 10_000


@dataclass
class SearchConfig:
    """Configuration for a root search.

    Groups the strategy choice and its limits in one place so the tools and
    the benchmark utilities can run the same search from the command line.
    """

    strategy: str = "prune"
    """Search strategy: 'naive', 'depth' or 'prune'"""

    depth: Optional[int] = None
    """Depth bound in plies (required for 'depth', optional for 'prune')"""

    # Enumeration
    max_candidates: int = DEFAULT_MAX_CANDIDATES
    """Stop enumerating a state's children after this many candidates"""

    # Caching
    use_transposition_table: bool = False
    """Cache node values in a transposition table"""

    tt_size: int = 1_000_000
    """Maximum number of transposition table entries"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"strategy should be one of {', '.join(STRATEGIES)}, got {self.strategy!r}"
            )

        if self.depth is not None and self.depth < 0:
            raise InvalidDepthError(self.depth)

        if self.strategy == "naive" and self.depth is not None:
            raise ValueError("naive search is unbounded, depth must be None")

        if self.strategy == "depth" and self.depth is None:
            raise ValueError("depth search requires a depth bound")

        if self.max_candidates <= 0:
            raise ValueError(f"max_candidates must be positive, got {self.max_candidates}")

        if self.tt_size <= 0:
            raise ValueError(f"tt_size must be positive, got {self.tt_size}")

    def __repr__(self) -> str:
        """String representation of config."""
        depth = "unbounded" if self.depth is None else self.depth
        tt = f"on ({self.tt_size:,} entries)" if self.use_transposition_table else "off"
        return f"SearchConfig(strategy={self.strategy}, depth={depth}, tt={tt})"
