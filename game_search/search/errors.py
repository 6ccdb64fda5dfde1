"""Exception classes raised by the search engine."""


class SearchError(Exception):
    """Base exception for all search errors."""


class NoLegalMovesError(SearchError, ValueError):
    """Raised when a search is asked to choose a move from a state that has none."""

    def __init__(self, state) -> None:
        self.state = state
        super().__init__(f"No legal moves available from {state!r}")


class InvalidDepthError(SearchError, ValueError):
    """Raised when a depth bound is negative."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"Search depth must be non-negative, got {depth}")


__all__ = [
    "SearchError",
    "NoLegalMovesError",
    "InvalidDepthError",
]
