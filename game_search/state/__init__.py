"""
State Module

This module defines the contract between a game and the search engine.
The key design principle is that games are PLUGGABLE - the search
algorithms work with any state type that exposes score, flags and player,
together with a Game providing initial/candidate/successor.

Key Components:
    - Flag: The two reserved status markers (TERMINAL, ILLEGAL)
    - GameState: Structural protocol for states
    - Game (ABC): Abstract interface for game rules
    - FunctionalGame: Game assembled from three plain functions

Data Flow:
    state → game.candidate(state, i) → move → game.successor(state, move) → child
"""

from game_search.state.contract import (
    Flag,
    GameState,
    Game,
    FunctionalGame,
    is_illegal,
    is_terminal,
    is_live,
    perspective_score,
)

__all__ = [
    'Flag',
    'GameState',
    'Game',
    'FunctionalGame',
    'is_illegal',
    'is_terminal',
    'is_live',
    'perspective_score',
]
