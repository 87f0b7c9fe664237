"""
Games module - board representation and move engine.
"""

from reversi.games.game_state import GameState
from reversi.games.game_rules import (
    DIRECTIONS,
    in_bounds,
    initial_board,
    empty_board,
    move_scores,
    legal_moves,
    has_legal_move,
    apply_move,
    disc_sum,
    disc_counts,
)

__all__ = [
    "GameState",
    "DIRECTIONS",
    "in_bounds",
    "initial_board",
    "empty_board",
    "move_scores",
    "legal_moves",
    "has_legal_move",
    "apply_move",
    "disc_sum",
    "disc_counts",
]
