"""
Core module - cell encoding, geometry, outcomes and errors.

This module provides the building blocks used throughout the engine.
"""

from reversi.core.types import (
    EMPTY,
    FIRST,
    SECOND,
    BOARD_SIZE,
    NUM_CELLS,
    Cell,
    Outcome,
    opponent,
    player_name,
    flatten_index,
    unflatten_index,
)
from reversi.core.errors import (
    ReversiError,
    EvaluatorContractError,
    InvalidTransitionError,
)

__all__ = [
    # Constants
    "EMPTY",
    "FIRST",
    "SECOND",
    "BOARD_SIZE",
    "NUM_CELLS",
    # Types
    "Cell",
    "Outcome",
    # Functions
    "opponent",
    "player_name",
    "flatten_index",
    "unflatten_index",
    # Errors
    "ReversiError",
    "EvaluatorContractError",
    "InvalidTransitionError",
]
