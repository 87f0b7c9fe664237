"""
Core types and constants.

This module contains the fundamental values shared by every layer:
- Cell encodings (signed so that negation flips ownership)
- Board geometry and flat index conversion
- Outcome: the result reported once a game terminates
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                          CELL ENCODING                                      ║
# ║                                                                             ║
# ║   0 = empty      +1 = First (Black)      -1 = Second (White)                ║
# ║                                                                             ║
# ║  player * cell > 0  → own disc,   player * cell < 0  → opponent disc        ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

EMPTY = 0
FIRST = 1
SECOND = -1

BOARD_SIZE = 8
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# (row, col)
Cell = Tuple[int, int]

PLAYER_NAMES = {FIRST: "Black", SECOND: "White"}


def opponent(player: int) -> int:
    """Turn alternation is negation."""
    return -player


def player_name(player: int) -> str:
    return PLAYER_NAMES[player]


def flatten_index(cell: Cell) -> int:
    """Row-major flat index of a cell."""
    row, col = cell
    return row * BOARD_SIZE + col


def unflatten_index(index: int) -> Cell:
    """
    Inverse of flatten_index.

    Raises:
        ValueError: if index is outside [0, 64)
    """
    if not 0 <= index < NUM_CELLS:
        raise ValueError(f"Cell index {index} outside [0, {NUM_CELLS})")
    col = index % BOARD_SIZE
    row = (index - col) // BOARD_SIZE
    return row, col


class Outcome(Enum):
    FIRST_WINS = "first"
    SECOND_WINS = "second"
    TIE = "tie"

    @classmethod
    def from_disc_sum(cls, total: int) -> "Outcome":
        """Sign of the summed cell values decides the winner."""
        if total > 0:
            return cls.FIRST_WINS
        if total < 0:
            return cls.SECOND_WINS
        return cls.TIE

    @property
    def winner(self) -> int:
        """FIRST, SECOND, or EMPTY for a tie."""
        return {Outcome.FIRST_WINS: FIRST, Outcome.SECOND_WINS: SECOND}.get(self, EMPTY)

    @property
    def message(self) -> str:
        if self is Outcome.TIE:
            return "Game over! The game is a tie."
        return f"Game over! {player_name(self.winner)} is the winner."
