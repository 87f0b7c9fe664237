"""
GameState - immutable game state snapshot.

A snapshot is what gets pushed to history, handed to players and shown to
the display. It is never mutated: transitions always build a new one.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from reversi.core.types import BOARD_SIZE, FIRST, Cell, opponent
from reversi.games import game_rules

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "●", -1: "○"}
CANDIDATE_STRING = "·"


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class GameState:
    """
    Snapshot of {current player, board, legal-move mask}.

    The board and mask arrays are marked read-only, so anything holding a
    snapshot (history, a pending player request, the display) sees exactly
    what was there when it was taken.
    """
    __slots__ = ('board', 'current_player', 'legal_moves')

    def __init__(self, board: np.ndarray, current_player: int, legal_moves: np.ndarray):
        self.board = _frozen(np.array(board, dtype=np.int8))
        self.current_player = current_player
        self.legal_moves = _frozen(np.array(legal_moves, dtype=bool))

    @classmethod
    def from_board(cls, board: np.ndarray, current_player: int) -> "GameState":
        """Build a snapshot, deriving the mask for `current_player`."""
        return cls(board, current_player, game_rules.legal_moves(current_player, board))

    @classmethod
    def initial(cls) -> "GameState":
        return cls.from_board(game_rules.initial_board(), FIRST)

    @classmethod
    def cleared(cls) -> "GameState":
        """Empty board with nothing playable, shown after a game is closed."""
        return cls(
            game_rules.empty_board(),
            FIRST,
            np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool),
        )

    def passed(self) -> "GameState":
        """Same board, opponent to move."""
        return GameState.from_board(self.board, opponent(self.current_player))

    @property
    def has_legal_move(self) -> bool:
        return game_rules.has_legal_move(self.legal_moves)

    @property
    def legal_cells(self) -> List[Cell]:
        """Legal cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.legal_moves)]

    @property
    def disc_sum(self) -> int:
        return game_rules.disc_sum(self.board)

    @property
    def disc_counts(self) -> Tuple[int, int]:
        return game_rules.disc_counts(self.board)

    def is_legal(self, row: int, col: int) -> bool:
        return game_rules.in_bounds(row, col) and bool(self.legal_moves[row, col])

    def same_as(self, other: "GameState") -> bool:
        """Bit-for-bit comparison of board, player and mask."""
        return (
            self.current_player == other.current_player
            and np.array_equal(self.board, other.board)
            and np.array_equal(self.legal_moves, other.legal_moves)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.same_as(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        first, second = self.disc_counts
        return (
            f"GameState(player={self.current_player:+d}, "
            f"discs={first}/{second}, moves={len(self.legal_cells)})"
        )

    def state_string(self) -> str:
        """Pretty string representation; legal cells are dotted."""
        header = "    " + "   ".join(str(c) for c in range(BOARD_SIZE))
        lines = [header, "  ╭" + "───┬" * (BOARD_SIZE - 1) + "───╮"]
        for r in range(BOARD_SIZE):
            cells = []
            for c in range(BOARD_SIZE):
                value = int(self.board[r, c])
                if value == 0 and self.legal_moves[r, c]:
                    cells.append(CANDIDATE_STRING)
                else:
                    cells.append(CELL_STRINGS[value])
            lines.append(f"{r} │ " + " │ ".join(cells) + " │")
            if r < BOARD_SIZE - 1:
                lines.append("  ├" + "───┼" * (BOARD_SIZE - 1) + "───┤")
        lines.append("  ╰" + "───┴" * (BOARD_SIZE - 1) + "───╯")
        return "\n".join(lines)
