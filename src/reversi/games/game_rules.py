"""
NumPy move engine for Reversi.

Boards are 8x8 int8 arrays holding 0 / +1 / -1. Directional scans are
vectorised: instead of walking every cell, each direction is handled by
comparing the board against shifted boolean planes, so legal-move masks and
flip counts for the whole board come out of a handful of array operations.

Every function here is pure. apply_move returns a new array and never
touches its input.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from reversi.core.types import BOARD_SIZE, EMPTY, FIRST, SECOND, Cell

# Direction vectors (dr, dc)
ORTHOGONAL = ((0, 1), (0, -1), (1, 0), (-1, 0))
DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
DIRECTIONS = ORTHOGONAL + DIAGONAL

CORNERS: Tuple[Cell, ...] = ((0, 0), (0, 7), (7, 0), (7, 7))


def initial_board() -> np.ndarray:
    """Standard opening: two discs per player crossed in the centre."""
    board = empty_board()
    board[3, 3] = SECOND
    board[3, 4] = FIRST
    board[4, 3] = FIRST
    board[4, 4] = SECOND
    return board


def empty_board() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) is on the board. There is no wraparound."""
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def look_ahead(plane: np.ndarray, dr: int, dc: int) -> np.ndarray:
    """
    Shift a plane so that out[r, c] == plane[r + dr, c + dc].

    Positions whose source falls off the board get the zero value
    (False for boolean planes).
    """
    out = np.zeros_like(plane)
    rows, cols = plane.shape
    if abs(dr) >= rows or abs(dc) >= cols:
        return out

    src_r = slice(max(dr, 0), rows + min(dr, 0))
    dst_r = slice(max(-dr, 0), rows + min(-dr, 0))
    src_c = slice(max(dc, 0), cols + min(dc, 0))
    dst_c = slice(max(-dc, 0), cols + min(-dc, 0))
    out[dst_r, dst_c] = plane[src_r, src_c]
    return out


def move_scores(player: int, board: np.ndarray) -> np.ndarray:
    """
    Number of opponent discs a placement by `player` would flip, per cell.

    For each direction we keep a plane of cells whose run of opponent discs
    is still open at distance `dist`. Where the disc at `dist` is our own the
    run is closed and contributes dist - 1 flips; where it is another
    opponent disc the run stays open; anything else ends it.
    """
    own = board == player
    opp = board == -player
    scores = np.zeros(board.shape, dtype=np.int32)

    for dr, dc in DIRECTIONS:
        run = look_ahead(opp, dr, dc)
        dist = 2
        while dist < BOARD_SIZE and run.any():
            closed = run & look_ahead(own, dist * dr, dist * dc)
            scores[closed] += dist - 1
            run &= look_ahead(opp, dist * dr, dist * dc)
            dist += 1

    scores[board != EMPTY] = 0
    return scores


def legal_moves(player: int, board: np.ndarray) -> np.ndarray:
    """Boolean 8x8 mask, True iff `player` may place a disc there."""
    return move_scores(player, board) > 0


def has_legal_move(mask: np.ndarray) -> bool:
    return bool(mask.any())


def apply_move(player: int, board: np.ndarray, cell: Cell) -> np.ndarray:
    """
    Place `player`'s disc at `cell` and flip every bracketed opponent run.

    The caller guarantees that `cell` is legal for `player`; this is not
    re-validated.
    """
    r0, c0 = cell
    result = board.copy()
    result[r0, c0] = player

    for dr, dc in DIRECTIONS:
        r, c = r0 + dr, c0 + dc
        run = []
        while in_bounds(r, c) and board[r, c] == -player:
            run.append((r, c))
            r += dr
            c += dc
        if run and in_bounds(r, c) and board[r, c] == player:
            for rr, cc in run:
                result[rr, cc] = -result[rr, cc]

    return result


def disc_sum(board: np.ndarray) -> int:
    """Sum of all cell values: positive favours First, negative Second."""
    return int(board.sum(dtype=np.int32))


def disc_counts(board: np.ndarray) -> Tuple[int, int]:
    """(first_discs, second_discs)."""
    return int(np.count_nonzero(board == FIRST)), int(np.count_nonzero(board == SECOND))
