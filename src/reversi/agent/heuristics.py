"""
Static position evaluation for the search player.

All terms are from First's point of view: positive favours First, negative
favours Second. Ratio terms are (first - second) / (first + second) and 0
when both sides score nothing.
"""

from __future__ import annotations

import numpy as np

from reversi.agent.config import SearchConfig
from reversi.core.types import EMPTY, FIRST, SECOND
from reversi.games import game_rules

COIN_PARITY_WEIGHT = 15.0
ACTUAL_MOBILITY_WEIGHT = 2.0
POTENTIAL_MOBILITY_WEIGHT = 1.0
CORNER_WEIGHT = 18.0
STABILITY_WEIGHT = 15.0

POSITION_WEIGHTS = np.array([
    [ 4, -3,  2,  2,  2,  2, -3,  4],
    [-3, -4, -1, -1, -1, -1, -4, -3],
    [ 2, -1,  1,  0,  0,  1, -1,  2],
    [ 2, -1,  0,  1,  1,  0, -1,  2],
    [ 2, -1,  0,  1,  1,  0, -1,  2],
    [ 2, -1,  1,  0,  0,  1, -1,  2],
    [-3, -4, -1, -1, -1, -1, -4, -3],
    [ 4, -3,  2,  2,  2,  2, -3,  4],
], dtype=np.int32)


def _ratio(first: float, second: float) -> float:
    if first == 0 and second == 0:
        return 0.0
    return (first - second) / (first + second)


def coin_parity(board: np.ndarray) -> float:
    return float(game_rules.disc_sum(board))


def actual_mobility(first_scores: np.ndarray, second_scores: np.ndarray) -> float:
    return _ratio(np.count_nonzero(first_scores), np.count_nonzero(second_scores))


def potential_mobility(board: np.ndarray) -> float:
    """Empty cells next to at least one opponent disc, per side."""
    near_first = np.zeros(board.shape, dtype=bool)
    near_second = np.zeros(board.shape, dtype=bool)
    for dr, dc in game_rules.DIRECTIONS:
        near_first |= game_rules.look_ahead(board == FIRST, dr, dc)
        near_second |= game_rules.look_ahead(board == SECOND, dr, dc)
    empty = board == EMPTY
    # First's potential moves sit next to Second's discs and vice versa.
    return _ratio(np.count_nonzero(empty & near_second), np.count_nonzero(empty & near_first))


def corner_score(board: np.ndarray, first_scores: np.ndarray, second_scores: np.ndarray) -> float:
    """2 per owned corner, 1 per empty corner the side could take now."""
    first = second = 0
    for r, c in game_rules.CORNERS:
        value = board[r, c]
        if value == FIRST:
            first += 2
        elif value == SECOND:
            second += 2
        else:
            first += int(first_scores[r, c] > 0)
            second += int(second_scores[r, c] > 0)
    return _ratio(first, second)


def stability_score(board: np.ndarray) -> float:
    first = int(POSITION_WEIGHTS[board == FIRST].sum())
    second = int(POSITION_WEIGHTS[board == SECOND].sum())
    return float(first - second)


def evaluate(board: np.ndarray, config: SearchConfig) -> float:
    """Weighted sum of the terms enabled in `config`."""
    if config.use_actual_mobility or config.use_corner_score:
        first_scores = game_rules.move_scores(FIRST, board)
        second_scores = game_rules.move_scores(SECOND, board)

    score = 0.0
    if config.use_coin_parity:
        score += coin_parity(board) * COIN_PARITY_WEIGHT
    if config.use_actual_mobility:
        score += actual_mobility(first_scores, second_scores) * ACTUAL_MOBILITY_WEIGHT
    if config.use_potential_mobility:
        score += potential_mobility(board) * POTENTIAL_MOBILITY_WEIGHT
    if config.use_corner_score:
        score += corner_score(board, first_scores, second_scores) * CORNER_WEIGHT
    if config.use_stability_score:
        score += stability_score(board) * STABILITY_WEIGHT
    return score
