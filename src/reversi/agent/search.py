"""
Alpha-beta search evaluator.

First maximises the heuristic, Second minimises it. Moves are tried in
order of descending flip count so strong captures are searched first and
prune more of the tree.
"""

from __future__ import annotations

import logging
import math
import time
from typing import List, Tuple

import numpy as np

from reversi.agent.config import SearchConfig
from reversi.agent.heuristics import evaluate
from reversi.core.errors import EvaluatorContractError
from reversi.core.types import BOARD_SIZE, FIRST, NUM_CELLS, Cell, flatten_index, opponent
from reversi.games import game_rules

logger = logging.getLogger(__name__)


def ordered_moves(player: int, board: np.ndarray) -> List[Cell]:
    """Legal cells sorted by flip count, ties kept in row-major order."""
    scores = game_rules.move_scores(player, board)
    cells = [(int(r), int(c)) for r, c in np.argwhere(scores > 0)]
    cells.sort(key=lambda cell: -scores[cell])
    return cells


class AlphaBetaEvaluator:
    """Minimax with alpha-beta pruning over the static heuristic."""

    def __init__(self) -> None:
        self.nodes = 0

    def choose(self, board: np.ndarray, player: int, config: SearchConfig) -> int:
        """
        Pick a cell index in [0, 64) for `player` on a flat row-major board.
        """
        flat = np.asarray(board, dtype=np.int8)
        if flat.size != NUM_CELLS:
            raise ValueError(f"Expected {NUM_CELLS} cells, got {flat.size}")
        grid = flat.reshape(BOARD_SIZE, BOARD_SIZE)

        self.nodes = 0
        started = time.perf_counter()
        cell, score = self._root(player, grid, config)
        logger.debug(
            "Search depth=%d chose %s (score=%.2f, nodes=%d, %.1fms)",
            config.max_depth, cell, score, self.nodes,
            (time.perf_counter() - started) * 1000.0,
        )
        return flatten_index(cell)

    def _root(self, player: int, board: np.ndarray, config: SearchConfig) -> Tuple[Cell, float]:
        moves = ordered_moves(player, board)
        if not moves:
            raise EvaluatorContractError(f"No legal move for player {player:+d}")

        alpha, beta = -math.inf, math.inf
        best_move = moves[0]
        best_score = -math.inf if player == FIRST else math.inf
        for move in moves:
            child = game_rules.apply_move(player, board, move)
            score = self._search(opponent(player), child, config.max_depth - 1, alpha, beta, config)
            if player == FIRST and score > alpha:
                alpha = best_score = score
                best_move = move
            elif player != FIRST and score < beta:
                beta = best_score = score
                best_move = move
        return best_move, best_score

    def _search(
        self,
        player: int,
        board: np.ndarray,
        depth: int,
        alpha: float,
        beta: float,
        config: SearchConfig,
    ) -> float:
        self.nodes += 1
        if depth <= 0:
            return evaluate(board, config)

        moves = ordered_moves(player, board)
        if not moves:
            if not game_rules.has_legal_move(game_rules.legal_moves(opponent(player), board)):
                return evaluate(board, config)
            # Forced pass
            return self._search(opponent(player), board, depth - 1, alpha, beta, config)

        if player == FIRST:
            best = -math.inf
            for move in moves:
                child = game_rules.apply_move(player, board, move)
                score = self._search(opponent(player), child, depth - 1, alpha, beta, config)
                best = max(best, score)
                alpha = max(alpha, score)
                if score >= beta:
                    break
            return best

        best = math.inf
        for move in moves:
            child = game_rules.apply_move(player, board, move)
            score = self._search(opponent(player), child, depth - 1, alpha, beta, config)
            best = min(best, score)
            beta = min(beta, score)
            if score <= alpha:
                break
        return best
