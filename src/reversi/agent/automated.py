"""
Automated players backed by an external evaluator.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np

from reversi.agent.config import SearchConfig
from reversi.core.errors import EvaluatorContractError
from reversi.core.types import NUM_CELLS, Cell, player_name, unflatten_index
from reversi.games.game_state import GameState

logger = logging.getLogger(__name__)


@runtime_checkable
class Evaluator(Protocol):
    """
    Black-box move chooser.

    board:  64 signed cells (0 / +1 / -1), row-major
    player: +1 or -1
    Returns a cell index in [0, 64) that is legal for `player`.
    """

    def choose(self, board: np.ndarray, player: int, config: SearchConfig) -> int: ...


@dataclass
class AutomatedPlayer:
    evaluator: Evaluator
    config: SearchConfig
    name: str = "cpu"
    undoable: bool = field(default=False, init=False)

    async def select_move(self, state: GameState) -> Cell:
        flat = state.board.ravel().copy()
        # Off the event loop so abort/undo can still win the race.
        index = await asyncio.to_thread(
            self.evaluator.choose, flat, state.current_player, self.config
        )
        cell = self._checked(index, state)
        logger.debug("%s (%s) selected %s", self.name, player_name(state.current_player), cell)
        return cell

    @staticmethod
    def _checked(index: int, state: GameState) -> Cell:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise EvaluatorContractError(f"Evaluator returned non-integer cell index {index!r}")
        if not 0 <= int(index) < NUM_CELLS:
            raise EvaluatorContractError(
                f"Evaluator returned cell index {int(index)} outside [0, {NUM_CELLS})"
            )
        row, col = unflatten_index(int(index))
        if not state.legal_moves[row, col]:
            raise EvaluatorContractError(
                f"Evaluator returned ({row}, {col}), which is not a legal move "
                f"for {player_name(state.current_player)}"
            )
        return row, col
