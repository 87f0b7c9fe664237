"""
Interactive players fed by externally reported cell selections.

A CellSelector stands in for the clickable board. Players register a
request carrying the legal-move mask of the snapshot they were handed; a
selection resolves the oldest request whose mask accepts the cell. Anything
else is ignored.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np

from reversi.core.types import Cell
from reversi.games.game_rules import in_bounds
from reversi.games.game_state import GameState

logger = logging.getLogger(__name__)


class CellSelector:
    """Pending move requests keyed by request id."""

    def __init__(self) -> None:
        self._pending: Dict[int, Tuple["asyncio.Future[Cell]", np.ndarray]] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._pending)

    def request(self, mask: np.ndarray) -> Tuple[int, "asyncio.Future[Cell]"]:
        future: "asyncio.Future[Cell]" = asyncio.get_running_loop().create_future()
        request_id = next(self._ids)
        self._pending[request_id] = (future, mask)
        return request_id, future

    def cancel(self, request_id: int) -> None:
        entry = self._pending.pop(request_id, None)
        if entry is not None and not entry[0].done():
            entry[0].cancel()

    def select(self, row: int, col: int) -> bool:
        """
        Report a selection. Returns True if it satisfied a pending request.

        At most one request is satisfied per call, and it is removed before
        its future is resolved.
        """
        if not in_bounds(row, col):
            logger.debug("Selection (%d, %d) is off the board", row, col)
            return False

        match = None
        for request_id, (future, mask) in list(self._pending.items()):
            if not future.done() and mask[row, col]:
                match = request_id
                break

        if match is None:
            logger.debug("Selection (%d, %d) ignored", row, col)
            return False

        future, _ = self._pending.pop(match)
        future.set_result((row, col))
        return True


@dataclass
class InteractivePlayer:
    selector: CellSelector
    name: str = "human"
    undoable: bool = field(default=True, init=False)

    async def select_move(self, state: GameState) -> Cell:
        request_id, future = self.selector.request(state.legal_moves)
        try:
            return await future
        finally:
            self.selector.cancel(request_id)
