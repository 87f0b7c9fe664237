"""
Player protocol shared by interactive and automated seats.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reversi.core.types import Cell
from reversi.games.game_state import GameState


@runtime_checkable
class Player(Protocol):
    """
    One seat at the board.

    undoable:    whether this player's moves are recorded for undo
    select_move: resolve to a cell that is legal under state.legal_moves,
                 or never resolve. The session races it against interrupts
                 and cancels it when it loses, so cancellation must release
                 anything tied to the request.
    """

    name: str
    undoable: bool

    async def select_move(self, state: GameState) -> Cell: ...
