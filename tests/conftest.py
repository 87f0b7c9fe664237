"""
Shared test fixtures for reversi tests.

Design principles:
- Boards are written as row strings for readability
- Scripted players/evaluators keep session tests deterministic
- Minimal, focused fixtures
"""

import asyncio
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

import numpy as np
import pytest

from reversi.agent.config import SearchConfig
from reversi.agent.interactive import CellSelector
from reversi.core.types import FIRST, SECOND, Cell
from reversi.games import game_rules
from reversi.games.game_state import GameState


# =============================================================================
# Board Helpers
# =============================================================================

GLYPHS = {".": 0, "X": FIRST, "O": SECOND}


def board_from_rows(rows: Sequence[str]) -> np.ndarray:
    """Build a board from up to 8 strings of '.', 'X' (First), 'O' (Second)."""
    board = game_rules.empty_board()
    for r, row in enumerate(rows):
        for c, ch in enumerate(row.replace(" ", "")):
            board[r, c] = GLYPHS[ch]
    return board


async def wait_until(predicate: Callable[[], bool], rounds: int = 500) -> None:
    """Yield to the event loop until predicate holds."""
    for _ in range(rounds):
        if predicate():
            return
        await asyncio.sleep(0.001)
    raise AssertionError("condition not reached")


# =============================================================================
# Evaluators
# =============================================================================

class FirstLegalEvaluator:
    """Always picks the first legal cell in row-major order."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def choose(self, board: np.ndarray, player: int, config: SearchConfig) -> int:
        self.calls.append((board.copy(), player, config))
        grid = board.reshape(8, 8)
        r, c = np.argwhere(game_rules.legal_moves(player, grid))[0]
        return int(r) * 8 + int(c)


class FixedEvaluator:
    """Returns the same index every time, legal or not."""

    def __init__(self, index) -> None:
        self.index = index

    def choose(self, board: np.ndarray, player: int, config: SearchConfig) -> int:
        return self.index


@dataclass
class ScriptedPlayer:
    """Plays the first legal cell immediately."""
    undoable: bool = True
    name: str = "scripted"
    seen: List[GameState] = field(default_factory=list)

    async def select_move(self, state: GameState) -> Cell:
        self.seen.append(state)
        return state.legal_cells[0]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def opening() -> GameState:
    return GameState.initial()


@pytest.fixture
def selector() -> CellSelector:
    return CellSelector()


@pytest.fixture
def shallow_config() -> SearchConfig:
    return SearchConfig(max_depth=1)


@pytest.fixture
def first_legal() -> FirstLegalEvaluator:
    return FirstLegalEvaluator()
