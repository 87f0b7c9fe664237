"""
Turn controller - the game state machine.

The controller is a value, not an object with flags: every transition takes
a TurnState and returns a new one. The session owns the current value and
replaces it wholesale after each step.

    ACTIVE ──resolve──► AWAITING_INPUT ──commit──► ACTIVE
       │                      │
       ├──resolve (pass)──► ACTIVE (opponent to move, history untouched)
       └──resolve (no moves either side)──► ENDED

    undo:  ACTIVE / AWAITING_INPUT ──► ACTIVE (previous snapshot)
    abort: any phase ──► ENDED (cleared board, no history)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Optional, Tuple

from reversi.core.errors import InvalidTransitionError
from reversi.core.types import Cell, Outcome, opponent, player_name
from reversi.games import game_rules
from reversi.games.game_state import GameState

logger = logging.getLogger(__name__)


class Phase(Enum):
    ACTIVE = auto()
    AWAITING_INPUT = auto()
    ENDED = auto()


@dataclass(frozen=True)
class PassNotice:
    """The player who had to skip a turn."""
    player: int

    @property
    def message(self) -> str:
        return f"{player_name(self.player)} is out of move."


@dataclass(frozen=True)
class TurnState:
    phase: Phase
    game_state: GameState
    history: Tuple[GameState, ...] = field(default=())
    outcome: Optional[Outcome] = None
    aborted: bool = False

    @property
    def can_undo(self) -> bool:
        return bool(self.history) and self.phase is not Phase.ENDED

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.ENDED


def start() -> TurnState:
    return TurnState(Phase.ACTIVE, GameState.initial())


def _require(turn: TurnState, *phases: Phase) -> None:
    if turn.phase not in phases:
        expected = ", ".join(p.name for p in phases)
        raise InvalidTransitionError(f"Expected phase {expected}, got {turn.phase.name}")


def resolve(turn: TurnState) -> Tuple[TurnState, Optional[PassNotice]]:
    """
    Decide what the current turn is.

    Returns the next state plus a PassNotice when the player to move had to
    skip. When neither side can move the game ends and is scored.
    """
    _require(turn, Phase.ACTIVE)
    state = turn.game_state

    if state.has_legal_move:
        return replace(turn, phase=Phase.AWAITING_INPUT), None

    passed = state.passed()
    if not passed.has_legal_move:
        outcome = Outcome.from_disc_sum(state.disc_sum)
        logger.info("No legal moves for either player: %s", outcome.message)
        return replace(turn, phase=Phase.ENDED, outcome=outcome), None

    notice = PassNotice(state.current_player)
    logger.info(notice.message)
    return replace(turn, game_state=passed), notice


def commit(turn: TurnState, cell: Cell, undoable: bool) -> TurnState:
    """Apply the chosen move, recording the pre-move snapshot if undoable."""
    _require(turn, Phase.AWAITING_INPUT)
    state = turn.game_state
    history = turn.history + (state,) if undoable else turn.history

    board = game_rules.apply_move(state.current_player, state.board, cell)
    following = GameState.from_board(board, opponent(state.current_player))
    logger.info("%s plays %s", player_name(state.current_player), cell)
    return TurnState(Phase.ACTIVE, following, history)


def undo(turn: TurnState) -> TurnState:
    """Restore the latest recorded snapshot. No-op if nothing is recorded."""
    if not turn.can_undo:
        logger.debug("Undo ignored (history=%d, phase=%s)", len(turn.history), turn.phase.name)
        return turn
    *rest, previous = turn.history
    logger.info("Undo: %d snapshot(s) left", len(rest))
    return TurnState(Phase.ACTIVE, previous, tuple(rest))


def abort(turn: TurnState) -> TurnState:
    """Close the game from any phase. History is discarded."""
    logger.info("Game aborted in phase %s", turn.phase.name)
    return TurnState(Phase.ENDED, GameState.cleared(), (), outcome=None, aborted=True)
