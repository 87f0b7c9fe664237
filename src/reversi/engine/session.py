"""
Session controller - drives one full game.

The session owns the current TurnState and the interrupt channel. At every
suspension point it races the pending step (a redraw pause or a player's
move) against abort/undo, then applies whichever signal won.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from reversi.agent.player import Player
from reversi.core.types import FIRST, Cell, Outcome
from reversi.engine import turns
from reversi.engine.signals import Abort, Continue, Interrupt, InterruptChannel, Signal, Undo, race
from reversi.engine.turns import Phase, TurnState
from reversi.games.game_state import GameState

logger = logging.getLogger(__name__)

Render = Callable[[GameState], None]
Notify = Callable[[str], None]


def _ignore(_: object) -> None:
    pass


@dataclass
class Controls:
    """Enabled/disabled state of the outer controls."""
    start: bool = True
    first_select: bool = True
    second_select: bool = True
    end: bool = False
    undo: bool = False

    def begin_game(self) -> None:
        self.start = self.first_select = self.second_select = False
        self.end = True
        self.undo = False

    def sync_undo(self, turn: TurnState) -> None:
        self.undo = turn.can_undo

    def finish_game(self) -> None:
        self.start = self.first_select = self.second_select = True
        self.end = self.undo = False


@dataclass(frozen=True)
class SessionResult:
    outcome: Optional[Outcome]  # None when aborted before the end
    aborted: bool
    final_state: GameState      # last snapshot played, before the board is cleared
    moves_played: int           # committed moves, including ones later undone
    passes: int


class SessionController:
    """
    Runs a game between two players until it is scored and closed, or aborted.

    render is called with every snapshot the display should show; the
    session then pauses for render_delay seconds (raced against interrupts).
    notify receives pass notices and the final result message.
    """

    def __init__(
        self,
        first: Player,
        second: Player,
        *,
        channel: Optional[InterruptChannel] = None,
        render: Optional[Render] = None,
        notify: Optional[Notify] = None,
        render_delay: float = 0.0,
        controls: Optional[Controls] = None,
    ):
        self.first = first
        self.second = second
        self.channel = channel or InterruptChannel()
        self.render = render or _ignore
        self.notify = notify or _ignore
        self.render_delay = render_delay
        self.controls = controls or Controls()
        self.turn: TurnState = turns.start()

    def seat(self, player: int) -> Player:
        return self.first if player == FIRST else self.second

    async def _show(self, state: GameState) -> Optional[Cell]:
        self.render(state)
        await asyncio.sleep(self.render_delay)
        return None

    async def _display(self) -> Signal:
        self.controls.sync_undo(self.turn)
        return await race(self._show(self.turn.game_state), self.channel)

    async def run(self) -> SessionResult:
        self.controls.begin_game()
        self.turn = turns.start()
        moves = passes = 0
        logger.info("Game started: %s vs %s", self.first.name, self.second.name)

        try:
            signal = await self._display()
            while True:
                if isinstance(signal, Abort):
                    return self._close(moves, passes, aborted=True)

                if isinstance(signal, Undo):
                    self.turn = turns.undo(self.turn)
                    signal = await self._display()
                    continue

                if self.turn.phase is Phase.ACTIVE:
                    self.turn, notice = turns.resolve(self.turn)
                    if self.turn.is_over:
                        break
                    if notice is not None:
                        passes += 1
                        self.notify(notice.message)
                        signal = await self._display()
                        continue

                state = self.turn.game_state
                player = self.seat(state.current_player)
                signal = await race(player.select_move(state), self.channel)
                if isinstance(signal, Continue):
                    self.turn = turns.commit(self.turn, signal.move, player.undoable)
                    moves += 1
                    signal = await self._display()

            return await self._after_end(moves, passes)

        except Exception:
            logger.exception("Fatal error in session loop")
            raise
        finally:
            self.controls.finish_game()

    async def _after_end(self, moves: int, passes: int) -> SessionResult:
        """Report the result once, then accept nothing but abort."""
        assert self.turn.outcome is not None
        self.controls.sync_undo(self.turn)
        self.notify(self.turn.outcome.message)

        while True:
            interrupt = await self.channel.wait()
            if interrupt is Interrupt.ABORT:
                break
            logger.debug("Undo ignored after game end")

        return self._close(moves, passes, aborted=False)

    def _close(self, moves: int, passes: int, aborted: bool) -> SessionResult:
        result = SessionResult(
            outcome=self.turn.outcome,
            aborted=aborted,
            final_state=self.turn.game_state,
            moves_played=moves,
            passes=passes,
        )
        self.controls.end = self.controls.undo = False
        self.turn = turns.abort(self.turn)
        self.render(self.turn.game_state)
        logger.info(
            "Game closed (%s)",
            "aborted" if aborted else result.outcome.message if result.outcome else "no result",
        )
        return result
