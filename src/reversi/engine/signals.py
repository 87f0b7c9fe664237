"""
Interrupts and the await-first race.

Every suspension point of a session races an "advance" awaitable (a render
pause or a player's move) against the next abort/undo request. The race
returns an explicit Signal instead of setting flags:

    Continue(move)  the advance finished first (move is None for renders)
    Abort           close the game
    Undo            step back one recorded snapshot

Tie-break when both finish in the same tick: an abort wins, and so does an
undo against a finished redraw. An undo that ties with a chosen move loses;
the move is committed and the undo goes back to the front of the channel for
the next suspension point (the redraw right after the commit). An interrupt
that arrives after the advance already won stays queued the same way. If
the advance failed, its error is raised whatever the interrupt.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Optional, Union

from reversi.core.types import Cell

logger = logging.getLogger(__name__)


class Interrupt(Enum):
    ABORT = "abort"
    UNDO = "undo"


@dataclass(frozen=True)
class Continue:
    move: Optional[Cell] = None


@dataclass(frozen=True)
class Abort:
    pass


@dataclass(frozen=True)
class Undo:
    pass


Signal = Union[Continue, Abort, Undo]


class InterruptChannel:
    """FIFO of abort/undo requests coming from outside the session loop."""

    def __init__(self) -> None:
        self._queue: "asyncio.Queue[Interrupt]" = asyncio.Queue()

    def request_abort(self) -> None:
        self._queue.put_nowait(Interrupt.ABORT)

    def request_undo(self) -> None:
        self._queue.put_nowait(Interrupt.UNDO)

    def push_front(self, interrupt: Interrupt) -> None:
        """Return an interrupt that was taken but not acted on."""
        queued = [interrupt]
        while not self._queue.empty():
            queued.append(self._queue.get_nowait())
        for item in queued:
            self._queue.put_nowait(item)

    def pending(self) -> int:
        return self._queue.qsize()

    async def wait(self) -> Interrupt:
        return await self._queue.get()


def to_signal(interrupt: Interrupt) -> Signal:
    return Abort() if interrupt is Interrupt.ABORT else Undo()


async def race(advance: Awaitable[Optional[Cell]], channel: InterruptChannel) -> Signal:
    """
    Await whichever of `advance` and the next interrupt finishes first.

    The losing task is cancelled. A cancelled player request is expected to
    clean up after itself; a cancelled interrupt wait leaves the queue intact.
    """
    advance_task = asyncio.ensure_future(advance)
    interrupt_task = asyncio.ensure_future(channel.wait())
    try:
        await asyncio.wait({advance_task, interrupt_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (advance_task, interrupt_task):
            if not task.done():
                task.cancel()
        # Let cancellation run its cleanup before the caller moves on.
        await asyncio.gather(advance_task, interrupt_task, return_exceptions=True)

    advance_finished = advance_task.done() and not advance_task.cancelled()
    if advance_finished and advance_task.exception() is not None:
        # Player failures (e.g. evaluator contract violations) are fatal even
        # when an interrupt finished in the same tick.
        raise advance_task.exception()

    if interrupt_task.done() and not interrupt_task.cancelled():
        interrupt = interrupt_task.result()
        move = advance_task.result() if advance_finished else None
        if interrupt is Interrupt.UNDO and move is not None:
            logger.debug("Undo tied with move %s; deferred until after the commit", move)
            channel.push_front(interrupt)
            return Continue(move)
        if advance_finished:
            logger.debug("Interrupt %s beat a finished advance", interrupt.value)
        return to_signal(interrupt)

    return Continue(advance_task.result())
