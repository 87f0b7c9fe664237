"""
Public API for running Reversi games.

Usage:
    from reversi import play_game, CellSelector, create_player

    selector = CellSelector()
    first = create_player("human", selector)
    second = create_player("cpu-normal", selector)
    result = play_game(first, second, render=print_board)
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from reversi.agent.player import Player
from reversi.engine.session import Controls, Notify, Render, SessionController, SessionResult
from reversi.engine.signals import InterruptChannel

# Coroutine run alongside the session, e.g. an input pump feeding
# selections and interrupts.
Driver = Callable[[SessionController], Awaitable[None]]


async def run_game(
    first: Player,
    second: Player,
    render: Optional[Render] = None,
    notify: Optional[Notify] = None,
    render_delay: float = 0.0,
    controls: Optional[Controls] = None,
    driver: Optional[Driver] = None,
) -> SessionResult:
    """
    Play one game to completion inside a running event loop.

    Parameters
    ----------
    first, second : Player
        Seats for First (Black) and Second (White).
    render : callable, optional
        Receives every snapshot the display should show.
    notify : callable, optional
        Receives pass notices and the result message.
    render_delay : float
        Seconds to pause after each redraw.
    controls : Controls, optional
        Outer control flags to toggle while the game runs.
    driver : callable, optional
        Coroutine started with the session and cancelled when it returns.
        Without a driver the board is closed as soon as the result has
        been reported.
    """
    def relay(message: str) -> None:
        if notify is not None:
            notify(message)
        if driver is None and session.turn.is_over:
            session.channel.request_abort()

    session = SessionController(
        first,
        second,
        channel=InterruptChannel(),
        render=render,
        notify=relay,
        render_delay=render_delay,
        controls=controls,
    )
    if driver is None:
        return await session.run()

    driver_task = asyncio.ensure_future(driver(session))
    try:
        return await session.run()
    finally:
        driver_task.cancel()
        await asyncio.gather(driver_task, return_exceptions=True)


def play_game(
    first: Player,
    second: Player,
    render: Optional[Render] = None,
    notify: Optional[Notify] = None,
    render_delay: float = 0.0,
    controls: Optional[Controls] = None,
    driver: Optional[Driver] = None,
) -> SessionResult:
    """Synchronous wrapper around run_game."""
    return asyncio.run(
        run_game(first, second, render, notify, render_delay, controls, driver)
    )


__all__ = [
    "run_game",
    "play_game",
    "SessionController",
    "SessionResult",
]
