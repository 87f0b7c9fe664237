"""
Command-line interface for playing Reversi in a terminal.
"""

import argparse
import asyncio
import logging
import sys
import threading
from typing import Optional, Tuple

from reversi.agent.interactive import CellSelector
from reversi.api import run_game
from reversi.core.types import player_name
from reversi.engine.session import SessionController
from reversi.games.game_state import GameState
from reversi.utils.config import Config, DEFAULT_RENDER_DELAY, HUMAN, PLAYER_OPTIONS
from reversi.utils.factory import create_players

logger = logging.getLogger(__name__)

ABORT_WORDS = {"end", "quit", "exit", "q"}
UNDO_WORDS = {"undo", "u"}


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Reversi between humans and search-based CPU players"
    )
    parser.add_argument(
        "--first", "-1",
        choices=list(PLAYER_OPTIONS.keys()),
        default=HUMAN,
        help="Black player (default: human)",
    )
    parser.add_argument(
        "--second", "-2",
        choices=list(PLAYER_OPTIONS.keys()),
        default="cpu-normal",
        help="White player (default: cpu-normal)",
    )
    parser.add_argument(
        "--delay", "-d",
        type=float,
        default=DEFAULT_RENDER_DELAY,
        help=f"Pause in seconds after each redraw (default: {DEFAULT_RENDER_DELAY})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def parse_cell(raw: str) -> Optional[Tuple[int, int]]:
    """Parse 'row,col' or 'row col'. Returns None if it is not two integers."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def render(state: GameState) -> None:
    first, second = state.disc_counts
    print()
    print(state.state_string())
    print(f"Black {first} : {second} White    {player_name(state.current_player)} to move")


def notify(message: str) -> None:
    print(f"\n*** {message}")


def start_stdin_reader(loop: asyncio.AbstractEventLoop, lines: "asyncio.Queue[str]") -> threading.Thread:
    """Pump stdin lines into `lines` from a daemon thread; "" marks EOF."""

    def pump() -> None:
        try:
            for line in iter(sys.stdin.readline, ""):
                loop.call_soon_threadsafe(lines.put_nowait, line)
            loop.call_soon_threadsafe(lines.put_nowait, "")
        except RuntimeError:
            # Event loop already closed
            return

    thread = threading.Thread(target=pump, name="stdin-reader", daemon=True)
    thread.start()
    return thread


def make_input_driver(selector: CellSelector):
    """Feed stdin lines to the selector and the session's interrupt channel."""

    async def drive(session: SessionController) -> None:
        lines: "asyncio.Queue[str]" = asyncio.Queue()
        start_stdin_reader(asyncio.get_running_loop(), lines)
        while True:
            line = await lines.get()
            if not line:
                session.channel.request_abort()
                return

            raw = line.strip().lower()
            if not raw:
                continue
            if raw in ABORT_WORDS:
                session.channel.request_abort()
                return
            if raw in UNDO_WORDS:
                if session.controls.undo:
                    session.channel.request_undo()
                else:
                    print("Nothing to undo.")
                continue

            cell = parse_cell(raw)
            if cell is None:
                print("Enter 'row,col', 'undo' or 'end'.")
            elif not selector.select(*cell):
                print(f"{cell[0]},{cell[1]} is not a legal move right now.")

    return drive


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(first=args.first, second=args.second, render_delay=args.delay)
    selector = CellSelector()
    first, second = create_players(config, selector)

    print(f"{player_name(1)}: {config.first}    {player_name(-1)}: {config.second}")
    print("Moves are 'row,col' (0-7). Type 'undo' to take back, 'end' to close the board.")

    try:
        result = asyncio.run(
            run_game(
                first,
                second,
                render=render,
                notify=notify,
                render_delay=config.render_delay,
                driver=make_input_driver(selector),
            )
        )
    except KeyboardInterrupt:
        print("\nInterrupted - shutting down...")
        return

    if result.aborted:
        print("Game closed before the end.")
    else:
        first_discs, second_discs = result.final_state.disc_counts
        print(f"Final score: Black {first_discs} : {second_discs} White")


if __name__ == "__main__":
    main()
