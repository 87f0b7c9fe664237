"""
Reversi - rules engine and turn management for two-player Othello.

Human and search-based players compete through one asynchronous player
protocol. A session races every pending step against abort/undo requests.

Quick Start:
    from reversi import CellSelector, create_player, play_game

    selector = CellSelector()
    result = play_game(
        create_player("cpu-easy", selector),
        create_player("cpu-hard", selector),
    )
    print(result.outcome.message)

Modules:
    core    - Cell encoding, geometry, outcomes and errors
    games   - Immutable snapshots and the NumPy move engine
    engine  - Turn state machine, interrupts and the session loop
    agent   - Player protocol, interactive and automated players, search
"""

from reversi.api import play_game, run_game
from reversi.agent import (
    AlphaBetaEvaluator,
    AutomatedPlayer,
    CellSelector,
    InteractivePlayer,
    Player,
    SearchConfig,
)
from reversi.core import Outcome, FIRST, SECOND, EMPTY
from reversi.engine import SessionController, SessionResult
from reversi.games import GameState
from reversi.utils.factory import create_player, create_players

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_game",
    "run_game",
    "create_player",
    "create_players",
    "SessionController",
    "SessionResult",
    # Players
    "Player",
    "CellSelector",
    "InteractivePlayer",
    "AutomatedPlayer",
    "AlphaBetaEvaluator",
    "SearchConfig",
    # Types
    "GameState",
    "Outcome",
    "FIRST",
    "SECOND",
    "EMPTY",
]
