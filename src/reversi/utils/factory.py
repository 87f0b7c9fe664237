"""
Factory functions for creating players.
"""

from typing import Optional, Tuple

from reversi.agent.automated import AutomatedPlayer, Evaluator
from reversi.agent.interactive import CellSelector, InteractivePlayer
from reversi.agent.player import Player
from reversi.agent.search import AlphaBetaEvaluator
from reversi.utils.config import PLAYER_OPTIONS, Config


def create_player(
    option: str,
    selector: CellSelector,
    evaluator: Optional[Evaluator] = None,
) -> Player:
    """
    Create the player for one seat.

    Args:
        option: Key from PLAYER_OPTIONS (e.g., "human", "cpu-hard")
        selector: Selection source shared by interactive seats
        evaluator: Evaluator for automated seats (default: AlphaBetaEvaluator)

    Returns:
        Configured player
    """
    if option not in PLAYER_OPTIONS:
        available = ", ".join(PLAYER_OPTIONS.keys())
        raise ValueError(f"Unknown player: {option}. Available: {available}")

    search = PLAYER_OPTIONS[option]
    if search is None:
        return InteractivePlayer(selector, name=option)
    return AutomatedPlayer(evaluator or AlphaBetaEvaluator(), search, name=option)


def create_players(
    config: Config,
    selector: CellSelector,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[Player, Player]:
    """Build (first, second) seats from a configuration."""
    return (
        create_player(config.first, selector, evaluator),
        create_player(config.second, selector, evaluator),
    )
