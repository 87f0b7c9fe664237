"""
Agent module - the player protocol and its interactive and automated seats.
"""

from reversi.agent.player import Player
from reversi.agent.config import SearchConfig
from reversi.agent.interactive import CellSelector, InteractivePlayer
from reversi.agent.automated import AutomatedPlayer, Evaluator
from reversi.agent.search import AlphaBetaEvaluator

__all__ = [
    "Player",
    "SearchConfig",
    "CellSelector",
    "InteractivePlayer",
    "AutomatedPlayer",
    "Evaluator",
    "AlphaBetaEvaluator",
]
