"""
Engine module - turn state machine, interrupts and the session loop.
"""

from reversi.engine.turns import Phase, PassNotice, TurnState
from reversi.engine.signals import (
    Abort,
    Continue,
    Interrupt,
    InterruptChannel,
    Signal,
    Undo,
    race,
)
from reversi.engine.session import Controls, SessionController, SessionResult

__all__ = [
    "Phase",
    "PassNotice",
    "TurnState",
    "Abort",
    "Continue",
    "Interrupt",
    "InterruptChannel",
    "Signal",
    "Undo",
    "race",
    "Controls",
    "SessionController",
    "SessionResult",
]
