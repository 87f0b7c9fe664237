"""
Exception types raised by the engine.
"""


class ReversiError(Exception):
    """Base class for engine errors."""


class EvaluatorContractError(ReversiError):
    """An automated evaluator returned a cell that is out of range or illegal."""


class InvalidTransitionError(ReversiError):
    """A turn transition was requested from a phase that does not allow it."""
