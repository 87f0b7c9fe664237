"""
Configuration and player registry.
"""

from typing import Dict, Optional

from reversi.agent.config import SearchConfig


# ---------------------------------------------------------------------------
# Player Registry
# ---------------------------------------------------------------------------

HUMAN = "human"

# None = interactive seat; otherwise the search tier for an automated seat
PLAYER_OPTIONS: Dict[str, Optional[SearchConfig]] = {
    HUMAN: None,
    "cpu-easy": SearchConfig(
        max_depth=4,
        use_coin_parity=True,
        use_actual_mobility=False,
        use_potential_mobility=False,
        use_corner_score=False,
        use_stability_score=True,
    ),
    "cpu-normal": SearchConfig(
        max_depth=6,
        use_coin_parity=True,
        use_actual_mobility=False,
        use_potential_mobility=False,
        use_corner_score=True,
        use_stability_score=True,
    ),
    "cpu-hard": SearchConfig(
        max_depth=8,
        use_coin_parity=True,
        use_actual_mobility=True,
        use_potential_mobility=True,
        use_corner_score=True,
        use_stability_score=True,
    ),
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

# Pause after each redraw so moves can be followed (display policy only)
DEFAULT_RENDER_DELAY = 0.8


class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        first: str = HUMAN,
        second: str = "cpu-normal",
        render_delay: float = DEFAULT_RENDER_DELAY,
    ):
        for option in (first, second):
            if option not in PLAYER_OPTIONS:
                raise KeyError(f"Unknown player option: {option!r}")
        if render_delay < 0:
            raise ValueError(f"render_delay must be non-negative, got {render_delay}")

        self.first = first
        self.second = second
        self.render_delay = render_delay

    def __repr__(self) -> str:
        return f"Config(first={self.first!r}, second={self.second!r}, render_delay={self.render_delay})"


# Default configuration
DEFAULT_CONFIG = Config()
