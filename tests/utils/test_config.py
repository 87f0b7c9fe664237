"""
Tests for reversi.utils.config

Tests configuration and player registry.
"""

import pytest

from reversi.agent.config import SearchConfig
from reversi.utils.config import DEFAULT_CONFIG, HUMAN, PLAYER_OPTIONS, Config


class TestPlayerRegistry:
    """PLAYER_OPTIONS registry tests."""

    def test_seat_options(self):
        """Human plus three CPU tiers."""
        assert set(PLAYER_OPTIONS) == {HUMAN, "cpu-easy", "cpu-normal", "cpu-hard"}
        assert PLAYER_OPTIONS[HUMAN] is None

    def test_tier_depths(self):
        """Depth grows with difficulty."""
        depths = [PLAYER_OPTIONS[name].max_depth for name in ("cpu-easy", "cpu-normal", "cpu-hard")]
        assert depths == [4, 6, 8]

    def test_tier_features(self):
        """Each tier switches on more heuristic terms."""
        easy = PLAYER_OPTIONS["cpu-easy"]
        normal = PLAYER_OPTIONS["cpu-normal"]
        hard = PLAYER_OPTIONS["cpu-hard"]

        assert easy.use_coin_parity and easy.use_stability_score
        assert not (easy.use_corner_score or easy.use_actual_mobility or easy.use_potential_mobility)

        assert normal.use_corner_score
        assert not (normal.use_actual_mobility or normal.use_potential_mobility)

        assert all(isinstance(config, SearchConfig) for config in (easy, normal, hard))
        assert hard.use_actual_mobility and hard.use_potential_mobility and hard.use_corner_score


class TestConfig:
    """Config class tests."""

    def test_defaults(self):
        """Human plays Black against cpu-normal."""
        assert DEFAULT_CONFIG.first == HUMAN
        assert DEFAULT_CONFIG.second == "cpu-normal"
        assert DEFAULT_CONFIG.render_delay > 0

    def test_custom_values(self):
        """Custom values are stored."""
        config = Config(first="cpu-hard", second="cpu-easy", render_delay=0)
        assert (config.first, config.second, config.render_delay) == ("cpu-hard", "cpu-easy", 0)

    def test_unknown_seat(self):
        """Unknown seat names fail fast."""
        with pytest.raises(KeyError, match="grandmaster"):
            Config(first="grandmaster")
        with pytest.raises(KeyError, match="cpu-insane"):
            Config(second="cpu-insane")

    def test_negative_delay(self):
        """Render delay cannot be negative."""
        with pytest.raises(ValueError):
            Config(render_delay=-1)

    def test_repr(self):
        """repr names both seats."""
        assert "cpu-normal" in repr(Config())
