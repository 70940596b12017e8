"""
Tests for config.py - Config validation.
"""

import pytest

from snake.config import CFG, Config, ConfigError


class TestConfig:
    def test_defaults(self):
        assert CFG.grid_size == 20
        assert CFG.initial_speed == 150
        assert CFG.speed_step == 10
        assert CFG.min_speed == 50
        assert CFG.score_increment == 10
        assert CFG.speed_threshold == 50
        assert CFG.center == (10, 10)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grid_size": 0},
            {"grid_size": -3},
            {"min_speed": 0},
            {"initial_speed": 40},
            {"speed_step": 0},
            {"score_increment": -10},
            {"speed_threshold": 0},
            {"max_food_attempts": 0},
        ],
    )
    def test_malformed_config_fails_fast(self, kwargs):
        with pytest.raises(ConfigError):
            Config(**kwargs)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            Config(grid_size=0)

    def test_config_is_immutable(self):
        with pytest.raises(Exception):
            CFG.grid_size = 30
