"""
Tests for render.py - HUD labels and board geometry.
"""

from snake.config import CELL_SIZE, HUD_HEIGHT
from snake.render import board_rect, score_label, window_size


class TestScoreLabel:
    def test_dash_until_shown(self):
        assert score_label(0, False) == "-"
        assert score_label(40, False) == "-"

    def test_value_once_shown(self):
        assert score_label(0, True) == "0"
        assert score_label(120, True) == "120"


class TestGeometry:
    def test_board_sits_below_the_hud(self):
        board = board_rect(20)
        assert board.top == HUD_HEIGHT
        assert board.size == (20 * CELL_SIZE, 20 * CELL_SIZE)
        assert window_size(20) == (board.width, board.bottom)
