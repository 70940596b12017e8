"""
Tests for main.py - keyboard and mouse handling, CLI parsing.
"""

from unittest.mock import Mock

import pygame  # type: ignore
import pytest

from snake.config import UP, DOWN, LEFT, RIGHT
from snake.game import Phase, SnakeGame
from snake.main import Host, direction_from_click, parse_args
from snake.render import board_rect


@pytest.fixture
def host():
    game = Mock(spec=SnakeGame)
    game.phase = Phase.RUNNING
    # 20x20 board below the HUD: x 0..399, y 40..439, centre (200, 240)
    return Host(game, Mock(), board_rect(20))


class TestHandleKey:
    def test_arrows_propose_directions(self, host):
        host.handle_key(pygame.K_UP, 0)
        host.handle_key(pygame.K_LEFT, 0)
        assert [c.args[0] for c in host.game.propose_direction.call_args_list] == [UP, LEFT]

    def test_space_starts_from_idle_and_over(self, host):
        for phase in (Phase.IDLE, Phase.OVER):
            host.game.phase = phase
            host.handle_key(pygame.K_SPACE, 42)
        assert host.game.start.call_count == 2
        host.game.toggle_pause.assert_not_called()

    def test_space_and_p_toggle_pause_mid_game(self, host):
        host.handle_key(pygame.K_SPACE, 5)
        host.handle_key(pygame.K_p, 6)
        assert host.game.toggle_pause.call_count == 2
        host.game.start.assert_not_called()

    def test_r_restarts(self, host):
        host.handle_key(pygame.K_r, 9)
        host.game.restart.assert_called_once_with(9)

    def test_m_toggles_sound_and_t_toggles_theme(self, host):
        host.handle_key(pygame.K_m, 0)
        host.sounds.toggle.assert_called_once_with()
        assert host.theme == "dark"
        host.handle_key(pygame.K_t, 0)
        assert host.theme == "light"

    def test_escape_quits(self, host):
        assert host.handle_key(pygame.K_ESCAPE, 0) is False
        assert host.handle_key(pygame.K_UP, 0) is True


class TestArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.seed is None
        assert args.fps == 60
        assert args.mute is False
        assert args.log_level == "INFO"

    def test_overrides(self, tmp_path):
        args = parse_args(["--seed", "3", "--scores", str(tmp_path / "s.json"), "--mute"])
        assert args.seed == 3
        assert args.scores.endswith("s.json")
        assert args.mute is True


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


class TestHandleClick:
    """Clicks on the board steer towards the side of the centre they land on."""

    @pytest.mark.parametrize(
        "pos, expected",
        [
            ((390, 250), RIGHT),
            ((10, 230), LEFT),
            ((210, 50), UP),
            ((190, 430), DOWN),
            ((260, 320), DOWN),   # |dy| > |dx|
            ((300, 250), RIGHT),  # |dx| > |dy|
        ],
    )
    def test_direction_from_click(self, pos, expected):
        assert direction_from_click(pos, board_rect(20)) == expected

    def test_click_on_the_centre_has_no_direction(self):
        assert direction_from_click((200, 240), board_rect(20)) is None

    def test_clicks_propose_directions_while_running(self, host, monkeypatch):
        monkeypatch.setattr(pygame.event, "get", lambda: [click((390, 250)), click((210, 50))])
        assert host.handle_input(0) is True
        assert [c.args[0] for c in host.game.propose_direction.call_args_list] == [RIGHT, UP]

    def test_click_starts_an_idle_game(self, host, monkeypatch):
        host.game.phase = Phase.IDLE
        monkeypatch.setattr(pygame.event, "get", lambda: [click((100, 100))])
        host.handle_input(77)
        host.game.start.assert_called_once_with(77)
        host.game.propose_direction.assert_not_called()

    @pytest.mark.parametrize("phase", [Phase.PAUSED, Phase.OVER])
    def test_clicks_ignored_when_paused_or_over(self, host, monkeypatch, phase):
        host.game.phase = phase
        monkeypatch.setattr(pygame.event, "get", lambda: [click((390, 250))])
        host.handle_input(0)
        host.game.start.assert_not_called()
        host.game.propose_direction.assert_not_called()

    def test_clicks_outside_the_board_and_other_buttons_ignored(self, host, monkeypatch):
        monkeypatch.setattr(pygame.event, "get", lambda: [click((390, 10)), click((390, 250), button=3)])
        host.handle_input(0)
        host.game.propose_direction.assert_not_called()
