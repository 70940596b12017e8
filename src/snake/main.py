# main.py
import argparse
import logging
from pathlib import Path
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import Config, THEMES, UP, DOWN, LEFT, RIGHT
from .events import MultiSink
from .game import Phase, SnakeGame
from .rules import Direction
from .render import board_rect, draw_game, window_size
from .sound import DEFAULT_SOUND_DIR, SoundSink
from .store import DEFAULT_SCORES_PATH, JsonScoreStore, ScorePersistenceSink

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def direction_from_click(pos: Tuple[int, int], board: pygame.Rect) -> Optional[Direction]:
    """Head towards the side of the board centre the click landed on."""
    dx = pos[0] - board.centerx
    dy = pos[1] - board.centery
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    if dy > 0:
        return DOWN
    if dy < 0:
        return UP
    return None


class Host:
    """Everything outside the engine: input mapping, window theme and sound toggles."""

    def __init__(self, game: SnakeGame, sounds: SoundSink, board: pygame.Rect):
        self.game = game
        self.sounds = sounds
        self.board = board
        self.theme = "dark"

    def handle_key(self, key: int, now_ms: int) -> bool:
        """Apply one key press. Return False to quit."""
        game = self.game
        if key == pygame.K_ESCAPE:
            return False
        if key in KEY_DIRECTIONS:
            game.propose_direction(KEY_DIRECTIONS[key])
        elif key == pygame.K_SPACE:
            if game.phase in (Phase.IDLE, Phase.OVER):
                game.start(now_ms)
            else:
                game.toggle_pause(now_ms)
        elif key == pygame.K_p:
            game.toggle_pause(now_ms)
        elif key == pygame.K_r:
            game.restart(now_ms)
        elif key == pygame.K_m:
            self.sounds.toggle()
        elif key == pygame.K_t:
            self.theme = "light" if self.theme == "dark" else "dark"
        return True

    def handle_click(self, pos: Tuple[int, int], now_ms: int) -> None:
        """A click on the board starts an idle game, or steers a running one."""
        if not self.board.collidepoint(pos):
            return
        if self.game.phase is Phase.IDLE:
            self.game.start(now_ms)
        elif self.game.phase is Phase.RUNNING:
            direction = direction_from_click(pos, self.board)
            if direction is not None:
                self.game.propose_direction(direction)

    def handle_input(self, now_ms: int) -> bool:
        """Drain the pygame event queue. Return False to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and not self.handle_key(event.key, now_ms):
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos, now_ms)
        return True


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--fps", type=int, default=60, help="frame rate of the render loop")
    parser.add_argument(
        "--scores",
        type=str,
        default=str(DEFAULT_SCORES_PATH),
        help="JSON file the high score is kept in",
    )
    parser.add_argument("--sounds", type=str, default=str(DEFAULT_SOUND_DIR), help="directory with sound files")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(seed=args.seed)
    store = JsonScoreStore(Path(args.scores))

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode(window_size(config.grid_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    sounds = SoundSink(args.sounds, enabled=not args.mute)
    game = SnakeGame(config, sink=MultiSink([sounds, ScorePersistenceSink(store)]), store=store)
    host = Host(game, sounds, board_rect(config.grid_size))

    running = True
    while running:
        now = pygame.time.get_ticks()
        # 1) input
        running = host.handle_input(now)
        if not running:
            break

        # 2) update: called every frame, the engine decides whether it's time to move
        game.tick(pygame.time.get_ticks())

        # 3) render
        draw_game(screen, font, game.snapshot(), THEMES[host.theme])
        pygame.display.flip()
        clock.tick(args.fps)

    sounds.stop_loop()
    pygame.quit()

if __name__ == "__main__":
    main()
