from dataclasses import dataclass
from typing import Optional

# ----- Window -----
CELL_SIZE = 20
HUD_HEIGHT = 40

# ----- Colors (dark, light) -----
THEMES = {
    "dark": {
        "bg": (17, 24, 39),
        "board": (31, 41, 55),
        "head": (96, 165, 250),
        "body": (59, 130, 246),
        "food": (239, 68, 68),
        "text": (220, 220, 230),
        "accent": (196, 181, 253),
    },
    "light": {
        "bg": (243, 244, 246),
        "board": (229, 231, 235),
        "head": (59, 130, 246),
        "body": (96, 165, 250),
        "food": (220, 38, 38),
        "text": (55, 65, 81),
        "accent": (124, 58, 237),
    },
}

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DIRECTION_NAMES = {UP: "UP", DOWN: "DOWN", LEFT: "LEFT", RIGHT: "RIGHT"}


class ConfigError(ValueError):
    """Raised when a Config is constructed with unusable values."""


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = 20
    initial_speed: int = 150      # ms between moves at the start of a game
    speed_step: int = 10          # ms shaved off per threshold crossed
    min_speed: int = 50
    score_increment: int = 10
    speed_threshold: int = 50     # speed up every time score hits a multiple of this
    max_food_attempts: int = 1000
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ConfigError(f"grid_size must be positive, got {self.grid_size}")
        if self.min_speed <= 0:
            raise ConfigError(f"min_speed must be positive, got {self.min_speed}")
        if self.initial_speed < self.min_speed:
            raise ConfigError(
                f"initial_speed ({self.initial_speed}) is below min_speed ({self.min_speed})"
            )
        for name in ("speed_step", "score_increment", "speed_threshold", "max_food_attempts"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

    @property
    def center(self):
        return (self.grid_size // 2, self.grid_size // 2)


CFG = Config()
