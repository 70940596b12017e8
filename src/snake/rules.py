# rules.py
from enum import Enum
from typing import Collection, Optional, Sequence, Tuple
import logging
import random

from .config import DIRECTIONS

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class Collision(Enum):
    OK = "ok"
    WALL = "wall"
    SELF = "self"


# ---------- Grid ----------
def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size

def next_head(head: Cell, direction: Direction) -> Cell:
    return (head[0] + direction[0], head[1] + direction[1])


# ---------- Direction arbitration ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def propose_direction(requested: Direction, current: Direction) -> Optional[Direction]:
    """Return the requested direction, or None if it would reverse the snake."""
    if requested not in DIRECTIONS:
        raise ValueError(f"Unknown direction {requested!r}")
    if is_opposite(requested, current):
        return None
    return requested


# ---------- Collisions ----------
def check_collision(head: Cell, snake: Sequence[Cell], grid_size: int) -> Collision:
    """
    Classify moving the head of `snake` onto `head`.

    The last segment is left out of the self check: it leaves its cell on the
    same move, so running into it is never fatal.
    """
    if not in_bounds(head, grid_size):
        return Collision.WALL
    for i in range(len(snake) - 1):
        if snake[i] == head:
            return Collision.SELF
    return Collision.OK


# ---------- Food ----------
def place_food(
    occupied: Collection[Cell],
    grid_size: int,
    rng: random.Random,
    max_attempts: int = 1000,
) -> Optional[Cell]:
    """
    Pick a free cell uniformly at random.

    Rejection sampling gets slow as the board fills up, so after
    `max_attempts` misses we fall back to choosing among the free cells
    directly. Returns None only when no free cell exists.
    """
    taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
    for _ in range(max_attempts):
        cell = (rng.randrange(grid_size), rng.randrange(grid_size))
        if cell not in taken:
            return cell

    free = [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in taken
    ]
    if not free:
        logger.warning("No free cell left for food on a %dx%d grid", grid_size, grid_size)
        return None
    logger.warning(
        "Food sampling missed %d times (%d free cells); picking from free list",
        max_attempts, len(free),
    )
    return rng.choice(free)
