# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging
import random
import threading

from .config import CFG, Config, DIRECTION_NAMES, RIGHT
from .events import EventSink
from .rules import (
    Cell, Collision, Direction,
    check_collision, next_head, place_food, propose_direction,
)

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction           # direction applied on the last move
    pending: Optional[Direction]   # accepted proposal waiting for the next move
    food: Optional[Cell]
    score: int
    last_move: int                 # ms timestamp of last step
    speed_ms: int                  # current step interval


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    direction: Direction
    score: int
    high_score: int
    speed: int
    phase: Phase


@dataclass(frozen=True)
class TickResult:
    moved: bool = False
    ate: bool = False
    collision: Optional[Collision] = None
    board_full: bool = False

    @property
    def crashed(self) -> bool:
        return self.collision is not None


NO_MOVE = TickResult()


def new_game_state(now_ms: int, config: Config, rng: random.Random) -> GameState:
    snake = [config.center]
    food = place_food(set(snake), config.grid_size, rng, config.max_food_attempts)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=None,
        food=food,
        score=0,
        last_move=now_ms,
        speed_ms=config.initial_speed,
    )

def speed_after_score(score: int, speed_ms: int, config: Config) -> int:
    """Drop the interval by one step each time score lands on a threshold multiple."""
    if score > 0 and score % config.speed_threshold == 0:
        return max(config.min_speed, speed_ms - config.speed_step)
    return speed_ms


# ---------- Engine ----------
class SnakeGame:
    """
    Owns the one authoritative copy of the game and the Idle/Running/Paused/Over
    state machine around it.

    Commands and ticks run under a single lock, so input arriving from another
    thread always lands between moves. Sink notifications are queued while the
    lock is held and sent once it is released.
    """

    def __init__(
        self,
        config: Config = CFG,
        sink: Optional[EventSink] = None,
        store=None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.sink = sink if sink is not None else EventSink()
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.high_score = store.load() if store is not None else 0
        self.phase = Phase.IDLE
        self.state = new_game_state(0, config, self.rng)
        self._lock = threading.Lock()

    # ----- Commands -----
    def start(self, now_ms: int) -> bool:
        """Begin a fresh game. Only legal from Idle or Over."""
        events: List[Tuple[str, tuple]] = []
        with self._lock:
            if self.phase not in (Phase.IDLE, Phase.OVER):
                logger.debug("start() ignored while %s", self.phase.value)
                return False
            self._begin(now_ms, events)
        self._dispatch(events)
        return True

    def restart(self, now_ms: int) -> bool:
        """Abandon whatever is going on and start over, from any phase."""
        events: List[Tuple[str, tuple]] = []
        with self._lock:
            if self.phase is not Phase.IDLE:
                logger.info("Restarting game at score %d", self.state.score)
                self.phase = Phase.OVER
            self._begin(now_ms, events)
        self._dispatch(events)
        return True

    def pause(self) -> bool:
        events: List[Tuple[str, tuple]] = []
        with self._lock:
            changed = self._pause(events)
        self._dispatch(events)
        return changed

    def resume(self, now_ms: int) -> bool:
        events: List[Tuple[str, tuple]] = []
        with self._lock:
            changed = self._resume(now_ms, events)
        self._dispatch(events)
        return changed

    def toggle_pause(self, now_ms: int) -> bool:
        """Pause if running, resume if paused, decided and applied in one step."""
        events: List[Tuple[str, tuple]] = []
        with self._lock:
            if self.phase is Phase.PAUSED:
                changed = self._resume(now_ms, events)
            else:
                changed = self._pause(events)
        self._dispatch(events)
        return changed

    def propose_direction(self, direction: Direction) -> bool:
        """
        Offer a new heading for the next move.

        The latest accepted proposal before a tick wins; nothing is queued
        beyond that. Reversals of the current heading are dropped.
        """
        with self._lock:
            accepted = propose_direction(direction, self.state.direction)
            if self.phase is not Phase.RUNNING or accepted is None:
                return False
            self.state.pending = accepted
            return True

    # ----- Simulation -----
    def tick(self, now_ms: int) -> TickResult:
        """
        Advance one grid step if the game is running and `speed_ms` has passed
        since the last move. Otherwise nothing changes.
        """
        events: List[Tuple[str, tuple]] = []
        with self._lock:
            result = self._step(now_ms, events)
        self._dispatch(events)
        return result

    def _step(self, now_ms: int, events: List[Tuple[str, tuple]]) -> TickResult:
        state = self.state
        if self.phase is not Phase.RUNNING:
            return NO_MOVE
        if now_ms - state.last_move < state.speed_ms:
            return NO_MOVE  # not time to move yet

        direction = state.pending if state.pending is not None else state.direction
        head = next_head(state.snake[0], direction)

        # Collision is judged against the body as it is before the move
        collision = check_collision(head, state.snake, self.config.grid_size)
        if collision is not Collision.OK:
            events.append(("on_crashed", ()))
            self._game_over(collision.value, events)
            return TickResult(collision=collision)

        state.snake.insert(0, head)
        state.direction = direction
        ate = head == state.food
        board_full = False
        if ate:
            events.append(("on_ate", ()))
            state.score += self.config.score_increment
            events.append(("on_score_changed", (state.score,)))
            if state.score > self.high_score:
                self.high_score = state.score
                events.append(("on_high_score_changed", (self.high_score,)))
            state.speed_ms = speed_after_score(state.score, state.speed_ms, self.config)
            state.food = place_food(
                set(state.snake), self.config.grid_size, self.rng, self.config.max_food_attempts
            )
            if state.food is None:
                board_full = True
                self._game_over("board full", events)
        else:
            state.snake.pop()

        state.last_move = now_ms
        state.pending = None
        return TickResult(moved=True, ate=ate, board_full=board_full)

    # ----- Queries -----
    def snapshot(self) -> Snapshot:
        with self._lock:
            state = self.state
            return Snapshot(
                snake=tuple(state.snake),
                food=state.food,
                direction=state.direction,
                score=state.score,
                high_score=self.high_score,
                speed=state.speed_ms,
                phase=self.phase,
            )

    # ----- Internals -----
    def _begin(self, now_ms: int, events: List[Tuple[str, tuple]]) -> None:
        self.state = new_game_state(now_ms, self.config, self.rng)
        self.phase = Phase.RUNNING
        logger.info(
            "Game started: head=%s dir=%s food=%s speed=%dms",
            self.state.snake[0], DIRECTION_NAMES[self.state.direction],
            self.state.food, self.state.speed_ms,
        )
        events.append(("on_started", ()))
        events.append(("on_score_changed", (0,)))

    def _pause(self, events: List[Tuple[str, tuple]]) -> bool:
        if self.phase is not Phase.RUNNING:
            logger.debug("pause() ignored while %s", self.phase.value)
            return False
        self.phase = Phase.PAUSED
        logger.info("Paused at score %d", self.state.score)
        events.append(("on_paused", ()))
        return True

    def _resume(self, now_ms: int, events: List[Tuple[str, tuple]]) -> bool:
        if self.phase is not Phase.PAUSED:
            logger.debug("resume() ignored while %s", self.phase.value)
            return False
        # Restart the move timer so time spent paused never counts as elapsed.
        self.state.last_move = now_ms
        self.phase = Phase.RUNNING
        logger.info("Resumed")
        events.append(("on_resumed", ()))
        return True

    def _game_over(self, reason: str, events: List[Tuple[str, tuple]]) -> None:
        self.phase = Phase.OVER
        logger.info(
            "Game over (%s): score=%d length=%d high=%d",
            reason, self.state.score, len(self.state.snake), self.high_score,
        )
        events.append(("on_game_over", (reason,)))

    def _dispatch(self, events: List[Tuple[str, tuple]]) -> None:
        for hook, args in events:
            callback: Callable = getattr(self.sink, hook)
            try:
                callback(*args)
            except Exception:
                logger.exception("Event sink failed on %s", hook)
