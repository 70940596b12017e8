# events.py
"""
Event sinks: how the game engine tells the outside world what happened.

The engine only ever calls these hooks after a command or tick has fully
committed, so a slow or broken sink can't leave the game half-updated.
"""
import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class EventSink:
    """Base sink. Every hook is a no-op; override the ones you care about."""

    def on_started(self) -> None:
        pass

    def on_paused(self) -> None:
        pass

    def on_resumed(self) -> None:
        pass

    def on_ate(self) -> None:
        pass

    def on_crashed(self) -> None:
        pass

    def on_game_over(self, reason: str) -> None:
        """Any way a game ends: a crash, or the snake filling the board."""
        pass

    def on_score_changed(self, score: int) -> None:
        pass

    def on_high_score_changed(self, high_score: int) -> None:
        pass


class MultiSink(EventSink):
    """Fan every event out to several sinks. One failing sink doesn't stop the rest."""

    def __init__(self, sinks: Iterable[EventSink]):
        self.sinks = list(sinks)

    def _each(self, hook: str, *args) -> None:
        for sink in self.sinks:
            try:
                getattr(sink, hook)(*args)
            except Exception:
                logger.exception("%s.%s failed", type(sink).__name__, hook)

    def on_started(self) -> None:
        self._each("on_started")

    def on_paused(self) -> None:
        self._each("on_paused")

    def on_resumed(self) -> None:
        self._each("on_resumed")

    def on_ate(self) -> None:
        self._each("on_ate")

    def on_crashed(self) -> None:
        self._each("on_crashed")

    def on_game_over(self, reason: str) -> None:
        self._each("on_game_over", reason)

    def on_score_changed(self, score: int) -> None:
        self._each("on_score_changed", score)

    def on_high_score_changed(self, high_score: int) -> None:
        self._each("on_high_score_changed", high_score)
