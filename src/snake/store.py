# store.py
import json
import logging
import os
from pathlib import Path

from .events import EventSink

logger = logging.getLogger(__name__)

DEFAULT_SCORES_PATH = Path.home() / ".snake" / "highscore.json"


class JsonScoreStore:
    """Keeps the best score as {"high_score": N} in a small JSON file."""

    def __init__(self, path=DEFAULT_SCORES_PATH):
        self.path = Path(path)

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

        value = data.get("high_score") if isinstance(data, dict) else None
        # bool is an int subclass; don't let `true` load as 1
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            logger.warning("Ignoring malformed high score in %s: %r", self.path, value)
            return 0
        logger.info("Loaded high score %d from %s", value, self.path)
        return value

    def save(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump({"high_score": int(value)}, f, indent=2)
        os.replace(tmp, self.path)


class ScorePersistenceSink(EventSink):
    """Writes every new high score through to a store."""

    def __init__(self, store: JsonScoreStore):
        self.store = store

    def on_high_score_changed(self, high_score: int) -> None:
        try:
            self.store.save(high_score)
        except OSError:
            logger.exception("Failed to save high score %d to %s", high_score, self.store.path)
