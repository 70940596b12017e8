# sound.py
import logging
from pathlib import Path

import pygame  # type: ignore

from .events import EventSink

logger = logging.getLogger(__name__)

DEFAULT_SOUND_DIR = Path(__file__).resolve().parent / "assets" / "sounds"

# name -> (file, volume)
SOUND_FILES = {
    "eat": ("eat.wav", 0.4),
    "gameover": ("gameover.wav", 0.5),
    "move": ("move.ogg", 0.4),
}


class SoundSink(EventSink):
    """
    Plays the eat / game-over effects and loops a background track while a
    game is running. Missing files or a missing audio device just make it
    quiet; the game never waits on it.
    """

    def __init__(self, sound_dir=DEFAULT_SOUND_DIR, enabled: bool = True):
        self.enabled = enabled
        self.sounds = {}
        self.looping = False
        if not self._init_mixer():
            return
        for name, (filename, volume) in SOUND_FILES.items():
            path = Path(sound_dir) / filename
            try:
                sound = pygame.mixer.Sound(str(path))
            except (pygame.error, FileNotFoundError) as e:
                logger.warning("Failed to load %s: %s", path, e)
                continue
            sound.set_volume(volume)
            self.sounds[name] = sound
        logger.info("Loaded %d/%d sounds from %s", len(self.sounds), len(SOUND_FILES), sound_dir)

    @staticmethod
    def _init_mixer() -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio unavailable, running silent: %s", e)
            return False
        return True

    def play(self, name: str, loops: int = 0) -> None:
        sound = self.sounds.get(name)
        if not self.enabled or sound is None:
            return
        sound.stop()
        sound.play(loops=loops)

    def stop(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.stop()

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        if not self.enabled:
            for sound in self.sounds.values():
                sound.stop()
        elif self.looping:
            self.play("move", loops=-1)
        logger.info("Sound %s", "on" if self.enabled else "off")
        return self.enabled

    # ----- EventSink -----
    def start_loop(self) -> None:
        self.looping = True
        self.play("move", loops=-1)

    def stop_loop(self) -> None:
        self.looping = False
        self.stop("move")

    def on_started(self) -> None:
        self.start_loop()

    def on_resumed(self) -> None:
        self.start_loop()

    def on_paused(self) -> None:
        self.stop_loop()

    def on_ate(self) -> None:
        self.play("eat")

    def on_crashed(self) -> None:
        self.play("gameover")

    def on_game_over(self, reason: str) -> None:
        self.stop_loop()
