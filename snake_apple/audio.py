"""
audio.py - Looping background music.

BackgroundMusic is the single owner of the mixer's music channel. The lock
serializes start/stop against the playback thread; nothing else in the game
touches it.
"""

import logging
import os
import threading

import pygame

from snake_apple.errors import AudioError

logger = logging.getLogger(__name__)


class BackgroundMusic:
    def __init__(self, path, volume=0.3):
        self.path = path
        self.volume = volume
        self._lock = threading.Lock()
        self._thread = None

    @property
    def playing(self):
        return self._thread is not None

    def start(self):
        """Load the track and begin looping it. Raises AudioError on any failure."""
        if not os.path.isfile(self.path):
            raise AudioError(f"Music file not found: {self.path}")
        with self._lock:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
                pygame.mixer.music.load(self.path)
                pygame.mixer.music.set_volume(self.volume)
            except pygame.error as exc:
                raise AudioError(f"Could not load music {self.path}: {exc}") from exc

        self._thread = threading.Thread(target=self._play, name="background-music", daemon=True)
        self._thread.start()
        logger.info("Playing %s at volume %.2f", self.path, self.volume)

    def _play(self):
        with self._lock:
            pygame.mixer.music.play(loops=-1)

    def stop(self):
        if self._thread is None:
            return
        self._thread.join()
        self._thread = None
        with self._lock:
            if pygame.mixer.get_init():
                pygame.mixer.music.stop()
