"""Sound effects, loaded by file name and cached."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import pygame

logger = logging.getLogger(__name__)

CHANNELS = 32


class SoundLoadError(Exception):
    """Raised when a sound file cannot be loaded."""


def _load_pygame_sound(name: str) -> Any:
    return pygame.mixer.Sound(name)


class Audio:
    """Loads sounds on demand and plays them."""

    def __init__(self, loader: Optional[Callable[[str], Any]] = None) -> None:
        self._loader = loader or _load_pygame_sound
        self._sounds: dict[str, Any] = {}
        self.available = False
        self.busy = False

    def __contains__(self, name: str) -> bool:
        return name in self._sounds

    def initialize(self) -> None:
        """Start the mixer; without an audio device sounds cannot be loaded."""
        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(CHANNELS)
        except pygame.error as exc:
            logger.warning("audio unavailable: %s", exc)
            self.available = False
        else:
            self.available = True

    def shutdown(self) -> None:
        """Drop all sounds and stop the mixer."""
        self._sounds.clear()
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        self.available = False
        self.busy = False

    def update(self) -> None:
        """Refresh whether any sound is currently playing."""
        self.busy = bool(self.available and pygame.mixer.get_init() and pygame.mixer.get_busy())

    def add_sound(self, name: str) -> None:
        """Load the sound file ``name`` into the cache."""
        try:
            sound = self._loader(name)
        except (OSError, pygame.error) as exc:
            raise SoundLoadError(f"could not load sound: {name}") from exc
        if sound is None:
            raise SoundLoadError(f"could not load sound: {name}")
        self._sounds[name] = sound

    def play_sound(self, name: str) -> None:
        """Play ``name``, loading it first if it is not cached yet."""
        if name not in self._sounds:
            self.add_sound(name)
        self._sounds[name].play()