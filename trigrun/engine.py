"""The engine: window, input, audio and clock driven once per frame."""

from __future__ import annotations

import time
from typing import Callable, Optional

import pygame

from trigrun.audio import Audio
from trigrun.clock import Clock
from trigrun.inputs import Input
from trigrun.renderer import Renderer

WINDOW_TITLE = "Game Engine"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600


class Engine:
    """Owns the subsystems a game needs and advances them each frame."""

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        input_state: Optional[Input] = None,
        audio: Optional[Audio] = None,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.renderer = renderer or Renderer()
        self.input = input_state or Input()
        self.audio = audio or Audio()
        self._timer = timer
        self.clock = Clock(timer)
        self.quit_requested = False

    def initialize(self) -> None:
        """Open the window and start input, audio and a fresh clock."""
        self.renderer.initialize()
        self.renderer.create_window(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT)
        self.input.initialize()
        self.audio.initialize()
        self.clock = Clock(self._timer)
        self.quit_requested = False

    def shutdown(self) -> None:
        self.renderer.shutdown()
        self.input.shutdown()
        self.audio.shutdown()

    def update(self) -> None:
        """Handle window events, then tick the clock, input and audio.

        Closing the window or pressing Escape shuts the engine down and sets
        ``quit_requested``; later calls then do nothing.
        """
        if self.quit_requested:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.quit_requested = True
        if self.quit_requested:
            self.shutdown()
            return
        self.clock.tick()
        self.input.update()
        self.audio.update()


default_engine = Engine()