"""Window, drawing primitives, fonts and text rendering."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Union

import pygame

from trigrun.color import Color, ColorPreset
from trigrun.vector2 import Vector2

RGBA = tuple[int, int, int, int]
Number = Union[int, float]


class RendererError(RuntimeError):
    """Raised when the display, a font or a text texture cannot be used."""


class Renderer:
    """Draws coloured primitives onto a window or an off-screen surface."""

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self._surface = surface
        self._owns_window = False
        self.color: RGBA = (0, 0, 0, 0)
        if surface is not None:
            self.width, self.height = surface.get_size()
        else:
            self.width = 0
            self.height = 0

    @property
    def surface(self) -> pygame.Surface:
        """The surface that drawing goes to."""
        if self._surface is None:
            raise RendererError("no window or surface to draw on")
        return self._surface

    def initialize(self) -> None:
        """Start the display and font subsystems."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RendererError(f"Error initializing display: {exc}") from exc
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RendererError(f"Error initializing fonts: {exc}") from exc

    def shutdown(self) -> None:
        """Close the window, if one was opened, and drop the drawing surface."""
        if self._owns_window and pygame.display.get_init():
            pygame.display.quit()
        self._owns_window = False
        self._surface = None

    def create_window(self, title: str, width: int, height: int) -> None:
        """Open a window of the given size and draw into it from now on."""
        self.width = width
        self.height = height
        try:
            surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.display.quit()
            raise RendererError(f"Error creating window: {exc}") from exc
        pygame.display.set_caption(title)
        self._surface = surface
        self._owns_window = True

    def begin_frame(self) -> None:
        """Clear the surface with the current draw colour."""
        self.surface.fill(self.color)

    def end_frame(self) -> None:
        """Present the frame when drawing to a window."""
        if self._owns_window:
            pygame.display.flip()

    def set_color(self, color: Color) -> None:
        self.color = color.to_rgba()

    def set_color_rgba(self, r: int, g: int, b: int, a: int) -> None:
        """Set the draw colour from byte components; larger values wrap as bytes."""
        self.color = (int(r) & 0xFF, int(g) & 0xFF, int(b) & 0xFF, int(a) & 0xFF)

    def draw_line(self, x1: Number, y1: Number, x2: Number, y2: Number) -> None:
        pygame.draw.line(self.surface, self.color, (x1, y1), (x2, y2))

    def draw_point(self, x: Number, y: Number) -> None:
        self.surface.set_at((int(x), int(y)), self.color)

    def draw_rect(self, x: Number, y: Number, w: Number, h: Number) -> None:
        """Fill a rectangle of size ``w`` by ``h`` centred on ``(x, y)``."""
        if all(isinstance(v, int) for v in (x, y, w, h)):
            left = x - int(w / 2)
            top = y - int(h / 2)
        else:
            left = x - w / 2
            top = y - h / 2
        rect = pygame.Rect(round(left), round(top), round(w), round(h))
        pygame.draw.rect(self.surface, self.color, rect)


class Font:
    """A TrueType font at a fixed size."""

    def __init__(self) -> None:
        self._font: Optional[pygame.font.Font] = None

    @property
    def loaded(self) -> bool:
        return self._font is not None

    def load(self, name: Optional[str], font_size: int) -> None:
        """Load the font file ``name``; ``None`` selects the built-in default font."""
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font = pygame.font.Font(name, font_size)
        except (OSError, pygame.error) as exc:
            raise RendererError(f"Could not load font: {name}") from exc

    def _render(self, text: str, rgba: RGBA) -> pygame.Surface:
        if self._font is None:
            raise RendererError("font has not been loaded")
        return self._font.render(text, False, rgba[:3])


class Text:
    """A string rendered once with a font and drawn centred on a point."""

    def __init__(self, font: Optional[Font] = None, position: Optional[Vector2] = None) -> None:
        self.font = font
        self.position = position.copy() if position is not None else Vector2(40, 40)
        self._rendered: Optional[pygame.Surface] = None

    @property
    def size(self) -> tuple[int, int]:
        """Width and height of the rendered text."""
        if self._rendered is None:
            raise RendererError("text has not been created")
        return self._rendered.get_size()

    def create(self, renderer: Renderer, text: str, color: Union[Color, ColorPreset]) -> None:
        """Render ``text`` in ``color`` so it can be drawn."""
        if isinstance(color, ColorPreset):
            color = Color.from_preset(color)
        else:
            color = replace(color)
        if self.font is None or not self.font.loaded:
            raise RendererError("Could not create surface: no font loaded")
        try:
            self._rendered = self.font._render(text, color.to_rgba())
        except pygame.error as exc:
            raise RendererError(f"Could not create surface: {exc}") from exc

    def draw(self, renderer: Renderer, x: Optional[Number] = None, y: Optional[Number] = None) -> None:
        """Draw the text centred on ``(x, y)``, or on its own position."""
        if self._rendered is None:
            raise RendererError("text has not been created")
        if x is None:
            x = self.position.x
        if y is None:
            y = self.position.y
        width, height = self._rendered.get_size()
        renderer.surface.blit(self._rendered, (int(x) - width // 2, int(y) - height // 2))