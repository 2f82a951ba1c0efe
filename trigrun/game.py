"""The game: title screen, endless runner, game over screen and level drawing."""

from __future__ import annotations

import argparse
import contextlib
import logging
from enum import Enum
from itertools import pairwise
from typing import Optional, Sequence

import pygame

from trigrun.audio import SoundLoadError
from trigrun.button import Button
from trigrun.color import Color, ColorPreset
from trigrun.engine import Engine, default_engine
from trigrun.files import make_dir
from trigrun.gameobjects import GamemodeBarrier, Object
from trigrun.mathutils import rand_int
from trigrun.model import Model
from trigrun.modeldata import get_friendly_model
from trigrun.particle_manager import ParticleManager
from trigrun.player import Player
from trigrun.renderer import Font, Renderer, RendererError, Text
from trigrun.scene import Scene
from trigrun.vector2 import Transform, Vector2

logger = logging.getLogger(__name__)

FONT_FILE = "Minercraftory.ttf"
SOUNDS = (
    "jumpSound.wav",
    "buttonPressSound.wav",
    "changeGamemodeSound.wav",
    "deathSound.wav",
    "waveTurnSound.wav",
    "winSound.wav",
)
DEATH_SOUND = "deathSound.wav"
LEVEL_DATA_DIR = "LevelData"

FINAL_PROGRESS_SPEED = 450.0
PROGRESS_ACCELERATION = 5.0
SCORE_INTERVAL = 0.2
LOADING_DELAY = 0.2
START_DISTANCE = 1400.0
GRID_SIZE = 25
HOLD_REPEAT = 0.2

_WHITE_TEXT = (1.0, 1.0, 1.0, 1.0)

_BUTTON_POINTS = ((-100, -30), (-100, 30), (100, 30), (100, -30), (-100, -30))
_PLATFORM_POINTS = ((-50, -20), (-50, 0), (50, 0), (50, -20), (-50, -20))
_OBSTRUCTION_POINTS = ((-15, -15), (-15, 15), (15, 15), (15, -15), (-15, -15))
_LONG_OBSTRUCTION_TOP = ((-25, -15), (-25, 500), (25, 500), (25, -15), (-25, -15))
_LONG_OBSTRUCTION_BOTTOM = ((-25, -500), (-25, 15), (25, 15), (25, -500), (-25, -500))
_BASE_PLATE_POINTS = ((-600, -200), (-600, 0), (600, 0), (600, -200), (-600, -200))


def _points(coords: Sequence[tuple[float, float]]) -> list[Vector2]:
    return [Vector2(x, y) for x, y in coords]


class GameState(Enum):
    TITLE = "title"
    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"
    ENDLESS = "endless"


class Game:
    """Runs the screens of the game on top of an engine."""

    def __init__(self, engine: Optional[Engine] = None, font_path: Optional[str] = FONT_FILE) -> None:
        self.engine = engine or default_engine
        self.font_path = font_path
        self.state = GameState.TITLE
        self.progress_speed = 0.0
        self.progress = 0.0
        self.draw_hitboxes = True
        self.ended = False
        self.initialize()

    # -- set-up -----------------------------------------------------------

    def _load_font(self, size: int) -> Font:
        font = Font()
        try:
            font.load(self.font_path, size)
        except RendererError as exc:
            logger.warning("%s; using the default font", exc)
            font.load(None, size)
        return font

    def _play(self, name: str) -> None:
        try:
            self.engine.audio.play_sound(name)
        except SoundLoadError as exc:
            logger.warning("%s", exc)

    def initialize(self) -> None:
        """Start the engine, create the scene and load fonts and sounds."""
        self.engine.initialize()
        self.scene = Scene(self.engine)
        self.particle_manager = ParticleManager()
        self.small_font = self._load_font(15)
        self.medium_font = self._load_font(30)
        self.large_font = self._load_font(60)
        for name in SOUNDS:
            try:
                self.engine.audio.add_sound(name)
            except SoundLoadError as exc:
                logger.warning("%s", exc)

    def shutdown(self) -> None:
        """Shut the engine down."""
        self.engine.shutdown()

    @property
    def renderer(self) -> Renderer:
        return self.engine.renderer

    # -- state machine ----------------------------------------------------

    def start(self, state: Optional[GameState] = None) -> None:
        """Run ``state`` (or the current state) and whatever screens follow it.

        The numbered levels have no content yet, so choosing one ends the game.
        Closing the window ends it too.
        """
        next_state = self.state if state is None else state
        while next_state is not None:
            self.ended = False
            self.scene.clear_all()
            self.progress = 0.0
            self.particle_manager.clear_death_particles()
            self.state = next_state
            if next_state is GameState.TITLE:
                next_state = self.run_title()
            elif next_state is GameState.ENDLESS:
                next_state = self.run_game(GameState.ENDLESS)
            else:
                next_state = None

    def update(self, dt: float) -> None:
        """Advance the engine, then the particles and the scene."""
        self.engine.update()
        if self.engine.quit_requested:
            return
        self.particle_manager.update(dt)
        self.scene.update(dt, self.progress_speed)

    def draw(self, renderer: Renderer) -> None:
        self.particle_manager.draw(renderer)
        self.scene.draw(renderer, self.draw_hitboxes)

    def _advance(self) -> bool:
        """Run one update; False once the window has been closed."""
        self.update(self.engine.clock.delta_time)
        return not self.engine.quit_requested

    def _render(self) -> None:
        renderer = self.renderer
        renderer.set_color_rgba(0, 0, 0, 0)
        renderer.begin_frame()
        self.draw(renderer)
        renderer.end_frame()

    # -- level generation -------------------------------------------------

    def create_random_platforms(self, amount: int, scene: Scene) -> None:
        """Fill ``scene`` with ``amount`` randomly placed level pieces.

        In cube mode the pieces are platforms; now and then a barrier switches
        to ship mode, where the pieces are floating obstructions. Barriers go
        into the game's own scene.
        """
        color = Color(1, 1, 1)
        height = self.renderer.height
        gamemode = 0
        total_distance = START_DISTANCE

        for index in range(amount):
            random_height = rand_int(400, 550)
            random_distance = rand_int(250, 400)

            if rand_int(0, 10) == 0:
                gamemode = (gamemode + 1) % 2
                self.create_change_gamemode_barrier(random_distance + int(total_distance), gamemode)
                if gamemode == 1:
                    random_distance *= 2
                total_distance += random_distance
                continue

            if index == 0:
                random_distance = rand_int(0, 100)
            total_distance += random_distance

            if gamemode == 0:
                transform = Transform(Vector2(total_distance, random_height), 0)
                model = Model(_points(_PLATFORM_POINTS), color)
                scene.add_actor(Object(transform, model, _points(_PLATFORM_POINTS)))
                continue

            random_height = rand_int(int(height * 0.1), int(height * 0.9))
            model = Model(_points(_OBSTRUCTION_POINTS), color)
            long_chance = rand_int(0, 6)
            if long_chance == 5:
                random_height = rand_int(int(height * 0.5), int(height * 0.8))
                model = Model(_points(_LONG_OBSTRUCTION_TOP), color)
            elif long_chance == 4:
                random_height = rand_int(int(height * 0.2), int(height * 0.5))
                model = Model(_points(_LONG_OBSTRUCTION_BOTTOM), color)
            transform = Transform(Vector2(total_distance - random_distance // 2, random_height), 0)
            scene.add_actor(Object(transform, model, _points(_OBSTRUCTION_POINTS)))

            random_height = rand_int(int(height * 0.05), int(height * 0.95))
            transform = Transform(Vector2(total_distance, random_height), 0)
            model = Model(_points(_OBSTRUCTION_POINTS), color)
            scene.add_actor(Object(transform, model, _points(_OBSTRUCTION_POINTS)))

    def create_change_gamemode_barrier(self, x: int, to_gamemode: int) -> None:
        """Add a full-height barrier at ``x`` that switches to ``to_gamemode``."""
        border = Color.from_preset(ColorPreset.WHITE)
        preset = ColorPreset.YELLOW if to_gamemode == 1 else ColorPreset.GREEN
        half = self.renderer.height * 1.2 / 2.0
        points = [
            Vector2(-10.0, -half),
            Vector2(-10.0, half),
            Vector2(10.0, -half),
            Vector2(10.0, -half),
            Vector2(-10.0, -half),
        ]
        transform = Transform(Vector2(x, self.renderer.height >> 1), 0)
        barrier = GamemodeBarrier(transform, Model(points, border), Color.from_preset(preset), to_gamemode)
        barrier.tag = "Barrier"
        self.scene.add_actor(barrier)

    # -- level editor -----------------------------------------------------

    def draw_mode(self) -> list[list[Vector2]]:
        """Let the user sketch shapes on a grid until the window is closed.

        Holding the left button adds grid points to the current shape, holding
        the right button finishes it, and the arrow keys scroll the view.
        Returns the finished shapes.
        """
        with contextlib.suppress(FileExistsError):
            make_dir(LEVEL_DATA_DIR)

        current: list[Vector2] = []
        finished: list[list[Vector2]] = []
        x_offset = 0
        hold_timer = 0.0
        engine = self.engine

        while True:
            engine.update()
            if engine.quit_requested:
                break
            hold_timer += engine.clock.delta_time
            inputs = engine.input

            mouse = inputs.mouse_position
            grid_cell = Vector2(int(mouse.x) // GRID_SIZE, int(mouse.y) // GRID_SIZE)
            clicked = grid_cell * float(GRID_SIZE) + GRID_SIZE / 2.0 - Vector2(x_offset, 0)

            if inputs.mouse_button_down(0) and inputs.prev_mouse_button_down(0):
                if not current or (current[-1] - clicked).length() > 10:
                    current.append(clicked)

            if inputs.mouse_button_down(2) and inputs.prev_mouse_button_down(2):
                finished.append(current)
                current = []

            if inputs.key_down(pygame.K_LEFT) and x_offset < 0 and hold_timer >= HOLD_REPEAT:
                x_offset += GRID_SIZE
                hold_timer = 0.0

            if inputs.key_down(pygame.K_RIGHT) and hold_timer >= HOLD_REPEAT:
                x_offset -= GRID_SIZE
                hold_timer = 0.0

            renderer = self.renderer
            renderer.set_color_rgba(0, 0, 0, 0)
            renderer.begin_frame()
            renderer.set_color_rgba(500, 0, 500, 1)

            for a, b in pairwise(current):
                renderer.draw_line(a.x + x_offset, a.y, b.x + x_offset, b.y)
            if current:
                last = current[-1]
                renderer.draw_line(last.x + x_offset, last.y, clicked.x + x_offset, clicked.y)
            for shape in finished[:-1]:
                for a, b in pairwise(shape):
                    renderer.draw_line(a.x + x_offset, a.y, b.x + x_offset, b.y)

            renderer.end_frame()

        return finished

    # -- screens ----------------------------------------------------------

    def _update_score_text(self, score_text: Text, score: int) -> None:
        score_text.create(self.renderer, str(score), Color(*_WHITE_TEXT))

    def run_game(self, state: GameState) -> Optional[GameState]:
        """Play an endless run, then show the game over screen.

        Returns the state chosen on the game over screen, or ``None`` when
        the window is closed.
        """
        renderer = self.renderer
        self.progress_speed = FINAL_PROGRESS_SPEED
        score = 0

        score_text = Text(self.small_font, Vector2(renderer.width >> 1, 40))
        self._update_score_text(score_text, score)
        self.scene.add_text(score_text)

        self.create_random_platforms(100, self.scene)

        preset = get_friendly_model(0)
        model = Model(preset.model, preset.color)
        transform = Transform(Vector2(renderer.width >> 2, 400), 0)
        player = Player(600.0, transform, model, preset.hitbox, engine=self.engine)
        self.scene.player = player

        base_plate = Model(_points(_BASE_PLATE_POINTS), Color(1.0, 1.0, 1.0))
        self.scene.add_actor(Object(Transform(Vector2(600, 650), 0), base_plate, _points(_BASE_PLATE_POINTS)))

        since_last_point = 0.0
        while not self.ended:
            if not self._advance():
                return None
            dt = self.engine.clock.delta_time
            since_last_point += dt
            if since_last_point >= SCORE_INTERVAL:
                since_last_point = 0.0
                score += 1
                self._update_score_text(score_text, score)

            self.progress_speed += PROGRESS_ACCELERATION * dt

            if self.scene.player is not None and player.destroyed:
                self.particle_manager.explode_player(player.transform.position)
                self.scene.player = None
                self._play(DEATH_SOUND)
                self.end_game(state)

            self._render()

        self.scene.clear_text()
        retry, leave = self.create_game_over_screen(score)

        while True:
            if not self._advance():
                return None
            if retry.button_clicked(self.engine.input):
                return state
            if leave.button_clicked(self.engine.input):
                return GameState.TITLE
            self._render()

    def run_title(self) -> Optional[GameState]:
        """Show the title screen until a level is chosen and return it.

        Returns ``None`` when the window is closed.
        """
        choices = (GameState.LEVEL1, GameState.LEVEL2, GameState.LEVEL3, GameState.ENDLESS)
        buttons = self.create_title_screen()
        chosen = GameState.TITLE

        while chosen is GameState.TITLE:
            if not self._advance():
                return None
            for button, choice in zip(buttons, choices):
                if button.button_clicked(self.engine.input):
                    chosen = choice
            self._render()

        loading = 0.0
        while loading < LOADING_DELAY:
            loading += self.engine.clock.delta_time
            if not self._advance():
                return None
            self._render()

        return chosen

    def _add_button(self, y: int, label: str, text_color: Color, bg: ColorPreset, model: Model) -> Button:
        transform = Transform(Vector2(self.renderer.width >> 1, y), 0)
        text = Text(self.medium_font, transform.position)
        text.create(self.renderer, label, text_color)
        button = Button(transform, model, text, Color.from_preset(bg), audio=self.engine.audio)
        self.scene.add_actor(button)
        return button

    def create_title_screen(self) -> list[Button]:
        """Add the title and the level buttons to the scene and return the buttons."""
        title = Text(self.large_font, Vector2(self.renderer.width >> 1, 130))
        title.create(self.renderer, "Trigonometry Run", Color(1.0, 1.0, 1.0))
        self.scene.add_text(title)

        white = Color.from_preset(ColorPreset.WHITE)
        black = Color.from_preset(ColorPreset.BLACK)
        model = Model(_points(_BUTTON_POINTS), white)
        return [
            self._add_button(230, "Level 1", black, ColorPreset.GREEN, model),
            self._add_button(320, "Level 2", black, ColorPreset.YELLOW, model),
            self._add_button(410, "Level 3", black, ColorPreset.RED, model),
            self._add_button(500, "Endless", white, ColorPreset.BLACK, model),
        ]

    def create_game_over_screen(self, final_score: int) -> list[Button]:
        """Add the game over texts and the retry and exit buttons; return the buttons."""
        centre = self.renderer.width >> 1
        title = Text(self.large_font, Vector2(centre, 200))
        title.create(self.renderer, "Game Over", ColorPreset.RED)
        self.scene.add_text(title)

        score_text = Text(self.medium_font, Vector2(centre, 270))
        score_text.create(self.renderer, f"{final_score} Points", ColorPreset.WHITE)
        self.scene.add_text(score_text)

        white = Color.from_preset(ColorPreset.WHITE)
        black = Color.from_preset(ColorPreset.BLACK)
        model = Model(_points(_BUTTON_POINTS), white)
        return [
            self._add_button(370, "Retry", black, ColorPreset.CYAN, model),
            self._add_button(470, "Exit Level", white, ColorPreset.BLACK, model),
        ]

    def end_game(self, state: GameState) -> None:
        """Stop the scrolling and leave the running level."""
        self.progress_speed = 0.0
        self.ended = True


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="trigrun", description="A side-scrolling runner.")
    parser.add_argument("--draw-mode", action="store_true", help="sketch level shapes instead of playing")
    args = parser.parse_args(argv)

    game = Game()
    try:
        if args.draw_mode:
            game.draw_mode()
        else:
            game.start(GameState.TITLE)
    finally:
        game.shutdown()
    return 0