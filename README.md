# trigrun

Trigonometry Run is a side-scrolling arcade game built on a small 2D
vector-graphics engine using pygame. You steer a square through an
endless course of platforms and obstacles. The course scrolls faster the
longer you survive. Crossing a barrier switches between two modes:

- **Cube**: hold the left mouse button or the space bar to jump from a
  platform. Holding it longer gives two extra boosts. Land on top of
  platforms. Running into the side of a platform ends the run.
- **Wave**: the ship moves diagonally. Each fresh press of the left mouse
  button turns it between climbing and diving. Any contact with an
  obstacle ends the run.

Your score goes up once every 0.2 seconds you survive. When a run ends,
the game-over screen offers **Retry** and **Exit Level**. Exit Level
returns to the title screen.

## Installing

```
pip install .
```

This needs Python 3.10 or later and installs `pygame`.

## Playing

```
trigrun
```

This opens an 800×600 window titled "Game Engine" with the title screen.
Choose **Endless** to start a run. Press Escape or close the window to
quit.

The game looks for these files in the working directory:

- the font `Minercraftory.ttf`
- the sounds `jumpSound.wav`, `buttonPressSound.wav`,
  `changeGamemodeSound.wav`, `deathSound.wav`, `waveTurnSound.wav` and
  `winSound.wav`

If the font is missing, pygame's default font is used. A sound that
cannot be loaded is logged as a warning and is not played.

### Draw mode

```
trigrun --draw-mode
```

This opens a sketching screen on a 25-pixel grid:

- Hold the left mouse button to add grid points to the current shape.
- Hold the right mouse button to finish the shape.
- Use the right arrow key to scroll the view forward. Use the left arrow
  key to scroll it back, but not past the start.

Draw mode creates a `LevelData` directory in the working directory if it
does not already exist. Close the window or press Escape to leave.

## What it does not do

- **Levels 1, 2 and 3**: the title screen shows these buttons, but the
  levels have no content. Choosing one of them ends the game.
- **Saving drawings**: draw mode does not write the shapes to disk.
  `Game.draw_mode()` returns them as lists of `Vector2`, but the
  `--draw-mode` command discards them when it exits.

## Using the engine

The modules can also be used on their own.

**Engine modules**

- `trigrun.vector2`: `Vector2` and `Transform`
- `trigrun.color`: `Color` and `ColorPreset`
- `trigrun.mathutils`: helpers for angle conversion, `clamp`, `wrap`,
  `rand_int`, `randf` and `random_on_unit_circle`
- `trigrun.model`: `Model`, line-drawn shapes with an axis-aligned hitbox
- `trigrun.actor`: `Actor`
- `trigrun.particle`: `Particle`
- `trigrun.scene`: `Scene`
- `trigrun.renderer`: `Renderer`, `Font`, `Text` and `RendererError`
- `trigrun.inputs`: `Input`, keyboard and mouse state with the previous
  frame kept
- `trigrun.audio`: `Audio` and `SoundLoadError`
- `trigrun.clock`: `Clock`
- `trigrun.engine`: `Engine`, which drives the window, input, audio and
  clock each frame

**Game modules**

- `trigrun.gameobjects`: `Object` and `GamemodeBarrier`
- `trigrun.button`: `Button`
- `trigrun.particle_manager`: `ParticleManager`
- `trigrun.modeldata`: `ModelPreset`, `get_friendly_model` and
  `get_level_model`
- `trigrun.player`: `Player`
- `trigrun.files`: `write_file`, `read_file` and `make_dir`
- `trigrun.game`: `Game`, `GameState` and `main`

A minimal example:

```python
from trigrun.vector2 import Vector2, Transform
from trigrun.color import Color, ColorPreset
from trigrun.model import Model
from trigrun.actor import Actor

square = [Vector2(-5, -5), Vector2(-5, 5), Vector2(5, 5), Vector2(5, -5), Vector2(-5, -5)]
model = Model(square, Color.from_preset(ColorPreset.GREEN))
actor = Actor(Transform(Vector2(100, 100)), model)
actor.velocity = Vector2(10, 0)
actor.update(0.5)
print(actor.transform.position)  # Vector2(x=105.0, y=100.0)
```

## Running the tests

```
pip install .[test]
pytest
```