# invaders

This is a small fixed-shooter arcade game that uses pygame. It has a
1024×768 window. The player's ship starts near the bottom of the window.
Above it sits a grid of enemies, 10 columns by 7 rows. The rows from top
to bottom are boss, knight, mid, and then zako for the rest. Each enemy
sways sideways around its own column. Together they drop beams on one
shared three-second timer. When one of your bullets hits an enemy, the
enemy dies and leaves a short explosion animation.

## Installing

```
pip install .
```

This installs pygame as a dependency.

## Running

```
invaders [--assets DIR]
```

`--assets` names the directory that holds the images. It defaults to
`Aseets`. If an image is missing from the directory, nothing is drawn in
its place. The game looks for these files:

- `TITLE.png`: the title screen
- `bg.png`: the background
- `tiny_ship5.png`: the player
- `tiny_ship9.png`, `tiny_ship16.png`, `tiny_ship18.png`, `tiny_ship10.png`: the boss, knight, mid and zako enemies
- `laserBlue03.png`: the player's bullet
- `ebeams.png`: an enemy beam
- `explosion.png`: a 3×3 sheet of 48-pixel explosion frames

The title screen stays up until you press **Space**. You can quit at any
time with **Escape** or by closing the window.

## What it does not do

- Pressing Space on the title screen leaves the title state. At that
  moment the game runs a single frame of play. After that frame no play
  state updates or draws anything, so the window stays blank until you
  quit.
- There is no game-over screen, no score and no lives.
- Enemy beams never hurt the player.

## Using it as a library

You can drive the game logic without a window.

- `invaders.world.World` holds the game objects and the frame's
  `delta_time`.
  - `add()` queues an object, and `flush()` moves the queued objects into
    the world.
  - `update_all()` and `draw_all(canvas)` visit the objects in the order
    they were added.
  - `sweep()` removes the objects whose `alive` is false and calls
    `on_destroy()` on each of them. An enemy or the player reacts by
    spawning an `invaders.effect.Effect` explosion.
- `invaders.keyboard.Keyboard.update(pressed)` takes the key codes that are
  down this frame. You can then query a key with three methods:
  - `is_key_down(key)`: the key was pressed this frame.
  - `is_key_up(key)`: the key was released this frame.
  - `held_frames(key)`: how many frames the key has stayed down after the
    frame it was pressed on.

  Key codes run from 0 to 254. A query outside that range raises
  `ValueError`.
- `invaders.stage.Stage` builds the player and the enemy grid. Each frame
  it checks the player's bullets against the enemies.
- `invaders.game.Game.step(now_ms, pressed, canvas)` runs one frame and
  takes three arguments:
  - `now_ms`: a millisecond clock value
  - `pressed`: the key codes that are down
  - `canvas`: any object with `draw_image(path, x1, y1, x2, y2, alpha)` and
    `draw_frame(path, frame, columns, size, x1, y1, x2, y2)`

  It returns `False` once Escape is down.
- `invaders.game.PygameCanvas(surface, asset_dir)` is such a canvas. It
  loads images from `asset_dir` and draws them on a pygame surface.

## Running the tests

```
pip install .[test]
pytest
```