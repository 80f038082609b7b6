# sokoban

A small Sokoban-style game built on pygame. It opens an 800×600 window with
a start menu. Choosing **PLAY** loads a level from a text file and lets you
walk the worker around it. Choosing **EXIT** closes the window.

## Installing

```
pip install .
```

## Playing

```
sokoban
```

Options:

- `--map FILE` is the level file to play. The default is `map1.txt` in the
  current directory.
- `--images DIR` is the directory that holds the images. The default is
  `images`.

The command returns 0 on a normal exit. If the game fails, it prints
`Error: ...` on standard error and returns -1.

### Menu

- **Up / Down** moves the selection between PLAY and EXIT.
- **Enter** picks the selected item.
- **Escape** quits.
- A left click on a button picks that button. Moving the mouse over a button
  highlights it.

### In a level

- **Arrow keys** or **W A S D** move the worker one tile.
- **Escape** goes back to the menu and drops the level.

## Level files

A level is a plain text file read as UTF-8. Each line is one row of tiles,
and each character is one tile:

| Character | Tile          |
|-----------|---------------|
| `#`       | wall          |
| `@`       | player        |
| `$`       | box           |
| `.`       | floor (goal)  |
| ` `       | floor         |

Tiles are 32 pixels square. Other characters leave their tile empty. If the
level file cannot be opened, the error is logged and the screen stays blank
until you press Escape.

## Images

These files are loaded from the image directory:

- `wall.png`, `worker.png`, `floor.png`, `box.png`: tile textures
- `menu.jpg`: the menu background, scaled to 800×600
- `player_idle.png`, `player_walk_up.png`, `player_walk_down.png`,
  `player_walk_left.png`, `player_walk_right.png`: player sprite sheets
- `box_idle.png`, `box_push.png`: box sprite sheets

The game still runs when an image is missing. The failure is logged, and
that object is drawn without a texture. A missing menu background is replaced
by a plain blue-grey fill.

## What the game does not do

The worker moves freely. There is no collision with walls. Boxes are not
pushed. Nothing checks whether a level has been solved. A level is a map to
walk around, not a puzzle that can be won.

## Using it as a library

The building blocks can be imported on their own:

```python
from sokoban.animation import Animation

walk = Animation(frame_time=0.15)
walk.add_frame_row(0, 0, 60, 60, 4)
walk.play()
walk.update(0.2)
print(walk.current_frame)  # <rect(60, 0, 60, 60)>
```

- `sokoban.point.Point` is a pair of grid coordinates.
- `sokoban.animation.Animation` steps through the frames of a sprite sheet.
  `load_sprite_sheet` raises `SpriteSheetError` when the image cannot be read.
- `sokoban.game_object` holds `GameObject` and its tiles `Wall`, `Floor` and
  `Box`. `Box.start_push` plays the push animation once and then returns to
  idle.
- `sokoban.player.Player` moves by `move(dx, dy)` and switches its walk
  animation by `PlayerDirection`. It goes back to idle shortly after it stops
  moving.
- `sokoban.level.Level` reads a level file into these objects and draws them.
- `sokoban.menu.Menu` and `sokoban.game.Game` make up the front end.
  `sokoban.game.main` is the entry point of the `sokoban` command.

## Running the tests

```
pip install .[test]
pytest
```