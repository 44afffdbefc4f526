# genkingdom

Genetic Kingdom is a small game built on pygame. It opens an 800×600 window
titled "Genetic Kingdom" on a main menu with two buttons:

- **Iniciar Partida** opens the play screen.
- **Salir del Juego** prints `Quit button clicked!` and closes the window.

The buttons light up while the mouse is over them.

The play screen shows a 26×19 grid of 25-pixel tiles. The start tile (green)
sits at (0, 0) and the goal tile (red) at (25, 9). An animated gold coin,
15 frames of 16×16 pixels at 0.1 s each, is drawn at the top-left corner.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
genkingdom
```

Options:

- `--assets DIR`: the directory that holds the game's images and fonts
  (default: `assets`, relative to the current working directory).

The game looks for `fonts/PERRYGOT.TTF`, `images/GenKing.png` and
`sprites/coin.png` under that directory. If one is missing, the game says so
on standard error (`Error loading font`, `Error loading logo`,
`Error loading texture`) and keeps running: the menu falls back to pygame's
default font, and the logo or the coin is simply not drawn.

The window runs at up to 60 frames per second and closes when the window's
close button is pressed.

## Using the pieces

The game logic can be used on its own:

```python
from genkingdom.tilemap import TileMap, TileType
from genkingdom.player import Player

board = TileMap(26, 19)
board.set_start(0, 0)
board.set_goal(25, 9)
assert board.grid[9][25].type is TileType.GOAL
assert board.start == (0, 0)
assert board.grid[0][0].is_walkable

player = Player()
player.add_gold(50)
player.spend_gold(20)   # True
player.spend_gold(100)  # False, nothing is spent
player.gold             # 30
```

- `genkingdom.tilemap`: `TileType` (`EMPTY`, `TOWER`, `PATH`, `START`,
  `GOAL`), `Tile` with `x`, `y`, `type` and `is_walkable` (true for empty,
  path and start tiles), and `TileMap` with `grid` (rows of tiles, indexed
  `grid[y][x]`), `width`, `height`, `start`, `goal`, `set_start(x, y)` and
  `set_goal(x, y)`. Positions outside the map raise `ValueError`.
- `genkingdom.player`: `Player` with `gold`, `add_gold(amount)` and
  `spend_gold(amount)`.
- `genkingdom.animation`: `AnimatedSprite` steps through one row of a sprite
  sheet. `set_texture(texture, frame_width, frame_height, frame_count,
  frame_time, row=0)` loads the sheet (a non-positive `frame_count` raises
  `ValueError`); `update(delta_time)` moves on at most one frame;
  `play()`, `pause()`, `stop()` (pause and rewind) and `set_row(row)` control
  it; `frame_rect()` gives the area of the sheet shown now and
  `draw(surface)` blits it at `position`.
- `genkingdom.states`: `GameState` is the base of every screen
  (`handle_event`, `update`, `render`); `StateManager` is a stack of them
  with `push(state)`, `pop()` and `current()`.
- `genkingdom.menu.MainMenu` and `genkingdom.play.PlayState` are the two
  screens. Both take an `asset_dir`.
- `genkingdom.app`: `Window` wraps a pygame surface (pass `surface=` to draw
  off screen); `run_frame(window, manager)` hands pending events to the
  screen on top of the stack, then updates and renders it once; `main()` is
  the `genkingdom` command.

## What it does not do

The play screen is only a board: there are no towers to place, no enemies,
no paths between start and goal, and no way to earn or spend gold while
playing. The player's gold is kept but not shown. There is no way back from
the play screen to the menu, and nothing is saved between runs.