# tickplanner

A small interactive tool for planning player actions one game tick at a time.
The player stands on a tile grid. Clicking a tile sends the player walking
there on every 0.6-second game tick, two tiles per tick. In sequence creation
mode each tick of a sequence can be given its own move, and idle ticks can be
added as the plan grows.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
tickplanner
tickplanner --width 1600 --height 900
```

`--width` and `--height` set the window size in pixels (default 1280 x 720).
The window shows the player (green) and, while it is walking, the tile it is
heading for (grey). The view is centred on the origin at 10 pixels per tile.
A panel in the top-left corner shows the current mode.

- **Left click** a tile (outside the panel) to move the player there. In
  sequence creation mode the click instead records a move to that tile for
  the selected tick; the player does not walk.
- **E** switches sequence creation mode on and off. Switching it on puts the
  player back on the origin and stops the game clock; switching it off selects
  tick 0 again and lets the clock run.
- In sequence creation mode the panel shows the selected tick, the player's
  location and the action recorded for that tick.
  - **Left** / **Right** select the previous or next tick.
  - **A** adds an idle tick to the end of the sequence.

## Using it from Python

The pieces behind the tool can be used on their own:

```python
from tickplanner.movement import step_towards
from tickplanner.player import Player, Move, Idle
from tickplanner.sequence import ActionSequence

player = Player()               # at (0.0, 0.0), speed 2
player.apply_action(Move((3, 1)))
player.advance()                # (2.0, 0.0): straight first
player.advance()                # (3.0, 1.0): then diagonal; destination cleared

step_towards((0, 0), (5, 5), 3) # (3.0, 3.0)

plan = ActionSequence()         # one Idle tick
plan.add_tick()                 # returns 1
plan.select(1)
plan.record(Move((4, 4)))
str(plan.current_action)        # "Move: [4, 4]"
plan.reset()                    # back to tick 0
```

- `tickplanner.movement.step_towards` gives the position after one tick of
  walking: straight along the longer axis until the rest of the path is a
  diagonal, then diagonally, one tile per point of speed (0 to 255).
- `tickplanner.player` holds `Player` and the actions `Idle`, `Move` and
  `Attack` (which targets an `Npc`). `Player.apply_action` replaces the current
  action; `Player.advance` walks one tick.
- `tickplanner.sequence.ActionSequence` keeps one action per tick and a
  selected tick; `select` raises `IndexError` for a tick out of range.
- `tickplanner.game_ticks.GameTickTimer` is a repeating timer whose `tick(delta)`
  returns True when a tick boundary is crossed.
- `tickplanner.camera.Camera` converts between screen pixels (y down) and world
  coordinates (y up) with `screen_to_world` and `world_to_screen`.
- `tickplanner.app.Tool` ties these together with the `ToolState` modes.
  `Tool.set_editing`, `Tool.click` and `Tool.update` drive it without a window.

## What it does not do

- There is no playback: a planned sequence cannot be played through tick by
  tick. `ToolState.PLAYBACK` exists, but the tool never enters it, and in that
  mode `Tool.click` and `Tool.update` do nothing.
- Sequences cannot be saved or loaded; they last as long as the window.
- The window only records moves. `Attack` actions can be made from Python, but
  attacking has no targets on the grid: a player given one walks to the origin.
- The camera does not pan or zoom.