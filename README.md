# towerdef

The game logic of a small tower defense game, as plain Python objects with no dependencies.

## Modules

- `towerdef.geometry`: `Vector2D` has scalar and element-wise arithmetic, `dot`, `cross`, `angle`, `angle_between`, `normalize` and `negative_reciprocal`. `Rect` is a rectangle given by `x`, `y`, `w`, `h`.
- `towerdef.gridmap`: `FlowMap` is a grid of `Cell`s with walls, one target and one spawner. The target starts at the centre cell. Every change recomputes a breadth-first flow field that points each reachable cell toward the target. The grid is queried with `flow_normal`, `target_position` and `has_valid_path`.
- `towerdef.critter`: `Critter` moves toward its exit one axis at a time and holds back when another critter is too close. It can take damage, be marked as arrived (`mark_at_exit`) and steal gold (`steal_gold` returns the new gold amount). `health_bars` returns its health bar as two rectangles.
- `towerdef.critter_group`: `CritterGroup` manages a wave of critters:
  - it spawns them one at a time after a delay;
  - it pays rewards for killed critters and deducts stolen gold for critters that reached the exit;
  - it counts down between waves and raises `wave_level` when the next wave starts;
  - `hud_lines` gives its status text.
- `towerdef.dummy_critter`: `DummyCritter` is a stationary target with health.
- `towerdef.projectile`: `Projectile` is a square shot that moves in steps, detects overlap with a target square and knows when it has left the screen.
- `towerdef.tower`: `Tower` is the base class. It handles placement, finding the first target in range, `refund_value`, `upgrade_cost` and `contains_point`.
- `towerdef.tower_kinds`: the concrete towers, each with its own range, power, rate of fire, shot speed, shot size and upgrade rules:
  - `StandardTower`, up to level 5;
  - `RapidFireTower`, which fires in bursts separated by breaks, up to level 3;
  - `CannonTower`, up to level 3.
- `towerdef.critter_projectile` and `towerdef.critter_tower`: `CritterTower` fires homing `CritterProjectile`s at `Critter`s on a cooldown. Its static helpers `can_buy`, `buy_tower` and `sell_tower` work on coin amounts.
- `towerdef.timer`: `Timer` is a nanosecond stopwatch with start, stop, pause and unpause. It reads an injectable clock, `time.monotonic_ns` by default.

## Scenarios

Three ready-made scenarios are driven by plain method calls:

- `towerdef.editor.MapEditor`
  - `press(MouseButton.LEFT / RIGHT)`, `drag(x, y, shift)` and `release()` paint or erase walls.
  - With shift held, the left button moves the target and the right button moves the spawner.
  - `status_text()` reports whether a valid path exists.
- `towerdef.workshop.TowerWorkshop`
  - Starts with 700 coins and four `DummyCritter`s.
  - `click(x, y)` selects an `Action` button, buys a tower, or upgrades or sells one, and returns the messages it produced. The messages are also kept in `log`.
  - `update()` lets the towers fire and removes defeated targets.
- `towerdef.arena.Arena`
  - `handle_key(Key.W / S / UP / DOWN)` moves the start and end squares.
  - `place_tower` buys a tower for 20 gold; `sell_tower` refunds half its cost.
  - `update()` advances one frame.
  - `hud()` returns the text lines for gold, wave, critter count, countdown and any warning.

## Install

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Example

```python
from towerdef.gridmap import FlowMap

grid = FlowMap(15, 11)             # the target starts at the centre cell (7, 5)
grid.set_spawner(0, 0)
grid.set_wall(1, 0, True)
print(grid.has_valid_path())       # True
print(grid.flow_normal(0, 0))      # Vector2D(x=0.0, y=1.0)
print(grid.target_position())      # Vector2D(x=7.0, y=5.0)
```

```python
from towerdef.timer import Timer

ticks = iter([0, 100, 250])
timer = Timer(lambda: next(ticks))
timer.start()
timer.pause()
print(timer.elapsed_ns())   # 100
```

## What it does not do

The package holds only game state and rules. It does not provide:

- a window, rendering, textures or fonts;
- input handling from a real keyboard or mouse;
- a frame loop or a menu;
- a command to start a game.

Events and frames are given to the scenarios by calling their methods. Anything that should be displayed comes back as values, such as rectangles and text lines.