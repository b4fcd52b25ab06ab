# stellar_invaders

The game logic of a vertical space shooter, as a plain Python library with no
rendering, audio or window attached. It provides:

- **Movement** (`stellar_invaders.movement`): per-axis movements
  (`LinearMovement`, `SinusoidMovement`, `StationaryMovement`,
  `IntervalMovement`) combined into a `MovementStrategy`. Strategies can be
  added together with `+`. Ready-made ones come from `stationary()`,
  `vertical()`, `horizontal()`, `angled()`, `circular()`, `interval()`,
  `interval_sequence()` and `downward_circular()`.
- **Formations** (`stellar_invaders.formation`): `Formation` lays out spawn
  points as a rectangle, triangle or circle (`FormationType`), solid or hollow.
- **Collision detection**: object types, `Rect`, the collision rules, a
  minimal `Collidable` object and a `BruteForce` pass
  (`stellar_invaders.collision_rules`); a `Quadtree`
  (`stellar_invaders.quadtree`); a bounding-volume hierarchy `BVHTree`
  (`stellar_invaders.bvh`); and `CollisionDetector` and
  `ThreadedCollisionDetector` (`stellar_invaders.detector`).
- **Levels**: `Level`, `Enemy` and timed `SpawnEvent`s
  (`stellar_invaders.level`), a YAML `LevelLoader`
  (`stellar_invaders.level_loader`) and a `LevelManager` that runs the spawn
  events of a level against a clock (`stellar_invaders.level_manager`).
- **Menus** (`stellar_invaders.menu`): menu items, menus and a level selector
  that call registered handlers when an item is clicked.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Collision rules

Only these pairs of object types can collide:

| Object type   | Collides with                        |
|---------------|--------------------------------------|
| `PLAYER_SHIP` | `ENEMY_PROJECTILE`, `COLLECTABLE`    |
| `ENEMY_SHIP`  | `PLAYER_PROJECTILE`                  |

`can_collide(types1, types2)` checks two collections of object types against
these rules. Objects handed to the detectors need an `id`, a `bounding_box`
(`Rect`), `object_types`, a `collidable` flag, a `center`, and the methods
`is_colliding_with(other)` and `collide(other)`; `Collidable` is a ready-made
object with all of these that records what it collided with in `collisions`.

`CollisionDetector(objects, screen_rect)` keeps a reference to the sequence of
objects and offers `detect_brute_force()`, `detect_quadtree()`, `detect_bvh()`
and `detect_bvh_parallel()`; the parallel pass queries the tree from a thread
pool and then lets each colliding pair collide once, from the lower id to the
higher. `ThreadedCollisionDetector` takes snapshots (`submit(data)`, a mapping
of id to `(Rect, object types)`); `handle_collisions()` returns the colliding
id pairs of the latest snapshot and passes them to the optional
`on_collisions` callback.

## Movement

```python
from stellar_invaders import movement

# Move left and right, switching every second,
# while stepping down at intervals.
sideways = movement.interval(
    movement.horizontal(200, -1) + movement.horizontal(200, 1), 1.0
)
downward = movement.interval_sequence(
    [(movement.vertical(200, 1), 0.25), (movement.stationary(), 3.0)]
)
strategy = sideways + downward

pos, anchor = strategy.move((100.0, 50.0), (100.0, 50.0), 0.016)
```

`move(pos, anchor, dt)` takes the current position, the anchor position and
the time step in seconds, and returns the new position and the new anchor.

## Level files

`LevelLoader.load_levels(directory)` reads every file named
`level_<number>.yaml` in the directory (by default `levels/` under the current
directory) and returns a mapping from level number to `Level`, sorted by
number. Files that cannot be parsed, or whose level has no name or a negative
number, are skipped with a warning. `load_level(path)` returns an empty
`Level` for a bad file instead of raising.
`LevelLoader.load_benchmark_level(directory)` loads `benchmark.yaml`, matching
the name without regard to case, and returns an empty `Level` if there is
none.

Positions in a level file are fractions of the screen size, so call
`set_screen_size(width, height)` before loading. Pass the object to spawn as
`LevelLoader(enemy_prototype=...)`: every spawn event gets its own copy (by
its `clone()` method if it has one, otherwise a deep copy). A spawn event
without an object raises `RuntimeError` when it comes to spawn.

```yaml
Level: 1
Name: First Contact
Description: A few scouts test your defences.
EnemyLimit: 3            # optional, defaults to 1
SpawnEvents:
  - Enabled: true        # optional, defaults to true
    Time: 0              # ms after the level starts
    Count: 3             # number of waves
    IntervalMs: 2000     # ms between waves
    Formation:
      Type: Rectangle    # Rectangle, Triangle or Circle (any case)
      Width: 5
      Height: 2
      Solid: true
      Spacing: { X: 60, Y: 60 }
    Position:            # either X/Y, or Min/Max for a random range
      Min: { X: 0.1, Y: 0.05 }
      Max: { X: 0.5, Y: 0.1 }
```

`formation_type_from_string(text)` turns a `Type` value into a
`FormationType` and raises `ValueError` for names it does not know.

`LevelManager(add_object, reached_bottom)` runs a level: after `set_level()`
and `start_level()`, each `progress_level()` call executes the due spawn
events, drops finished ones, and calls `on_enemy_limit_reached` when more
enemies than the level's limit have reached the bottom and
`on_spawn_events_finished` once no spawn events remain.

## Menus

`main_menu(width, height)`, `pause_menu(width, height)` and
`benchmark_prompt(width, height)` build the standard menus. Register handlers
with `Menu.connect(signal, handler)` (unknown signal names raise
`ValueError`) and pass an item to `Menu.click(item)` to fire its action. A
`LevelSelector` lists the levels given to `set_level_data(levels)`, marks the
chosen one as selected, and emits `level_started` with that level when
"Start Level" is clicked, but only after a level has been chosen.

## What this package does not do

It has no game loop, window, drawing, sound or keyboard handling, and no
command to start a game. It does not define the player ship, enemy ships,
weapons, projectiles or collectables: the objects it moves, spawns and checks
for collisions are supplied by the caller.