# simlab

A small, dependency-free simulation toolkit with two parts:

- **`simlab.hexgame`**: "catch the cat" on a hexagonal board. A cat starts
  in the middle of an odd-sized board and tries to reach an edge. A catcher
  blocks one cell per turn and wins when every cell around the cat is blocked.
- **Lattice noise building blocks**: cellular (Worley), Perlin, value and
  cubic value noise in 2D and 3D (`simlab.noise_lattice`), together with the
  hashing, interpolation and gradient helpers they rest on
  (`simlab.noise_basis`) and the lookup tables (`simlab.noise_lookup`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The hex game

Coordinates run from `-side // 2` to `side // 2` on both axes, with `(0, 0)`
at the centre. Odd rows are shifted half a cell relative to even rows.

```python
import random
from simlab.hexgame import World, Point, neighbors, is_neighbor

world = World.from_state(
    side_size=5,
    cat_turn=True,
    cat_position=Point(0, 0),
    state=[False] * 25,
    rng=random.Random(7),
)

print(world.render())      # 'C' is the cat, '#' a blocked cell, '.' a free one
world.step()               # the cat moves to a random neighbour
world.step()               # the catcher blocks a random cell

print(neighbors(Point(0, 0)))                  # NE, NW, E, W, SW, SE
print(is_neighbor(Point(0, 0), Point(1, 0)))   # True
```

- `World(side_size=11, rng=None)` builds a board with about 5% of the cells
  blocked at random and the cat in the centre. An even `side_size` raises
  `ValueError`.
- `World.from_state(...)` builds a board from an explicit list of
  `side_size * side_size` cells, row by row from the top left. A list of the
  wrong length raises `ValueError`.
- `World.step()` plays one turn. A cat move that is not to a free
  neighbouring cell on the board loses for the cat. A catcher move onto the
  cat's cell or off the board loses for the catcher. After a game has ended,
  the next `step()` starts a new board through `World.clear()`.
- `World.update(delta_time)` counts down the turn timer while
  `is_simulating` is true and plays a turn whenever it runs out. The length
  of a turn is `time_between_ai_ticks`.
- `World.content(p)` reports whether a cell is blocked and raises
  `IndexError` for cells off the board. `World.is_valid_position`,
  `World.cat_can_move_to`, `World.catcher_can_move_to` and
  `World.cat_wins_on_space` answer the rule questions.
- The built-in players are `Cat` (a random neighbouring cell) and `Catcher`
  (a random free cell sharing neither row nor column with the cat). Write
  your own player by subclassing `Agent` and implementing `move(world)`,
  then assign it to `world.cat` or `world.catcher`.

## Noise

The noise functions take a seed and coordinates that are already scaled by
whatever frequency you want. They return values roughly in -1..1, and the
same inputs always give the same output.

```python
from simlab.noise_lattice import (
    CellularDistanceFunction,
    CellularReturnType,
    cellular2,
    perlin2,
    perlin3,
    value2,
    value_cubic2,
)

freq = 0.01
h = perlin2(1337, 120.0 * freq, 45.0 * freq)
d = perlin3(1337, 1.2, 3.4, 5.6)
v = value2(1337, 0.3, 0.7)
c = value_cubic2(1337, 0.3, 0.7)

cell = cellular2(
    1337, 2.5, 7.25,
    distance_function=CellularDistanceFunction.EUCLIDEAN,
    return_type=CellularReturnType.DISTANCE2_SUB,
    jitter=1.0,
)
```

`cellular2` and `cellular3` default to `EUCLIDEAN_SQ` distances, the
`DISTANCE` return type and a jitter of 1.0.

`simlab.noise_basis` exposes the pieces underneath: `fast_floor`,
`fast_round`, `lerp`, `interp_hermite`, `interp_quintic`, `cubic_lerp`,
`ping_pong`, the 32-bit lattice hashes `hash2` and `hash3`, `val_coord2` and
`val_coord3`, the gradient lookups `grad_coord2`, `grad_coord3`,
`grad_coord_out2`, `grad_coord_out3`, `grad_coord_dual2` and
`grad_coord_dual3`, and `to_int32` with the primes `PRIME_X`, `PRIME_Y`
and `PRIME_Z`. Lattice coordinates passed to the hashing helpers must
already be multiplied by the matching prime and wrapped with `to_int32`.

## What is not included

- No graphical board. The game is shown only as text through
  `World.render()`, and nothing in the package runs a game loop for you.
- No simplex-family noise (OpenSimplex2 / OpenSimplex2S).
- No configurable noise object. Fractal layering (FBm, ridged, ping-pong)
  and domain warping are not built in. The basis helpers such as `ping_pong`
  are provided, but combining octaves is up to the caller.
- No command-line program.