# flocksim

A three-dimensional boids simulation. Boids steer by the three classic rules
(cohesion, alignment and separation), are clamped inside a bounding box and
turned back inwards at its walls, keep their speed between a minimum and a
maximum, and may belong to scout groups that are pulled towards a shared
random heading.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
flocksim --help
```

The `flocksim` command creates a flock, advances it a number of steps and
prints a one-line summary (boid count, mean position and mean speed).

Options:

- `--boids N` – number of boids (default 50000)
- `--groups N` – number of scout groups (default 2)
- `--scouts N` – scouts per group (default 10)
- `--steps N` – simulation steps (default 1)
- `--dt SECONDS` – time step (default 1/60)
- `--seed N` – random seed, for repeatable runs
- `--print` – print every boid's position and velocity instead of the summary

Each step visits every boid against every other one, so large flocks with
many steps take a while.

## Library use

```python
import numpy as np
from flocksim.simulation import BoidSim

sim = BoidSim(num_scout_groups=2, rng=np.random.default_rng(1))
sim.init_boids(200, 10)
for _ in range(100):
    sim.update(0.016)
sim.print_boids()
```

`BoidSim` keeps `positions` and `velocities` as `(n, 3)` NumPy arrays and
`group_ids` as a list; `rng` may be a seed or a NumPy `Generator`.
`format_boids()` returns the same text that `print_boids()` writes.
`flocksim.cli.run(...)` builds and advances a flock and returns the `BoidSim`.

Other modules:

- `flocksim.params` – `BoidParams`, `GroupParams` and `MAX_GROUPS`.
- `flocksim.groups.assign_group_ids(count, base_group_size, max_groups)` –
  lays out group ids for a batch of boids: groups `1 .. max_groups - 1` each
  take `base_group_size` consecutive boids, the rest stay in group 0; if
  there are too few boids, all stay in group 0.
- `flocksim.camera` – a fly-through `Camera` driven by Euler angles
  (`process_keyboard`, `process_mouse_movement`, `process_mouse_scroll`,
  `view_matrix`), `CameraMovement`, `MouseTracker` which turns cursor
  positions into camera turns, and `look_at`.
- `flocksim.transforms` – `model_matrices(positions, scale)` gives one 4×4
  translate-and-scale matrix per boid, and `perspective(...)` a projection
  matrix. Matrices are row-major and applied as `M @ v`.

## What it does not do

The package does not open a window or draw anything: the camera and the
matrices are there for a renderer to use, but none is included, and the
command runs the simulation without a display. There is no GPU code; all
updates run on the CPU with NumPy.