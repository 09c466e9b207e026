"""Command line runner for the flocking simulation without a display."""

from __future__ import annotations

import argparse
import sys

import numpy as np

from .simulation import BoidSim


def run(
    num_boids: int = 50000,
    num_scout_groups: int = 2,
    max_scouts_per_group: int = 10,
    steps: int = 1,
    dt: float = 1.0 / 60.0,
    seed=None,
) -> BoidSim:
    """Create a flock, advance it ``steps`` times by ``dt`` and return it."""
    if num_boids < 0:
        raise ValueError("num_boids must not be negative")
    if steps < 0:
        raise ValueError("steps must not be negative")
    if max_scouts_per_group <= 0:
        raise ValueError("max_scouts_per_group must be positive")
    sim = BoidSim(num_scout_groups, rng=seed)
    sim.init_boids(num_boids, max_scouts_per_group)
    for _ in range(steps):
        sim.update(dt)
    return sim


def _summary(sim: BoidSim) -> str:
    if len(sim) == 0:
        return "boids: 0"
    mean_pos = sim.positions.mean(axis=0)
    mean_speed = float(np.linalg.norm(sim.velocities, axis=1).mean())
    return (
        f"boids: {len(sim)}  "
        f"mean position: ({mean_pos[0]:g}, {mean_pos[1]:g}, {mean_pos[2]:g})  "
        f"mean speed: {mean_speed:g}"
    )


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="flocksim", description="Run a boid flock.")
    parser.add_argument("--boids", type=_non_negative, default=50000, help="number of boids")
    parser.add_argument("--groups", type=_non_negative, default=2, help="number of scout groups")
    parser.add_argument("--scouts", type=_positive, default=10, help="scouts per group")
    parser.add_argument("--steps", type=_non_negative, default=1, help="simulation steps")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="time step in seconds")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--print", dest="print_boids", action="store_true",
                        help="print every boid instead of a summary")
    args = parser.parse_args(argv)

    sim = run(args.boids, args.groups, args.scouts, args.steps, args.dt, args.seed)
    if args.print_boids:
        sim.print_boids(sys.stdout)
    else:
        print(_summary(sim))
    return 0


if __name__ == "__main__":
    sys.exit(main())