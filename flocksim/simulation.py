"""Flocking simulation with scout groups that steer towards a heading."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

import numpy as np


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(v))
    if norm == 0.0:
        return np.array(v, dtype=float)
    return v / norm


@dataclass
class GroupBias:
    """Heading a scout group prefers and how strongly it currently pulls."""

    direction: np.ndarray
    bias_val: float = 0.0

    def __post_init__(self) -> None:
        self.direction = np.asarray(self.direction, dtype=float).reshape(3)
        self.bias_val = float(self.bias_val)


class BoidSim:
    """Boids in a box that flock by separation, alignment and cohesion.

    Boids in a scout group (group id > 0) are additionally pulled towards
    their group's direction.
    """

    def __init__(self, num_scout_groups: int = 0, rng=None) -> None:
        self.positions = np.empty((0, 3))
        self.velocities = np.empty((0, 3))
        self.group_ids: list[int] = []

        self.protected_range = 0.025
        self.protected_range_squared = self.protected_range * self.protected_range
        self.visual_range = 65.0
        self.visual_range_squared = self.visual_range * self.visual_range

        self.centering_factor = 0.005
        self.matching_factor = 0.015
        self.avoid_factor = 0.07

        self.min_speed = 15.0
        self.max_speed = 22.5

        self.margin = 0.5
        self.turnfactor = 1.5

        self.max_bias = 0.03
        self.bias_increment = 0.01

        self.num_scout_groups = int(num_scout_groups)
        self.group_bias: dict[int, GroupBias] = {}

        self.box_min = np.zeros(3)
        self.box_max = np.full(3, 50.0)

        self.rng = np.random.default_rng(rng)

    def __len__(self) -> int:
        return len(self.positions)

    def update(self, dt: float) -> None:
        """Advance every boid by ``dt``, one after another, in place."""
        pos = self.positions
        vel = self.velocities
        # Boids are updated in order; later boids see earlier ones' new state.
        for i in range(len(pos)):
            offsets = pos[i] - pos
            dist_sq = np.einsum("ij,ij->i", offsets, offsets)
            visible = dist_sq < self.visual_range_squared
            visible[i] = False
            too_close = visible & (dist_sq < self.protected_range_squared)
            flock = visible & ~too_close

            if np.any(flock):
                pos_avg = pos[flock].mean(axis=0)
                vel_avg = vel[flock].mean(axis=0)
                vel[i] += (pos_avg - pos[i]) * self.centering_factor
                vel[i] += (vel_avg - vel[i]) * self.matching_factor

            vel[i] += offsets[too_close].sum(axis=0) * self.avoid_factor

            self.keep_in_bounds(i)
            self.handle_scouts(i)

            speed = float(np.linalg.norm(vel[i]))
            if speed < self.min_speed:
                vel[i] = _normalize(vel[i]) * self.min_speed
            elif speed > self.max_speed:
                vel[i] = _normalize(vel[i]) * self.max_speed

            pos[i] += vel[i] * dt

    def keep_in_bounds(self, i: int) -> None:
        """Clamp boid ``i`` inside the box and turn it back inwards."""
        pos = self.positions[i]
        vel = self.velocities[i]
        low = self.box_min + self.margin
        high = self.box_max - self.margin
        for axis in range(3):
            if pos[axis] < low[axis]:
                pos[axis] = low[axis]
                vel[axis] = abs(vel[axis])
            elif pos[axis] > high[axis]:
                pos[axis] = high[axis]
                vel[axis] = -abs(vel[axis])

    def handle_scouts(self, i: int) -> None:
        """Pull a scout towards its group's heading and adapt the group's bias."""
        gid = self.group_ids[i]
        if gid == 0:
            return
        params = self.group_bias.get(gid)
        if params is None:
            return
        vel = self.velocities[i]
        if float(np.dot(vel, params.direction)) > 0.0:
            params.bias_val = min(self.max_bias, params.bias_val + self.bias_increment)
        else:
            params.bias_val = max(self.bias_increment, params.bias_val - self.bias_increment)
        self.velocities[i] = _normalize(
            (1.0 - params.bias_val) * vel + params.bias_val * params.direction
        )

    def init_boids(self, num_boids: int, max_scouts_per_group: int) -> None:
        """Add ``num_boids`` boids around the box centre with random headings.

        The first ``num_scout_groups * max_scouts_per_group`` boids are scouts,
        filled into groups 1, 2, ... in order and heading their group's way.
        """
        center = (self.box_min + self.box_max) * 0.5
        half_box = (self.box_max - self.box_min) * 0.25

        for g in range(1, self.num_scout_groups + 1):
            self.group_bias[g] = GroupBias(self.random_direction(), 0.0)

        scouts = self.num_scout_groups * max_scouts_per_group if self.num_scout_groups > 0 else 0
        new_pos = []
        new_vel = []
        new_ids = []
        for i in range(num_boids):
            pos = center + self.rng.uniform(-1.0, 1.0, 3) * half_box
            gid = i // max_scouts_per_group + 1 if i < scouts else 0
            direction = self.group_bias[gid].direction if gid > 0 else self.random_direction()
            speed = self.rng.uniform(self.min_speed, self.max_speed)
            new_pos.append(pos)
            new_vel.append(direction * speed)
            new_ids.append(gid)

        if new_pos:
            self.positions = np.vstack([self.positions, np.array(new_pos)])
            self.velocities = np.vstack([self.velocities, np.array(new_vel)])
        self.group_ids.extend(new_ids)

    def random_direction(self) -> np.ndarray:
        """A unit vector drawn uniformly from the sphere."""
        while True:
            v = self.rng.normal(size=3)
            norm = float(np.linalg.norm(v))
            if norm > 0.0:
                return v / norm

    def format_boids(self) -> str:
        """Positions and velocities of every boid as text."""
        lines = []
        for i, (p, v) in enumerate(zip(self.positions, self.velocities)):
            lines.append(f"Boid {i}:")
            lines.append(f"  Position: ({p[0]:g}, {p[1]:g}, {p[2]:g})")
            lines.append(f"  Velocity: ({v[0]:g}, {v[1]:g}, {v[2]:g})")
        return "".join(line + "\n" for line in lines)

    def print_boids(self, file: TextIO | None = None) -> None:
        """Write :meth:`format_boids` to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format_boids())