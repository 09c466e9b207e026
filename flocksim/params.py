"""Parameter records shared by the flocking simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

MAX_GROUPS = 4
"""Number of group slots, counting group 0 (boids that belong to no group)."""


@dataclass(frozen=True)
class BoidParams:
    """Tuning values for one flocking step.

    Ranges are stored squared so that neighbour tests need no square root.
    """

    protected_range_sq: float
    visual_range_sq: float
    centering_factor: float
    matching_factor: float
    avoid_factor: float
    min_speed: float
    max_speed: float
    margin: float
    bias_increment: float


def _as_vec3(values: Sequence[float]) -> tuple[float, float, float]:
    components = tuple(float(v) for v in values)
    if len(components) != 3:
        raise ValueError(f"expected 3 components, got {len(components)}")
    return components  # type: ignore[return-value]


@dataclass
class GroupParams:
    """Preferred heading of a scout group and how strongly it pulls."""

    direction: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))
    bias_val: float = 0.0

    def __post_init__(self) -> None:
        self.direction = _as_vec3(self.direction)
        self.bias_val = float(self.bias_val)