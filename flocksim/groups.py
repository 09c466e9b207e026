"""Assignment of boids to scout groups."""

from __future__ import annotations

from .params import MAX_GROUPS


def assign_group_ids(count: int, base_group_size: int, max_groups: int = MAX_GROUPS) -> list[int]:
    """Return a group id for each of ``count`` boids.

    Groups 1 .. max_groups - 1 each take ``base_group_size`` consecutive
    boids from the start; the rest stay in group 0.  If the groups would
    need more boids than there are, every boid stays in group 0.
    """
    groups = max_groups - 1
    total = groups * base_group_size
    if total > count or base_group_size <= 0 or groups <= 0:
        return [0] * count
    return [i // base_group_size + 1 if i < total else 0 for i in range(count)]