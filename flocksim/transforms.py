"""Matrices for placing and projecting boids.

Matrices are row-major and applied as ``M @ v``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def model_matrices(positions: Sequence[Sequence[float]], scale: float = 0.1) -> np.ndarray:
    """Return one translate-then-scale model matrix per position, shape (n, 4, 4)."""
    pos = np.asarray(positions, dtype=float).reshape(-1, 3)
    mats = np.zeros((len(pos), 4, 4))
    mats[:, 0, 0] = scale
    mats[:, 1, 1] = scale
    mats[:, 2, 2] = scale
    mats[:, 3, 3] = 1.0
    mats[:, :3, 3] = pos
    return mats


def perspective(fovy_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip space with depth in [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect must be non-zero")
    if near == far:
        raise ValueError("near and far must differ")
    f = 1.0 / math.tan(math.radians(fovy_degrees) / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m