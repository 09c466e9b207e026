"""A fly-through camera driven by Euler angles."""

from __future__ import annotations

import enum
from typing import Sequence

import numpy as np

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0

SCR_WIDTH = 1200
SCR_HEIGHT = 800


class CameraMovement(enum.Enum):
    """Keyboard-style movement directions."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix (row-major, applied as ``M @ v``)."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m


class Camera:
    """Camera that turns input into orientation vectors and a view matrix."""

    def __init__(
        self,
        position: Sequence[float] | None = None,
        up: Sequence[float] | None = None,
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = np.array(position if position is not None else (0.0, 0.0, 0.0), dtype=float)
        self.world_up = np.array(up if up is not None else (0.0, 1.0, 0.0), dtype=float)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.front = np.array((0.0, 0.0, -1.0))
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """View matrix looking from the position along the front vector."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera in ``direction`` for ``delta_time`` seconds."""
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity

    def process_mouse_movement(self, xoffset: float, yoffset: float, constrain_pitch: bool = True) -> None:
        """Turn the camera by a mouse offset, optionally keeping pitch within ±89°."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(89.0, max(-89.0, self.pitch))
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Zoom by a scroll offset, keeping the field of view in [1, 45]."""
        self.zoom = min(45.0, max(1.0, self.zoom - float(yoffset)))

    def _update_vectors(self) -> None:
        yaw = np.radians(self.yaw)
        pitch = np.radians(self.pitch)
        front = np.array(
            (np.cos(yaw) * np.cos(pitch), np.sin(pitch), np.sin(yaw) * np.cos(pitch))
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))


class MouseTracker:
    """Turns absolute cursor positions into camera turns."""

    def __init__(
        self,
        camera: Camera,
        last_x: float = SCR_WIDTH / 2.0,
        last_y: float = SCR_HEIGHT / 2.0,
    ) -> None:
        self.camera = camera
        self.last_x = float(last_x)
        self.last_y = float(last_y)
        self.first_mouse = True

    def move(self, x: float, y: float) -> None:
        """Feed a cursor position; the first one only sets the reference."""
        x = float(x)
        y = float(y)
        if self.first_mouse:
            self.last_x = x
            self.last_y = y
            self.first_mouse = False
        xoffset = x - self.last_x
        yoffset = self.last_y - y
        self.last_x = x
        self.last_y = y
        self.camera.process_mouse_movement(xoffset, yoffset)