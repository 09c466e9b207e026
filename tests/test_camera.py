import numpy as np
import pytest

from flocksim.camera import (
    Camera,
    CameraMovement,
    MouseTracker,
    SPEED,
    look_at,
)


def test_default_front_looks_down_negative_z():
    cam = Camera()
    assert np.allclose(cam.front, (0.0, 0.0, -1.0))


def test_basis_is_orthonormal():
    cam = Camera((1.0, 2.0, 3.0), yaw=30.0, pitch=20.0)
    for v in (cam.front, cam.right, cam.up):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.right, cam.up) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize(
    "direction,sign,attr",
    [
        (CameraMovement.FORWARD, 1.0, "front"),
        (CameraMovement.BACKWARD, -1.0, "front"),
        (CameraMovement.LEFT, -1.0, "right"),
        (CameraMovement.RIGHT, 1.0, "right"),
    ],
)
def test_keyboard_moves_along_axis(direction, sign, attr):
    cam = Camera(yaw=10.0)
    start = cam.position.copy()
    cam.process_keyboard(direction, 0.5)
    expected = start + sign * getattr(cam, attr) * SPEED * 0.5
    assert np.allclose(cam.position, expected)


def test_forward_then_backward_returns():
    cam = Camera((4.0, 5.0, 6.0))
    cam.process_keyboard(CameraMovement.FORWARD, 0.3)
    cam.process_keyboard(CameraMovement.BACKWARD, 0.3)
    assert np.allclose(cam.position, (4.0, 5.0, 6.0))


def test_pitch_is_clamped():
    cam = Camera()
    cam.process_mouse_movement(0.0, 10000.0)
    assert cam.pitch == 89.0
    cam.process_mouse_movement(0.0, -100000.0)
    assert cam.pitch == -89.0


def test_pitch_unconstrained():
    cam = Camera()
    cam.process_mouse_movement(0.0, 1000.0, constrain_pitch=False)
    assert cam.pitch > 89.0


def test_mouse_movement_scales_by_sensitivity():
    cam = Camera()
    before = cam.yaw
    cam.process_mouse_movement(20.0, 0.0)
    assert cam.yaw == pytest.approx(before + 20.0 * cam.mouse_sensitivity)


def test_scroll_is_clamped():
    cam = Camera()
    cam.process_mouse_scroll(-10.0)
    assert cam.zoom == 45.0
    cam.process_mouse_scroll(100.0)
    assert cam.zoom == 1.0


def test_view_matrix_maps_position_to_origin():
    cam = Camera((0.0, 20.0, 0.0), yaw=40.0, pitch=-15.0)
    view = cam.view_matrix()
    eye = view @ np.append(cam.position, 1.0)
    assert np.allclose(eye, (0.0, 0.0, 0.0, 1.0))


def test_view_matrix_maps_front_to_negative_z():
    cam = Camera((1.0, 2.0, 3.0), yaw=75.0, pitch=10.0)
    view = cam.view_matrix()
    ahead = view @ np.append(cam.position + cam.front, 1.0)
    assert np.allclose(ahead, (0.0, 0.0, -1.0, 1.0))


def test_look_at_is_rigid():
    view = look_at((3.0, 1.0, 2.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)


def test_mouse_tracker_first_move_does_not_turn():
    cam = Camera()
    tracker = MouseTracker(cam)
    yaw, pitch = cam.yaw, cam.pitch
    tracker.move(100.0, 300.0)
    assert cam.yaw == yaw
    assert cam.pitch == pitch
    assert tracker.first_mouse is False


def test_mouse_tracker_reverses_y():
    cam = Camera()
    tracker = MouseTracker(cam)
    tracker.move(100.0, 100.0)
    yaw, pitch = cam.yaw, cam.pitch
    tracker.move(110.0, 90.0)
    assert cam.yaw == pytest.approx(yaw + 10.0 * cam.mouse_sensitivity)
    assert cam.pitch == pytest.approx(pitch + 10.0 * cam.mouse_sensitivity)
    assert (tracker.last_x, tracker.last_y) == (110.0, 90.0)