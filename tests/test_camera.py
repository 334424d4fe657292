import pytest

from particlesim.camera import Camera
from particlesim.vector import Quaternion, Vector3


def make_camera():
    return Camera(Vector3(50.0, 50.0, 50.0), Vector3(-0.6, -0.2, -0.7))


def test_direction_is_normalized():
    cam = make_camera()
    assert cam.dir.magnitude() == pytest.approx(1.0)


def test_w_moves_forward_two_units():
    cam = make_camera()
    start = cam.eye
    assert cam.handle_key("w", 0, 0) is True
    assert tuple(cam.eye) == pytest.approx(tuple(start + cam.dir * 2.0))


def test_speed_scales_movement():
    cam = make_camera()
    start = cam.eye
    cam.handle_key("W", 0, 0, 3.0)
    assert (cam.eye - start).magnitude() == pytest.approx(6.0)


@pytest.mark.parametrize("there, back", [("W", "S"), ("A", "D")])
def test_opposite_keys_cancel(there, back):
    cam = make_camera()
    start = cam.eye
    cam.handle_key(there, 0, 0)
    assert cam.eye != start
    cam.handle_key(back, 0, 0)
    assert tuple(cam.eye) == pytest.approx(tuple(start))


def test_unknown_key_not_handled():
    cam = make_camera()
    start = cam.eye
    assert cam.handle_key("x", 0, 0) is False
    assert cam.eye == start


def test_analog_move_forward():
    cam = make_camera()
    start = cam.eye
    cam.handle_analog_move(0.0, 1.5)
    assert tuple(cam.eye) == pytest.approx(tuple(start + cam.dir * 1.5))


def test_motion_without_movement_keeps_direction():
    cam = make_camera()
    cam.handle_mouse(0, 0, 10, 20)
    before = cam.dir
    cam.handle_motion(10, 20)
    assert tuple(cam.dir) == pytest.approx(tuple(before))


def test_motion_turns_and_keeps_unit_direction():
    cam = make_camera()
    before = cam.dir
    cam.handle_motion(15, -7)
    assert cam.dir.magnitude() == pytest.approx(1.0)
    assert cam.dir != before
    assert (cam.mouse_x, cam.mouse_y) == (15, -7)


def test_transform_looks_along_direction():
    cam = make_camera()
    t = cam.transform()
    assert t.p == cam.eye
    assert tuple(t.q.rotate(Vector3(0.0, 0.0, -1.0))) == pytest.approx(tuple(cam.dir))


def test_transform_straight_down_has_no_rotation():
    cam = Camera(Vector3(1.0, 2.0, 3.0), Vector3(0.0, -4.0, 0.0))
    t = cam.transform()
    assert t.p == Vector3(1.0, 2.0, 3.0)
    assert t.q == Quaternion()