"""A free-look camera driven by keyboard and mouse input."""

from __future__ import annotations

import math

from .vector import Quaternion, Transform, Vector3

_UP = Vector3(0.0, 1.0, 0.0)


class Camera:
    """Camera with an eye position and a unit view direction."""

    def __init__(self, eye: Vector3, direction: Vector3) -> None:
        self.eye = eye
        self.dir = direction.normalized()
        self.mouse_x = 0
        self.mouse_y = 0

    def _side(self) -> Vector3:
        return self.dir.cross(_UP).normalized()

    def handle_mouse(self, button: int, state: int, x: int, y: int) -> None:
        """Remember the pointer position of a button event."""
        self.mouse_x = x
        self.mouse_y = y

    def handle_key(self, key: str, x: int, y: int, speed: float = 1.0) -> bool:
        """Move with W/A/S/D; return whether the key was handled."""
        side = self._side()
        step = 2.0 * speed
        match key.upper():
            case "W":
                self.eye = self.eye + self.dir * step
            case "S":
                self.eye = self.eye - self.dir * step
            case "A":
                self.eye = self.eye - side * step
            case "D":
                self.eye = self.eye + side * step
            case _:
                return False
        return True

    def handle_analog_move(self, x: float, y: float) -> None:
        """Move forward by ``y`` and sideways by ``x``."""
        side = self._side()
        self.eye = self.eye + self.dir * y
        self.eye = self.eye + side * x

    def handle_motion(self, x: int, y: int) -> None:
        """Turn the view by the pointer movement since the last event."""
        dx = self.mouse_x - x
        dy = self.mouse_y - y
        side = self._side()

        qx = Quaternion.from_axis_angle(math.pi * dx / 180.0, _UP)
        self.dir = qx.rotate(self.dir)
        qy = Quaternion.from_axis_angle(math.pi * dy / 180.0, side)
        self.dir = qy.rotate(self.dir).normalized()

        self.mouse_x = x
        self.mouse_y = y

    def transform(self) -> Transform:
        """Pose of the camera: at the eye, looking down its local -Z."""
        side = self.dir.cross(_UP)
        if side.magnitude() < 1e-6:
            return Transform(self.eye)
        side = side.normalized()
        rotation = Quaternion.from_basis(self.dir.cross(side), side, -self.dir)
        return Transform(self.eye, rotation)