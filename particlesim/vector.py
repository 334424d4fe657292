"""Small immutable vector, quaternion and rigid-transform types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector3:
    """A three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length > 0.0:
            return self * (1.0 / length)
        return Vector3()

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A rotation quaternion (x, y, z imaginary parts, w real part)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vector3) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis`` (expected to be unit length)."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_basis(cls, x_axis: Vector3, y_axis: Vector3, z_axis: Vector3) -> Quaternion:
        """Rotation whose matrix has the given orthonormal vectors as columns."""
        c0, c1, c2 = x_axis, y_axis, z_axis
        if c2.z < 0.0:
            if c0.x > c1.y:
                t = 1.0 + c0.x - c1.y - c2.z
                q = (t, c0.y + c1.x, c2.x + c0.z, c1.z - c2.y)
            else:
                t = 1.0 - c0.x + c1.y - c2.z
                q = (c0.y + c1.x, t, c1.z + c2.y, c2.x - c0.z)
        else:
            if c0.x < -c1.y:
                t = 1.0 - c0.x - c1.y + c2.z
                q = (c2.x + c0.z, c1.z + c2.y, t, c0.y - c1.x)
            else:
                t = 1.0 + c0.x + c1.y + c2.z
                q = (c1.z - c2.y, c2.x - c0.z, c0.y - c1.x, t)
        scale = 0.5 / math.sqrt(t)
        return cls(q[0] * scale, q[1] * scale, q[2] * scale, q[3] * scale)

    def rotate(self, v: Vector3) -> Vector3:
        """Apply this rotation to ``v``."""
        u = Vector3(self.x, self.y, self.z)
        t = u.cross(v) * 2.0
        return v + t * self.w + u.cross(t)


@dataclass(frozen=True, slots=True)
class Transform:
    """A position with an orientation."""

    p: Vector3 = field(default_factory=Vector3)
    q: Quaternion = field(default_factory=Quaternion)