"""Point particles integrated with damped explicit Euler steps."""

from __future__ import annotations

import copy
import math
from enum import Enum, auto

from .colors import Color
from .vector import Vector3

_PI = 3.1415


class Shape(Enum):
    SPHERE = auto()
    BOX = auto()


class Particle:
    """A particle with mass, damping, accumulated force and a lifetime."""

    def __init__(
        self,
        position: Vector3,
        velocity: Vector3,
        mass: float,
        damping: float,
        acceleration: Vector3 = Vector3(),
        lifetime: float = 1000.0,
        color: Color = (1.0, 1.0, 1.0, 1.0),
        size: Vector3 = Vector3(1.0, 1.0, 1.0),
        shape: Shape = Shape.SPHERE,
    ) -> None:
        self.position = position
        self.velocity = velocity
        self.acceleration = acceleration
        self.force = Vector3()
        self.mass = mass
        self.damping = damping
        self.remaining_time = lifetime
        self.color = color
        self.size = size
        self.shape = shape
        if shape is Shape.BOX:
            self.volume = size.x * size.y * size.z
        else:
            radius = size.x / 2
            self.volume = (4 * _PI * radius * radius * radius) / 3.0

    @property
    def inverse_mass(self) -> float:
        return 1.0 / self.mass if self.mass != 0 else math.inf

    def integrate(self, t: float) -> None:
        """Advance the particle by ``t`` seconds and clear its force."""
        if self.inverse_mass <= 0.0:
            return
        total = self.acceleration + self.force * self.inverse_mass
        self.velocity = (self.velocity + total * t) * (self.damping**t)
        self.position = self.position + self.velocity * t
        self.remaining_time -= t
        self.clear_force()

    def clone(self) -> Particle:
        """An independent copy of this particle."""
        return copy.copy(self)

    def on_death(self) -> list[Particle]:
        """Particles spawned when this one dies."""
        return []

    def clear_force(self) -> None:
        self.force = Vector3()

    def add_force(self, f: Vector3) -> None:
        self.force = self.force + f


class Cannonball(Particle):
    def __init__(self, position: Vector3, velocity: Vector3, mass: float, damping: float) -> None:
        super().__init__(position, velocity, mass, damping, color=(0.1, 0.1, 0.1, 1.0))


class Fireball(Particle):
    def __init__(self, position: Vector3, velocity: Vector3, mass: float, damping: float) -> None:
        super().__init__(position, velocity, mass, damping, color=(0.7, 0.3, 0.1, 1.0))


class Laser(Particle):
    """A particle that ignores any built-in acceleration."""

    is_laser = True

    def __init__(self, position: Vector3, velocity: Vector3, mass: float, damping: float) -> None:
        super().__init__(position, velocity, mass, damping, color=(1.0, 0.1, 0.1, 1.0))
        self.acceleration = Vector3()