"""A rocket steered towards the camera's view direction."""

from __future__ import annotations

import copy
import random

from .camera import Camera
from .generators import GaussianParticleGenerator
from .particle import Particle
from .vector import Vector3

_FLAME_OFFSET = Vector3(0.5, 0.0, 0.5)
_FLAME_PERIOD = 2
_EXPLOSION_SIZE = 100


class Rocket(Particle):
    """Particle whose acceleration bends towards where the camera looks.

    The x component of the starting acceleration is the jet strength and its
    y component becomes the initial force.
    """

    def __init__(
        self,
        position: Vector3,
        velocity: Vector3,
        mass: float,
        damping: float,
        acceleration: Vector3,
        lifetime: float,
        camera: Camera,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            position,
            velocity,
            mass,
            damping,
            acceleration=acceleration,
            lifetime=lifetime,
            color=(0.1, 0.1, 0.1, 1.0),
        )
        self.camera = camera
        self.jet = acceleration.x
        self.force = Vector3(self.force.x, acceleration.y, self.force.z)
        self.flame_position = position - _FLAME_OFFSET
        self.rng = rng if rng is not None else random.Random()
        self._flame_countdown = 3

    def integrate(self, t: float) -> None:
        steer = (self.camera.dir - self.acceleration.normalized()).normalized()
        self.acceleration = self.acceleration + steer * self.jet
        super().integrate(t)
        if self._flame_countdown == 0:
            self.flame_position = self.position - self.acceleration.normalized()
            self._flame_countdown = _FLAME_PERIOD
        self._flame_countdown -= 1

    def clone(self) -> Rocket:
        return copy.copy(self)

    def on_death(self) -> list[Particle]:
        """A cloud of short-lived sparks around the rocket."""
        model = Particle(
            Vector3(0.0, -10000000.0, 0.0),
            Vector3(),
            1.0,
            0.8,
            acceleration=self.force,
            lifetime=3,
            color=(1.0, 0.5, 0.0, 1.0),
            size=Vector3(0.3, 0.3, 0.3),
        )
        generator = GaussianParticleGenerator(
            "Explosion",
            model,
            self.position,
            Vector3(),
            Vector3(1.0, 1.0, 1.0),
            Vector3(0.2, 0.2, 0.2),
            _EXPLOSION_SIZE,
            rng=self.rng,
        )
        return generator.generate_particles()