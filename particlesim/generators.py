"""Particle generators that spawn randomised copies of a model particle."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from .particle import Particle
from .vector import Vector3


class ParticleGenerator(ABC):
    """Spawns ``count`` clones of ``model`` around a mean position and velocity."""

    def __init__(
        self,
        name: str,
        model: Particle,
        mean_position: Vector3,
        mean_velocity: Vector3,
        count: int,
        rng: random.Random | None = None,
    ) -> None:
        self.name = name
        self.model = model
        self.mean_position = mean_position
        self.mean_velocity = mean_velocity
        self.count = count
        self.generation_probability = 1.0
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def generate_particles(self) -> list[Particle]:
        """A fresh batch of particles."""


class GaussianParticleGenerator(ParticleGenerator):
    """Normally distributed positions and velocities, per axis."""

    def __init__(
        self,
        name: str,
        model: Particle,
        mean_position: Vector3,
        mean_velocity: Vector3,
        velocity_deviation: Vector3,
        position_deviation: Vector3,
        count: int,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, model, mean_position, mean_velocity, count, rng)
        self.velocity_deviation = velocity_deviation
        self.position_deviation = position_deviation

    def _sample(self, mean: Vector3, deviation: Vector3) -> Vector3:
        return Vector3(
            *(self.rng.gauss(m, d) for m, d in zip(mean, deviation))
        )

    def generate_particles(self) -> list[Particle]:
        particles = []
        for _ in range(self.count):
            position = self._sample(self.mean_position, self.position_deviation)
            velocity = self._sample(self.mean_velocity, self.velocity_deviation)
            particle = self.model.clone()
            particle.position = position
            particle.velocity = velocity
            particles.append(particle)
        return particles


class UniformParticleGenerator(ParticleGenerator):
    """Positions and velocities spread uniformly within given half-widths."""

    def __init__(
        self,
        name: str,
        model: Particle,
        mean_position: Vector3,
        mean_velocity: Vector3,
        velocity_width: Vector3,
        position_width: Vector3,
        count: int,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, model, mean_position, mean_velocity, count, rng)
        self.velocity_width = velocity_width
        self.position_width = position_width

    def _spread(self, width: Vector3) -> Vector3:
        return Vector3(*(w * self.rng.uniform(-1.0, 1.0) for w in width))

    def generate_particles(self) -> list[Particle]:
        particles = []
        for _ in range(self.count):
            offset_position = self._spread(self.position_width)
            offset_velocity = self._spread(self.velocity_width)
            particle = self.model.clone()
            particle.position = self.mean_position + offset_position
            particle.velocity = self.mean_velocity + offset_velocity
            particles.append(particle)
        return particles


class CircleGenerator(GaussianParticleGenerator):
    """Particles flying off in random directions at one fixed speed."""

    def __init__(
        self,
        name: str,
        model: Particle,
        mean_position: Vector3,
        velocity: Vector3,
        velocity_deviation: Vector3,
        position_deviation: Vector3,
        count: int,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            name,
            model,
            mean_position,
            Vector3(),
            Vector3(1.0, 1.0, 1.0),
            position_deviation,
            count,
            rng,
        )
        self.speed = velocity.magnitude()

    def generate_particles(self) -> list[Particle]:
        particles = super().generate_particles()
        for particle in particles:
            particle.velocity = particle.velocity.normalized() * self.speed
        return particles


class FireworkGenerator(CircleGenerator):
    """Circle burst whose particles get normally distributed whole-second lifetimes."""

    def __init__(
        self,
        name: str,
        model: Particle,
        mean_position: Vector3,
        velocity: Vector3,
        velocity_width: Vector3,
        position_width: Vector3,
        particle_time: float,
        time_width: float,
        count: int,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            name,
            model,
            mean_position,
            velocity + velocity_width,
            velocity_width,
            position_width,
            count,
            rng,
        )
        self.particle_time = particle_time
        self.time_width = time_width

    def generate_particles(self) -> list[Particle]:
        particles = super().generate_particles()
        for particle in particles:
            particle.remaining_time = int(self.rng.gauss(self.particle_time, self.time_width))
        return particles