"""Force generators that push forces onto particles each step."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Protocol

from .particle import Particle, Shape
from .vector import Vector3

_MIN_INVERSE_MASS = 1e-10


class _HasGravity(Protocol):
    gravity: Vector3


def _is_immovable(particle: Particle) -> bool:
    return abs(particle.inverse_mass) < _MIN_INVERSE_MASS


class ForceGenerator(ABC):
    """Something that adds a force to a particle over a time step."""

    @abstractmethod
    def update_force(self, particle: Particle, duration: float) -> None:
        """Add this generator's force for ``duration`` seconds to ``particle``."""


class GravityForceGenerator(ForceGenerator):
    """Uniform gravitational acceleration."""

    def __init__(self, gravity: Vector3) -> None:
        self.gravity = gravity

    def update_force(self, particle: Particle, duration: float) -> None:
        if _is_immovable(particle):
            return
        particle.add_force(self.gravity * particle.mass)


class WindForceGenerator(ForceGenerator):
    """Linear plus quadratic drag towards a wind velocity inside a horizontal slab."""

    def __init__(
        self,
        velocity: Vector3,
        k1: float,
        k2: float,
        position: Vector3,
        lower_bound: float,
        higher_bound: float,
    ) -> None:
        self.velocity = velocity
        self.k1 = k1
        self.k2 = k2
        self.position = position
        self.lower_bound = lower_bound
        self.higher_bound = higher_bound

    def update_force(self, particle: Particle, duration: float) -> None:
        if _is_immovable(particle):
            return
        y = particle.position.y
        if self.position.y - self.lower_bound < y < self.position.y + self.higher_bound:
            delta = self.velocity - particle.velocity
            particle.add_force(delta * self.k1 + delta * (self.k2 * delta.magnitude()))


class VortexGenerator(ForceGenerator):
    """A whirl around a vertical axis that also pulls particles towards height 50."""

    def __init__(self, k: float, position: Vector3, radius: float) -> None:
        self.k = k
        self.position = position
        self.radius = radius

    def update_force(self, particle: Particle, duration: float) -> None:
        if _is_immovable(particle):
            return
        offset = particle.position - self.position
        if offset.magnitude() < self.radius:
            particle.add_force(Vector3(-offset.z, 50 - offset.y, offset.x) * self.k)


class ExplosionForceGenerator(ForceGenerator):
    """An expanding blast whose push falls off with the square of distance."""

    def __init__(
        self,
        k: float,
        time_constant: float,
        position: Vector3,
        velocity: float,
        radius: float,
    ) -> None:
        self.k = k
        self.time_constant = time_constant
        self.position = position
        self.velocity = velocity
        self.radius = radius

    def update_force(self, particle: Particle, duration: float) -> None:
        if _is_immovable(particle):
            return
        self.radius += self.velocity * duration
        offset = particle.position - self.position
        r = offset.magnitude()
        if 0.0 < r < self.radius:
            scale = (self.k / (r * r)) * math.exp(-duration / self.time_constant)
            particle.add_force(offset * scale)


class SpringForceGenerator(ForceGenerator):
    """Hooke spring joining the particle to another particle."""

    def __init__(self, k: float, resting_length: float, other: Particle) -> None:
        self.k = k
        self.resting_length = resting_length
        self.other = other

    def update_force(self, particle: Particle, duration: float) -> None:
        direction = self.other.position - particle.position
        length = direction.magnitude()
        stretch = length - self.resting_length
        particle.add_force(direction.normalized() * (stretch * self.k))


class AnchoredSpringForceGenerator(SpringForceGenerator):
    """Spring tied to a heavy, fixed anchor particle at ``position``."""

    def __init__(self, k: float, resting_length: float, position: Vector3) -> None:
        anchor = Particle(
            position,
            Vector3(),
            1e6,
            0.0,
            lifetime=1e6,
            color=(1.0, 0.0, 0.0, 1.0),
            shape=Shape.BOX,
        )
        super().__init__(k, resting_length, anchor)
        self.position = position


class BungeeForceGenerator(SpringForceGenerator):
    """Spring that only pulls, never pushes."""

    def update_force(self, particle: Particle, duration: float) -> None:
        direction = particle.position - self.other.position
        stretch = direction.magnitude() - self.resting_length
        if stretch < 0.0:
            return
        particle.add_force(direction.normalized() * -(stretch * self.k))


class BuoyancyForceGenerator(ForceGenerator):
    """Upward push from a liquid whose surface is the height of ``liquid``."""

    def __init__(
        self,
        height: float,
        volume: float,
        density: float,
        liquid: Particle,
        system: _HasGravity,
    ) -> None:
        self.height = height
        self.volume = volume
        self.density = density
        self.liquid = liquid
        self.system = system

    def update_force(self, particle: Particle, duration: float) -> None:
        h = particle.position.y
        h0 = self.liquid.position.y
        if h - h0 > self.height * 0.5:
            immersed = 0.0
        elif h0 - h > self.height * 0.5:
            immersed = 1.0
        else:
            immersed = (h0 - h) / self.height + 0.5
        lift = self.density * particle.volume * immersed * -self.system.gravity.y
        particle.add_force(Vector3(0.0, lift, 0.0))