"""Particle systems: collections of particles, generators and forces."""

from __future__ import annotations

from collections import deque

from .fireworks import Firework, default_firework_rules
from .forces import (
    AnchoredSpringForceGenerator,
    BungeeForceGenerator,
    BuoyancyForceGenerator,
    ForceGenerator,
    GravityForceGenerator,
    SpringForceGenerator,
)
from .generators import ParticleGenerator
from .particle import Particle, Shape
from .registry import ForceRegistry
from .vector import Vector3


class ParticleSystem:
    """Particles acted on by force generators, removed when out of bounds or expired."""

    def __init__(self) -> None:
        self.particles: list[Particle] = []
        self.particle_generators: list[ParticleGenerator] = []
        self.force_generators: list[ForceGenerator] = []
        self.force_registry = ForceRegistry()
        self._gravity = Vector3(0.0, -10.0, 0.0)
        self.gravity_generator = GravityForceGenerator(self._gravity)
        self.bounds = Vector3(0.0, -20.0, 0.0)
        self.force_generators.append(self.gravity_generator)

    @property
    def gravity(self) -> Vector3:
        return self._gravity

    @gravity.setter
    def gravity(self, value: Vector3) -> None:
        self._gravity = value
        self.gravity_generator.gravity = value

    @property
    def particle_count(self) -> int:
        return len(self.particles)

    def _is_dead(self, particle: Particle) -> bool:
        return particle.position.y < self.bounds.y or particle.remaining_time <= 0.0

    def _adopt(self, particle: Particle) -> None:
        self.particles.append(particle)
        for generator in self.force_generators:
            self.force_registry.add(generator, particle)

    def update(self, t: float) -> None:
        """Apply forces, integrate, and replace dead particles by what they spawn."""
        self.force_registry.update_forces(t)
        pending = deque(self.particles)
        survivors: list[Particle] = []
        self.particles = survivors
        while pending:
            particle = pending.popleft()
            particle.integrate(t)
            if not self._is_dead(particle):
                survivors.append(particle)
                continue
            spawned = particle.on_death()
            for child in spawned:
                for generator in self.force_generators:
                    self.force_registry.add(generator, child)
            pending.extend(spawned)
            self.force_registry.remove_particle(particle)

    def add_particle(self, particle: Particle) -> None:
        """Add a particle under gravity."""
        self.particles.append(particle)
        self.force_registry.add(self.gravity_generator, particle)

    def add_generator(self, generator: ParticleGenerator) -> None:
        self.particle_generators.append(generator)

    def add_force_generator(self, generator: ForceGenerator) -> None:
        """Add a force generator acting on every current and future particle."""
        self.force_generators.append(generator)
        for particle in self.particles:
            self.force_registry.add(generator, particle)

    def remove_force_generator(self, generator: ForceGenerator) -> None:
        self.force_registry.remove_generator(generator)
        self.force_generators = [g for g in self.force_generators if g is not generator]

    def contains_force_generator(self, generator: ForceGenerator) -> bool:
        return any(g is generator for g in self.force_generators)


class ContinuousParticleSystem(ParticleSystem):
    """Runs every particle generator on each update while generating is on."""

    def __init__(self) -> None:
        super().__init__()
        self.generating = False

    def update(self, t: float) -> None:
        if self.generating:
            for generator in self.particle_generators:
                for particle in generator.generate_particles():
                    self._adopt(particle)
        super().update(t)


class TimedParticleSystem(ParticleSystem):
    """Runs its particle generators each time a fixed period elapses."""

    def __init__(self, time: float) -> None:
        super().__init__()
        self.time = time
        self.current_time = time

    def update(self, t: float) -> None:
        self.current_time -= t
        if self.current_time <= 0:
            for generator in self.particle_generators:
                generator.generate_particles()
            self.current_time = self.time
        super().update(t)


class FireworkSystem(ParticleSystem):
    """Launches fireworks that follow the default rule table."""

    def __init__(self) -> None:
        super().__init__()
        self.firework_rules = default_firework_rules()
        self.gravity = Vector3(0.0, -10.0, 0.0)
        self.max_particles = 1000

    def create_firework(self) -> Firework:
        """Launch one firework of type 5 from the origin."""
        rule = self.firework_rules[5]
        firework = Firework(
            Vector3(),
            rule.max_velocity,
            1.0,
            0.999,
            2.5,
            rule.payloads,
            5,
            self.firework_rules,
            (1.0, 0.0, 1.0, 1.0),
        )
        self.particles.append(firework)
        self.force_registry.add(self.gravity_generator, firework)
        return firework


class RocketSystem(ParticleSystem):
    """A plain particle system meant for rockets."""


class SpringParticleSystem(ParticleSystem):
    """Builds spring, bungee and buoyancy demonstrations."""

    def __init__(self) -> None:
        super().__init__()
        self.water: Particle | None = None

    def generate_anchored_spring(self) -> None:
        particle = Particle(
            Vector3(-10.0, 50.0, 0.0), Vector3(), 1.0, 0.85, color=(0.0, 0.0, 1.0, 1.0)
        )
        spring = AnchoredSpringForceGenerator(1, 10, Vector3(10.0, 50.0, 0.0))
        self.particles.append(particle)
        self.particles.append(spring.other)
        self.force_registry.add(spring, particle)
        self.force_registry.add(self.gravity_generator, particle)

    def generate_dual_spring(self) -> None:
        first = Particle(Vector3(-10.0, 10.0, 0.0), Vector3(), 1.0, 0.85, color=(1.0, 0.0, 0.0, 1.0))
        second = Particle(Vector3(10.0, 10.0, 0.0), Vector3(), 1.0, 0.85, color=(0.0, 0.0, 1.0, 1.0))
        self.particles.extend((first, second))
        to_second = SpringForceGenerator(1, 10, second)
        to_first = SpringForceGenerator(1, 10, first)
        self.force_generators.extend((to_second, to_first))
        self.force_registry.add(to_second, first)
        self.force_registry.add(to_first, second)
        self.force_registry.add(self.gravity_generator, first)
        self.force_registry.add(self.gravity_generator, second)

    def generate_bungee_spring(self) -> None:
        first = Particle(Vector3(-15.0, 30.0, 0.0), Vector3(), 1.0, 0.4, color=(1.0, 0.0, 0.0, 1.0))
        second = Particle(Vector3(15.0, 30.0, 0.0), Vector3(), 1.0, 0.4, color=(0.0, 0.0, 1.0, 1.0))
        self.particles.extend((first, second))
        to_second = BungeeForceGenerator(0.5, 10, second)
        to_first = BungeeForceGenerator(0.5, 10, first)
        self.force_generators.extend((to_second, to_first))
        self.force_registry.add(to_second, first)
        self.force_registry.add(to_first, second)
        self.force_registry.add(self.gravity_generator, second)

    def generate_buoyant_particle(self) -> None:
        if self.water is None:
            self.water = Particle(
                Vector3(0.0, 1.0, 0.0),
                Vector3(),
                1e6,
                0.99,
                lifetime=1e6,
                color=(0.0, 0.0, 1.0, 1.0),
                shape=Shape.BOX,
            )
            self.particles.append(self.water)
        ball = Particle(
            Vector3(0.0, 4.0, 0.0),
            Vector3(),
            10.0,
            0.6,
            lifetime=1e6,
            color=(1.0, 0.0, 0.0, 1.0),
            size=Vector3(2.0, 2.0, 2.0),
            shape=Shape.SPHERE,
        )
        self.particles.append(ball)
        buoyancy = BuoyancyForceGenerator(1, 2.0, 1000.0, self.water, self)
        self.force_generators.append(buoyancy)
        self.force_registry.add(buoyancy, ball)
        self.force_registry.add(self.gravity_generator, ball)

    def clear(self) -> None:
        """Remove every particle, generator and force registration."""
        self.force_registry.clear()
        self.particles.clear()
        self.particle_generators.clear()
        self.force_generators.clear()
        self.water = None