"""Fireworks that burst into further fireworks according to a rule table."""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field

from .colors import Color, color_for
from .generators import FireworkGenerator
from .particle import Particle
from .vector import Vector3

_HIDDEN_POSITION = Vector3(0.0, -10000000.0, 0.0)
_POSITION_WIDTH = Vector3(0.01, 0.01, 0.01)
_MODEL_LIFETIME = 0.01


@dataclass(frozen=True)
class Payload:
    """``count`` fireworks of rule ``firework_type`` released on a burst."""

    firework_type: int
    count: int


@dataclass
class FireworkRule:
    """How fireworks of one type fly, how long they live and what they release."""

    firework_type: int = 0
    min_age: float = 0.0
    max_age: float = 0.0
    min_velocity: Vector3 = field(default_factory=Vector3)
    max_velocity: Vector3 = field(default_factory=Vector3)
    damping: float = 0.0
    payloads: list[Payload] = field(default_factory=list)


def default_firework_rules() -> list[FireworkRule]:
    """The standard table of nine rules; the last one is left blank."""

    def rule(kind, min_age, max_age, min_vel, max_vel, damping, payloads):
        return FireworkRule(
            kind,
            min_age,
            max_age,
            Vector3(*min_vel),
            Vector3(*max_vel),
            damping,
            [Payload(t, c) for t, c in payloads],
        )

    return [
        rule(0, 0, 2, (-10.0, -10.0, -10.0), (10.0, 10.0, 10.0), 0.999, []),
        rule(1, 1, 2, (-20.0, 0.0, -20.0), (20.0, 0.01, 20.0), 0.999, [(0, 30)]),
        rule(2, 2, 3, (-30.0, 0.01, -30.0), (30.0, 5.0, 30.0), 0.999, [(1, 5), (0, 10)]),
        rule(
            3, 2, 3, (-40.0, -5.0, -40.0), (40.0, 30.0, 40.0), 0.999,
            [(2, 5), (1, 3), (0, 10)],
        ),
        rule(
            4, 0, 1, (-40.0, 30.0, 0.0), (-40.01, 30.01, 0.01), 0.999,
            [(2, 5), (1, 3), (0, 10), (0, 3)],
        ),
        rule(
            5, 4, 5, (-10.0, 130.0, -10.0), (10.0, 150.0, 10.0), 0.999,
            [(0, 30), (1, 3), (2, 2), (3, 1), (4, 5)],
        ),
        rule(6, 0.5, 1.5, (-10.0, -5.0, 0.0), (20.0, 2.5, 0.01), 0.999, [(0, 10)]),
        rule(7, 2, 3, (-50.0, -5.0, 0.0), (50.0, 0.0, 0.01), 0.999, [(6, 25)]),
        FireworkRule(),
    ]


class Firework(Particle):
    """A particle that bursts into its payloads when it dies."""

    def __init__(
        self,
        position: Vector3,
        velocity: Vector3,
        mass: float,
        damping: float,
        lifetime: float,
        payloads: list[Payload],
        firework_type: int,
        rules: list[FireworkRule],
        color: Color,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(position, velocity, mass, damping, lifetime=lifetime, color=color)
        self.payloads = list(payloads)
        self.firework_type = firework_type
        self.rules = list(rules)
        self.rng = rng if rng is not None else random.Random()

    def clone(self) -> Firework:
        firework = copy.copy(self)
        firework.payloads = list(self.payloads)
        firework.rules = list(self.rules)
        return firework

    def on_death(self) -> list[Particle]:
        """Fireworks released by every payload, stopping at the first unknown type."""
        spawned: list[Particle] = []
        for payload in self.payloads:
            if payload.firework_type >= len(self.rules):
                return spawned
            rule = self.rules[payload.firework_type]
            model = Firework(
                _HIDDEN_POSITION,
                Vector3(),
                1.0,
                rule.damping,
                _MODEL_LIFETIME,
                rule.payloads,
                rule.firework_type,
                self.rules,
                color_for(rule.firework_type),
                rng=self.rng,
            )
            spread = rule.max_velocity - rule.min_velocity
            deviation = Vector3(abs(spread.x), abs(spread.y), abs(spread.z))
            generator = FireworkGenerator(
                "Firework",
                model,
                self.position,
                (rule.max_velocity + rule.min_velocity) / 2,
                deviation,
                _POSITION_WIDTH,
                (rule.max_age + rule.min_age) / 2,
                rule.max_age - rule.min_age,
                payload.count,
                rng=self.rng,
            )
            spawned.extend(generator.generate_particles())
        return spawned