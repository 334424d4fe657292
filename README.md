# particlesim

A small particle physics toolkit. It provides particles that are integrated
with damping and carry a lifetime. It provides force generators: gravity,
wind, vortex, explosion, springs, bungees and buoyancy. A registry ties
forces to particles. Random particle generators spawn copies of a model
particle. Ready-made particle systems build on all of these, fireworks among
them.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building blocks

- `particlesim.vector` holds `Vector3`, an immutable vector with `+`, `-`,
  scalar `*` and `/`, `magnitude()`, `normalized()`, `dot()` and `cross()`.
  It also holds `Quaternion` (`from_axis_angle`, `from_basis`, `rotate`) and
  `Transform`, which is a position and an orientation.
- `particlesim.camera` holds `Camera`, which has an eye position and a unit
  view direction `dir`.
  - `handle_key` moves the camera with W/A/S/D and returns whether it used
    the key.
  - `handle_motion` turns the view by the mouse movement since the last
    event.
  - `handle_analog_move` moves the camera forward and sideways.
  - `transform()` returns the camera's pose.
- `particlesim.colors` holds `ColorName` and `color_for(index)`, which gives
  the RGBA colour at a palette index. The palette has nine entries, so
  `color_for(9)` raises `IndexError`.
- `particlesim.particle` holds `Particle`.
  - A particle has `position`, `velocity`, `acceleration`, `mass`,
    `damping`, `remaining_time`, `color`, `size` and `shape`.
  - `shape` is `Shape.SPHERE` or `Shape.BOX`. The particle's `volume` is
    computed from `size` and `shape`.
  - `integrate(t)` applies the accumulated force, damps the velocity by
    `damping ** t` and moves the particle. It also counts down the lifetime
    and clears the force.
  - `Cannonball`, `Fireball` and `Laser` are presets. A `Laser` has no
    acceleration of its own.
- `particlesim.forces` holds the force generators. Each has
  `update_force(particle, duration)`:
  - `GravityForceGenerator`
  - `WindForceGenerator`, which acts only between two heights.
  - `VortexGenerator`
  - `ExplosionForceGenerator`, whose radius grows on every update.
  - `SpringForceGenerator`
  - `AnchoredSpringForceGenerator`, a spring tied to a heavy anchor
    particle.
  - `BungeeForceGenerator`, which only pulls.
  - `BuoyancyForceGenerator`
- `particlesim.registry` holds `ForceRegistry`, an ordered list of
  (generator, particle) pairs. It has `add`, `update_forces`,
  `remove_particle`, `remove_generator` and `clear`.
- `particlesim.generators` holds the particle generators:
  - `GaussianParticleGenerator` samples each axis from a normal
    distribution.
  - `UniformParticleGenerator` spreads values uniformly within given
    half-widths.
  - `CircleGenerator` gives every particle a random direction at one fixed
    speed.
  - `FireworkGenerator` is a circle burst whose particles get normally
    distributed lifetimes, truncated to whole seconds.

  Each generator takes an optional `random.Random` as `rng`, so that its
  runs can be reproduced.
- `particlesim.fireworks` holds `Payload`, `FireworkRule`, `Firework` and
  `default_firework_rules()`.
  - `default_firework_rules()` returns nine rules; the last one is blank.
  - When a firework dies, `on_death()` bursts it into the fireworks named by
    its payloads. It stops at the first payload whose type has no rule.
- `particlesim.rocket` holds `Rocket`.
  - A rocket's acceleration bends towards the view direction of the
    `Camera` it is given.
  - When it dies, it bursts into a cloud of 100 short-lived sparks.
- `particlesim.systems` holds the particle systems:
  - `ParticleSystem`
  - `ContinuousParticleSystem`, which runs its generators on every update
    while `generating` is true.
  - `TimedParticleSystem`
  - `FireworkSystem`
  - `RocketSystem`
  - `SpringParticleSystem`, which builds anchored-spring, dual-spring,
    bungee and buoyancy setups.

## How a system updates

A call to `update(t)` first lets every registered force generator act on its
particle. It then integrates each particle.

A particle dies when it falls below the system's lower bound
(`bounds.y`, -20 by default) or when its `remaining_time` reaches zero. Its
registrations are then removed. Whatever it returns from `on_death()` joins
the system, under every force generator the system holds.

`add_particle` puts a particle under the system's gravity only.
`add_force_generator` applies a generator to every current particle and to
every particle spawned later. Setting `system.gravity` also updates the
gravity generator.

`TimedParticleSystem` calls `generate_particles()` on each of its generators
whenever its period elapses. The particles those calls return are not added
to the system.

## Examples

```python
from particlesim.systems import SpringParticleSystem

system = SpringParticleSystem()
system.generate_dual_spring()
for _ in range(100):
    system.update(0.016)
print(system.particle_count)
```

```python
from particlesim.systems import FireworkSystem

fireworks = FireworkSystem()
fireworks.create_firework()
for _ in range(300):
    fireworks.update(0.02)
```

```python
import random

from particlesim.generators import GaussianParticleGenerator
from particlesim.particle import Particle
from particlesim.systems import ContinuousParticleSystem
from particlesim.vector import Vector3

model = Particle(Vector3(), Vector3(), 1.0, 0.99, lifetime=2.0)
fountain = GaussianParticleGenerator(
    "fountain", model,
    Vector3(0.0, 0.0, 0.0), Vector3(0.0, 20.0, 0.0),
    Vector3(2.0, 2.0, 2.0), Vector3(0.1, 0.1, 0.1),
    5, rng=random.Random(1),
)
system = ContinuousParticleSystem()
system.add_generator(fountain)
system.generating = True
system.update(0.02)
```

## What it does not do

This is a library only. It has no command, and it opens no window.

Colours, sizes, shapes and the camera are kept as plain data. Nothing is
drawn.

Particles do not collide with each other. There is no rigid-body simulation.