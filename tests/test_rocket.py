import random

import pytest

from particlesim.camera import Camera
from particlesim.particle import Particle
from particlesim.rocket import Rocket
from particlesim.vector import Vector3


def _camera():
    return Camera(Vector3(50.0, 50.0, 50.0), Vector3(-0.6, -0.2, -0.7))


def _rocket(acceleration=Vector3(0.0, 5.0, 0.0), position=Vector3(1.0, 2.0, 3.0)):
    return Rocket(position, Vector3(), 1.0, 0.99, acceleration, 100.0, _camera(), rng=random.Random(3))


def test_constructor_splits_acceleration():
    rocket = _rocket(Vector3(4.0, 6.0, 0.0))
    assert rocket.jet == 4.0
    assert rocket.force.y == 6.0
    assert rocket.flame_position == Vector3(1.0, 2.0, 3.0) - Vector3(0.5, 0.0, 0.5)


def test_integrate_uses_lifetime_and_clears_force():
    rocket = _rocket()
    rocket.integrate(0.5)
    assert rocket.remaining_time == pytest.approx(99.5)
    assert rocket.force == Vector3()


def test_without_jet_acceleration_is_kept():
    rocket = _rocket(Vector3(0.0, 5.0, 0.0))
    rocket.integrate(0.1)
    assert rocket.acceleration == Vector3(0.0, 5.0, 0.0)


def test_jet_turns_acceleration_by_jet_length():
    start = Vector3(2.0, 0.0, 0.0)
    rocket = _rocket(start)
    rocket.integrate(0.1)
    assert (rocket.acceleration - start).magnitude() == pytest.approx(2.0)


def test_flame_moves_on_fourth_step():
    rocket = _rocket()
    initial = rocket.flame_position
    for _ in range(3):
        rocket.integrate(0.1)
    assert rocket.flame_position == initial
    rocket.integrate(0.1)
    expected = rocket.position - rocket.acceleration.normalized()
    assert rocket.flame_position.x == pytest.approx(expected.x)
    assert rocket.flame_position.y == pytest.approx(expected.y)
    assert rocket.flame_position.z == pytest.approx(expected.z)


def test_explosion_makes_hundred_sparks_near_rocket():
    rocket = _rocket(position=Vector3(10.0, 20.0, 30.0))
    sparks = rocket.on_death()
    assert len(sparks) == 100
    assert all(type(s) is Particle for s in sparks)
    assert all(s.remaining_time == 3 and s.damping == 0.8 for s in sparks)
    assert all((s.position - Vector3(10.0, 20.0, 30.0)).magnitude() < 2.0 for s in sparks)


def test_clone_is_independent():
    rocket = _rocket()
    twin = rocket.clone()
    twin.integrate(1.0)
    assert isinstance(twin, Rocket)
    assert rocket.remaining_time == 100.0
    assert rocket.position == Vector3(1.0, 2.0, 3.0)