import random

import pytest

from particlesim.colors import color_for
from particlesim.fireworks import Firework, FireworkRule, Payload, default_firework_rules
from particlesim.vector import Vector3


def _firework(payloads, rules, position=Vector3(5.0, 40.0, -3.0), seed=7):
    return Firework(
        position,
        Vector3(),
        1.0,
        0.999,
        2.5,
        payloads,
        5,
        rules,
        (1.0, 0.0, 1.0, 1.0),
        rng=random.Random(seed),
    )


def test_default_rules_table():
    rules = default_firework_rules()
    assert len(rules) == 9
    assert rules[5].payloads == [Payload(0, 30), Payload(1, 3), Payload(2, 2), Payload(3, 1), Payload(4, 5)]
    assert rules[1].max_velocity == Vector3(20.0, 0.01, 20.0)
    assert [r.firework_type for r in rules[:8]] == list(range(8))


def test_last_default_rule_is_blank():
    blank = default_firework_rules()[8]
    assert blank == FireworkRule()
    assert blank.payloads == []


def test_burst_spawns_payload_count():
    rules = default_firework_rules()
    firework = _firework([Payload(0, 30)], rules)
    spawned = firework.on_death()
    assert len(spawned) == 30
    assert all(isinstance(p, Firework) for p in spawned)
    assert all(p.firework_type == 0 for p in spawned)
    assert all(p.color == color_for(0) for p in spawned)


def test_burst_children_start_near_parent():
    parent_position = Vector3(5.0, 40.0, -3.0)
    firework = _firework([Payload(1, 12)], default_firework_rules(), parent_position)
    for child in firework.on_death():
        assert (child.position - parent_position).magnitude() < 1.0


def test_burst_children_share_one_speed():
    spawned = _firework([Payload(2, 10)], default_firework_rules()).on_death()
    speeds = [p.velocity.magnitude() for p in spawned]
    assert speeds == pytest.approx([speeds[0]] * len(speeds))


def test_children_inherit_rule_payloads():
    rules = default_firework_rules()
    spawned = _firework([Payload(3, 2)], rules).on_death()
    assert all(p.payloads == rules[3].payloads for p in spawned)


def test_unknown_payload_type_stops_burst():
    firework = _firework([Payload(0, 2), Payload(99, 5), Payload(0, 3)], default_firework_rules())
    assert len(firework.on_death()) == 2


def test_fixed_age_gives_fixed_lifetime():
    rules = [FireworkRule(0, 2.0, 2.0, Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0), 0.9, [])]
    spawned = _firework([Payload(0, 6)], rules).on_death()
    assert [p.remaining_time for p in spawned] == [2] * 6


def test_no_payloads_no_children():
    assert _firework([], default_firework_rules()).on_death() == []


def test_clone_is_independent():
    original = _firework([Payload(0, 1)], default_firework_rules())
    twin = original.clone()
    twin.position = Vector3(1.0, 2.0, 3.0)
    twin.payloads.append(Payload(1, 1))
    assert original.position == Vector3(5.0, 40.0, -3.0)
    assert original.payloads == [Payload(0, 1)]
    assert isinstance(twin, Firework)