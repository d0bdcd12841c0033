import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gorillas.config import AvatarConfig, PhysicsConfig
from gorillas.sim.projectile import (
    advance,
    arm_raise_angle,
    create_projectile,
    current_velocity,
    is_descending,
    position_at,
)
from gorillas.sim.world import Avatar


def test_player_one_launch():
    p = create_projectile(Avatar(x=100.0, y=200.0, player=1), 45.0, 50.0, AvatarConfig())
    assert (p.start_x, p.start_y) == (92.0, 193.0)
    assert (p.x, p.y) == (p.start_x, p.start_y)
    assert p.init_vx == pytest.approx(50 * math.sqrt(0.5))
    assert p.init_vy == pytest.approx(50 * math.sqrt(0.5))
    assert p.time == 0.0
    assert p.player == 1


def test_player_two_angle_mirrored():
    p = create_projectile(Avatar(x=500.0, y=200.0, player=2), 45.0, 50.0, AvatarConfig())
    assert (p.start_x, p.start_y) == (508.0, 193.0)
    assert p.angle == pytest.approx(3 * math.pi / 4)
    assert p.init_vx == pytest.approx(-50 * math.sqrt(0.5))
    assert p.init_vy == pytest.approx(50 * math.sqrt(0.5))


def test_advance_matches_closed_form():
    physics = PhysicsConfig()
    p = create_projectile(Avatar(x=100.0, y=200.0, player=1), 60.0, 40.0, AvatarConfig())
    moved = advance(p, 3, 0.5, physics)
    t = 0.5
    assert moved.time == pytest.approx(t)
    assert moved.x == pytest.approx(p.start_x + p.init_vx * t + 0.5 * (3 / 5) * t * t)
    assert moved.y == pytest.approx(p.start_y + (-p.init_vy * t + 0.5 * 9.8 * t * t))
    # Launch data is untouched.
    assert (moved.start_x, moved.init_vx) == (p.start_x, p.init_vx)


@settings(deadline=500, max_examples=50)
@given(
    angle=st.floats(min_value=1.0, max_value=179.0),
    velocity=st.floats(min_value=2.0, max_value=200.0),
    wind=st.integers(min_value=-14, max_value=15),
    ticks=st.integers(min_value=1, max_value=200),
    player=st.sampled_from([1, 2]),
)
def test_prop_path_independent_of_step_size(angle, velocity, wind, ticks, player):
    physics = PhysicsConfig()
    p = create_projectile(Avatar(x=320.0, y=150.0, player=player), angle, velocity, AvatarConfig())

    fine = p
    for _ in range(ticks):
        fine = advance(fine, wind, 0.1, physics)
    coarse = advance(p, wind, ticks * 0.1, physics)
    x, y = position_at(p, wind, ticks * 0.1, physics)

    assert fine.x == pytest.approx(x, rel=1e-9, abs=1e-6)
    assert fine.y == pytest.approx(y, rel=1e-9, abs=1e-6)
    assert coarse.x == pytest.approx(x, rel=1e-9, abs=1e-6)
    assert coarse.y == pytest.approx(y, rel=1e-9, abs=1e-6)


def test_rotation_is_derived_from_time():
    p = create_projectile(Avatar(x=100.0, y=200.0, player=1), 45.0, 50.0, AvatarConfig())
    assert p.rotation == 0.0
    p = advance(p, 0, 1.0, PhysicsConfig())
    assert p.rotation == pytest.approx(100.0)
    p = advance(p, 0, 3.0, PhysicsConfig())
    assert p.rotation == pytest.approx(40.0)


def test_descent_detection():
    physics = PhysicsConfig()
    p = create_projectile(Avatar(x=100.0, y=200.0, player=1), 90.0, 49.0, AvatarConfig())
    assert not is_descending(p, physics)
    # Apex at t = 49 / 9.8 = 5.0
    assert not is_descending(advance(p, 0, 4.9, physics), physics)
    assert is_descending(advance(p, 0, 5.1, physics), physics)

    vx, vy = current_velocity(advance(p, 5, 2.0, physics), 5, physics)
    assert vx == pytest.approx(p.init_vx + 2.0)
    assert vy == pytest.approx(-49.0 + 9.8 * 2.0)


def test_time_scale_only_changes_tick_length():
    assert PhysicsConfig().dt == pytest.approx(0.1)
    assert PhysicsConfig(time_scale=2.0).dt == pytest.approx(0.2)
    with pytest.raises(ValueError):
        PhysicsConfig(time_scale=0.0)


def test_arm_raise_angle():
    assert arm_raise_angle(1) == pytest.approx(math.pi / 4)
    assert arm_raise_angle(2) == pytest.approx(3 * math.pi / 4)
