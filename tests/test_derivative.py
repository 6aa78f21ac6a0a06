import math

import numpy as np
import pytest

from twobody_sim.config import GravityConfig
from twobody_sim.core.gravity import derivative, accelerations, separation
from twobody_sim.errors import SingularSeparationError
from twobody_sim.types import SystemState


def test_velocity_slots_copy_input(symmetric_state, unit_gravity):
    d = derivative(symmetric_state, unit_gravity)
    assert (d.dx1, d.dy1) == (symmetric_state.vx1, symmetric_state.vy1)
    assert (d.dx2, d.dy2) == (symmetric_state.vx2, symmetric_state.vy2)


def test_unit_separation_accelerations(symmetric_state, unit_gravity):
    """Bodies one unit apart on the x axis attract each other with |a| = G m."""
    (ax1, ay1), (ax2, ay2) = accelerations(symmetric_state, unit_gravity)
    assert (ax1, ay1) == (1.0, 0.0)
    assert (ax2, ay2) == (-1.0, 0.0)


def test_inverse_square_law():
    config = GravityConfig(G=2.0, m1=3.0, m2=5.0)
    state = SystemState(0.0, 0.0, 0.0, 0.0, 3.0, 4.0, 0.0, 0.0)
    d = derivative(state, config)
    r = separation(state)
    assert r == 5.0
    # |a1| = G m2 / r², pointing from body 1 toward body 2
    np.testing.assert_allclose(d.acceleration1, 2.0 * 5.0 / 25.0 * np.array([0.6, 0.8]))
    np.testing.assert_allclose(d.acceleration2, -2.0 * 3.0 / 25.0 * np.array([0.6, 0.8]))


def test_newton_third_law():
    """m1·a1 = -m2·a2 for unequal masses."""
    config = GravityConfig(G=6.67e-8, m1=1.0, m2=0.01)
    state = SystemState(0.3, -1.2, 0.1, 0.2, -2.5, 0.7, -0.4, 0.05)
    d = derivative(state, config)
    np.testing.assert_allclose(config.m1 * d.acceleration1, -config.m2 * d.acceleration2,
                               rtol=1e-14, atol=0.0)


def test_coincident_bodies_raise(unit_gravity):
    state = SystemState(1.0, 2.0, 0.1, 0.0, 1.0, 2.0, -0.1, 0.0)
    with pytest.raises(SingularSeparationError) as exc_info:
        derivative(state, unit_gravity)
    assert exc_info.value.separation == 0.0
    assert isinstance(exc_info.value, ZeroDivisionError)


def test_min_separation_threshold():
    config = GravityConfig(G=1.0, m1=1.0, m2=1.0, min_separation=0.1)
    close = SystemState(0.0, 0.0, 0.0, 0.0, 0.05, 0.0, 0.0, 0.0)
    with pytest.raises(SingularSeparationError):
        derivative(close, config)
    far = SystemState(0.0, 0.0, 0.0, 0.0, 0.2, 0.0, 0.0, 0.0)
    assert derivative(far, config).is_finite()


def test_underflowing_separation_raises(unit_gravity):
    """r³ underflows to zero before r does; still reported as singular."""
    state = SystemState(0.0, 0.0, 0.0, 0.0, 1e-120, 0.0, 0.0, 0.0)
    with pytest.raises(SingularSeparationError):
        derivative(state, unit_gravity)


def test_subnormal_separation_raises(unit_gravity):
    """r³ is subnormal but non-zero, so G·m / r³ overflows; still singular."""
    for x2 in (1e-104, 1e-106):
        state = SystemState(0.0, 0.0, 0.0, 0.0, x2, 0.0, 0.0, 0.0)
        with pytest.raises(SingularSeparationError) as exc_info:
            derivative(state, unit_gravity)
        assert exc_info.value.separation == x2


def test_small_but_resolvable_separation_is_finite(unit_gravity):
    state = SystemState(0.0, 0.0, 0.0, 0.0, 1e-100, 0.0, 0.0, 0.0)
    assert derivative(state, unit_gravity).is_finite()


def test_acceleration_uses_direct_division():
    """a1 = (-G·m2 / r³)·Δ, a2 = (G·m1 / r³)·Δ, bit for bit."""
    config = GravityConfig(G=6.67e-8, m1=1.0, m2=0.01)
    state = SystemState(0.3, -1.2, 0.0, 0.0, -2.5, 0.7, 0.0, 0.0)
    dx, dy = 0.3 - -2.5, -1.2 - 0.7
    r = math.hypot(dx, dy)
    r3 = r * r * r
    k1 = -6.67e-8 * 0.01 / r3
    k2 = 6.67e-8 * 1.0 / r3
    (ax1, ay1), (ax2, ay2) = accelerations(state, config)
    assert (ax1, ay1) == (k1 * dx, k1 * dy)
    assert (ax2, ay2) == (k2 * dx, k2 * dy)


def test_mass_ratio_config():
    config = GravityConfig.from_mass_ratio(G=6.67e-8, ratio=0.01)
    assert config.m1 == 1.0
    assert config.m2 == 0.01
    assert config.mass_ratio == pytest.approx(0.01)


@pytest.mark.parametrize("kwargs", [
    {"m1": -1.0},
    {"m1": 0.0, "m2": 0.0},
    {"G": float("nan")},
    {"min_separation": -1.0},
])
def test_invalid_gravity_config(kwargs):
    with pytest.raises(ValueError):
        GravityConfig(**kwargs)
