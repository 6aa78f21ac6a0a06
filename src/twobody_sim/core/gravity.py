# MIT License (see LICENSE)
"""
Derivative evaluator for the gravitational two-body problem.

Computes the right-hand side of the coupled first-order system
    dx_i/dt = v_i
    dv_1/dt = -G m2 Δ / r³
    dv_2/dt = +G m1 Δ / r³
where Δ = x1 - x2 and r = |Δ|. The two accelerations satisfy Newton's third
law: m1·a1 = -m2·a2.

Everything here is a pure function of (state, config). Coincident bodies are
reported with SingularSeparationError instead of propagating infinities.
"""
from __future__ import annotations
import math

from ..config import GravityConfig
from ..errors import SingularSeparationError
from ..types import SystemState, DerivativeState


def separation(state: SystemState) -> float:
    """Euclidean distance r between the two bodies."""
    return math.hypot(state.x1 - state.x2, state.y1 - state.y2)


def accelerations(
    state: SystemState,
    config: GravityConfig,
) -> tuple[tuple[float, float], tuple[float, float]]:
    """
    Gravitational accelerations of both bodies.

    Args:
        state: Current positions (velocities are ignored).
        config: G and masses.

    Returns:
        ((ax1, ay1), (ax2, ay2)).

    Raises:
        SingularSeparationError: If r ≤ config.min_separation, r³ underflows
            to zero, or r is so small that the accelerations overflow.
    """
    dx = state.x1 - state.x2
    dy = state.y1 - state.y2
    r = math.hypot(dx, dy)
    r3 = r * r * r
    if r <= config.min_separation or r3 == 0.0:
        raise SingularSeparationError(r, config.min_separation)

    k1 = -config.G * config.m2 / r3
    k2 = config.G * config.m1 / r3
    a1 = (k1 * dx, k1 * dy)
    a2 = (k2 * dx, k2 * dy)
    # G·m / r³ overflows when r³ is subnormal; an infinite r means diverged positions, reported by the driver
    if math.isfinite(r) and not all(math.isfinite(a) for a in a1 + a2):
        raise SingularSeparationError(r, config.min_separation)
    return a1, a2


def derivative(state: SystemState, config: GravityConfig) -> DerivativeState:
    """
    Time derivative of a two-body state.

    Velocity slots carry the input velocities unchanged; acceleration slots
    carry the gravitational accelerations from accelerations().

    Raises:
        SingularSeparationError: If the bodies coincide.
    """
    (ax1, ay1), (ax2, ay2) = accelerations(state, config)
    return DerivativeState(
        dx1=state.vx1,
        dy1=state.vy1,
        dvx1=ax1,
        dvy1=ay1,
        dx2=state.vx2,
        dy2=state.vy2,
        dvx2=ax2,
        dvy2=ay2,
    )
