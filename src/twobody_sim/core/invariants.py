# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying integration accuracy. For an isolated two-body system,
linear momentum, angular momentum and total mechanical energy are conserved
exactly by the continuous equations; RK4 preserves them only up to its
truncation error.
"""
from __future__ import annotations
import numpy as np

from ..config import GravityConfig
from ..types import SystemState
from .gravity import separation


def linear_momentum(state: SystemState, config: GravityConfig) -> np.ndarray:
    """
    Total linear momentum P = m1·v1 + m2·v2.

    Returns:
        Momentum vector [Px, Py].
    """
    return config.m1 * state.velocity1 + config.m2 * state.velocity2


def angular_momentum(state: SystemState, config: GravityConfig) -> float:
    """
    Total angular momentum about the origin, L = Σ m (x·vy - y·vx).
    """
    l1 = state.x1 * state.vy1 - state.y1 * state.vx1
    l2 = state.x2 * state.vy2 - state.y2 * state.vx2
    return config.m1 * l1 + config.m2 * l2


def kinetic_energy(state: SystemState, config: GravityConfig) -> float:
    """T = ½ m1 |v1|² + ½ m2 |v2|²."""
    v1_sq = state.vx1 * state.vx1 + state.vy1 * state.vy1
    v2_sq = state.vx2 * state.vx2 + state.vy2 * state.vy2
    return 0.5 * config.m1 * v1_sq + 0.5 * config.m2 * v2_sq


def potential_energy(state: SystemState, config: GravityConfig) -> float:
    """
    Gravitational potential energy U = -G m1 m2 / r.

    Note:
        Diverges for coincident bodies; callers integrating a trajectory
        never reach r = 0 because the derivative evaluator raises first.
    """
    return -config.G * config.m1 * config.m2 / separation(state)


def total_energy(state: SystemState, config: GravityConfig) -> float:
    """Total mechanical energy E = T + U."""
    return kinetic_energy(state, config) + potential_energy(state, config)


def center_of_mass(state: SystemState, config: GravityConfig) -> np.ndarray:
    """Mass-weighted mean position [x, y]."""
    return (config.m1 * state.position1 + config.m2 * state.position2) / config.total_mass


def relative_drift(initial: float, current: float) -> float:
    """
    |current - initial| relative to |initial| (absolute if initial is ~0).
    """
    return abs(current - initial) / max(1e-12, abs(initial))
