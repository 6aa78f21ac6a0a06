# MIT License (see LICENSE)
"""
Fixed-step numerical integrator for the two-body system.

rk4_step advances a SystemState by dt with the classical 4th-order
Runge-Kutta scheme, evaluating the derivative at four blended states and
combining them with weights (1, 2, 2, 1)/6 for O(dt⁵) local error.

The blending is written with util.scale/add/as_delta in a fixed order so
that trajectories are reproducible to the last bit across runs.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations

from ..config import GravityConfig
from ..types import SystemState
from ..util import scale, add, as_delta
from .gravity import derivative


def rk4_step(state: SystemState, dt: float, config: GravityConfig) -> SystemState:
    """
    Advance a two-body state by dt using classical 4th-order Runge-Kutta.

    The stepper is stateless and performs no validation of its own: any
    SingularSeparationError raised by the derivative evaluator at one of the
    four stages propagates to the caller unchanged.

    Args:
        state: State at time t.
        dt: Timestep. dt = 0 returns a state equal to the input.
        config: Gravitational constant and masses.

    Returns:
        New state at time t + dt. The input state is not modified.

    Reference:
        https://en.wikipedia.org/wiki/Runge-Kutta_methods#The_Runge-Kutta_method
    """
    # RK4 stages (each k already multiplied by dt)
    k1 = scale(derivative(state, config), dt)
    k2 = scale(derivative(add(state, as_delta(scale(k1, 0.5))), config), dt)
    k3 = scale(derivative(add(state, as_delta(scale(k2, 0.5))), config), dt)
    k4 = scale(derivative(add(state, as_delta(k3)), config), dt)

    # Weighted combination
    increment = scale(add(add(add(k1, scale(k2, 2.0)), scale(k3, 2.0)), k4), 1.0 / 6.0)
    return add(state, as_delta(increment))
