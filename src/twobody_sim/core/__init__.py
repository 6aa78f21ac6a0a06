# MIT License (see LICENSE)
"""
Numerical core of the two-body integrator.

This subpackage provides:
    - Derivative evaluator: Newtonian gravitational accelerations.
    - Integrators: Fixed-step classical RK4.
    - Invariants: Momentum and energy for accuracy checks.

Typical usage:
    from twobody_sim.core import derivative, rk4_step

    d = derivative(state, config)
    state = rk4_step(state, dt=0.01, config=config)
"""
from .gravity import accelerations, derivative, separation
from .integrators import rk4_step
from .invariants import (
    angular_momentum,
    center_of_mass,
    kinetic_energy,
    linear_momentum,
    potential_energy,
    relative_drift,
    total_energy,
)

__all__ = [
    # Derivative evaluator
    "derivative",
    "accelerations",
    "separation",
    # Integrators
    "rk4_step",
    # Invariants
    "linear_momentum",
    "angular_momentum",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "center_of_mass",
    "relative_drift",
]
