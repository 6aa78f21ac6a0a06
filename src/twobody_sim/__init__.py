# MIT License (see LICENSE)
"""
twobody_sim - Fixed-step RK4 integration of the gravitational two-body problem.

This package advances two point masses in a plane under mutual Newtonian
gravity and streams the resulting trajectory to text or dataset sinks.

Main entry points:
    - SystemState / DerivativeState: 8-scalar state and rate-of-change values.
    - GravityConfig: G and the two masses, passed explicitly to the core.
    - derivative, rk4_step: The pure numerical core.
    - Scenario, run, simulate: Fixed-horizon driver.

Submodules:
    - core: Derivative evaluator, RK4 stepper, conserved quantities.
    - sinks: Text, buffered, dataset and null trajectory sinks.
    - io: JSON scenarios and .npz datasets.

Example:
    from twobody_sim import SystemState, GravityConfig, rk4_step

    state = SystemState(-0.5, 0.0, 0.0, -0.5, 0.5, 0.0, 0.0, 0.5)
    state = rk4_step(state, 0.01, GravityConfig(G=1.0, m1=1.0, m2=1.0))
"""
from .types import SystemState, DerivativeState, Trajectory
from .config import GravityConfig, Scenario
from .errors import (
    TwoBodyError,
    SingularSeparationError,
    NonFiniteStateError,
    InvalidStepSizeError,
)
from .util import scale, add, as_delta
from .core import derivative, rk4_step
from .driver import RunSummary, integrate, run, simulate

__version__ = "0.1.0"

__all__ = [
    # State types
    "SystemState",
    "DerivativeState",
    "Trajectory",
    # Configuration
    "GravityConfig",
    "Scenario",
    # Errors
    "TwoBodyError",
    "SingularSeparationError",
    "NonFiniteStateError",
    "InvalidStepSizeError",
    # State algebra
    "scale",
    "add",
    "as_delta",
    # Numerical core
    "derivative",
    "rk4_step",
    # Driver
    "RunSummary",
    "integrate",
    "run",
    "simulate",
]
