# MIT License (see LICENSE)
"""
Error taxonomy for the two-body integrator.

All failures are terminal for the trajectory being computed: the numerical
core is deterministic, so nothing here is ever retried.

- SingularSeparationError: bodies coincide inside the derivative evaluator.
- NonFiniteStateError: a produced state contains NaN or infinity.
- InvalidStepSizeError: the time step is not a finite positive number.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import SystemState


class TwoBodyError(Exception):
    """Base class for all integrator failures."""


class SingularSeparationError(TwoBodyError, ZeroDivisionError):
    """
    Raised when the separation between the bodies is zero or too small.

    Attributes:
        separation: The offending separation distance r.
    """

    def __init__(self, separation: float, min_separation: float = 0.0):
        self.separation = separation
        self.min_separation = min_separation
        super().__init__(
            f"Singular separation r={separation!r} "
            f"(min_separation={min_separation!r}); bodies are coincident"
        )


class NonFiniteStateError(TwoBodyError, ArithmeticError):
    """
    Raised when a state contains NaN or infinite components.

    Attributes:
        step: Index of the step that produced the state (0 for initial conditions).
        time: Elapsed simulation time at which the state was produced.
        state: The offending state.
    """

    def __init__(self, step: int, time: float, state: "SystemState"):
        self.step = step
        self.time = time
        self.state = state
        bad = [name for name, value in state.items() if not math.isfinite(value)]
        super().__init__(
            f"Non-finite state at step {step} (t={time:.8g}): "
            f"components {', '.join(bad)} diverged"
        )


class InvalidStepSizeError(TwoBodyError, ValueError):
    """Raised when dt is not a finite, strictly positive number."""

    def __init__(self, dt: float):
        self.dt = dt
        super().__init__(f"Time step must be finite and positive, got dt={dt!r}")
