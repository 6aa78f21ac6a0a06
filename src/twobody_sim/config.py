# MIT License (see LICENSE)
"""
Run configuration for two-body integration.

GravityConfig carries the physical parameters (G and the two masses) and is
passed explicitly into the derivative evaluator, so independent runs with
different parameters never share global state. Scenario bundles it with the
initial conditions, time step and horizon consumed by the driver.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

from .constants import G_NATURAL, DEFAULT_MASS_RATIO, DEFAULT_MIN_SEPARATION
from .errors import InvalidStepSizeError, NonFiniteStateError
from .types import SystemState


@dataclass(frozen=True)
class GravityConfig:
    """
    Physical parameters of a two-body system.

    Attributes:
        G: Gravitational constant (default: natural units, G = 1).
        m1: Mass of body 1.
        m2: Mass of body 2.
        min_separation: Separations r ≤ this value are treated as singular.
    """
    G: float = G_NATURAL
    m1: float = 1.0
    m2: float = 1.0
    min_separation: float = DEFAULT_MIN_SEPARATION

    def __post_init__(self) -> None:
        if not math.isfinite(self.G):
            raise ValueError(f"G must be finite, got {self.G}")
        for name in ("m1", "m2"):
            m = getattr(self, name)
            if not math.isfinite(m) or m < 0:
                raise ValueError(f"{name} must be finite and non-negative, got {m}")
        if self.m1 == 0 and self.m2 == 0:
            raise ValueError("At least one body must have non-zero mass")
        if not math.isfinite(self.min_separation) or self.min_separation < 0:
            raise ValueError(
                f"min_separation must be finite and non-negative, got {self.min_separation}"
            )

    @classmethod
    def from_mass_ratio(
        cls,
        G: float = G_NATURAL,
        ratio: float = DEFAULT_MASS_RATIO,
        primary_mass: float = 1.0,
        min_separation: float = DEFAULT_MIN_SEPARATION,
    ) -> "GravityConfig":
        """
        Build a config from a secondary-to-primary mass ratio m2/m1.

        Args:
            G: Gravitational constant.
            ratio: m2 / m1.
            primary_mass: m1 (default 1, so m2 equals the ratio).
            min_separation: Singularity threshold.
        """
        return cls(G=G, m1=primary_mass, m2=primary_mass * ratio, min_separation=min_separation)

    @property
    def total_mass(self) -> float:
        return self.m1 + self.m2

    @property
    def mass_ratio(self) -> float:
        """m2 / m1 (infinite if m1 is zero)."""
        return math.inf if self.m1 == 0 else self.m2 / self.m1


@dataclass(frozen=True)
class Scenario:
    """
    A complete run description: initial conditions plus stepping parameters.

    Attributes:
        initial: State at t = 0.
        dt: Fixed time step (must be finite and > 0).
        t_end: Time horizon; stepping stops once elapsed time reaches it.
        gravity: Physical parameters.

    Raises:
        InvalidStepSizeError: If dt is not finite and positive.
        ValueError: If t_end is negative or not finite.
        NonFiniteStateError: If the initial state has NaN/inf components.
    """
    initial: SystemState
    dt: float
    t_end: float
    gravity: GravityConfig = field(default_factory=GravityConfig)

    def __post_init__(self) -> None:
        validate_run_parameters(self.initial, self.dt, self.t_end)

    @property
    def n_steps(self) -> int:
        """Nominal number of steps (t_end / dt, rounded up)."""
        return math.ceil(self.t_end / self.dt)


def validate_run_parameters(initial: SystemState, dt: float, t_end: float) -> None:
    """
    Startup checks shared by Scenario and the driver.

    Performed once per run, never per step.
    """
    if not math.isfinite(dt) or dt <= 0:
        raise InvalidStepSizeError(dt)
    if not math.isfinite(t_end) or t_end < 0:
        raise ValueError(f"t_end must be finite and non-negative, got {t_end}")
    if not initial.is_finite():
        raise NonFiniteStateError(0, 0.0, initial)
