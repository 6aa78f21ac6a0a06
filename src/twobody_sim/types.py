# MIT License (see LICENSE)
"""
Core type definitions for the two-body integrator.

Defines the two value types the numerical core operates on:
- SystemState: positions and velocities of both bodies at one instant.
- DerivativeState: the time derivative of a SystemState.

Both share the same 8-scalar layout (x1, y1, vx1, vy1, x2, y2, vx2, vy2), which is
what lets a single scale/add algebra serve them. They are still distinct
types: a DerivativeState only becomes a state-shaped delta through
util.as_delta(), so mixing the two by accident fails loudly.

The equations of motion follow Newtonian gravitation for two point masses:
  dx_i/dt = v_i
  dv_1/dt = -G m2 (x1 - x2) / r³
  dv_2/dt = +G m1 (x1 - x2) / r³
"""
from __future__ import annotations
import math
from dataclasses import dataclass, fields
from typing import Iterator

import numpy as np

from .util import f64


class _Vector8:
    """Shared behaviour of the fixed-shape 8-scalar value types."""

    __slots__ = ()

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_array(cls, values) -> "_Vector8":
        """Build a value from any 8-element array-like, in field order."""
        arr = f64(values)
        if arr.shape != (8,):
            raise ValueError(f"{cls.__name__} needs 8 components, got shape {arr.shape}")
        return cls(*(float(v) for v in arr))

    def components(self) -> tuple[float, ...]:
        """All 8 components in field order."""
        return tuple(getattr(self, name) for name in self.field_names())

    def items(self) -> Iterator[tuple[str, float]]:
        for name in self.field_names():
            yield name, getattr(self, name)

    def to_array(self) -> np.ndarray:
        """Components as a float64 array of shape (8,)."""
        return f64(self.components())

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return all(math.isfinite(v) for v in self.components())


@dataclass(frozen=True, slots=True)
class SystemState(_Vector8):
    """
    Positions and velocities of two point masses in a plane.

    Attributes:
        x1, y1: Position of body 1.
        vx1, vy1: Velocity of body 1.
        x2, y2: Position of body 2.
        vx2, vy2: Velocity of body 2.

    Note:
        Instances are immutable; integration always produces a new value.
        Finiteness is not enforced here, the driver checks it after each step.
    """
    x1: float
    y1: float
    vx1: float
    vy1: float
    x2: float
    y2: float
    vx2: float
    vy2: float

    @property
    def position1(self) -> np.ndarray:
        return f64((self.x1, self.y1))

    @property
    def velocity1(self) -> np.ndarray:
        return f64((self.vx1, self.vy1))

    @property
    def position2(self) -> np.ndarray:
        return f64((self.x2, self.y2))

    @property
    def velocity2(self) -> np.ndarray:
        return f64((self.vx2, self.vy2))


@dataclass(frozen=True, slots=True)
class DerivativeState(_Vector8):
    """
    Time derivative of a SystemState.

    Velocities occupy the position slots and accelerations occupy the
    velocity slots, so the layout matches SystemState field for field.

    Attributes:
        dx1, dy1: Velocity of body 1 (d/dt of x1, y1).
        dvx1, dvy1: Acceleration of body 1.
        dx2, dy2: Velocity of body 2.
        dvx2, dvy2: Acceleration of body 2.
    """
    dx1: float
    dy1: float
    dvx1: float
    dvy1: float
    dx2: float
    dy2: float
    dvx2: float
    dvy2: float

    @property
    def acceleration1(self) -> np.ndarray:
        return f64((self.dvx1, self.dvy1))

    @property
    def acceleration2(self) -> np.ndarray:
        return f64((self.dvx2, self.dvy2))


@dataclass
class Trajectory:
    """
    A sampled trajectory: one row per completed integration step.

    Attributes:
        times: Elapsed time after each step, shape (N,).
        states: State components in SystemState field order, shape (N, 8).
    """
    times: np.ndarray
    states: np.ndarray

    def __post_init__(self) -> None:
        """Coerce to float64 and check that rows line up."""
        self.times = f64(self.times).reshape(-1)
        self.states = f64(self.states).reshape(-1, 8)
        if len(self.times) != len(self.states):
            raise ValueError(
                f"times and states disagree: {len(self.times)} vs {len(self.states)} rows"
            )

    def __len__(self) -> int:
        return len(self.times)

    def column(self, name: str) -> np.ndarray:
        """One named component ("t" or any SystemState field) over all steps."""
        if name == "t":
            return self.times
        names = SystemState.field_names()
        if name not in names:
            raise KeyError(f"Unknown trajectory column: '{name}'")
        return self.states[:, names.index(name)]

    def state(self, i: int) -> SystemState:
        """The i-th recorded state."""
        return SystemState.from_array(self.states[i])

    @property
    def final_state(self) -> SystemState:
        if len(self) == 0:
            raise IndexError("Trajectory is empty")
        return self.state(-1)
