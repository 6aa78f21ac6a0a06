# MIT License (see LICENSE)
"""
State algebra and small numeric helpers.

The RK4 stepper blends states and derivatives with two explicit operations
instead of operator overloading:
    scale(v, k)   ->  k·v, component-wise over all 8 scalars
    add(a, b)     ->  a + b, component-wise, operands of the same type

A DerivativeState is turned into a state-shaped delta with as_delta(), so the
"rate of change used as an increment" step stays visible at every call site.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, TypeVar

import numpy as np

if TYPE_CHECKING:
    from .types import SystemState, DerivativeState

V = TypeVar("V", "SystemState", "DerivativeState")


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def scale(v: V, k: float) -> V:
    """
    Multiply every component of a state or derivative by the scalar k.

    Returns a new value of the same type; the input is left untouched.
    """
    return type(v)(*(c * k for c in v.components()))


def add(a: V, b: V) -> V:
    """
    Component-wise sum of two values of the same type.

    Raises:
        TypeError: If a and b are not the same type. Adding a derivative to a
            state requires an explicit as_delta() conversion first.
    """
    if type(a) is not type(b):
        raise TypeError(
            f"Cannot add {type(a).__name__} and {type(b).__name__}; "
            "convert derivatives with as_delta() first"
        )
    return type(a)(*(x + y for x, y in zip(a.components(), b.components())))


def as_delta(d: "DerivativeState") -> "SystemState":
    """
    Reinterpret a (time-scaled) derivative as a state-shaped increment.

    Velocity slots map onto position slots and acceleration slots onto
    velocity slots. Once multiplied by a time increment the result can be
    added to a SystemState.
    """
    from .types import DerivativeState, SystemState

    if not isinstance(d, DerivativeState):
        raise TypeError(f"as_delta expects a DerivativeState, got {type(d).__name__}")
    return SystemState(*d.components())
