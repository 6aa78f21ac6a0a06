"""
Pytest configuration and shared fixtures.
"""
import math

import pytest

from twobody_sim.config import GravityConfig
from twobody_sim.types import SystemState


@pytest.fixture
def unit_gravity():
    """G = 1 with two unit masses."""
    return GravityConfig(G=1.0, m1=1.0, m2=1.0)


@pytest.fixture
def symmetric_state():
    """Equal-mass bound orbit, mirror-symmetric about the origin (apoapsis, e = 0.5)."""
    return SystemState(x1=-0.5, y1=0.0, vx1=0.0, vy1=-0.5,
                       x2=0.5, y2=0.0, vx2=0.0, vy2=0.5)


@pytest.fixture
def circular_state():
    """Equal unit masses one unit apart on a circular orbit (ω = √2)."""
    v = 0.5 * math.sqrt(2.0)
    return SystemState(x1=-0.5, y1=0.0, vx1=0.0, vy1=-v,
                       x2=0.5, y2=0.0, vx2=0.0, vy2=v)
