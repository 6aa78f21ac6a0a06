# MIT License (see LICENSE)
"""
Physical constants and default parameters for two-body runs.

Two unit systems are in use:
- Natural units (G = 1), convenient for test scenarios and examples.
- CGS units, where G = 6.67e-8 cm³·g⁻¹·s⁻².
"""
from __future__ import annotations

# Newtonian gravitational constant in CGS units (cm³ g⁻¹ s⁻²).
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G_CGS: float = 6.67e-8

# Gravitational constant in natural units.
G_NATURAL: float = 1.0

# Secondary-to-primary mass ratio m2/m1 used by the mass-ratio form of
# GravityConfig when no explicit ratio is given.
DEFAULT_MASS_RATIO: float = 0.01

# Separations at or below this value are treated as coincident bodies.
# Zero means only an exact (or underflowing) r³ is singular.
DEFAULT_MIN_SEPARATION: float = 0.0
