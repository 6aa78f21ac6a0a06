# examples/mass_ratio_orbit.py
"""
Light secondary (m2/m1 = 0.01) on a near-circular orbit, CGS gravitational
constant, loaded from an inline JSON scenario.
"""
import logging
import math

from twobody_sim import run
from twobody_sim.constants import G_CGS, DEFAULT_MASS_RATIO
from twobody_sim.core import linear_momentum
from twobody_sim.io import scenario_from_json
from twobody_sim.sinks import TextSink

logging.basicConfig(level=logging.INFO)

# Circular speed of the relative orbit at r = 1 cm around a 1 g primary
v_rel = math.sqrt(G_CGS * (1.0 + DEFAULT_MASS_RATIO))
period = 2.0 * math.pi / v_rel

scenario = scenario_from_json({
    "G": G_CGS,
    "mass_ratio": DEFAULT_MASS_RATIO,
    "dt": period / 1000,
    "t_end": period,
    "state": {
        "x1": 0.0, "y1": 0.0, "vx1": 0.0, "vy1": -DEFAULT_MASS_RATIO * v_rel / (1.0 + DEFAULT_MASS_RATIO),
        "x2": 1.0, "y2": 0.0, "vx2": 0.0, "vy2": v_rel / (1.0 + DEFAULT_MASS_RATIO),
    },
})

summary = run(scenario, sinks=[TextSink(include_body2=True)])
print("energy drift:", summary.energy_drift)
print("momentum:", linear_momentum(summary.final_state, scenario.gravity))
