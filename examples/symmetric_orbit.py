# examples/symmetric_orbit.py
"""
Equal-mass bound orbit in natural units, printed line by line and saved
as symmetric_orbit.npz.
"""
import logging

from twobody_sim import GravityConfig, Scenario, SystemState, run
from twobody_sim.sinks import DatasetSink, TextSink

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(levelname)-7s  %(message)s")

state = SystemState(
    x1=-0.5, y1=0.0, vx1=0.0, vy1=-0.5,
    x2=0.5, y2=0.0, vx2=0.0, vy2=0.5,
)
scenario = Scenario(
    initial=state,
    dt=0.01,
    t_end=20.0,
    gravity=GravityConfig(G=1.0, m1=1.0, m2=1.0),
)

summary = run(scenario, sinks=[TextSink(include_body2=True), DatasetSink("symmetric_orbit.npz")])
print("steps:", summary.steps, "t:", summary.time)
print("final:", summary.final_state)
