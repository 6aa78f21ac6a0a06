"""
Microbenchmark: time per RK4 step, with and without sinks.
Run:
  python benchmarks/bench_steps.py
"""
import io
import time

from twobody_sim import GravityConfig, Scenario, SystemState, run
from twobody_sim.profiler import Profiler
from twobody_sim.sinks import BufferedSink, NullSink, TextSink


def bench(sinks, steps: int = 20000):
    prof = Profiler()
    state = SystemState(-0.5, 0.0, 0.0, -0.5, 0.5, 0.0, 0.0, 0.5)
    scenario = Scenario(initial=state, dt=0.001, t_end=steps * 0.001,
                        gravity=GravityConfig(G=1.0, m1=1.0, m2=1.0))

    t0 = time.perf_counter()
    summary = run(scenario, sinks=sinks, profiler=prof)
    t1 = time.perf_counter()
    return (t1 - t0) / summary.steps, prof.stats.summary()


if __name__ == "__main__":
    cases = {
        "null": lambda: [NullSink()],
        "buffered": lambda: [BufferedSink()],
        "text": lambda: [TextSink(output=io.StringIO(), include_body2=True)],
    }
    for name, make_sinks in cases.items():
        per_step, summary = bench(make_sinks())
        print(f"{name:9s} step={1e6*per_step:8.2f} us  steps/s={1/per_step:10.1f}")
        for k in ["step", "sinks"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
