# MIT License (see LICENSE)
"""
Fixed-horizon driver loop.

The driver owns everything around the numerical core:
    1. Startup validation (dt, horizon, finite initial state), once per run.
    2. Repeated rk4_step calls, accumulating elapsed time by dt until the
       horizon is reached.
    3. Non-finite detection after every step.
    4. Fan-out of each (t, state) pair to the configured sinks.

Structure:
    - integrate() yields (t, state) pairs lazily.
    - run() drives integrate() for a Scenario and feeds sinks.
    - simulate() is a convenience wrapper returning the in-memory Trajectory.
"""
from __future__ import annotations
import logging
import math
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import GravityConfig, Scenario, validate_run_parameters
from .core.gravity import separation
from .core.integrators import rk4_step
from .core.invariants import total_energy, relative_drift
from .errors import NonFiniteStateError, TwoBodyError
from .profiler import Profiler
from .sinks import BufferedSink, TrajectorySink
from .types import SystemState, Trajectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """
    Outcome of a completed run.

    Attributes:
        steps: Number of completed steps.
        time: Elapsed simulation time after the last step.
        final_state: State after the last step (the initial state if no step ran).
        energy_drift: Relative change in total energy between start and end.
    """
    steps: int
    time: float
    final_state: SystemState
    energy_drift: float


def integrate(
    initial: SystemState,
    dt: float,
    t_end: float,
    config: GravityConfig,
) -> Iterator[tuple[float, SystemState]]:
    """
    Integrate from t = 0 until the elapsed time reaches t_end.

    Elapsed time is accumulated by adding dt after each step, and each
    produced state is yielded together with that elapsed time.

    Args:
        initial: State at t = 0.
        dt: Fixed time step.
        t_end: Time horizon.
        config: Physical parameters.

    Raises:
        InvalidStepSizeError: If dt is not finite and positive (on call).
        ValueError: If t_end is invalid (on call).
        NonFiniteStateError: If the initial state (on call) or any produced
            state (during iteration) has NaN/inf components.
        SingularSeparationError: Propagated from the derivative evaluator.
    """
    validate_run_parameters(initial, dt, t_end)
    return _steps(initial, dt, t_end, config)


def _steps(
    state: SystemState,
    dt: float,
    t_end: float,
    config: GravityConfig,
) -> Iterator[tuple[float, SystemState]]:
    t = 0.0
    n = 0
    while t < t_end:
        state = rk4_step(state, dt, config)
        t += dt
        n += 1
        if not state.is_finite():
            raise NonFiniteStateError(n, t, state)
        yield t, state


def run(
    scenario: Scenario,
    sinks: Iterable[TrajectorySink] = (),
    profiler: Profiler | None = None,
) -> RunSummary:
    """
    Run a scenario to its horizon, forwarding every step to the sinks.

    Sinks receive begin() before the first step and end() only after a
    successful run; a failing run leaves them un-ended (a DatasetSink then
    writes nothing).

    Args:
        scenario: Initial conditions, dt, horizon and physical parameters.
        sinks: Output consumers.
        profiler: Optional Profiler; times the "step" and "sinks" sections.

    Returns:
        Summary of the completed run.

    Raises:
        TwoBodyError: Any integrator failure, logged and re-raised.
    """
    sinks = list(sinks)
    config = scenario.gravity
    logger.info(
        "Starting run: dt=%g t_end=%g G=%g m1=%g m2=%g (%d nominal steps)",
        scenario.dt, scenario.t_end, config.G, config.m1, config.m2, scenario.n_steps,
    )
    e0 = _energy(scenario.initial, config)

    for sink in sinks:
        sink.begin(scenario)

    section = profiler.section if profiler is not None else _untimed
    t, state, steps = 0.0, scenario.initial, 0
    stepper = integrate(scenario.initial, scenario.dt, scenario.t_end, config)
    try:
        while True:
            with section("step"):
                item = next(stepper, None)
            if item is None:
                break
            t, state = item
            steps += 1
            with section("sinks"):
                for sink in sinks:
                    sink.record(t, state)
    except TwoBodyError as e:
        logger.error("Run aborted after %d steps (t=%.8g): %s", steps, t, e)
        raise

    for sink in sinks:
        sink.end()

    drift = relative_drift(e0, _energy(state, config))
    logger.info("Run finished: %d steps, t=%.8g, relative energy drift %.3e", steps, t, drift)
    return RunSummary(steps=steps, time=t, final_state=state, energy_drift=drift)


def simulate(
    initial: SystemState,
    dt: float,
    t_end: float,
    config: GravityConfig | None = None,
) -> Trajectory:
    """
    Integrate and return the whole trajectory in memory.

    Example:
        traj = simulate(state, dt=0.01, t_end=20.0)
        traj.column("x1")
    """
    scenario = Scenario(initial=initial, dt=dt, t_end=t_end, gravity=config or GravityConfig())
    buffer = BufferedSink()
    run(scenario, sinks=[buffer])
    return buffer.trajectory()


def _energy(state: SystemState, config: GravityConfig) -> float:
    """Total energy, NaN for coincident bodies."""
    return total_energy(state, config) if separation(state) > 0.0 else math.nan


def _untimed(name: str) -> nullcontext:
    return nullcontext()
