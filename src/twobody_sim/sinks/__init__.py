# MIT License (see LICENSE)
"""
Trajectory sinks consumed by the driver.

This subpackage provides:
    - TrajectorySink: Abstract base class defining the sink interface.
    - TextSink: Fixed-point text lines, one per step.
    - BufferedSink: Keeps the trajectory in memory.
    - DatasetSink: Writes named arrays to a .npz file at the end of a run.
    - NullSink: No-op sink for benchmarking.

Typical usage:
    from twobody_sim.sinks import TextSink, DatasetSink

    run(scenario, sinks=[TextSink(), DatasetSink("orbit.npz")])
"""
from .adapter import (
    TrajectorySink,
    TextSink,
    NullSink,
    BufferedSink,
    DatasetSink,
)

__all__ = [
    "TrajectorySink",
    "TextSink",
    "NullSink",
    "BufferedSink",
    "DatasetSink",
]
