# MIT License (see LICENSE)
"""
Output sinks for integrated trajectories.

The driver forwards every produced (t, state) pair to zero or more sinks.
The numerical core has no I/O dependency; these adapters are optional and
can be combined freely in one run.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..types import SystemState, Trajectory
from ..io.dataset import save_dataset, trajectory_columns

if TYPE_CHECKING:
    from ..config import Scenario


class TrajectorySink(ABC):
    """
    Abstract base class for trajectory consumers.

    Usage:
        sink = MySink()
        sink.begin(scenario)
        for t, state in integrate(...):
            sink.record(t, state)
        sink.end()

    The driver's run() performs exactly this sequence.
    """

    def begin(self, scenario: "Scenario | None") -> None:
        """
        Called once before the first step.

        Args:
            scenario: The run being started (None for ad-hoc integration).
        """

    @abstractmethod
    def record(self, t: float, state: SystemState) -> None:
        """
        Consume one integrated state.

        Args:
            t: Elapsed simulation time after the step.
            state: State produced by the step.
        """
        ...

    def end(self) -> None:
        """Called once after the last step of a successful run."""


class TextSink(TrajectorySink):
    """
    Line-oriented text sink: one fixed-point line per step.

    Example output (include_body2=False):
        +0.01000000 -0.49997500 -0.00499992
        +0.02000000 -0.49990001 -0.00999933
    """

    def __init__(self, output: TextIO | None = None, include_body2: bool = False, digits: int = 8):
        """
        Initialize the text sink.

        Args:
            output: Output stream (defaults to sys.stdout).
            include_body2: If True, append x2 and y2 to each line.
            digits: Decimal digits per value.
        """
        self.output = output or sys.stdout
        self.include_body2 = include_body2
        self.digits = digits

    def format_line(self, t: float, state: SystemState) -> str:
        values = [t, state.x1, state.y1]
        if self.include_body2:
            values += [state.x2, state.y2]
        return " ".join(f"{v:+0.{self.digits}f}" for v in values)

    def record(self, t: float, state: SystemState) -> None:
        self.output.write(self.format_line(t, state) + "\n")

    def end(self) -> None:
        self.output.flush()


class NullSink(TrajectorySink):
    """
    No-op sink.

    Useful for benchmarking the integrator without output overhead.
    """

    def record(self, t: float, state: SystemState) -> None:
        pass


class BufferedSink(TrajectorySink):
    """
    Sink that keeps every recorded state in memory.

    Example:
        sink = BufferedSink()
        run(scenario, sinks=[sink])
        traj = sink.trajectory()
        print(traj.column("x1").max())
    """

    def __init__(self):
        self._times: list[float] = []
        self._rows: list[tuple[float, ...]] = []

    def begin(self, scenario: "Scenario | None") -> None:
        self.clear()

    def record(self, t: float, state: SystemState) -> None:
        self._times.append(t)
        self._rows.append(state.components())

    def trajectory(self) -> Trajectory:
        """Snapshot of everything recorded so far."""
        return Trajectory(
            times=np.array(self._times, dtype=np.float64),
            states=np.array(self._rows, dtype=np.float64).reshape(-1, 8),
        )

    def clear(self) -> None:
        """Drop all recorded states."""
        self._times.clear()
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._times)


class DatasetSink(BufferedSink):
    """
    Persists the trajectory as named arrays in a compressed .npz file.

    Arrays "t", "x1", "y1", "x2", "y2" (plus "vx1", "vy1", "vx2", "vy2" when
    include_velocities is set), each with one entry per completed step.
    The file is written once, when the run ends.
    """

    def __init__(self, path: str | Path, include_velocities: bool = False):
        super().__init__()
        self.path = Path(path)
        self.include_velocities = include_velocities

    def end(self) -> None:
        columns = trajectory_columns(self.trajectory(), self.include_velocities)
        save_dataset(self.path, columns)
