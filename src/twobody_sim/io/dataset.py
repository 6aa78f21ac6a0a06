# MIT License (see LICENSE)
"""
Columnar trajectory datasets.

A dataset is a set of equally long named float64 arrays ("t", "x1", "y1",
"x2", "y2", ...) stored with numpy's .npz container, one array per tracked
scalar and one entry per completed integration step.
"""
from __future__ import annotations
from pathlib import Path

import numpy as np

from ..types import SystemState, Trajectory

POSITION_COLUMNS: tuple[str, ...] = ("x1", "y1", "x2", "y2")
VELOCITY_COLUMNS: tuple[str, ...] = ("vx1", "vy1", "vx2", "vy2")


def trajectory_columns(traj: Trajectory, include_velocities: bool = False) -> dict[str, np.ndarray]:
    """
    Split a trajectory into named columns.

    Args:
        traj: Recorded trajectory.
        include_velocities: Also emit vx1, vy1, vx2, vy2.

    Returns:
        Dict with "t" followed by the position (and optionally velocity) columns.
    """
    names = POSITION_COLUMNS + (VELOCITY_COLUMNS if include_velocities else ())
    columns = {"t": traj.times}
    for name in names:
        columns[name] = traj.column(name)
    return columns


def save_dataset(path: str | Path, columns: dict[str, np.ndarray]) -> None:
    """
    Write named arrays to a compressed .npz file.

    Raises:
        ValueError: If the columns have different lengths.
    """
    lengths = {name: len(arr) for name, arr in columns.items()}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"Dataset columns must have equal length, got {lengths}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        np.savez_compressed(f, **{name: np.asarray(arr, dtype=np.float64) for name, arr in columns.items()})


def load_dataset(path: str | Path) -> dict[str, np.ndarray]:
    """Load every named array of a .npz dataset into memory."""
    with np.load(path) as data:
        return {name: data[name] for name in data.files}


def dataset_to_trajectory(columns: dict[str, np.ndarray]) -> Trajectory:
    """
    Rebuild a Trajectory from a dataset that includes velocity columns.

    Raises:
        KeyError: If any state component is missing from the dataset.
    """
    missing = [name for name in ("t",) + SystemState.field_names() if name not in columns]
    if missing:
        raise KeyError(f"Dataset lacks columns needed for a full state: {missing}")
    states = np.column_stack([columns[name] for name in SystemState.field_names()])
    return Trajectory(times=columns["t"], states=states)
