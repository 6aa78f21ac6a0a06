# MIT License (see LICENSE)
"""
Input/Output utilities for two-body runs.

This subpackage provides:
    - JSON scenarios: Load and save initial conditions and run parameters.
    - Datasets: Save and load trajectories as named .npz arrays.

Typical usage:
    from twobody_sim.io import load_scenario, load_dataset

    scenario = load_scenario("orbit.json")
    columns = load_dataset("orbit.npz")
"""
from .json_io import (
    load_scenario,
    load_scenario_raw,
    save_scenario,
    scenario_from_json,
    scenario_to_json,
    gravity_from_json,
    state_from_json,
    state_to_json,
)
from .dataset import (
    save_dataset,
    load_dataset,
    trajectory_columns,
    dataset_to_trajectory,
)

__all__ = [
    # Scenarios
    "load_scenario",
    "load_scenario_raw",
    "save_scenario",
    "scenario_from_json",
    "scenario_to_json",
    "gravity_from_json",
    "state_from_json",
    "state_to_json",
    # Datasets
    "save_dataset",
    "load_dataset",
    "trajectory_columns",
    "dataset_to_trajectory",
]
