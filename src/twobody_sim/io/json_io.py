# MIT License (see LICENSE)
"""
JSON serialization and deserialization for two-body scenarios.

JSON Schema Overview:
---------------------
{
  "G": float,                      # Default: 1.0
  "m1": float, "m2": float,        # Default: 1.0 each
  "mass_ratio": float,             # Alternative to m1/m2: m1 = 1, m2 = ratio
  "min_separation": float,         # Default: 0.0
  "dt": float,                     # Required, > 0
  "t_end": float,                  # Required, >= 0
  "state": {                       # Required, all 8 keys
    "x1": float, "y1": float, "vx1": float, "vy1": float,
    "x2": float, "y2": float, "vx2": float, "vy2": float
  }
}
"""
from __future__ import annotations
import json
from typing import Any

from ..config import GravityConfig, Scenario
from ..constants import G_NATURAL, DEFAULT_MIN_SEPARATION
from ..types import SystemState


def load_scenario_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scenario file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_scenario(path: str) -> Scenario:
    """
    Load and validate a Scenario from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If required fields are missing or invalid.
        InvalidStepSizeError: If dt is not positive.
    """
    return scenario_from_json(load_scenario_raw(path))


def gravity_from_json(d: dict[str, Any]) -> GravityConfig:
    """
    Parse the physical parameters of a scenario.

    Either explicit masses ("m1", "m2") or a "mass_ratio" may be given, not both.
    """
    G = float(d.get("G", G_NATURAL))
    min_sep = float(d.get("min_separation", DEFAULT_MIN_SEPARATION))
    if "mass_ratio" in d:
        if "m1" in d or "m2" in d:
            raise ValueError("Specify either 'mass_ratio' or explicit 'm1'/'m2', not both")
        return GravityConfig.from_mass_ratio(G=G, ratio=float(d["mass_ratio"]), min_separation=min_sep)
    return GravityConfig(
        G=G,
        m1=float(d.get("m1", 1.0)),
        m2=float(d.get("m2", 1.0)),
        min_separation=min_sep,
    )


def state_from_json(d: dict[str, Any]) -> SystemState:
    """Parse an 8-component state; every component is required."""
    names = SystemState.field_names()
    missing = [name for name in names if name not in d]
    if missing:
        raise ValueError(f"State definition missing required fields: {', '.join(missing)}")
    return SystemState(*(float(d[name]) for name in names))


def scenario_from_json(d: dict[str, Any]) -> Scenario:
    """Construct a Scenario from a parsed JSON dictionary."""
    for key in ("dt", "t_end", "state"):
        if key not in d:
            raise ValueError(f"Scenario definition missing required '{key}' field.")
    return Scenario(
        initial=state_from_json(d["state"]),
        dt=float(d["dt"]),
        t_end=float(d["t_end"]),
        gravity=gravity_from_json(d),
    )


def state_to_json(state: SystemState) -> dict[str, float]:
    return dict(state.items())


def scenario_to_json(scenario: Scenario) -> dict[str, Any]:
    """
    Serialize a Scenario to a dictionary (round-trip compatible).

    Masses are always written explicitly; min_separation only if non-default.
    """
    g = scenario.gravity
    result = {
        "G": g.G,
        "m1": g.m1,
        "m2": g.m2,
        "dt": scenario.dt,
        "t_end": scenario.t_end,
        "state": state_to_json(scenario.initial),
    }
    if g.min_separation != DEFAULT_MIN_SEPARATION:
        result["min_separation"] = g.min_separation
    return result


def save_scenario(scenario: Scenario, path: str, indent: int = 2) -> None:
    """Save a Scenario to a JSON file on disk."""
    data = scenario_to_json(scenario)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
