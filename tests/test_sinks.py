import io

import numpy as np
import pytest

from twobody_sim.config import Scenario
from twobody_sim.driver import run
from twobody_sim.io.dataset import load_dataset, dataset_to_trajectory
from twobody_sim.sinks import BufferedSink, DatasetSink, NullSink, TextSink
from twobody_sim.types import SystemState


def test_text_sink_fixed_point_format(symmetric_state):
    out = io.StringIO()
    sink = TextSink(output=out)
    sink.record(0.01, symmetric_state)
    assert out.getvalue() == "+0.01000000 -0.50000000 +0.00000000\n"


def test_text_sink_with_body2(symmetric_state):
    out = io.StringIO()
    TextSink(output=out, include_body2=True).record(1.5, symmetric_state)
    assert out.getvalue().split() == ["+1.50000000", "-0.50000000", "+0.00000000",
                                      "+0.50000000", "+0.00000000"]


def test_text_sink_one_line_per_step(symmetric_state):
    out = io.StringIO()
    scenario = Scenario(initial=symmetric_state, dt=0.25, t_end=1.0)
    run(scenario, sinks=[TextSink(output=out), NullSink()])
    lines = out.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[-1].startswith("+1.00000000 ")


def test_buffered_sink_restarts_on_begin(symmetric_state):
    sink = BufferedSink()
    scenario = Scenario(initial=symmetric_state, dt=0.25, t_end=1.0)
    run(scenario, sinks=[sink])
    run(scenario, sinks=[sink])
    traj = sink.trajectory()
    assert len(traj) == 4
    assert traj.states.shape == (4, 8)
    with pytest.raises(KeyError):
        traj.column("z1")


def test_dataset_sink_writes_named_columns(symmetric_state, tmp_path):
    path = tmp_path / "out" / "orbit.npz"
    scenario = Scenario(initial=symmetric_state, dt=0.25, t_end=1.0)
    buffer = BufferedSink()
    run(scenario, sinks=[DatasetSink(path), buffer])

    data = load_dataset(path)
    assert set(data) == {"t", "x1", "y1", "x2", "y2"}
    for arr in data.values():
        assert arr.shape == (4,)
    np.testing.assert_array_equal(data["x1"], buffer.trajectory().column("x1"))


def test_dataset_with_velocities_rebuilds_trajectory(symmetric_state, tmp_path):
    path = tmp_path / "orbit.npz"
    scenario = Scenario(initial=symmetric_state, dt=0.25, t_end=1.0)
    buffer = BufferedSink()
    run(scenario, sinks=[DatasetSink(path, include_velocities=True), buffer])

    traj = dataset_to_trajectory(load_dataset(path))
    np.testing.assert_array_equal(traj.states, buffer.trajectory().states)
    assert traj.final_state == buffer.trajectory().final_state


def test_position_only_dataset_cannot_rebuild_states(symmetric_state, tmp_path):
    path = tmp_path / "orbit.npz"
    run(Scenario(initial=symmetric_state, dt=0.25, t_end=0.5), sinks=[DatasetSink(path)])
    with pytest.raises(KeyError):
        dataset_to_trajectory(load_dataset(path))


def test_empty_trajectory_has_no_final_state():
    traj = BufferedSink().trajectory()
    assert len(traj) == 0
    with pytest.raises(IndexError):
        traj.final_state
