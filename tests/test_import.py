"""
Smoke test: the public API is importable from the package root.
"""


def test_public_api():
    import twobody_sim

    for name in twobody_sim.__all__:
        assert hasattr(twobody_sim, name), name
    assert twobody_sim.__version__


def test_subpackages():
    from twobody_sim.core import derivative, rk4_step
    from twobody_sim.io import load_scenario, load_dataset
    from twobody_sim.sinks import TextSink, DatasetSink

    assert callable(derivative) and callable(rk4_step)
    assert callable(load_scenario) and callable(load_dataset)
    assert TextSink and DatasetSink
