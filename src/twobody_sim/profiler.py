# MIT License (see LICENSE)
"""
Lightweight timing of driver phases.

The driver times the "step" and "sinks" sections of every iteration when a
Profiler is passed to run(); the benchmark script reads the summary.

Example:
    profiler = Profiler()
    run(scenario, sinks=[NullSink()], profiler=profiler)
    print(profiler.stats.summary()["step"]["mean_us"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def total(self, name: str) -> float:
        """Accumulated seconds spent in a section (0 if never entered)."""
        return sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'total_s': accumulated time in seconds
            - 'mean_us': average time in microseconds
            - 'max_us': maximum time in microseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "total_s": sum(times),
                "mean_us": 1e6 * (sum(times) / n),
                "max_us": 1e6 * max(times),
            }
        return out


class Profiler:
    """Context-manager based section timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        self.stats = ProfileStats()
