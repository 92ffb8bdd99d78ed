# MIT License (see LICENSE)
"""
Per-phase timing for the simulation step.

Cloth.step() times its phases ("integrate" and "relax") when a Profiler is
attached, which shows how the solver pass count trades CPU time against
stiffness.

Example:
    profiler = Profiler()
    cloth = Cloth.from_config(ClothConfig(), profiler=profiler)
    for _ in range(100):
        cloth.step()
    print(profiler.stats.summary()["relax"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples in seconds, keyed by phase name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def last(self, name: str) -> float:
        """Most recent sample for a phase, in seconds."""
        return self.samples[name][-1]

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary per phase.

        Returns:
            Dict mapping phase name to {'n', 'mean_ms', 'max_ms', 'total_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Context-manager based phase timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        """Drop all recorded samples."""
        self.stats = ProfileStats()
