# MIT License (see LICENSE)
"""
Renderer adapters for cloth visualization.

The physics engine has no graphics dependency. A windowing front end
subclasses RendererAdapter and draws what render_cloth() hands it: every
particle as a point and every active constraint as a line.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

if TYPE_CHECKING:
    from ..cloth import Cloth


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.render_cloth(cloth)

    which is equivalent to:
        renderer.begin_frame(cloth.ticks)
        for p in cloth.particles:
            renderer.draw_particle(p.position, p.pinned)
        for a, b in cloth.segments():
            renderer.draw_segment(a, b)
        renderer.end_frame()
    """

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """Begin a new frame for the given tick count."""
        ...

    @abstractmethod
    def draw_particle(self, position: np.ndarray, pinned: bool) -> None:
        ...

    @abstractmethod
    def draw_segment(self, a: np.ndarray, b: np.ndarray) -> None:
        """Draw one active constraint between endpoints a and b."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_cloth(self, cloth: "Cloth") -> None:
        """Draw all particles, then all active constraints."""
        self.begin_frame(cloth.ticks)
        for p in cloth.particles:
            self.draw_particle(p.position, p.pinned)
        for a, b in cloth.segments():
            self.draw_segment(a, b)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame tick=12 ===
        P (640.00, 270.00) pinned
        P (640.00, 300.12)
        L (640.00, 270.00) -> (640.00, 300.12)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If False, only the frame header and counts are written.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._particles = 0
        self._segments = 0

    def begin_frame(self, tick: int) -> None:
        self._particles = 0
        self._segments = 0
        self.output.write(f"=== Frame tick={tick} ===\n")

    def draw_particle(self, position: np.ndarray, pinned: bool) -> None:
        self._particles += 1
        if self.verbose:
            suffix = " pinned" if pinned else ""
            self.output.write(f"P ({position[0]:.2f}, {position[1]:.2f}){suffix}\n")

    def draw_segment(self, a: np.ndarray, b: np.ndarray) -> None:
        self._segments += 1
        if self.verbose:
            self.output.write(f"L ({a[0]:.2f}, {a[1]:.2f}) -> ({b[0]:.2f}, {b[1]:.2f})\n")

    def end_frame(self) -> None:
        self.output.write(f"{self._particles} particles, {self._segments} links\n\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarking without drawing overhead."""

    def begin_frame(self, tick: int) -> None:
        pass

    def draw_particle(self, position: np.ndarray, pinned: bool) -> None:
        pass

    def draw_segment(self, a: np.ndarray, b: np.ndarray) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames for later playback or plotting.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            cloth.step()
            renderer.render_cloth(cloth)

        for frame in renderer.frames:
            print(frame["tick"], len(frame["segments"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current_frame = {
            "tick": tick,
            "particles": [],
            "segments": [],
        }

    def draw_particle(self, position: np.ndarray, pinned: bool) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "position": [float(position[0]), float(position[1])],
            "pinned": bool(pinned),
        })

    def draw_segment(self, a: np.ndarray, b: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["segments"].append(
            ([float(a[0]), float(a[1])], [float(b[0]), float(b[1])])
        )

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
