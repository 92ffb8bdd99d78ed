# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class a windowing front end implements.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for benchmarking.
    - BufferedRenderer: Records frames for playback or export.

The physics engine has no rendering dependency; these adapters are optional.

Typical usage:
    from verlet_cloth.renderer import DebugRenderer

    DebugRenderer().render_cloth(cloth)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
