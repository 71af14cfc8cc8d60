"""
frame_context.py
----------------
Explicit per-frame state handed from the frame driver to scene hooks.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FrameContext:
    """
    Per-frame timing, canvas size and drawing capability.

    Attributes:
        dt: Milliseconds elapsed since the previous frame (>= 0)
        width: Current canvas width in pixels
        height: Current canvas height in pixels
        draw_manager: DrawManager targeting the canvas
    """

    dt: float
    width: int
    height: int
    draw_manager: Any = None
