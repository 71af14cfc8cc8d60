"""
drawable.py
-----------
Interface for anything that issues draw calls once per frame.
"""

from abc import ABC, abstractmethod


class Drawable(ABC):
    """Object with a per-frame draw pass."""

    @abstractmethod
    def draw(self, draw_manager):
        """
        Issue this object's draw calls.

        Args:
            draw_manager: DrawManager for the current frame
        """
