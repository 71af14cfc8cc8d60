"""
display_manager.py
------------------
Window management for a resizable canvas.

Responsibilities:
- Window creation
- Tracking the current canvas size
- Recreating the canvas on resize notifications
"""

import pygame

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.game_settings import Display


class DisplayManager:
    """Owns the pygame window; the window surface is the canvas."""

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT):
        """
        Args:
            width: Initial window width
            height: Initial window height
        """
        DebugLogger.init_entry("DisplayManager")
        self.window = None
        self._create_window(width, height)
        DebugLogger.init_sub(f"Display Mode: Windowed ({self.width}x{self.height})", level=1)

    def _create_window(self, width, height):
        width = max(int(width), Display.MIN_WIDTH)
        height = max(int(height), Display.MIN_HEIGHT)
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    # ===========================================================
    # Canvas
    # ===========================================================

    @property
    def width(self) -> int:
        return self.window.get_width()

    @property
    def height(self) -> int:
        return self.window.get_height()

    def get_canvas(self) -> pygame.Surface:
        return self.window

    def resize(self, width, height):
        """Handle a window resize notification."""
        self._create_window(width, height)
        DebugLogger.state(f"Window resized to {self.width}x{self.height}", category="display")

    def render(self):
        pygame.display.flip()
