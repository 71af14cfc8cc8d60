"""
draw_manager.py
---------------
Immediate-mode rendering capability used by scenes and drawables.

Responsibilities:
- Hold fill/stroke/text state between draw calls
- Draw ellipses and text onto the target surface
- Measure text width for layout
- Load and cache images
"""

import pygame

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.game_settings import Fonts


class TextAlign:
    """Horizontal text anchor."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class DrawManager:
    """Draws shapes and text onto a pygame surface with p5-like state."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, surface=None):
        """
        Args:
            surface: Target surface (can be set later via set_target)
        """
        self.surface = surface
        self.images = {}
        self._fonts = {}

        self.fill_color = (255, 255, 255, 255)
        self.stroke_enabled = True
        self.align = TextAlign.LEFT
        self.font_size = Fonts.SIZE
        self.font_bold = False
        self.font_family = Fonts.FAMILY

        DebugLogger.init_entry("DrawManager")

    def set_target(self, surface):
        """Retarget drawing, e.g. after the window was resized."""
        self.surface = surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    # ===========================================================
    # Canvas
    # ===========================================================

    def clear(self, color=(0, 0, 0, 0)):
        self.surface.fill(color)

    def background(self, source):
        """Fill the canvas with a color or stretch an image over it."""
        if isinstance(source, pygame.Surface):
            if source.get_size() != self.surface.get_size():
                source = pygame.transform.smoothscale(source, self.surface.get_size())
            self.surface.blit(source, (0, 0))
        else:
            self.surface.fill(source)

    # ===========================================================
    # Style State
    # ===========================================================

    def fill(self, color):
        """Set fill color from an (r, g, b) or (r, g, b, a) tuple."""
        color = tuple(color)
        self.fill_color = color if len(color) == 4 else color + (255,)

    def no_stroke(self):
        self.stroke_enabled = False

    def text_align(self, align: str):
        self.align = align

    def text_size(self, size: int):
        self.font_size = int(size)

    def text_style(self, bold: bool = False, family: str = None):
        self.font_bold = bold
        if family:
            self.font_family = family

    # ===========================================================
    # Shapes
    # ===========================================================

    def ellipse(self, x, y, width, height):
        """Draw a filled ellipse centered on (x, y)."""
        rect = pygame.Rect(0, 0, int(width), int(height))
        rect.center = (int(x), int(y))
        if self.fill_color[3] >= 255:
            pygame.draw.ellipse(self.surface, self.fill_color, rect)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.ellipse(overlay, self.fill_color, overlay.get_rect())
        self.surface.blit(overlay, rect.topleft)

    # ===========================================================
    # Text
    # ===========================================================

    def get_font(self, size: int, bold: bool = False, family: str = None) -> pygame.font.Font:
        """Return a cached pygame font for the given properties."""
        family = family or self.font_family
        key = (family, int(size), bool(bold))
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(family, int(size), bold=bold)
            DebugLogger.trace(f"Cached font {key}", category="drawing")
        return self._fonts[key]

    def text(self, string: str, x, y):
        """
        Draw text with its baseline at y, anchored horizontally by text_align.
        """
        font = self.get_font(self.font_size, self.font_bold)
        rendered = font.render(string, True, self.fill_color[:3])
        if self.fill_color[3] < 255:
            rendered.set_alpha(self.fill_color[3])

        top = int(y) - font.get_ascent()
        if self.align == TextAlign.RIGHT:
            left = int(x) - rendered.get_width()
        elif self.align == TextAlign.CENTER:
            left = int(x) - rendered.get_width() // 2
        else:
            left = int(x)
        self.surface.blit(rendered, (left, top))

    def text_width(self, string: str, font) -> float:
        """Measure the pixel width of a string rendered in FontMetadata font."""
        return self.get_font(font.size, font.is_bold, font.family).size(string)[0]

    # ===========================================================
    # Images
    # ===========================================================

    def load_image(self, key, path):
        """
        Load and cache an image.

        Returns:
            pygame.Surface | None: Loaded image, None if it could not be read
        """
        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing image at {path}: {e}")
            img = None

        self.images[key] = img
        return img

    def get_image(self, key):
        img = self.images.get(key)
        if img is None:
            DebugLogger.warn(f"No cached image for key '{key}'", category="drawing")
        return img
