"""
text.py
-------
Text styling primitives shared by the HUD and title drawables.
"""

from dataclasses import dataclass
from typing import Optional

from catch_game.core.runtime.game_settings import Fonts


@dataclass(frozen=True)
class ColorComponents:
    """RGBA color with 0-255 channels."""
    red: int
    green: int
    blue: int
    alpha: int = 255

    def as_tuple(self):
        return (self.red, self.green, self.blue, self.alpha)


def fill(draw_manager, color: ColorComponents):
    """Set the draw manager's fill color from color components."""
    return draw_manager.fill(color.as_tuple())


@dataclass(frozen=True)
class FontMetadata:
    """Weight, pixel size and family of a font."""
    weight: str
    size: int
    family: str

    @property
    def is_bold(self) -> bool:
        return self.weight == "bold" or (self.weight.isdigit() and int(self.weight) >= 600)

    @classmethod
    def auto(cls, weight: Optional[str] = None, size: Optional[int] = None,
             family: Optional[str] = None) -> "FontMetadata":
        """Build font metadata, filling unspecified fields from Fonts defaults."""
        return cls(
            weight=weight or Fonts.WEIGHT,
            size=size or Fonts.SIZE,
            family=family or Fonts.FAMILY,
        )

    def __str__(self) -> str:
        return f"{self.weight} {self.size}px {self.family}"


@dataclass
class TextComponent:
    """A string with the font and fill color it is drawn with."""
    text: str = ""
    font: Optional[FontMetadata] = None
    fill_color: Optional[ColorComponents] = None

    def has_text(self) -> bool:
        return len(self.text) > 0
