"""
title.py
--------
Multi-line title block centered on the canvas.
"""

from dataclasses import dataclass

from catch_game.graphics.draw_manager import TextAlign
from catch_game.graphics.drawable import Drawable
from catch_game.ui.text import ColorComponents, FontMetadata, fill


@dataclass
class TextLine:
    """One line of a title with the padding below it."""
    text: str
    font: FontMetadata
    fill_color: ColorComponents
    y_end_padding: float = 0


class Title(Drawable):
    """Vertically stacked lines, horizontally centered on the canvas."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])

    def draw(self, draw_manager):
        if not self.lines:
            return

        center_x = draw_manager.width / 2
        center_y = draw_manager.height / 2
        offset = -self.lines[0].font.size / 2

        draw_manager.text_align(TextAlign.CENTER)
        for line in self.lines:
            draw_manager.text_size(line.font.size)
            draw_manager.text_style(bold=line.font.is_bold, family=line.font.family)
            fill(draw_manager, line.fill_color)
            draw_manager.text(line.text, center_x, center_y + offset)
            offset += line.font.size + line.y_end_padding
