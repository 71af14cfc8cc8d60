"""
hud_text.py
-----------
Label/value text pair pinned to a canvas edge (e.g. "Score 42").

Text widths are measured through the draw manager when the value changes
and cached, so right alignment can offset the label by the value's width.
"""

from enum import Enum

from catch_game.entities.primitives import Vector2
from catch_game.graphics.draw_manager import TextAlign
from catch_game.graphics.drawable import Drawable
from catch_game.ui.text import TextComponent, fill


class HudAlignment(Enum):
    """Canvas edge the HUD text is anchored to."""
    LEFT = "left"
    RIGHT = "right"


class HudTextComponent(TextComponent):
    """Text component that remembers its last measured width."""

    def __init__(self, text="", font=None, fill_color=None):
        super().__init__(text=text, font=font, fill_color=fill_color)
        self.last_calculated_width = 0.0

    def calc_width(self, draw_manager):
        if self.has_text():
            self.last_calculated_width = draw_manager.text_width(self.text, self.font)


class HudText(Drawable):
    """
    Label followed by a value, drawn on one line.

    Attributes:
        position: Anchor point; x is the left or right canvas edge
        margin: Horizontal and vertical distance from the anchor
        alignment: HudAlignment.LEFT or HudAlignment.RIGHT
    """

    def __init__(self, label, label_font, label_fill_color, x=0, y=0,
                 h_margin=0, v_margin=0, alignment=HudAlignment.LEFT,
                 value_font=None, value_fill_color=None):
        self.position = Vector2(x, y)
        self.margin = Vector2(h_margin, v_margin)
        self.alignment = alignment
        self.label = HudTextComponent(label, label_font, label_fill_color)
        self.value = HudTextComponent(
            "",
            value_font or label_font,
            value_fill_color or label_fill_color,
        )
        self._label_measured = False

    def set_value_text(self, text: str, draw_manager):
        """Replace the value string and re-measure it when it changed."""
        if not self._label_measured:
            self.label.calc_width(draw_manager)
            self._label_measured = True
        if text == self.value.text:
            return
        self.value.text = text
        self.value.calc_width(draw_manager)

    def draw(self, draw_manager):
        label_pos = Vector2(self.position.x, self.position.y + self.label.font.size + self.margin.y)
        value_pos = Vector2(self.position.x, self.position.y + self.value.font.size + self.margin.y)

        if self.alignment == HudAlignment.LEFT:
            draw_manager.text_align(TextAlign.LEFT)
            label_pos.x += self.margin.x
            value_pos.x += self.margin.x + self.label.last_calculated_width
        else:
            draw_manager.text_align(TextAlign.RIGHT)
            label_pos.x -= self.margin.x + self.value.last_calculated_width
            value_pos.x -= self.margin.x

        draw_manager.no_stroke()
        for component, pos in ((self.label, label_pos), (self.value, value_pos)):
            if not component.has_text():
                continue
            draw_manager.text_size(component.font.size)
            draw_manager.text_style(bold=component.font.is_bold, family=component.font.family)
            if component.fill_color:
                fill(draw_manager, component.fill_color)
            draw_manager.text(component.text, pos.x, pos.y)
