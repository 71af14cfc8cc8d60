"""
test_hud_text.py
----------------
Tests for HUD label/value layout and width caching.
"""

from unittest.mock import call

import pytest

from catch_game.graphics.draw_manager import TextAlign
from catch_game.ui.hud_text import HudAlignment, HudText
from catch_game.ui.text import ColorComponents, FontMetadata


WHITE = ColorComponents(255, 255, 255)


def make_hud(alignment, x=0):
    return HudText(
        label="Score ",
        label_font=FontMetadata.auto(size=24),
        label_fill_color=WHITE,
        x=x,
        h_margin=8,
        v_margin=8,
        alignment=alignment,
    )


def test_right_alignment(mock_draw_manager):
    hud = make_hud(HudAlignment.RIGHT, x=800)
    hud.set_value_text("42", mock_draw_manager)
    hud.draw(mock_draw_manager)

    mock_draw_manager.text_align.assert_called_once_with(TextAlign.RIGHT)
    mock_draw_manager.text.assert_has_calls([
        call("Score ", 772, 32),
        call("42", 792, 32),
    ])


def test_left_alignment(mock_draw_manager):
    hud = make_hud(HudAlignment.LEFT)
    hud.set_value_text("42", mock_draw_manager)
    hud.draw(mock_draw_manager)

    mock_draw_manager.text.assert_has_calls([
        call("Score ", 8, 32),
        call("42", 68, 32),
    ])


def test_width_measured_only_on_change(mock_draw_manager):
    hud = make_hud(HudAlignment.RIGHT)
    hud.set_value_text("1", mock_draw_manager)
    hud.set_value_text("1", mock_draw_manager)
    hud.set_value_text("12", mock_draw_manager)

    measured = [c.args[0] for c in mock_draw_manager.text_width.call_args_list]
    assert measured == ["Score ", "1", "12"]
    assert hud.value.last_calculated_width == pytest.approx(20)


def test_empty_value_not_drawn(mock_draw_manager):
    hud = make_hud(HudAlignment.LEFT)
    hud.draw(mock_draw_manager)
    assert mock_draw_manager.text.call_count == 1


def test_value_inherits_label_style():
    hud = make_hud(HudAlignment.LEFT)
    assert hud.value.font == hud.label.font
    assert hud.value.fill_color == WHITE
