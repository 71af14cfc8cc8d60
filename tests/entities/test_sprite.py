"""
test_sprite.py
--------------
Tests for Sprite size / center point consistency.
"""

import pytest

from catch_game.entities.sprite import Sprite


def test_default_sprite_is_empty():
    sprite = Sprite()
    assert tuple(sprite.size) == (0, 0)
    assert tuple(sprite.center_point) == (0, 0)


@pytest.mark.parametrize("size", [(200, 200), (100, 40), (3, 7), (0, 10)])
def test_center_point_is_half_size(size):
    sprite = Sprite(*size)
    assert sprite.center_point.x == size[0] / 2
    assert sprite.center_point.y == size[1] / 2


def test_resize_updates_center_point():
    sprite = Sprite(100, 100)
    sprite.size = (60, 20)
    assert tuple(sprite.size) == (60, 20)
    assert tuple(sprite.center_point) == (30, 10)
    assert sprite.width == 60
    assert sprite.height == 20


def test_returned_vectors_are_copies():
    sprite = Sprite(100, 80)

    size = sprite.size
    size.x = 999
    center = sprite.center_point
    center.y = -1

    assert tuple(sprite.size) == (100, 80)
    assert tuple(sprite.center_point) == (50, 40)


def test_sprite_has_no_dict():
    with pytest.raises(AttributeError):
        Sprite().scale = 2
