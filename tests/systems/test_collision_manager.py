"""
test_collision_manager.py
-------------------------
Tests for player/collectible AABB collision and the detect pass.
"""

import pytest

from catch_game.entities.base_entity import BaseEntity
from catch_game.entities.items.collectible import Collectible
from catch_game.entities.sprite import Sprite
from catch_game.systems.collision_manager import CollisionManager, check_collision


def box(x, y, w, h):
    return BaseEntity(x, y, sprite=Sprite(w, h))


# ===========================================================
# check_collision
# ===========================================================

class TestCheckCollision:

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ((0, 0, 10, 10), (5, 5, 10, 10), True),
            ((0, 0, 10, 10), (10, 0, 10, 10), True),      # touching edges
            ((0, 0, 10, 10), (10.5, 0, 10, 10), False),
            ((0, 0, 10, 10), (0, 30, 10, 10), False),     # x overlaps, y does not
            ((0, 0, 10, 10), (30, 0, 10, 10), False),     # y overlaps, x does not
            ((100, 500, 200, 200), (100, 350, 100, 100), True),
        ]
    )
    def test_overlap(self, a, b, expected):
        assert check_collision(box(*a), box(*b)) is expected

    @pytest.mark.parametrize(
        "a, b",
        [
            ((0, 0, 10, 10), (9, 9, 4, 4)),
            ((0, 0, 10, 10), (40, 0, 10, 10)),
            ((50, 50, 100, 20), (120, 55, 40, 40)),
        ]
    )
    def test_symmetric(self, a, b):
        assert check_collision(box(*a), box(*b)) == check_collision(box(*b), box(*a))

    def test_contained_box_collides(self):
        assert check_collision(box(0, 0, 100, 100), box(0, 0, 2, 2))


# ===========================================================
# CollisionManager
# ===========================================================

class TestCollisionManager:

    def test_detect_marks_only_overlapping(self, player):
        hit = Collectible(x=player.pos.x, y=player.pos.y - 120, sprite=Sprite(100, 100))
        miss = Collectible(x=player.pos.x, y=-50, sprite=Sprite(100, 100))

        collected = CollisionManager(player).detect([hit, miss])

        assert collected == [hit]
        assert not hit.is_alive
        assert miss.is_alive

    def test_detect_skips_dead_entities(self, player):
        item = Collectible(x=player.pos.x, y=player.pos.y, sprite=Sprite(100, 100))
        item.mark_dead()

        assert CollisionManager(player).detect([item]) == []

    def test_detect_does_not_mutate_collection(self, player):
        items = [Collectible(x=player.pos.x, y=player.pos.y, sprite=Sprite(10, 10))]
        CollisionManager(player).detect(items)
        assert len(items) == 1
