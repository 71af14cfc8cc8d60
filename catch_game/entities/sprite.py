"""
sprite.py
---------
Visual footprint of an entity: its size and the derived center point.
"""

from catch_game.entities.primitives import Vector2


class Sprite:
    """
    Size of an entity's image and the offset of its center point.

    The center point is always half of the size. Both are recomputed together
    in the size setter, and both getters hand out copies so that in-place
    changes to a returned vector can never desynchronise them.
    """

    __slots__ = ('_size', '_center_point')

    def __init__(self, width: float = 0, height: float = 0):
        self._size = Vector2(0, 0)
        self._center_point = Vector2(0, 0)
        self.size = (width, height)

    @property
    def size(self) -> Vector2:
        return Vector2(self._size)

    @size.setter
    def size(self, new_size):
        size = Vector2(new_size)
        self._size, self._center_point = size, size / 2

    @property
    def center_point(self) -> Vector2:
        return Vector2(self._center_point)

    @property
    def width(self) -> float:
        return self._size.x

    @property
    def height(self) -> float:
        return self._size.y

    def __repr__(self) -> str:
        return f"<Sprite size=({self._size.x:.1f}, {self._size.y:.1f})>"
