"""
collectible.py
--------------
Item that falls from the top of the canvas and can be caught by the player.
"""

from catch_game.core.runtime.game_settings import Colors
from catch_game.entities.base_entity import BaseEntity


class Collectible(BaseEntity):
    """
    Collectible item with straight downward motion.

    Only the vertical axis is integrated and the position is never clamped;
    the owning collection removes the item once it is caught or has left
    the canvas.
    """

    def __init__(self, x: float = 0, y: float = 0, dy: float = 0, sprite=None,
                 color=Colors.COLLECTIBLE):
        super().__init__(x, y, sprite=sprite, velocity=(0, dy), color=color)

    def update(self, frame):
        self.integrate_position(frame.dt, axes="y")
