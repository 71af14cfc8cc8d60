"""
base_entity.py
--------------
Foundational class for all active in-game entities (Player, Collectible).

Coordinate System
-----------------
All entities use center-based coordinates:
- self.pos represents the entity's visual and physical center
- the sprite's center point is the half-extent used for bounds
- Movement, clamping and collisions are relative to center

Kinematics
----------
An entity is moving when it carries a velocity. Static entities keep
``velocity`` as None and are skipped by position integration.
"""

from typing import Optional

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.entities.entity_logic import calc_axis_position, bounds_overlap
from catch_game.entities.entity_state import LifecycleState
from catch_game.entities.primitives import Vector2
from catch_game.entities.sprite import Sprite
from catch_game.graphics.drawable import Drawable


class BaseEntity(Drawable):
    """
    Base class for all game entities.

    Subclassed by Player and Collectible.
    """

    __slots__ = ('pos', 'sprite', 'velocity', 'death_state', 'color')

    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        sprite: Optional[Sprite] = None,
        velocity=None,
        color=(255, 255, 255),
    ):
        """
        Initialize entity with position and footprint.

        Args:
            x: Center X position
            y: Center Y position
            sprite: Footprint of the entity (empty sprite if omitted)
            velocity: (dx, dy) in pixels per millisecond, None for static entities
            color: Fill color used by draw()
        """
        self.pos = Vector2(x, y)
        self.sprite = sprite if sprite is not None else Sprite()
        self.velocity = Vector2(velocity) if velocity is not None else None
        self.death_state = LifecycleState.ALIVE
        self.color = color

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def is_moving(self) -> bool:
        return self.velocity is not None

    @property
    def is_alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, frame):
        """
        Per-frame update. Override in subclasses.

        Args:
            frame: FrameContext of the current frame
        """

    def integrate_position(self, dt: float, axes: str = "xy"):
        """Advance position by velocity along the given axes."""
        if not self.is_moving:
            return
        if "x" in axes:
            self.pos.x = calc_axis_position(self.pos.x, self.velocity.x, dt)
        if "y" in axes:
            self.pos.y = calc_axis_position(self.pos.y, self.velocity.y, dt)

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def mark_dead(self):
        """Flag entity for removal by its owning collection."""
        if self.death_state == LifecycleState.DEAD:
            return
        self.death_state = LifecycleState.DEAD
        DebugLogger.trace(f"[{type(self).__name__}] -> DEAD", category="entity_cleanup")

    # ===================================================================
    # Rendering
    # ===================================================================

    def draw(self, draw_manager):
        """Draw the entity as an ellipse filling its sprite footprint."""
        size = self.sprite.size
        draw_manager.no_stroke()
        draw_manager.fill(self.color)
        draw_manager.ellipse(self.pos.x, self.pos.y, size.x, size.y)

    # ===================================================================
    # Collision & Bounds
    # ===================================================================

    def collides(self, other: "BaseEntity") -> bool:
        """Axis-aligned overlap of both footprints (touching counts)."""
        a = self.sprite.center_point
        b = other.sprite.center_point
        return (
            bounds_overlap(self.pos.x, a.x, other.pos.x, b.x) and
            bounds_overlap(self.pos.y, a.y, other.pos.y, b.y)
        )

    def is_below(self, height: float) -> bool:
        """Check if the footprint's top edge has passed the given line."""
        return self.pos.y - self.sprite.center_point.y > height

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"state={self.death_state.name}>"
        )
