"""
player_core.py
--------------
Defines the Player entity controlled by keyboard input.

Responsibilities
----------------
- Hold movement tuning (acceleration/deceleration modifiers, max speed).
- Hold input state (horizontal direction flags, jump flag).
- Track the internal jump phase flags.
- Delegate per-frame physics to player_movement.
"""

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.entities.base_entity import BaseEntity
from catch_game.entities.player import player_movement
from catch_game.entities.primitives import JumpPhase, Vector2, XDirection
from catch_game.entities.sprite import Sprite


class Player(BaseEntity):
    """
    Player entity with asymmetric acceleration/deceleration and jumping.

    All tuning vectors start at zero; a scene configures them after
    construction (see ``apply_config``).
    """

    def __init__(self, x: float = 0, y: float = 0, sprite: Sprite = None):
        super().__init__(x, y, sprite=sprite, velocity=(0, 0))

        self.acceleration = Vector2(0, 0)
        self.acceleration_modifier = Vector2(0, 0)
        self.deceleration_modifier = Vector2(0, 0)
        self.max_speed = Vector2(0, 0)

        # Input state
        self.input_direction = XDirection()
        self.is_jumping = False

        # Jump phase flags, never both True
        self._is_rising = False
        self._is_falling = False

    # ===========================================================
    # Configuration
    # ===========================================================

    def apply_config(self, cfg: dict):
        """Apply a player config dict (see player_config.DEFAULT_CONFIG)."""
        movement = cfg["movement"]
        self.sprite.size = cfg["size"]
        self.color = tuple(cfg.get("color", self.color))
        self.acceleration_modifier = Vector2(movement["acceleration_modifier"])
        self.deceleration_modifier = Vector2(movement["deceleration_modifier"])
        self.max_speed = Vector2(movement["max_speed"])

        DebugLogger.init_sub(
            f"Player configured: size={tuple(self.sprite.size)}, "
            f"max_speed={tuple(self.max_speed)}"
        )

    # ===========================================================
    # Jump Phase
    # ===========================================================

    @property
    def jump_phase(self) -> JumpPhase:
        if self._is_rising:
            return JumpPhase.RISING
        if self._is_falling:
            return JumpPhase.FALLING
        return JumpPhase.GROUNDED

    @jump_phase.setter
    def jump_phase(self, phase: JumpPhase):
        self._is_rising = phase == JumpPhase.RISING
        self._is_falling = phase == JumpPhase.FALLING

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset_position(self, canvas_height: float):
        """Place the player at the bottom-left resting position."""
        center = self.sprite.center_point
        self.pos.update(center.x, canvas_height - center.y)

    def update(self, frame):
        """Update trajectory then position. Call once per frame before draw()."""
        player_movement.update_trajectory(self, frame.dt, frame.height)
        player_movement.update_position(self, frame.dt, frame.width, frame.height)
