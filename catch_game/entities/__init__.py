"""
Entity module exports.

Provides the base entity, its footprint and the shared value types.
"""

from catch_game.entities.primitives import Vector2, XDirection, JumpPhase
from catch_game.entities.sprite import Sprite
from catch_game.entities.entity_state import LifecycleState
from catch_game.entities.base_entity import BaseEntity

__all__ = [
    'Vector2',
    'XDirection',
    'JumpPhase',
    'Sprite',
    'LifecycleState',
    'BaseEntity',
]
