"""
primitives.py
-------------
Plain value types shared by entities: 2D vectors, directional input
flags and the jump phase enumeration.
"""

from dataclasses import dataclass
from enum import IntEnum

import pygame

# Positions, velocities, accelerations, sizes and margins.
Vector2 = pygame.Vector2


@dataclass
class XDirection:
    """Horizontal input direction flags."""
    left: bool = False
    right: bool = False


class JumpPhase(IntEnum):
    """Vertical movement phase of the player."""
    GROUNDED = 0
    RISING = 1
    FALLING = 2
