"""
entity_state.py
---------------
Defines runtime state enumerations for all entity types.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks whether an entity still belongs to its collection.
    DEAD entities are compacted out after the frame's collision pass.
    """
    ALIVE = 0
    DEAD = 1
