"""
scene_state.py
--------------
Defines the lifecycle states a scene can be in.
"""

from enum import Enum


class SceneState(Enum):
    """Lifecycle states for scene management."""
    INACTIVE = "inactive"   # Registered, not yet prepared
    LOADING = "loading"     # Preload/setup in progress
    READY = "ready"         # Prepared, waiting to be activated
    ACTIVE = "active"       # Receiving frame and key dispatch
