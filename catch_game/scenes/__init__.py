"""
Scene module exports.

Provides the base scene class, lifecycle states and hook interfaces.
"""

from catch_game.scenes.scene_state import SceneState
from catch_game.scenes.base_scene import (
    BaseScene,
    PreloadHandler,
    SetupHandler,
    FrameHandler,
    KeyPressedHandler,
    KeyReleasedHandler,
)

__all__ = [
    # Core
    'BaseScene',
    'SceneState',
    # Hooks
    'PreloadHandler',
    'SetupHandler',
    'FrameHandler',
    'KeyPressedHandler',
    'KeyReleasedHandler',
]
