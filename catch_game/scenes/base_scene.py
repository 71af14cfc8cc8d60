"""
base_scene.py
-------------
Base class and hook interfaces for all scenes.

A scene is a self-contained stage of the game. Each lifecycle hook is a
separate interface; a scene inherits only the interfaces it implements and
the Sketch dispatches to a hook only when the scene declares it.

Hooks:
- PreloadHandler.preload(frame): load external assets, called once at startup
- SetupHandler.setup(frame): build initial state, called once after preload
- FrameHandler.draw(frame): update and draw, called every frame while active
- KeyPressedHandler.key_pressed(event): key-down while active
- KeyReleasedHandler.key_released(event): key-up while active
"""

from abc import ABC, abstractmethod

from catch_game.scenes.scene_state import SceneState


# ===========================================================
# Hook Interfaces
# ===========================================================

class PreloadHandler(ABC):
    @abstractmethod
    def preload(self, frame):
        """Load external files before setup."""


class SetupHandler(ABC):
    @abstractmethod
    def setup(self, frame):
        """Build initial scene state from the starting canvas."""


class FrameHandler(ABC):
    @abstractmethod
    def draw(self, frame):
        """Run one frame of logic and issue its draw calls."""


class KeyPressedHandler(ABC):
    @abstractmethod
    def key_pressed(self, event):
        """Handle a key-down KeyEvent."""


class KeyReleasedHandler(ABC):
    @abstractmethod
    def key_released(self, event):
        """Handle a key-up KeyEvent."""


HOOK_INTERFACES = {
    "preload": PreloadHandler,
    "setup": SetupHandler,
    "draw": FrameHandler,
    "key_pressed": KeyPressedHandler,
    "key_released": KeyReleasedHandler,
}


# ===========================================================
# Base Scene
# ===========================================================

class BaseScene:
    """
    Base class for all scenes.

    Attributes:
        sketch: Parent Sketch owning the scene
        state: Current lifecycle state
    """

    def __init__(self, sketch):
        """
        Args:
            sketch: Parent Sketch (used for scene transitions)
        """
        self.sketch = sketch
        self.state = SceneState.INACTIVE

    @property
    def name(self) -> str:
        return type(self).__name__

    def implements(self, hook: str) -> bool:
        """Check whether this scene declares the named hook interface."""
        interface = HOOK_INTERFACES.get(hook)
        return interface is not None and isinstance(self, interface)

    @property
    def hooks(self) -> tuple:
        return tuple(hook for hook in HOOK_INTERFACES if self.implements(hook))

    def __repr__(self) -> str:
        return f"<{self.name} state={self.state.value} hooks={list(self.hooks)}>"
