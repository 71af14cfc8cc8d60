"""
sketch.py
---------
Scene orchestrator receiving the frame driver's callbacks.

Responsibilities:
- Own the ordered scene list and the active scene index
- Prepare every scene once at startup (preload, then setup)
- Dispatch frame and key events to the active scene's declared hooks
- Move forward through scenes via activate_scene/advance_scene
"""

from dataclasses import dataclass
from typing import Optional

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.scenes.scene_state import SceneState


class SceneIndexError(IndexError):
    """Raised for an activation index outside the registered scenes."""

    def __init__(self, index: int, count: int):
        super().__init__(f"Scene index out of range: {index} (registered scenes: {count})")
        self.index = index
        self.count = count


@dataclass(frozen=True)
class SceneActivation:
    """
    Outcome of a scene activation. Truthy on success.

    Attributes:
        index: Requested scene index
        error: SceneIndexError on failure, None on success
    """
    index: int
    error: Optional[SceneIndexError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


class Sketch:
    """
    Holds the game's scenes and routes frame driver callbacks to them.

    Only one scene is active at a time. Activation is forward-only through
    advance_scene(); activate_scene() can target any valid index.
    """

    def __init__(self, scene_classes=()):
        """
        Instantiate each scene class with this sketch and activate the first.

        Args:
            scene_classes: Ordered scene classes, each constructed as cls(sketch)
        """
        DebugLogger.init_entry("Sketch")

        self.scenes = [scene_class(self) for scene_class in scene_classes]
        self.active_index = None
        self.active_scene = None

        DebugLogger.init_sub(f"Registered scenes: {[s.name for s in self.scenes]}")

        result = self.activate_scene(0)
        if not result:
            DebugLogger.fail(str(result.error), category="scene")

    # ===========================================================
    # Scene Control
    # ===========================================================

    def activate_scene(self, index: int) -> SceneActivation:
        """
        Make the scene at index the active scene.

        Never raises; an out-of-range index leaves the current scene active
        and is reported through the returned SceneActivation.
        """
        if not self.scenes or index < 0 or index >= len(self.scenes):
            return SceneActivation(index, SceneIndexError(index, len(self.scenes)))

        if self.active_scene is not None:
            self.active_scene.state = SceneState.READY

        self.active_index = index
        self.active_scene = self.scenes[index]
        self.active_scene.state = SceneState.ACTIVE

        DebugLogger.section(f"Active Scene: {self.active_scene.name}")
        return SceneActivation(index)

    def advance_scene(self) -> SceneActivation:
        """Activate the scene after the current one."""
        current = self.active_index if self.active_index is not None else -1
        return self.activate_scene(current + 1)

    # ===========================================================
    # Startup Hooks (all scenes)
    # ===========================================================

    def preload(self, frame):
        """Call preload on every scene that declares it, in order."""
        for scene in self.scenes:
            if scene.implements("preload"):
                scene.state = SceneState.LOADING
                DebugLogger.state(f"Preloading {scene.name}", category="scene")
                scene.preload(frame)

    def setup(self, frame):
        """Call setup on every scene that declares it, in order."""
        for scene in self.scenes:
            if scene.implements("setup"):
                scene.state = SceneState.LOADING
                DebugLogger.state(f"Setting up {scene.name}", category="scene")
                scene.setup(frame)
            scene.state = SceneState.ACTIVE if scene is self.active_scene else SceneState.READY

    # ===========================================================
    # Frame & Input Dispatch (active scene)
    # ===========================================================

    def draw(self, frame):
        if self._active_implements("draw"):
            self.active_scene.draw(frame)

    def key_pressed(self, event):
        if self._active_implements("key_pressed"):
            self.active_scene.key_pressed(event)

    def key_released(self, event):
        if self._active_implements("key_released"):
            self.active_scene.key_released(event)

    def window_resized(self, width: int, height: int):
        """Canvas size changes are picked up through the next FrameContext."""
        DebugLogger.state(f"Canvas resized to {width}x{height}", category="display")

    def _active_implements(self, hook: str) -> bool:
        return self.active_scene is not None and self.active_scene.implements(hook)
