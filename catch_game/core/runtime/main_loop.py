"""
main_loop.py
------------
Frame driver feeding the Sketch.

Responsibilities:
- Initialize pygame and core systems
- Prepare all scenes once (preload, setup)
- Measure frame time and build a FrameContext per frame
- Route quit, keyboard and resize events
"""

import pygame

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.frame_context import FrameContext
from catch_game.core.runtime.game_settings import Display, Physics
from catch_game.core.runtime.sketch import Sketch
from catch_game.core.services.display_manager import DisplayManager
from catch_game.core.services.input_manager import InputManager
from catch_game.graphics.draw_manager import DrawManager
from catch_game.scenes.game_scene import GameScene
from catch_game.scenes.menu_scene import MenuScene


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Uses variable timestep: each frame's dt is the measured frame time in
    milliseconds, clamped to Physics.MAX_FRAME_TIME_MS.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, scene_classes=(MenuScene, GameScene)):
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_core_systems()
        self.sketch = Sketch(scene_classes)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

    def _init_core_systems(self):
        self.display = DisplayManager(Display.WIDTH, Display.HEIGHT)
        self.input_manager = InputManager()
        self.draw_manager = DrawManager(self.display.get_canvas())

    def _frame(self, dt: float) -> FrameContext:
        return FrameContext(
            dt=dt,
            width=self.display.width,
            height=self.display.height,
            draw_manager=self.draw_manager,
        )

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Prepare scenes, then run frames until quit."""
        startup = self._frame(0.0)
        self.sketch.preload(startup)
        self.sketch.setup(startup)

        DebugLogger.section("Game Loop")
        self.clock.tick(Display.FPS)

        while self.running:
            dt = min(float(self.clock.tick(Display.FPS)), Physics.MAX_FRAME_TIME_MS)

            self._handle_events()
            if not self.running:
                break

            self.sketch.draw(self._frame(dt))
            self.display.render()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.VIDEORESIZE:
                self.display.resize(event.w, event.h)
                self.draw_manager.set_target(self.display.get_canvas())
                self.sketch.window_resized(self.display.width, self.display.height)
                continue

            key_event = self.input_manager.translate(event)
            if key_event is None:
                continue
            if event.type == pygame.KEYDOWN:
                self.sketch.key_pressed(key_event)
            else:
                self.sketch.key_released(key_event)
