"""
menu_scene.py
-------------
Main menu - title and prompt, RETURN starts the game.
"""

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.game_settings import Colors
from catch_game.core.services.input_manager import KeyCode
from catch_game.scenes.base_scene import (
    BaseScene,
    FrameHandler,
    KeyPressedHandler,
    SetupHandler,
)
from catch_game.ui.text import ColorComponents, FontMetadata
from catch_game.ui.title import TextLine, Title


class MenuScene(BaseScene, SetupHandler, FrameHandler, KeyPressedHandler):
    """Title screen shown at startup."""

    TITLE = "Catch Game"
    PROMPT = "Press RETURN to start"

    def __init__(self, sketch):
        super().__init__(sketch)
        self.title = None

    def setup(self, frame):
        white = ColorComponents(*Colors.WHITE)
        self.title = Title([
            TextLine(self.TITLE, FontMetadata.auto(weight="bold", size=64), white, y_end_padding=8),
            TextLine(self.PROMPT, FontMetadata.auto(size=32), white),
        ])

    def draw(self, frame):
        draw_manager = frame.draw_manager
        draw_manager.background(Colors.BLACK)
        self.title.draw(draw_manager)

    def key_pressed(self, event):
        if event.code != KeyCode.RETURN:
            return
        result = self.sketch.advance_scene()
        if not result:
            DebugLogger.fail(f"Cannot start game: {result.error}", category="scene")
