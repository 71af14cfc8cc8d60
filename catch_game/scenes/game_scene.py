"""
game_scene.py
-------------
Main gameplay scene: player movement, falling collectibles and scoring.

Frame order
-----------
1. Update the player, then every live collectible
2. Detect player/collectible collisions, score and mark them
3. Compact the collectible list (collected and off-screen)
4. Run the spawn timer (a new collectible appears at its spawn position)
5. Refresh the HUD value
6. Clear, paint the background and draw HUD, player and collectibles
"""

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.game_settings import Assets, Colors, Hud
from catch_game.core.runtime.session_stats import SessionStats
from catch_game.core.services.input_manager import KeyCode
from catch_game.entities.player.player_config import load_player_config
from catch_game.entities.player.player_core import Player
from catch_game.scenes.base_scene import (
    BaseScene,
    FrameHandler,
    KeyPressedHandler,
    KeyReleasedHandler,
    PreloadHandler,
    SetupHandler,
)
from catch_game.systems.collision_manager import CollisionManager
from catch_game.systems.spawn_manager import SpawnManager
from catch_game.ui.hud_text import HudAlignment, HudText
from catch_game.ui.text import ColorComponents, FontMetadata


class GameScene(BaseScene, PreloadHandler, SetupHandler, FrameHandler,
                KeyPressedHandler, KeyReleasedHandler):
    """Catch falling collectibles with the player to raise the score."""

    BACKGROUND_KEY = "game_background"

    def __init__(self, sketch, player_config=None, spawn_manager=None):
        """
        Args:
            sketch: Parent Sketch
            player_config: Player config dict (loaded from player.yaml if None)
            spawn_manager: SpawnManager to use (created in setup if None)
        """
        super().__init__(sketch)
        self._player_config = player_config
        self._spawn_manager = spawn_manager
        self.background_image = None

        self.player = None
        self.spawner = None
        self.collisions = None
        self.stats = SessionStats()
        self.hud_text = None

    # ===========================================================
    # Lifecycle Hooks
    # ===========================================================

    def preload(self, frame):
        if frame.draw_manager is not None:
            self.background_image = frame.draw_manager.load_image(self.BACKGROUND_KEY, Assets.GAME_BACKGROUND)

    def setup(self, frame):
        self.hud_text = HudText(
            label=Hud.LABEL,
            label_font=FontMetadata.auto(size=Hud.FONT_SIZE),
            label_fill_color=ColorComponents(*Colors.WHITE),
            value_font=FontMetadata.auto(weight="bold", size=Hud.FONT_SIZE),
            h_margin=Hud.MARGIN_X,
            v_margin=Hud.MARGIN_Y,
            alignment=HudAlignment.RIGHT,
        )

        self.player = Player()
        self.player.apply_config(self._player_config or load_player_config())
        self.player.reset_position(frame.height)

        self.spawner = self._spawn_manager or SpawnManager()
        self.spawner.reset()
        self.collisions = CollisionManager(self.player)
        self.stats.reset()

        DebugLogger.init_sub(f"{self.name} ready ({frame.width}x{frame.height})")

    # ===========================================================
    # Frame
    # ===========================================================

    def draw(self, frame):
        self.update(frame)
        self.render(frame.draw_manager)

    def update(self, frame):
        """Advance gameplay by one frame without issuing draw calls."""
        self.player.update(frame)
        self.spawner.update(frame)

        for _ in self.collisions.detect(self.spawner.entities):
            self.stats.add_score(1)
            self.stats.add_item()

        self.spawner.cleanup(frame.height)
        self.spawner.update_timer(frame)

        self.hud_text.position.x = frame.width
        if frame.draw_manager is not None:
            self.hud_text.set_value_text(str(self.score), frame.draw_manager)

    def render(self, draw_manager):
        draw_manager.clear()
        background = self.background_image if self.background_image is not None else Colors.GAME_BACKGROUND
        draw_manager.background(background)
        self.hud_text.draw(draw_manager)
        self.player.draw(draw_manager)
        self.spawner.draw(draw_manager)

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def collectibles(self) -> list:
        return self.spawner.entities

    # ===========================================================
    # Input
    # ===========================================================

    def key_pressed(self, event):
        self._set_input(event, True)

    def key_released(self, event):
        self._set_input(event, False)

    def _set_input(self, event, pressed: bool):
        if event.key == " " or event.code == KeyCode.SPACE:
            self.player.is_jumping = pressed
        elif event.code == KeyCode.LEFT_ARROW:
            self.player.input_direction.left = pressed
        elif event.code == KeyCode.RIGHT_ARROW:
            self.player.input_direction.right = pressed
