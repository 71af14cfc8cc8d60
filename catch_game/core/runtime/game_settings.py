"""
game_settings.py
----------------
Centralized constants for all game systems.

Time values are in milliseconds, distances in pixels.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Catch Game"
    MIN_WIDTH: int = 320
    MIN_HEIGHT: int = 240


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    """Defaults used when a font property is left unspecified."""
    FAMILY: str = "sans-serif"
    SIZE: int = 16
    WEIGHT: str = "normal"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing limits."""
    MAX_FRAME_TIME_MS: float = 100.0


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Shared RGB(A) tuples."""
    BLACK = (0, 0, 0)
    WHITE = (255, 255, 255)
    PLAYER = (255, 255, 255)
    COLLECTIBLE = (200, 200, 200)
    GAME_BACKGROUND = (24, 28, 48)


# ===========================================================
# Gameplay
# ===========================================================

class Spawn:
    """Collectible spawn cadence."""
    INTERVAL_MS: float = 600.0


class Score:
    """Score limits."""
    CEILING: int = 999999


# ===========================================================
# HUD
# ===========================================================

class Hud:
    """Score display layout."""
    LABEL: str = "Score "
    FONT_SIZE: int = 24
    MARGIN_X: int = 8
    MARGIN_Y: int = 8


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset locations relative to the working directory."""
    GAME_BACKGROUND: str = "images/bg.png"
