"""
Runtime configuration exports.

Provides game-wide constants and per-frame/session state containers.
"""

from catch_game.core.runtime.game_settings import (
    Display,
    Fonts,
    Physics,
    Colors,
    Spawn,
    Score,
    Hud,
    Assets,
)
from catch_game.core.runtime.frame_context import FrameContext
from catch_game.core.runtime.session_stats import SessionStats

__all__ = [
    # Display & Rendering
    'Display',
    'Fonts',
    'Colors',
    'Assets',
    # Gameplay
    'Physics',
    'Spawn',
    'Score',
    'Hud',
    # Per-frame / session
    'FrameContext',
    'SessionStats',
]
