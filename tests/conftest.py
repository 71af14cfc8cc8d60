"""
conftest.py
-----------
Shared pytest configuration and fixtures for Catch Game tests.

Contains:
- Headless SDL setup so pygame works without a display
- Common fixtures used across multiple test modules
- Shared test helpers (frame builder, deterministic RNG)
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Headless pygame before anything imports it
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Project root on the path so tests run without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from catch_game.core.debug.debug_logger import LoggerConfig  # noqa: E402
from catch_game.core.runtime.frame_context import FrameContext  # noqa: E402
from catch_game.entities.player.player_config import DEFAULT_CONFIG  # noqa: E402
from catch_game.entities.player.player_core import Player  # noqa: E402
from catch_game.systems.spawn_manager import DEFAULT_COLLECTIBLE_CONFIG  # noqa: E402

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(autouse=True, scope="session")
def quiet_logger():
    """Silence console logging for the whole run."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Test Utilities
# ===========================================================

class FixedRandom:
    """random.Random stand-in returning a constant."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value


def make_frame(dt=16.0, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, draw_manager=None):
    """Build a FrameContext with test defaults."""
    return FrameContext(dt=dt, width=width, height=height, draw_manager=draw_manager)


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager: 10px per character, 800x600 canvas."""
    draw_manager = MagicMock()
    draw_manager.width = CANVAS_WIDTH
    draw_manager.height = CANVAS_HEIGHT
    draw_manager.text_width.side_effect = lambda text, font: 10.0 * len(text)
    draw_manager.load_image.return_value = None
    return draw_manager


@pytest.fixture
def player_config():
    return {
        "size": list(DEFAULT_CONFIG["size"]),
        "color": list(DEFAULT_CONFIG["color"]),
        "movement": dict(DEFAULT_CONFIG["movement"]),
    }


@pytest.fixture
def collectible_config():
    return dict(DEFAULT_COLLECTIBLE_CONFIG)


@pytest.fixture
def player(player_config):
    """Player with default tuning resting on the bottom edge."""
    p = Player()
    p.apply_config(player_config)
    p.reset_position(CANVAS_HEIGHT)
    return p


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
