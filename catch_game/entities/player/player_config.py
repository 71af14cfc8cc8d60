"""
player_config.py
----------------
Handles player configuration loading with default fallbacks.

This ensures the player always spawns even if player.yaml
is missing or incomplete.
"""

from catch_game.core.services.config_manager import load_config

# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    # -----------------------------------------------------------
    # Footprint
    # -----------------------------------------------------------
    "size": [200, 200],              # Sprite width/height (pixels)
    "color": [255, 255, 255],

    # -----------------------------------------------------------
    # Movement (milliseconds based)
    # -----------------------------------------------------------
    "movement": {
        "acceleration_modifier": [1.0, 0.4],      # px/ms²
        "deceleration_modifier": [0.0075, 0.005],  # damping per ms
        "max_speed": [0.75, 2.0],                  # px/ms
    },
}


# ===========================================================
# Load YAML + Apply Fallbacks
# ===========================================================
def load_player_config(filename="player.yaml"):
    """
    Load the player config file and apply fallback defaults for missing fields.

    Returns:
        dict: Complete player configuration dictionary.
    """
    return load_config(filename, DEFAULT_CONFIG)
