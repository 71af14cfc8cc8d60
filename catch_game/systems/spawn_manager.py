"""
spawn_manager.py
----------------
Owns the active collectibles of a game session and the timer that spawns them.

Responsibilities
----------------
- Count down the spawn timer with elapsed frame time.
- Spawn one collectible per interval at a random horizontal position.
- Run per-frame update and draw passes over the active collectibles.
- Compact dead and off-screen collectibles after the frame's passes.
"""

import random

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.game_settings import Spawn
from catch_game.core.services.config_manager import load_config
from catch_game.entities.items.collectible import Collectible
from catch_game.entities.sprite import Sprite


DEFAULT_COLLECTIBLE_CONFIG = {
    "size": [100, 100],
    "fall_speed": 0.2,      # px/ms
    "color": [200, 200, 200],
}


def load_collectible_config(filename="collectible.yaml"):
    return load_config(filename, DEFAULT_COLLECTIBLE_CONFIG)


class SpawnManager:
    """
    Time-based collectible spawner and collection owner.

    The timer starts at zero so the first update spawns immediately.
    """

    def __init__(self, interval: float = Spawn.INTERVAL_MS, collectible_config=None, rng=None):
        """
        Args:
            interval: Milliseconds between spawns
            collectible_config: Dict like DEFAULT_COLLECTIBLE_CONFIG (loaded if None)
            rng: random.Random-like source with random(); module RNG if None
        """
        self.interval = interval
        self.config = collectible_config if collectible_config is not None else load_collectible_config()
        self.rng = rng if rng is not None else random.Random()
        self.spawn_timer = 0.0
        self.entities = []
        self._stats = {"spawned": 0, "removed_offscreen": 0}

        DebugLogger.init_entry("SpawnManager")
        DebugLogger.init_sub(f"Interval: {self.interval:.0f}ms", level=1)

    # ===========================================================
    # Spawn Timer
    # ===========================================================

    def update_timer(self, frame):
        """
        Spawn when the countdown is exhausted, otherwise count down.

        Returns:
            Collectible | None: The entity spawned this frame
        """
        if self.spawn_timer <= 0:
            self.spawn_timer = self.interval
            return self.spawn(frame.width)
        self.spawn_timer -= frame.dt
        return None

    def spawn(self, canvas_width: float) -> Collectible:
        """Create one collectible just above the top edge of the canvas."""
        sprite = Sprite(*self.config["size"])
        half = sprite.center_point
        x = half.x + self.rng.random() * (canvas_width - 2 * half.x)

        collectible = Collectible(
            x=x,
            y=-half.y,
            dy=self.config["fall_speed"],
            sprite=sprite,
            color=tuple(self.config["color"]),
        )
        self.entities.append(collectible)
        self._stats["spawned"] += 1

        DebugLogger.trace(f"Spawned {collectible!r}", category="entity_spawn")
        return collectible

    # ===========================================================
    # Update & Cleanup
    # ===========================================================

    def update(self, frame):
        """Advance every live collectible by one frame."""
        for entity in self.entities:
            if entity.is_alive:
                entity.update(frame)

    def cleanup(self, canvas_height: float) -> int:
        """
        Drop dead collectibles and those that fell past the bottom edge.

        Returns:
            int: Number of entities removed
        """
        before = len(self.entities)
        kept = []
        for entity in self.entities:
            if not entity.is_alive:
                continue
            if entity.is_below(canvas_height):
                self._stats["removed_offscreen"] += 1
                continue
            kept.append(entity)
        self.entities = kept

        removed = before - len(kept)
        if removed:
            DebugLogger.trace(f"Removed {removed} collectible(s)", category="entity_cleanup")
        return removed

    def draw(self, draw_manager):
        for entity in self.entities:
            entity.draw(draw_manager)

    def reset(self):
        """Clear all collectibles and restart the countdown."""
        self.entities = []
        self.spawn_timer = 0.0

    # ===========================================================
    # Introspection
    # ===========================================================

    @property
    def active_count(self) -> int:
        return sum(1 for e in self.entities if e.is_alive)

    def get_stats(self) -> dict:
        return dict(self._stats, active=self.active_count)
