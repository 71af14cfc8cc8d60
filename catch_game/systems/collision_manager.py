"""
collision_manager.py
--------------------
Player-versus-collectible collision detection.

Responsibilities
----------------
- Test each live collectible against the player once per frame.
- Mark collected entities dead instead of removing them mid-iteration.
- Report the collected entities so the scene can score them.
"""

from catch_game.core.debug.debug_logger import DebugLogger


def check_collision(a, b) -> bool:
    """Symmetric axis-aligned bounds test between two entities."""
    return a.collides(b)


class CollisionManager:
    """Detects collisions but lets the scene decide what happens."""

    def __init__(self, player):
        self.player = player
        DebugLogger.init_entry("CollisionManager")

    def detect(self, collectibles) -> list:
        """
        Mark every collectible overlapping the player as dead.

        The collection is only read here; compaction happens afterwards in
        SpawnManager.cleanup().

        Args:
            collectibles: Iterable of collectibles

        Returns:
            list: Collectibles collected during this pass
        """
        collected = []
        for entity in collectibles:
            if not entity.is_alive:
                continue
            if check_collision(entity, self.player):
                entity.mark_dead()
                collected.append(entity)
                DebugLogger.trace(f"Collected {entity!r}", category="collision")
        return collected
