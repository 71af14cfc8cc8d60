"""
session_stats.py
----------------
Tracks statistics for the current game session/run.
Separated from entity management and scene state.
"""

from catch_game.core.debug.debug_logger import DebugLogger
from catch_game.core.runtime.game_settings import Score


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """
    Container for run-specific statistics. Reset when starting a new game.

    The score saturates at a fixed ceiling: once reached, further increments
    are dropped without wrapping or raising.
    """

    def __init__(self, score_ceiling: int = Score.CEILING):
        self.score_ceiling = score_ceiling
        self._score = 0
        self.items_collected = 0

    # ===========================================================
    # Core Stats
    # ===========================================================

    @property
    def score(self) -> int:
        return self._score

    @property
    def is_saturated(self) -> bool:
        return self._score >= self.score_ceiling

    def add_score(self, amount: int = 1):
        """Add to current score unless the ceiling has been reached."""
        if self.is_saturated:
            return
        self._score = min(self._score + amount, self.score_ceiling)
        if self.is_saturated:
            DebugLogger.state(f"Score reached ceiling ({self.score_ceiling})", category="score")

    def add_item(self):
        """Increment item collection count."""
        self.items_collected += 1

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for new run."""
        self._score = 0
        self.items_collected = 0
