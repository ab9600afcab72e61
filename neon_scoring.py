
"""Score, level and drop-speed progression"""
from dataclasses import dataclass

from neon_config import (BASE_DROP_MS, DROP_STEP_MS, LINES_PER_LEVEL,
                         MIN_DROP_MS, SCORE_POINTS)

def drop_interval_for(level: int) -> int:
    """Milliseconds between gravity drops: 1000 at level 0, 50 faster per level, floor 100."""
    return max(MIN_DROP_MS, BASE_DROP_MS - level * DROP_STEP_MS)

@dataclass
class SessionStats:
    score: int = 0
    level: int = 0
    lines: int = 0        # lines toward the next level
    drop_interval: int = BASE_DROP_MS

    def award(self, cleared: int) -> int:
        """Score a sweep of `cleared` rows and return the points added."""
        if cleared not in SCORE_POINTS:
            raise ValueError(f"cleared must be in 1..4, got {cleared}")
        points = SCORE_POINTS[cleared] * (self.level + 1)
        self.score += points
        self.lines += cleared
        while self.lines >= LINES_PER_LEVEL:
            self.level += 1
            self.lines -= LINES_PER_LEVEL
            self.drop_interval = drop_interval_for(self.level)
        return points
