import logging
import math
import random
from settings import *

logger = logging.getLogger(__name__)


def round_half_up(value):
    # Browser-style rounding; Python's round() goes to the even neighbour on .5
    return int(math.floor(value + 0.5))


class Wall:
    """A wall with a passable gap; solid above gap_top and below gap_top + gap_height."""
    def __init__(self, x, gap_top, gap_height):
        self.x = x
        self.gap_top = gap_top
        self.gap_height = gap_height
        self.passed = False

    @property
    def gap_bottom(self):
        return self.gap_top + self.gap_height

    def __repr__(self):
        return f"Wall(x={self.x:.1f}, gap_top={self.gap_top:.1f}, passed={self.passed})"


class World:
    def __init__(self, level, rng=None, wall_width=WALL_WIDTH):
        self.level = level
        self.wall_width = wall_width
        # Anything with a random() -> [0, 1) method; tests pass a seeded one
        self.rng = rng if rng is not None else random.Random()
        self.walls = []

    def spawn_interval(self, scale):
        return max(1, round_half_up(self.level.spawn_rate / scale))

    def gap_range(self, height, scale):
        """Return the (low, high) bounds gap_top is drawn from, clamped so high >= low."""
        low = SPAWN_MARGIN * scale
        high = height - self.level.wall_gap * scale - SPAWN_MARGIN * scale
        return low, max(low, high)

    def maybe_spawn(self, tick, width, height, scale):
        if tick % self.spawn_interval(scale) != 0:
            return None
        low, high = self.gap_range(height, scale)
        gap_top = low + self.rng.random() * (high - low)
        wall = Wall(width, gap_top, self.level.wall_gap * scale)
        self.walls.append(wall)
        logger.debug("tick %d: spawned %r", tick, wall)
        return wall

    def advance(self, scale):
        step = abs(self.level.wall_speed) * scale
        for wall in self.walls:
            wall.x -= step

    def score_and_cull(self, head_x, scale):
        """Mark walls the head has cleared and drop the ones off the left edge.

        Returns how many walls were passed this call. Scoring reads the walls
        before any are removed.
        """
        width = self.wall_width * scale
        gained = 0
        for wall in self.walls:
            if not wall.passed and wall.x + width < head_x:
                wall.passed = True
                gained += 1

        kept = [wall for wall in self.walls if wall.x + width > 0]
        if len(kept) != len(self.walls):
            logger.debug("culled %d wall(s)", len(self.walls) - len(kept))
        self.walls = kept
        return gained
