import pygame
from settings import *


class Thread:
    """The player: a chain of segments trailing a head that is lifted against gravity.

    Segment x positions are laid out once, head first, and never move. Only
    the y of each segment and the head's vertical velocity change per tick.
    """

    def __init__(self, start_y, scale=1.0, length=THREAD_LENGTH, segment_gap=SEGMENT_GAP,
                 base_x=None, smoothness=SMOOTHNESS):
        if base_x is None:
            base_x = HEAD_X * scale
        self.scale = scale
        self.smoothness = smoothness
        self.velocity = 0.0
        # Build the trail stretched out behind the head, all at the start height
        self.segments = [pygame.Vector2(base_x - i * segment_gap * scale, start_y) for i in range(length)]
        self._xs = tuple(seg.x for seg in self.segments)

    @property
    def head(self):
        return self.segments[0]

    def apply_gravity(self):
        self.velocity += GRAVITY * self.scale

    def apply_lift(self):
        # Absolute set, a burst of presses never stacks
        self.velocity = LIFT * self.scale

    def integrate(self):
        self.head.y += self.velocity
        # Each segment chases the one ahead of it, already moved this tick
        for prev, seg in zip(self.segments, self.segments[1:]):
            seg.y += (prev.y - seg.y) * self.smoothness

    def positions(self):
        """Return the segments as plain (x, y) tuples, head first."""
        return tuple((x, seg.y) for x, seg in zip(self._xs, self.segments))

    def __len__(self):
        return len(self.segments)
