from settings import *

# Smallest scale we hand out; keeps spawn intervals defined on a zero-width surface
MIN_SCALE = 0.01


class ScaleContext:
    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.height = height
        self.scale = 1.0
        self.recompute(width, height)

    def recompute(self, width, height=None):
        """Track a new surface size and return the scale against the design width."""
        self.width = width
        if height is not None:
            self.height = height
        self.scale = max(MIN_SCALE, width / REFERENCE_WIDTH)
        return self.scale

    def apply(self, value):
        # Translates a design-space distance into surface pixels
        return value * self.scale
