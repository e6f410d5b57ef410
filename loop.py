import logging

import pygame
from settings import *

logger = logging.getLogger(__name__)


class FrameLoop:
    """Calls one registered callback per display frame until cancelled.

    pygame has no frame callbacks of its own, so the main loop calls pump()
    once per frame and the loop paces it with a pygame clock.
    """

    def __init__(self, fps=FPS):
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._callback = None

    @property
    def running(self):
        return self._callback is not None

    def start(self, callback):
        if self._callback is not None:
            return
        self._callback = callback

    def cancel(self):
        self._callback = None

    def pump(self, render=None):
        """Run one frame: the callback if one is registered, then render, then wait for the next frame."""
        callback = self._callback
        if callback is not None:
            try:
                callback()
            except Exception:
                # Don't keep calling into a half-updated session
                self.cancel()
                logger.exception("frame callback failed, loop cancelled")
                raise
        if render is not None:
            render()
        return self.clock.tick(self.fps)
