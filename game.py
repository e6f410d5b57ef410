import logging
from dataclasses import dataclass

from collision import find_collision
from exceptions import InvalidTransition
from levels import get_level
from player import Thread
from scale import ScaleContext
from world import World
from settings import *

logger = logging.getLogger(__name__)

SELECTING = "selecting"
RUNNING = "running"
TERMINAL = "gameover"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame for whoever draws it."""
    state: str
    level: str
    segments: tuple  # (x, y) per segment, head first
    walls: tuple     # (x, gap_top, gap_height, passed) per wall
    score: int
    tick: int
    terminal: bool
    reason: str
    width: float
    height: float
    scale: float


class Session:
    """One run at one level: the thread, its walls and the score."""

    def __init__(self, level, scale_ctx, rng=None):
        self.level = level
        self.scale_ctx = scale_ctx
        self.thread = Thread(scale_ctx.height / 2, scale=scale_ctx.scale)
        self.world = World(level, rng=rng)
        self.score = 0
        self.tick = 0
        self.terminal = False
        self.reason = ""

    def step(self):
        """Advance one tick and return the crash reason, or None."""
        ctx = self.scale_ctx
        scale = ctx.scale

        self.thread.apply_gravity()
        self.thread.integrate()

        self.tick += 1
        self.world.maybe_spawn(self.tick, ctx.width, ctx.height, scale)
        self.world.advance(scale)
        self.score += self.world.score_and_cull(self.thread.head.x, scale)

        return find_collision(self.thread, self.world.walls, ctx.height, self.world.wall_width, scale)


class SimulationClock:
    """Drives the selecting -> running -> gameover cycle, one tick per frame.

    The scheduler is anything with start(callback) and cancel(); the clock
    registers tick() on it when a run starts and cancels it when the run ends.
    """

    def __init__(self, width=WIDTH, height=HEIGHT, scheduler=None, rng=None):
        self.scale_ctx = ScaleContext(width, height)
        self.scheduler = scheduler
        self.rng = rng
        self.state = SELECTING
        self.level = None
        self.session = None
        self._in_tick = False
        self._pending_resize = None

    @property
    def score(self):
        return self.session.score if self.session is not None else 0

    @property
    def terminal(self):
        return self.state == TERMINAL

    def select_level(self, name):
        if self.state != SELECTING:
            raise InvalidTransition(f"cannot choose a level while {self.state}")
        self.level = get_level(name)
        self._new_session()
        self.state = RUNNING
        logger.info("level %s selected at %dx%d (scale %.2f)", name,
                    self.scale_ctx.width, self.scale_ctx.height, self.scale_ctx.scale)
        if self.scheduler is not None:
            self.scheduler.start(self.tick)

    def _new_session(self):
        self.scale_ctx.recompute(self.scale_ctx.width, self.scale_ctx.height)
        self.session = Session(self.level, self.scale_ctx, rng=self.rng)

    def tick(self):
        if self.state != RUNNING or self._in_tick:
            return self.snapshot()

        self._in_tick = True
        try:
            reason = self.session.step()
        finally:
            self._in_tick = False

        if reason is not None:
            self.end_game(reason)
        if self._pending_resize is not None:
            width, height = self._pending_resize
            self._pending_resize = None
            self.resize(width, height)
        return self.snapshot()

    def lift(self):
        """Handle one lift press; ignored unless a run is in progress."""
        if self.state != RUNNING or self.session.terminal:
            return False
        self.session.thread.apply_lift()
        return True

    def end_game(self, reason=""):
        if self.state != RUNNING:
            return False
        self.state = TERMINAL
        self.session.terminal = True
        self.session.reason = reason
        if self.scheduler is not None:
            self.scheduler.cancel()
        logger.info("game over at tick %d: %s (score %d)", self.session.tick, reason, self.session.score)
        return True

    def resize(self, width, height):
        if self._in_tick:
            logger.debug("resize to %dx%d deferred until the tick finishes", width, height)
            self._pending_resize = (width, height)
            return
        self.scale_ctx.recompute(width, height)
        if self.state == RUNNING:
            # A new surface size means a fresh run at the same level
            logger.info("surface resized to %dx%d, restarting %s run", width, height, self.level.name)
            self._new_session()

    def restart(self):
        """Tear down the current run and go back to level selection."""
        if self.state == SELECTING:
            return
        if self.scheduler is not None:
            self.scheduler.cancel()
        logger.info("restart from %s with score %d", self.state, self.score)
        self.state = SELECTING
        self.session = None
        self.level = None

    def snapshot(self):
        ctx = self.scale_ctx
        session = self.session
        if session is None:
            return Snapshot(self.state, "", (), (), 0, 0, False, "", ctx.width, ctx.height, ctx.scale)
        walls = tuple((w.x, w.gap_top, w.gap_height, w.passed) for w in session.world.walls)
        return Snapshot(
            state=self.state,
            level=session.level.name,
            segments=session.thread.positions(),
            walls=walls,
            score=session.score,
            tick=session.tick,
            terminal=session.terminal,
            reason=session.reason,
            width=ctx.width,
            height=ctx.height,
            scale=ctx.scale,
        )
