from __future__ import annotations

import os

import pytest

# Keep pygame quiet and headless under test
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class ScriptedRandom:
    """Random source that replays a fixed list of values, repeating the last one."""

    def __init__(self, *values: float) -> None:
        self._values = list(values) or [0.5]
        self.calls = 0

    def random(self) -> float:
        value = self._values[min(self.calls, len(self._values) - 1)]
        self.calls += 1
        return value


class FakeScheduler:
    def __init__(self) -> None:
        self.callback = None
        self.starts = 0
        self.cancels = 0

    def start(self, callback) -> None:
        self.starts += 1
        self.callback = callback

    def cancel(self) -> None:
        self.cancels += 1
        self.callback = None


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def clock(scheduler: FakeScheduler):
    from game import SimulationClock

    return SimulationClock(400, 600, scheduler=scheduler, rng=ScriptedRandom(0.5))
