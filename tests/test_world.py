from __future__ import annotations

import pytest

from conftest import ScriptedRandom
from levels import LEVELS, LevelProfile
from world import Wall, World, round_half_up


def _world(level: str = "easy", *values: float) -> World:
    return World(LEVELS[level], rng=ScriptedRandom(*values))


def test_spawn_interval_scales() -> None:
    world = _world()
    assert world.spawn_interval(1.0) == 120
    assert world.spawn_interval(2.0) == 60


def test_spawn_interval_rounds_half_up() -> None:
    world = World(LevelProfile("odd", wall_speed=-1.0, wall_gap=100, spawn_rate=125))
    assert round_half_up(2.5) == 3
    assert world.spawn_interval(2.0) == 63


def test_spawn_interval_never_zero() -> None:
    assert _world().spawn_interval(1000.0) == 1


def test_spawns_only_on_interval() -> None:
    world = _world("easy", 0.5)
    for tick in range(1, 120):
        assert world.maybe_spawn(tick, 400, 600, 1.0) is None
    wall = world.maybe_spawn(120, 400, 600, 1.0)

    assert world.walls == [wall]
    assert wall.x == 400
    assert wall.gap_top == pytest.approx(50 + 0.5 * 320)
    assert wall.gap_height == 180
    assert wall.passed is False


def test_gap_range_uses_margins() -> None:
    world = _world("easy", 0.0)
    assert world.gap_range(600, 1.0) == (50, 370)
    assert world.maybe_spawn(120, 400, 600, 1.0).gap_top == 50


def test_small_surface_clamps_gap() -> None:
    world = _world("easy", 0.99)
    low, high = world.gap_range(100, 1.0)
    assert low == high == 50

    wall = world.maybe_spawn(120, 400, 100, 1.0)
    assert wall.gap_top == 50


def test_advance_moves_left() -> None:
    world = _world("medium")
    world.walls = [Wall(100.0, 50.0, 140.0), Wall(300.0, 50.0, 140.0)]
    world.advance(2.0)

    assert [w.x for w in world.walls] == [95.0, 295.0]


def test_wall_scores_once() -> None:
    world = _world()
    world.walls = [Wall(9.0, 100.0, 180.0)]

    assert world.score_and_cull(40.0, 1.0) == 1
    assert world.walls[0].passed
    assert world.score_and_cull(40.0, 1.0) == 0


def test_wall_level_with_head_does_not_score() -> None:
    world = _world()
    world.walls = [Wall(10.0, 100.0, 180.0)]

    assert world.score_and_cull(40.0, 1.0) == 0
    assert not world.walls[0].passed


def test_scores_before_culling() -> None:
    world = _world()
    world.walls = [Wall(-30.0, 100.0, 180.0), Wall(-29.5, 100.0, 180.0)]

    assert world.score_and_cull(40.0, 1.0) == 2
    assert len(world.walls) == 1
    assert world.walls[0].x == -29.5


def test_wall_culled_once_fully_off_screen() -> None:
    world = _world("easy", 0.5)
    world.maybe_spawn(120, 400, 600, 1.0)

    # 430px to travel at 1.5px per tick
    for _ in range(286):
        world.advance(1.0)
        world.score_and_cull(40.0, 1.0)
    assert len(world.walls) == 1

    world.advance(1.0)
    world.score_and_cull(40.0, 1.0)
    assert world.walls == []
