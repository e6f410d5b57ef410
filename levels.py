from dataclasses import dataclass

from exceptions import UnknownLevel


@dataclass(frozen=True)
class LevelProfile:
    name: str
    wall_speed: float  # negative, walls move left
    wall_gap: float
    spawn_rate: float  # ticks between walls at scale 1


LEVELS = {
    "easy": LevelProfile("easy", wall_speed=-1.5, wall_gap=180, spawn_rate=120),
    "medium": LevelProfile("medium", wall_speed=-2.5, wall_gap=140, spawn_rate=90),
    "hard": LevelProfile("hard", wall_speed=-3.5, wall_gap=110, spawn_rate=70),
}


def get_level(name):
    try:
        return LEVELS[name]
    except KeyError:
        raise UnknownLevel(f"unknown level {name!r}, pick one of {', '.join(LEVELS)}") from None
