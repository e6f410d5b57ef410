from settings import *

OUT_OF_BOUNDS = "Out of bounds!"
HIT_WALL = "Crashed into a wall!"


def check_bounds(y, height):
    # Open at both edges: sitting exactly on 0 or height is still alive
    return y < 0 or y > height


def hits_wall(x, y, wall, wall_width):
    if not (wall.x < x < wall.x + wall_width):
        return False
    return y < wall.gap_top or y > wall.gap_top + wall.gap_height


def find_collision(thread, walls, height, wall_width=WALL_WIDTH, scale=1.0):
    """Return why the thread crashed this tick, or None if it is still alive.

    Only the head is tested against the top and bottom edges, but every
    segment is tested against every wall, so a lagging tail can clip a wall
    the head already cleared.
    """
    if check_bounds(thread.head.y, height):
        return OUT_OF_BOUNDS
    width = wall_width * scale
    for wall in walls:
        for seg in thread.segments:
            if hits_wall(seg.x, seg.y, wall, width):
                return HIT_WALL
    return None


def check_collision(thread, walls, height, wall_width=WALL_WIDTH, scale=1.0):
    return find_collision(thread, walls, height, wall_width, scale) is not None
