import logging
import sys

import pygame

# Import our custom modules
from settings import *
from game import SimulationClock, SELECTING, RUNNING, TERMINAL
from levels import LEVELS
from loop import FrameLoop

logger = logging.getLogger(__name__)

LIFT_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
LEVEL_KEYS = {pygame.K_1: "easy", pygame.K_2: "medium", pygame.K_3: "hard"}


def level_buttons(width, height):
    """Lay out one button per level, stacked in the middle of the screen."""
    bw, bh = min(240, width - 40), 50
    top = height // 2 - 40
    buttons = []
    for i, name in enumerate(LEVELS):
        rect = pygame.Rect(0, 0, bw, bh)
        rect.center = (width // 2, top + i * (bh + 15))
        buttons.append((name, rect))
    return buttons


def restart_button(width, height):
    rect = pygame.Rect(0, 0, min(200, width - 40), 50)
    rect.center = (width // 2, height // 2 + 60)
    return rect


def thread_points(segments, offset):
    # Run the line through the midpoints between segments for a smoother curve
    points = [(segments[0][0] + offset, segments[0][1])]
    for (x1, y1), (x2, y2) in zip(segments, segments[1:]):
        points.append(((x1 + x2) / 2 + offset, (y1 + y2) / 2))
    points.append((segments[-1][0] + offset, segments[-1][1]))
    return points


def draw_thread(screen, snap):
    if len(snap.segments) < 2:
        return
    width = max(1, round(2 * snap.scale))
    pygame.draw.lines(screen, CLR_THREAD_LIGHT, False, thread_points(snap.segments, snap.scale), width)
    pygame.draw.lines(screen, CLR_THREAD, False, thread_points(snap.segments, -snap.scale), width)


def draw_walls(screen, snap):
    w = WALL_WIDTH * snap.scale
    radius = round(WALL_RADIUS * snap.scale)
    for x, gap_top, gap_height, _passed in snap.walls:
        bottom = gap_top + gap_height
        top_rect = pygame.Rect(round(x), 0, round(w), round(gap_top))
        bottom_rect = pygame.Rect(round(x), round(bottom), round(w), max(0, round(snap.height - bottom)))
        pygame.draw.rect(screen, CLR_WALL, top_rect,
                         border_bottom_left_radius=radius, border_bottom_right_radius=radius)
        pygame.draw.rect(screen, CLR_WALL, bottom_rect,
                         border_top_left_radius=radius, border_top_right_radius=radius)


def blit_centered(screen, font, text, y, color=CLR_TEXT):
    surf = font.render(text, True, color)
    screen.blit(surf, (screen.get_width() // 2 - surf.get_width() // 2, y))


def draw_button(screen, font, rect, text):
    pygame.draw.rect(screen, CLR_BUTTON, rect, border_radius=12)
    surf = font.render(text, True, CLR_BUTTON_TEXT)
    screen.blit(surf, surf.get_rect(center=rect.center))


def render(screen, fonts, snap):
    font, big_font = fonts
    w, h = screen.get_size()
    screen.fill(CLR_BG)

    if snap.state == SELECTING:
        blit_centered(screen, big_font, "THREAD", h // 2 - 160)
        blit_centered(screen, font, "Pick a level (1/2/3)", h // 2 - 100)
        for name, rect in level_buttons(w, h):
            draw_button(screen, font, rect, name.capitalize())
        return

    draw_walls(screen, snap)
    draw_thread(screen, snap)

    if snap.state == RUNNING:
        score_surf = big_font.render(str(snap.score), True, CLR_TEXT)
        screen.blit(score_surf, (w // 2 - score_surf.get_width() // 2, 20))
    elif snap.state == TERMINAL:
        title = "GAME OVER!"
        if snap.reason:
            title += f" {snap.reason}"
        blit_centered(screen, font, title, h // 2 - 80)
        blit_centered(screen, big_font, f"Score: {snap.score}", h // 2 - 40)
        draw_button(screen, font, restart_button(w, h), "Restart (R)")


def handle_event(game, event, screen):
    """Route one pygame event to the game. Returns False when the player quits."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False
    if event.type == pygame.VIDEORESIZE:
        game.resize(event.w, event.h)
        return True

    if game.state == SELECTING:
        if event.type == pygame.KEYDOWN and event.key in LEVEL_KEYS:
            game.select_level(LEVEL_KEYS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN:
            for name, rect in level_buttons(*screen.get_size()):
                if rect.collidepoint(event.pos):
                    game.select_level(name)
                    break
    elif game.state == RUNNING:
        if event.type == pygame.KEYDOWN and event.key in LIFT_KEYS:
            game.lift()
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            game.lift()
    elif game.state == TERMINAL:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            game.restart()
        elif event.type == pygame.MOUSEBUTTONDOWN and restart_button(*screen.get_size()).collidepoint(event.pos):
            game.restart()
    return True


def main():
    # --- 1. INITIALIZATION ---
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Thread")
    fonts = (pygame.font.SysFont("Arial", 22, bold=True), pygame.font.SysFont("Arial", 40, bold=True))

    loop = FrameLoop(FPS)
    game = SimulationClock(*screen.get_size(), scheduler=loop)
    logger.info("starting at %dx%d", *screen.get_size())

    def draw():
        render(screen, fonts, game.snapshot())
        pygame.display.flip()

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(game, event, screen):
                running = False
                break
            # The display surface is replaced on resize
            screen = pygame.display.get_surface()
        if running:
            loop.pump(draw)

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
