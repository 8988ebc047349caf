import pygame as pg

from neonpong.config import ACCENT, BG, DARK, WHITE
from neonpong.game import NOT_STARTED, PAUSED

STATUS_TEXT = {
    NOT_STARTED: "Press SPACE to start",
    PAUSED: "PAUSED - press P to resume",
}


def draw_center_line(surface):
    width, height = surface.get_size()
    for y in range(0, height, 30):
        pg.draw.rect(surface, DARK, (width // 2 - 2, y + 5, 4, 20))


def draw_paddle(surface, paddle):
    rect = pg.Rect(int(paddle.x), int(paddle.y), paddle.width, paddle.height)
    pg.draw.rect(surface, paddle.color, rect, border_radius=4)


def draw_alpha_circle(surface, color, pos, radius, alpha):
    radius = max(1, int(radius))
    s = pg.Surface((radius * 2 + 2, radius * 2 + 2), pg.SRCALPHA)
    pg.draw.circle(s, (*color[:3], int(alpha)), (radius + 1, radius + 1), radius)
    surface.blit(s, (pos[0] - radius - 1, pos[1] - radius - 1))


def draw_trail(surface, ball):
    n = len(ball.trail)
    # oldest first, fading in towards the ball
    for i, (x, y) in enumerate(ball.trail):
        frac = (i + 1) / (n + 1)
        size = ball.radius * (0.4 + 0.6 * frac)
        draw_alpha_circle(surface, ACCENT, (x, y), size, 160 * frac)


def draw_ball(surface, ball):
    pg.draw.circle(surface, WHITE, (int(ball.x), int(ball.y)), int(ball.radius))


def draw_particles(surface, particles):
    for p in particles:
        if p.alpha <= 0:
            continue
        draw_alpha_circle(surface, p.color, (p.x, p.y), p.radius, 255 * p.alpha)


def draw_scores(surface, font, scores):
    width = surface.get_width()
    left_surf = font.render(str(scores[0]), True, WHITE)
    right_surf = font.render(str(scores[1]), True, WHITE)
    surface.blit(left_surf, (width // 4 - left_surf.get_width() // 2, 20))
    surface.blit(right_surf, (width * 3 // 4 - right_surf.get_width() // 2, 20))


def draw_status(surface, font, run_state):
    text = STATUS_TEXT.get(run_state)
    if not text:
        return
    width, height = surface.get_size()
    surf = font.render(text, True, ACCENT)
    surface.blit(surf, (width // 2 - surf.get_width() // 2, height // 2 - surf.get_height() // 2 - 40))


def draw_frame(surface, frame, font, small_font, help_text=""):
    surface.fill(BG)
    draw_center_line(surface)
    draw_trail(surface, frame.ball)
    draw_paddle(surface, frame.left)
    draw_paddle(surface, frame.right)
    draw_ball(surface, frame.ball)
    draw_particles(surface, frame.particles)
    draw_scores(surface, font, frame.scores)
    draw_status(surface, font, frame.run_state)
    if help_text:
        help_surf = small_font.render(help_text, True, DARK)
        surface.blit(help_surf, (20, surface.get_height() - 28))


def draw_debug(surface, small_font, lines):
    dbg_w, dbg_h = 300, 18 * len(lines) + 12
    dbg_surf = pg.Surface((dbg_w, dbg_h), pg.SRCALPHA)
    dbg_surf.fill((8, 8, 8, 200))
    x0 = surface.get_width() - dbg_w - 12
    surface.blit(dbg_surf, (x0, 12))
    for i, line in enumerate(lines):
        txt = small_font.render(line, True, ACCENT if i == 0 else WHITE)
        surface.blit(txt, (x0 + 8, 18 + i * 18))
