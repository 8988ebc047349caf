"""
Per-frame motion and collision response.

Collision order inside one frame is fixed: top/bottom walls first, then the
left paddle, then the right paddle, then the exit check. A ball touching a
wall and a paddle in the same frame is bounced off both, wall first.
"""
from collections import namedtuple

from neonpong.config import (
    BALL_SERVE_DX,
    BALL_SERVE_DY,
    BALL_SPEEDUP,
    MAX_BALL_SPEED,
    SPIN_FACTOR,
    SPIN_INFLUENCE,
)
from neonpong.entities import LEFT, RIGHT, clamp

# kind: "wall" | "paddle" | "score" | "serve" | "reset"; side is the paddle hit or the scorer
Event = namedtuple("Event", ["kind", "x", "y", "side"])


def move_paddle(paddle, field_height):
    paddle.y += paddle.dy
    paddle.clamp_to(field_height)


def move_ball(ball):
    ball.trail.append((ball.x, ball.y))
    ball.x += ball.dx
    ball.y += ball.dy


def bounce_walls(ball, field_height):
    r = ball.radius
    if ball.y < r:
        ball.y = r
    elif ball.y > field_height - r:
        ball.y = field_height - r
    else:
        return False
    ball.dy = -ball.dy
    return True


def paddle_overlap(ball, paddle):
    r = ball.radius
    if paddle.side == LEFT:
        if ball.dx >= 0:
            return False
    elif ball.dx <= 0:
        return False
    if ball.x - r >= paddle.x + paddle.width or ball.x + r <= paddle.x:
        return False
    return paddle.y <= ball.y <= paddle.y + paddle.height


def hit_paddle(ball, paddle):
    """Bounce the ball off ``paddle`` if they touch; returns the impact or None.

    The impact is the signed contact offset from the paddle center,
    normalised to [-1, 1].
    """
    if not paddle_overlap(ball, paddle):
        return None
    r = ball.radius
    if paddle.side == LEFT:
        ball.x = paddle.face_x + r
    else:
        ball.x = paddle.face_x - r

    half = paddle.height / 2
    impact = clamp((ball.y - paddle.center_y) / half, -1.0, 1.0)

    ball.dx = -ball.dx * BALL_SPEEDUP
    ball.dy += impact * SPIN_FACTOR + paddle.dy * SPIN_INFLUENCE
    ball.dx = clamp(ball.dx, -MAX_BALL_SPEED, MAX_BALL_SPEED)
    ball.dy = clamp(ball.dy, -MAX_BALL_SPEED, MAX_BALL_SPEED)
    return impact


def check_exit(ball, field_width):
    """Side that scores when the ball has left the field, else None."""
    if ball.x < 0:
        return RIGHT
    if ball.x > field_width:
        return LEFT
    return None


def serve_velocity(rng):
    dx = BALL_SERVE_DX * (1 if rng.random() < 0.5 else -1)
    dy = BALL_SERVE_DY * (1 if rng.random() < 0.5 else -1)
    return dx, dy


def reset_ball(ball, field_width, field_height, rng):
    ball.x = field_width / 2
    ball.y = field_height / 2
    ball.dx, ball.dy = serve_velocity(rng)
    ball.trail.clear()


def step(state):
    """Advance the human paddle and the ball one frame; returns the events."""
    events = []
    move_paddle(state.human, state.height)

    ball = state.ball
    move_ball(ball)

    if bounce_walls(ball, state.height):
        events.append(Event("wall", ball.x, ball.y, None))

    for paddle in (state.left, state.right):
        if hit_paddle(ball, paddle) is not None:
            events.append(Event("paddle", ball.x, ball.y, paddle.side))
    return events
