from neonpong.config import (
    AI_APPROACH_BOOST,
    AI_DEADZONE,
    AI_JITTER,
    AI_JITTER_CHANCE,
    AI_SPEED,
)
from neonpong.entities import LEFT, Ball, Paddle

# difficulty -> (speed scale, deadzone px, jitter px)
AI_PROFILES = {
    "Easy": (0.7, 14.0, AI_JITTER * 1.5),
    "Normal": (1.0, AI_DEADZONE, AI_JITTER),
    "Hard": (1.35, 4.0, AI_JITTER * 0.5),
}


def ai_target(paddle, ball, rng, jitter=AI_JITTER):
    target = ball.y - paddle.height / 2
    # occasional misread keeps the AI beatable
    if rng.random() < AI_JITTER_CHANCE:
        target += rng.uniform(-jitter, jitter)
    return target


def approaching(paddle, ball):
    if paddle.side == LEFT:
        return ball.dx < 0
    return ball.dx > 0


def ai_move(paddle: Paddle, ball: Ball, field_height, rng, difficulty="Normal"):
    scale, deadzone, jitter = AI_PROFILES.get(difficulty, AI_PROFILES["Normal"])
    maxspeed = AI_SPEED * scale
    if approaching(paddle, ball):
        maxspeed *= AI_APPROACH_BOOST

    target = ai_target(paddle, ball, rng, jitter)
    before = paddle.y
    if paddle.y < target - deadzone:
        paddle.y += maxspeed
    elif paddle.y > target + deadzone:
        paddle.y -= maxspeed
    paddle.clamp_to(field_height)
    paddle.dy = paddle.y - before
    return target
