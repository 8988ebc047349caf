from collections import deque

from neonpong.config import (
    BALL_SIZE,
    HEIGHT,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
    TRAIL_LENGTH,
    WHITE,
    WIDTH,
)

LEFT, RIGHT = "left", "right"


# --- Helper functions ---
def clamp(n, a, b):
    return max(a, min(b, n))


# --- Classes ---
class Paddle:
    def __init__(self, x, y, side, color, width=PADDLE_WIDTH, height=PADDLE_HEIGHT):
        self.x = float(x)
        self.y = float(y)
        self.dy = 0.0  # px/frame
        self.side = side
        self.color = color
        self.width = width
        self.height = height

    @property
    def center_y(self):
        return self.y + self.height / 2

    @property
    def face_x(self):
        """x of the face the ball bounces off."""
        return self.x + self.width if self.side == LEFT else self.x

    def clamp_to(self, field_height):
        self.y = clamp(self.y, 0.0, field_height - self.height)

    def center_on(self, field_height):
        self.y = field_height / 2 - self.height / 2
        self.dy = 0.0

    def __repr__(self):
        return f"Paddle({self.side}, x={self.x:.1f}, y={self.y:.1f}, dy={self.dy:.2f})"


class Ball:
    def __init__(self, x=WIDTH / 2, y=HEIGHT / 2, dx=0.0, dy=0.0, size=BALL_SIZE):
        self.x = float(x)
        self.y = float(y)
        self.dx = float(dx)
        self.dy = float(dy)
        self.size = size
        self.trail = deque(maxlen=TRAIL_LENGTH)

    @property
    def radius(self):
        return self.size / 2

    def __repr__(self):
        return f"Ball(x={self.x:.1f}, y={self.y:.1f}, dx={self.dx:.2f}, dy={self.dy:.2f})"


class Particle:
    def __init__(self, pos, vel, life, radius, color=WHITE):
        self.x, self.y = float(pos[0]), float(pos[1])
        self.vx, self.vy = float(vel[0]), float(vel[1])
        self.life = life  # frames left
        self.max_life = life
        self.radius = float(radius)
        self.color = color

    @property
    def alpha(self):
        if self.max_life <= 0:
            return 0.0
        return clamp(self.life / self.max_life, 0.0, 1.0)

    def update(self, damping):
        self.x += self.vx
        self.y += self.vy
        self.vx *= damping
        self.vy *= damping
        self.life -= 1

    def is_dead(self):
        return self.life <= 0
