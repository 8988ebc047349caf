"""
Game loop driver.

``Game`` owns all simulation state and advances it once per ``tick()``. The
host decides when frames happen; the driver only needs to be called once per
displayed frame. Commands (``start``, ``toggle_pause``, ``reset``) and input
(``Game.input``) may arrive at any time between ticks and are picked up by
the next one.

Each running tick runs its stages in order::

    apply input -> AI -> physics -> particles -> score

When the game is not running the stages are skipped entirely, but a
``Frame`` is still produced so the host keeps drawing.
"""
import math
import random
from collections import namedtuple

from neonpong import physics
from neonpong.ai import ai_move
from neonpong.config import (
    DEFAULT_SETTINGS,
    FEEDBACK,
    HEIGHT,
    LEFT_COLOR,
    MAX_PARTICLES,
    PADDLE_DAMPING,
    PADDLE_MARGIN,
    PADDLE_REST,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    RIGHT_COLOR,
    WHITE,
    WIDTH,
)
from neonpong.entities import LEFT, RIGHT, Ball, Paddle, clamp
from neonpong.particles import ParticleSystem, particle_count
from neonpong.physics import Event
from neonpong.score import ScoreTracker

NOT_STARTED, RUNNING, PAUSED = "not_started", "running", "paused"

UP, DOWN = "up", "down"

Tone = namedtuple("Tone", ["frequency", "duration_ms"])

PaddleView = namedtuple("PaddleView", ["side", "x", "y", "width", "height", "color"])
BallView = namedtuple("BallView", ["x", "y", "dx", "dy", "radius", "trail"])
ParticleView = namedtuple("ParticleView", ["x", "y", "radius", "color", "alpha"])
Frame = namedtuple(
    "Frame",
    ["left", "right", "ball", "particles", "scores", "run_state", "events", "tones"],
)


class InputState:
    """Latest raw input from the host. Last writer wins."""

    def __init__(self):
        self.up = False
        self.down = False
        self.pointer_y = None

    def press(self, direction):
        if direction == UP:
            self.up = True
        elif direction == DOWN:
            self.down = True

    def release(self, direction):
        if direction == UP:
            self.up = False
        elif direction == DOWN:
            self.down = False

    def point(self, y):
        try:
            y = float(y)
        except (TypeError, ValueError):
            return
        if math.isfinite(y):
            self.pointer_y = y

    def take_pointer(self):
        y, self.pointer_y = self.pointer_y, None
        return y

    def clear(self):
        self.up = False
        self.down = False
        self.pointer_y = None

    @property
    def direction(self):
        if self.up and not self.down:
            return -1
        if self.down and not self.up:
            return 1
        return 0


class GameState:
    def __init__(self, left, right, ball, particles, scores, width=WIDTH, height=HEIGHT):
        self.left = left
        self.right = right
        self.ball = ball
        self.particles = particles
        self.scores = scores
        self.width = width
        self.height = height

    @classmethod
    def create(cls, rng, width=WIDTH, height=HEIGHT, max_particles=MAX_PARTICLES):
        left = Paddle(PADDLE_MARGIN, 0, LEFT, LEFT_COLOR)
        right = Paddle(width - PADDLE_MARGIN - PADDLE_WIDTH, 0, RIGHT, RIGHT_COLOR)
        state = cls(
            left,
            right,
            Ball(),
            ParticleSystem(rng, max_particles=max_particles),
            ScoreTracker(),
            width,
            height,
        )
        state.reset(rng)
        return state

    # the human plays the left paddle, the AI the right one
    @property
    def human(self):
        return self.left

    @property
    def cpu(self):
        return self.right

    def paddle(self, side):
        return self.left if side == LEFT else self.right

    def reset(self, rng):
        self.left.center_on(self.height)
        self.right.center_on(self.height)
        physics.reset_ball(self.ball, self.width, self.height, rng)
        self.particles.clear()
        self.scores.reset()


class Game:
    def __init__(self, state=None, rng=None, settings=None):
        self.rng = rng if rng is not None else random.Random()
        self.state = state if state is not None else GameState.create(self.rng)
        self.settings = settings if settings is not None else DEFAULT_SETTINGS.copy()
        self.input = InputState()
        self.run_state = NOT_STARTED
        self._pending = []
        self._pointer_driven = False

    # --- commands ---
    def start(self):
        if self.run_state != RUNNING:
            self.run_state = RUNNING

    def toggle_pause(self):
        if self.run_state == RUNNING:
            self.run_state = PAUSED
        elif self.run_state == PAUSED:
            self.run_state = RUNNING

    def reset(self):
        self.run_state = NOT_STARTED
        self.state.reset(self.rng)
        self.input.clear()
        self._pointer_driven = False
        if any(e.kind == "reset" for e in self._pending):
            return
        w, h = self.state.width, self.state.height
        self._pending.append(Event("reset", w / 2, h / 2, None))

    @property
    def running(self):
        return self.run_state == RUNNING

    # --- tick ---
    def tick(self):
        events, self._pending = self._pending, []
        if self.running:
            events.extend(self.update())
        tones = [t for t in (self.tone_for(e) for e in events) if t is not None]
        return self.snapshot(events, tones)

    def update(self):
        state = self.state
        self.apply_input()
        ai_move(
            state.cpu,
            state.ball,
            state.height,
            self.rng,
            self.settings.get("ai_difficulty", "Normal"),
        )

        events = physics.step(state)
        for event in events:
            self.burst(event)
        state.particles.advance()

        events.extend(self.check_score())
        return events

    def apply_input(self):
        paddle = self.state.human
        height = self.state.height
        pointer_y = self.input.take_pointer()
        direction = self.input.direction
        if pointer_y is not None:
            # physics.move_paddle takes the step, so dy feeds paddle spin
            target = clamp(pointer_y - paddle.height / 2, 0.0, height - paddle.height)
            paddle.dy = target - paddle.y
            self._pointer_driven = True
        elif self._pointer_driven and not direction:
            # pointer stopped: hold still instead of coasting
            paddle.dy = 0.0
            self._pointer_driven = False
            return

        if direction:
            self._pointer_driven = False
            paddle.dy = direction * PADDLE_SPEED
        elif pointer_y is None:
            paddle.dy *= PADDLE_DAMPING
            if abs(paddle.dy) < PADDLE_REST:
                paddle.dy = 0.0

    def check_score(self):
        state = self.state
        ball = state.ball
        side = physics.check_exit(ball, state.width)
        if side is None:
            return []
        exit_x = min(max(ball.x, 0.0), state.width)
        exit_y = ball.y
        state.scores.record(side)
        physics.reset_ball(ball, state.width, state.height, self.rng)
        events = [
            Event("score", exit_x, exit_y, side),
            Event("serve", ball.x, ball.y, None),
        ]
        for event in events:
            self.burst(event)
        return events

    # --- feedback ---
    @staticmethod
    def feedback_key(event):
        if event.kind == "paddle":
            return f"paddle_{event.side}"
        return event.kind

    def burst(self, event):
        base, _, _ = FEEDBACK.get(self.feedback_key(event), (0, None, None))
        count = particle_count(self.settings.get("particle_quality", "Normal"), base)
        if count <= 0:
            return
        if event.kind in ("paddle", "score"):
            color = self.state.paddle(event.side).color
        else:
            color = WHITE
        self.state.particles.spawn(event.x, event.y, color, count)

    def tone_for(self, event):
        _, freq, duration = FEEDBACK.get(self.feedback_key(event), (0, None, None))
        if freq is None:
            return None
        return Tone(freq, duration)

    def snapshot(self, events=(), tones=()):
        state = self.state
        ball = state.ball
        return Frame(
            left=self.paddle_view(state.left),
            right=self.paddle_view(state.right),
            ball=BallView(ball.x, ball.y, ball.dx, ball.dy, ball.radius, tuple(ball.trail)),
            particles=tuple(
                ParticleView(p.x, p.y, p.radius, p.color, p.alpha) for p in state.particles
            ),
            scores=state.scores.pair,
            run_state=self.run_state,
            events=tuple(events),
            tones=tuple(tones),
        )

    @staticmethod
    def paddle_view(paddle):
        return PaddleView(paddle.side, paddle.x, paddle.y, paddle.width, paddle.height, paddle.color)
