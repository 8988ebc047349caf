from neonpong.entities import LEFT, RIGHT


class ScoreTracker:
    """Per-session point counters. Only ``reset`` ever lowers them."""

    def __init__(self):
        self.left = 0
        self.right = 0

    def record(self, side):
        if side == LEFT:
            self.left += 1
        elif side == RIGHT:
            self.right += 1
        else:
            raise ValueError(f"unknown side: {side!r}")

    def reset(self):
        self.left = 0
        self.right = 0

    @property
    def pair(self):
        return self.left, self.right

    def __repr__(self):
        return f"ScoreTracker({self.left}-{self.right})"
