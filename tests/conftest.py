import random

import pytest

from neonpong.game import Game, GameState


class ScriptedRandom(random.Random):
    """random() returns queued values first, then ``default`` forever.

    uniform() is built on random(), so it follows the script too.
    """

    def __init__(self, values=(), default=0.5):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def state(rng):
    return GameState.create(rng)


@pytest.fixture
def game(rng):
    return Game(rng=rng, settings={"ai_difficulty": "Normal", "particle_quality": "Normal", "sound": True})
