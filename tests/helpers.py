"""Random sources that let tests observe witness draws."""

from __future__ import annotations

import random


class NoRandom:
    """Random source that fails the test if a witness is ever drawn."""

    def randrange(self, *args):
        raise AssertionError("fast path consumed randomness")


class CountingRandom(random.Random):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws: list[int] = []

    def randrange(self, *args, **kwargs):
        v = super().randrange(*args, **kwargs)
        self.draws.append(v)
        return v
