"""RandomSource backed by the standard library PRNG."""

import random


class SystemRandomSource:
    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def next_int(self, bound: int) -> int:
        return self._random.randrange(bound)
