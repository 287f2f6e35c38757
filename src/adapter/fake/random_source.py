"""Deterministic RandomSource for testing."""


class SequenceRandomSource:
    """Replays a fixed sequence of draws, cycling when exhausted.

    Each value is reduced modulo the requested bound.
    """

    def __init__(self, values: list[int]):
        self.values = values
        self.bounds: list[int] = []
        self._position = 0

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        value = self.values[self._position % len(self.values)]
        self._position += 1
        return value % bound
