"""Random source port, injectable so draws can be made deterministic."""

from typing import Protocol


class RandomSource(Protocol):
    def next_int(self, bound: int) -> int:
        """Return a uniform integer in [0, bound)."""
        ...
