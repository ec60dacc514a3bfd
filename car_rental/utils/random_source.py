"""Sources of randomness for picking a car out of a category."""
import random
from abc import ABC, abstractmethod
from typing import Optional


class RandomSource(ABC):
    """Anything with an ``index(length) -> int`` method returning a value in [0, length)."""

    @abstractmethod
    def index(self, length: int) -> int:
        ...


class SystemRandomSource(RandomSource):
    """Uniform draw backed by ``random.Random``; pass a seed for reproducible runs."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def index(self, length: int) -> int:
        if length <= 0:
            raise ValueError("length must be positive")
        return self._rng.randrange(length)


class FixedRandomSource(RandomSource):
    """Always picks the same position."""

    def __init__(self, position: int = 0):
        self.position = position

    def index(self, length: int) -> int:
        if not 0 <= self.position < length:
            raise ValueError(f"position {self.position} out of range for length {length}")
        return self.position
