"""Seedable random source used by the name generators."""

from __future__ import annotations

import random as _random
import threading
import time
from typing import ClassVar, Optional, Sequence, TypeVar

T = TypeVar("T")


class Random:
    """Uniform random numbers with inclusive integer ranges and list choice."""

    _shared: ClassVar[Optional["Random"]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        self._generator = _random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high]; the bounds may be given in either order."""
        if low > high:
            low, high = high, low
        return self._generator.randint(low, high)

    def next_below(self, limit: int) -> int:
        """Return an integer in [0, limit), or 0 when limit is 0."""
        if limit < 0:
            raise ValueError("limit cannot be negative")
        if limit == 0:
            return 0
        return self.next_int(0, limit - 1)

    def next_double(self, low: float = 0.0, high: float = 1.0) -> float:
        """Return a float in [low, high); the bounds may be given in either order."""
        if low > high:
            low, high = high, low
        return low + (high - low) * self._generator.random()

    def choice(self, items: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, chosen uniformly."""
        if not items:
            raise IndexError("Cannot choose from empty sequence")
        return items[self.next_below(len(items))]

    @classmethod
    def instance(cls) -> "Random":
        """Return the process-wide shared generator, creating it on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared