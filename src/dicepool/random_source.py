"""Injectable randomness for dice rolls.

Anything with a ``randbelow(n)`` method returning an int in ``[0, n)``
satisfies RandomSource. The roller never touches the ``random`` module
directly, so tests and replay tools can supply their own draws.

None of these sources are cryptographically secure.
"""

import random
import threading
from functools import lru_cache
from typing import Protocol, runtime_checkable

from dicepool.config import get_settings


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for bounded integer draws."""

    def randbelow(self, n: int) -> int:
        """Return an integer in [0, n). ``n`` is always positive."""
        ...


class SystemRandomSource:
    """Uniform draws from a private ``random.Random``.

    Draws are serialized with a lock so one instance can be shared
    between threads.
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Reseed the generator (None -> fresh non-deterministic)."""
        with self._lock:
            self._seed = seed
            self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        with self._lock:
            return self._rng.randrange(n)


class MaxRandomSource:
    """Always draws the highest value, so every die shows its top face."""

    def randbelow(self, n: int) -> int:
        return n - 1


class SequenceRandomSource:
    """Draws ``start, start + 1, ...`` reduced modulo ``n``.

    Holds a counter and is not safe for concurrent use.
    """

    def __init__(self, start: int = 0):
        self.value = start

    def randbelow(self, n: int) -> int:
        v = self.value % n
        self.value += 1
        return v


@lru_cache
def get_default_source() -> SystemRandomSource:
    """Get the cached process-default source, seeded from settings.

    Call ``get_default_source.cache_clear()`` to rebuild it.
    """
    return SystemRandomSource(seed=get_settings().seed)
