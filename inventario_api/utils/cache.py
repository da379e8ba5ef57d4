"""Single-slot, time-bounded cache for derived data sets."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    epoch: int
    generated_at: float
    value: T


class GenerationCache(Generic[T]):
    """Hold one generated value and regenerate it wholesale once it is *ttl* seconds old.

    Each regeneration bumps :attr:`epoch`.  There is no locking: concurrent
    callers that find the entry stale each run the factory, and the last one
    to finish wins.  Factories must therefore be side-effect free.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entry: CacheEntry[T] | None = None
        self._epoch = 0

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def ttl(self) -> float:
        return self._ttl

    def peek(self) -> CacheEntry[T] | None:
        """Return the current entry if it is still fresh, without regenerating."""
        entry = self._entry
        if entry is None or self._clock() - entry.generated_at >= self._ttl:
            return None
        return entry

    async def get_or_create(self, factory: Callable[[], Awaitable[T]]) -> CacheEntry[T]:
        entry = self.peek()
        if entry is not None:
            return entry

        value = await factory()
        self._epoch += 1
        entry = CacheEntry(epoch=self._epoch, generated_at=self._clock(), value=value)
        self._entry = entry
        logger.info("Regenerated cache entry (epoch %d)", entry.epoch)
        return entry

    def invalidate(self) -> None:
        self._entry = None
