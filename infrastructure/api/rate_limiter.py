"""Client-side request pacing against Riot's per-key limits."""
import asyncio
import time
from collections import deque
from typing import Deque, Iterable, Tuple
import logging

logger = logging.getLogger(__name__)

Window = Tuple[int, float]  # (max requests, window length in seconds)


class RateLimiter:
    """
    Sliding-window limiter over any number of windows.

    Riot personal keys allow 20 requests / 1 s and 100 requests / 120 s;
    the defaults stay slightly below both. This only paces outgoing calls;
    a 429 that still gets through is surfaced to the caller, never retried.
    An empty ``windows`` disables pacing.
    """

    def __init__(self, windows: Iterable[Window] = ((18, 1.0), (90, 120.0))):
        self.windows: Tuple[Window, ...] = tuple(windows)
        self._stamps: Tuple[Deque[float], ...] = tuple(deque() for _ in self.windows)
        self._lock = asyncio.Lock()

    @classmethod
    def from_limits(cls, per_1_sec: int, per_2_min: int) -> "RateLimiter":
        return cls(((per_1_sec, 1.0), (per_2_min, 120.0)))

    def _evict(self, now: float) -> None:
        for (_, length), stamps in zip(self.windows, self._stamps):
            while stamps and now - stamps[0] > length:
                stamps.popleft()

    def _wait_time(self, now: float) -> float:
        wait = 0.0
        for (limit, length), stamps in zip(self.windows, self._stamps):
            if len(stamps) >= limit and stamps:
                wait = max(wait, length - (now - stamps[0]) + 0.01)
        return wait

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = time.monotonic()
                self._evict(now)
                wait = self._wait_time(now)
                if wait <= 0:
                    for stamps in self._stamps:
                        stamps.append(now)
                    return
                logger.debug(f"Rate limit - waiting {wait:.2f}s")
                await asyncio.sleep(wait)
