"""In-process response caches."""
import copy
import time
from typing import Any, Callable, Dict, Optional, Tuple

from domain.interfaces import IResponseCache


class NullResponseCache(IResponseCache):
    """Never stores anything; every request goes upstream."""

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        return None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        return None


class MemoryResponseCache(IResponseCache):
    """Dict-backed TTL cache for a single process."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Dict[str, Any]]] = {}

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self._clock() - stored_at > self.ttl_seconds:
            del self._entries[key]
            return None
        return copy.deepcopy(value)

    def set(self, key: str, value: Dict[str, Any]) -> None:
        self._entries[key] = (self._clock(), copy.deepcopy(value))

    def __len__(self) -> int:
        return len(self._entries)
