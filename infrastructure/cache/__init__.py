"""Response cache implementations."""
from .memory_cache import NullResponseCache, MemoryResponseCache
from .sqlite_cache import SqliteResponseCache

__all__ = [
    'NullResponseCache',
    'MemoryResponseCache',
    'SqliteResponseCache',
]
