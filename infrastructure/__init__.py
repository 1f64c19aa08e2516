"""Infrastructure layer - API clients, repositories and caches."""
from .api import RiotAPIClient, FixtureRiotAPIClient, RateLimiter
from .repositories import AccountRepository, MatchRepository, SummonerRepository
from .cache import NullResponseCache, MemoryResponseCache, SqliteResponseCache

__all__ = [
    'RiotAPIClient',
    'FixtureRiotAPIClient',
    'RateLimiter',
    'AccountRepository',
    'MatchRepository',
    'SummonerRepository',
    'NullResponseCache',
    'MemoryResponseCache',
    'SqliteResponseCache',
]
