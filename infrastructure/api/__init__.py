"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .fixture_client import FixtureRiotAPIClient
from .rate_limiter import RateLimiter

__all__ = [
    'RiotAPIClient',
    'FixtureRiotAPIClient',
    'RateLimiter',
]
